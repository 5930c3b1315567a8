#!/usr/bin/env python3
"""
Golden Data

Builds and verifies regression corpora: every word of every sentence of a
text is syllabified and stored with its stress index, so later versions of
the algorithm can be checked against the recorded output.

JSON layout:
    {
        "metadata": {
            "corpus_file": "poemas.txt",
            "parameters": {"exception_level": 1, "ipa": false, ...},
            "total_sentences": 2,
            "total_words": 9
        },
        "data": [
            {
                "line_number": 1,
                "sentence": "Hola, ciudad",
                "words": [
                    {"word": "Hola", "syllables": ["Ho", "la"],
                     "stress_index": -2, "syllabified": "Ho-la"},
                    ...
                ]
            }
        ]
    }

Each word is processed on its own; sentence context never changes the result.
"""

import re
from pathlib import Path
from typing import Iterable, List, Optional
from logging import getLogger

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from tqdm import tqdm

from silabeador.config import SyllabificationConfig, DEFAULT_CONFIG, invalid_configuration
from silabeador.syllabification_service import SpanishSyllabificationService

logger = getLogger(__name__)

# Runs of letters; digits, "_" and punctuation separate words
WORD_PATTERN = re.compile(r"[^\W\d_]+")


class WordEntry(BaseModel):
    """Recorded syllabification of one word."""

    word: str
    syllables: List[str] = Field(default_factory=list)
    stress_index: int = Field(default=-1, le=-1)
    syllabified: str = ""

    model_config = ConfigDict(extra="forbid")


class SentenceEntry(BaseModel):
    """One corpus line and its words."""

    line_number: int = Field(..., ge=1)
    sentence: str
    words: List[WordEntry] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


class GoldenMetadata(BaseModel):
    corpus_file: str = ""
    parameters: SyllabificationConfig = Field(default_factory=SyllabificationConfig)
    total_sentences: int = Field(default=0, ge=0)
    total_words: int = Field(default=0, ge=0)

    model_config = ConfigDict(extra="forbid")


class GoldenData(BaseModel):
    """A complete regression corpus."""

    metadata: GoldenMetadata = Field(default_factory=GoldenMetadata)
    data: List[SentenceEntry] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


class GoldenMismatch(BaseModel):
    """A recorded word whose current output differs from the recording."""

    line_number: int
    word: str
    expected_syllables: List[str]
    actual_syllables: List[str]
    expected_stress: int
    actual_stress: int


def split_words(sentence: str) -> List[str]:
    """
    Extract the words of a sentence.

    Example:
        >>> split_words("¡Hola, ciudad!")
        ['Hola', 'ciudad']
    """
    return WORD_PATTERN.findall(sentence)


def build_golden_data(
    sentences: Iterable[str],
    config: Optional[SyllabificationConfig] = None,
    corpus_file: str = "",
    show_progress: bool = False,
) -> GoldenData:
    """
    Record syllables and stress for every word of a corpus.

    Args:
        sentences: Corpus lines; blank lines are skipped but still counted
            for line numbers
        config: Options used for the recording
        corpus_file: Name stored in the metadata
        show_progress: Display a tqdm progress bar

    Returns:
        GoldenData ready to be saved
    """
    config = config if config is not None else DEFAULT_CONFIG
    service = SpanishSyllabificationService(config)

    entries = []
    total_words = 0
    for line_number, sentence in enumerate(
        tqdm(list(sentences), desc="Recording", unit="line", disable=not show_progress), 1
    ):
        sentence = sentence.strip()
        if not sentence:
            continue

        words = []
        for result in map(service.analyze, split_words(sentence)):
            words.append(WordEntry(
                word=result.word,
                syllables=result.syllables,
                stress_index=result.stress,
                syllabified=result.syllabified,
            ))
        total_words += len(words)
        entries.append(SentenceEntry(line_number=line_number, sentence=sentence, words=words))

    golden = GoldenData(
        metadata=GoldenMetadata(
            corpus_file=corpus_file,
            parameters=config,
            total_sentences=len(entries),
            total_words=total_words,
        ),
        data=entries,
    )
    logger.info(f"Recorded {total_words} words from {len(entries)} sentences")
    return golden


def verify_golden_data(
    golden: GoldenData,
    service: Optional[SpanishSyllabificationService] = None,
) -> List[GoldenMismatch]:
    """
    Re-run a recording and report every word whose output changed.

    Args:
        golden: Recorded corpus
        service: Service to check; defaults to one built from the recorded
            parameters

    Returns:
        Mismatches in corpus order (empty when everything matches)
    """
    if service is None:
        service = SpanishSyllabificationService(golden.metadata.parameters)

    mismatches = []
    for sentence in golden.data:
        for entry in sentence.words:
            result = service.analyze(entry.word)
            if result.syllables != entry.syllables or result.stress != entry.stress_index:
                mismatches.append(GoldenMismatch(
                    line_number=sentence.line_number,
                    word=entry.word,
                    expected_syllables=entry.syllables,
                    actual_syllables=result.syllables,
                    expected_stress=entry.stress_index,
                    actual_stress=result.stress,
                ))

    if mismatches:
        logger.warning(f"{len(mismatches)} golden data mismatches")
    return mismatches


def read_corpus(path: Path) -> List[str]:
    """Read a UTF-8 corpus file as a list of lines."""
    with open(path, "r", encoding="utf-8") as f:
        return f.read().splitlines()


def save_golden_data(golden: GoldenData, path: Path) -> None:
    """Write a recording as indented UTF-8 JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(golden.model_dump_json(indent=2))
    logger.info(f"Saved golden data to {path}")


def load_golden_data(path: Path) -> GoldenData:
    """
    Load and validate a recording.

    Raises:
        InvalidConfiguration: The recorded parameters are not a valid config
        ValidationError: Any other part of the file is malformed
    """
    with open(path, "r", encoding="utf-8") as f:
        content = f.read()

    try:
        return GoldenData.model_validate_json(content)
    except ValidationError as exc:
        if any(error["loc"][:2] == ("metadata", "parameters") for error in exc.errors()):
            logger.error(f"Invalid parameters in golden data {path}")
            raise invalid_configuration(exc) from exc
        raise
