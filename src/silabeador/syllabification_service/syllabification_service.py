#!/usr/bin/env python3
"""
Spanish Syllabification Service

Splits Spanish words into syllables and locates the stressed syllable.

Pipeline for one word:
1. Preprocessing - epenthesis, hiatus prefixes, exception table, Latin fallback
2. Segmentation - nucleus splitting (right to left) + cluster joining
3. Stress location - written accent or default paroxytone/oxytone rules

Usage:
    service = SpanishSyllabificationService()
    result = service.analyze("canción")
    print(result.syllables, result.stress)   # ['can', 'ción'] -1

Or through the module-level helpers:
    syllabify("Uvulopalatofaringoplastia")
    # ['U', 'vu', 'lo', 'pa', 'la', 'to', 'fa', 'rin', 'go', 'plas', 'tia']
    stress("casa")  # -2
"""

from functools import lru_cache
from pathlib import Path
from typing import Iterable, List, Optional
from logging import getLogger

from tqdm import tqdm

from silabeador.config import SyllabificationConfig, DEFAULT_CONFIG
from silabeador.preprocessing import ExceptionTable, load_exception_table, preprocess
from silabeador.segmentation import segment_word
from silabeador.stress import stressed_syllable
from silabeador.syllabification_service.types import SyllabificationResult

logger = getLogger(__name__)


class SpanishSyllabificationService:
    """
    Reusable syllabifier bound to one configuration.

    The exception table is loaded and validated when the service is
    created (only if the exception level needs it), so a broken table
    fails before the first word is processed.

    Usage:
        with SpanishSyllabificationService(SyllabificationConfig(ipa=True)) as service:
            results = service.analyze_batch(["palabra", "ciudad"])
    """

    def __init__(
        self,
        config: Optional[SyllabificationConfig] = None,
        exception_table: Optional[ExceptionTable] = None,
        exception_table_path: Optional[Path] = None,
    ):
        """
        Initialize the service.

        Args:
            config: Options; defaults to SyllabificationConfig()
            exception_table: Pre-built rules (takes precedence over the path)
            exception_table_path: Rules file; None uses the packaged table
        """
        self.config = config if config is not None else DEFAULT_CONFIG

        if self.config.exception_level == 0:
            self.exception_table = None
        elif exception_table is not None:
            self.exception_table = exception_table
        else:
            self.exception_table = load_exception_table(exception_table_path)

        logger.info(
            f"Syllabification service initialized "
            f"(exception_level={self.config.exception_level}, "
            f"rules={len(self.exception_table) if self.exception_table else 0})"
        )

    def analyze(self, word: str) -> SyllabificationResult:
        """
        Syllabify a word and locate its stress.

        Args:
            word: A single orthographic word

        Returns:
            SyllabificationResult with syllables and stress index
        """
        prepared = preprocess(word, self.config, self.exception_table)

        if prepared.is_segmented:
            syllables = list(prepared.syllables)
        else:
            syllables = segment_word(prepared.text, self.config)

        return SyllabificationResult(
            word=word,
            syllables=syllables,
            stress=stressed_syllable(syllables),
        )

    def syllabify(self, word: str) -> List[str]:
        """Return the syllables of a word ([] for input without letters)."""
        return self.analyze(word).syllables

    def stress(self, word: str) -> int:
        """Return the negative index of the stressed syllable."""
        return self.analyze(word).stress

    def analyze_batch(
        self,
        words: Iterable[str],
        show_progress: bool = False,
    ) -> List[SyllabificationResult]:
        """
        Analyze many words.

        Args:
            words: Words to process, one per item
            show_progress: Display a tqdm progress bar

        Returns:
            Results in input order
        """
        words = list(words)
        results = [
            self.analyze(word)
            for word in tqdm(words, desc="Syllabifying", unit="word", disable=not show_progress)
        ]
        logger.info(f"Batch syllabified {len(results)} words")
        return results

    def get_config_info(self) -> dict:
        """
        Describe the active configuration.

        Returns:
            Dictionary with the config values and exception table details
        """
        return {
            **self.config.model_dump(),
            "exception_rules": len(self.exception_table) if self.exception_table else 0,
            "exception_source": self.exception_table.source if self.exception_table else None,
        }

    def close(self):
        """Release resources (the shared exception table stays cached)."""
        logger.debug("Syllabification service closed")

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()


@lru_cache(maxsize=32)
def get_service(config: SyllabificationConfig = DEFAULT_CONFIG) -> SpanishSyllabificationService:
    """Shared service for a configuration (the packaged exception table)."""
    return SpanishSyllabificationService(config)


class Syllabification:
    """
    Syllables and stress of one word, computed once.

    Options may be given one by one or as a ready config; an explicit
    config takes precedence over the individual options.

    Attributes:
        word: Input word
        syllables: List of syllables
        stress: Negative index of the stressed syllable

    Example:
        >>> x = Syllabification("Uvulopalatofaringoplastia")
        >>> x.stress
        -2
    """

    def __init__(
        self,
        word: str,
        exception_level: int = 1,
        ipa: bool = False,
        consonantal_h: bool = False,
        epenthesis: bool = False,
        indivisible_tl: bool = False,
        config: Optional[SyllabificationConfig] = None,
    ):
        if config is None:
            config = SyllabificationConfig(
                exception_level=exception_level,
                ipa=ipa,
                consonantal_h=consonantal_h,
                epenthesis=epenthesis,
                indivisible_tl=indivisible_tl,
            )
        self.word = word
        self.config = config
        self.result = get_service(config).analyze(word)
        self.syllables = self.result.syllables
        self.stress = self.result.stress

    def __repr__(self) -> str:
        return f"Syllabification({self.word!r}, syllables={self.syllables!r}, stress={self.stress})"


def syllabify(
    word: str,
    exception_level: int = 1,
    ipa: bool = False,
    consonantal_h: bool = False,
    epenthesis: bool = False,
    indivisible_tl: bool = False,
) -> List[str]:
    """
    Split a word into syllables.

    Example:
        >>> syllabify("cruel", exception_level=0)
        ['cruel']
        >>> syllabify("cruel")
        ['cru', 'el']
    """
    return Syllabification(
        word, exception_level, ipa, consonantal_h, epenthesis, indivisible_tl
    ).syllables


def stress(
    word: str,
    exception_level: int = 1,
    ipa: bool = False,
    consonantal_h: bool = False,
    epenthesis: bool = False,
    indivisible_tl: bool = False,
) -> int:
    """
    Negative index of the stressed syllable.

    Example:
        >>> stress("reloj")
        -1
        >>> stress("casa")
        -2
    """
    return Syllabification(
        word, exception_level, ipa, consonantal_h, epenthesis, indivisible_tl
    ).stress


# Traditional name of the stressed syllable ("sílaba tónica")
tonica = stress
