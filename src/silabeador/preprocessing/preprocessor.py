"""
Word Preprocessor

Rewrites a raw word before segmentation:

1. Epenthesis - prothetic e before word-initial s + consonant ("stop" -> "es_top")
2. Hiatus prefixes - fie-/sua-/rui- split when exception level is 2
3. Exception table - ordered regex substitutions pinning known boundaries
4. Latin fallback - words with a Latin inflectional ending and no written
   accent are segmented here and get a written accent on the syllable that
   Latin quantity rules would stress

Steps 2-4 only run when the exception level is above 0. The sentinel "_"
inserted by these steps pins a syllable boundary and is consumed by the
cluster joiner.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple
from logging import getLogger

from silabeador.config import SyllabificationConfig
from silabeador.preprocessing.exception_rules import ExceptionTable
from silabeador.segmentation import segment_word
from silabeador.utils.normalize_word import SENTINEL

logger = getLogger(__name__)


# s + stop/nasal/fricative onsets, longest first
EPENTHESIS_ONSETS = ("sch", "sc", "st", "sp", "sf", "sb", "sm", "sn")
# After these letters the s closes the prothetic syllable: es-ta, es-tra
EPENTHESIS_OPEN = "aeiouáéíóúrl"

HIATUS_PREFIXES = {"fie": "fi_e", "sua": "su_a", "rui": "ru_i"}

LATIN_ENDINGS = ("um", "em", "at", "ant", "it", "unt", "am")
# Only the first ae/oe of a word becomes a ligature
LATIN_DIPHTHONGS = {"ae": "æ", "oe": "œ"}
# Scan order decides which vowel of a syllable receives the accent
LATIN_ACCENTS = {"a": "á", "e": "é", "i": "í", "o": "ó", "u": "ú"}
WRITTEN_ACCENTS = "áéíóú"


@dataclass(frozen=True)
class PreprocessedWord:
    """
    Result of preprocessing.

    Attributes:
        text: Rewritten word, may contain sentinel markers
        syllables: Finished syllables when the Latin fallback fired, else None
    """

    text: str
    syllables: Optional[Tuple[str, ...]] = None

    @property
    def is_segmented(self) -> bool:
        return self.syllables is not None


def apply_epenthesis(word: str) -> str:
    """
    Add a prothetic e to a word starting with s + consonant.

    Example:
        >>> apply_epenthesis("stop")
        'es_top'
        >>> apply_epenthesis("sfx")
        'esf_x'
    """
    for onset in EPENTHESIS_ONSETS:
        if word.startswith(onset):
            rest = word[len(onset):]
            if rest[:1] and rest[:1] in EPENTHESIS_OPEN:
                return f"es{SENTINEL}{onset[1:]}{rest}"
            return f"e{onset}{SENTINEL}{rest}"
    return word


def apply_hiatus_prefixes(word: str) -> str:
    """Force hiatus in words starting with fie, sua or rui (fi-el, su-a-ve)."""
    replacement = HIATUS_PREFIXES.get(word[:3])
    if replacement is None:
        return word
    return replacement + word[3:]


def _is_heavy(syllable: str) -> bool:
    """Latin quantity: ligature, several distinct vowels, or a closed syllable."""
    if any(ligature in syllable for ligature in LATIN_DIPHTHONGS.values()):
        return True
    if sum(1 for vowel in LATIN_ACCENTS if vowel in syllable) > 1:
        return True
    return not syllable.endswith(tuple(LATIN_ACCENTS))


def _accent_first_vowel(syllable: str) -> str:
    for vowel, accented in LATIN_ACCENTS.items():
        if vowel in syllable:
            return syllable.replace(vowel, accented, 1)
    return syllable


def latin_ending(word: str) -> Optional[str]:
    """Return the Latin inflectional ending of an unaccented word, if any."""
    lowered = word.lower()
    if any(accent in lowered for accent in WRITTEN_ACCENTS):
        return None
    for ending in LATIN_ENDINGS:
        if lowered.endswith(ending):
            return ending
    return None


def apply_latin_stress(word: str, config: SyllabificationConfig) -> Optional[List[str]]:
    """
    Segment a Latin-looking word and write its stress as an accent.

    Args:
        word: Word after exception substitution
        config: Active configuration

    Returns:
        Syllables with a written accent on the stressed one, or None if the
        word has no Latin ending or already carries a written accent
    """
    ending = latin_ending(word)
    if ending is None:
        return None

    lowered = word.lower()
    marked = lowered[:-len(ending)] + SENTINEL + ending
    for digraph, ligature in LATIN_DIPHTHONGS.items():
        marked = marked.replace(digraph, ligature, 1)

    syllables = segment_word(marked, config)

    if len(syllables) > 1:
        if len(syllables) == 2 or _is_heavy(syllables[-2]):
            syllables[-2] = _accent_first_vowel(syllables[-2])
        elif _is_heavy(syllables[-3]):
            syllables[-3] = _accent_first_vowel(syllables[-3])
        else:
            syllables[-2] = syllables[-2].replace("a", LATIN_ACCENTS["a"], 1)

    logger.debug(f"Latin fallback for '{word}' (-{ending}): {syllables}")
    return syllables


def preprocess(
    word: str,
    config: SyllabificationConfig,
    exception_table: Optional[ExceptionTable] = None,
) -> PreprocessedWord:
    """
    Run every preprocessing step enabled by the configuration.

    Args:
        word: Raw word
        config: Active configuration
        exception_table: Rules to apply when exception_level > 0

    Returns:
        PreprocessedWord with the rewritten text, and syllables when the
        Latin fallback already segmented the word
    """
    if config.epenthesis:
        word = apply_epenthesis(word)

    if config.exception_level == 0:
        return PreprocessedWord(text=word)

    if config.hiatus:
        word = apply_hiatus_prefixes(word)

    if exception_table is not None:
        word = exception_table.apply(word)

    latin = apply_latin_stress(word, config)
    if latin is not None:
        return PreprocessedWord(text=word, syllables=tuple(latin))

    return PreprocessedWord(text=word)
