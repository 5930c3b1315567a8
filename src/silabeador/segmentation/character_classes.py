"""
Character Classes for Spanish Syllabification

Letter inventories used by the nucleus splitter and the cluster joiner.
The vowel and close-vowel sets depend on the configuration (IPA glides),
so they are built per config and cached.
"""

import re
from dataclasses import dataclass
from functools import lru_cache

from silabeador.config import SyllabificationConfig


# Base vowels: plain, acute, dieresis, grave (membership is checked lowercase)
VOWELS = "aeiouáéíóúäëïöüàèìòù"
CLOSE_VOWELS = "iuIU"
IPA_GLIDES = "jw"

ACCENTED_VOWELS = "áéíóúÁÉÍÓÚ"

DIGRAPHS = ("ll", "ch", "rr")

INDIVISIBLE_ONSETS = (
    "pl", "bl", "fl", "cl", "kl", "gl", "ll",
    "pr", "br", "fr", "cr", "kr", "gr", "rr",
    "dr", "tr", "ch", "dh", "rh", "th",
    "βl", "ɣl",
    "βɾ", "pɾ", "fɾ", "kɾ", "gɾ", "ɣɾ", "dɾ", "ðɾ",
    "tɾ", "bɾ", "tʃ", "gw", "ɣw",
)

INDIVISIBLE_CODAS = (
    "ns", "bs", "nz", "βs", "bz", "βz", "nd", "rt",
    "st", "ff", "ls", "lz", "zz", "ll", "nt", "rs", "ɾs",
    "ch", "nk", "nc", "lk", "sh", "sch", "mp", "rd",
)

# (second-to-last, last) letter classes of a consonant run that split
# right before its final letter
SONORITY_SPLITS = (
    ("bβcθkdðfgɣkmɱɲñpqstvwxχzjw", "dðfkt"),  # obstruent + obstruent
    ("cθtkjw", "gɣ"),                        # velar after front obstruent
    ("mɱl", "lmɱ"),                          # nasal/liquid doubling
    ("kc", "cθ"),                            # sibilant pairing
)

# Previous-syllable endings that absorb a lone glide y (rey, hoy, ley)
Y_GLIDE_HOSTS = "AOEÁÓÉaoeáóé"


@dataclass(frozen=True)
class CharacterClasses:
    """Letter sets and the compiled nucleus template for one configuration."""

    vowels: str
    close_vowels: str
    indivisible_onsets: tuple
    nucleus_pattern: re.Pattern

    def is_vowel(self, letter: str) -> bool:
        return letter.lower() in self.vowels

    def is_consonant_run(self, segment: str) -> bool:
        """True if no letter of the segment is a vowel."""
        return all(not self.is_vowel(letter) for letter in segment)

    def ends_with_indivisible_onset(self, onset: str) -> bool:
        return any(onset.endswith(cluster) for cluster in self.indivisible_onsets)


def starts_with_indivisible_coda(onset: str) -> bool:
    return any(onset.startswith(cluster) for cluster in INDIVISIBLE_CODAS)


def splits_by_sonority(onset: str) -> bool:
    """True if the last two letters of the run form a sonority break."""
    if len(onset) < 2:
        return False
    before, last = onset[-2], onset[-1]
    return any(
        last in lasts and before in befores
        for befores, lasts in SONORITY_SPLITS
    )


def build_nucleus_pattern(close_vowels: str, consonantal_h: bool) -> re.Pattern:
    """
    Compile the diphthong/triphthong template anchored at the word end.

    Alternatives, first match wins:
      a. qu-/gu-/gü- + glide combinations
      b. close vowel + open vowel (+ close vowel): rising diphthongs, triphthongs
      c. open vowel + close vowel: falling diphthongs
    Silent h may sit between the vowels unless h is consonantal.
    """
    h = "" if consonantal_h else "h*"
    close = re.escape(close_vowels)
    return re.compile(
        f"(?:[qg][wuü](?:[eé](?:{h}[{close}])?|i(?:{h}[aeoáéó])?|í)"
        f"|[{close}](?:{h}[aáoóeéi])(?:{h}[{close}])?"
        f"|[aáoóeéií](?:{h}[{close}]))$"
    )


@lru_cache(maxsize=None)
def character_classes(config: SyllabificationConfig) -> CharacterClasses:
    """Build (once per distinct config) the letter classes for a config."""
    vowels = VOWELS
    close_vowels = CLOSE_VOWELS
    if config.ipa:
        vowels += IPA_GLIDES
        close_vowels += IPA_GLIDES

    onsets = INDIVISIBLE_ONSETS
    if config.indivisible_tl:
        onsets = onsets + ("tl",)

    return CharacterClasses(
        vowels=vowels,
        close_vowels=close_vowels,
        indivisible_onsets=onsets,
        nucleus_pattern=build_nucleus_pattern(close_vowels, config.consonantal_h),
    )
