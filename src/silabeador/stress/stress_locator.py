"""
Stress Locator

Finds the stressed syllable of a syllabified word from its spelling:
a written accent wins; otherwise Spanish default stress applies
(words ending in a vowel, n or s are paroxytone, the rest oxytone).

The index is negative, counted from the end: -1 is the last syllable.
"""

from typing import List

from silabeador.segmentation.character_classes import ACCENTED_VOWELS

PLAIN_VOWELS = "aeiouAEIOU"


def has_written_accent(syllable: str) -> bool:
    return any(letter in ACCENTED_VOWELS for letter in syllable)


def stressed_syllable(syllables: List[str]) -> int:
    """
    Locate the stressed syllable.

    Args:
        syllables: Syllables of one word

    Returns:
        Negative index in [-len(syllables), -1]; -1 for zero or one syllable

    Example:
        >>> stressed_syllable(["can", "ción"])
        -1
        >>> stressed_syllable(["ca", "sa"])
        -2
    """
    if len(syllables) <= 1:
        return -1

    for position, syllable in enumerate(syllables):
        if has_written_accent(syllable):
            return position - len(syllables)

    last = syllables[-1]
    final = last[-1:]
    before_final = last[-2:-1]

    # y after a vowel is a glide: rey, convoy
    if final in ("y", "Y") and before_final and before_final in PLAIN_VOWELS:
        return -1
    if final and final in PLAIN_VOWELS + "y":
        return -2
    if final and final in "nsNS" and before_final and before_final in PLAIN_VOWELS:
        return -2
    return -1
