"""
Nucleus Splitter

Scans a normalized word from right to left and cuts it into raw segments:
vowel nuclei (single vowels, diphthongs, triphthongs), the digraphs
ll/ch/rr, and single letters. The cluster joiner regroups these segments
into syllables.

Example:
    >>> split("ciudad", character_classes(DEFAULT_CONFIG))
    ['c', 'iu', 'd', 'a', 'd']
"""

import re
from typing import List

from silabeador.segmentation.character_classes import CharacterClasses, DIGRAPHS

# Semi-consonant triggers stay with the preceding onset
_GLIDE_TRIGGERS = re.compile(r"[gq]")


def split(word: str, classes: CharacterClasses) -> List[str]:
    """
    Split a normalized word into raw segments.

    Args:
        word: Normalized word (letters, numbers, sentinels)
        classes: Character classes for the active configuration

    Returns:
        Segments in left-to-right order; their concatenation is the word
    """
    segments = []
    end = len(word)

    while end > 0:
        # endpos makes "$" anchor at the cursor
        match = classes.nucleus_pattern.search(word, 0, end)
        if match:
            segment = _GLIDE_TRIGGERS.sub("", match.group(0))
        elif word.endswith(DIGRAPHS, 0, end):
            segment = word[end - 2:end]
        else:
            segment = word[end - 1]

        segments.append(segment)
        end -= len(segment)

    segments.reverse()
    return segments
