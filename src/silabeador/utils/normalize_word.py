"""
Word Normalization Utility

Prepares a raw orthographic word for segmentation:

- drops every character that is not a letter, a number or the sentinel
  marker ``_`` (punctuation, spaces, combining marks, apostrophes)
- folds graphemes that Spanish spelling does not use (grave and tilde
  vowels, typographic ligatures) into their Spanish equivalents

Example:
    >>> normalize_word("¿Qué?")
    'Qué'
    >>> normalize_word("ﬁrmò")
    'firmo'
"""

import re


# Forced syllable break inserted by epenthesis and exception rules
SENTINEL = '_'

FOREIGN_GRAPHEMES = {
    'à': 'a', 'è': 'e', 'ì': 'i', 'ò': 'o', 'ù': 'u',
    'ã': 'a', 'ẽ': 'e', 'ĩ': 'i', 'õ': 'o', 'ũ': 'u',
    'ﬁ': 'fi', 'ﬂ': 'fl',
}

# \W keeps letters, numbers and "_" in str patterns
_NON_WORD = re.compile(r'\W')


def strip_non_letters(word: str) -> str:
    """Remove everything except letters, numbers and the sentinel."""
    if not word:
        return word
    return _NON_WORD.sub('', word)


def fold_foreign_graphemes(word: str) -> str:
    """
    Replace graphemes foreign to Spanish spelling.

    Args:
        word: Word that may contain grave/tilde vowels or ligatures

    Returns:
        Word with each such grapheme replaced by its Spanish form
    """
    return ''.join(FOREIGN_GRAPHEMES.get(letter, letter) for letter in word)


def normalize_word(word: str) -> str:
    """
    Normalize a word before nucleus splitting.

    Args:
        word: Raw word, possibly carrying sentinel markers

    Returns:
        Word reduced to letters, numbers and sentinels with foreign
        graphemes folded
    """
    return fold_foreign_graphemes(strip_non_letters(word))
