"""
Utils Package

String helpers shared by the preprocessing and segmentation stages.
"""

from .normalize_word import (
    normalize_word,
    strip_non_letters,
    fold_foreign_graphemes,
    FOREIGN_GRAPHEMES,
    SENTINEL,
)

__all__ = [
    'normalize_word',
    'strip_non_letters',
    'fold_foreign_graphemes',
    'FOREIGN_GRAPHEMES',
    'SENTINEL',
]
