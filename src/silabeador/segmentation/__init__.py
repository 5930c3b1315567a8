"""
Segmentation Package

Splits a normalized Spanish word into syllables.

Usage:
    from silabeador.segmentation import segment_word

    segment_word("ciudad", config)  # ['ciu', 'dad']
"""

from .character_classes import CharacterClasses, character_classes
from .nucleus_splitter import split
from .cluster_joiner import join
from .segmenter import segment_word

__all__ = [
    "CharacterClasses",
    "character_classes",
    "split",
    "join",
    "segment_word",
]
