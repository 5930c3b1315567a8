"""
Word Segmenter

Normalizes a preprocessed word and runs the two segmentation stages:
nucleus splitting (right to left) and cluster joining (left to right).
"""

from typing import List
from logging import getLogger

from silabeador.config import SyllabificationConfig
from silabeador.segmentation.character_classes import character_classes
from silabeador.segmentation.cluster_joiner import join
from silabeador.segmentation.nucleus_splitter import split
from silabeador.utils.normalize_word import normalize_word

logger = getLogger(__name__)


def segment_word(word: str, config: SyllabificationConfig) -> List[str]:
    """
    Split a preprocessed word into syllables.

    Args:
        word: Word after preprocessing, may contain sentinel markers
        config: Active configuration

    Returns:
        Syllables whose concatenation is the normalized word without sentinels
    """
    classes = character_classes(config)
    normalized = normalize_word(word)
    segments = split(normalized, classes)
    syllables = join(segments, classes, config)
    logger.debug(f"Segmented '{word}': {segments} -> {syllables}")
    return syllables
