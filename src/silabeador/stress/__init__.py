"""
Stress Package

Locates the prosodically stressed syllable of a syllabified word.
"""

from .stress_locator import stressed_syllable, has_written_accent

__all__ = ["stressed_syllable", "has_written_accent"]
