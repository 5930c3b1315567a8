"""
Syllabification Service Package

Spanish syllabification and stress detection.

Usage:
    from silabeador.syllabification_service import SpanishSyllabificationService

    service = SpanishSyllabificationService()
    result = service.analyze("canción")

    print(result.syllables)   # ['can', 'ción']
    print(result.stress)      # -1
"""

from .types import SyllabificationResult, format_stress_display, STRESS_MARK
from .syllabification_service import (
    SpanishSyllabificationService,
    Syllabification,
    get_service,
    syllabify,
    stress,
    tonica,
)

__all__ = [
    "SpanishSyllabificationService",
    "Syllabification",
    "SyllabificationResult",
    "format_stress_display",
    "get_service",
    "syllabify",
    "stress",
    "tonica",
    "STRESS_MARK",
]
