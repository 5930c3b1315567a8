"""
silabeador - Spanish syllabification and prosodic stress detection.

    >>> from silabeador import syllabify, stress
    >>> syllabify("Uvulopalatofaringoplastia")
    ['U', 'vu', 'lo', 'pa', 'la', 'to', 'fa', 'rin', 'go', 'plas', 'tia']
    >>> stress("Uvulopalatofaringoplastia")
    -2
"""

from .config import SyllabificationConfig, DEFAULT_CONFIG
from .errors import SilabeadorError, InvalidConfiguration, InvalidExceptionRule
from .syllabification_service import (
    SpanishSyllabificationService,
    Syllabification,
    SyllabificationResult,
    format_stress_display,
    syllabify,
    stress,
    tonica,
)

__all__ = [
    "SyllabificationConfig",
    "DEFAULT_CONFIG",
    "SilabeadorError",
    "InvalidConfiguration",
    "InvalidExceptionRule",
    "SpanishSyllabificationService",
    "Syllabification",
    "SyllabificationResult",
    "format_stress_display",
    "syllabify",
    "stress",
    "tonica",
]

__version__ = "1.0.0"
