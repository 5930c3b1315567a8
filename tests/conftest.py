"""
Shared fixtures for the syllabification test suite.
"""

import os
import sys

import pytest

from silabeador.config import SyllabificationConfig, DEFAULT_CONFIG
from silabeador.segmentation import character_classes
from silabeador.syllabification_service import SpanishSyllabificationService

# Accented syllables in assertion output
os.environ['PYTHONIOENCODING'] = 'utf-8'
if sys.platform == 'win32' and hasattr(sys.stdout, 'reconfigure'):
    sys.stdout.reconfigure(encoding='utf-8', errors='replace')
    sys.stderr.reconfigure(encoding='utf-8', errors='replace')


@pytest.fixture
def config():
    """Default configuration (exception level 1, all flags off)."""
    return DEFAULT_CONFIG


@pytest.fixture
def classes(config):
    """Character classes for the default configuration."""
    return character_classes(config)


@pytest.fixture
def service():
    """Service with the packaged exception table."""
    with SpanishSyllabificationService() as svc:
        yield svc


@pytest.fixture
def make_service():
    """Factory for services with custom options."""
    def _make(**options):
        return SpanishSyllabificationService(SyllabificationConfig(**options))
    return _make
