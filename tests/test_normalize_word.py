"""
Tests for word normalization.
"""

import pytest

from silabeador import utils
from silabeador.utils import (
    SENTINEL,
    fold_foreign_graphemes,
    normalize_word,
    strip_non_letters,
)


class TestNormalizeWord:

    @pytest.mark.parametrize("word, expected", [
        ("¿Qué?", "Qué"),
        ("¡Hola!", "Hola"),
        ("l'amor", "lamor"),
        ("cru_el", "cru_el"),
        ("ﬁrmò", "firmo"),
        ("pingüino", "pingüino"),
        ("", ""),
        ("¡!?", ""),
    ])
    def test_normalize(self, word, expected):
        assert normalize_word(word) == expected

    def test_strip_non_letters_keeps_digits(self):
        assert strip_non_letters("a-1 b") == "a1b"

    def test_sentinel_survives(self):
        assert SENTINEL in strip_non_letters("es_top")

    def test_fold(self):
        assert fold_foreign_graphemes("càfè") == "cafe"
        assert fold_foreign_graphemes("canción") == "canción"
        assert fold_foreign_graphemes("ﬂor") == "flor"


class TestPublicHelpers:

    def test_exported_names(self):
        assert sorted(utils.__all__) == sorted([
            "normalize_word",
            "strip_non_letters",
            "fold_foreign_graphemes",
            "FOREIGN_GRAPHEMES",
            "SENTINEL",
        ])
