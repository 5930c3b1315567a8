"""
Tests for nucleus splitting, cluster joining and character classes.
"""

import pytest

from silabeador.config import SyllabificationConfig
from silabeador.segmentation import character_classes, join, segment_word, split
from silabeador.segmentation.character_classes import (
    splits_by_sonority,
    starts_with_indivisible_coda,
)


class TestCharacterClasses:

    def test_vowels_case_insensitive(self, classes):
        assert classes.is_vowel("a")
        assert classes.is_vowel("Á")
        assert classes.is_vowel("ü")
        assert not classes.is_vowel("y")
        assert not classes.is_vowel("j")

    def test_ipa_glides_are_vowels(self):
        ipa = character_classes(SyllabificationConfig(ipa=True))
        assert ipa.is_vowel("j")
        assert ipa.is_vowel("w")
        assert "j" in ipa.close_vowels

    def test_tl_onset_only_when_enabled(self, classes):
        assert not classes.ends_with_indivisible_onset("tl")
        tl = character_classes(SyllabificationConfig(indivisible_tl=True))
        assert tl.ends_with_indivisible_onset("tl")

    def test_cached_per_config(self):
        first = character_classes(SyllabificationConfig(ipa=True))
        second = character_classes(SyllabificationConfig(ipa=True))
        assert first is second

    def test_consonant_run(self, classes):
        assert classes.is_consonant_run("nst")
        assert not classes.is_consonant_run("na")

    @pytest.mark.parametrize("onset, expected", [
        ("kt", True),
        ("pt", True),
        ("mn", False),
        ("pr", False),
        ("t", False),
    ])
    def test_sonority(self, onset, expected):
        assert splits_by_sonority(onset) is expected

    def test_indivisible_coda(self):
        assert starts_with_indivisible_coda("nst")
        assert not starts_with_indivisible_coda("tr")


class TestNucleusSplitter:

    def test_diphthong(self, classes):
        assert split("ciudad", classes) == ["c", "iu", "d", "a", "d"]

    def test_digraphs(self, classes):
        assert split("calle", classes) == ["c", "a", "ll", "e"]
        assert split("perro", classes) == ["p", "e", "rr", "o"]

    def test_qu_nucleus_drops_trigger(self, classes):
        assert split("queso", classes) == ["q", "ue", "s", "o"]

    def test_ipa_glide_nucleus(self, classes):
        ipa = character_classes(SyllabificationConfig(ipa=True))
        assert split("awla", ipa) == ["aw", "l", "a"]
        assert split("awla", classes) == ["a", "w", "l", "a"]

    @pytest.mark.parametrize("word", ["Uvulopalatofaringoplastia", "guerra", "pingüino", "ahumado"])
    def test_segments_cover_word(self, classes, word):
        assert "".join(split(word, classes)) == word

    def test_empty(self, classes):
        assert split("", classes) == []


class TestClusterJoiner:

    def test_single_consonant_goes_to_onset(self, classes, config):
        assert join(["c", "a", "s", "a"], classes, config) == ["ca", "sa"]

    def test_sentinel_forces_break(self, classes, config):
        assert join(["c", "r", "u", "_", "e", "l"], classes, config) == ["cru", "el"]

    def test_trailing_consonants(self, classes, config):
        assert join(["r", "e", "l", "o", "j"], classes, config) == ["re", "loj"]


class TestSegmentWord:

    @pytest.mark.parametrize("word, expected", [
        ("hola", ["ho", "la"]),
        ("instante", ["ins", "tan", "te"]),
        ("arkto", ["ark", "to"]),
        ("perspectiva", ["pers", "pec", "ti", "va"]),
        ("rey", ["rey"]),
        ("reyes", ["re", "yes"]),
        ("oigo", ["oi", "go"]),
        ("buey", ["buey"]),
        ("ferrocarril", ["fe", "rro", "ca", "rril"]),
    ])
    def test_words(self, config, word, expected):
        syllables = segment_word(word, config)
        print(f"\n  {word} -> {'-'.join(syllables)}")
        assert syllables == expected

    def test_punctuation_removed(self, config):
        assert segment_word("¡hola!", config) == ["ho", "la"]

    def test_no_letters(self, config):
        assert segment_word("¿?", config) == []

    def test_consonantal_h(self):
        config = SyllabificationConfig(consonantal_h=True)
        assert segment_word("exhibir", config) == ["e", "xhi", "bir"]
