"""
Tests for exception table parsing, validation and loading.
"""

import pytest

from silabeador import SpanishSyllabificationService
from silabeador.errors import InvalidExceptionRule, SilabeadorError
from silabeador.preprocessing import (
    DEFAULT_TABLE_PATH,
    load_exception_table,
    parse_exception_rule,
    parse_exception_rules,
    translate_word_boundaries,
)
from silabeador.preprocessing.exception_rules import BOUNDARY_AFTER, BOUNDARY_BEFORE


class TestWordBoundaries:

    def test_leading_and_trailing(self):
        assert translate_word_boundaries(r"\bsol\b") == BOUNDARY_BEFORE + "sol" + BOUNDARY_AFTER

    def test_escaped_backslash_kept(self):
        assert translate_word_boundaries(r"a\\b") == r"a\\b"

    def test_other_escapes_kept(self):
        assert translate_word_boundaries(r"\bco\d") == BOUNDARY_BEFORE + r"co\d"

    @pytest.mark.parametrize("word, expected", [
        ("piano", "pi_ano"),
        ("zampian", "zampian"),
        ("ápian", "ápian"),
        ("_pian", "_pi_an"),
    ])
    def test_boundary_ignores_sentinel(self, word, expected):
        rule = parse_exception_rule(r"\bpian pi_an", 1)
        assert rule.apply(word) == expected

    @pytest.mark.parametrize("word", ["solar", "solé", "girasol"])
    def test_trailing_boundary(self, word):
        rule = parse_exception_rule(r"\bsol\b so_l", 1)
        assert rule.apply(word) == word


class TestParsing:

    def test_backreference(self):
        rule = parse_exception_rule(r"\bcri([aoe]) cri_\1", 7)
        assert rule.line_number == 7
        assert rule.apply("criado") == "cri_ado"

    def test_comments_and_blanks_skipped(self):
        table = parse_exception_rules(["# header", "", r"\bcasa cas_a", "   "])
        assert len(table) == 1
        assert [rule.line_number for rule in table] == [3]

    def test_rules_applied_in_order(self):
        table = parse_exception_rules([r"\bab a_b", r"_b _B"])
        assert table.apply("abc") == "a_Bc"

    @pytest.mark.parametrize("line, fragment", [
        ("onlypattern", "field"),
        (r"a b c", "field"),
        (r"a( b", "invalid pattern"),
        (r"\bcri([aoe]) cri_\2", "group 2"),
    ])
    def test_invalid_rule(self, line, fragment):
        with pytest.raises(InvalidExceptionRule) as exc_info:
            parse_exception_rules(["# ok", line], source="custom.lst")

        error = exc_info.value
        print(f"\n  {error}")
        assert error.line_number == 2
        assert error.source == "custom.lst"
        assert fragment in str(error)
        assert isinstance(error, SilabeadorError)
        assert isinstance(error, ValueError)


class TestLoading:

    def test_packaged_table(self):
        table = load_exception_table()
        assert len(table) > 0
        assert table.source == str(DEFAULT_TABLE_PATH)
        assert table.apply("cruel") == "cru_el"
        assert table.apply("prohibir") == "pro_hibir"

    def test_cached(self):
        assert load_exception_table() is load_exception_table()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_exception_table(tmp_path / "missing.lst")

    def test_bad_file_fails_at_load(self, tmp_path):
        path = tmp_path / "bad.lst"
        path.write_text("# rules\n\\bcasa cas_a\n\\bcri( cri_\n", encoding="utf-8")

        with pytest.raises(InvalidExceptionRule) as exc_info:
            load_exception_table(path)
        assert exc_info.value.line_number == 3

    def test_service_fails_at_construction(self, tmp_path):
        path = tmp_path / "broken.lst"
        path.write_text("broken\n", encoding="utf-8")

        with pytest.raises(InvalidExceptionRule):
            SpanishSyllabificationService(exception_table_path=path)


class TestCustomTable:

    def test_table_object(self):
        table = parse_exception_rules([r"\bcasa cas_a"])
        service = SpanishSyllabificationService(exception_table=table)
        assert service.syllabify("casa") == ["cas", "a"]
        assert service.syllabify("cruel") == ["cruel"]

    def test_table_file(self, tmp_path):
        path = tmp_path / "custom.lst"
        path.write_text("\\bcasa cas_a\n", encoding="utf-8")
        service = SpanishSyllabificationService(exception_table_path=path)
        assert service.syllabify("casa") == ["cas", "a"]
        assert service.get_config_info()["exception_source"] == str(path)

    def test_invisible_rule(self):
        table = parse_exception_rules([r"\bsol so_l"])
        service = SpanishSyllabificationService(exception_table=table)
        assert service.syllabify("sol") == ["sol"]
