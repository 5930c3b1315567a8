"""
Preprocessing Package

Rewrites raw words before segmentation: epenthesis, hiatus prefixes,
exception-table substitutions and the Latin stress fallback.
"""

from .exception_rules import (
    ExceptionRule,
    ExceptionTable,
    load_exception_table,
    parse_exception_rule,
    parse_exception_rules,
    translate_word_boundaries,
    DEFAULT_TABLE_PATH,
)
from .preprocessor import (
    PreprocessedWord,
    preprocess,
    apply_epenthesis,
    apply_hiatus_prefixes,
    apply_latin_stress,
    latin_ending,
)

__all__ = [
    "ExceptionRule",
    "ExceptionTable",
    "load_exception_table",
    "parse_exception_rule",
    "parse_exception_rules",
    "translate_word_boundaries",
    "DEFAULT_TABLE_PATH",
    "PreprocessedWord",
    "preprocess",
    "apply_epenthesis",
    "apply_hiatus_prefixes",
    "apply_latin_stress",
    "latin_ending",
]
