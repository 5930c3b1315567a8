"""
Exception Table

Loads the ordered list of (pattern, replacement) rules that pin syllable
boundaries the generic algorithm gets wrong (hiatus, silent h, prefixes).

File format:
    # comment
    \\bcruel cru_el
    \\bcri([aoe]) cri_\\1

Every rule is validated and compiled at load time, so a broken line fails
with InvalidExceptionRule before any word is syllabified. The packaged table
is loaded once per process and shared read-only.

Usage:
    from silabeador.preprocessing.exception_rules import load_exception_table

    table = load_exception_table()
    table.apply("cruel")  # 'cru_el'
"""

import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple
from logging import getLogger

from silabeador.errors import InvalidExceptionRule

logger = getLogger(__name__)

DEFAULT_TABLE_PATH = Path(__file__).parent.parent / "data" / "exceptions.lst"

# Letter/number boundaries; "_" is a sentinel, not a word character
BOUNDARY_BEFORE = r"(?<![^\W_])"
BOUNDARY_AFTER = r"(?![^\W_])"

_ESCAPE = re.compile(r"\\(.)", re.DOTALL)
_BACKREFERENCE = re.compile(r"\\(\d+)|\\g<(\d+)>")


@dataclass(frozen=True)
class ExceptionRule:
    """One compiled substitution of the exception table."""

    pattern: str
    replacement: str
    line_number: int
    regex: re.Pattern

    def apply(self, word: str) -> str:
        return self.regex.sub(self.replacement, word)


class ExceptionTable:
    """Ordered, immutable collection of exception rules."""

    def __init__(self, rules: Iterable[ExceptionRule], source: str = "<memory>"):
        self.rules: Tuple[ExceptionRule, ...] = tuple(rules)
        self.source = source

    def apply(self, word: str) -> str:
        """
        Apply every rule in table order.

        Args:
            word: Word to rewrite

        Returns:
            Word with all matching substitutions applied
        """
        for rule in self.rules:
            rewritten = rule.apply(word)
            if rewritten != word:
                logger.debug(
                    f"Exception rule {self.source}:{rule.line_number} "
                    f"rewrote '{word}' -> '{rewritten}'"
                )
                word = rewritten
        return word

    def __len__(self) -> int:
        return len(self.rules)

    def __iter__(self) -> Iterator[ExceptionRule]:
        return iter(self.rules)


def translate_word_boundaries(pattern: str) -> str:
    """
    Rewrite \\b anchors as Unicode letter/number boundaries.

    A \\b followed by more pattern becomes "not preceded by a letter or
    number"; a trailing \\b becomes "not followed by a letter or number".
    Other escapes are kept as written.
    """
    def replace(match: re.Match) -> str:
        if match.group(1) != "b":
            return match.group(0)
        if match.end() < len(pattern):
            return BOUNDARY_BEFORE
        return BOUNDARY_AFTER

    return _ESCAPE.sub(replace, pattern)


def _max_backreference(replacement: str) -> int:
    groups = [int(a or b) for a, b in _BACKREFERENCE.findall(replacement)]
    return max(groups, default=0)


def parse_exception_rule(line: str, line_number: int, source: str = "<memory>") -> ExceptionRule:
    """
    Build one rule from a table line.

    Raises:
        InvalidExceptionRule: Wrong field count, pattern that does not
            compile, or replacement referencing a missing group
    """
    fields = line.split()
    if len(fields) != 2:
        raise InvalidExceptionRule(
            f"expected 'pattern replacement', got {len(fields)} field(s)",
            source, line_number, line,
        )

    pattern, replacement = fields
    try:
        regex = re.compile(translate_word_boundaries(pattern))
    except re.error as exc:
        raise InvalidExceptionRule(
            f"invalid pattern: {exc}", source, line_number, line
        ) from exc

    referenced = _max_backreference(replacement)
    if referenced > regex.groups:
        raise InvalidExceptionRule(
            f"replacement references group {referenced} but pattern has {regex.groups}",
            source, line_number, line,
        )
    try:
        regex.sub(replacement, "")
    except re.error as exc:
        raise InvalidExceptionRule(
            f"invalid replacement: {exc}", source, line_number, line
        ) from exc

    return ExceptionRule(
        pattern=pattern,
        replacement=replacement,
        line_number=line_number,
        regex=regex,
    )


def parse_exception_rules(lines: Iterable[str], source: str = "<memory>") -> ExceptionTable:
    """
    Parse table lines, skipping blanks and '#' comments.

    Args:
        lines: Raw lines of the table
        source: Name used in error messages

    Returns:
        ExceptionTable with the rules in file order
    """
    rules: List[ExceptionRule] = []
    for line_number, line in enumerate(lines, 1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        rules.append(parse_exception_rule(stripped, line_number, source))
    return ExceptionTable(rules, source)


@lru_cache(maxsize=None)
def load_exception_table(path: Optional[Path] = None) -> ExceptionTable:
    """
    Load and compile an exception table file (cached per path).

    Args:
        path: Table file; None loads the table shipped with the package

    Returns:
        ExceptionTable shared by every caller with the same path
    """
    table_path = Path(path) if path is not None else DEFAULT_TABLE_PATH

    if not table_path.exists():
        logger.error(f"Exception table not found at {table_path}")
        raise FileNotFoundError(f"Exception table not found at {table_path}")

    with open(table_path, "r", encoding="utf-8") as f:
        table = parse_exception_rules(f, source=str(table_path))

    logger.info(f"Loaded {len(table)} exception rules from {table_path}")
    return table
