"""
Exception types raised by the syllabification package.

Only configuration and exception-table problems are errors. Syllabifying
an arbitrary string with a valid configuration never raises.
"""


class SilabeadorError(Exception):
    """Base class for all package errors."""


class InvalidConfiguration(SilabeadorError, ValueError):
    """Configuration value out of range or of the wrong type."""


class InvalidExceptionRule(SilabeadorError, ValueError):
    """
    A line of the exception table could not be turned into a rule.

    Attributes:
        source: Name of the table (file path or "<memory>")
        line_number: 1-based line number of the offending line
        line: Raw text of the offending line
    """

    def __init__(self, message: str, source: str, line_number: int, line: str):
        self.source = source
        self.line_number = line_number
        self.line = line
        super().__init__(f"{source}:{line_number}: {message} ({line.strip()!r})")
