"""Exceptions raised while parsing and validating identifiers."""

from __future__ import annotations


class SymbologyError(ValueError):
    """Base class for every parse or validation failure."""


class NoMatchError(SymbologyError):
    """Raised when input does not conform to the expected grammar."""

    def __init__(self, text: str, grammar: str) -> None:
        super().__init__(f"{text!r} is not a valid {grammar} string")
        self.text = text
        self.grammar = grammar


class ChecksumMismatchError(SymbologyError):
    """Raised when an ISIN check digit disagrees with the computed one."""

    def __init__(self, code: str, expected: int, actual: int) -> None:
        super().__init__(
            f"Checksum could not be verified for {code}: expected {expected}, got {actual}"
        )
        self.code = code
        self.expected = expected
        self.actual = actual


class InvalidMonthError(SymbologyError):
    """Raised when a 3-letter month abbreviation is not recognized."""

    def __init__(self, month: str) -> None:
        super().__init__(f"Unknown month abbreviation: {month!r}")
        self.month = month


class YearOutOfRangeError(SymbologyError):
    """Raised when an expiration year is outside 2000..2099."""


class MonthOutOfRangeError(SymbologyError):
    """Raised when a month is not between 1 and 12."""


class DayOutOfRangeError(SymbologyError):
    """Raised when a day does not exist in the given month and year."""


class StrikeOutOfRangeError(SymbologyError):
    """Raised when a strike price cannot be expressed in 8 OSI digits."""


class EngineError(SymbologyError):
    """Raised when the regular-expression engine rejects a pattern."""

    def __init__(self, message: str) -> None:
        super().__init__(f"RegexError: {message}")
        self.message = message
