"""International Securities Identification Numbers."""

from __future__ import annotations

import logging
import string
from dataclasses import dataclass

from symbology.constants import ISIN_PATTERN
from symbology.errors import ChecksumMismatchError, NoMatchError, SymbologyError
from symbology.patterns import match_fields

logger = logging.getLogger(__name__)


def _expand_digits(text: str) -> list[int]:
    digits: list[int] = []
    for char in text:
        if char in string.digits:
            digits.append(int(char))
        elif char in string.ascii_uppercase:
            # A=10 .. Z=35, always two digits
            value = ord(char) - ord("A") + 10
            digits.extend(divmod(value, 10))
        else:
            raise NoMatchError(text, "ISIN")
    return digits


def compute_check_digit(prefix: str) -> int:
    """Return the Luhn check digit for the first 11 characters of an ISIN.

    Letters expand to two decimal digits, then counting from the rightmost
    digit as position 1, odd positions are doubled (summing the digits of
    the product) and even positions are added as-is.
    """
    digits = _expand_digits(prefix)
    total = 0
    for position, digit in enumerate(reversed(digits), start=1):
        if position % 2 == 1:
            doubled = digit * 2
            total += doubled // 10 + doubled % 10
        else:
            total += digit
    check_digit = (10 - total % 10) % 10
    logger.debug(
        "ISIN prefix %s expanded to %s, sum=%s, check digit=%s",
        prefix,
        "".join(str(d) for d in digits),
        total,
        check_digit,
    )
    return check_digit


@dataclass(frozen=True)
class ISIN:
    code: str

    def __post_init__(self) -> None:
        fields = match_fields(ISIN_PATTERN, self.code, "ISIN")
        expected = compute_check_digit(fields["country"] + fields["identifier"])
        actual = int(fields["checksum"])
        if expected != actual:
            raise ChecksumMismatchError(self.code, expected, actual)

    @classmethod
    def parse(cls, text: str) -> "ISIN":
        return cls(code=text)

    @classmethod
    def from_parts(cls, country_code: str, identifier: str) -> "ISIN":
        prefix = f"{country_code}{identifier}"
        match_fields(ISIN_PATTERN, f"{prefix}0", "ISIN")
        return cls(code=f"{prefix}{compute_check_digit(prefix)}")

    @property
    def country_code(self) -> str:
        return self.code[0:2]

    @property
    def identifier(self) -> str:
        return self.code[2:11]

    @property
    def checksum_digit(self) -> int:
        return int(self.code[11])

    def __str__(self) -> str:
        return self.code


def parse_isin(text: str) -> ISIN:
    return ISIN.parse(text)


def is_valid_isin(text: str) -> bool:
    try:
        ISIN.parse(text)
    except SymbologyError:
        return False
    return True
