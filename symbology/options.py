"""Option contract symbols: OSI, IB activity statements and Schwab notation."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date
from enum import Enum

from symbology.calendar_rules import is_valid_calendar_date
from symbology.constants import (
    ACTIVITY_STATEMENT_PATTERN,
    MAX_OSI_PRICE,
    MONTH_ABBREVIATIONS,
    OSI_CENTURY,
    OSI_PATTERN,
    OSI_PRICE_DIGITS,
    OSI_PRICE_SCALE,
    OSI_SYMBOL_WIDTH,
)
from symbology.errors import (
    DayOutOfRangeError,
    InvalidMonthError,
    MonthOutOfRangeError,
    NoMatchError,
    StrikeOutOfRangeError,
    YearOutOfRangeError,
)
from symbology.patterns import compile_pattern, match_fields

logger = logging.getLogger(__name__)

SYMBOL_PATTERN = r"\w{1,6}"


class ContractType(str, Enum):
    CALL = "C"
    PUT = "P"

    @classmethod
    def from_code(cls, code: str) -> "ContractType":
        normalized = code.upper()
        for member in cls:
            if member.value == normalized:
                return member
        raise NoMatchError(code, "contract type")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class OptionSymbol:
    """A listed option contract.

    Instances are plain values: parse them from OSI or activity-statement
    text, or build them from fields. Expiration fields are only checked
    against the calendar when ``strict_calendar`` is requested or through
    :meth:`validate_ymd`.
    """

    symbol: str
    expiration_year: int
    expiration_month: int
    expiration_day: int
    strike_price: float
    contract_type: ContractType

    def __post_init__(self) -> None:
        if compile_pattern(SYMBOL_PATTERN).fullmatch(self.symbol) is None:
            raise NoMatchError(self.symbol, "ticker symbol")
        if not isinstance(self.contract_type, ContractType):
            object.__setattr__(
                self, "contract_type", ContractType.from_code(str(self.contract_type))
            )
        if not (
            math.isfinite(self.strike_price)
            and self.strike_price >= 0
            and round(self.strike_price * OSI_PRICE_SCALE) < MAX_OSI_PRICE
        ):
            raise StrikeOutOfRangeError(
                f"Strike price {self.strike_price} does not fit in {OSI_PRICE_DIGITS} OSI digits"
            )
        if not OSI_CENTURY <= self.expiration_year < OSI_CENTURY + 100:
            raise YearOutOfRangeError(
                f"Expiration year {self.expiration_year} cannot be written as a 2-digit OSI year"
            )
        # month 00 and day 31 in April still fit the OSI grammar
        if not 0 <= self.expiration_month <= 99:
            raise MonthOutOfRangeError(
                f"Expiration month {self.expiration_month} does not fit in 2 OSI digits"
            )
        if not 0 <= self.expiration_day <= 99:
            raise DayOutOfRangeError(
                f"Expiration day {self.expiration_day} does not fit in 2 OSI digits"
            )

    @classmethod
    def parse_osi(cls, text: str, strict_calendar: bool = False) -> "OptionSymbol":
        """Parse an OSI string such as ``"AAPL  131101C00470000"``."""
        fields = match_fields(OSI_PATTERN, text, "OSI")
        return cls._from_fields(
            fields,
            month=int(fields["month"]),
            strike_price=int(fields["price"]) / OSI_PRICE_SCALE,
            strict_calendar=strict_calendar,
        )

    @classmethod
    def parse_activity_statement(
        cls, text: str, strict_calendar: bool = False
    ) -> "OptionSymbol":
        """Parse an IB activity-statement trade symbol such as ``"KO 28MAY21 32.01 C"``."""
        fields = match_fields(ACTIVITY_STATEMENT_PATTERN, text, "activity statement")
        month = MONTH_ABBREVIATIONS.get(fields["month"])
        if month is None:
            raise InvalidMonthError(fields["month"])
        return cls._from_fields(
            fields,
            month=month,
            strike_price=float(fields["price"]),
            strict_calendar=strict_calendar,
        )

    @classmethod
    def _from_fields(
        cls,
        fields: dict[str, str],
        month: int,
        strike_price: float,
        strict_calendar: bool,
    ) -> "OptionSymbol":
        year = OSI_CENTURY + int(fields["year"])
        day = int(fields["day"])
        if strict_calendar:
            cls.validate_ymd(year, month, day)
        option = cls(
            symbol=fields["symbol"],
            expiration_year=year,
            expiration_month=month,
            expiration_day=day,
            strike_price=strike_price,
            contract_type=ContractType.from_code(fields["contract"]),
        )
        logger.debug("Parsed option symbol %r", option)
        return option

    @staticmethod
    def validate_ymd(year: int, month: int, day: int) -> None:
        """Check an expiration date without changing anything.

        Raises YearOutOfRangeError, MonthOutOfRangeError or DayOutOfRangeError.
        """
        if not OSI_CENTURY <= year < OSI_CENTURY + 100:
            raise YearOutOfRangeError(
                f"Supplied year {year} is out of range and not between "
                f"{OSI_CENTURY} and {OSI_CENTURY + 99}"
            )
        if not 1 <= month <= 12:
            raise MonthOutOfRangeError(
                f"Supplied month {month} is out of range and not between 1 and 12"
            )
        if not is_valid_calendar_date(year, month, day):
            raise DayOutOfRangeError(
                f"Supplied day {day} does not exist in {year}-{month:02d}"
            )

    @property
    def expiration_date(self) -> date:
        if not 1 <= self.expiration_month <= 12:
            raise MonthOutOfRangeError(
                f"Expiration month {self.expiration_month} is not between 1 and 12"
            )
        if not is_valid_calendar_date(
            self.expiration_year, self.expiration_month, self.expiration_day
        ):
            raise DayOutOfRangeError(
                f"Expiration day {self.expiration_day} does not exist in "
                f"{self.expiration_year}-{self.expiration_month:02d}"
            )
        return date(self.expiration_year, self.expiration_month, self.expiration_day)

    def _osi_body(self) -> str:
        price = round(self.strike_price * OSI_PRICE_SCALE)
        return (
            f"{self.expiration_year % 100:02d}{self.expiration_month:02d}"
            f"{self.expiration_day:02d}{self.contract_type.value}{price:08d}"
        )

    def to_osi(self) -> str:
        return f"{self.symbol:<{OSI_SYMBOL_WIDTH}}{self._osi_body()}"

    def to_osi_unpadded(self) -> str:
        return f"{self.symbol}{self._osi_body()}"

    def to_schwab(self) -> str:
        return (
            f"{self.symbol} {self.expiration_month:02d}/{self.expiration_day:02d}/"
            f"{self.expiration_year:04d} {self.strike_price:.2f} {self.contract_type.value}"
        )

    def __str__(self) -> str:
        return self.to_osi()


def parse_osi(text: str, strict_calendar: bool = False) -> OptionSymbol:
    return OptionSymbol.parse_osi(text, strict_calendar=strict_calendar)


def parse_activity_statement(text: str, strict_calendar: bool = False) -> OptionSymbol:
    return OptionSymbol.parse_activity_statement(text, strict_calendar=strict_calendar)
