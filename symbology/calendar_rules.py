from __future__ import annotations

from symbology.constants import MONTHS_WITH_31_DAYS


def is_leap_year(year: int) -> bool:
    """Every 4 years, except centuries, except every 400 years."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in MONTHS_WITH_31_DAYS:
        return 31
    return 30


def is_valid_calendar_date(year: int, month: int, day: int) -> bool:
    if not 1 <= month <= 12:
        return False
    return 1 <= day <= days_in_month(year, month)
