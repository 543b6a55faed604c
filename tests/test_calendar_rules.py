import pytest

from symbology.calendar_rules import days_in_month, is_leap_year, is_valid_calendar_date


def test_is_leap_year() -> None:
    assert is_leap_year(2000)
    assert is_leap_year(2004)
    assert not is_leap_year(2100)
    assert not is_leap_year(2021)


@pytest.mark.parametrize(
    "year,month,day,expected",
    [
        (2000, 2, 29, True),
        (2001, 2, 29, False),
        (2000, 2, 30, False),
        (2000, 4, 31, False),
        (2001, 8, 31, True),
        (2021, 12, 31, True),
        (2021, 1, 0, False),
        (2021, 13, 1, False),
        (2021, 0, 1, False),
    ],
)
def test_is_valid_calendar_date(year: int, month: int, day: int, expected: bool) -> None:
    assert is_valid_calendar_date(year, month, day) is expected


def test_days_in_month() -> None:
    assert days_in_month(2024, 2) == 29
    assert days_in_month(2023, 2) == 28
    assert days_in_month(2023, 9) == 30
    assert days_in_month(2023, 10) == 31
