from __future__ import annotations

ISIN_PATTERN = r"^(?P<country>[A-Z]{2})(?P<identifier>[A-Z0-9]{9})(?P<checksum>[0-9])$"

OSI_PATTERN = (
    r"^(?=.{16,21}$)(?P<symbol>\w{1,6})\s{0,5}(?P<year>\d{2})"
    r"(?P<month>0\d|1[0-2])(?P<day>0[1-9]|[12]\d|3[01])"
    r"(?P<contract>[CPcp])(?P<price>\d{8})$"
)

# e.g. "KO 28MAY21 32.01 C"
ACTIVITY_STATEMENT_PATTERN = (
    r"^(?P<symbol>\w{1,6})\s(?P<day>0[1-9]|[12]\d|3[01])(?P<month>\w{3})"
    r"(?P<year>\d{2})\s(?P<price>\d*[.]?\d+)\s(?P<contract>[CPcp])$"
)

OSI_CENTURY = 2000
OSI_SYMBOL_WIDTH = 6
OSI_PRICE_SCALE = 1000
OSI_PRICE_DIGITS = 8
MAX_OSI_PRICE = 10 ** OSI_PRICE_DIGITS

MONTH_ABBREVIATIONS = {
    "JAN": 1,
    "FEB": 2,
    "MAR": 3,
    "APR": 4,
    "MAY": 5,
    "JUN": 6,
    "JUL": 7,
    "AUG": 8,
    "SEP": 9,
    "OCT": 10,
    "NOV": 11,
    "DEC": 12,
}

MONTHS_WITH_31_DAYS = frozenset({1, 3, 5, 7, 8, 10, 12})
