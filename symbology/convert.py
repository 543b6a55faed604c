"""Conversion between option symbol formats, single values and CSV columns."""

from __future__ import annotations

import logging
from typing import Callable

import pandas as pd

from symbology.errors import SymbologyError
from symbology.options import OptionSymbol

logger = logging.getLogger(__name__)

PARSERS: dict[str, Callable[..., OptionSymbol]] = {
    "osi": OptionSymbol.parse_osi,
    "activity": OptionSymbol.parse_activity_statement,
}

SERIALIZERS: dict[str, Callable[[OptionSymbol], str]] = {
    "osi": OptionSymbol.to_osi,
    "osi-unpadded": OptionSymbol.to_osi_unpadded,
    "schwab": OptionSymbol.to_schwab,
}


def parse_option(text: str, input_format: str, strict_calendar: bool = False) -> OptionSymbol:
    try:
        parser = PARSERS[input_format]
    except KeyError:
        raise ValueError(f"Unsupported input format: {input_format}") from None
    return parser(text, strict_calendar=strict_calendar)


def convert_option(
    text: str,
    input_format: str,
    output_format: str,
    strict_calendar: bool = False,
) -> str:
    try:
        serializer = SERIALIZERS[output_format]
    except KeyError:
        raise ValueError(f"Unsupported output format: {output_format}") from None
    return serializer(parse_option(text, input_format, strict_calendar=strict_calendar))


def convert_frame(
    df: pd.DataFrame,
    column: str,
    input_format: str,
    output_format: str,
    strict_calendar: bool = False,
) -> pd.DataFrame:
    """Return a copy of ``df`` with ``converted`` and ``error`` columns added.

    Rows that fail to parse keep an empty ``converted`` value and carry the
    error message instead.
    """
    converted: list[str] = []
    errors: list[str] = []
    for value in df[column]:
        try:
            converted.append(
                convert_option(str(value), input_format, output_format, strict_calendar)
            )
            errors.append("")
        except SymbologyError as exc:
            logger.debug("Could not convert %r: %s", value, exc)
            converted.append("")
            errors.append(str(exc))

    result = df.copy()
    result["converted"] = converted
    result["error"] = errors
    return result
