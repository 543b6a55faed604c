from __future__ import annotations

import re
from functools import lru_cache

from symbology.errors import EngineError, NoMatchError


@lru_cache(maxsize=None)
def compile_pattern(pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern, re.ASCII)
    except re.error as exc:
        raise EngineError(str(exc)) from exc


def match_fields(pattern: str, text: str, grammar: str) -> dict[str, str]:
    """Match ``text`` against an anchored pattern and return its named groups."""
    match = compile_pattern(pattern).fullmatch(text)
    if match is None:
        raise NoMatchError(text, grammar)
    return match.groupdict()
