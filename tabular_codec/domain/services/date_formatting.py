"""Render dates with spreadsheet-style format codes.

The same ``date_format`` string drives both artifacts: the spreadsheet writer
attaches it to date cells as a number format, and the delimited writer uses
this module to produce the text a spreadsheet client would display.

Supported tokens: ``yyyy``, ``yy``, ``mmmm``, ``mmm``, ``mm``, ``m``, ``dd``,
``d``, ``hh``, ``h``, ``ss``, ``s``. ``mm``/``m`` mean minutes when they follow
an hour token or precede a seconds token, as in spreadsheet clients. Anything
else, including quoted and backslash-escaped text, is copied literally.
"""

from __future__ import annotations

from datetime import date, datetime
from functools import lru_cache
import re

_TOKEN_PATTERN = re.compile(
    r'"[^"]*"|\\.|yyyy|yy|mmmm|mmm|mm|m|dd|d|hh|h|ss|s|.',
    re.IGNORECASE,
)
_MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
_MONTH_TOKENS = frozenset({"mm", "m"})
_HOUR_TOKENS = frozenset({"hh", "h"})
_SECOND_TOKENS = frozenset({"ss", "s"})


@lru_cache(maxsize=64)
def tokenize(pattern: str) -> tuple[str, ...]:
    raw = [match.group(0) for match in _TOKEN_PATTERN.finditer(pattern)]
    tokens: list[str] = []
    for index, token in enumerate(raw):
        lowered = token.lower()
        if lowered in _MONTH_TOKENS and _is_minute(raw, index):
            tokens.append("min" + lowered)
        else:
            tokens.append(token)
    return tuple(tokens)


def format_date(value: date, pattern: str) -> str:
    moment = (
        value
        if isinstance(value, datetime)
        else datetime(value.year, value.month, value.day)
    )
    return "".join(_render(token, moment) for token in tokenize(pattern))


def _is_minute(raw: list[str], index: int) -> bool:
    for previous in reversed(raw[:index]):
        lowered = previous.lower()
        if lowered in _HOUR_TOKENS:
            return True
        if lowered.isalpha():
            break
    for following in raw[index + 1 :]:
        lowered = following.lower()
        if lowered in _SECOND_TOKENS:
            return True
        if lowered.isalpha():
            break
    return False


def _render(token: str, moment: datetime) -> str:
    lowered = token.lower()
    match lowered:
        case "yyyy":
            return f"{moment.year:04d}"
        case "yy":
            return f"{moment.year % 100:02d}"
        case "mmmm":
            return _MONTH_NAMES[moment.month - 1]
        case "mmm":
            return _MONTH_NAMES[moment.month - 1][:3]
        case "mm":
            return f"{moment.month:02d}"
        case "m":
            return str(moment.month)
        case "minmm":
            return f"{moment.minute:02d}"
        case "minm":
            return str(moment.minute)
        case "dd":
            return f"{moment.day:02d}"
        case "d":
            return str(moment.day)
        case "hh":
            return f"{moment.hour:02d}"
        case "h":
            return str(moment.hour)
        case "ss":
            return f"{moment.second:02d}"
        case "s":
            return str(moment.second)
        case _:
            pass
    if token.startswith('"') and token.endswith('"') and len(token) >= 2:
        return token[1:-1]
    if token.startswith("\\") and len(token) == 2:
        return token[1]
    return token
