"""Type inference shared by the spreadsheet and delimited writers.

Rules for a single value, evaluated in order:

1. A ``date``/``datetime`` object is a Date.
2. A string starting with ``YYYY-MM-DD`` whose prefix is a real calendar
   date is a Date.
3. Any other string is Text, including strings with ``-`` or ``/`` such as
   ``2024-01``, ``555-0100`` or ``1/2``. They are never coerced to dates or
   numbers.
4. Everything else passes through: Number, Boolean, or Null when empty.

Columns are typed once, from their first non-null sample, unless an explicit
override is given for the column.
"""

from __future__ import annotations

from datetime import date, datetime
import math
import numbers
import re
from typing import TYPE_CHECKING

import pandas as pd

from ...constants import Patterns
from ..entities.records import TypeTag

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from ..entities.records import CellValue

ISO_DATE_PREFIX = re.compile(Patterns.ISO_DATE_PREFIX)
ISO_PREFIX_LENGTH = 10


def is_missing(value: object) -> bool:
    if value is None or value is pd.NaT:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return isinstance(value, str) and value == ""


def is_number(value: object) -> bool:
    return (
        isinstance(value, numbers.Number)
        and not isinstance(value, (bool, complex))
    )


def parse_iso_date(value: str) -> datetime | None:
    """Parse a string with an ISO ``YYYY-MM-DD`` prefix.

    The full string is tried first so times survive; if only the prefix is a
    valid date the result is midnight of that day. Strings without the prefix
    or with an impossible calendar date give ``None``.
    """
    if not ISO_DATE_PREFIX.match(value):
        return None
    try:
        day = date.fromisoformat(value[:ISO_PREFIX_LENGTH])
    except ValueError:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return datetime(day.year, day.month, day.day)


def infer(value: object) -> TypeTag:
    if is_missing(value):
        return TypeTag.NULL
    if isinstance(value, date):
        return TypeTag.DATE
    if isinstance(value, str):
        if parse_iso_date(value) is not None:
            return TypeTag.DATE
        # Dashed or slashed strings that are not ISO dates stay text.
        return TypeTag.TEXT
    if isinstance(value, bool):
        return TypeTag.BOOLEAN
    if is_number(value):
        return TypeTag.NUMBER
    return TypeTag.TEXT


def coerce_type_tag(value: TypeTag | str) -> TypeTag:
    if isinstance(value, TypeTag):
        return value
    return TypeTag(str(value).strip().lower())


def infer_column_type(
    values: Iterable[object],
    *,
    explicit: TypeTag | str | None = None,
) -> TypeTag:
    if explicit is not None:
        return _column_type(coerce_type_tag(explicit))
    for value in values:
        tag = infer(value)
        if tag is not TypeTag.NULL:
            return _column_type(tag)
    return TypeTag.TEXT


def infer_column_types(
    headers: list[str],
    rows: list[list[CellValue]],
    explicit_formats: Mapping[str, TypeTag | str] | None = None,
) -> dict[str, TypeTag]:
    explicit_formats = explicit_formats or {}
    return {
        header: infer_column_type(
            (row[index] for row in rows), explicit=explicit_formats.get(header)
        )
        for index, header in enumerate(headers)
    }


def resolve_cell(
    value: CellValue,
    column_type: TypeTag,
    *,
    explicit: bool = False,
) -> tuple[TypeTag, CellValue]:
    """Decide how one cell is stored given its column's type.

    Returns the tag the cell is written as and the value to write. Strings
    only become dates in Date columns; nothing is ever parsed as a number
    unless the column was explicitly declared Number.
    """
    if is_missing(value):
        return TypeTag.NULL, None
    if explicit and column_type is TypeTag.TEXT:
        return TypeTag.TEXT, _as_text(value)
    if explicit and column_type is TypeTag.NUMBER and isinstance(value, str):
        number = _parse_number(value)
        if number is None:
            return TypeTag.TEXT, value
        return TypeTag.NUMBER, number
    if explicit and column_type is TypeTag.NUMBER and isinstance(value, date):
        return TypeTag.TEXT, _as_text(_naive(value))
    if isinstance(value, date):
        return TypeTag.DATE, _naive(value)
    if isinstance(value, str):
        if column_type is TypeTag.DATE:
            parsed = parse_iso_date(value)
            if parsed is not None:
                return TypeTag.DATE, _naive(parsed)
        return TypeTag.TEXT, value
    if isinstance(value, bool):
        return TypeTag.BOOLEAN, value
    if is_number(value):
        return TypeTag.NUMBER, value
    return TypeTag.TEXT, str(value)


def _column_type(tag: TypeTag) -> TypeTag:
    if tag in (TypeTag.DATE, TypeTag.NUMBER):
        return tag
    return TypeTag.TEXT


def _as_text(value: object) -> str:
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value)


def _parse_number(value: str) -> int | float | None:
    text = value.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def _naive(value: date) -> date:
    if isinstance(value, pd.Timestamp):
        value = value.to_pydatetime()
    # Spreadsheets have no time zone; keep the wall-clock time.
    if isinstance(value, datetime) and value.tzinfo is not None:
        return value.replace(tzinfo=None)
    return value

