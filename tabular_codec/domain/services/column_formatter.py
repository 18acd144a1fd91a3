from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from ...constants import Defaults
from ..entities.columns import ColumnSpec
from ..entities.records import TypeTag, aligned_rows, field_order
from .date_formatting import format_date
from .type_inference import infer_column_types, resolve_cell

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ..entities.records import CellValue, RecordSet


def derive_columns(
    records: RecordSet,
    explicit_formats: Mapping[str, TypeTag | str] | None = None,
    date_format: str = Defaults.DATE_FORMAT,
    *,
    min_width: int = Defaults.MIN_COLUMN_WIDTH,
    padding: int = Defaults.COLUMN_PADDING,
) -> list[ColumnSpec]:
    """Derive per-column serialization metadata for one write.

    Headers are the keys of the first record in insertion order. Width is the
    longest of the header and every cell's display text, clamped to
    ``min_width``, plus ``padding``; date columns are never narrower than the
    date format plus ``padding``. This step never fails: a column that cannot
    be classified is Text.
    """
    headers = field_order(records)
    rows = aligned_rows(records)
    explicit_formats = explicit_formats or {}
    column_types = infer_column_types(headers, rows, explicit_formats)
    specs: list[ColumnSpec] = []
    for index, header in enumerate(headers):
        column_type = column_types[header]
        explicit = header in explicit_formats
        longest = len(header)
        for row in rows:
            text = display_text(
                row[index], column_type, date_format, explicit=explicit
            )
            longest = max(longest, len(text))
        width = max(longest, min_width) + padding
        if column_type is TypeTag.DATE:
            width = max(width, len(date_format) + padding)
        specs.append(
            ColumnSpec(
                name=header,
                type=column_type,
                width=width,
                format_string=_format_string(column_type, date_format),
            )
        )
    return specs


def display_text(
    value: CellValue,
    column_type: TypeTag,
    date_format: str,
    *,
    explicit: bool = False,
    detect_dates: bool = False,
) -> str:
    """Text a client shows for one cell.

    With ``detect_dates`` every string that passes the ISO date rule is
    rendered with ``date_format``, whatever the column's inferred type. An
    explicit column type still wins.
    """
    if detect_dates and not explicit and isinstance(value, str):
        column_type = TypeTag.DATE
    tag, resolved = resolve_cell(value, column_type, explicit=explicit)
    if tag is TypeTag.NULL or resolved is None:
        return ""
    if tag is TypeTag.DATE and isinstance(resolved, date):
        return format_date(resolved, date_format)
    return str(resolved)


def _format_string(column_type: TypeTag, date_format: str) -> str | None:
    if column_type is TypeTag.DATE:
        return date_format
    if column_type is TypeTag.TEXT:
        return Defaults.TEXT_NUMBER_FORMAT
    return None
