"""Record-level entities shared by every codec.

A ``Record`` is an ordered mapping from field name to a closed set of cell
value types. A ``RecordSet`` is an ordered sequence of records interpreted
against the field order of its first record: missing fields read as ``None``
and fields the first record does not have are ignored.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import date, datetime
from decimal import Decimal
from enum import StrEnum
from typing import TypeAlias

CellValue: TypeAlias = str | int | float | Decimal | bool | date | datetime | None
Record: TypeAlias = Mapping[str, CellValue]
RecordSet: TypeAlias = Sequence[Record]


class TypeTag(StrEnum):
    TEXT = "text"
    DATE = "date"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"


COLUMN_TYPES: frozenset[TypeTag] = frozenset(
    {TypeTag.TEXT, TypeTag.DATE, TypeTag.NUMBER}
)


class EmptyInput(str):
    """Benign result returned by the writers when there is nothing to write.

    It is a plain string so it can be shown to a user as-is, but callers tell
    it apart from a real artifact with ``isinstance(result, EmptyInput)``.
    """

    __slots__ = ()

    @property
    def message(self) -> str:
        return str(self)


def field_order(records: RecordSet) -> list[str]:
    if not records:
        return []
    return [str(key) for key in records[0]]


def aligned_rows(records: RecordSet) -> list[list[CellValue]]:
    headers = field_order(records)
    return [[record.get(header) for header in headers] for record in records]
