"""Domain entities for the tabular codec."""

from .columns import ColumnSpec, HeaderStyle, WriteOptions
from .records import (
    COLUMN_TYPES,
    CellValue,
    EmptyInput,
    Record,
    RecordSet,
    TypeTag,
    aligned_rows,
    field_order,
)

__all__ = [
    "COLUMN_TYPES",
    "CellValue",
    "ColumnSpec",
    "EmptyInput",
    "HeaderStyle",
    "Record",
    "RecordSet",
    "TypeTag",
    "WriteOptions",
    "aligned_rows",
    "field_order",
]
