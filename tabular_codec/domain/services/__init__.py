"""Pure domain services: type inference, column derivation, validation."""

from .column_formatter import derive_columns, display_text
from .date_formatting import format_date
from .type_inference import (
    infer,
    infer_column_type,
    infer_column_types,
    is_missing,
    parse_iso_date,
    resolve_cell,
)
from .validation import ValidationResult

__all__ = [
    "ValidationResult",
    "derive_columns",
    "display_text",
    "format_date",
    "infer",
    "infer_column_type",
    "infer_column_types",
    "is_missing",
    "parse_iso_date",
    "resolve_cell",
]
