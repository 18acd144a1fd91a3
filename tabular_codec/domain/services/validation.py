"""Explicit input validation for the codec entry points.

Every check returns a ``ValidationResult`` instead of raising, so callers can
merge several checks and decide, before touching any file, whether to
proceed. Errors are keyed by field path (``records[2].joined``,
``delimiter``) and every failing field is reported, not just the first.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date
import math
import numbers
from os import PathLike
import re
from typing import TYPE_CHECKING

from ...constants import Constraints, Patterns
from ..entities.records import COLUMN_TYPES
from .type_inference import coerce_type_tag, is_missing, is_number

if TYPE_CHECKING:
    from ..entities.columns import HeaderStyle, WriteOptions

_SAFE_FILE_NAME = re.compile(Patterns.SAFE_FILE_NAME)
_ARGB_COLOR = re.compile(Patterns.ARGB_COLOR)
_COLUMN_TYPE_NAMES = ", ".join(sorted(tag.value for tag in COLUMN_TYPES))


def _empty_errors() -> dict[str, list[str]]:
    return {}


@dataclass(slots=True)
class ValidationResult:
    errors: dict[str, list[str]] = field(default_factory=_empty_errors)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def is_error(self) -> bool:
        return bool(self.errors)

    def add(self, key: str, message: str) -> None:
        self.errors.setdefault(key, []).append(message)

    def merge(self, *others: ValidationResult) -> ValidationResult:
        for other in others:
            for key, messages in other.errors.items():
                for message in messages:
                    self.add(key, message)
        return self

    def messages(self) -> list[str]:
        return [
            f"{key}: {message}"
            for key, messages in self.errors.items()
            for message in messages
        ]


def validate_record_set(records: object) -> ValidationResult:
    """Check the shape of a RecordSet and the values it will write.

    Only the fields of the first record are checked on later records, since
    any other field is ignored by the writers.
    """
    result = ValidationResult()
    if isinstance(records, (str, bytes)) or not isinstance(records, Sequence):
        result.add("records", "must be a sequence of records")
        return result
    headers: list[str] = []
    if records and isinstance(records[0], Mapping):
        if not records[0]:
            result.add("records[0]", "must define at least one field")
        for key in records[0]:
            if isinstance(key, str):
                headers.append(key)
            else:
                result.add("records[0]", f"field name {key!r} is not a string")
    for index, record in enumerate(records):
        if not isinstance(record, Mapping):
            result.add(f"records[{index}]", "must be a mapping of field to value")
            continue
        for key in headers:
            if key not in record:
                continue
            message = _cell_value_error(record[key])
            if message:
                result.add(f"records[{index}].{key}", message)
    return result


def validate_delimiter(delimiter: object) -> ValidationResult:
    result = ValidationResult()
    if delimiter not in Constraints.ALLOWED_DELIMITERS:
        allowed = " ".join(Constraints.ALLOWED_DELIMITERS)
        result.add("delimiter", f"must be one of {allowed}, got {delimiter!r}")
    return result


def validate_delimiter_char(delimiter_char: object) -> ValidationResult:
    result = ValidationResult()
    if not isinstance(delimiter_char, str) or len(delimiter_char) != 1:
        result.add("delimiter_char", "must be exactly one character")
    elif delimiter_char in ('"', "\n", "\r"):
        result.add("delimiter_char", f"{delimiter_char!r} cannot be a delimiter")
    return result


def validate_date_format(date_format: object) -> ValidationResult:
    result = ValidationResult()
    if not isinstance(date_format, str) or not date_format.strip():
        result.add("date_format", "must be a non-empty format string")
    return result


def validate_sheet_name(
    sheet_name: object, *, for_write: bool = False
) -> ValidationResult:
    result = ValidationResult()
    if not isinstance(sheet_name, str) or not sheet_name.strip():
        result.add("sheet_name", "must be a non-empty string")
        return result
    if not for_write:
        return result
    if len(sheet_name) > Constraints.SHEET_NAME_MAX_LENGTH:
        result.add(
            "sheet_name",
            f"must be at most {Constraints.SHEET_NAME_MAX_LENGTH} characters",
        )
    forbidden = "".join(
        char for char in Constraints.SHEET_NAME_FORBIDDEN_CHARS if char in sheet_name
    )
    if forbidden:
        result.add("sheet_name", f"contains forbidden characters: {forbidden}")
    return result


def validate_header_row_index(header_row_index: object) -> ValidationResult:
    result = ValidationResult()
    if (
        isinstance(header_row_index, bool)
        or not isinstance(header_row_index, int)
        or header_row_index < 1
    ):
        result.add("header_row_index", "must be a positive integer (1-based)")
    return result


def validate_column_formats(column_formats: object) -> ValidationResult:
    result = ValidationResult()
    if not isinstance(column_formats, Mapping):
        result.add("column_formats", "must be a mapping of column name to type")
        return result
    for name, tag in column_formats.items():
        key = f"column_formats.{name}"
        if not isinstance(name, str):
            result.add("column_formats", f"column name {name!r} is not a string")
            continue
        try:
            resolved = coerce_type_tag(tag)
        except ValueError:
            result.add(
                key, f"unknown type {tag!r}; expected one of {_COLUMN_TYPE_NAMES}"
            )
            continue
        if resolved not in COLUMN_TYPES:
            result.add(
                key,
                f"type {resolved.value!r} cannot be declared; "
                f"expected one of {_COLUMN_TYPE_NAMES}",
            )
    return result


def validate_header_style(style: HeaderStyle) -> ValidationResult:
    result = ValidationResult()
    if style.font_size <= 0:
        result.add("header_style.font_size", "must be positive")
    for name in ("fill_color", "font_color"):
        color = getattr(style, name)
        if color is not None and not _ARGB_COLOR.match(color):
            result.add(
                f"header_style.{name}", f"{color!r} is not an RGB/ARGB hex color"
            )
    return result


def validate_write_options(
    options: WriteOptions, *, spreadsheet: bool
) -> ValidationResult:
    result = ValidationResult().merge(
        validate_date_format(options.date_format),
        validate_column_formats(options.column_formats),
    )
    if options.min_column_width < 1:
        result.add("min_column_width", "must be positive")
    if options.column_padding < 0:
        result.add("column_padding", "must not be negative")
    if spreadsheet:
        result.merge(
            validate_sheet_name(options.sheet_name, for_write=True),
            validate_header_style(options.header_style),
        )
    return result


def validate_source(source: object) -> ValidationResult:
    result = ValidationResult()
    if isinstance(source, (bytes, bytearray)):
        return result
    if isinstance(source, PathLike):
        source = str(source)
    if not isinstance(source, str) or not source.strip():
        result.add("source", "must be a non-empty path or bytes")
    return result


def validate_file_name(name: object) -> ValidationResult:
    result = ValidationResult()
    if not isinstance(name, str) or not name:
        result.add("name", "Filename cannot be empty")
        return result
    if not _SAFE_FILE_NAME.match(name):
        result.add("name", "Filename contains invalid characters")
    if ".." in name:
        result.add("name", "Filename cannot contain '..'")
    return result


def validate_file_data(data: object) -> ValidationResult:
    result = ValidationResult()
    if not isinstance(data, (bytes, bytearray, str)):
        result.add("data", "must be bytes or text")
    elif len(data) == 0:
        result.add("data", "File data cannot be empty")
    return result


def _cell_value_error(value: object) -> str | None:
    if is_missing(value) or isinstance(value, (str, bool, date)):
        return None
    if not is_number(value):
        return f"unsupported value type {type(value).__name__}"
    if isinstance(value, numbers.Integral):
        return None
    try:
        finite = math.isfinite(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        finite = False
    if not finite:
        return f"non-finite number {value!r} cannot be written"
    return None
