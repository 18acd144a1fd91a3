"""Read delimited text into a RecordSet of strings.

Values are never coerced on read: every field comes back exactly as text, so
``"0042"`` stays ``"0042"`` and ``"2024-01-01"`` stays a string. Callers that
want typed values convert them explicitly.

Quoting is relaxed: a quote inside a field, or text after a closing quote
(``"x"y``), is kept as part of the field instead of failing the read.

Row width policy: rows shorter than the header are padded with ``""``; rows
longer than the header are truncated to the header width and the number of
truncated rows is reported as a warning.
"""

from __future__ import annotations

import csv
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING

import pandas as pd

from ...constants import Defaults
from ...domain.services.validation import (
    ValidationResult,
    validate_delimiter_char,
    validate_source,
)
from ..logging.null_logger import NullLogger
from .exceptions import DataParseError, DataValidationError
from .sources import describe_source, resolve_source

if TYPE_CHECKING:
    from ...application.models import SourceRef
    from ...application.ports.services import LoggerPort

ENCODING = "utf-8-sig"


def read_delimited(
    source: SourceRef,
    delimiter_char: str = Defaults.DELIMITER,
    logger: LoggerPort | None = None,
) -> list[dict[str, str]]:
    """Parse a delimited file or in-memory buffer.

    Args:
        source: Path to the file, or its raw bytes.
        delimiter_char: Single separator character.
        logger: Receives a warning when long rows are truncated.

    Returns:
        One record per non-blank data row, keyed by the header line. An empty
        source yields an empty list.

    Raises:
        DataValidationError: If the source or delimiter is malformed.
        DataSourceNotFoundError: If a path source does not exist.
        DataParseError: If the content cannot be decoded or parsed.
    """
    logger = logger or NullLogger()
    validation = ValidationResult().merge(
        validate_source(source),
        validate_delimiter_char(delimiter_char),
    )
    DataValidationError.raise_for("Delimited read", validation)
    resolved = resolve_source(source)
    label = describe_source(source)
    try:
        text = _decode(resolved)
        headers = _read_headers(text, delimiter_char)
        if not headers:
            return []
        rows, truncated = _read_rows(text, delimiter_char, len(headers))
    except pd.errors.ParserError as e:
        raise DataParseError(f"Failed to parse delimited file {label}: {e}") from e
    except csv.Error as e:
        raise DataParseError(f"Failed to parse delimited file {label}: {e}") from e
    except UnicodeDecodeError as e:
        raise DataParseError(f"{label} is not valid UTF-8 text: {e}") from e
    except Exception as e:
        raise DataParseError(f"Unexpected error reading {label}: {e}") from e
    if truncated:
        logger.warning(
            f"{label}: truncated {truncated} row(s) wider than the "
            f"{len(headers)}-column header"
        )
    records = [dict(zip(headers, row)) for row in rows]
    logger.log_records_loaded(label, len(records), len(headers))
    return records


def _decode(resolved: Path | bytes) -> str:
    data = resolved.read_bytes() if isinstance(resolved, Path) else resolved
    return data.decode(ENCODING)


def _read_headers(text: str, delimiter_char: str) -> list[str]:
    try:
        header_frame = pd.read_csv(
            StringIO(text),
            sep=delimiter_char,
            nrows=0,
            dtype=object,
            engine="python",
            index_col=False,
            skip_blank_lines=True,
        )
    except pd.errors.EmptyDataError:
        return []
    return [str(column) for column in header_frame.columns]


def _read_rows(
    text: str, delimiter_char: str, width: int
) -> tuple[list[list[str]], int]:
    reader = csv.reader(StringIO(text, newline=""), delimiter=delimiter_char)
    rows: list[list[str]] = []
    truncated = 0
    header_seen = False
    for row in reader:
        if _is_blank(row):
            continue
        if not header_seen:
            header_seen = True
            continue
        if len(row) > width:
            truncated += 1
            row = row[:width]
        elif len(row) < width:
            row = row + [""] * (width - len(row))
        rows.append(row)
    return rows, truncated


def _is_blank(row: list[str]) -> bool:
    # Same rule the header pass uses for skip_blank_lines.
    return not row or (len(row) == 1 and not row[0].strip())


class DelimitedReader:
    pass

    def __init__(self, logger: LoggerPort | None = None) -> None:
        super().__init__()
        self._logger = logger or NullLogger()

    def read(
        self, source: SourceRef, delimiter_char: str = Defaults.DELIMITER
    ) -> list[dict[str, str]]:
        return read_delimited(source, delimiter_char, self._logger)
