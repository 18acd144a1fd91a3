from __future__ import annotations

from typing import TYPE_CHECKING

import pandas as pd

from ...constants import Defaults, Messages
from ...domain.entities.columns import WriteOptions
from ...domain.entities.records import EmptyInput, aligned_rows
from ...domain.services.column_formatter import display_text
from ...domain.services.type_inference import infer_column_types
from ...domain.services.validation import (
    ValidationResult,
    validate_delimiter,
    validate_record_set,
    validate_write_options,
)
from ..logging.null_logger import NullLogger
from .exceptions import DataValidationError, SerializationError

if TYPE_CHECKING:
    from ...application.ports.services import LoggerPort
    from ...domain.entities.records import RecordSet

ARTIFACT_NAME = "delimited file"
LINE_TERMINATOR = "\n"
ENCODING = "utf-8"


def write_delimited(
    records: RecordSet,
    delimiter: str = Defaults.DELIMITER,
    options: WriteOptions | None = None,
) -> bytes | EmptyInput:
    """Serialize a RecordSet to delimited UTF-8 text.

    Args:
        records: Records to write; the first record fixes the header order.
        delimiter: One of ``,``, ``;`` or ``|``.
        options: Date format and explicit column types. Sheet and header
            settings are ignored for delimited output.

    Returns:
        The encoded bytes, or an ``EmptyInput`` sentinel when ``records`` is
        empty.

    Raises:
        DataValidationError: If the records, delimiter or options are invalid.
        SerializationError: If the text cannot be produced.
    """
    options = options or WriteOptions()
    validation = ValidationResult().merge(
        validate_record_set(records),
        validate_delimiter(delimiter),
        validate_write_options(options, spreadsheet=False),
    )
    DataValidationError.raise_for("Delimited file creation", validation)
    if not records:
        return EmptyInput(Messages.EMPTY_DELIMITED)
    try:
        frame = _to_text_frame(records, options)
        text = frame.to_csv(
            index=False, sep=delimiter, lineterminator=LINE_TERMINATOR
        )
        return text.encode(ENCODING)
    except Exception as exc:
        raise SerializationError(
            f"Validation checks passed, but delimited file creation failed: {exc}"
        ) from exc


def _to_text_frame(records: RecordSet, options: WriteOptions) -> pd.DataFrame:
    headers = [str(key) for key in records[0]]
    rows = aligned_rows(records)
    column_types = infer_column_types(headers, rows, options.column_formats)
    explicit = set(options.column_formats)
    text_rows = [
        [
            display_text(
                row[index],
                column_types[header],
                options.date_format,
                explicit=header in explicit,
                detect_dates=True,
            )
            for index, header in enumerate(headers)
        ]
        for row in rows
    ]
    return pd.DataFrame(text_rows, columns=headers, dtype=object)


class DelimitedWriter:
    pass

    def __init__(self, logger: LoggerPort | None = None) -> None:
        super().__init__()
        self._logger = logger or NullLogger()

    def write(
        self,
        records: RecordSet,
        delimiter: str = Defaults.DELIMITER,
        options: WriteOptions | None = None,
    ) -> bytes | EmptyInput:
        result = write_delimited(records, delimiter, options)
        if isinstance(result, EmptyInput):
            self._logger.log_artifact_empty(ARTIFACT_NAME, result.message)
            return result
        self._logger.log_artifact_written(
            ARTIFACT_NAME, len(records), len(records[0]), len(result)
        )
        return result
