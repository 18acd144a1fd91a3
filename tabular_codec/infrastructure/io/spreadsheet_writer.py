"""Build a single-sheet ``.xlsx`` artifact from a RecordSet.

Date cells are stored as real dates carrying the configured date format so
spreadsheet clients can sort and filter them. Text cells are stored verbatim
with the text number format, so IDs like ``2024-01`` or ``0042`` are never
reinterpreted. Header cells are styled and the header range carries an
auto-filter.
"""

from __future__ import annotations

from io import BytesIO
from typing import TYPE_CHECKING

from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter

from ...constants import Defaults, Messages
from ...domain.entities.columns import WriteOptions
from ...domain.entities.records import EmptyInput, TypeTag, aligned_rows
from ...domain.services.column_formatter import derive_columns
from ...domain.services.type_inference import resolve_cell
from ...domain.services.validation import (
    ValidationResult,
    validate_record_set,
    validate_write_options,
)
from ..logging.null_logger import NullLogger
from .exceptions import DataValidationError, SerializationError

if TYPE_CHECKING:
    from openpyxl.cell.cell import Cell
    from openpyxl.worksheet.worksheet import Worksheet

    from ...application.ports.services import LoggerPort
    from ...domain.entities.columns import ColumnSpec, HeaderStyle
    from ...domain.entities.records import CellValue, RecordSet

ARTIFACT_NAME = "spreadsheet"
HEADER_ROW = 1


def write_spreadsheet(
    records: RecordSet, options: WriteOptions | None = None
) -> bytes | EmptyInput:
    options = options or WriteOptions()
    validation = ValidationResult().merge(
        validate_record_set(records),
        validate_write_options(options, spreadsheet=True),
    )
    DataValidationError.raise_for("Spreadsheet creation", validation)
    if not records:
        return EmptyInput(Messages.EMPTY_SPREADSHEET)
    columns = derive_columns(
        records,
        options.column_formats,
        options.date_format,
        min_width=options.min_column_width,
        padding=options.column_padding,
    )
    workbook = Workbook()
    stage = "creating worksheet"
    try:
        worksheet = workbook.active
        if worksheet is None:
            worksheet = workbook.create_sheet()
        worksheet.title = options.sheet_name
        stage = "writing header row"
        _write_header(worksheet, columns, options.header_style)
        stage = "writing data rows"
        _write_rows(worksheet, columns, aligned_rows(records), options)
        stage = "sizing columns"
        for index, spec in enumerate(columns, start=1):
            dimension = worksheet.column_dimensions[get_column_letter(index)]
            dimension.width = spec.width
            if spec.format_string:
                dimension.number_format = spec.format_string
        stage = "saving workbook"
        with BytesIO() as buffer:
            workbook.save(buffer)
            return buffer.getvalue()
    except Exception as exc:
        raise SerializationError(
            f"Spreadsheet creation failed while {stage} "
            f"(sheet '{options.sheet_name}'): {exc}"
        ) from exc
    finally:
        workbook.close()


def _write_header(
    worksheet: Worksheet, columns: list[ColumnSpec], style: HeaderStyle
) -> None:
    font = Font(bold=style.bold, size=style.font_size, color=style.font_color)
    fill = (
        PatternFill(fill_type="solid", fgColor=style.fill_color)
        if style.fill_color
        else None
    )
    for index, spec in enumerate(columns, start=1):
        cell = worksheet.cell(row=HEADER_ROW, column=index, value=spec.name)
        _store_verbatim(cell, spec.name)
        cell.font = font
        if fill is not None:
            cell.fill = fill
    last_column = get_column_letter(len(columns))
    worksheet.auto_filter.ref = f"A{HEADER_ROW}:{last_column}{HEADER_ROW}"


def _write_rows(
    worksheet: Worksheet,
    columns: list[ColumnSpec],
    rows: list[list[CellValue]],
    options: WriteOptions,
) -> None:
    explicit = set(options.column_formats)
    for row_offset, row in enumerate(rows, start=HEADER_ROW + 1):
        for index, spec in enumerate(columns, start=1):
            tag, value = resolve_cell(
                row[index - 1], spec.type, explicit=spec.name in explicit
            )
            if tag is TypeTag.NULL:
                continue
            cell = worksheet.cell(row=row_offset, column=index, value=value)
            if tag is TypeTag.DATE:
                cell.number_format = options.date_format
            elif tag is TypeTag.TEXT:
                _store_verbatim(cell, value)
                cell.number_format = Defaults.TEXT_NUMBER_FORMAT


def _store_verbatim(cell: Cell, value: CellValue) -> None:
    # openpyxl treats a leading "=" as a formula; keep it as plain text.
    if isinstance(value, str) and value.startswith("="):
        cell.data_type = "s"


class SpreadsheetWriter:
    pass

    def __init__(self, logger: LoggerPort | None = None) -> None:
        super().__init__()
        self._logger = logger or NullLogger()

    def write(
        self, records: RecordSet, options: WriteOptions | None = None
    ) -> bytes | EmptyInput:
        result = write_spreadsheet(records, options)
        if isinstance(result, EmptyInput):
            self._logger.log_artifact_empty(ARTIFACT_NAME, result.message)
            return result
        column_count = len(records[0]) if records else 0
        self._logger.log_artifact_written(
            ARTIFACT_NAME, len(records), column_count, len(result)
        )
        return result
