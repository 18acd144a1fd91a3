from __future__ import annotations

from typing import TYPE_CHECKING

from openpyxl import load_workbook

from ...constants import Defaults
from ...domain.services.validation import (
    ValidationResult,
    validate_header_row_index,
    validate_sheet_name,
    validate_source,
)
from ..logging.null_logger import NullLogger
from .exceptions import DataParseError, DataSourceNotFoundError, DataValidationError
from .sources import describe_source, open_source, resolve_source

if TYPE_CHECKING:
    from openpyxl.worksheet.worksheet import Worksheet

    from ...application.models import SourceRef
    from ...application.ports.services import LoggerPort
    from ...domain.entities.records import CellValue

BLANK_HEADER_PREFIX = "Column"


def read_spreadsheet(
    source: SourceRef,
    sheet_name: str = Defaults.SHEET_NAME,
    header_row_index: int = Defaults.HEADER_ROW_INDEX,
    logger: LoggerPort | None = None,
) -> list[dict[str, CellValue]]:
    """Read one worksheet into records keyed by its header row.

    Rows above ``header_row_index`` are ignored. Every row below it, through
    the last row of the sheet, becomes a record. Cells are read with their
    cached formula results; blank cells and formulas that were never computed
    read as ``None``.

    Raises:
        DataValidationError: If the source, sheet name or header index is
            malformed.
        DataSourceNotFoundError: If the file, the sheet or the header row is
            missing.
        DataParseError: If the content is not a readable workbook.
    """
    logger = logger or NullLogger()
    validation = ValidationResult().merge(
        validate_source(source),
        validate_sheet_name(sheet_name),
        validate_header_row_index(header_row_index),
    )
    DataValidationError.raise_for("Spreadsheet read", validation)
    resolved = resolve_source(source)
    label = describe_source(source)
    try:
        workbook = load_workbook(open_source(resolved), data_only=True)
    except Exception as e:
        raise DataParseError(f"Failed to open workbook {label}: {e}") from e
    try:
        if sheet_name not in workbook.sheetnames:
            available = ", ".join(workbook.sheetnames)
            raise DataSourceNotFoundError(
                f"Sheet '{sheet_name}' not found in {label} (available: {available})"
            )
        worksheet = workbook[sheet_name]
        headers = _read_headers(worksheet, header_row_index)
        if not headers:
            raise DataSourceNotFoundError(
                f"No header values in row {header_row_index} of sheet "
                f"'{sheet_name}' in {label}"
            )
        records = _read_rows(worksheet, headers, header_row_index)
    except DataSourceNotFoundError:
        raise
    except Exception as e:
        raise DataParseError(
            f"Failed to read sheet '{sheet_name}' of {label}: {e}"
        ) from e
    finally:
        workbook.close()
    logger.log_records_loaded(f"{label} ({sheet_name})", len(records), len(headers))
    return records


def _read_headers(worksheet: Worksheet, header_row_index: int) -> list[str]:
    if header_row_index > worksheet.max_row:
        return []
    values = [cell.value for cell in worksheet[header_row_index]]
    while values and _is_blank(values[-1]):
        values.pop()
    return [
        f"{BLANK_HEADER_PREFIX}{index}" if _is_blank(value) else str(value)
        for index, value in enumerate(values, start=1)
    ]


def _read_rows(
    worksheet: Worksheet, headers: list[str], header_row_index: int
) -> list[dict[str, CellValue]]:
    records: list[dict[str, CellValue]] = []
    for row in worksheet.iter_rows(
        min_row=header_row_index + 1,
        max_row=worksheet.max_row,
        max_col=len(headers),
        values_only=True,
    ):
        padded = list(row) + [None] * (len(headers) - len(row))
        records.append(
            {header: _cell_value(value) for header, value in zip(headers, padded)}
        )
    return records


def _cell_value(value: object) -> CellValue:
    if value is None or value == "":
        return None
    return value  # type: ignore[return-value]


def _is_blank(value: object) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class SpreadsheetReader:
    pass

    def __init__(self, logger: LoggerPort | None = None) -> None:
        super().__init__()
        self._logger = logger or NullLogger()

    def read(
        self,
        source: SourceRef,
        sheet_name: str = Defaults.SHEET_NAME,
        header_row_index: int = Defaults.HEADER_ROW_INDEX,
    ) -> list[dict[str, CellValue]]:
        return read_spreadsheet(source, sheet_name, header_row_index, self._logger)
