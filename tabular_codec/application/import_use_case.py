from __future__ import annotations

from dataclasses import dataclass
import traceback
from typing import TYPE_CHECKING

from ..constants import Defaults, FileKinds, LogLevels
from .models import FolderImportResponse, ImportRecordsRequest, ImportRecordsResponse

if TYPE_CHECKING:
    from pathlib import Path

    from ..domain.entities.records import CellValue
    from .ports.services import (
        DelimitedReaderPort,
        DirectoryScannerPort,
        LoggerPort,
        SpreadsheetReaderPort,
    )

TAB_SEPARATED_SUFFIX = ".tsv"
LOCK_FILE_PREFIX = "~$"
SUPPORTED_SUFFIXES = FileKinds.SPREADSHEET_SUFFIXES + FileKinds.DELIMITED_SUFFIXES


def is_importable(path: Path) -> bool:
    if path.name.startswith(LOCK_FILE_PREFIX):
        return False
    return path.suffix.lower() in SUPPORTED_SUFFIXES


@dataclass(slots=True)
class ImportRecordsDependencies:
    logger: LoggerPort
    spreadsheet_reader: SpreadsheetReaderPort
    delimited_reader: DelimitedReaderPort
    directory_scanner: DirectoryScannerPort


class ImportRecordsUseCase:
    pass

    def __init__(
        self, dependencies: ImportRecordsDependencies, *, verbose: int = 0
    ) -> None:
        super().__init__()
        self.logger = dependencies.logger
        self._spreadsheet_reader = dependencies.spreadsheet_reader
        self._delimited_reader = dependencies.delimited_reader
        self._directory_scanner = dependencies.directory_scanner
        self._verbose = verbose

    def execute(self, request: ImportRecordsRequest) -> ImportRecordsResponse:
        response = ImportRecordsResponse(source=request.source)
        try:
            records = self._read(request)
            response.records = records
            response.columns = list(records[0]) if records else []
            self.logger.info(
                f"Loaded {request.source.name}: {response.row_count:,} rows, "
                f"{len(response.columns)} columns"
            )
        except Exception as exc:
            response.success = False
            response.error = str(exc)
            self.logger.error(f"{request.source}: {exc}")
            if self._verbose >= LogLevels.DEBUG:
                self.logger.error(traceback.format_exc())
        return response

    def import_folder(
        self,
        root: Path,
        *,
        sheet_name: str = Defaults.SHEET_NAME,
        header_row_index: int = Defaults.HEADER_ROW_INDEX,
        delimiter_char: str = Defaults.DELIMITER,
    ) -> FolderImportResponse:
        """Import every spreadsheet and delimited file below ``root``.

        Files with other suffixes, and spreadsheet lock files, are listed in
        ``skipped``. A file that fails to import does not stop the others; its
        error is kept on its own response.
        """
        response = FolderImportResponse(root=root)
        try:
            structure = self._directory_scanner.scan(root)
        except Exception as exc:
            response.error = str(exc)
            self.logger.error(f"{root}: {exc}")
            return response
        for item in structure.files:
            if not is_importable(item.full_path):
                response.skipped.append(item.relative_path)
                self.logger.debug(f"Skipping {item.relative_path}")
                continue
            request = ImportRecordsRequest(
                source=item.full_path,
                sheet_name=sheet_name,
                header_row_index=header_row_index,
                delimiter_char=delimiter_char,
            )
            response.imports.append(self.execute(request))
        self.logger.verbose(
            f"Imported {len(response.imports)} file(s) from {root} "
            f"({response.total_records:,} records, {len(response.skipped)} skipped)"
        )
        return response

    def _read(self, request: ImportRecordsRequest) -> list[dict[str, CellValue]]:
        suffix = request.source.suffix.lower()
        if suffix in FileKinds.SPREADSHEET_SUFFIXES:
            return self._spreadsheet_reader.read(
                request.source, request.sheet_name, request.header_row_index
            )
        if suffix in FileKinds.DELIMITED_SUFFIXES:
            delimiter_char = request.delimiter_char
            if suffix == TAB_SEPARATED_SUFFIX and delimiter_char == Defaults.DELIMITER:
                delimiter_char = "\t"
            rows = self._delimited_reader.read(request.source, delimiter_char)
            records: list[dict[str, CellValue]] = [dict(row) for row in rows]
            return records
        raise ValueError(
            f"Unsupported file type '{suffix or request.source.name}'; "
            f"expected one of {', '.join(SUPPORTED_SUFFIXES)}"
        )
