from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import traceback
from typing import TYPE_CHECKING

from ..constants import LogLevels
from ..domain.entities.records import EmptyInput, field_order
from .models import ExportRecordsResponse

if TYPE_CHECKING:
    from .models import ExportRecordsRequest
    from .ports.services import (
        DelimitedWriterPort,
        FilePersistencePort,
        LoggerPort,
        SpreadsheetWriterPort,
    )

ARTIFACT_SUFFIXES = {"xlsx": ".xlsx", "csv": ".csv"}


@dataclass(slots=True)
class ExportRecordsDependencies:
    logger: LoggerPort
    spreadsheet_writer: SpreadsheetWriterPort
    delimited_writer: DelimitedWriterPort
    file_persistence: FilePersistencePort


class ExportRecordsUseCase:
    """Turn a RecordSet into a stored artifact.

    The records are serialized with the writer for the requested format and the
    bytes are handed to the persistence adapter. An empty RecordSet is not a
    failure: the response carries the writer's message and nothing is stored.
    """

    def __init__(
        self, dependencies: ExportRecordsDependencies, *, verbose: int = 0
    ) -> None:
        super().__init__()
        self.logger = dependencies.logger
        self._spreadsheet_writer = dependencies.spreadsheet_writer
        self._delimited_writer = dependencies.delimited_writer
        self._file_persistence = dependencies.file_persistence
        self._verbose = verbose

    def execute(self, request: ExportRecordsRequest) -> ExportRecordsResponse:
        response = ExportRecordsResponse()
        try:
            artifact = self._serialize(request)
            response.row_count = len(request.records)
            response.columns = field_order(request.records)
            if isinstance(artifact, EmptyInput):
                response.empty_message = artifact.message
                self.logger.warning(f"{request.file_name}: {artifact.message}")
                return response
            file_name = artifact_file_name(request.file_name, request.artifact_format)
            response.output_path = self._file_persistence.persist(
                file_name, artifact, request.output_dir
            )
            response.byte_count = len(artifact)
            self.logger.success(
                f"Exported {response.row_count:,} records to {response.output_path}"
            )
        except Exception as exc:
            response.success = False
            response.error = str(exc)
            self.logger.error(f"{request.file_name}: {exc}")
            if self._verbose >= LogLevels.DEBUG:
                self.logger.error(traceback.format_exc())
        return response

    def _serialize(self, request: ExportRecordsRequest) -> bytes | EmptyInput:
        if request.artifact_format == "xlsx":
            return self._spreadsheet_writer.write(request.records, request.options)
        if request.artifact_format == "csv":
            return self._delimited_writer.write(
                request.records, request.delimiter, request.options
            )
        raise ValueError(f"Unsupported artifact format: {request.artifact_format!r}")


def artifact_file_name(file_name: str, artifact_format: str) -> str:
    suffix = ARTIFACT_SUFFIXES[artifact_format]
    if Path(file_name).suffix.lower() == suffix:
        return file_name
    return f"{file_name}{suffix}"
