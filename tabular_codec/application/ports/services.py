from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from ...domain.entities.columns import WriteOptions
    from ...domain.entities.records import CellValue, EmptyInput, RecordSet
    from ..models import FolderStructure, SourceRef


@runtime_checkable
class LoggerPort(Protocol):
    pass

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def verbose(self, message: str) -> None: ...

    def log_records_loaded(
        self, source: str, row_count: int, column_count: int | None = None
    ) -> None: ...

    def log_artifact_written(
        self, artifact: str, row_count: int, column_count: int, byte_count: int
    ) -> None: ...

    def log_artifact_empty(self, artifact: str, message: str) -> None: ...

    def log_final_stats(self) -> None: ...


@runtime_checkable
class SpreadsheetWriterPort(Protocol):
    pass

    def write(
        self, records: RecordSet, options: WriteOptions | None = None
    ) -> bytes | EmptyInput: ...


@runtime_checkable
class DelimitedWriterPort(Protocol):
    pass

    def write(
        self,
        records: RecordSet,
        delimiter: str = ",",
        options: WriteOptions | None = None,
    ) -> bytes | EmptyInput: ...


@runtime_checkable
class SpreadsheetReaderPort(Protocol):
    pass

    def read(
        self, source: SourceRef, sheet_name: str, header_row_index: int = 1
    ) -> list[dict[str, CellValue]]: ...


@runtime_checkable
class DelimitedReaderPort(Protocol):
    pass

    def read(
        self, source: SourceRef, delimiter_char: str = ","
    ) -> list[dict[str, str]]: ...


@runtime_checkable
class FilePersistencePort(Protocol):
    pass

    def persist(
        self, name: str, data: bytes | str, directory: str | Path
    ) -> Path: ...


@runtime_checkable
class DirectoryScannerPort(Protocol):
    pass

    def scan(self, root: str | Path) -> FolderStructure: ...
