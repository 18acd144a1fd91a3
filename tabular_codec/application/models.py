from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from ..constants import Defaults
from ..domain.entities.columns import WriteOptions

if TYPE_CHECKING:
    from ..domain.entities.records import CellValue, RecordSet

SourceRef: TypeAlias = str | Path | bytes
ArtifactFormat: TypeAlias = Literal["xlsx", "csv"]


def _empty_str_list() -> list[str]:
    return []


def _empty_file_items() -> list[FileItem]:
    return []


def _empty_records() -> list[dict[str, CellValue]]:
    return []


def _empty_import_responses() -> list[ImportRecordsResponse]:
    return []


@dataclass(frozen=True, slots=True)
class FileItem:
    name: str
    full_path: Path
    relative_path: str
    is_directory: bool
    depth: int


@dataclass(slots=True)
class FolderStructure:
    files: list[FileItem] = field(default_factory=_empty_file_items)
    folders: list[FileItem] = field(default_factory=_empty_file_items)
    folder_paths: list[str] = field(default_factory=_empty_str_list)


@dataclass(slots=True)
class ExportRecordsRequest:
    records: RecordSet
    file_name: str
    output_dir: Path
    artifact_format: ArtifactFormat = "xlsx"
    delimiter: str = Defaults.DELIMITER
    options: WriteOptions = field(default_factory=WriteOptions)


@dataclass(slots=True)
class ExportRecordsResponse:
    success: bool = True
    output_path: Path | None = None
    byte_count: int = 0
    row_count: int = 0
    columns: list[str] = field(default_factory=_empty_str_list)
    empty_message: str | None = None
    error: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.empty_message is not None


@dataclass(slots=True)
class ImportRecordsRequest:
    source: Path
    sheet_name: str = Defaults.SHEET_NAME
    header_row_index: int = Defaults.HEADER_ROW_INDEX
    delimiter_char: str = Defaults.DELIMITER


@dataclass(slots=True)
class ImportRecordsResponse:
    source: Path
    success: bool = True
    records: list[dict[str, CellValue]] = field(default_factory=_empty_records)
    columns: list[str] = field(default_factory=_empty_str_list)
    error: str | None = None

    @property
    def row_count(self) -> int:
        return len(self.records)


@dataclass(slots=True)
class FolderImportResponse:
    root: Path
    imports: list[ImportRecordsResponse] = field(
        default_factory=_empty_import_responses
    )
    skipped: list[str] = field(default_factory=_empty_str_list)
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.error is None and all(
            response.success for response in self.imports
        )

    @property
    def total_records(self) -> int:
        return sum(response.row_count for response in self.imports)
