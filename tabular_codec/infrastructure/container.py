from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

from ..application.export_use_case import (
    ExportRecordsDependencies,
    ExportRecordsUseCase,
)
from ..application.import_use_case import (
    ImportRecordsDependencies,
    ImportRecordsUseCase,
)
from .io.delimited_reader import DelimitedReader
from .io.delimited_writer import DelimitedWriter
from .io.directory_scanner import DirectoryScanner
from .io.file_persistence import FilePersistence
from .io.spreadsheet_reader import SpreadsheetReader
from .io.spreadsheet_writer import SpreadsheetWriter
from .logging.console_logger import ConsoleLogger
from .logging.null_logger import NullLogger

if TYPE_CHECKING:
    from ..application.ports.services import (
        DelimitedReaderPort,
        DelimitedWriterPort,
        DirectoryScannerPort,
        FilePersistencePort,
        LoggerPort,
        SpreadsheetReaderPort,
        SpreadsheetWriterPort,
    )


class DependencyContainer:
    pass

    def __init__(
        self,
        verbose: int = 0,
        console: Console | None = None,
        use_null_logger: bool = False,
    ) -> None:
        super().__init__()
        self.verbose = verbose
        self.console = console or Console()
        self.use_null_logger = use_null_logger
        self._logger_instance: LoggerPort | None = None
        self._spreadsheet_writer_instance: SpreadsheetWriterPort | None = None
        self._delimited_writer_instance: DelimitedWriterPort | None = None
        self._spreadsheet_reader_instance: SpreadsheetReaderPort | None = None
        self._delimited_reader_instance: DelimitedReaderPort | None = None
        self._file_persistence_instance: FilePersistencePort | None = None
        self._directory_scanner_instance: DirectoryScannerPort | None = None

    def create_logger(self) -> LoggerPort:
        if self._logger_instance is None:
            if self.use_null_logger:
                self._logger_instance = NullLogger()
            else:
                self._logger_instance = ConsoleLogger(
                    console=self.console, verbosity=self.verbose
                )
        return self._logger_instance

    def create_spreadsheet_writer(self) -> SpreadsheetWriterPort:
        if self._spreadsheet_writer_instance is None:
            self._spreadsheet_writer_instance = SpreadsheetWriter(
                logger=self.create_logger()
            )
        return self._spreadsheet_writer_instance

    def create_delimited_writer(self) -> DelimitedWriterPort:
        if self._delimited_writer_instance is None:
            self._delimited_writer_instance = DelimitedWriter(
                logger=self.create_logger()
            )
        return self._delimited_writer_instance

    def create_spreadsheet_reader(self) -> SpreadsheetReaderPort:
        if self._spreadsheet_reader_instance is None:
            self._spreadsheet_reader_instance = SpreadsheetReader(
                logger=self.create_logger()
            )
        return self._spreadsheet_reader_instance

    def create_delimited_reader(self) -> DelimitedReaderPort:
        if self._delimited_reader_instance is None:
            self._delimited_reader_instance = DelimitedReader(
                logger=self.create_logger()
            )
        return self._delimited_reader_instance

    def create_file_persistence(self) -> FilePersistencePort:
        if self._file_persistence_instance is None:
            self._file_persistence_instance = FilePersistence(
                logger=self.create_logger()
            )
        return self._file_persistence_instance

    def create_directory_scanner(self) -> DirectoryScannerPort:
        if self._directory_scanner_instance is None:
            self._directory_scanner_instance = DirectoryScanner(
                logger=self.create_logger()
            )
        return self._directory_scanner_instance

    def create_export_use_case(self) -> ExportRecordsUseCase:
        dependencies = ExportRecordsDependencies(
            logger=self.create_logger(),
            spreadsheet_writer=self.create_spreadsheet_writer(),
            delimited_writer=self.create_delimited_writer(),
            file_persistence=self.create_file_persistence(),
        )
        return ExportRecordsUseCase(dependencies, verbose=self.verbose)

    def create_import_use_case(self) -> ImportRecordsUseCase:
        dependencies = ImportRecordsDependencies(
            logger=self.create_logger(),
            spreadsheet_reader=self.create_spreadsheet_reader(),
            delimited_reader=self.create_delimited_reader(),
            directory_scanner=self.create_directory_scanner(),
        )
        return ImportRecordsUseCase(dependencies, verbose=self.verbose)

    def reset_singletons(self) -> None:
        self._logger_instance = None
        self._spreadsheet_writer_instance = None
        self._delimited_writer_instance = None
        self._spreadsheet_reader_instance = None
        self._delimited_reader_instance = None
        self._file_persistence_instance = None
        self._directory_scanner_instance = None

    def override_logger(self, logger: LoggerPort) -> None:
        self._logger_instance = logger

    def override_file_persistence(self, persistence: FilePersistencePort) -> None:
        self._file_persistence_instance = persistence

    def override_directory_scanner(self, scanner: DirectoryScannerPort) -> None:
        self._directory_scanner_instance = scanner


def create_default_container(verbose: int = 0) -> DependencyContainer:
    return DependencyContainer(verbose=verbose)
