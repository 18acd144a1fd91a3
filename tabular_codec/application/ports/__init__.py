"""Port interfaces for external dependencies.

This module defines abstract interfaces (protocols) that adapters must
implement, so use cases can be wired with real codecs or test doubles.
"""

from .services import (
    DelimitedReaderPort,
    DelimitedWriterPort,
    DirectoryScannerPort,
    FilePersistencePort,
    LoggerPort,
    SpreadsheetReaderPort,
    SpreadsheetWriterPort,
)

__all__ = [
    "DelimitedReaderPort",
    "DelimitedWriterPort",
    "DirectoryScannerPort",
    "FilePersistencePort",
    "LoggerPort",
    "SpreadsheetReaderPort",
    "SpreadsheetWriterPort",
]
