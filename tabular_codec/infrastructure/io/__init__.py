"""Infrastructure I/O layer.

Adapters for producing and parsing tabular artifacts (spreadsheet and
delimited text), storing them, and discovering them on disk.

Internal modules should import from the defining modules, not from here.
"""

from .delimited_reader import DelimitedReader, read_delimited
from .delimited_writer import DelimitedWriter, write_delimited
from .directory_scanner import DirectoryScanner
from .exceptions import (
    DataParseError,
    DataSourceError,
    DataSourceNotFoundError,
    DataValidationError,
    PersistenceError,
    SerializationError,
    TabularCodecError,
)
from .file_persistence import FilePersistence
from .spreadsheet_reader import SpreadsheetReader, read_spreadsheet
from .spreadsheet_writer import SpreadsheetWriter, write_spreadsheet

__all__ = [
    "DataParseError",
    "DataSourceError",
    "DataSourceNotFoundError",
    "DataValidationError",
    "DelimitedReader",
    "DelimitedWriter",
    "DirectoryScanner",
    "FilePersistence",
    "PersistenceError",
    "SerializationError",
    "SpreadsheetReader",
    "SpreadsheetWriter",
    "TabularCodecError",
    "read_delimited",
    "read_spreadsheet",
    "write_delimited",
    "write_spreadsheet",
]
