"""Tabular codec package.

This package converts ordered records to and from tabular artifacts:

- Spreadsheet (.xlsx) files with typed date, number and text cells
- Delimited text (.csv) files in UTF-8
- Shared type inference, so IDs such as ``2024-01`` stay text
- Column metadata (type, format code, display width) for both writers
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("tabular-codec")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

# Core exports
from tabular_codec.domain.entities.columns import ColumnSpec, HeaderStyle, WriteOptions
from tabular_codec.domain.entities.records import EmptyInput, TypeTag
from tabular_codec.domain.services.column_formatter import derive_columns
from tabular_codec.domain.services.type_inference import infer
from tabular_codec.infrastructure.io.delimited_reader import read_delimited
from tabular_codec.infrastructure.io.delimited_writer import write_delimited
from tabular_codec.infrastructure.io.spreadsheet_reader import read_spreadsheet
from tabular_codec.infrastructure.io.spreadsheet_writer import write_spreadsheet

__all__ = [
    "__version__",
    # Writers
    "write_delimited",
    "write_spreadsheet",
    # Readers
    "read_delimited",
    "read_spreadsheet",
    # Column metadata
    "ColumnSpec",
    "EmptyInput",
    "HeaderStyle",
    "TypeTag",
    "WriteOptions",
    "derive_columns",
    "infer",
]
