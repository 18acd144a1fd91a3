from __future__ import annotations

from io import BytesIO
from pathlib import Path
from typing import TYPE_CHECKING

from .exceptions import DataSourceNotFoundError

if TYPE_CHECKING:
    from ...application.models import SourceRef


def describe_source(source: SourceRef) -> str:
    if isinstance(source, (bytes, bytearray)):
        return f"<{len(source):,} bytes in memory>"
    return str(source)


def resolve_source(source: SourceRef) -> Path | bytes:
    """Return a checked path, or the raw bytes of an in-memory source.

    Raises:
        DataSourceNotFoundError: If a path source is missing or not a file.
    """
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)
    path = Path(source)
    if not path.exists():
        raise DataSourceNotFoundError(f"File not found: {path}")
    if not path.is_file():
        raise DataSourceNotFoundError(f"Not a file: {path}")
    return path


def open_source(resolved: Path | bytes) -> Path | BytesIO:
    if isinstance(resolved, bytes):
        return BytesIO(resolved)
    return resolved
