from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, override

from ...application.ports.services import FilePersistencePort
from ...domain.services.validation import (
    ValidationResult,
    validate_file_data,
    validate_file_name,
)
from ..logging.null_logger import NullLogger
from .exceptions import DataValidationError, PersistenceError

if TYPE_CHECKING:
    from ...application.ports.services import LoggerPort

ENCODING = "utf-8"


class FilePersistence(FilePersistencePort):
    """Store a named artifact inside a target directory.

    The directory is created when missing, and the final path must stay
    inside it; names such as ``../x.csv`` are rejected before anything is
    written.
    """

    def __init__(self, logger: LoggerPort | None = None) -> None:
        super().__init__()
        self._logger = logger or NullLogger()

    @override
    def persist(self, name: str, data: bytes | str, directory: str | Path) -> Path:
        validation = ValidationResult().merge(
            validate_file_name(name),
            validate_file_data(data),
        )
        DataValidationError.raise_for("File persistence", validation)
        base = Path(directory).resolve()
        target = (base / name).resolve()
        if not target.is_relative_to(base):
            raise PersistenceError(
                f"Refusing to write outside {base}: path traversal detected"
            )
        payload = data.encode(ENCODING) if isinstance(data, str) else bytes(data)
        try:
            base.mkdir(parents=True, exist_ok=True)
            target.write_bytes(payload)
        except OSError as e:
            raise PersistenceError(f"Failed to write {target}: {e}") from e
        self._logger.verbose(f"Saved {len(payload):,} bytes to {target}")
        return target
