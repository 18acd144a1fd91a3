from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...domain.services.validation import ValidationResult


class TabularCodecError(Exception):
    pass


class DataSourceError(TabularCodecError):
    pass


class DataSourceNotFoundError(DataSourceError):
    pass


class DataParseError(DataSourceError):
    pass


class DataValidationError(TabularCodecError):
    def __init__(self, operation: str, errors: dict[str, list[str]]) -> None:
        self.operation = operation
        self.errors = errors
        details = "; ".join(
            f"{key}: {', '.join(messages)}" for key, messages in errors.items()
        )
        super().__init__(f"{operation} validation failed: {details}")

    @classmethod
    def raise_for(cls, operation: str, result: ValidationResult) -> None:
        if result.is_error:
            raise cls(operation, dict(result.errors))


class SerializationError(TabularCodecError):
    pass


class PersistenceError(TabularCodecError):
    pass
