from typing import override

from ...application.ports.services import LoggerPort


class NullLogger(LoggerPort):
    pass

    @override
    def info(self, message: str) -> None:
        return

    @override
    def success(self, message: str) -> None:
        return

    @override
    def warning(self, message: str) -> None:
        return

    @override
    def error(self, message: str) -> None:
        return

    @override
    def debug(self, message: str) -> None:
        return

    @override
    def verbose(self, message: str) -> None:
        return

    @override
    def log_records_loaded(
        self, source: str, row_count: int, column_count: int | None = None
    ) -> None:
        return None

    @override
    def log_artifact_written(
        self, artifact: str, row_count: int, column_count: int, byte_count: int
    ) -> None:
        return None

    @override
    def log_artifact_empty(self, artifact: str, message: str) -> None:
        return None

    @override
    def log_final_stats(self) -> None:
        return None
