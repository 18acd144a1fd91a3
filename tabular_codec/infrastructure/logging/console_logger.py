from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import override

from rich.console import Console
from rich.markup import escape

from ...application.ports.services import LoggerPort


class LogLevel(IntEnum):
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2


@dataclass(slots=True)
class LogContext:
    source: str = ""
    artifact: str = ""


class ConsoleLogger(LoggerPort):
    pass

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        super().__init__()
        self.console = console or Console()
        self.verbosity = verbosity
        self._context: LogContext | None = None
        self._stats: dict[str, int] = {
            "files_read": 0,
            "artifacts_written": 0,
            "records_processed": 0,
            "warnings": 0,
            "errors": 0,
        }

    def set_context(self, **kwargs: str) -> None:
        if self._context is None:
            self._context = LogContext()
        for key, value in kwargs.items():
            if hasattr(self._context, key):
                setattr(self._context, key, value)

    @override
    def info(self, message: str, *, level: int = LogLevel.NORMAL) -> None:
        if self.verbosity >= level:
            prefix = self._get_prefix()
            self.console.print(f"{prefix}{message}")

    @override
    def verbose(self, message: str) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            prefix = self._get_prefix()
            self.console.print(f"[dim]{prefix}{message}[/dim]")

    @override
    def debug(self, message: str) -> None:
        if self.verbosity >= LogLevel.DEBUG:
            prefix = self._get_prefix()
            self.console.print(f"[dim cyan]{prefix}{message}[/dim cyan]")

    @override
    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    @override
    def warning(self, message: str) -> None:
        self._stats["warnings"] += 1
        self.console.print(f"[yellow]⚠[/yellow] {message}")

    @override
    def error(self, message: str) -> None:
        self._stats["errors"] += 1
        self.console.print(f"[red]✗[/red] {message}")

    @override
    def log_records_loaded(
        self, source: str, row_count: int, column_count: int | None = None
    ) -> None:
        self.set_context(source=source)
        self._stats["files_read"] += 1
        self._stats["records_processed"] += row_count
        msg = f"Loaded {row_count:,} records from {source}"
        if column_count is not None and self.verbosity >= LogLevel.DEBUG:
            msg += f" ({column_count} columns)"
        self.verbose(msg)

    @override
    def log_artifact_written(
        self, artifact: str, row_count: int, column_count: int, byte_count: int
    ) -> None:
        self.set_context(artifact=artifact)
        self._stats["artifacts_written"] += 1
        self._stats["records_processed"] += row_count
        self.verbose(
            f"Wrote {artifact}: {row_count:,} rows x {column_count} columns "
            f"({byte_count:,} bytes)"
        )

    @override
    def log_artifact_empty(self, artifact: str, message: str) -> None:
        self.info(f"[yellow]{artifact}[/yellow]: {message}")

    @override
    def log_final_stats(self) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            self.console.print()
            self.console.print("[dim]Codec Statistics:[/dim]")
            self.console.print(f"[dim]  Files read: {self._stats['files_read']}[/dim]")
            self.console.print(
                f"[dim]  Artifacts written: {self._stats['artifacts_written']}[/dim]"
            )
            self.console.print(
                f"[dim]  Total records: {self._stats['records_processed']:,}[/dim]"
            )
            if self._stats["warnings"] > 0:
                self.console.print(
                    f"[dim yellow]  Warnings: {self._stats['warnings']}[/dim yellow]"
                )
            if self._stats["errors"] > 0:
                self.console.print(
                    f"[dim red]  Errors: {self._stats['errors']}[/dim red]"
                )

    def get_stats(self) -> dict[str, int]:
        return self._stats.copy()

    def _get_prefix(self) -> str:
        if self._context is None or self.verbosity < LogLevel.DEBUG:
            return ""
        context = self._context
        parts = [part for part in (context.source, context.artifact) if part]
        return escape(f"[{':'.join(parts)}] ") if parts else ""
