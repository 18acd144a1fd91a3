from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

from ...domain.entities.records import TypeTag
from ...domain.services.date_formatting import format_date
from ...domain.services.type_inference import is_missing

if TYPE_CHECKING:
    from collections.abc import Sequence

    from rich.console import Console

    from ...application.models import ExportRecordsResponse, ImportRecordsResponse
    from ...domain.entities.columns import ColumnSpec
    from ...domain.entities.records import CellValue

TYPE_STYLES = {
    TypeTag.TEXT: "white",
    TypeTag.DATE: "magenta",
    TypeTag.NUMBER: "yellow",
}
NULL_MARKER = "[dim]∅[/dim]"


class RecordsPresenter:
    pass

    def __init__(self, console: Console, *, date_format: str) -> None:
        super().__init__()
        self.console = console
        self.date_format = date_format

    def present_columns(self, source: str, columns: Sequence[ColumnSpec]) -> None:
        table = Table(
            title=f"Columns of {escape(source)}",
            show_header=True,
            header_style="bold cyan",
            border_style="bright_blue",
        )
        table.add_column("#", justify="right", style="dim", no_wrap=True)
        table.add_column("Name", style="cyan", overflow="fold")
        table.add_column("Type", no_wrap=True)
        table.add_column("Format", style="dim", no_wrap=True)
        table.add_column("Width", justify="right", style="yellow", no_wrap=True)
        for index, spec in enumerate(columns, start=1):
            style = TYPE_STYLES.get(spec.type, "white")
            table.add_row(
                str(index),
                escape(spec.name),
                f"[{style}]{spec.type.value}[/{style}]",
                spec.format_string or "General",
                str(spec.width),
            )
        self.console.print(table)

    def present_preview(
        self, response: ImportRecordsResponse, *, limit: int
    ) -> None:
        if not response.records:
            self.console.print(
                f"[yellow]{escape(response.source.name)} has no data rows[/yellow]"
            )
            return
        shown = response.records[:limit]
        table = Table(
            title=f"First {len(shown)} of {response.row_count:,} rows",
            show_header=True,
            header_style="bold cyan",
        )
        for column in response.columns:
            table.add_column(escape(column), overflow="fold")
        for record in shown:
            table.add_row(
                *(self._cell(record.get(column)) for column in response.columns)
            )
        self.console.print(table)

    def present_export(self, response: ExportRecordsResponse) -> None:
        if response.is_empty:
            message = escape(response.empty_message or "")
            self.console.print(f"[yellow]⚠[/yellow] {message}")
            return
        output_path = escape(str(response.output_path))
        self.console.print(
            f"[green]✓[/green] Wrote {response.row_count:,} rows x "
            f"{len(response.columns)} columns to {output_path} "
            f"({response.byte_count:,} bytes)"
        )

    def _cell(self, value: CellValue) -> str:
        if is_missing(value):
            return NULL_MARKER
        if isinstance(value, date):
            return format_date(value, self.date_format)
        return escape(str(value))
