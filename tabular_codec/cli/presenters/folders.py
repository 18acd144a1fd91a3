from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

from ...application.import_use_case import is_importable

if TYPE_CHECKING:
    from pathlib import Path

    from rich.console import Console

    from ...application.models import FolderImportResponse, FolderStructure


def _display_path(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root.resolve()).as_posix()
    except ValueError:
        return str(path)


class FolderPresenter:
    pass

    def __init__(self, console: Console) -> None:
        super().__init__()
        self.console = console

    def present_structure(self, root: Path, structure: FolderStructure) -> None:
        table = Table(
            title=f"Importable files under {escape(str(root))}",
            show_header=True,
            header_style="bold cyan",
            border_style="bright_blue",
        )
        table.add_column("File", style="cyan", overflow="fold")
        table.add_column("Kind", no_wrap=True)
        table.add_column("Depth", justify="right", style="dim", no_wrap=True)
        importable = [item for item in structure.files if is_importable(item.full_path)]
        for item in importable:
            table.add_row(
                escape(item.relative_path),
                item.full_path.suffix.lower().lstrip("."),
                str(item.depth),
            )
        self.console.print(table)
        self.console.print(
            f"{len(importable)} importable of {len(structure.files)} files "
            f"in {len(structure.folder_paths)} folder(s)"
        )

    def present_import(self, response: FolderImportResponse) -> None:
        table = Table(
            title=f"Imported from {escape(str(response.root))}",
            show_header=True,
            header_style="bold cyan",
            border_style="bright_blue",
        )
        table.add_column("File", style="cyan", overflow="fold")
        table.add_column("Rows", justify="right", style="yellow", no_wrap=True)
        table.add_column("Columns", justify="right", no_wrap=True)
        table.add_column("Status", overflow="fold")
        for result in response.imports:
            status = (
                "[green]✓[/green]"
                if result.success
                else f"[red]{escape(result.error or '')}[/red]"
            )
            table.add_row(
                escape(_display_path(result.source, response.root)),
                f"{result.row_count:,}",
                str(len(result.columns)),
                status,
            )
        table.add_section()
        table.add_row(
            "[bold]Total[/bold]", f"[bold]{response.total_records:,}[/bold]", "", ""
        )
        self.console.print(table)
        if response.skipped:
            self.console.print(
                f"[dim]Skipped {len(response.skipped)} other file(s)[/dim]"
            )
