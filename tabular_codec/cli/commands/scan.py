from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from ...infrastructure.container import DependencyContainer
from ..presenters.folders import FolderPresenter
from ..state import current_state

console = Console()


@click.command()
@click.argument(
    "root", type=click.Path(exists=True, file_okay=False, path_type=Path)
)
@click.option(
    "--load/--no-load",
    default=False,
    show_default=True,
    help="Read every importable file and report its row count",
)
@click.option("--sheet", "sheet_name", help="Sheet to read from spreadsheets")
@click.option(
    "--delimiter",
    "delimiter_char",
    help="Single separator character of delimited files",
)
def scan_command(
    root: Path, load: bool, sheet_name: str | None, delimiter_char: str | None
) -> None:
    """List the spreadsheet and delimited files under ROOT.

    With --load every file is imported, and a file that cannot be read is
    reported without stopping the others.
    """
    state = current_state()
    config = state.config
    container = DependencyContainer(verbose=state.verbose, console=console)
    presenter = FolderPresenter(console)
    if not load:
        structure = container.create_directory_scanner().scan(root)
        presenter.present_structure(root, structure)
        return
    response = container.create_import_use_case().import_folder(
        root,
        sheet_name=sheet_name or config.sheet_name,
        header_row_index=config.header_row_index,
        delimiter_char=delimiter_char or config.delimiter,
    )
    presenter.present_import(response)
    container.create_logger().log_final_stats()
    if not response.success:
        raise click.ClickException(
            response.error or "Some files could not be imported"
        )
