from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from ...application.models import ImportRecordsRequest
from ...domain.services.column_formatter import derive_columns
from ...infrastructure.container import DependencyContainer
from ..presenters.records import RecordsPresenter
from ..state import current_state

console = Console()

DEFAULT_PREVIEW_ROWS = 10


@click.command()
@click.argument(
    "source", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option("--sheet", "sheet_name", help="Sheet to read from a spreadsheet SOURCE")
@click.option(
    "--header-row",
    "header_row_index",
    type=click.IntRange(min=1),
    help="1-based header row of a spreadsheet SOURCE",
)
@click.option(
    "--delimiter",
    "delimiter_char",
    help="Single separator character of a delimited SOURCE",
)
@click.option(
    "--rows",
    "preview_rows",
    type=click.IntRange(min=0),
    default=DEFAULT_PREVIEW_ROWS,
    show_default=True,
    help="Number of rows to preview",
)
def inspect_command(
    source: Path,
    sheet_name: str | None,
    header_row_index: int | None,
    delimiter_char: str | None,
    preview_rows: int,
) -> None:
    """Show the column types and widths SOURCE would be written with."""
    state = current_state()
    config = state.config
    container = DependencyContainer(verbose=state.verbose, console=console)
    response = container.create_import_use_case().execute(
        ImportRecordsRequest(
            source=source,
            sheet_name=sheet_name or config.sheet_name,
            header_row_index=header_row_index or config.header_row_index,
            delimiter_char=delimiter_char or config.delimiter,
        )
    )
    if not response.success:
        raise click.ClickException(f"Could not read {source}: {response.error}")
    options = config.write_options()
    presenter = RecordsPresenter(console, date_format=options.date_format)
    if response.records:
        columns = derive_columns(
            response.records,
            options.column_formats,
            options.date_format,
            min_width=options.min_column_width,
            padding=options.column_padding,
        )
        presenter.present_columns(source.name, columns)
    presenter.present_preview(response, limit=preview_rows)
