"""Convert command - read one tabular file and write it in another format.

The command is a thin adapter: it builds an import request and an export
request from the CLI arguments, runs both use cases, and prints the result.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import TYPE_CHECKING, cast

import click
from rich.console import Console

from ...application.export_use_case import artifact_file_name
from ...application.models import ExportRecordsRequest, ImportRecordsRequest
from ...domain.entities.records import COLUMN_TYPES
from ...infrastructure.container import DependencyContainer
from ..presenters.records import RecordsPresenter
from ..state import current_state

if TYPE_CHECKING:
    from ...application.models import ArtifactFormat

console = Console()


@dataclass(frozen=True)
class ConvertCommandOptions:
    artifact_format: ArtifactFormat
    output_dir: Path | None
    file_name: str | None
    sheet_name: str | None
    header_row_index: int | None
    source_delimiter: str | None
    delimiter: str | None
    date_format: str | None
    column_formats: dict[str, str]

    @classmethod
    def from_kwargs(cls, options: dict[str, object]) -> ConvertCommandOptions:
        return cls(
            artifact_format=cast("ArtifactFormat", options["artifact_format"]),
            output_dir=cast("Path | None", options.get("output_dir")),
            file_name=cast("str | None", options.get("file_name")),
            sheet_name=cast("str | None", options.get("sheet_name")),
            header_row_index=cast("int | None", options.get("header_row_index")),
            source_delimiter=cast("str | None", options.get("source_delimiter")),
            delimiter=cast("str | None", options.get("delimiter")),
            date_format=cast("str | None", options.get("date_format")),
            column_formats=cast("dict[str, str]", options.get("column_formats") or {}),
        )


def parse_column_formats(
    ctx: click.Context, param: click.Parameter, values: tuple[str, ...]
) -> dict[str, str]:
    formats: dict[str, str] = {}
    for value in values:
        name, sep, tag = value.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(
                f"expected NAME=TYPE, got {value!r}", ctx=ctx, param=param
            )
        if tag.strip().lower() not in COLUMN_TYPES:
            raise click.BadParameter(
                f"unknown type {tag!r} for column {name!r}; "
                "expected text, date or number",
                ctx=ctx,
                param=param,
            )
        formats[name.strip()] = tag.strip().lower()
    return formats


@click.command()
@click.argument(
    "source", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option(
    "--to",
    "artifact_format",
    type=click.Choice(["xlsx", "csv"]),
    required=True,
    help="Output format: xlsx (spreadsheet) or csv (delimited text)",
)
@click.option(
    "--output-dir",
    "output_dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory for the converted file (default: next to SOURCE)",
)
@click.option(
    "--name",
    "file_name",
    help="Output file name; the format suffix is added when missing "
    "(default: SOURCE name)",
)
@click.option("--sheet", "sheet_name", help="Sheet to read from a spreadsheet SOURCE")
@click.option(
    "--header-row",
    "header_row_index",
    type=click.IntRange(min=1),
    help="1-based header row of a spreadsheet SOURCE",
)
@click.option(
    "--source-delimiter",
    "source_delimiter",
    help="Single separator character of a delimited SOURCE",
)
@click.option(
    "--delimiter",
    type=click.Choice([",", ";", "|"]),
    help="Separator for csv output",
)
@click.option("--date-format", "date_format", help="Date format code, e.g. mm/dd/yyyy")
@click.option(
    "--column-format",
    "column_formats",
    multiple=True,
    callback=parse_column_formats,
    help="Force a column type, as NAME=text|date|number (repeatable)",
)
def convert_command(source: Path, **options: object) -> None:
    """Convert SOURCE between spreadsheet and delimited text.

    Values read from delimited text are strings; use --column-format to store
    them as dates or numbers in a spreadsheet.

    Examples:

    \b
        tabular-codec convert visits.csv --to xlsx
        tabular-codec convert visits.xlsx --to csv --delimiter ";"
        tabular-codec convert visits.csv --to xlsx --column-format visit=date
    """
    command_options = ConvertCommandOptions.from_kwargs(dict(options))
    state = current_state()
    config = state.config
    container = DependencyContainer(verbose=state.verbose, console=console)
    imported = container.create_import_use_case().execute(
        ImportRecordsRequest(
            source=source,
            sheet_name=command_options.sheet_name or config.sheet_name,
            header_row_index=(
                command_options.header_row_index or config.header_row_index
            ),
            delimiter_char=command_options.source_delimiter or config.delimiter,
        )
    )
    if not imported.success:
        raise click.ClickException(f"Could not read {source}: {imported.error}")
    target_dir = command_options.output_dir or source.parent
    target_name = command_options.file_name or source.stem
    target = target_dir / artifact_file_name(
        target_name, command_options.artifact_format
    )
    if target.resolve() == source.resolve():
        raise click.ClickException(
            f"Converting {source.name} would overwrite it; pass --name or --output-dir"
        )
    write_options = config.write_options(command_options.column_formats)
    if command_options.date_format:
        write_options = replace(
            write_options, date_format=command_options.date_format
        )
    response = container.create_export_use_case().execute(
        ExportRecordsRequest(
            records=imported.records,
            file_name=target_name,
            output_dir=target_dir,
            artifact_format=command_options.artifact_format,
            delimiter=command_options.delimiter or config.delimiter,
            options=write_options,
        )
    )
    if not response.success:
        raise click.ClickException(f"Could not write output: {response.error}")
    presenter = RecordsPresenter(console, date_format=write_options.date_format)
    presenter.present_export(response)
