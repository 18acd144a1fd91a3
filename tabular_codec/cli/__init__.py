from pathlib import Path

import click

from ..config import ConfigLoader
from .commands.convert import convert_command
from .commands.inspect import inspect_command
from .commands.scan import scan_command
from .state import CliState


@click.group()
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to a tabular_codec.toml config file (default: ./tabular_codec.toml)",
)
@click.option(
    "-v", "--verbose", count=True, help="Increase verbosity level (e.g., -v, -vv)"
)
@click.pass_context
def app(ctx: click.Context, config_file: Path | None, verbose: int) -> None:
    """Convert records between spreadsheet and delimited text files."""
    try:
        config = ConfigLoader.load(config_file=config_file)
    except ValueError as e:
        raise click.UsageError(f"Invalid configuration: {e}") from e
    ctx.obj = CliState(config=config, verbose=verbose)


app.add_command(convert_command, name="convert")
app.add_command(inspect_command, name="inspect")
app.add_command(scan_command, name="scan")
__all__ = ["app"]
