"""debindices: inspect Debian/Ubuntu Packages indices from the command line."""

import json
import logging
import lzma
import sys
from enum import Enum
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from debindices.compression import open_index, wrap_stream
from debindices.constants import DEFAULT_KEY_FIELD, FIELD_SPECS, LOG_LEVEL
from debindices.errors import DebIndicesError
from debindices.models import Package
from debindices.parser import parse

logger = logging.getLogger(__name__)

cli = typer.Typer(no_args_is_help=True)
console = Console()
err_console = Console(stderr=True)


class OutputFormat(str, Enum):
    TABLE = "table"
    JSON = "json"


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True)],
    )


@cli.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Parse Debian/Ubuntu binary package indices."""
    _setup_logging("DEBUG" if verbose else LOG_LEVEL)


def _render_table(packages: dict[str, Package], key_field: str, limit: int | None) -> None:
    table = Table(title=f"{len(packages)} packages keyed by {key_field}")
    table.add_column(key_field, style="cyan", no_wrap=True)
    table.add_column("Package")
    table.add_column("Version")
    table.add_column("Architecture")
    table.add_column("Size", justify="right")

    for idx, (key, pkg) in enumerate(packages.items()):
        if limit is not None and idx >= limit:
            break
        table.add_row(key, pkg.package, pkg.version, pkg.architecture, str(pkg.size))
    console.print(table)


@cli.command("parse")
def parse_command(
    path: str = typer.Argument(..., help="Packages index file (plain, .gz, .bz2 or .xz), or - for stdin"),
    key: str = typer.Option(DEFAULT_KEY_FIELD, "--key", "-k", help="Field whose value keys the result"),
    strict: bool = typer.Option(False, "--strict", help="Fail when two stanzas share a key"),
    output: OutputFormat = typer.Option(OutputFormat.TABLE, "--format", "-f", help="Output format"),
    limit: int | None = typer.Option(None, "--limit", "-n", min=0, help="Show at most this many table rows"),
):
    """Parse a Packages index and print its records."""
    try:
        if path == "-":
            packages = parse(wrap_stream(sys.stdin.buffer), key, strict)
        else:
            with open_index(Path(path)) as handle:
                packages = parse(handle, key, strict)
    except DebIndicesError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from e
    except (OSError, EOFError, UnicodeDecodeError, lzma.LZMAError) as e:
        err_console.print(f"[red]Unable to read {path}:[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from e

    logger.debug(f"Parsed {len(packages)} records from {path}")
    if output == OutputFormat.JSON:
        typer.echo(json.dumps({k: v.model_dump(by_alias=True) for k, v in packages.items()}, indent=2))
    else:
        _render_table(packages, key, limit)


@cli.command("fields")
def fields_command():
    """List the recognized index fields."""
    table = Table()
    table.add_column("Field", style="cyan")
    table.add_column("Attribute")
    table.add_column("Kind")
    for spec in FIELD_SPECS:
        table.add_row(spec.name, spec.attribute, spec.kind.value)
    console.print(table)


def main() -> None:
    """Main entry point for the debindices CLI."""
    cli()


if __name__ == "__main__":
    main()
