"""Command-line interface for rendering data files as tables."""

from __future__ import annotations

import csv
import json
import logging
import sys
from pathlib import Path
from typing import Any

import click
import yaml

from .exceptions import ConsoleTablesError
from .models import Alignment, Color, TableOptions
from .rendering import Format
from .sink import ClickSink
from .table import ConsoleTable

logger = logging.getLogger(__name__)

_SUFFIX_FORMATS = {
    ".csv": "csv",
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}


@click.group()
@click.version_option(package_name="console-tables")
def cli() -> None:
    """console-tables: render tabular data as text."""
    pass


@cli.command()
@click.argument("file_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--format",
    "-f",
    "table_format",
    type=click.Choice([f.value for f in Format]),
    default=Format.DEFAULT.value,
    help="Output format (default: default)",
)
@click.option(
    "--input-format",
    type=click.Choice(["csv", "json", "yaml"]),
    help="Input file format (default: from file suffix)",
)
@click.option(
    "--count/--no-count",
    default=None,
    help="Show the row count footer (default format only)",
)
@click.option(
    "--number-alignment",
    type=click.Choice([a.value for a in Alignment]),
    help="Alignment of numeric columns from JSON/YAML records",
)
@click.option(
    "--column-color",
    type=click.Choice([c.value for c in Color]),
    help="Foreground color of every column (header and cells)",
)
@click.option(
    "--color/--no-color",
    default=None,
    help="Force ANSI colors on or off (default: auto-detect)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def render(
    file_path: str,
    table_format: str,
    input_format: str | None,
    count: bool | None,
    number_alignment: str | None,
    column_color: str | None,
    color: bool | None,
    verbose: bool,
) -> None:
    """Render a CSV, JSON or YAML file as a table."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(message)s",
        )

    try:
        path = Path(file_path)
        resolved_input = input_format or _SUFFIX_FORMATS.get(path.suffix.lower())
        if resolved_input is None:
            click.echo(
                f"✗ Cannot detect input format of {path.name}, use --input-format",
                err=True,
            )
            sys.exit(1)

        options = TableOptions.from_environment()
        if count is not None:
            options.enable_count = count
        if number_alignment is not None:
            options.number_alignment = Alignment(number_alignment)

        table = _load_table(path, resolved_input)
        table.configure(lambda o: _copy_options(options, o))

        if column_color:
            for column in table.columns:
                column.colors.foreground = Color(column_color)

        logger.debug("Loaded %d rows from %s", len(table), path)
        table.write(table_format, ClickSink(color=color))

    except (ConsoleTablesError, ValueError, yaml.YAMLError, csv.Error) as e:
        click.echo(f"✗ Failed to render {file_path}: {e}", err=True)
        sys.exit(1)


def _copy_options(source: TableOptions, target: TableOptions) -> None:
    target.enable_count = source.enable_count
    target.number_alignment = source.number_alignment


def _load_table(path: Path, input_format: str) -> ConsoleTable:
    """Build a table from a data file."""
    if input_format == "csv":
        with path.open(newline="", encoding="utf-8") as f:
            return _table_from_rows([row for row in csv.reader(f) if row], path)

    text = path.read_text(encoding="utf-8")
    data: Any = json.loads(text) if input_format == "json" else yaml.safe_load(text)

    if not isinstance(data, list) or not data:
        raise ValueError(f"{path.name} must contain a non-empty list")
    if all(isinstance(item, dict) for item in data):
        return ConsoleTable.from_records(data)
    if all(isinstance(item, list) for item in data):
        return _table_from_rows(data, path)
    raise ValueError(f"{path.name} must contain a list of objects or a list of lists")


def _table_from_rows(rows: list[list[Any]], path: Path) -> ConsoleTable:
    """First row is the header."""
    if not rows:
        raise ValueError(f"{path.name} is empty")
    header, *body = rows
    return ConsoleTable(*(str(h) for h in header)).add_rows(body)


if __name__ == "__main__":
    cli()
