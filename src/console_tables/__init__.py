"""
console-tables: Render tabular data as text for terminals and markdown.

This library provides a table layout engine with:
- Per-column widths computed from the header and every cell
- Right alignment of numeric columns for tables built from records
- Four output formats: boxed, markdown, alternative and minimal
- Column and row colors when writing to a terminal

Example:
    from console_tables import ConsoleTable, Format

    table = ConsoleTable("Name", "Age")
    table.add_row("Alice", 30).add_row("Bob", 7)

    print(table.to_string())
    print(table.to_string(Format.MARKDOWN))
    table.write()  # default format, colored, to stdout
"""

from importlib.metadata import PackageNotFoundError, version

from .exceptions import (
    ConfigurationError,
    ConsoleTablesError,
    InvalidFormatError,
    NullArgumentError,
    RenderError,
    ShapeMismatchError,
    TableError,
)
from .models import Alignment, Color, Colors, Column, Row, TableOptions
from .records import RecordColumns, extract_columns
from .rendering import Format, render_table
from .sink import ClickSink, ConsoleSink
from .table import ConsoleTable

try:
    __version__ = version("console-tables")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

__all__ = [
    # Version
    "__version__",
    # Main classes
    "ConsoleTable",
    "TableOptions",
    # Models
    "Alignment",
    "Color",
    "Colors",
    "Column",
    "Row",
    "Format",
    # Records
    "RecordColumns",
    "extract_columns",
    # Rendering
    "render_table",
    "ClickSink",
    "ConsoleSink",
    # Exceptions - Base
    "ConsoleTablesError",
    "TableError",
    "RenderError",
    # Exceptions - Table
    "ConfigurationError",
    "ShapeMismatchError",
    "NullArgumentError",
    # Exceptions - Render
    "InvalidFormatError",
]
