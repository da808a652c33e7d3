"""
Rendering module for console tables.

Provides formatters for displaying a table in various formats:
- DEFAULT: Boxed table with pipes and a row count footer
- MARKDOWN: Markdown table
- ALTERNATIVE: Pipe-delimited table framed by "+---+" dividers
- MINIMAL: Space-separated columns under a dash rule

Example:
    from console_tables import ConsoleTable
    from console_tables.rendering import Format, render_table

    table = ConsoleTable("Name", "Age").add_row("Alice", 30)
    print(render_table(table, Format.MARKDOWN))
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..table import ConsoleTable


class Format(Enum):
    """Output format for tables."""

    DEFAULT = "default"
    MARKDOWN = "markdown"
    ALTERNATIVE = "alternative"
    MINIMAL = "minimal"

    @classmethod
    def parse(cls, value: Any) -> Format:
        """
        Resolve a format selector.

        Args:
            value: A Format member or its string value (case-insensitive)

        Raises:
            InvalidFormatError: If value does not name a format
        """
        from ..exceptions import InvalidFormatError

        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidFormatError(value)


def render_table(table: ConsoleTable, format: Format | str = Format.DEFAULT) -> str:
    """
    Format a table for display.

    Args:
        table: Table to render
        format: Output format type

    Returns:
        Formatted string ready for printing

    Raises:
        InvalidFormatError: If the format is unknown
        ConfigurationError: If the table has no columns
    """
    from .factory import get_formatter

    formatter_instance = get_formatter(Format.parse(format))
    return formatter_instance.format(table)


__all__ = ["Format", "render_table"]
