"""Core models for console-tables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .exceptions import ConfigurationError

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class Color(Enum):
    """Terminal colors.

    Values are the color names accepted by ``click.style``.
    """

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"
    BRIGHT_BLACK = "bright_black"
    BRIGHT_RED = "bright_red"
    BRIGHT_GREEN = "bright_green"
    BRIGHT_YELLOW = "bright_yellow"
    BRIGHT_BLUE = "bright_blue"
    BRIGHT_MAGENTA = "bright_magenta"
    BRIGHT_CYAN = "bright_cyan"
    BRIGHT_WHITE = "bright_white"


class Alignment(Enum):
    """Padding side for numeric columns."""

    LEFT = "left"
    RIGHT = "right"


@dataclass
class Colors:
    """
    Foreground/background pair carried by columns and rows.

    A channel left as None leaves the terminal's current color untouched.
    """

    foreground: Color | None = None
    background: Color | None = None


@dataclass
class Column:
    """
    A table column.

    Attributes:
        value: Header value, rendered with ``str()``
        colors: Colors applied to this column's non-blank cells
    """

    value: Any
    colors: Colors = field(default_factory=Colors)

    @classmethod
    def create(
        cls,
        value: Any,
        foreground: Color | None = None,
        background: Color | None = None,
    ) -> Column:
        """Create a column with optional colors."""
        return cls(value=value, colors=Colors(foreground, background))


@dataclass
class Row:
    """
    A table row.

    Attributes:
        values: One value per column, in column order
        colors: Colors applied to this row's non-blank cells, over the column colors
    """

    values: tuple[Any, ...]
    colors: Colors = field(default_factory=Colors)

    def __len__(self) -> int:
        return len(self.values)


@dataclass
class TableOptions:
    """
    Rendering options for a table.

    Attributes:
        columns: Initial columns copied into the table at construction
        enable_count: Append a " Count: N" footer to the default format
        number_alignment: Right-align numeric columns when set to RIGHT.
            Only applies to tables built from records, where column types
            are known.
    """

    columns: list[Column] = field(default_factory=list)
    enable_count: bool = True
    number_alignment: Alignment = Alignment.LEFT

    @classmethod
    def from_environment(cls) -> TableOptions:
        """
        Create TableOptions from environment variables.

        Reads CONSOLE_TABLES_ENABLE_COUNT and CONSOLE_TABLES_NUMBER_ALIGNMENT.

        Raises:
            ConfigurationError: If a variable holds an unrecognized value
        """
        enable_count = os.environ.get("CONSOLE_TABLES_ENABLE_COUNT", "true").strip().lower()
        if enable_count in _TRUE_VALUES:
            count = True
        elif enable_count in _FALSE_VALUES:
            count = False
        else:
            raise ConfigurationError(
                f"Invalid CONSOLE_TABLES_ENABLE_COUNT: {enable_count!r}"
            )

        alignment = os.environ.get("CONSOLE_TABLES_NUMBER_ALIGNMENT", "left").strip().lower()
        try:
            number_alignment = Alignment(alignment)
        except ValueError:
            raise ConfigurationError(
                f"Invalid CONSOLE_TABLES_NUMBER_ALIGNMENT: {alignment!r}"
            ) from None

        return cls(enable_count=count, number_alignment=number_alignment)
