"""
Column width and alignment computation.

Every formatter measures the table through :func:`measure`, so widths and
alignment are identical across formats.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from ..exceptions import ConfigurationError, ShapeMismatchError
from ..models import Alignment

if TYPE_CHECKING:
    from ..table import ConsoleTable

NUMERIC_TYPES: frozenset[type] = frozenset({int, float, Decimal})


def display_text(value: Any) -> str:
    """Text shown for a cell. None renders as an empty string."""
    if value is None:
        return ""
    return str(value)


def pad(text: str, width: int, alignment: Alignment) -> str:
    """Pad text to width on the side given by alignment."""
    if alignment is Alignment.RIGHT:
        return text.rjust(width)
    return text.ljust(width)


@dataclass(frozen=True)
class Geometry:
    """
    Measured layout of a table.

    Attributes:
        headers: Display text of each column header
        rows: Display text of each cell, row by row
        widths: Widest text per column (header included)
        alignments: Padding side per column
    """

    headers: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]
    widths: tuple[int, ...]
    alignments: tuple[Alignment, ...]

    def pad_cells(self, texts: Sequence[str]) -> list[str]:
        """Pad one line's cells to the column widths."""
        return [pad(t, self.widths[i], self.alignments[i]) for i, t in enumerate(texts)]


def column_alignment(table: ConsoleTable, index: int) -> Alignment:
    """
    Alignment of column ``index``.

    Right alignment requires RIGHT number alignment and a known numeric
    column type. Column types are only set for tables built from records.
    """
    column_types = table.column_types
    if (
        table.options.number_alignment is Alignment.RIGHT
        and column_types is not None
        and index < len(column_types)
        and column_types[index] in NUMERIC_TYPES
    ):
        return Alignment.RIGHT
    return Alignment.LEFT


def measure(table: ConsoleTable) -> Geometry:
    """
    Measure a table.

    Each value is converted to text exactly once. A None value contributes
    zero width.

    Raises:
        ConfigurationError: If the table has no columns
        ShapeMismatchError: If columns were added after rows
    """
    if not table.columns:
        raise ConfigurationError()

    headers = tuple(display_text(c.value) for c in table.columns)
    for row in table.rows:
        if len(row) != len(headers):
            raise ShapeMismatchError(len(headers), len(row))
    rows = tuple(tuple(display_text(v) for v in row.values) for row in table.rows)

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    alignments = tuple(column_alignment(table, i) for i in range(len(headers)))
    return Geometry(
        headers=headers,
        rows=rows,
        widths=tuple(widths),
        alignments=alignments,
    )
