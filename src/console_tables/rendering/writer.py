"""
Write tables to a color-capable sink.

The default format is streamed cell by cell so that column and row colors
can be applied. The other formats are written as their plain string
rendering.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from ..models import Color, Colors
from ..sink import ClickSink, ConsoleSink, apply_colors, restored_colors
from . import Format, render_table
from .formatters import box_divider, box_template
from .geometry import Geometry, measure

if TYPE_CHECKING:
    from ..table import ConsoleTable

logger = logging.getLogger(__name__)


class BoxWriter:
    """Stream the default format to a sink, coloring non-blank cells."""

    def __init__(self, sink: ConsoleSink) -> None:
        self._sink = sink

    def write(self, table: ConsoleTable) -> None:
        sink = self._sink
        geometry = measure(table)
        template = box_template(geometry)

        longest = max(
            len(template.format(*cells)) for cells in (geometry.headers, *geometry.rows)
        )
        divider = box_divider(longest)
        ambient = (sink.foreground, sink.background)
        column_colors = [column.colors for column in table.columns]

        logger.debug("Writing %d rows to %s", len(geometry.rows), type(sink).__name__)

        with restored_colors(sink, *ambient):
            sink.write_line(divider)
            self._write_cells(geometry, geometry.headers, [[c] for c in column_colors], ambient)

            for row, cells in zip(table.rows, geometry.rows):
                sink.write_line(divider)
                layers = [[c, row.colors] for c in column_colors]
                self._write_cells(geometry, cells, layers, ambient)

            sink.write_line(divider)

            if table.options.enable_count:
                sink.write_line("")
                sink.write_line(f" Count: {len(geometry.rows)}")

    def _write_cells(
        self,
        geometry: Geometry,
        texts: Sequence[str],
        layers: Sequence[Sequence[Colors]],
        ambient: tuple[Color | None, Color | None],
    ) -> None:
        sink = self._sink
        padded = geometry.pad_cells(texts)
        last = len(padded) - 1

        sink.write(" | ")
        for i, cell in enumerate(padded):
            with restored_colors(sink, *ambient):
                # Blank cells are written in the ambient colors.
                if texts[i].strip():
                    for colors in layers[i]:
                        apply_colors(sink, colors)
                sink.write(cell)
            sink.write(" |" if i == last else " | ")
        sink.write_line()


def write_table(
    table: ConsoleTable,
    format: Format | str = Format.DEFAULT,
    sink: ConsoleSink | None = None,
) -> None:
    """
    Write a table to a sink.

    Args:
        table: Table to write
        format: Output format type
        sink: Destination (default: ClickSink on stdout)

    Raises:
        InvalidFormatError: If the format is unknown
        ConfigurationError: If the table has no columns
    """
    resolved = Format.parse(format)
    if sink is None:
        sink = ClickSink()

    if resolved is Format.DEFAULT:
        BoxWriter(sink).write(table)
    else:
        sink.write_line(render_table(table, resolved))
