"""
Table formatters.

This module provides formatters for rendering a ConsoleTable in the
default boxed layout and in the delimiter-based layouts (markdown,
alternative, minimal).
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Protocol

from ..models import Alignment
from .geometry import Geometry, measure

if TYPE_CHECKING:
    from ..table import ConsoleTable

logger = logging.getLogger(__name__)

_NOT_PIPE = re.compile(r"[^|]")


def field_spec(geometry: Geometry, index: int) -> str:
    """
    Format field for one column, e.g. ``{0:<5}`` or ``{1:>3}``.

    A zero-width column gets a bare ``{i}`` field.
    """
    width = geometry.widths[index]
    if not width:
        return f"{{{index}}}"
    align = ">" if geometry.alignments[index] is Alignment.RIGHT else "<"
    return f"{{{index}:{align}{width}}}"


def box_template(geometry: Geometry) -> str:
    """Line template for the default format: `` | a | b |``."""
    fields = "".join(f" | {field_spec(geometry, i)}" for i in range(len(geometry.widths)))
    return fields + " |"


def delimited_template(geometry: Geometry, delimiter: str) -> str:
    """
    Line template for the delimiter-based formats.

    An empty delimiter produces columns separated by two spaces with no
    frame. Outer whitespace of the template is trimmed.
    """
    fields = "".join(
        f" {delimiter} {field_spec(geometry, i)}" for i in range(len(geometry.widths))
    )
    return (fields + f" {delimiter}").strip()


def box_divider(longest_line: int) -> str:
    """Divider for the default format, as long as the longest line."""
    return " " + "-" * max(longest_line - 1, 0)


def rule_divider(header_line: str) -> str:
    """Turn every character of the header except ``|`` into ``-``."""
    return _NOT_PIPE.sub("-", header_line)


class BaseFormatter(Protocol):
    """Protocol for table formatters."""

    def format(self, table: ConsoleTable) -> str:
        """
        Format a table into an output string.

        Args:
            table: Table to render

        Returns:
            Formatted string representation
        """
        ...


class DefaultFormatter:
    """Format a table as a box with a divider between every row.

    Example output:
         ---------------
         | Name  | Age |
         ---------------
         | Alice | 30  |
         ---------------
         | Bob   | 7   |
         ---------------

         Count: 2
    """

    def format(self, table: ConsoleTable) -> str:
        geometry = measure(table)
        template = box_template(geometry)

        header = template.format(*geometry.headers)
        rows = [template.format(*cells) for cells in geometry.rows]
        divider = box_divider(max([len(header), *(len(r) for r in rows)]))

        logger.debug(
            "Rendering %d rows x %d columns as default table",
            len(rows),
            len(geometry.headers),
        )

        lines: list[str] = [divider, header]
        for row in rows:
            lines.append(divider)
            lines.append(row)
        lines.append(divider)

        if table.options.enable_count:
            lines.append("")
            lines.append(f" Count: {len(rows)}")
            return "\n".join(lines)

        return "\n".join(lines) + "\n"


class DelimitedFormatter:
    """Base for the formats built from a delimiter-joined header line."""

    delimiter = "|"
    name = "delimited"

    def lines(self, header: str, rows: list[str], divider: str) -> list[str]:
        """Arrange the rendered lines."""
        return [header, divider, *rows]

    def divider(self, header: str) -> str:
        return rule_divider(header)

    def format(self, table: ConsoleTable) -> str:
        geometry = measure(table)
        template = delimited_template(geometry, self.delimiter)

        header = template.format(*geometry.headers)
        rows = [template.format(*cells) for cells in geometry.rows]

        logger.debug(
            "Rendering %d rows x %d columns as %s table",
            len(rows),
            len(geometry.headers),
            self.name,
        )

        return "".join(f"{line}\n" for line in self.lines(header, rows, self.divider(header)))


class MarkdownFormatter(DelimitedFormatter):
    """Format a table as markdown.

    Example output:
        | Name  | Age |
        |-------|-----|
        | Alice | 30  |
    """

    name = "markdown"


class AlternativeFormatter(DelimitedFormatter):
    """Format a table with ``+---+`` dividers around every row.

    Example output:
        +-------+-----+
        | Name  | Age |
        +-------+-----+
        | Alice | 30  |
        +-------+-----+
    """

    name = "alternative"

    def divider(self, header: str) -> str:
        return rule_divider(header).replace("|", "+")

    def lines(self, header: str, rows: list[str], divider: str) -> list[str]:
        lines = [divider, header]
        for row in rows:
            lines.append(divider)
            lines.append(row)
        lines.append(divider)
        return lines


class MinimalFormatter(DelimitedFormatter):
    """Format a table as space-separated columns under a dash rule.

    Example output:
        Name   Age
        ----------
        Alice  30
    """

    delimiter = ""
    name = "minimal"
