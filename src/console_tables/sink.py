"""
Output sinks for writing tables to a terminal.

A sink is anything that can write text and track a current foreground
and background color. :class:`ClickSink` writes to a click-compatible
stream, styling each chunk with the current colors.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import IO, Any, Protocol

import click

from .models import Color, Colors


class ConsoleSink(Protocol):
    """Protocol for color-capable output sinks."""

    foreground: Color | None
    background: Color | None

    def write(self, text: str) -> None:
        """Write text without a trailing newline."""
        ...

    def write_line(self, text: str = "") -> None:
        """Write text followed by a newline."""
        ...


class ClickSink:
    """Write styled text through ``click.echo``.

    Colors are tracked on the sink; None means the terminal default.
    """

    def __init__(self, file: IO[Any] | None = None, color: bool | None = None) -> None:
        """Initialize the sink.

        Args:
            file: Stream to write to (default: stdout)
            color: Force ANSI styling on or off. None lets click decide
                based on whether the stream is a terminal.
        """
        self._file = file
        self._color = color
        self.foreground: Color | None = None
        self.background: Color | None = None

    def write(self, text: str) -> None:
        if not text:
            return
        if self.foreground is not None or self.background is not None:
            text = click.style(
                text,
                fg=self.foreground.value if self.foreground else None,
                bg=self.background.value if self.background else None,
            )
        click.echo(text, file=self._file, nl=False, color=self._color)

    def write_line(self, text: str = "") -> None:
        self.write(text)
        click.echo("", file=self._file, color=self._color)


def apply_colors(sink: ConsoleSink, colors: Colors) -> None:
    """Set the sink colors that ``colors`` defines; None channels are kept."""
    if colors.foreground is not None:
        sink.foreground = colors.foreground
    if colors.background is not None:
        sink.background = colors.background


@contextmanager
def restored_colors(
    sink: ConsoleSink,
    foreground: Color | None,
    background: Color | None,
) -> Iterator[ConsoleSink]:
    """Restore the given sink colors on exit, including on error."""
    try:
        yield sink
    finally:
        sink.foreground = foreground
        sink.background = background
