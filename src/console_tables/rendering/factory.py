"""
Formatter factory for table rendering.

Provides factory function to create appropriate formatter instances
based on the requested format type.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..exceptions import InvalidFormatError
from . import Format
from .formatters import (
    AlternativeFormatter,
    DefaultFormatter,
    MarkdownFormatter,
    MinimalFormatter,
)

if TYPE_CHECKING:
    from .formatters import BaseFormatter


def get_formatter(formatter_type: Format) -> BaseFormatter:
    """
    Get formatter instance for the requested type.

    Args:
        formatter_type: Desired format

    Returns:
        Formatter instance matching the requested type

    Raises:
        InvalidFormatError: If unknown format type requested
    """
    if formatter_type == Format.DEFAULT:
        return DefaultFormatter()

    if formatter_type == Format.MARKDOWN:
        return MarkdownFormatter()

    if formatter_type == Format.ALTERNATIVE:
        return AlternativeFormatter()

    if formatter_type == Format.MINIMAL:
        return MinimalFormatter()

    raise InvalidFormatError(formatter_type)
