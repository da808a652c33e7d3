"""ConsoleTable: build a table incrementally and render it as text."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from .exceptions import ConfigurationError, NullArgumentError, ShapeMismatchError
from .models import Color, Column, Colors, Row, TableOptions
from .records import Extractor, extract_columns
from .rendering import Format, render_table
from .rendering.writer import write_table
from .sink import ConsoleSink

logger = logging.getLogger(__name__)


class ConsoleTable:
    """
    A table of named columns and rows of arbitrary values.

    Example:
        table = ConsoleTable("Name", "Age")
        table.add_row("Alice", 30).add_row("Bob", 7)
        print(table.to_markdown_string())
    """

    def __init__(self, *columns: str, options: TableOptions | None = None) -> None:
        """Create a table.

        Args:
            *columns: Column names, appended after any columns in ``options``
            options: Rendering options and initial columns
        """
        self._options = options if options is not None else TableOptions()
        self._columns: list[Column] = list(self._options.columns)
        self._rows: list[Row] = []
        self._column_types: list[Any] | None = None
        if columns:
            self.add_column(*columns)

    @classmethod
    def from_options(cls, options: TableOptions | None) -> ConsoleTable:
        """
        Create a table from options.

        Raises:
            NullArgumentError: If options is None
        """
        if options is None:
            raise NullArgumentError("options")
        return cls(options=options)

    @classmethod
    def from_records(
        cls,
        records: Iterable[Any],
        record_type: type | None = None,
        extractor: Extractor = extract_columns,
    ) -> ConsoleTable:
        """
        Create a table with one column per record field and one row per record.

        Column types are recorded so that numeric columns can be right-aligned
        with ``Alignment.RIGHT``.

        Args:
            records: Homogeneous records
            record_type: Declared record type, see :func:`extract_columns`
            extractor: Callable returning (names, types, rows) for the records

        Raises:
            NullArgumentError: If records is None
            ShapeMismatchError: If the extractor returns a different number
                of column types than column names
        """
        if records is None:
            raise NullArgumentError("records")

        names, types, rows = extractor(records, record_type)
        if len(types) != len(names):
            raise ShapeMismatchError(len(names), len(types))
        table = cls()
        table._column_types = list(types)
        table.add_columns(names)
        table.add_rows(rows)
        return table

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def columns(self) -> list[Column]:
        return self._columns

    @property
    def rows(self) -> list[Row]:
        return self._rows

    @property
    def options(self) -> TableOptions:
        return self._options

    @property
    def column_types(self) -> list[Any] | None:
        """Per-column types, set only for tables built from records."""
        return self._column_types

    def __len__(self) -> int:
        return len(self._rows)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_column(
        self,
        *names: str,
        foreground: Color | None = None,
        background: Color | None = None,
    ) -> ConsoleTable:
        """Append one column per name."""
        return self.add_columns(names, foreground=foreground, background=background)

    def add_columns(
        self,
        names: Iterable[str] | None,
        foreground: Color | None = None,
        background: Color | None = None,
    ) -> ConsoleTable:
        """
        Append one column per name.

        Raises:
            NullArgumentError: If names is None
        """
        if names is None:
            raise NullArgumentError("names")
        self._columns.extend(Column.create(n, foreground, background) for n in names)
        return self

    def add_row(
        self,
        *values: Any,
        foreground: Color | None = None,
        background: Color | None = None,
    ) -> ConsoleTable:
        """
        Append a row with one value per column.

        Raises:
            ConfigurationError: If the table has no columns
            ShapeMismatchError: If the value count differs from the column count
        """
        if not self._columns:
            raise ConfigurationError()
        if len(values) != len(self._columns):
            raise ShapeMismatchError(len(self._columns), len(values))

        self._rows.append(Row(values=tuple(values), colors=Colors(foreground, background)))
        return self

    def add_rows(
        self,
        rows: Iterable[Sequence[Any]] | None,
        foreground: Color | None = None,
        background: Color | None = None,
    ) -> ConsoleTable:
        """
        Append several rows, see :meth:`add_row`.

        Raises:
            NullArgumentError: If rows is None
        """
        if rows is None:
            raise NullArgumentError("rows")
        for values in rows:
            if values is None:
                raise NullArgumentError("values")
            self.add_row(*values, foreground=foreground, background=background)
        return self

    def configure(self, mutator: Callable[[TableOptions], Any] | None) -> ConsoleTable:
        """
        Edit the options in place.

        No validation is performed on the result.

        Raises:
            NullArgumentError: If mutator is None
        """
        if mutator is None:
            raise NullArgumentError("mutator")
        mutator(self._options)
        return self

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def to_string(self, format: Format | str = Format.DEFAULT) -> str:
        """
        Render the table as text.

        Raises:
            InvalidFormatError: If the format is unknown
            ConfigurationError: If the table has no columns
        """
        return render_table(self, format)

    def to_markdown_string(self) -> str:
        return render_table(self, Format.MARKDOWN)

    def to_alternative_string(self) -> str:
        return render_table(self, Format.ALTERNATIVE)

    def to_minimal_string(self) -> str:
        return render_table(self, Format.MINIMAL)

    def write(
        self,
        format: Format | str = Format.DEFAULT,
        sink: ConsoleSink | None = None,
    ) -> None:
        """Write the table to a sink (default: stdout), with colors."""
        logger.debug("Writing table in %s format", format)
        write_table(self, format, sink)

    def __str__(self) -> str:
        return self.to_string()
