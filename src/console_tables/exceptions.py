"""Exceptions for console-tables."""

from typing import Any

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class ConsoleTablesError(Exception):
    """
    Base exception for all console-tables errors.

    All exceptions raised by this library inherit from this class,
    allowing callers to catch all library-specific errors with a single
    except clause.
    """

    pass


# ---------------------------------------------------------------------------
# Category Exceptions
# ---------------------------------------------------------------------------


class TableError(ConsoleTablesError):
    """
    Base exception for table construction errors.

    This includes errors raised while adding columns and rows or while
    building a table from options.
    """

    pass


class RenderError(ConsoleTablesError):
    """Base exception for errors raised while rendering a table."""

    pass


# ---------------------------------------------------------------------------
# Table Exceptions
# ---------------------------------------------------------------------------


class ConfigurationError(TableError):
    """
    Raised when the table is not in a state that allows the operation.

    Adding a row before any column exists, or rendering a table that has
    no columns, raises this error. Invalid environment configuration is
    reported with it as well.
    """

    def __init__(self, message: str = "Please set the columns first") -> None:
        super().__init__(message)


class ShapeMismatchError(TableError):
    """
    Raised when a row does not have one value per column.

    Attributes:
        column_count: Number of columns in the table
        value_count: Number of values in the rejected row
    """

    def __init__(self, column_count: int, value_count: int) -> None:
        self.column_count = column_count
        self.value_count = value_count
        super().__init__(
            f"The number of columns in the row ({column_count}) "
            f"does not match the values ({value_count})"
        )


class NullArgumentError(TableError, ValueError):
    """Raised when None is passed where a value is required."""

    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(f"Argument must not be None: {argument}")


# ---------------------------------------------------------------------------
# Render Exceptions
# ---------------------------------------------------------------------------


class InvalidFormatError(RenderError, ValueError):
    """
    Raised when an unknown output format is requested.

    Attributes:
        value: The rejected format selector
    """

    def __init__(self, value: Any) -> None:
        from .rendering import Format

        self.value = value
        valid = ", ".join(f.value for f in Format)
        super().__init__(f"Unknown table format: {value!r} (expected one of: {valid})")
