"""
Extract columns and rows from a sequence of records.

Supported record shapes are dataclass instances, named tuples, mappings
and plain objects. The first record (or ``record_type`` when the sequence
is empty) decides the column names and types.
"""

from __future__ import annotations

import dataclasses
import logging
import typing
from collections.abc import Callable, Iterable, Mapping
from typing import Any, NamedTuple

logger = logging.getLogger(__name__)


class RecordColumns(NamedTuple):
    """Column names, column types and row values extracted from records."""

    names: list[str]
    types: list[Any]
    rows: list[list[Any]]


Extractor = Callable[..., RecordColumns]


def _is_named_tuple(obj: Any) -> bool:
    cls = obj if isinstance(obj, type) else type(obj)
    return issubclass(cls, tuple) and hasattr(cls, "_fields")


def _annotations(cls: type) -> dict[str, Any]:
    try:
        return typing.get_type_hints(cls)
    except (NameError, TypeError):
        # Unresolvable forward references fall back to the raw annotations.
        return dict(getattr(cls, "__annotations__", {}))


def _type_columns(record_type: type) -> tuple[list[str], list[Any]] | None:
    """Names and types declared by a dataclass or named tuple type."""
    if dataclasses.is_dataclass(record_type):
        hints = _annotations(record_type)
        fields = dataclasses.fields(record_type)
        return [f.name for f in fields], [hints.get(f.name, f.type) for f in fields]
    if _is_named_tuple(record_type):
        hints = _annotations(record_type)
        names = list(record_type._fields)  # type: ignore[attr-defined]
        return names, [hints.get(n, Any) for n in names]
    return None


def _slot_names(klass: type) -> tuple[str, ...]:
    slots = klass.__dict__.get("__slots__", ())
    return (slots,) if isinstance(slots, str) else tuple(slots)


def _value_columns(record: Any) -> list[str]:
    """Public instance attributes, then slots and properties from base to subclass."""
    if isinstance(record, Mapping):
        return [str(k) for k in record]

    names = dict.fromkeys(getattr(record, "__dict__", {}))
    for klass in reversed(type(record).__mro__):
        names.update(dict.fromkeys(_slot_names(klass)))
        names.update(
            dict.fromkeys(k for k, v in vars(klass).items() if isinstance(v, property))
        )
    return [k for k in names if not k.startswith("_")]


def _getter(record: Any) -> Callable[[Any, str], Any]:
    if isinstance(record, Mapping):
        return lambda r, name: r.get(name)
    return lambda r, name: getattr(r, name, None)


def extract_columns(
    records: Iterable[Any],
    record_type: type | None = None,
) -> RecordColumns:
    """
    Extract table columns from homogeneous records.

    Args:
        records: Dataclass instances, named tuples, mappings or plain objects
        record_type: Declared record type. Used for column names and types
            when it is a dataclass or named tuple, which also allows an
            empty sequence to produce columns.

    Returns:
        RecordColumns with one type per column and one value list per record
    """
    items = list(records)
    declared = record_type if record_type is not None else (type(items[0]) if items else None)
    columns = _type_columns(declared) if declared is not None else None

    if columns is not None:
        names, types = columns
    elif items:
        first = items[0]
        names = _value_columns(first)
        get = _getter(first)
        types = [type(get(first, name)) for name in names]
    else:
        return RecordColumns(names=[], types=[], rows=[])

    rows: list[list[Any]] = []
    for item in items:
        get = _getter(item)
        rows.append([get(item, name) for name in names])

    logger.debug("Extracted %d columns and %d rows from records", len(names), len(rows))
    return RecordColumns(names=names, types=types, rows=rows)
