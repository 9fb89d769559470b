"""
Value kinds for the comparison engine.

Every value handed to the engine is classified once into a closed set of
kinds, and the equality, emptiness, containment and diff logic dispatch on
that tag instead of re-deriving type information at each call site.
"""

from __future__ import annotations

import asyncio
import dataclasses
import inspect
import numbers
import queue
import weakref
from collections.abc import Mapping, Sequence, Set
from datetime import date, datetime, time, timedelta
from enum import Enum
from typing import Any


class Kind(str, Enum):
    """Coarse category of a runtime value."""
    NIL = "nil"
    PRIMITIVE = "primitive"
    TEXT = "text"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    SET = "set"
    RECORD = "record"
    REFERENCE = "reference"
    FUNCTION = "function"
    CHANNEL = "channel"
    OPAQUE = "opaque"


# Kinds the diff renderer is willing to work on
STRUCTURED_KINDS = frozenset({Kind.RECORD, Kind.MAPPING, Kind.SEQUENCE})

TEXT_TYPES = (str, bytes, bytearray)
TIME_TYPES = (datetime, date, time, timedelta)
REFERENCE_TYPES = (weakref.ref,)
CHANNEL_TYPES = (queue.Queue, asyncio.Queue)


def classify(value: Any) -> Kind:
    """Classify a value into its Kind."""
    if value is None:
        return Kind.NIL

    if isinstance(value, TEXT_TYPES):
        return Kind.TEXT

    if isinstance(value, (bool, numbers.Number, Enum) + TIME_TYPES):
        return Kind.PRIMITIVE

    if isinstance(value, REFERENCE_TYPES):
        return Kind.REFERENCE

    if is_record(value):
        return Kind.RECORD

    if isinstance(value, Mapping):
        return Kind.MAPPING

    if isinstance(value, Set):
        return Kind.SET

    if isinstance(value, Sequence):
        return Kind.SEQUENCE

    if isinstance(value, CHANNEL_TYPES):
        return Kind.CHANNEL

    if callable(value) and not inspect.isclass(value):
        return Kind.FUNCTION

    return Kind.OPAQUE


def is_record(value: Any) -> bool:
    """Return True for dataclass instances and named tuples."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return True
    return isinstance(value, tuple) and hasattr(type(value), "_fields")


def deref(value: Any) -> Any:
    """
    Follow reference indirection until a non-reference value is reached.

    A dead weak reference dereferences to None.
    """
    while isinstance(value, REFERENCE_TYPES):
        value = value()
    return value


def exported_fields(value: Any) -> list[tuple[str, str, Any]]:
    """
    List the exported fields of a record.

    Returns:
        List of (field_name, serialized_name, value) tuples in declaration
        order. The serialized name prefers a ``json`` or ``alias`` entry in
        the dataclass field metadata over the field's own name.
    """
    result: list[tuple[str, str, Any]] = []

    if dataclasses.is_dataclass(value):
        for f in dataclasses.fields(value):
            if f.name.startswith("_"):
                continue
            serialized = f.metadata.get("json") or f.metadata.get("alias") or f.name
            result.append((f.name, serialized, getattr(value, f.name)))
        return result

    # named tuple
    for name in type(value)._fields:
        if name.startswith("_"):
            continue
        result.append((name, name, getattr(value, name)))
    return result


def channel_snapshot(value: Any) -> list[Any]:
    """Copy the buffered items of a channel-like queue without consuming them."""
    buffer = value._queue if isinstance(value, asyncio.Queue) else value.queue
    return list(buffer)


def channel_len(value: Any) -> int:
    return value.qsize()


def type_name(value: Any) -> str:
    """Short type name used in failure messages."""
    if value is None:
        return "None"
    return type(value).__qualname__
