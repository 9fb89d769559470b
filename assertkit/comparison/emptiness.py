"""
Emptiness and zero-value classification.

is_empty and is_zero look alike but answer different questions:
is_empty asks whether a value holds nothing (0, "", [], False, ...),
is_zero asks whether a value equals the zero value of its own type.
A mutable container's zero value is None, so [] is empty but not zero.
"""

from __future__ import annotations

import numbers
from collections import deque
from datetime import date, datetime, time, timedelta
from typing import Any

from .equality import equal_objects
from .models import Kind, channel_len, classify, deref, exported_fields

# Types whose zero value is None rather than an empty instance
NIL_ZERO_TYPES = (list, dict, set, bytearray, deque)

# Marker returned for records, whose zero value is "every field zero"
_ALL_FIELDS_ZERO = object()


def is_nil(v: Any) -> bool:
    """Check if v is None, or a reference whose target is gone."""
    if v is None:
        return True
    return classify(v) == Kind.REFERENCE and deref(v) is None


def is_empty(v: Any) -> bool:
    """
    Check whether v is considered empty.

    Empty means: None, False, a numeric zero, empty text, a zero-length
    sequence/mapping/set/queue, or the zero instant for time values.
    A reference is empty when dead, or when it points at a zero instant.
    """
    kind = classify(v)

    if kind == Kind.NIL:
        return True

    if kind == Kind.REFERENCE:
        target = deref(v)
        if target is None:
            return True
        if isinstance(target, (datetime, date)):
            return _is_zero_instant(target)
        return False

    if kind == Kind.PRIMITIVE:
        if isinstance(v, bool):
            return not v
        if isinstance(v, (datetime, date)):
            return _is_zero_instant(v)
        if isinstance(v, timedelta):
            return v == timedelta(0)
        if isinstance(v, numbers.Number):
            return v == 0
        return False

    if kind in (Kind.TEXT, Kind.SEQUENCE, Kind.MAPPING, Kind.SET):
        return len(v) == 0

    if kind == Kind.CHANNEL:
        return channel_len(v) == 0

    return False


def is_zero(v: Any) -> bool:
    """Check whether v deep-equals the zero value of its own type."""
    if v is None:
        return True

    ok, zero = zero_value(v)
    if not ok:
        return False

    if zero is _ALL_FIELDS_ZERO:
        return all(is_zero(field_value) for _, _, field_value in exported_fields(v))

    return equal_objects(zero, v)


def zero_value(v: Any) -> tuple[bool, Any]:
    """
    Compute the zero value for the type of v.

    Returns:
        Tuple of (ok, zero). ok is False when the type has no zero value
        other than None.
    """
    kind = classify(v)
    tp = type(v)

    if kind == Kind.RECORD:
        return True, _ALL_FIELDS_ZERO

    if kind in (Kind.REFERENCE, Kind.FUNCTION, Kind.CHANNEL, Kind.OPAQUE, Kind.SET):
        if tp is frozenset:
            return True, frozenset()
        return False, None

    if isinstance(v, NIL_ZERO_TYPES):
        return False, None

    if isinstance(v, datetime):
        return True, datetime.min.replace(tzinfo=v.tzinfo)

    if isinstance(v, date):
        return True, date.min

    if isinstance(v, time):
        return True, time(tzinfo=v.tzinfo)

    if kind == Kind.PRIMITIVE and not isinstance(v, (numbers.Number, timedelta)):
        # enum members have no zero
        return False, None

    try:
        return True, tp()
    except (TypeError, ValueError):
        return False, None


def _is_zero_instant(v: date) -> bool:
    if isinstance(v, datetime):
        return v.replace(tzinfo=None) == datetime.min
    return v == date.min
