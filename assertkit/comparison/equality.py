"""
Structural equality for arbitrary values.

Three policies are provided:
    - equal_objects: strict deep equality, types must match at every level
    - equal_values: strict equality, or equality after a lossless conversion
    - equal_exact: identical top-level types and strict equality

None of these mutate their inputs.
"""

from __future__ import annotations

import numbers
from typing import Any

from .models import Kind, classify, deref, exported_fields

# Builtin bases a subclass instance may be converted to
BUILTIN_BASES = (str, bytes, bytearray, int, float, complex, list, tuple, dict, set, frozenset)


def equal_objects(expected: Any, actual: Any) -> bool:
    """
    Determine if two objects are considered equal.

    Reference values (weak references) are compared by the values they
    point at, not by identity. NaN is never equal to itself.

    This function does no assertion of any kind.
    """
    if expected is None and actual is None:
        return True

    if expected is None or actual is None:
        return False

    return _deep_equal(expected, actual, set())


def equal_values(expected: Any, actual: Any) -> bool:
    """
    Determine if two objects are equal, or equal once one side is converted
    to the other's type.

    Only lossless conversions count, so 1 and 1.0 are equal values while
    1.5 is never treated as 1.
    """
    if equal_objects(expected, actual):
        return True

    expected = deref(expected)
    actual = deref(actual)
    if expected is None or actual is None:
        return expected is actual

    ok, converted = convert(expected, type(actual))
    if ok and equal_objects(converted, actual):
        return True

    ok, converted = convert(actual, type(expected))
    return ok and equal_objects(expected, converted)


def equal_exact(expected: Any, actual: Any) -> bool:
    """Determine if two objects have identical types and are strictly equal."""
    if type(expected) is not type(actual):
        return False
    return equal_objects(expected, actual)


def convert(value: Any, target: type) -> tuple[bool, Any]:
    """
    Try to convert value to the target type without losing information.

    Returns:
        Tuple of (ok, converted). When ok is False, converted is None.
    """
    if type(value) is target:
        return True, value

    # bool is a number in Python, but never a representational match for one
    if isinstance(value, bool) or issubclass(target, bool):
        return False, None

    try:
        if isinstance(value, numbers.Number) and issubclass(target, numbers.Number):
            converted = target(value)
            # cross-type numeric comparison is exact, so this rejects truncation
            return (True, converted) if converted == value else (False, None)

        if isinstance(value, str) and issubclass(target, (bytes, bytearray)):
            return True, target(value.encode("utf-8"))

        if isinstance(value, (bytes, bytearray)):
            if issubclass(target, str):
                return True, target(bytes(value).decode("utf-8"))
            if issubclass(target, (bytes, bytearray)):
                return True, target(value)

        if isinstance(value, (list, tuple)) and target in (list, tuple):
            return True, target(value)

        if target in BUILTIN_BASES and isinstance(value, target):
            return True, target(value)

    except (TypeError, ValueError, ArithmeticError, UnicodeError):
        return False, None

    return False, None


def _deep_equal(a: Any, b: Any, visiting: set[tuple[int, int]]) -> bool:
    a_kind = classify(a)
    b_kind = classify(b)

    if a_kind == Kind.REFERENCE or b_kind == Kind.REFERENCE:
        if a_kind != b_kind:
            return False
        return equal_objects(deref(a), deref(b))

    if type(a) is not type(b):
        return False

    if a_kind == Kind.SET:
        return len(a) == len(b) and _typed_members(a) == _typed_members(b)

    if a_kind in (Kind.NIL, Kind.PRIMITIVE, Kind.TEXT, Kind.OPAQUE):
        return bool(a == b)

    if a_kind in (Kind.FUNCTION, Kind.CHANNEL):
        return a is b

    # Containers: a pair already under comparison is assumed equal
    key = (id(a), id(b))
    if key in visiting:
        return True
    visiting.add(key)

    try:
        if a_kind == Kind.SEQUENCE:
            if len(a) != len(b):
                return False
            return all(_deep_equal(x, y, visiting) for x, y in zip(a, b))

        if a_kind == Kind.MAPPING:
            if len(a) != len(b) or _typed_members(a.keys()) != _typed_members(b.keys()):
                return False
            return all(_deep_equal(a[k], b[k], visiting) for k in a)

        # Kind.RECORD
        a_fields = exported_fields(a)
        b_fields = exported_fields(b)
        if [f[0] for f in a_fields] != [f[0] for f in b_fields]:
            return False
        return all(
            _deep_equal(x[2], y[2], visiting) for x, y in zip(a_fields, b_fields)
        )
    finally:
        visiting.discard(key)


def _typed_members(members: Any) -> frozenset:
    """Hashable members tagged with their types, so 1, 1.0 and True stay distinct."""
    return frozenset(_typed(m) for m in members)


def _typed(value: Any) -> tuple:
    if isinstance(value, tuple):
        return type(value), tuple(_typed(v) for v in value)
    if isinstance(value, frozenset):
        return type(value), _typed_members(value)
    return type(value), value
