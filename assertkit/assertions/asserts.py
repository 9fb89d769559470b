"""
Assertion functions.

Every assertion takes the sink ``t`` first and an optional user message
last (a string, or a %-format string followed by its arguments). An
assertion returns True when it holds. Otherwise it reports a failure to
``t`` and returns False, so callers can branch on the outcome:

    if assertions.not_empty(t, users):
        assertions.equal(t, "alice", users[0].name)
"""

from __future__ import annotations

import json
import logging
import math
import numbers
import re
from collections.abc import Callable, Sequence
from datetime import datetime, timedelta
from decimal import Decimal
from typing import IO, Any

from ..comparison.containment import contains_element, get_len
from ..comparison.emptiness import is_empty, is_nil, is_zero
from ..comparison.equality import equal_objects
from ..comparison.equality import equal_values as _equal_values
from ..comparison.models import type_name
from ..diff.differ import diff_values
from ..diff.render import render_inline
from ..jsonpath.extractor import InvalidJSONError, JSONPathError, get_json_value, reject_constant
from ..jsonpath.matching import matches_raw
from ..reporting.reporter import fail, fail_now
from ..reporting.sinks import Testing

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Nil, booleans, zero and types
# ─────────────────────────────────────────────────────────────────────────────

def nil(t: Testing, v: Any, *msg_and_args: Any) -> bool:
    """
    Assert that v is None (or a dead weak reference).

        assertions.nil(t, err)
    """
    if is_nil(v):
        return True
    return fail(t, f"Expected nil, but got: {render_inline(v)}", *msg_and_args)


def not_nil(t: Testing, v: Any, *msg_and_args: Any) -> bool:
    """Assert that v is not None."""
    if not is_nil(v):
        return True
    return fail(t, "Expected value not to be nil.", *msg_and_args)


def true(t: Testing, value: Any, *msg_and_args: Any) -> bool:
    """Assert that value is the bool True. Truthy non-bools fail."""
    if value is True:
        return True
    return fail(t, "Should be true", *msg_and_args)


def false(t: Testing, value: Any, *msg_and_args: Any) -> bool:
    """Assert that value is the bool False. Falsy non-bools fail."""
    if value is False:
        return True
    return fail(t, "Should be false", *msg_and_args)


def zero(t: Testing, v: Any, *msg_and_args: Any) -> bool:
    """Assert that v is the zero value of its type (None counts)."""
    if is_zero(v):
        return True
    return fail(t, f"Should be zero, but was {render_inline(v)}", *msg_and_args)


def not_zero(t: Testing, v: Any, *msg_and_args: Any) -> bool:
    if not is_zero(v):
        return True
    return fail(t, f"Should NOT be zero, but was {render_inline(v)}", *msg_and_args)


def is_type(t: Testing, expected_type: Any, v: Any, *msg_and_args: Any) -> bool:
    """
    Assert that v is exactly of the expected type (subclasses fail).

    expected_type may be a type, or a sample value whose type is used:

        assertions.is_type(t, int, 123)
        assertions.is_type(t, 0, 123)
    """
    if not isinstance(expected_type, type):
        expected_type = type(expected_type)

    if type(v) is expected_type:
        return True
    return fail(
        t,
        f"Object expected to be of type {expected_type.__qualname__}, but was {type_name(v)}",
        *msg_and_args,
    )


def is_instance(t: Testing, cls: Any, v: Any, *msg_and_args: Any) -> bool:
    """
    Assert that v is an instance of cls.

    cls may be a class, an ABC, a runtime-checkable Protocol or a tuple of
    them, which makes this the interface-conformance check.
    """
    try:
        ok = isinstance(v, cls)
    except TypeError as e:
        return fail(t, f"{cls!r} cannot be used for an instance check: {e}", *msg_and_args)

    if ok:
        return True
    return fail(t, f"{type_name(v)} must be an instance of {_class_name(cls)}", *msg_and_args)


# ─────────────────────────────────────────────────────────────────────────────
# Equality
# ─────────────────────────────────────────────────────────────────────────────

def equal(t: Testing, expected: Any, actual: Any, *msg_and_args: Any) -> bool:
    """
    Assert that two values are strictly equal.

    Types must match at every level, so 1 and 1.0 are not equal. Weak
    references are compared by the values they point at.

        assertions.equal(t, 123, 123)
    """
    if equal_objects(expected, actual):
        return True
    return _fail_not_equal(t, expected, actual, *msg_and_args)


def not_equal(t: Testing, expected: Any, actual: Any, *msg_and_args: Any) -> bool:
    if not equal_objects(expected, actual):
        return True
    return fail(t, f"Should not be: {render_inline(actual)}\n", *msg_and_args)


def equal_values(t: Testing, expected: Any, actual: Any, *msg_and_args: Any) -> bool:
    """
    Assert that two values are equal, or equal after a lossless conversion.

        assertions.equal_values(t, 123, 123.0)
    """
    if _equal_values(expected, actual):
        return True
    return _fail_not_equal(t, expected, actual, *msg_and_args)


def exactly(t: Testing, expected: Any, actual: Any, *msg_and_args: Any) -> bool:
    """Assert that two values have the same type and are equal."""
    if type(expected) is not type(actual):
        return fail(
            t,
            f"Types expected to match exactly\n\t{type_name(expected)} != {type_name(actual)}",
            *msg_and_args,
        )
    return equal(t, expected, actual, *msg_and_args)


def _fail_not_equal(t: Testing, expected: Any, actual: Any, *msg_and_args: Any) -> bool:
    diff = diff_values(expected, actual)
    e, a = format_unequal_values(expected, actual)
    return fail(t, f"Not equal: \nexpected: {e}\nactual  : {a}", *msg_and_args, diff=diff)


def format_unequal_values(expected: Any, actual: Any) -> tuple[str, str]:
    """
    Render two unequal values for a failure message.

    When their types differ, each value is shown as type(value) so that
    1 and 1.0 are told apart.
    """
    if type(expected) is not type(actual):
        return (
            f"{type_name(expected)}({render_inline(expected)})",
            f"{type_name(actual)}({render_inline(actual)})",
        )
    return render_inline(expected), render_inline(actual)


# ─────────────────────────────────────────────────────────────────────────────
# Emptiness, length and containment
# ─────────────────────────────────────────────────────────────────────────────

def empty(t: Testing, v: Any, *msg_and_args: Any) -> bool:
    """
    Assert that v is empty: None, False, a numeric zero, or a string or
    container of length 0.
    """
    if is_empty(v):
        return True
    return fail(t, f"Should be empty, but was {render_inline(v)}", *msg_and_args)


def not_empty(t: Testing, v: Any, *msg_and_args: Any) -> bool:
    if not is_empty(v):
        return True
    return fail(t, f"Should NOT be empty, but was {render_inline(v)}", *msg_and_args)


def length(t: Testing, v: Any, n: int, *msg_and_args: Any) -> bool:
    """
    Assert that v has exactly n items. Fails when v has no length.

        assertions.length(t, [1, 2, 3], 3)
    """
    actual, ok = get_len(v)
    if not ok:
        return fail(t, f'"{render_inline(v)}" could not be applied builtin len()', *msg_and_args)

    if actual != n:
        return fail(
            t,
            f'"{render_inline(v)}" should have {n} item(s), but has {actual}',
            *msg_and_args,
        )
    return True


def contains(t: Testing, container: Any, element: Any, *msg_and_args: Any) -> bool:
    """
    Assert that a string contains a substring, or that a sequence, set,
    mapping (by key), record (by field name) or queue contains an element.

        assertions.contains(t, "Hello World", "World")
        assertions.contains(t, ["Hello", "World"], "World")
        assertions.contains(t, {"Hello": "World"}, "Hello")
    """
    applicable, found = contains_element(container, element)
    if not applicable:
        return fail(
            t,
            f'"{render_inline(container)}" could not be applied builtin len()',
            *msg_and_args,
        )

    if not found:
        return fail(
            t,
            f'"{render_inline(container)}" does not contain "{render_inline(element)}"',
            *msg_and_args,
        )
    return True


def not_contains(t: Testing, container: Any, element: Any, *msg_and_args: Any) -> bool:
    applicable, found = contains_element(container, element)
    if not applicable:
        return fail(
            t,
            f'"{render_inline(container)}" could not be applied builtin len()',
            *msg_and_args,
        )

    if found:
        return fail(
            t,
            f'"{render_inline(container)}" should not contain "{render_inline(element)}"',
            *msg_and_args,
        )
    return True


# ─────────────────────────────────────────────────────────────────────────────
# Regular expressions and conditions
# ─────────────────────────────────────────────────────────────────────────────

def match(t: Testing, pattern: re.Pattern | str, subject: Any, *msg_and_args: Any) -> bool:
    """
    Assert that pattern matches somewhere in str(subject).

        assertions.match(t, re.compile("start"), "it's starting")
        assertions.match(t, "start...$", "it's not starting")
    """
    found, error = _search(pattern, subject)
    if error:
        return fail(t, error, *msg_and_args)

    if not found:
        return fail(t, f'Expect "{subject}" to match "{_pattern_text(pattern)}"', *msg_and_args)
    return True


def not_match(t: Testing, pattern: re.Pattern | str, subject: Any, *msg_and_args: Any) -> bool:
    found, error = _search(pattern, subject)
    if error:
        return fail(t, error, *msg_and_args)

    if found:
        return fail(t, f'Expect "{subject}" to NOT match "{_pattern_text(pattern)}"', *msg_and_args)
    return True


def _search(pattern: re.Pattern | str, subject: Any) -> tuple[bool, str | None]:
    """
    Search subject with pattern.

    Returns:
        Tuple of (found, error). error describes an unusable pattern.
    """
    try:
        compiled = pattern if isinstance(pattern, re.Pattern) else re.compile(str(pattern))
    except re.error as e:
        return False, f'Invalid regular expression "{pattern}": {e}'

    text: str | bytes = str(subject)
    if isinstance(compiled.pattern, bytes):
        text = subject if isinstance(subject, bytes) else text.encode("utf-8")

    return compiled.search(text) is not None, None


def _pattern_text(pattern: re.Pattern | str) -> str:
    return pattern.pattern if isinstance(pattern, re.Pattern) else str(pattern)


def condition(t: Testing, comp: Callable[[], Any], *msg_and_args: Any) -> bool:
    """Assert that comp() returns a truthy value."""
    if comp():
        return True
    return fail(t, "Condition test failed!", *msg_and_args)


# ─────────────────────────────────────────────────────────────────────────────
# Exceptions
# ─────────────────────────────────────────────────────────────────────────────

def raises(
    t: Testing,
    f: Callable[[], Any],
    *msg_and_args: Any,
    exc_type: type[BaseException] | tuple[type[BaseException], ...] = Exception,
) -> bool:
    """
    Assert that calling f() raises.

        assertions.raises(t, lambda: int("x"), exc_type=ValueError)

    Args:
        t: The sink
        f: Callable taking no arguments
        *msg_and_args: Optional user message
        exc_type: Exception type(s) f is expected to raise
    """
    try:
        f()
    except Exception as e:
        if isinstance(e, exc_type):
            return True
        return fail(
            t,
            f"Func {_func_name(f)} should raise {_class_name(exc_type)}\n"
            f"\tRaised value:\t{type_name(e)}: {e}",
            *msg_and_args,
        )

    return fail(
        t,
        f"Func {_func_name(f)} should raise {_class_name(exc_type)}\n\tRaised value:\tNone",
        *msg_and_args,
    )


def not_raises(t: Testing, f: Callable[[], Any], *msg_and_args: Any) -> bool:
    """Assert that calling f() does not raise."""
    try:
        f()
    except Exception as e:
        return fail(
            t,
            f"Func {_func_name(f)} should not raise\n\tRaised value:\t{type_name(e)}: {e}",
            *msg_and_args,
        )
    return True


def _func_name(f: Any) -> str:
    return getattr(f, "__qualname__", None) or type_name(f)


def _class_name(cls: Any) -> str:
    if isinstance(cls, tuple):
        return " | ".join(_class_name(c) for c in cls)
    return getattr(cls, "__qualname__", None) or repr(cls)


# ─────────────────────────────────────────────────────────────────────────────
# Tolerances
# ─────────────────────────────────────────────────────────────────────────────

def within_duration(
    t: Testing,
    expected: datetime,
    actual: datetime,
    delta: timedelta,
    *msg_and_args: Any,
) -> bool:
    """
    Assert that two datetimes are within delta of each other.

        assertions.within_duration(t, datetime.now(), datetime.now(), timedelta(seconds=10))
    """
    try:
        dt = expected - actual
    except TypeError as e:
        return fail(t, f"Parameters must be comparable datetimes: {e}", *msg_and_args)

    if dt < -delta or dt > delta:
        return fail(
            t,
            f"Max difference between {expected} and {actual} allowed is {delta}, but difference was {dt}",
            *msg_and_args,
        )
    return True


def in_delta(t: Testing, expected: Any, actual: Any, delta: Any, *msg_and_args: Any) -> bool:
    """
    Assert that two numbers are within delta of each other.

    NaN against NaN passes. NaN against anything else fails.

        assertions.in_delta(t, math.pi, 22 / 7.0, 0.01)
    """
    ef, eok = to_float(expected)
    af, aok = to_float(actual)
    df, dok = to_float(delta)
    if not (eok and aok and dok):
        return fail(t, "Parameters must be numerical", *msg_and_args)

    if math.isnan(ef) and math.isnan(af):
        return True

    if math.isnan(ef):
        return fail(t, f"Expected must not be NaN, but got {expected} with delta {delta}", *msg_and_args)

    if math.isnan(af):
        return fail(t, f"Expected {expected} with delta {delta}, but was NaN", *msg_and_args)

    if ef == af:
        return True

    dt = ef - af
    if not abs(dt) <= df:
        return fail(
            t,
            f"Max difference between {expected} and {actual} allowed is {delta}, but difference was {dt}",
            *msg_and_args,
        )
    return True


def in_delta_slice(t: Testing, expected: Any, actual: Any, delta: Any, *msg_and_args: Any) -> bool:
    """Same as in_delta, applied element-wise to two sequences of equal length."""
    if not (_is_number_sequence(expected) and _is_number_sequence(actual)):
        return fail(t, "Parameters must be slice", *msg_and_args)

    if len(expected) != len(actual):
        return fail(
            t,
            f"Parameters must have the same length, but got {len(expected)} and {len(actual)}",
            *msg_and_args,
        )

    for e, a in zip(expected, actual):
        if not in_delta(t, e, a, delta, *msg_and_args):
            return False
    return True


def in_epsilon(t: Testing, expected: Any, actual: Any, epsilon: Any, *msg_and_args: Any) -> bool:
    """
    Assert that the relative error |expected - actual| / |expected| is at
    most epsilon. An expected value of zero always fails.
    """
    eps, ok = to_float(epsilon)
    if not ok:
        return fail(t, "Parameters must be numerical", *msg_and_args)

    relative, error = relative_error(expected, actual)
    if error:
        return fail(t, error, *msg_and_args)

    if math.isnan(relative) and _both_nan(expected, actual):
        return True

    if not relative <= eps:
        return fail(
            t,
            f"Relative error is too high: {epsilon!r} (expected)\n        < {relative!r} (actual)",
            *msg_and_args,
        )
    return True


def in_epsilon_slice(t: Testing, expected: Any, actual: Any, epsilon: Any, *msg_and_args: Any) -> bool:
    """Same as in_epsilon, applied element-wise to two sequences of equal length."""
    if not (_is_number_sequence(expected) and _is_number_sequence(actual)):
        return fail(t, "Parameters must be slice", *msg_and_args)

    if len(expected) != len(actual):
        return fail(
            t,
            f"Parameters must have the same length, but got {len(expected)} and {len(actual)}",
            *msg_and_args,
        )

    for e, a in zip(expected, actual):
        if not in_epsilon(t, e, a, epsilon, *msg_and_args):
            return False
    return True


def relative_error(expected: Any, actual: Any) -> tuple[float, str | None]:
    """
    Compute |expected - actual| / |expected|.

    Returns:
        Tuple of (relative_error, error). error is set when a value is not
        numeric or expected is zero.
    """
    ef, ok = to_float(expected)
    if not ok:
        return 0.0, f"expected value {expected!r} cannot be converted to float"

    if math.isnan(ef):
        # NaN/NaN is decided by the caller
        return math.nan, None

    if ef == 0:
        return 0.0, "expected value must have a value other than zero to calculate the relative error"

    af, ok = to_float(actual)
    if not ok:
        return 0.0, f"actual value {actual!r} cannot be converted to float"

    return abs(ef - af) / abs(ef), None


def to_float(x: Any) -> tuple[float, bool]:
    """Convert a real number (never a bool) to float."""
    if isinstance(x, bool) or not isinstance(x, (numbers.Real, Decimal)):
        return 0.0, False
    try:
        return float(x), True
    except (OverflowError, ValueError):
        return 0.0, False


def _both_nan(expected: Any, actual: Any) -> bool:
    ef, eok = to_float(expected)
    af, aok = to_float(actual)
    return eok and aok and math.isnan(ef) and math.isnan(af)


def _is_number_sequence(v: Any) -> bool:
    return isinstance(v, Sequence) and not isinstance(v, (str, bytes, bytearray))


# ─────────────────────────────────────────────────────────────────────────────
# Errors
# ─────────────────────────────────────────────────────────────────────────────

def error(t: Testing, err: Any, *msg_and_args: Any) -> bool:
    """
    Assert that err is an exception instance.

        err = do_something()
        if assertions.error(t, err):
            assertions.equal_error(t, err, "not found")
    """
    if err is None:
        return fail(t, "An error is expected but got None.", *msg_and_args)

    if not isinstance(err, BaseException):
        return fail(t, f"Expected value is an error, but got: {render_inline(err)}", *msg_and_args)
    return True


def no_error(t: Testing, err: Any, *msg_and_args: Any) -> bool:
    """Assert that err is None."""
    if err is None:
        return True
    return fail(t, f"Received unexpected error:\n{_describe_error(err)}", *msg_and_args)


def equal_error(t: Testing, err: Any, text: str, *msg_and_args: Any) -> bool:
    """Assert that err is an exception whose message is exactly text."""
    if not error(t, err, *msg_and_args):
        return False

    actual = str(err)
    if actual != text:
        return fail(
            t,
            f"Error message not equal:\nexpected: {text!r}\nactual  : {actual!r}",
            *msg_and_args,
        )
    return True


def equal_errors(t: Testing, actual: Any, expected: Any, *msg_and_args: Any) -> bool:
    """Assert that two exceptions have the same type and the same message."""
    if not error(t, actual, *msg_and_args) or not error(t, expected, *msg_and_args):
        return False

    if type(actual) is not type(expected):
        return fail(
            t,
            f"Error types not equal:\nexpected: {type_name(expected)}\nactual  : {type_name(actual)}",
            *msg_and_args,
        )

    if str(actual) != str(expected):
        return fail(
            t,
            f"Error message not equal:\nexpected: {str(expected)!r}\nactual  : {str(actual)!r}",
            *msg_and_args,
        )
    return True


def _describe_error(err: Any) -> str:
    if isinstance(err, BaseException):
        return f"{type_name(err)}: {err}"
    return render_inline(err)


# ─────────────────────────────────────────────────────────────────────────────
# Streams
# ─────────────────────────────────────────────────────────────────────────────

def reader_contains(t: Testing, reader: IO[Any], element: Any, *msg_and_args: Any) -> bool:
    """
    Assert that the content of a readable stream contains element.

    The stream is read to the end and then rewound when it is seekable.

        assertions.reader_contains(t, response.raw, "Earth")
    """
    data, err = _read_all(reader)
    if err:
        return fail(t, err, *msg_and_args)
    return contains(t, data, element, *msg_and_args)


def reader_not_contains(t: Testing, reader: IO[Any], element: Any, *msg_and_args: Any) -> bool:
    data, err = _read_all(reader)
    if err:
        return fail(t, err, *msg_and_args)
    return not_contains(t, data, element, *msg_and_args)


def _read_all(reader: IO[Any]) -> tuple[Any, str | None]:
    """
    Read a stream to the end, then try to seek back to where reading began.

    Returns:
        Tuple of (data, error)
    """
    start = None
    try:
        if reader.seekable():
            start = reader.tell()
    except (AttributeError, OSError, ValueError):
        start = None

    try:
        data = reader.read()
    except (AttributeError, OSError, ValueError) as e:
        return None, f'Error read from "{type_name(reader)}" of "{e}"'

    if start is not None:
        try:
            reader.seek(start)
        except (OSError, ValueError) as e:
            logger.debug(f"Could not rewind {type_name(reader)}: {e}")

    return data, None


# ─────────────────────────────────────────────────────────────────────────────
# JSON
# ─────────────────────────────────────────────────────────────────────────────

def equal_json(t: Testing, expected: str | bytes, actual: str | bytes, *msg_and_args: Any) -> bool:
    """
    Assert that two JSON documents are equivalent.

        assertions.equal_json(t, '{"hello": "world", "foo": "bar"}', '{"foo": "bar", "hello": "world"}')
    """
    try:
        expected_value = json.loads(expected, parse_constant=reject_constant)
    except (ValueError, TypeError) as e:
        return fail(
            t,
            f"Expected value ('{_text(expected)}') is not valid json.\nJSON parsing error: '{e}'",
            *msg_and_args,
        )

    try:
        actual_value = json.loads(actual, parse_constant=reject_constant)
    except (ValueError, TypeError) as e:
        return fail(
            t,
            f"Input ('{_text(actual)}') needs to be valid json.\nJSON parsing error: '{e}'",
            *msg_and_args,
        )

    return equal(t, expected_value, actual_value, *msg_and_args)


def contains_json(t: Testing, actual: str | bytes, key: str, value: Any, *msg_and_args: Any) -> bool:
    """
    Assert that the JSON document has value at the dotted key path.

    The raw JSON found at the path is parsed into the shape of value:
    text for str and bytes, a truthy token for bool, a number for int and
    float, and canonical JSON for anything else.

        assertions.contains_json(t, '{"hello": "world", "foo": ["foo", "bar"]}', "hello", "world")
        assertions.contains_json(t, '{"hello": "world", "foo": ["foo", "bar"]}', "foo.1", "bar")
    """
    try:
        raw = get_json_value(actual, key)
    except JSONPathError as e:
        return fail(
            t,
            f"Expected contains json key {key} of value {render_inline(value)}, but got Error({e})",
            *msg_and_args,
        )

    ok, reason = matches_raw(raw, value)
    if not ok:
        return fail(
            t,
            f"Expected contains json key {key} of value {render_inline(value)}, "
            f"but got {raw.decode('utf-8')}: {reason}",
            *msg_and_args,
        )
    return True


def not_contains_json(t: Testing, actual: str | bytes, key: str, *msg_and_args: Any) -> bool:
    """
    Assert that the dotted key path does not resolve in the JSON document.

        assertions.not_contains_json(t, '{"hello": "world"}', "world")
    """
    try:
        raw = get_json_value(actual, key)
    except InvalidJSONError as e:
        return fail(
            t,
            f"Input ('{_text(actual)}') needs to be valid json.\nJSON parsing error: '{e.reason}'",
            *msg_and_args,
        )
    except JSONPathError:
        return True

    return fail(
        t,
        f"Expected does not contain json key {key}, but got {raw.decode('utf-8')}",
        *msg_and_args,
    )


def _text(document: str | bytes) -> str:
    if isinstance(document, (bytes, bytearray)):
        return bytes(document).decode("utf-8", errors="replace")
    return str(document)

