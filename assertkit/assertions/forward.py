"""
Fluent assertions bound to a sink.

    a = Assertions(t)
    a.equal(123, 123)
    a.contains(["Hello", "World"], "World")
"""

from __future__ import annotations

import functools
from typing import Any, Callable

from . import asserts
from ..reporting.sinks import Testing


def _forward(func: Callable[..., bool]) -> Callable[..., bool]:
    """Turn an assertion function into a method that supplies self.t."""

    @functools.wraps(func)
    def method(self: Assertions, *args: Any, **kwargs: Any) -> bool:
        return func(self.t, *args, **kwargs)

    return method


class Assertions:
    """Every assertion function as a method, with the sink bound."""

    def __init__(self, t: Testing):
        self.t = t

    # Nil, booleans, zero and types
    nil = _forward(asserts.nil)
    not_nil = _forward(asserts.not_nil)
    true = _forward(asserts.true)
    false = _forward(asserts.false)
    zero = _forward(asserts.zero)
    not_zero = _forward(asserts.not_zero)
    is_type = _forward(asserts.is_type)
    is_instance = _forward(asserts.is_instance)

    # Equality
    equal = _forward(asserts.equal)
    not_equal = _forward(asserts.not_equal)
    equal_values = _forward(asserts.equal_values)
    exactly = _forward(asserts.exactly)

    # Emptiness, length and containment
    empty = _forward(asserts.empty)
    not_empty = _forward(asserts.not_empty)
    length = _forward(asserts.length)
    contains = _forward(asserts.contains)
    not_contains = _forward(asserts.not_contains)

    # Regular expressions and conditions
    match = _forward(asserts.match)
    not_match = _forward(asserts.not_match)
    condition = _forward(asserts.condition)

    # Exceptions
    raises = _forward(asserts.raises)
    not_raises = _forward(asserts.not_raises)

    # Tolerances
    within_duration = _forward(asserts.within_duration)
    in_delta = _forward(asserts.in_delta)
    in_delta_slice = _forward(asserts.in_delta_slice)
    in_epsilon = _forward(asserts.in_epsilon)
    in_epsilon_slice = _forward(asserts.in_epsilon_slice)

    # Errors
    error = _forward(asserts.error)
    no_error = _forward(asserts.no_error)
    equal_error = _forward(asserts.equal_error)
    equal_errors = _forward(asserts.equal_errors)

    # Streams
    reader_contains = _forward(asserts.reader_contains)
    reader_not_contains = _forward(asserts.reader_not_contains)

    # JSON
    equal_json = _forward(asserts.equal_json)
    contains_json = _forward(asserts.contains_json)
    not_contains_json = _forward(asserts.not_contains_json)

    # Reporting
    fail = _forward(asserts.fail)
    fail_now = _forward(asserts.fail_now)


def new(t: Testing) -> Assertions:
    """Create an Assertions object for the sink t."""
    return Assertions(t)
