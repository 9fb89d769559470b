"""
Assertions for test code.

Module-level functions take the sink first:

    from assertkit import assertions

    assertions.equal(t, {"a": [1, 2]}, {"a": [1, 2]})
    assertions.contains_json(t, '{"foo": ["foo", "bar"]}', "foo.1", "bar")

Or bind the sink once:

    a = assertions.new(t)
    a.in_delta(math.pi, 22 / 7.0, 0.01)
    a.raises(lambda: int("x"), exc_type=ValueError)
"""

# Assertion functions
from .asserts import (
    condition,
    contains,
    contains_json,
    empty,
    equal,
    equal_error,
    equal_errors,
    equal_json,
    equal_values,
    error,
    exactly,
    fail,
    fail_now,
    false,
    format_unequal_values,
    in_delta,
    in_delta_slice,
    in_epsilon,
    in_epsilon_slice,
    is_instance,
    is_type,
    length,
    match,
    nil,
    no_error,
    not_contains,
    not_contains_json,
    not_empty,
    not_equal,
    not_match,
    not_nil,
    not_raises,
    not_zero,
    raises,
    reader_contains,
    reader_not_contains,
    relative_error,
    to_float,
    true,
    within_duration,
    zero,
)

# Fluent object
from .forward import Assertions, new

__all__ = [
    # Assertion functions
    "condition",
    "contains",
    "contains_json",
    "empty",
    "equal",
    "equal_error",
    "equal_errors",
    "equal_json",
    "equal_values",
    "error",
    "exactly",
    "fail",
    "fail_now",
    "false",
    "format_unequal_values",
    "in_delta",
    "in_delta_slice",
    "in_epsilon",
    "in_epsilon_slice",
    "is_instance",
    "is_type",
    "length",
    "match",
    "nil",
    "no_error",
    "not_contains",
    "not_contains_json",
    "not_empty",
    "not_equal",
    "not_match",
    "not_nil",
    "not_raises",
    "not_zero",
    "raises",
    "reader_contains",
    "reader_not_contains",
    "relative_error",
    "to_float",
    "true",
    "within_duration",
    "zero",
    # Fluent object
    "Assertions",
    "new",
]
