"""
assertkit - Assertions for Python test code

This package provides equality, emptiness, containment, exception, regex,
tolerance, error, stream and JSON assertions that report their failures to
a pluggable sink.

Subpackages:
    - comparison: Structural equality, emptiness and containment probing
    - jsonpath: Dotted-path extraction from JSON documents
    - diff: Canonical value rendering and unified diffs
    - reporting: Failure formatting, call-site traces and sinks
    - config: Presentation settings loaded from YAML
    - assertions: The assertion functions and the fluent Assertions object

Usage:
    import assertkit
    from assertkit import Recorder

    t = Recorder()
    assertkit.equal(t, {"id": 1, "tags": ["a"]}, {"id": 1, "tags": ["b"]})
    print(t.last)

    a = assertkit.new(t)
    a.contains_json('{"items": [{"name": "x"}]}', "items.0.name", "x")

With pytest, request the ``assertions`` fixture instead:

    def test_user(assertions):
        assertions.equal("alice", user.name)
"""

__version__ = "0.1.0"

# Re-export assertions for convenience
from .assertions import (
    # Fluent object
    Assertions,
    new,
    # Assertion functions
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
    true,
    within_duration,
    zero,
)

# Re-export comparison for convenience
from .comparison import (
    Kind,
    classify,
    contains_element,
    equal_exact,
    equal_objects,
    is_empty,
    is_nil,
    is_zero,
)

# Re-export jsonpath for convenience
from .jsonpath import InvalidJSONError, JSONPathError, get_json_value

# Re-export diff for convenience
from .diff import diff_values, render_value

# Re-export reporting for convenience
from .reporting import FailNowNotSupported, Recorder, Testing

# Re-export config for convenience
from .config import Settings, configure, get_settings, load_settings

__all__ = [
    # Package info
    "__version__",
    # Assertions - Fluent object
    "Assertions",
    "new",
    # Assertions - Functions
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
    "true",
    "within_duration",
    "zero",
    # Comparison
    "Kind",
    "classify",
    "contains_element",
    "equal_exact",
    "equal_objects",
    "is_empty",
    "is_nil",
    "is_zero",
    # JSON path
    "InvalidJSONError",
    "JSONPathError",
    "get_json_value",
    # Diff
    "diff_values",
    "render_value",
    # Reporting
    "FailNowNotSupported",
    "Recorder",
    "Testing",
    # Config
    "Settings",
    "configure",
    "get_settings",
    "load_settings",
]
