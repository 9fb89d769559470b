"""
Failure reporting for assertions.

Usage:
    from assertkit.reporting import Recorder, fail

    t = Recorder()
    fail(t, "Should be true", "checking %s", "login")
    print(t.last)
    #
    #   Trace:    tests/test_login.py:12
    #   Error:    Should be true
    #   Messages: checking login
"""

# Models
from .models import FailureRecord, LabeledContent

# Sinks
from .sinks import FailNower, Recorder, Testing

# Reporter
from .reporter import (
    FailNowNotSupported,
    fail,
    fail_now,
    format_extra_args,
    is_test,
    labeled_output,
    padding_lines,
    stack_traces,
)

__all__ = [
    # Models
    "FailureRecord",
    "LabeledContent",
    # Sinks
    "FailNower",
    "Recorder",
    "Testing",
    # Reporter
    "FailNowNotSupported",
    "fail",
    "fail_now",
    "format_extra_args",
    "is_test",
    "labeled_output",
    "padding_lines",
    "stack_traces",
]
