"""
Failure reporter.

Builds the labeled failure block for an assertion and hands it to the sink:

    \tTrace:   \ttests/test_users.py:42
    \tError:   \tNot equal: ...
    \tMessages:\tuser lookup

Continuation lines of an entry are aligned under its first line.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any

from ..config import get_settings
from .models import FailureRecord, LabeledContent
from .sinks import FailNower, Testing

logger = logging.getLogger(__name__)

# Frames from these modules are the assertion library itself
LIBRARY_PACKAGE = "assertkit"

# Reaching a frame from one of these modules ends the walk
RUNNER_PACKAGES = ("_pytest", "pluggy", "unittest")


class FailNowNotSupported(RuntimeError):
    """Raised by fail_now() when the sink cannot abort the test."""

    def __init__(self, sink: Any):
        self.sink = sink
        super().__init__(
            f"test failed and {type(sink).__qualname__} does not implement fail_now()"
        )


def fail(t: Testing, message: str, *msg_and_args: Any, diff: str = "") -> bool:
    """
    Report a failure to the sink.

    Args:
        t: The sink
        message: The assertion's failure message
        *msg_and_args: Optional user message, a format string and its args
        diff: Diff text to append to the message

    Returns:
        Always False, so assertions can ``return fail(...)``
    """
    record = FailureRecord(
        trace=stack_traces(get_settings().max_trace_frames),
        message=message,
        diff=diff,
        extra=format_extra_args(*msg_and_args),
    )

    width = getattr(t, "line_prefix_width", 0)
    indent = " " * width if isinstance(width, int) and width > 0 else ""
    block = "\n" + labeled_output(record.labeled(), indent)

    logger.debug(f"Assertion failed at {', '.join(record.trace) or '?'}: {message}")
    t.error("%s", block)
    return False


def fail_now(t: Testing, message: str, *msg_and_args: Any, diff: str = "") -> bool:
    """
    Report a failure and abort the test.

    Raises:
        FailNowNotSupported: If the sink has no fail_now()
    """
    fail(t, message, *msg_and_args, diff=diff)

    if not isinstance(t, FailNower):
        raise FailNowNotSupported(t)

    t.fail_now()
    return False


def stack_traces(max_frames: int = 1) -> list[str]:
    """
    Return the call sites leading to the failing assertion, innermost first.

    Frames inside assertkit are skipped. The walk stops at test runner
    frames, and after the first frame that belongs to a test function.
    """
    callers: list[str] = []
    frame = sys._getframe(1)

    while frame is not None:
        module = frame.f_globals.get("__name__", "")
        if _in_package(module, RUNNER_PACKAGES):
            break

        if _in_package(module, (LIBRARY_PACKAGE,)):
            frame = frame.f_back
            continue

        parts = Path(frame.f_code.co_filename).parts
        callers.append(f"{'/'.join(parts[-2:])}:{frame.f_lineno}")

        name = frame.f_code.co_name
        if is_test(name, "test") or is_test(name, "Test"):
            break

        frame = frame.f_back

    return callers[:max_frames]


def is_test(name: str, prefix: str) -> bool:
    """
    Tell whether a function name looks like a test.

    "test" and "test_login" are tests, "testing" is not: the character
    after the prefix must not be a lower-case letter.
    """
    if not name.startswith(prefix):
        return False
    if len(name) == len(prefix):
        return True
    return not name[len(prefix)].islower()


def format_extra_args(*msg_and_args: Any) -> str:
    """
    Format the optional user message of an assertion.

    A single argument is used as-is (bytes are decoded). With several, a
    string first argument is a %-format for the rest. Anything else is
    joined with spaces.
    """
    if not msg_and_args:
        return ""

    first = msg_and_args[0]
    if len(msg_and_args) == 1:
        if isinstance(first, (bytes, bytearray)):
            return bytes(first).decode("utf-8", errors="replace")
        return str(first)

    if isinstance(first, str):
        try:
            return first % msg_and_args[1:]
        except (TypeError, ValueError, KeyError):
            pass

    return " ".join(str(arg) for arg in msg_and_args)


def labeled_output(content: list[LabeledContent], indent: str = "") -> str:
    """
    Render labeled entries, one per line:

        {indent}\\t{label}:{align_spaces}\\t{content}\\n

    Labels are padded to the longest label so contents line up.
    """
    longest = max((len(c.label) for c in content), default=0)

    output = []
    for c in content:
        pad = " " * (longest - len(c.label))
        output.append(f"{indent}\t{c.label}:{pad}\t{padding_lines(c.content, longest, indent)}\n")
    return "".join(output)


def padding_lines(message: str, longest_label: int, indent: str = "") -> str:
    """Align every line after the first under the first line's text column."""
    prefix = f"\n{indent}\t{' ' * (longest_label + 1)}\t"
    return prefix.join(message.splitlines())


def _in_package(module: str, packages: tuple[str, ...]) -> bool:
    return any(module == p or module.startswith(p + ".") for p in packages)
