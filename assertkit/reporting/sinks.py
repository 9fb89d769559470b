"""
Failure sinks.

A sink is whatever receives failure reports. The only required method is
a printf-style error(msg, *args), so a logging.Logger is a valid sink.
Sinks may also provide fail_now() to abort the current test, and a
line_prefix_width attribute to indent failure blocks past their own line
prefix.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Testing(Protocol):
    """The minimal sink interface."""

    def error(self, msg: str, *args: Any) -> Any:
        ...


@runtime_checkable
class FailNower(Protocol):
    """A sink that can abort the current test."""

    def fail_now(self) -> Any:
        ...


class Recorder:
    """
    In-memory sink that records formatted failures.

    Example:
        t = Recorder()
        equal(t, 1, 2)
        assert t.failed
        print(t.messages[0])
    """

    def __init__(self, line_prefix_width: int = 0):
        self.messages: list[str] = []
        self.aborted = False
        self.line_prefix_width = line_prefix_width

    def error(self, msg: str, *args: Any) -> None:
        self.messages.append(msg % args if args else msg)

    def fail_now(self) -> None:
        self.aborted = True

    @property
    def failed(self) -> bool:
        return len(self.messages) > 0

    @property
    def last(self) -> str | None:
        """The most recent failure, or None."""
        return self.messages[-1] if self.messages else None

    def reset(self) -> None:
        self.messages.clear()
        self.aborted = False
