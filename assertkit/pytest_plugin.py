"""pytest plugin for assertkit.

Auto-discovered by pytest via the pytest11 entry point declared in
pyproject.toml. It provides an ``assertions`` fixture whose failures are
collected during the test and reported together when the test finishes:

    def test_user(assertions):
        assertions.equal("alice", user.name)
        assertions.length(user.roles, 2)

fail_now() aborts the test immediately with everything collected so far.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import pytest

from . import __version__
from .assertions.forward import Assertions
from .reporting.sinks import Recorder


class PytestSink(Recorder):
    """Sink that collects failures and hands them to pytest."""

    def fail_now(self) -> None:
        super().fail_now()
        pytest.fail(self.report(), pytrace=False)

    def report(self) -> str:
        count = len(self.messages)
        header = f"{count} assertion(s) failed:"
        return "\n".join([header, *self.messages])


@pytest.fixture
def assertions() -> Iterator[Assertions]:
    """Assertions bound to a sink that fails the test at teardown.

    Failures do not stop the test; every failing assertion is reported.
    """
    sink = PytestSink()
    yield Assertions(sink)

    if sink.failed and not sink.aborted:
        pytest.fail(sink.report(), pytrace=False)


def pytest_report_header(config: Any) -> str:
    return f"assertkit: {__version__}"
