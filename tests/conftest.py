"""Pytest configuration and fixtures."""

import pytest

from assertkit.config import reset_settings
from assertkit.reporting import Recorder

pytest_plugins = ["pytester"]


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Start every test from default settings, ignoring any ASSERTKIT_CONFIG."""
    monkeypatch.delenv("ASSERTKIT_CONFIG", raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def t():
    """A recording sink standing in for the test object."""
    return Recorder()
