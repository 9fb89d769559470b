"""
Settings loader and process-wide settings.

This module provides the public API for loading settings files from disk
or YAML strings, and for installing the settings every assertion reads.
Settings are installed once (explicitly, or lazily from the file named by
ASSERTKIT_CONFIG) and are read-only afterwards.
"""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from typing import Any

import yaml

from .models import Settings
from .parser import SettingsParser
from .validation import SettingsValidator, ValidationResult

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "ASSERTKIT_CONFIG"

_settings: Settings | None = None
_settings_lock = threading.Lock()


def load_settings(path: str | Path) -> tuple[Settings | None, ValidationResult]:
    """
    Load and validate settings from a YAML file.

    Returns:
        Tuple of (Settings or None, ValidationResult). Settings is None
        when the file is missing or invalid.

    Example:
        settings, result = load_settings("assertkit.yaml")
        if not result.is_valid:
            print(result)
        else:
            configure(settings)
    """
    path = Path(path)
    if not path.is_file():
        return _invalid(str(path), "File not found", suggestion="Check the file path is correct")

    return load_settings_yaml(path.read_text(encoding="utf-8"), source=str(path))


def load_settings_yaml(yaml_string: str, source: str = "yaml") -> tuple[Settings | None, ValidationResult]:
    """Validate settings given as a YAML string. source names it in errors."""
    try:
        data = yaml.safe_load(yaml_string)
    except yaml.YAMLError as e:
        return _invalid(source, f"Invalid YAML syntax: {e}", suggestion="Check indentation and colons")

    # An empty document means all defaults
    if data is None:
        return Settings(), ValidationResult()

    if not isinstance(data, dict):
        return _invalid(
            source,
            "File must contain a YAML object (not a list or scalar)",
            value=type(data).__name__,
        )

    result = SettingsValidator(data).validate()
    if not result.is_valid:
        return None, result
    return SettingsParser(data).parse(), result


def configure(settings: Settings) -> None:
    """Install the process-wide settings."""
    global _settings
    with _settings_lock:
        _settings = settings


def get_settings() -> Settings:
    """
    Return the process-wide settings.

    On first use, settings are loaded from the file named by the
    ASSERTKIT_CONFIG environment variable when it is set. An invalid file
    is logged and the defaults are used instead.
    """
    global _settings
    if _settings is not None:
        return _settings

    with _settings_lock:
        if _settings is None:
            _settings = _settings_from_env()
        return _settings


def reset_settings() -> None:
    """Forget the installed settings so the next read loads them again."""
    global _settings
    with _settings_lock:
        _settings = None


def _settings_from_env() -> Settings:
    path = os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return Settings()

    settings, result = load_settings(path)
    if settings is None:
        logger.warning(f"Ignoring invalid settings file {path}:\n{result}")
        return Settings()

    logger.info(f"Loaded assertkit settings from {path}")
    return settings


def _invalid(path: str, message: str, **details: Any) -> tuple[None, ValidationResult]:
    result = ValidationResult()
    result.add_error(path, message, **details)
    return None, result
