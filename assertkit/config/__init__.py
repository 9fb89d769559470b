"""
Settings for assertkit.

Settings control presentation only: diff coloring and layout, and how many
call-site frames a failure shows. They never change whether an assertion
passes.

Settings file (YAML):
    version: 1
    diff:
      color: true
      context_lines: 1
      indent: 2
    palette:
      added: blue
      removed: red
      context: bright_black
    trace:
      max_frames: 1

Usage:
    from assertkit.config import load_settings, configure

    settings, result = load_settings("assertkit.yaml")
    if result.is_valid:
        configure(settings)

Alternatively, point ASSERTKIT_CONFIG at the file and it is loaded on
first use.
"""

# Models
from .models import Palette, Settings

# Validation
from .validation import SettingsValidator, ValidationError, ValidationResult

# Parser
from .parser import SettingsParser

# Loader
from .loader import (
    CONFIG_ENV_VAR,
    configure,
    get_settings,
    load_settings,
    load_settings_yaml,
    reset_settings,
)

__all__ = [
    # Models
    "Palette",
    "Settings",
    # Validation
    "SettingsValidator",
    "ValidationError",
    "ValidationResult",
    # Parser
    "SettingsParser",
    # Loader
    "CONFIG_ENV_VAR",
    "configure",
    "get_settings",
    "load_settings",
    "load_settings_yaml",
    "reset_settings",
]
