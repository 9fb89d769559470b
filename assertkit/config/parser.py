"""
Settings parser.

This module converts validated YAML data into a typed Settings structure.
Missing keys, and keys left empty in the file, keep their defaults.
"""

from __future__ import annotations

from typing import Any

from .models import Palette, Settings


def _value(section: dict[str, Any], key: str, default: Any) -> Any:
    value = section.get(key)
    return default if value is None else value


class SettingsParser:
    """Parses and converts validated YAML to typed Settings."""

    def __init__(self, data: dict[str, Any]):
        self.data = data

    def parse(self) -> Settings:
        diff = self.data.get("diff") or {}
        trace = self.data.get("trace") or {}
        defaults = Settings()

        return Settings(
            color=_value(diff, "color", defaults.color),
            context_lines=_value(diff, "context_lines", defaults.context_lines),
            indent=_value(diff, "indent", defaults.indent),
            palette=self._parse_palette(),
            max_trace_frames=_value(trace, "max_frames", defaults.max_trace_frames),
        )

    def _parse_palette(self) -> Palette:
        palette = self.data.get("palette") or {}
        defaults = Palette()
        return Palette(
            added=_value(palette, "added", defaults.added),
            removed=_value(palette, "removed", defaults.removed),
            context=_value(palette, "context", defaults.context),
        )
