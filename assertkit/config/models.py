"""
Typed settings for assertkit.

This module contains the frozen dataclasses that hold the process-wide
presentation settings: diff coloring, diff layout and trace depth.
"""

from __future__ import annotations

from dataclasses import dataclass, field


# ─────────────────────────────────────────────────────────────────────────────
# Palette
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Palette:
    """
    Colors used when painting a diff.

    Values are rich color names or hex codes ("blue", "#ff0000", ...).
    """
    added: str = "blue"
    removed: str = "red"
    context: str = "bright_black"


# ─────────────────────────────────────────────────────────────────────────────
# Settings
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Settings:
    """Process-wide settings, read-only once installed."""
    color: bool = False
    context_lines: int = 1  # unified diff context window
    indent: int = 2  # spaces per nesting level in rendered values
    palette: Palette = field(default_factory=Palette)
    max_trace_frames: int = 1
