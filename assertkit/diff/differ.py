"""
Diff rendering for assertion failures.

diff_values() produces a unified diff between the canonical renderings of
two structured values (records, mappings, sequences). When the renderings
are identical but the values still differ (NaN, for example), it falls back
to a path-level listing of the differing leaves.

Every call builds its own state, so diffs may be computed from many threads
at once.
"""

from __future__ import annotations

import difflib
from typing import Any

from rich.console import Console
from rich.text import Text

from ..comparison.equality import equal_objects
from ..comparison.models import STRUCTURED_KINDS, Kind, classify, deref, exported_fields
from ..config import Palette, Settings, get_settings
from .render import render_inline, render_value

MISSING = "<missing>"


def diff_values(expected: Any, actual: Any, settings: Settings | None = None) -> str:
    """
    Return a diff of two values, or "" when a diff would not help.

    A diff is only produced when both values are of the same type and are
    records, mappings or sequences.

    Args:
        expected: The expected value
        actual: The actual value
        settings: Presentation settings (defaults to the process-wide settings)

    Returns:
        "\\n\\n" + diff + "\\n", or "" when there is nothing to show
    """
    if expected is None or actual is None:
        return ""

    expected = deref(expected)
    actual = deref(actual)
    if expected is None or actual is None:
        return ""

    if type(expected) is not type(actual):
        return ""

    if classify(expected) not in STRUCTURED_KINDS:
        return ""

    if settings is None:
        settings = get_settings()

    indent = " " * settings.indent
    expected_text = render_value(expected, indent)
    actual_text = render_value(actual, indent)

    if expected_text != actual_text:
        lines = list(difflib.unified_diff(
            expected_text.splitlines(),
            actual_text.splitlines(),
            fromfile="Expected",
            tofile="Actual",
            n=settings.context_lines,
            lineterm="",
        ))
    else:
        lines = value_diff(expected, actual)

    if not lines:
        return ""

    if settings.color:
        body = colorize(lines, settings.palette)
    else:
        body = "\n".join(lines)

    return "\n\n" + body + "\n"


def value_diff(expected: Any, actual: Any) -> list[str]:
    """
    List the differing leaves of two values.

    Returns:
        Lines of the form "path: expected X, got Y". Empty when the values
        are strictly equal.
    """
    lines: list[str] = []
    _walk(expected, actual, "", lines, set())
    return lines


def colorize(lines: list[str], palette: Palette) -> str:
    """
    Paint diff lines by their prefix: "+" added, "-" removed, others context.

    The "+++" and "---" file headers are painted like their prefix.
    """
    console = Console(
        force_terminal=True,
        color_system="standard",
        highlight=False,
        no_color=False,
    )

    text = Text("\n").join(Text(line, style=_line_style(line, palette)) for line in lines)
    with console.capture() as capture:
        console.print(text, end="", soft_wrap=True)
    return capture.get()


def _line_style(line: str, palette: Palette) -> str:
    if line.startswith("+"):
        return palette.added
    if line.startswith("-"):
        return palette.removed
    return palette.context


# ─────────────────────────────────────────────────────────────────────────────
# Structural walk
# ─────────────────────────────────────────────────────────────────────────────

def _walk(
    expected: Any,
    actual: Any,
    path: str,
    lines: list[str],
    visiting: set[tuple[int, int]],
) -> None:
    if equal_objects(expected, actual):
        return

    kind = classify(expected)
    if type(expected) is not type(actual) or kind not in STRUCTURED_KINDS:
        lines.append(_leaf(path, render_inline(expected), render_inline(actual)))
        return

    pair = (id(expected), id(actual))
    if pair in visiting:
        return
    visiting.add(pair)

    try:
        if kind is Kind.SEQUENCE:
            _walk_sequence(expected, actual, path, lines, visiting)
        elif kind is Kind.MAPPING:
            _walk_mapping(expected, actual, path, lines, visiting)
        else:
            _walk_record(expected, actual, path, lines, visiting)
    finally:
        visiting.discard(pair)


def _walk_sequence(expected, actual, path, lines, visiting) -> None:
    expected = list(expected)
    actual = list(actual)
    for i in range(max(len(expected), len(actual))):
        item_path = f"{path}[{i}]"
        if i >= len(actual):
            lines.append(_leaf(item_path, render_inline(expected[i]), MISSING))
        elif i >= len(expected):
            lines.append(_leaf(item_path, MISSING, render_inline(actual[i])))
        else:
            _walk(expected[i], actual[i], item_path, lines, visiting)


def _walk_mapping(expected, actual, path, lines, visiting) -> None:
    keys = list(expected.keys())
    keys.extend(k for k in actual.keys() if k not in expected)
    keys.sort(key=render_inline)

    for key in keys:
        key_path = f"{path}[{render_inline(key)}]"
        if key not in actual:
            lines.append(_leaf(key_path, render_inline(expected[key]), MISSING))
        elif key not in expected:
            lines.append(_leaf(key_path, MISSING, render_inline(actual[key])))
        else:
            _walk(expected[key], actual[key], key_path, lines, visiting)


def _walk_record(expected, actual, path, lines, visiting) -> None:
    actual_fields = {name: value for name, _, value in exported_fields(actual)}
    for name, _, value in exported_fields(expected):
        _walk(value, actual_fields.get(name), f"{path}.{name}", lines, visiting)


def _leaf(path: str, expected: str, actual: str) -> str:
    return f"{path or '<root>'}: expected {expected}, got {actual}"
