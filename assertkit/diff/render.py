"""
Canonical value rendering.

Renders arbitrary values into deterministic, indented text so that two
renderings can be diffed line by line. Mapping keys and set members are
sorted, record fields keep declaration order, and memory addresses never
appear in the output.
"""

from __future__ import annotations

import re
from typing import Any

from ..comparison.models import (
    Kind,
    channel_len,
    classify,
    exported_fields,
    type_name,
)

ADDRESS_PATTERN = re.compile(r" at 0x[0-9a-fA-F]+")

CYCLE_MARKER = "<cycle>"

# Opening and closing brackets per builtin container type
_BRACKETS = {
    list: ("[", "]"),
    tuple: ("(", ")"),
}


def render_value(value: Any, indent: str = "  ") -> str:
    """
    Render a value as deterministic multi-line text.

    Args:
        value: Any value
        indent: String repeated once per nesting level

    Returns:
        The rendering, one container entry per line
    """
    return _Renderer(indent, inline=False).render(value, 0)


def render_inline(value: Any) -> str:
    """Render a value on a single line, with the same ordering rules."""
    return _Renderer("", inline=True).render(value, 0)


def strip_addresses(text: str) -> str:
    return ADDRESS_PATTERN.sub("", text)


class _Renderer:
    """One rendering pass. Tracks the containers currently being rendered."""

    def __init__(self, indent: str, inline: bool):
        self.indent = indent
        self.inline = inline
        self.visiting: set[int] = set()

    def render(self, value: Any, depth: int) -> str:
        kind = classify(value)

        if kind is Kind.NIL:
            return "None"

        if kind in (Kind.PRIMITIVE, Kind.TEXT):
            return strip_addresses(repr(value))

        if kind is Kind.REFERENCE:
            target = value()
            if target is None:
                return "<dead reference>"
            return "&" + self.render(target, depth)

        if kind is Kind.FUNCTION:
            name = getattr(value, "__qualname__", None) or type_name(value)
            return f"<function {name}>"

        if kind is Kind.CHANNEL:
            return f"<{type_name(value)} len={channel_len(value)}>"

        if kind is Kind.OPAQUE:
            return strip_addresses(repr(value))

        if id(value) in self.visiting:
            return CYCLE_MARKER

        self.visiting.add(id(value))
        try:
            return self._render_container(value, kind, depth)
        finally:
            self.visiting.discard(id(value))

    def _render_container(self, value: Any, kind: Kind, depth: int) -> str:
        name = type_name(value)

        if kind is Kind.MAPPING:
            entries = [
                (self.render(k, depth + 1), self.render(v, depth + 1))
                for k, v in value.items()
            ]
            entries.sort(key=lambda entry: entry[0])
            lines = [f"{k}: {v}" for k, v in entries]
            return self._wrap(name, "{", "}", lines, depth)

        if kind is Kind.SET:
            lines = sorted(self.render(item, depth + 1) for item in value)
            return self._wrap(name, "{", "}", lines, depth)

        if kind is Kind.RECORD:
            lines = [
                f"{field_name}: {self.render(field_value, depth + 1)}"
                for field_name, _, field_value in exported_fields(value)
            ]
            return self._wrap(name, "{", "}", lines, depth)

        # Sequence
        open_, close = _BRACKETS.get(type(value), ("[", "]"))
        lines = [self.render(item, depth + 1) for item in value]
        return self._wrap(name, open_, close, lines, depth)

    def _wrap(self, name: str, open_: str, close: str, lines: list[str], depth: int) -> str:
        if not lines:
            return f"{name}{open_}{close}"

        if self.inline:
            return f"{name}{open_}{', '.join(lines)}{close}"

        inner = self.indent * (depth + 1)
        body = "".join(f"{inner}{line},\n" for line in lines)
        return f"{name}{open_}\n{body}{self.indent * depth}{close}"
