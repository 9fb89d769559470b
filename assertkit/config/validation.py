"""
Validation for assertkit settings files.

Raw parsed YAML is checked against the settings schema. Problems are
collected, not raised, so a single run reports every mistake in the file.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from rich.color import Color, ColorParseError

SETTINGS_VERSION = 1

# Section name -> keys allowed inside it
SECTIONS: dict[str, frozenset[str]] = {
    "diff": frozenset({"color", "context_lines", "indent"}),
    "palette": frozenset({"added", "removed", "context"}),
    "trace": frozenset({"max_frames"}),
}


# ─────────────────────────────────────────────────────────────────────────────
# Validation Result Types
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class ValidationError:
    """One problem found in a settings file."""
    path: str  # e.g., "palette.added"
    message: str
    value: Any = None
    suggestion: str | None = None

    def __str__(self) -> str:
        lines = [f"❌ {self.path}: {self.message}"]
        if self.value is not None:
            lines.append(f"   Got: {self.value!r}")
        if self.suggestion:
            lines.append(f"   💡 {self.suggestion}")
        return "\n".join(lines)


@dataclass
class ValidationResult:
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add_error(self, path: str, message: str, value: Any = None, suggestion: str | None = None) -> None:
        self.errors.append(ValidationError(path, message, value, suggestion))

    def __str__(self) -> str:
        if self.is_valid:
            return "✅ Settings are valid"
        header = f"Invalid settings ({len(self.errors)} error(s)):\n"
        return "\n".join([header, *(str(e) for e in self.errors)])


# ─────────────────────────────────────────────────────────────────────────────
# Field checks
# ─────────────────────────────────────────────────────────────────────────────

def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_bool(value: Any) -> tuple[str, str | None] | None:
    if isinstance(value, bool):
        return None
    return "Must be a boolean", "Use true or false"


def _check_int_at_least(minimum: int) -> Callable[[Any], tuple[str, str | None] | None]:
    def check(value: Any) -> tuple[str, str | None] | None:
        if _is_int(value) and value >= minimum:
            return None
        if minimum == 0:
            return "Must be a non-negative integer", None
        return "Must be a positive integer", None

    return check


def _check_color(value: Any) -> tuple[str, str | None] | None:
    if not isinstance(value, str):
        return "Must be a string", None
    try:
        Color.parse(value)
    except ColorParseError:
        return "Unknown color", "Use a color name such as 'red' or a hex code such as '#ff0000'"
    return None


# "section.key" -> check returning (message, suggestion) on failure
FIELD_CHECKS: dict[str, Callable[[Any], tuple[str, str | None] | None]] = {
    "diff.color": _check_bool,
    "diff.context_lines": _check_int_at_least(0),
    "diff.indent": _check_int_at_least(0),
    "palette.added": _check_color,
    "palette.removed": _check_color,
    "palette.context": _check_color,
    "trace.max_frames": _check_int_at_least(1),
}


# ─────────────────────────────────────────────────────────────────────────────
# Settings Validator
# ─────────────────────────────────────────────────────────────────────────────

class SettingsValidator:
    """
    Validates raw parsed YAML against the settings schema.

        result = SettingsValidator({"version": 1, "diff": {"indent": 4}}).validate()
        assert result.is_valid
    """

    def __init__(self, data: dict[str, Any]):
        self.data = data
        self.result = ValidationResult()

    def validate(self) -> ValidationResult:
        self._validate_top_level()
        if not self.result.is_valid:
            return self.result

        self._validate_version()
        for name, keys in SECTIONS.items():
            section = self._section(name, keys)
            if section is not None:
                self._validate_fields(name, section)

        return self.result

    def _validate_top_level(self) -> None:
        allowed = {"version", *SECTIONS}

        if "version" not in self.data:
            self.result.add_error(
                "version",
                "Required field 'version' is missing",
                suggestion=f"Add 'version: {SETTINGS_VERSION}' to your settings file",
            )

        for key in sorted(set(self.data) - allowed, key=str):
            self.result.add_error(
                str(key),
                f"Unknown top-level field '{key}'",
                suggestion=f"Valid fields are: {', '.join(sorted(allowed))}",
            )

    def _validate_version(self) -> None:
        version = self.data["version"]
        if not _is_int(version):
            message = "Must be an integer"
        elif version != SETTINGS_VERSION:
            message = "Unsupported settings version"
        else:
            return
        self.result.add_error("version", message, value=version, suggestion=f"Use 'version: {SETTINGS_VERSION}'")

    def _section(self, name: str, keys: frozenset[str]) -> dict[str, Any] | None:
        """Fetch an optional section, reporting non-object sections and unknown keys."""
        section = self.data.get(name)
        if section is None:
            return None

        if not isinstance(section, dict):
            self.result.add_error(name, "Must be an object", value=section)
            return None

        for key in sorted(set(section) - keys, key=str):
            self.result.add_error(
                f"{name}.{key}",
                f"Unknown field '{key}'",
                suggestion=f"Valid fields are: {', '.join(sorted(keys))}",
            )
        return section

    def _validate_fields(self, name: str, section: dict[str, Any]) -> None:
        for key, value in section.items():
            check = FIELD_CHECKS.get(f"{name}.{key}")
            if check is None or value is None:
                continue
            problem = check(value)
            if problem is not None:
                message, suggestion = problem
                self.result.add_error(f"{name}.{key}", message, value=value, suggestion=suggestion)
