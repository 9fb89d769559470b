"""
Matching raw JSON values against Python values.

The extractor hands back raw JSON text; these helpers parse that text
into the shape of the expected value before comparing.
"""

from __future__ import annotations

import json
from typing import Any

# Tokens accepted as a true boolean, compared case-insensitively
TRUTHY_TOKENS = frozenset({"true", "1", "on", "yes"})


def matches_raw(raw: bytes, expected: Any) -> tuple[bool, str]:
    """
    Compare a raw JSON value with an expected Python value.

    Returns:
        Tuple of (matched, reason). reason explains a mismatch and is
        empty when the values match.
    """
    text = raw.decode("utf-8")

    if isinstance(expected, (bytes, bytearray)):
        expected = bytes(expected).decode("utf-8")

    if isinstance(expected, str):
        if text == expected:
            return True, ""
        return False, f"expected {expected!r}, but got {text!r}"

    # bool before int: bool is an int subclass
    if isinstance(expected, bool):
        actual = text.strip().lower() in TRUTHY_TOKENS
        if actual == expected:
            return True, ""
        tokens = "|".join(sorted(TRUTHY_TOKENS))
        return False, f"expected {'one of' if expected else 'none of'} [{tokens}], but got {text!r}"

    if isinstance(expected, int):
        try:
            actual_int = int(text)
        except ValueError:
            return False, f"expected integer {expected}, but got {text!r}"
        if actual_int == expected:
            return True, ""
        return False, f"expected {expected}, but got {text}"

    if isinstance(expected, float):
        try:
            actual_float = float(text)
        except ValueError:
            return False, f"expected number {expected}, but got {text!r}"
        if actual_float == expected:
            return True, ""
        return False, f"expected {expected}, but got {text}"

    if is_json_equal_object(text, expected):
        return True, ""
    return False, f"expected {_dumps(expected)}, but got {text}"


def is_json_equal_object(data: str | bytes, obj: Any) -> bool:
    """Check whether a JSON document and a Python object serialize identically."""
    try:
        value = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError, TypeError):
        return False

    try:
        return _dumps(value) == _dumps(obj)
    except (TypeError, ValueError):
        return False


def _dumps(value: Any) -> str:
    return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
