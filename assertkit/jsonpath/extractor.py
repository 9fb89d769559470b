"""
Dotted-path extraction from JSON documents.

A path such as "items.1.name" is walked left to right. Each segment is
tried as an object key first and, failing that, as a zero-based array
index. The value found is returned as raw JSON text, so numbers come back
exactly as they were written in the document.

Known limitation: there is no escape for a literal dot inside a key. The
only concession is that the whole remaining path is tried as a single key
before it is split, so {"a.b": 1} still resolves "a.b".
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from jsonpath_ng.jsonpath import DatumInContext, Fields, Index

logger = logging.getLogger(__name__)

INDEX_PATTERN = re.compile(r"[0-9]+", re.ASCII)


class JSONPathError(LookupError):
    """Raised when a path cannot be resolved in a JSON document."""

    def __init__(self, segment: str, path: str, reason: str = "key path not found"):
        self.segment = segment
        self.path = path
        self.reason = reason
        super().__init__(f"{reason}: segment {segment!r} of path {path!r}")


class InvalidJSONError(JSONPathError):
    """Raised when the document itself is not valid JSON."""


class RawNumber(str):
    """A JSON number token, kept as its source text."""


def get_json_value(document: str | bytes, path: str) -> bytes:
    """
    Extract the raw value at a dotted path.

    Args:
        document: JSON text
        path: Dotted path, e.g. "a.b.1"

    Returns:
        Raw bytes of the value. Strings are unquoted, numbers and literals
        keep their JSON text, objects and arrays are compact JSON.

    Raises:
        InvalidJSONError: If the document is not valid JSON.
        JSONPathError: If a segment is neither a key nor a valid index
            at its position.

    Example:
        get_json_value('{"a":{"b":[1,2,3]}}', "a.b.1")  # b"2"
    """
    current = DatumInContext.wrap(decode_document(document, path))
    remaining = path

    while True:
        found = _lookup_key(current, remaining)
        if found is not None:
            current = found
            break

        segment, sep, rest = remaining.partition(".")

        found = _lookup_key(current, segment)
        if found is None:
            found = _lookup_index(current, segment)
            if found is not None:
                logger.debug(f"Resolved segment {segment!r} as array index at {found.full_path}")

        if found is None:
            raise JSONPathError(segment, path)

        current = found
        if not sep:
            break
        remaining = rest

    return encode_raw(current.value).encode("utf-8")


def decode_document(document: str | bytes, path: str = "") -> Any:
    """Parse a JSON document, keeping number tokens as RawNumber text."""
    try:
        return json.loads(
            document,
            parse_int=RawNumber,
            parse_float=RawNumber,
            parse_constant=reject_constant,
        )
    except (ValueError, TypeError) as e:
        raise InvalidJSONError(path, path, reason=f"invalid JSON ({e})") from e


def reject_constant(token: str) -> Any:
    """parse_constant hook refusing NaN and Infinity, which are not JSON."""
    raise ValueError(f"{token} is not a valid JSON value")


def encode_raw(value: Any) -> str:
    """Render a decoded value back to its raw JSON text."""
    if isinstance(value, RawNumber):
        return str(value)
    if isinstance(value, str):
        return value
    return _encode(value)


def _encode(value: Any) -> str:
    if isinstance(value, RawNumber):
        return str(value)
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return "null"
    if isinstance(value, dict):
        members = (f"{json.dumps(k, ensure_ascii=False)}:{_encode(v)}" for k, v in value.items())
        return "{" + ",".join(members) + "}"
    return "[" + ",".join(_encode(item) for item in value) + "]"


def _lookup_key(datum: DatumInContext, key: str) -> DatumInContext | None:
    if not isinstance(datum.value, dict) or key not in datum.value:
        return None
    if key == "*":
        # a wildcard to jsonpath_ng, but only a literal key here
        return DatumInContext(datum.value[key], path=Fields(key), context=datum)
    return Fields(key).find(datum)[0]


def _lookup_index(datum: DatumInContext, segment: str) -> DatumInContext | None:
    if not isinstance(datum.value, list) or not INDEX_PATTERN.fullmatch(segment):
        return None
    matches = Index(int(segment)).find(datum)
    return matches[0] if matches else None
