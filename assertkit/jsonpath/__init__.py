"""
JSON path extraction for assertions on JSON documents.

Paths are dotted strings mixing object keys and array indices:

    "name"          -> top-level key
    "items.0"       -> first element of the "items" array
    "a.b.1.name"    -> key "name" of the second element of a.b

Usage:
    from assertkit.jsonpath import get_json_value, JSONPathError

    get_json_value('{"a":{"b":[1,2,3]}}', "a.b.1")   # b"2"

    try:
        get_json_value('{"a":1}', "missing")
    except JSONPathError as e:
        print(e.segment)                            # "missing"
"""

# Extractor
from .extractor import (
    InvalidJSONError,
    JSONPathError,
    RawNumber,
    decode_document,
    encode_raw,
    get_json_value,
    reject_constant,
)

# Matching
from .matching import TRUTHY_TOKENS, is_json_equal_object, matches_raw

__all__ = [
    # Extractor
    "InvalidJSONError",
    "JSONPathError",
    "RawNumber",
    "decode_document",
    "encode_raw",
    "get_json_value",
    "reject_constant",
    # Matching
    "TRUTHY_TOKENS",
    "is_json_equal_object",
    "matches_raw",
]
