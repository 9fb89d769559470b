"""Tests for JSON path extraction and raw value matching."""

import pytest

from assertkit.jsonpath import (
    InvalidJSONError,
    JSONPathError,
    get_json_value,
    is_json_equal_object,
    matches_raw,
)

DOC = '{"a": {"b": [1, 2, 3]}, "items": [{"name": "x"}, {"name": "y"}], "name": "top"}'


# --- get_json_value ---


def test_nested_key_and_index():
    assert get_json_value('{"a":{"b":[1,2,3]}}', "a.b.1") == b"2"


def test_top_level_key():
    assert get_json_value(DOC, "name") == b"top"


def test_index_then_key():
    assert get_json_value(DOC, "items.1.name") == b"y"


def test_index_as_last_segment_returns_element():
    assert get_json_value(DOC, "items.0") == b'{"name":"x"}'


def test_top_level_array():
    assert get_json_value("[10, 20]", "1") == b"20"


def test_missing_key_raises_with_segment():
    with pytest.raises(JSONPathError) as exc_info:
        get_json_value('{"a":1}', "missing")
    assert exc_info.value.segment == "missing"
    assert exc_info.value.path == "missing"


def test_missing_nested_key_reports_failing_segment():
    with pytest.raises(JSONPathError) as exc_info:
        get_json_value(DOC, "a.c.d")
    assert exc_info.value.segment == "c"


def test_index_out_of_range_raises():
    with pytest.raises(JSONPathError) as exc_info:
        get_json_value(DOC, "items.5")
    assert exc_info.value.segment == "5"


def test_negative_index_is_not_an_index():
    with pytest.raises(JSONPathError):
        get_json_value(DOC, "items.-1")


def test_digit_segment_on_object_is_a_key():
    assert get_json_value('{"a": {"0": "zero"}}', "a.0") == b"zero"


def test_literal_dotted_key():
    assert get_json_value('{"a.b": 1}', "a.b") == b"1"
    assert get_json_value('{"x": {"a.b": "deep"}}', "x.a.b") == b"deep"


def test_wildcard_is_a_literal_key():
    assert get_json_value('{"*": 5, "a": 1}', "*") == b"5"


def test_lookup_error_is_a_lookup_error():
    with pytest.raises(LookupError):
        get_json_value("{}", "a")


def test_invalid_json_raises():
    with pytest.raises(InvalidJSONError) as exc_info:
        get_json_value("{not json", "a")
    assert "invalid JSON" in exc_info.value.reason
    assert isinstance(exc_info.value, JSONPathError)


@pytest.mark.parametrize("token", ["NaN", "Infinity", "-Infinity"])
def test_non_json_constants_are_invalid(token):
    with pytest.raises(InvalidJSONError) as exc_info:
        get_json_value(f'{{"a": {token}}}', "a")
    assert token in exc_info.value.reason


def test_missing_key_is_not_invalid_json():
    with pytest.raises(JSONPathError) as exc_info:
        get_json_value('{"a": 1}', "b")
    assert not isinstance(exc_info.value, InvalidJSONError)


def test_bytes_document():
    assert get_json_value(b'{"a": "b"}', "a") == b"b"


# --- result encoding ---


@pytest.mark.parametrize(
    "document, expected",
    [
        ('{"v": 1.50}', b"1.50"),
        ('{"v": 1e3}', b"1e3"),
        ('{"v": -0}', b"-0"),
        ('{"v": 12345678901234567890}', b"12345678901234567890"),
        ('{"v": true}', b"true"),
        ('{"v": false}', b"false"),
        ('{"v": null}', b"null"),
        ('{"v": "text"}', b"text"),
        ('{"v": "say \\"hi\\""}', b'say "hi"'),
        ('{"v": [1, "a", null]}', b'[1,"a",null]'),
        ('{"v": {"k": 1.0, "z": [true]}}', b'{"k":1.0,"z":[true]}'),
    ],
)
def test_raw_encoding(document, expected):
    assert get_json_value(document, "v") == expected


def test_unicode_values():
    assert get_json_value('{"名前": "値"}', "名前") == "値".encode("utf-8")


# --- matches_raw ---


def test_matches_raw_strings():
    assert matches_raw(b"world", "world") == (True, "")
    assert matches_raw(b"world", b"world") == (True, "")
    ok, reason = matches_raw(b"world", "earth")
    assert ok is False
    assert "earth" in reason


@pytest.mark.parametrize("raw", [b"true", b"True", b"1", b"on", b"yes"])
def test_matches_raw_truthy_tokens(raw):
    assert matches_raw(raw, True) == (True, "")


@pytest.mark.parametrize("raw", [b"false", b"0", b"off", b"null"])
def test_matches_raw_falsy_tokens(raw):
    assert matches_raw(raw, False) == (True, "")
    assert matches_raw(raw, True)[0] is False


def test_matches_raw_integers():
    assert matches_raw(b"42", 42) == (True, "")
    assert matches_raw(b"43", 42)[0] is False
    ok, reason = matches_raw(b"4.2", 42)
    assert ok is False
    assert "integer" in reason


def test_matches_raw_floats():
    assert matches_raw(b"1.5", 1.5) == (True, "")
    assert matches_raw(b"2", 2.0) == (True, "")
    ok, reason = matches_raw(b"abc", 1.5)
    assert ok is False
    assert "number" in reason


def test_matches_raw_structured():
    assert matches_raw(b'{"b":1,"a":[1,2]}', {"a": [1, 2], "b": 1}) == (True, "")
    assert matches_raw(b"null", None) == (True, "")
    assert matches_raw(b"[1,2]", [2, 1])[0] is False


# --- is_json_equal_object ---


def test_is_json_equal_object():
    assert is_json_equal_object('{"b": 2, "a": 1}', {"a": 1, "b": 2}) is True
    assert is_json_equal_object('{"a": 1}', {"a": 2}) is False
    assert is_json_equal_object("not json", {}) is False
    assert is_json_equal_object("{}", object()) is False
