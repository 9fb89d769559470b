"""Tests for emptiness, zero and nil classification."""

import asyncio
import queue
import weakref
from collections import deque, namedtuple
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal
from enum import Enum
from fractions import Fraction

import pytest

from assertkit.comparison import is_empty, is_nil, is_zero, zero_value


@dataclass
class Config:
    name: str = ""
    retries: int = 0
    tags: tuple = ()


class Node:
    pass


class Status(Enum):
    OK = 0


Pair = namedtuple("Pair", ["left", "right"])


# --- is_nil ---


def test_is_nil_none():
    assert is_nil(None) is True


def test_is_nil_dead_reference():
    node = Node()
    ref = weakref.ref(node)
    assert is_nil(ref) is False
    del node
    assert is_nil(ref) is True


@pytest.mark.parametrize("value", [0, "", [], False, Node()])
def test_is_nil_falsy_values_are_not_nil(value):
    assert is_nil(value) is False


# --- is_empty ---


@pytest.mark.parametrize(
    "value",
    [
        None,
        False,
        0,
        0.0,
        0j,
        Decimal(0),
        Fraction(0),
        timedelta(0),
        "",
        b"",
        [],
        (),
        {},
        set(),
        deque(),
        datetime.min,
        date.min,
        datetime.min.replace(tzinfo=timezone.utc),
    ],
)
def test_is_empty_true(value):
    assert is_empty(value) is True


@pytest.mark.parametrize(
    "value",
    [
        True,
        1,
        -0.5,
        "0",
        [0],
        [None],
        {"": None},
        datetime(2024, 1, 1),
        timedelta(seconds=1),
        Node(),
        Status.OK,
        Config(),
    ],
)
def test_is_empty_false(value):
    assert is_empty(value) is False


def test_is_empty_channels():
    q = queue.Queue()
    assert is_empty(q) is True
    q.put(1)
    assert is_empty(q) is False
    assert q.qsize() == 1


def test_is_empty_asyncio_queue():
    q = asyncio.Queue()
    assert is_empty(q) is True
    q.put_nowait("x")
    assert is_empty(q) is False


def test_is_empty_references():
    node = Node()
    assert is_empty(weakref.ref(node)) is False

    class Stamp(datetime):
        pass

    zero_stamp = Stamp(1, 1, 1)
    assert is_empty(weakref.ref(zero_stamp)) is True

    ref = weakref.ref(Node())
    assert is_empty(ref) is True


# --- is_zero ---


@pytest.mark.parametrize(
    "value",
    [
        None,
        0,
        0.0,
        "",
        b"",
        (),
        False,
        frozenset(),
        timedelta(),
        time(),
        datetime.min,
        date.min,
        Decimal(0),
        Config(),
        Pair(0, ""),
    ],
)
def test_is_zero_true(value):
    assert is_zero(value) is True


@pytest.mark.parametrize(
    "value",
    [
        1,
        "a",
        True,
        (0,),
        Config(name="x"),
        Pair(0, "x"),
        Status.OK,
        Node(),
        len,
    ],
)
def test_is_zero_false(value):
    assert is_zero(value) is False


@pytest.mark.parametrize("value", [[], {}, set(), bytearray(), deque()])
def test_mutable_containers_are_empty_but_not_zero(value):
    assert is_empty(value) is True
    assert is_zero(value) is False


def test_zero_value_of_aware_datetime_keeps_timezone():
    ok, zero = zero_value(datetime(2024, 5, 1, tzinfo=timezone.utc))
    assert ok is True
    assert zero == datetime.min.replace(tzinfo=timezone.utc)


def test_zero_value_has_no_zero_for_mutable_containers():
    assert zero_value([1]) == (False, None)
