"""Object helper tests: checked casts and membership."""

from __future__ import annotations

from enum import Enum

import pytest

from commonext import objects

pytestmark = pytest.mark.unit


class Color(Enum):
    RED = 1
    GREEN = 2
    BLUE = 3


def test_try_cast_success_and_failure() -> None:
    ok = objects.try_cast("text", str)
    bad = objects.try_cast(5, str)

    assert ok.value == "text"
    assert isinstance(bad.failure, TypeError)
    assert "Expected str, got int" in str(bad.failure)


def test_try_cast_accepts_subclasses() -> None:
    assert objects.try_cast(True, int).value is True


def test_as_type() -> None:
    assert objects.as_type([1], list) == [1]
    assert objects.as_type("x", list) is None


def test_is_type_and_is_not_type() -> None:
    assert objects.is_type(1, int)
    assert objects.is_type(1, (str, int))
    assert objects.is_not_type("1", int)
    assert not objects.is_not_type(1.0, float)


def test_one_of_with_varargs_and_iterable() -> None:
    assert objects.one_of(Color.RED, Color.RED, Color.BLUE)
    assert not objects.one_of(Color.GREEN, Color.RED, Color.BLUE)
    assert objects.one_of(Color.BLUE, [Color.RED, Color.BLUE])
    assert not objects.one_of(Color.BLUE, [])


def test_one_of_does_not_expand_strings() -> None:
    assert objects.one_of("ab", "ab")
    assert not objects.one_of("a", "ab")


def test_try_cast_to_parameterized_generic_is_a_failure() -> None:
    result = objects.try_cast([1], list[int])

    assert isinstance(result.failure, TypeError)
    assert objects.as_type([1], list[int]) is None
