"""Tests for the Option sentinel and the data-first option functions."""

import copy
import pickle

import pytest

import pyoresult as pr
from pyoresult import option


def test_from_coalesces_none() -> None:
    assert option.from_(None) is pr.NONE
    assert option.from_(pr.NONE) is pr.NONE


@pytest.mark.parametrize("value", [0, False, "", [], [None], {"key": None}])
def test_from_keeps_falsy_and_nested_none(value: object) -> None:
    assert option.from_(value) is value


def test_is_some() -> None:
    assert option.is_some(42) is True
    assert option.is_some("hello") is True
    assert option.is_some(False) is True
    assert option.is_some(pr.NONE) is False


def test_none_is_a_present_value() -> None:
    """Python's None is not the absent sentinel outside of `from_`."""
    assert option.is_some(None) is True
    assert option.is_none(None) is False


def test_is_none() -> None:
    assert option.is_none(pr.NONE) is True
    assert option.is_none(42) is False
    assert option.is_none("") is False
    assert option.is_none(False) is False


def test_is_nullish() -> None:
    assert option.is_nullish(None) is True
    assert option.is_nullish(pr.NONE) is True
    assert option.is_nullish(0) is False


def test_unwrap() -> None:
    assert option.unwrap(42) == 42
    assert option.unwrap(None) is None


def test_unwrap_raises_on_none() -> None:
    with pytest.raises(pr.OptionUnwrapError, match="NONE") as exc_info:
        option.unwrap(pr.NONE)
    assert isinstance(exc_info.value, TypeError)
    assert exc_info.value.cause == "value is absent"


def test_unwrap_or() -> None:
    assert option.unwrap_or(42, 0) == 42
    assert option.unwrap_or(pr.NONE, 0) == 0


def test_unwrap_or_else() -> None:
    assert option.unwrap_or_else(42, lambda: 0) == 42
    assert option.unwrap_or_else(pr.NONE, lambda: 99) == 99


def test_map() -> None:
    assert option.map(42, lambda x: x * 2) == 84
    assert option.map(pr.NONE, lambda x: x * 2) is pr.NONE


def test_map_or() -> None:
    assert option.map_or(42, 0, lambda x: x * 2) == 84
    assert option.map_or(pr.NONE, 0, lambda x: x * 2) == 0


def test_map_or_else() -> None:
    assert option.map_or_else(42, lambda: 0, 84) == 0
    assert option.map_or_else(pr.NONE, lambda: 0, 84) == 84


def test_flat_map_and_filter() -> None:
    assert option.flat_map(4, lambda x: x if x > 2 else pr.NONE) == 4
    assert option.flat_map(1, lambda x: x if x > 2 else pr.NONE) is pr.NONE
    assert option.filter(4, lambda x: x % 2 == 0) == 4
    assert option.filter(3, lambda x: x % 2 == 0) is pr.NONE
    assert option.filter(pr.NONE, lambda _: True) is pr.NONE


def test_ok_or() -> None:
    assert option.ok_or(1, "missing") == pr.Ok(1)
    assert option.ok_or(pr.NONE, "missing") == pr.Err("missing")


def test_values() -> None:
    assert option.values([1, pr.NONE, None, 3]) == [1, None, 3]


def test_none_option_is_a_singleton() -> None:
    assert pr.NoneOption() is pr.NONE
    assert copy.copy(pr.NONE) is pr.NONE
    assert copy.deepcopy([pr.NONE])[0] is pr.NONE
    assert pickle.loads(pickle.dumps(pr.NONE)) is pr.NONE  # noqa: S301


def test_none_option_repr_and_truthiness() -> None:
    assert repr(pr.NONE) == "NONE"
    assert not pr.NONE
