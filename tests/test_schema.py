"""Tests for the safe parse bridge."""

from dataclasses import dataclass
from typing import Any

import pyoresult as pr
from pyoresult import schema


@dataclass(slots=True)
class _Parsed:
    success: bool
    data: Any = None
    error: Any = None


def test_to_result_from_mapping() -> None:
    assert schema.to_result({"success": True, "data": {"id": 1}}) == pr.Ok({"id": 1})
    assert schema.to_result({"success": False, "error": "bad"}) == pr.Err("bad")


def test_to_result_from_object() -> None:
    assert schema.to_result(_Parsed(success=True, data=[1, 2])) == pr.Ok([1, 2])
    assert schema.to_result(_Parsed(success=False, error="bad")) == pr.Err("bad")


def test_to_result_keeps_none_data() -> None:
    assert schema.to_result({"success": True, "data": None}) == pr.Ok(None)


def test_to_result_chains_with_pipe() -> None:
    res = pr.result.pipe(
        schema.to_result({"success": True, "data": {"name": "Alice", "age": 30}}),
        lambda user: pr.Ok(user["name"]),
    )
    assert res == pr.Ok("Alice")


def test_to_result_reads_missing_fields_as_none() -> None:
    assert schema.to_result({"success": True}) == pr.Ok(None)
    assert schema.to_result({"success": False}) == pr.Err(None)


def test_to_result_from_object_without_payload() -> None:
    class _Bare:
        success = False

    assert schema.to_result(_Bare()) == pr.Err(None)  # type: ignore[arg-type]
