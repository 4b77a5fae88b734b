"""Tests for structural pattern matching on Result and Option."""

import pyoresult as pr


def _describe_result(res: pr.Result[int, str]) -> str:
    match res:
        case pr.Ok(value):
            return f"ok {value}"
        case pr.Err(error):
            return f"err {error}"
        case _:
            raise AssertionError


def _describe_option(value: pr.Option[str]) -> str:
    match value:
        case pr.NoneOption():
            return "none"
        case str() as text:
            return f"some {text}"
        case _:
            raise AssertionError


def test_result_pattern_matching() -> None:
    """Ok and Err bind their payload positionally."""
    assert _describe_result(pr.Ok(42)) == "ok 42"
    assert _describe_result(pr.Err("Something went wrong")) == "err Something went wrong"


def test_result_keyword_pattern() -> None:
    match pr.Ok(3):
        case pr.Result(ok=True):
            matched = True
        case _:
            matched = False
    assert matched


def test_option_pattern_matching() -> None:
    """NONE is matched by its class, present values by their own type."""
    assert _describe_option("hello") == "some hello"
    assert _describe_option(pr.NONE) == "none"
