"""Tests for plain and outcome-aware pipe/flow, sync and async."""

import asyncio
from collections.abc import Awaitable, Callable
from typing import assert_type

import pytest

import pyoresult as pr
from pyoresult import result


def _inc(x: int) -> int:
    return x + 1


def _double(x: int) -> int:
    return x * 2


async def _async_double(x: int) -> int:
    await asyncio.sleep(0)
    return x * 2


def test_pipe_without_steps_returns_value() -> None:
    assert pr.pipe(5) == 5


def test_pipe_threads_in_order() -> None:
    assert pr.pipe(5, _inc, _double) == 12
    assert pr.pipe(5, _double, _inc) == 11


def test_pipe_accepts_more_than_eight_steps() -> None:
    assert pr.pipe(0, *([_inc] * 20)) == 20


def test_pipe_does_not_stop_on_none_or_err() -> None:
    seen: list[object] = []

    def _record(value: object) -> object:
        seen.append(value)
        return value

    assert pr.pipe(pr.NONE, _record, _record) is pr.NONE
    assert pr.pipe(pr.Err("e"), _record) == pr.Err("e")
    assert seen == [pr.NONE, pr.NONE, pr.Err("e")]


def test_pipe_rejects_non_callable_steps() -> None:
    with pytest.raises(TypeError, match="step 2"):
        pr.pipe(1, _inc, 3)  # type: ignore[call-overload]


def test_flow_defers_execution() -> None:
    calls: list[int] = []

    def _spy(x: int) -> int:
        calls.append(x)
        return x

    composed = pr.flow(_spy, _inc)
    assert calls == []
    assert composed(1) == 2
    assert composed(10) == 11
    assert calls == [1, 10]


def test_flow_equals_pipe() -> None:
    steps = (_inc, _double, str)
    assert pr.flow(*steps)(4) == pr.pipe(4, *steps)


def test_flow_without_steps_is_identity() -> None:
    assert pr.flow()(3) == 3


def test_flow_rejects_non_callable_steps() -> None:
    with pytest.raises(TypeError):
        pr.flow(_inc, "not callable")  # type: ignore[call-overload]


def test_result_pipe_example() -> None:
    res = result.pipe(
        pr.Ok(10),
        lambda x: pr.Ok(x + 5),
        lambda x: pr.Ok(x * 2) if x > 10 else pr.Err("too small"),
        lambda x: pr.Ok(f"result: {x}"),
    )
    assert res == pr.Ok("result: 30")


def test_result_pipe_short_circuits_initial_err() -> None:
    calls: list[int] = []

    def _spy(x: int) -> pr.Result[int, str]:
        calls.append(x)
        return pr.Ok(x)

    failure = pr.Err("e")
    assert result.pipe(failure, _spy, _spy) is failure
    assert calls == []


def test_result_pipe_short_circuits_intermediate_err() -> None:
    calls: list[str] = []

    def _fail(_: int) -> pr.Result[int, str]:
        calls.append("fail")
        return pr.Err("stopped")

    def _after(x: int) -> pr.Result[int, str]:
        calls.append("after")
        return pr.Ok(x)

    assert result.pipe(pr.Ok(1), _fail, _after) == pr.Err("stopped")
    assert calls == ["fail"]


def test_result_pipe_accepts_more_than_eight_steps() -> None:
    steps = [lambda x: pr.Ok(x + 1)] * 12
    assert result.pipe(pr.Ok(0), *steps) == pr.Ok(12)


def test_result_flow() -> None:
    validate = result.flow(
        lambda s: pr.Ok(s.strip()),
        lambda s: pr.Ok(s) if s else pr.Err("empty"),
    )
    assert validate(pr.Ok("  a ")) == pr.Ok("a")
    assert validate(pr.Ok("   ")) == pr.Err("empty")
    assert validate(pr.Err("upstream")) == pr.Err("upstream")


@pytest.mark.asyncio
async def test_pipe_async_mixes_sync_and_async_steps() -> None:
    assert await pr.pipe_async(5, _async_double, _inc, _async_double) == 22


@pytest.mark.asyncio
async def test_pipe_async_awaits_initial_value() -> None:
    assert await pr.pipe_async(_async_double(2), _inc) == 5


@pytest.mark.asyncio
async def test_pipe_async_runs_steps_sequentially() -> None:
    events: list[str] = []

    def _step(name: str) -> Callable[[int], Awaitable[int]]:
        async def _run(value: int) -> int:
            events.append(f"start {name}")
            await asyncio.sleep(0)
            events.append(f"end {name}")
            return value

        return _run

    await pr.pipe_async(0, _step("a"), _step("b"))
    assert events == ["start a", "end a", "start b", "end b"]


@pytest.mark.asyncio
async def test_pipe_async_propagates_exceptions() -> None:
    async def _boom(_: int) -> int:
        msg = "boom"
        raise RuntimeError(msg)

    with pytest.raises(RuntimeError, match="boom"):
        await pr.pipe_async(1, _boom, _inc)


@pytest.mark.asyncio
async def test_flow_async() -> None:
    quadruple = pr.flow_async(_async_double, _async_double)
    assert await quadruple(3) == 12


@pytest.mark.asyncio
async def test_result_pipe_async_short_circuits() -> None:
    calls: list[int] = []

    async def _load(key: str) -> pr.Result[int, str]:
        return pr.Ok(len(key)) if key else pr.Err("no key")

    def _record(n: int) -> pr.Result[int, str]:
        calls.append(n)
        return pr.Ok(n)

    assert await result.pipe_async(pr.Ok("abc"), _load, _record) == pr.Ok(3)
    assert await result.pipe_async(pr.Ok(""), _load, _record) == pr.Err("no key")
    assert calls == [3]


@pytest.mark.asyncio
async def test_result_pipe_async_with_perform_async() -> None:
    async def _fetch() -> int:
        msg = "unreachable"
        raise ConnectionError(msg)

    res = await result.pipe_async(
        result.perform_async(_fetch),
        lambda n: pr.Ok(n + 1),
    )
    assert isinstance(res.unwrap_err(), ConnectionError)


@pytest.mark.asyncio
async def test_result_flow_async() -> None:
    async def _check(x: int) -> pr.Result[int, str]:
        return pr.Ok(x) if x >= 0 else pr.Err("negative")

    checked = result.flow_async(_check, lambda x: pr.Ok(x * 10))
    assert await checked(pr.Ok(2)) == pr.Ok(20)
    assert await checked(pr.Ok(-2)) == pr.Err("negative")


def _parse(s: str) -> pr.Result[int, str]:
    return pr.Ok(int(s)) if s.strip().isdigit() else pr.Err(f"{s!r} is not a number")


def _checked_inc(x: int) -> pr.Result[int, str]:
    return pr.Ok(x + 1)


def _to_text(x: int) -> pr.Result[str, str]:
    return pr.Ok(str(x))


async def _async_label(x: int) -> pr.Result[str, str]:
    await asyncio.sleep(0)
    return pr.Ok(f"#{x}")


def test_result_flow_infers_each_step() -> None:
    label = result.flow(_parse, _checked_inc, _to_text)
    assert_type(label, Callable[[pr.Result[str, str]], pr.Result[str, str]])
    assert label(pr.Ok(" 41 ")) == pr.Ok("42")
    assert label(pr.Ok("x")) == pr.Err("'x' is not a number")


@pytest.mark.asyncio
async def test_pipe_async_infers_each_step() -> None:
    res = await pr.pipe_async(3, _async_double, _inc, str)
    assert_type(res, str)
    assert res == "7"


@pytest.mark.asyncio
async def test_flow_async_infers_each_step() -> None:
    describe = pr.flow_async(_async_double, str, len)
    length = await describe(50)
    assert_type(length, int)
    assert length == 3


@pytest.mark.asyncio
async def test_result_pipe_async_infers_each_step() -> None:
    res = await result.pipe_async(pr.Ok("5"), _parse, _checked_inc, _async_label)
    assert_type(res, pr.Result[str, str])
    assert res == pr.Ok("#6")


@pytest.mark.asyncio
async def test_result_flow_async_infers_each_step() -> None:
    label = result.flow_async(_parse, _async_label)
    assert await label(pr.Ok("8")) == pr.Ok("#8")
    assert await label(pr.Err("upstream")) == pr.Err("upstream")


@pytest.mark.asyncio
async def test_async_pipes_accept_more_than_eight_steps() -> None:
    assert await pr.pipe_async(0, *([_async_double, _inc] * 5)) == 31
    assert await result.pipe_async(pr.Ok(0), *([_checked_inc] * 10)) == pr.Ok(10)
