"""Data-first operations over `Result`.

Each function takes the `Result` first and has the same semantics as the `Result` method of the same name.

`pipe`, `flow` and their async variants thread an `Ok` value through steps returning `Result`, stopping at the first `Err`.

Example:
```python
>>> from pyoresult import result
>>> def positive(x: int) -> result.Result[int, str]:
...     return result.ok(x) if x > 0 else result.err(f"{x} is not positive")
>>> result.map(positive(4), lambda x: x * 10)
Ok(40)
>>> result.unwrap_or(positive(-1), 0)
0

```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from typing import Any, Never, TypeIs, cast, overload

import more_itertools as mit

from ._pipe import MaybeAwaitable, check_steps, resolve
from ._results import (
    Err,
    Ok,
    Option,
    Result,
    ResultUnwrapError,
    into_result,
    perform,
    perform_async,
)

__all__ = [
    "collect",
    "err",
    "flat_map",
    "flow",
    "flow_async",
    "into_result",
    "is_err",
    "is_ok",
    "map",
    "map_err",
    "map_or",
    "map_or_else",
    "ok",
    "or_else",
    "partition",
    "perform",
    "perform_async",
    "pipe",
    "pipe_async",
    "to_option",
    "unwrap",
    "unwrap_or",
    "unwrap_or_else",
]


def ok[T](value: T) -> Result[T, Never]:
    """Wrap **value** in an `Ok`."""
    return Ok(value)


def err[E](error: E) -> Result[Never, E]:
    """Wrap **error** in an `Err`."""
    return Err(error)


def is_ok[T, E](result: Result[T, E]) -> TypeIs[Ok[T, E]]:
    """
    Returns `True` if **result** is `Ok`.

    Example:
    ```python
    >>> from pyoresult import result
    >>> result.is_ok(result.ok(1)), result.is_ok(result.err(1))
    (True, False)

    ```
    """
    return result.ok


def is_err[T, E](result: Result[T, E]) -> TypeIs[Err[T, E]]:
    """Returns `True` if **result** is `Err`."""
    return not result.ok


def unwrap[T, E](result: Result[T, E]) -> T:
    """
    Returns the `Ok` value, or raises `ResultUnwrapError` with the error as `cause`.

    Example:
    ```python
    >>> from pyoresult import result
    >>> try:
    ...     result.unwrap(result.err(KeyError("id")))
    ... except result.ResultUnwrapError as exc:
    ...     exc.cause, exc.__cause__ is exc.cause
    (KeyError('id'), True)

    ```
    """
    return result.unwrap()


def unwrap_or[T, E](result: Result[T, E], default: T) -> T:
    """Returns the `Ok` value or **default**."""
    return result.unwrap_or(default)


def unwrap_or_else[T, E](result: Result[T, E], f: Callable[[E], T]) -> T:
    """Returns the `Ok` value or computes one from the error with **f**."""
    return result.unwrap_or_else(f)


def map[T, U, E](result: Result[T, E], f: Callable[[T], U]) -> Result[U, E]:
    """Applies **f** to the `Ok` value, an `Err` is returned as is."""
    return result.map(f)


def map_or[T, U, E](result: Result[T, E], f: Callable[[T], U], default: U) -> U:
    """Applies **f** to the `Ok` value, or returns **default**."""
    return result.map_or(f, default)


def map_or_else[T, U, E](
    result: Result[T, E], f: Callable[[T], U], default: Callable[[E], U]
) -> U:
    """Applies **f** to the `Ok` value, or **default** to the error."""
    return result.map_or_else(f, default)


def flat_map[T, U, E](
    result: Result[T, E], f: Callable[[T], Result[U, E]]
) -> Result[U, E]:
    """
    Calls **f** with the `Ok` value, an `Err` is returned as is without calling **f**.

    Example:
    ```python
    >>> from pyoresult import result
    >>> result.flat_map(result.ok(42), lambda x: result.ok(x * 2))
    Ok(84)
    >>> result.flat_map(result.ok(42), lambda x: result.err("error"))
    Err('error')

    ```
    """
    return result.flat_map(f)


def map_err[T, E, F](result: Result[T, E], f: Callable[[E], F]) -> Result[T, F]:
    """Applies **f** to the error, an `Ok` is returned as is."""
    return result.map_err(f)


def or_else[T, E, F](result: Result[T, E], f: Callable[[E], Result[T, F]]) -> Result[T, F]:
    """
    Recovers from an `Err` by applying **f** to the error, an `Ok` is returned as is.

    Example:
    ```python
    >>> from pyoresult import result
    >>> def retry(e: str) -> result.Result[int, str]:
    ...     return result.ok(0) if e == "timeout" else result.err(e)
    >>> result.or_else(result.err("timeout"), retry), result.or_else(result.err("denied"), retry)
    (Ok(0), Err('denied'))

    ```
    """
    return result.or_else(f)


def to_option[T, E](result: Result[T, E]) -> Option[T]:
    """Returns the `Ok` value, or `NONE` for an `Err`."""
    return result.to_option()


def collect[T, E](results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """
    Gather the values of **results** into a list, or return the first `Err`.

    Iteration stops at the first `Err`.

    Example:
    ```python
    >>> from pyoresult import result
    >>> result.collect([result.ok(1), result.ok(2)])
    Ok([1, 2])
    >>> result.collect([result.ok(1), result.err("no 2"), result.err("no 3")])
    Err('no 2')

    ```
    """
    values: list[T] = []
    for item in results:
        if not item.ok:
            return cast(Result[list[T], E], item)
        values.append(item.unwrap())
    return Ok(values)


def partition[T, E](results: Iterable[Result[T, E]]) -> tuple[list[T], list[E]]:
    """
    Split **results** into the `Ok` values and the `Err` errors, keeping their order.

    Example:
    ```python
    >>> from pyoresult import result
    >>> result.partition([result.ok(1), result.err("x"), result.ok(3)])
    ([1, 3], ['x'])

    ```
    """
    errs, oks = mit.partition(is_ok, results)
    return [item.unwrap() for item in oks], [item.unwrap_err() for item in errs]


type _Step[A, B, E] = Callable[[A], Result[B, E]]


@overload
def pipe[A, E](result: Result[A, E], /) -> Result[A, E]: ...
@overload
def pipe[A, B, E](result: Result[A, E], f1: _Step[A, B, E], /) -> Result[B, E]: ...
@overload
def pipe[A, B, C, E](
    result: Result[A, E], f1: _Step[A, B, E], f2: _Step[B, C, E], /
) -> Result[C, E]: ...
@overload
def pipe[A, B, C, D, E](
    result: Result[A, E],
    f1: _Step[A, B, E],
    f2: _Step[B, C, E],
    f3: _Step[C, D, E],
    /,
) -> Result[D, E]: ...
@overload
def pipe[A, B, C, D, F, E](
    result: Result[A, E],
    f1: _Step[A, B, E],
    f2: _Step[B, C, E],
    f3: _Step[C, D, E],
    f4: _Step[D, F, E],
    /,
) -> Result[F, E]: ...
@overload
def pipe[A, B, C, D, F, G, E](
    result: Result[A, E],
    f1: _Step[A, B, E],
    f2: _Step[B, C, E],
    f3: _Step[C, D, E],
    f4: _Step[D, F, E],
    f5: _Step[F, G, E],
    /,
) -> Result[G, E]: ...
@overload
def pipe[A, B, C, D, F, G, H, E](
    result: Result[A, E],
    f1: _Step[A, B, E],
    f2: _Step[B, C, E],
    f3: _Step[C, D, E],
    f4: _Step[D, F, E],
    f5: _Step[F, G, E],
    f6: _Step[G, H, E],
    /,
) -> Result[H, E]: ...
@overload
def pipe[A, B, C, D, F, G, H, I, E](
    result: Result[A, E],
    f1: _Step[A, B, E],
    f2: _Step[B, C, E],
    f3: _Step[C, D, E],
    f4: _Step[D, F, E],
    f5: _Step[F, G, E],
    f6: _Step[G, H, E],
    f7: _Step[H, I, E],
    /,
) -> Result[I, E]: ...
@overload
def pipe[A, B, C, D, F, G, H, I, J, E](
    result: Result[A, E],
    f1: _Step[A, B, E],
    f2: _Step[B, C, E],
    f3: _Step[C, D, E],
    f4: _Step[D, F, E],
    f5: _Step[F, G, E],
    f6: _Step[G, H, E],
    f7: _Step[H, I, E],
    f8: _Step[I, J, E],
    /,
) -> Result[J, E]: ...
@overload
def pipe(
    result: Result[Any, Any], /, *steps: Callable[[Any], Result[Any, Any]]
) -> Result[Any, Any]: ...
def pipe(
    result: Result[Any, Any], /, *steps: Callable[[Any], Result[Any, Any]]
) -> Result[Any, Any]:
    """Thread the `Ok` value of **result** through **steps**, each returning a `Result`.

    The first `Err`, including an initial one, is returned as is and the remaining steps are not called.

    Up to 8 steps are statically typed, longer chains are accepted without inference of the intermediate types.

    Raises:
        TypeError: If a step is not callable.

    Example:
    ```python
    >>> from pyoresult import result
    >>> result.pipe(
    ...     result.ok(10),
    ...     lambda x: result.ok(x + 5),
    ...     lambda x: result.ok(x * 2) if x > 10 else result.err("too small"),
    ...     lambda x: result.ok(f"result: {x}"),
    ... )
    Ok('result: 30')
    >>> result.pipe(result.ok(1), lambda x: result.err("stop"), lambda x: result.ok(x / 0))
    Err('stop')

    ```
    """
    check_steps(steps)
    current = result
    for step in steps:
        if not current.ok:
            break
        current = step(current.unwrap())
    return current


type _Flowed[A, B, E] = Callable[[Result[A, E]], Result[B, E]]


@overload
def flow[A, B, E](f1: _Step[A, B, E], /) -> _Flowed[A, B, E]: ...
@overload
def flow[A, B, C, E](f1: _Step[A, B, E], f2: _Step[B, C, E], /) -> _Flowed[A, C, E]: ...
@overload
def flow[A, B, C, D, E](
    f1: _Step[A, B, E],
    f2: _Step[B, C, E],
    f3: _Step[C, D, E],
    /,
) -> _Flowed[A, D, E]: ...
@overload
def flow[A, B, C, D, F, E](
    f1: _Step[A, B, E],
    f2: _Step[B, C, E],
    f3: _Step[C, D, E],
    f4: _Step[D, F, E],
    /,
) -> _Flowed[A, F, E]: ...
@overload
def flow[A, B, C, D, F, G, E](
    f1: _Step[A, B, E],
    f2: _Step[B, C, E],
    f3: _Step[C, D, E],
    f4: _Step[D, F, E],
    f5: _Step[F, G, E],
    /,
) -> _Flowed[A, G, E]: ...
@overload
def flow[A, B, C, D, F, G, H, E](
    f1: _Step[A, B, E],
    f2: _Step[B, C, E],
    f3: _Step[C, D, E],
    f4: _Step[D, F, E],
    f5: _Step[F, G, E],
    f6: _Step[G, H, E],
    /,
) -> _Flowed[A, H, E]: ...
@overload
def flow[A, B, C, D, F, G, H, I, E](
    f1: _Step[A, B, E],
    f2: _Step[B, C, E],
    f3: _Step[C, D, E],
    f4: _Step[D, F, E],
    f5: _Step[F, G, E],
    f6: _Step[G, H, E],
    f7: _Step[H, I, E],
    /,
) -> _Flowed[A, I, E]: ...
@overload
def flow[A, B, C, D, F, G, H, I, J, E](
    f1: _Step[A, B, E],
    f2: _Step[B, C, E],
    f3: _Step[C, D, E],
    f4: _Step[D, F, E],
    f5: _Step[F, G, E],
    f6: _Step[G, H, E],
    f7: _Step[H, I, E],
    f8: _Step[I, J, E],
    /,
) -> _Flowed[A, J, E]: ...
@overload
def flow(
    *steps: Callable[[Any], Result[Any, Any]],
) -> Callable[[Result[Any, Any]], Result[Any, Any]]: ...
def flow(
    *steps: Callable[[Any], Result[Any, Any]],
) -> Callable[[Result[Any, Any]], Result[Any, Any]]:
    """Deferred `pipe`: returns a function threading a `Result` through **steps**.

    Example:
    ```python
    >>> from pyoresult import result
    >>> def non_empty(s: str) -> result.Result[str, str]:
    ...     return result.ok(s) if s else result.err("empty")
    >>> validate = result.flow(non_empty, lambda s: result.ok(s.strip()))
    >>> validate(result.ok(" a ")), validate(result.ok(""))
    (Ok('a'), Err('empty'))

    ```
    """
    check_steps(steps)

    def _flowed(result: Result[Any, Any]) -> Result[Any, Any]:
        return pipe(result, *steps)

    return _flowed


type _AsyncStep[A, B, E] = Callable[[A], MaybeAwaitable[Result[B, E]]]
type _AsyncSource[A, E] = MaybeAwaitable[Result[A, E]]


@overload
async def pipe_async[A, E](result: _AsyncSource[A, E], /) -> Result[A, E]: ...
@overload
async def pipe_async[A, B, E](
    result: _AsyncSource[A, E], f1: _AsyncStep[A, B, E], /
) -> Result[B, E]: ...
@overload
async def pipe_async[A, B, C, E](
    result: _AsyncSource[A, E], f1: _AsyncStep[A, B, E], f2: _AsyncStep[B, C, E], /
) -> Result[C, E]: ...
@overload
async def pipe_async[A, B, C, D, E](
    result: _AsyncSource[A, E],
    f1: _AsyncStep[A, B, E],
    f2: _AsyncStep[B, C, E],
    f3: _AsyncStep[C, D, E],
    /,
) -> Result[D, E]: ...
@overload
async def pipe_async[A, B, C, D, F, E](
    result: _AsyncSource[A, E],
    f1: _AsyncStep[A, B, E],
    f2: _AsyncStep[B, C, E],
    f3: _AsyncStep[C, D, E],
    f4: _AsyncStep[D, F, E],
    /,
) -> Result[F, E]: ...
@overload
async def pipe_async[A, B, C, D, F, G, E](
    result: _AsyncSource[A, E],
    f1: _AsyncStep[A, B, E],
    f2: _AsyncStep[B, C, E],
    f3: _AsyncStep[C, D, E],
    f4: _AsyncStep[D, F, E],
    f5: _AsyncStep[F, G, E],
    /,
) -> Result[G, E]: ...
@overload
async def pipe_async[A, B, C, D, F, G, H, E](
    result: _AsyncSource[A, E],
    f1: _AsyncStep[A, B, E],
    f2: _AsyncStep[B, C, E],
    f3: _AsyncStep[C, D, E],
    f4: _AsyncStep[D, F, E],
    f5: _AsyncStep[F, G, E],
    f6: _AsyncStep[G, H, E],
    /,
) -> Result[H, E]: ...
@overload
async def pipe_async[A, B, C, D, F, G, H, I, E](
    result: _AsyncSource[A, E],
    f1: _AsyncStep[A, B, E],
    f2: _AsyncStep[B, C, E],
    f3: _AsyncStep[C, D, E],
    f4: _AsyncStep[D, F, E],
    f5: _AsyncStep[F, G, E],
    f6: _AsyncStep[G, H, E],
    f7: _AsyncStep[H, I, E],
    /,
) -> Result[I, E]: ...
@overload
async def pipe_async[A, B, C, D, F, G, H, I, J, E](
    result: _AsyncSource[A, E],
    f1: _AsyncStep[A, B, E],
    f2: _AsyncStep[B, C, E],
    f3: _AsyncStep[C, D, E],
    f4: _AsyncStep[D, F, E],
    f5: _AsyncStep[F, G, E],
    f6: _AsyncStep[G, H, E],
    f7: _AsyncStep[H, I, E],
    f8: _AsyncStep[I, J, E],
    /,
) -> Result[J, E]: ...
@overload
async def pipe_async(
    result: MaybeAwaitable[Result[Any, Any]],
    /,
    *steps: Callable[[Any], MaybeAwaitable[Result[Any, Any]]],
) -> Result[Any, Any]: ...
async def pipe_async(
    result: MaybeAwaitable[Result[Any, Any]],
    /,
    *steps: Callable[[Any], MaybeAwaitable[Result[Any, Any]]],
) -> Result[Any, Any]:
    """Asynchronous `pipe`: **result** and every step result are awaited when awaitable.

    Steps run one after the other, never concurrently, and none runs after an `Err`.

    Exceptions raised by a step propagate, wrap the step with `perform_async` to capture them.

    Example:
    ```python
    >>> import asyncio
    >>> from pyoresult import result
    >>> async def load(key: str) -> result.Result[int, str]:
    ...     return result.ok(len(key)) if key else result.err("no key")
    >>> asyncio.run(result.pipe_async(result.ok("abc"), load, lambda n: result.ok(n * 2)))
    Ok(6)
    >>> asyncio.run(result.pipe_async(result.ok(""), load, lambda n: result.ok(n * 2)))
    Err('no key')

    ```
    """
    check_steps(steps)
    current = await resolve(result)
    for step in steps:
        if not current.ok:
            break
        current = await resolve(step(current.unwrap()))
    return current


type _AsyncFlowed[A, B, E] = Callable[[_AsyncSource[A, E]], Awaitable[Result[B, E]]]


@overload
def flow_async[A, B, E](f1: _AsyncStep[A, B, E], /) -> _AsyncFlowed[A, B, E]: ...
@overload
def flow_async[A, B, C, E](
    f1: _AsyncStep[A, B, E], f2: _AsyncStep[B, C, E], /
) -> _AsyncFlowed[A, C, E]: ...
@overload
def flow_async[A, B, C, D, E](
    f1: _AsyncStep[A, B, E],
    f2: _AsyncStep[B, C, E],
    f3: _AsyncStep[C, D, E],
    /,
) -> _AsyncFlowed[A, D, E]: ...
@overload
def flow_async[A, B, C, D, F, E](
    f1: _AsyncStep[A, B, E],
    f2: _AsyncStep[B, C, E],
    f3: _AsyncStep[C, D, E],
    f4: _AsyncStep[D, F, E],
    /,
) -> _AsyncFlowed[A, F, E]: ...
@overload
def flow_async[A, B, C, D, F, G, E](
    f1: _AsyncStep[A, B, E],
    f2: _AsyncStep[B, C, E],
    f3: _AsyncStep[C, D, E],
    f4: _AsyncStep[D, F, E],
    f5: _AsyncStep[F, G, E],
    /,
) -> _AsyncFlowed[A, G, E]: ...
@overload
def flow_async[A, B, C, D, F, G, H, E](
    f1: _AsyncStep[A, B, E],
    f2: _AsyncStep[B, C, E],
    f3: _AsyncStep[C, D, E],
    f4: _AsyncStep[D, F, E],
    f5: _AsyncStep[F, G, E],
    f6: _AsyncStep[G, H, E],
    /,
) -> _AsyncFlowed[A, H, E]: ...
@overload
def flow_async[A, B, C, D, F, G, H, I, E](
    f1: _AsyncStep[A, B, E],
    f2: _AsyncStep[B, C, E],
    f3: _AsyncStep[C, D, E],
    f4: _AsyncStep[D, F, E],
    f5: _AsyncStep[F, G, E],
    f6: _AsyncStep[G, H, E],
    f7: _AsyncStep[H, I, E],
    /,
) -> _AsyncFlowed[A, I, E]: ...
@overload
def flow_async[A, B, C, D, F, G, H, I, J, E](
    f1: _AsyncStep[A, B, E],
    f2: _AsyncStep[B, C, E],
    f3: _AsyncStep[C, D, E],
    f4: _AsyncStep[D, F, E],
    f5: _AsyncStep[F, G, E],
    f6: _AsyncStep[G, H, E],
    f7: _AsyncStep[H, I, E],
    f8: _AsyncStep[I, J, E],
    /,
) -> _AsyncFlowed[A, J, E]: ...
@overload
def flow_async(
    *steps: Callable[[Any], MaybeAwaitable[Result[Any, Any]]],
) -> Callable[[MaybeAwaitable[Result[Any, Any]]], Awaitable[Result[Any, Any]]]: ...
def flow_async(
    *steps: Callable[[Any], MaybeAwaitable[Result[Any, Any]]],
) -> Callable[[MaybeAwaitable[Result[Any, Any]]], Awaitable[Result[Any, Any]]]:
    """Deferred `pipe_async`: returns a coroutine function threading a `Result` through **steps**."""
    check_steps(steps)

    async def _flowed(result: MaybeAwaitable[Result[Any, Any]]) -> Result[Any, Any]:
        return await pipe_async(result, *steps)

    return _flowed
