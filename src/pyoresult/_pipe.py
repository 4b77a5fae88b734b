"""Plain value threading: every step runs, whatever it receives.

`NONE`, `Err` or any other value are passed along like the rest, steps decide how to handle them.

For short-circuiting on `Err`, see `pyoresult.result.pipe`.
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable, Iterable
from typing import Any, overload

import cytoolz as cz

type MaybeAwaitable[T] = T | Awaitable[T]


def check_steps(steps: Iterable[object]) -> None:
    for idx, step in enumerate(steps, start=1):
        if not callable(step):
            msg = f"pipeline step {idx} is not callable: {step!r}"
            raise TypeError(msg)


async def resolve[T](value: MaybeAwaitable[T]) -> T:
    if inspect.isawaitable(value):
        return await value
    return value


@overload
def pipe[A](value: A, /) -> A: ...
@overload
def pipe[A, B](value: A, f1: Callable[[A], B], /) -> B: ...
@overload
def pipe[A, B, C](value: A, f1: Callable[[A], B], f2: Callable[[B], C], /) -> C: ...
@overload
def pipe[A, B, C, D](
    value: A,
    f1: Callable[[A], B],
    f2: Callable[[B], C],
    f3: Callable[[C], D],
    /,
) -> D: ...
@overload
def pipe[A, B, C, D, E](
    value: A,
    f1: Callable[[A], B],
    f2: Callable[[B], C],
    f3: Callable[[C], D],
    f4: Callable[[D], E],
    /,
) -> E: ...
@overload
def pipe[A, B, C, D, E, F](
    value: A,
    f1: Callable[[A], B],
    f2: Callable[[B], C],
    f3: Callable[[C], D],
    f4: Callable[[D], E],
    f5: Callable[[E], F],
    /,
) -> F: ...
@overload
def pipe[A, B, C, D, E, F, G](
    value: A,
    f1: Callable[[A], B],
    f2: Callable[[B], C],
    f3: Callable[[C], D],
    f4: Callable[[D], E],
    f5: Callable[[E], F],
    f6: Callable[[F], G],
    /,
) -> G: ...
@overload
def pipe[A, B, C, D, E, F, G, H](
    value: A,
    f1: Callable[[A], B],
    f2: Callable[[B], C],
    f3: Callable[[C], D],
    f4: Callable[[D], E],
    f5: Callable[[E], F],
    f6: Callable[[F], G],
    f7: Callable[[G], H],
    /,
) -> H: ...
@overload
def pipe[A, B, C, D, E, F, G, H, I](
    value: A,
    f1: Callable[[A], B],
    f2: Callable[[B], C],
    f3: Callable[[C], D],
    f4: Callable[[D], E],
    f5: Callable[[E], F],
    f6: Callable[[F], G],
    f7: Callable[[G], H],
    f8: Callable[[H], I],
    /,
) -> I: ...
@overload
def pipe(value: Any, /, *steps: Callable[[Any], Any]) -> Any: ...
def pipe(value: Any, /, *steps: Callable[[Any], Any]) -> Any:
    """Thread **value** through **steps**, each receiving the result of the previous one.

    Up to 8 steps are statically typed, longer chains are accepted without inference of the intermediate types.

    Args:
        value (Any): The starting value.
        *steps (Callable[[Any], Any]): The functions to apply, in order.

    Returns:
        Any: The result of the last step, or **value** if there are none.

    Raises:
        TypeError: If a step is not callable.

    Example:
    ```python
    >>> import pyoresult as pr
    >>> from pyoresult.curried import option
    >>> pr.pipe(42, option.map(lambda x: x + 8), option.map(lambda x: f"value: {x}"), option.unwrap_or("none"))
    'value: 50'
    >>> pr.pipe(pr.NONE, option.map(lambda x: x + 8), option.unwrap_or("none"))
    'none'

    ```
    """
    check_steps(steps)
    return cz.pipe(value, *steps)


@overload
def flow[A, B](f1: Callable[[A], B], /) -> Callable[[A], B]: ...
@overload
def flow[A, B, C](f1: Callable[[A], B], f2: Callable[[B], C], /) -> Callable[[A], C]: ...
@overload
def flow[A, B, C, D](
    f1: Callable[[A], B],
    f2: Callable[[B], C],
    f3: Callable[[C], D],
    /,
) -> Callable[[A], D]: ...
@overload
def flow[A, B, C, D, E](
    f1: Callable[[A], B],
    f2: Callable[[B], C],
    f3: Callable[[C], D],
    f4: Callable[[D], E],
    /,
) -> Callable[[A], E]: ...
@overload
def flow[A, B, C, D, E, F](
    f1: Callable[[A], B],
    f2: Callable[[B], C],
    f3: Callable[[C], D],
    f4: Callable[[D], E],
    f5: Callable[[E], F],
    /,
) -> Callable[[A], F]: ...
@overload
def flow[A, B, C, D, E, F, G](
    f1: Callable[[A], B],
    f2: Callable[[B], C],
    f3: Callable[[C], D],
    f4: Callable[[D], E],
    f5: Callable[[E], F],
    f6: Callable[[F], G],
    /,
) -> Callable[[A], G]: ...
@overload
def flow[A, B, C, D, E, F, G, H](
    f1: Callable[[A], B],
    f2: Callable[[B], C],
    f3: Callable[[C], D],
    f4: Callable[[D], E],
    f5: Callable[[E], F],
    f6: Callable[[F], G],
    f7: Callable[[G], H],
    /,
) -> Callable[[A], H]: ...
@overload
def flow[A, B, C, D, E, F, G, H, I](
    f1: Callable[[A], B],
    f2: Callable[[B], C],
    f3: Callable[[C], D],
    f4: Callable[[D], E],
    f5: Callable[[E], F],
    f6: Callable[[F], G],
    f7: Callable[[G], H],
    f8: Callable[[H], I],
    /,
) -> Callable[[A], I]: ...
@overload
def flow(*steps: Callable[[Any], Any]) -> Callable[[Any], Any]: ...
def flow(*steps: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose **steps** left to right into a single function.

    `flow(f, g)(x)` is `pipe(x, f, g)`. With no steps, the identity function is returned.

    Raises:
        TypeError: If a step is not callable, at definition time.

    Example:
    ```python
    >>> import pyoresult as pr
    >>> from pyoresult.curried import option
    >>> describe = pr.flow(option.from_, option.map(str.upper), option.unwrap_or("anonymous"))
    >>> list(map(describe, ["ada", None, "grace"]))
    ['ADA', 'anonymous', 'GRACE']

    ```
    """
    check_steps(steps)
    return cz.compose_left(*steps)


type _AsyncStep[A, B] = Callable[[A], MaybeAwaitable[B]]


@overload
async def pipe_async[A](value: MaybeAwaitable[A], /) -> A: ...
@overload
async def pipe_async[A, B](value: MaybeAwaitable[A], f1: _AsyncStep[A, B], /) -> B: ...
@overload
async def pipe_async[A, B, C](
    value: MaybeAwaitable[A], f1: _AsyncStep[A, B], f2: _AsyncStep[B, C], /
) -> C: ...
@overload
async def pipe_async[A, B, C, D](
    value: MaybeAwaitable[A],
    f1: _AsyncStep[A, B],
    f2: _AsyncStep[B, C],
    f3: _AsyncStep[C, D],
    /,
) -> D: ...
@overload
async def pipe_async[A, B, C, D, E](
    value: MaybeAwaitable[A],
    f1: _AsyncStep[A, B],
    f2: _AsyncStep[B, C],
    f3: _AsyncStep[C, D],
    f4: _AsyncStep[D, E],
    /,
) -> E: ...
@overload
async def pipe_async[A, B, C, D, E, F](
    value: MaybeAwaitable[A],
    f1: _AsyncStep[A, B],
    f2: _AsyncStep[B, C],
    f3: _AsyncStep[C, D],
    f4: _AsyncStep[D, E],
    f5: _AsyncStep[E, F],
    /,
) -> F: ...
@overload
async def pipe_async[A, B, C, D, E, F, G](
    value: MaybeAwaitable[A],
    f1: _AsyncStep[A, B],
    f2: _AsyncStep[B, C],
    f3: _AsyncStep[C, D],
    f4: _AsyncStep[D, E],
    f5: _AsyncStep[E, F],
    f6: _AsyncStep[F, G],
    /,
) -> G: ...
@overload
async def pipe_async[A, B, C, D, E, F, G, H](
    value: MaybeAwaitable[A],
    f1: _AsyncStep[A, B],
    f2: _AsyncStep[B, C],
    f3: _AsyncStep[C, D],
    f4: _AsyncStep[D, E],
    f5: _AsyncStep[E, F],
    f6: _AsyncStep[F, G],
    f7: _AsyncStep[G, H],
    /,
) -> H: ...
@overload
async def pipe_async[A, B, C, D, E, F, G, H, I](
    value: MaybeAwaitable[A],
    f1: _AsyncStep[A, B],
    f2: _AsyncStep[B, C],
    f3: _AsyncStep[C, D],
    f4: _AsyncStep[D, E],
    f5: _AsyncStep[E, F],
    f6: _AsyncStep[F, G],
    f7: _AsyncStep[G, H],
    f8: _AsyncStep[H, I],
    /,
) -> I: ...
@overload
async def pipe_async(value: Any, /, *steps: Callable[[Any], Any]) -> Any: ...
async def pipe_async(value: Any, /, *steps: Callable[[Any], Any]) -> Any:
    """Asynchronous `pipe`: **value** and every step result are awaited when awaitable.

    Steps run one after the other, never concurrently. Sync and async steps can be mixed.

    Exceptions raised by a step propagate to the caller.

    Example:
    ```python
    >>> import asyncio
    >>> import pyoresult as pr
    >>> async def double(x: int) -> int:
    ...     return x * 2
    >>> asyncio.run(pr.pipe_async(5, double, lambda x: x + 1, double))
    22

    ```
    """
    check_steps(steps)
    current = await resolve(value)
    for step in steps:
        current = await resolve(step(current))
    return current


@overload
def flow_async[A, B](f1: _AsyncStep[A, B], /) -> Callable[[MaybeAwaitable[A]], Awaitable[B]]: ...
@overload
def flow_async[A, B, C](
    f1: _AsyncStep[A, B], f2: _AsyncStep[B, C], /
) -> Callable[[MaybeAwaitable[A]], Awaitable[C]]: ...
@overload
def flow_async[A, B, C, D](
    f1: _AsyncStep[A, B],
    f2: _AsyncStep[B, C],
    f3: _AsyncStep[C, D],
    /,
) -> Callable[[MaybeAwaitable[A]], Awaitable[D]]: ...
@overload
def flow_async[A, B, C, D, E](
    f1: _AsyncStep[A, B],
    f2: _AsyncStep[B, C],
    f3: _AsyncStep[C, D],
    f4: _AsyncStep[D, E],
    /,
) -> Callable[[MaybeAwaitable[A]], Awaitable[E]]: ...
@overload
def flow_async[A, B, C, D, E, F](
    f1: _AsyncStep[A, B],
    f2: _AsyncStep[B, C],
    f3: _AsyncStep[C, D],
    f4: _AsyncStep[D, E],
    f5: _AsyncStep[E, F],
    /,
) -> Callable[[MaybeAwaitable[A]], Awaitable[F]]: ...
@overload
def flow_async[A, B, C, D, E, F, G](
    f1: _AsyncStep[A, B],
    f2: _AsyncStep[B, C],
    f3: _AsyncStep[C, D],
    f4: _AsyncStep[D, E],
    f5: _AsyncStep[E, F],
    f6: _AsyncStep[F, G],
    /,
) -> Callable[[MaybeAwaitable[A]], Awaitable[G]]: ...
@overload
def flow_async[A, B, C, D, E, F, G, H](
    f1: _AsyncStep[A, B],
    f2: _AsyncStep[B, C],
    f3: _AsyncStep[C, D],
    f4: _AsyncStep[D, E],
    f5: _AsyncStep[E, F],
    f6: _AsyncStep[F, G],
    f7: _AsyncStep[G, H],
    /,
) -> Callable[[MaybeAwaitable[A]], Awaitable[H]]: ...
@overload
def flow_async[A, B, C, D, E, F, G, H, I](
    f1: _AsyncStep[A, B],
    f2: _AsyncStep[B, C],
    f3: _AsyncStep[C, D],
    f4: _AsyncStep[D, E],
    f5: _AsyncStep[E, F],
    f6: _AsyncStep[F, G],
    f7: _AsyncStep[G, H],
    f8: _AsyncStep[H, I],
    /,
) -> Callable[[MaybeAwaitable[A]], Awaitable[I]]: ...
@overload
def flow_async(*steps: Callable[[Any], Any]) -> Callable[[Any], Awaitable[Any]]: ...
def flow_async(*steps: Callable[[Any], Any]) -> Callable[[Any], Awaitable[Any]]:
    """Deferred `pipe_async`: returns a coroutine function threading its argument through **steps**.

    Example:
    ```python
    >>> import asyncio
    >>> import pyoresult as pr
    >>> async def double(x: int) -> int:
    ...     return x * 2
    >>> quadruple = pr.flow_async(double, double)
    >>> asyncio.run(quadruple(3))
    12

    ```
    """
    check_steps(steps)

    async def _flowed(value: MaybeAwaitable[Any]) -> Any:
        return await pipe_async(value, *steps)

    return _flowed
