from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable

from ._option import NONE, Nullish, Option
from ._result import Err, Ok, Result

logger = logging.getLogger(__name__)

type Catchable = tuple[type[BaseException], ...]

DEFAULT_EXCEPTIONS: Catchable = (Exception,)


def perform[T](
    fn: Callable[[], T], *, exceptions: Catchable = DEFAULT_EXCEPTIONS
) -> Result[T, BaseException]:
    """Call **fn** and capture a raised exception as an `Err`.

    Exceptions that are not instances of **exceptions** propagate unchanged, so do `KeyboardInterrupt` and `SystemExit` with the default.

    Args:
        fn (Callable[[], T]): Zero-argument callable that may raise.
        exceptions (tuple[type[BaseException], ...]): Exception types converted into `Err`.

    Returns:
        Result[T, BaseException]: `Ok(fn())`, or `Err(exception)`.

    Example:
    ```python
    >>> import pyoresult as pr
    >>> pr.result.perform(lambda: int("42"))
    Ok(42)
    >>> pr.result.perform(lambda: int("forty-two"))
    Err(ValueError("invalid literal for int() with base 10: 'forty-two'"))

    ```
    """
    try:
        value = fn()
    except exceptions as exc:
        logger.debug("captured %r raised by %r", exc, fn)
        return Err(exc)
    return Ok(value)


async def perform_async[T](
    fn: Callable[[], Awaitable[T] | T], *, exceptions: Catchable = DEFAULT_EXCEPTIONS
) -> Result[T, BaseException]:
    """Call **fn**, await its result when awaitable, and capture a raised exception as an `Err`.

    `asyncio.CancelledError` is a `BaseException`, hence cancellation propagates with the default **exceptions**.

    Args:
        fn (Callable[[], Awaitable[T] | T]): Zero-argument callable, usually a coroutine function.
        exceptions (tuple[type[BaseException], ...]): Exception types converted into `Err`.

    Returns:
        Result[T, BaseException]: `Ok(await fn())`, or `Err(exception)`.

    Example:
    ```python
    >>> import asyncio
    >>> import pyoresult as pr
    >>> async def fetch() -> int:
    ...     return 1
    >>> async def broken() -> int:
    ...     raise LookupError("gone")
    >>> asyncio.run(pr.result.perform_async(fetch))
    Ok(1)
    >>> asyncio.run(pr.result.perform_async(broken))
    Err(LookupError('gone'))

    ```
    """
    try:
        value = fn()
        if inspect.isawaitable(value):
            value = await value
    except exceptions as exc:
        logger.debug("captured %r raised by %r", exc, fn)
        return Err(exc)
    return Ok(value)


def into_result[T, E](value: Nullish[T], error: Nullish[E]) -> Result[Option[T], E]:
    """Merge a `(value, error)` pair, where at most one side is expected to be set, into a `Result`.

    A present **error** wins regardless of **value**.

    If both are empty, the result is `Ok(NONE)`.

    Args:
        value (Nullish[T]): The value side, `None` or `NONE` when empty.
        error (Nullish[E]): The error side, `None` or `NONE` when empty.

    Returns:
        Result[Option[T], E]: `Err(error)`, or `Ok` of the normalized value.

    Example:
    ```python
    >>> import pyoresult as pr
    >>> pr.result.into_result("row", None)
    Ok('row')
    >>> pr.result.into_result(None, "connection reset")
    Err('connection reset')
    >>> pr.result.into_result(None, None)
    Ok(NONE)

    ```
    """
    if error is not None and error is not NONE:
        return Err(error)
    return Ok(NONE if value is None else value)
