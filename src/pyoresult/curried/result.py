"""Data-last variants of the `pyoresult.result` operations.

Each function takes the configuration arguments and returns a function awaiting the `Result`, ready for `pyoresult.pipe` or `map`.

Single-argument operations are re-exported unchanged.

Example:
```python
>>> import pyoresult as pr
>>> from pyoresult.curried import result
>>> pr.pipe(
...     pr.Ok(10),
...     result.map(lambda x: x + 5),
...     result.flat_map(lambda x: pr.Ok(x * 2) if x > 10 else pr.Err("too small")),
...     result.map(lambda x: f"result: {x}"),
... )
Ok('result: 30')
>>> double = result.map(lambda x: x * 2)
>>> [double(res) for res in [pr.Ok(1), pr.Err("fail"), pr.Ok(3)]]
[Ok(2), Err('fail'), Ok(6)]

```
"""

from __future__ import annotations

from collections.abc import Callable

from .. import result as res
from .._results import Result
from ..result import is_err, is_ok, to_option, unwrap

__all__ = [
    "flat_map",
    "is_err",
    "is_ok",
    "map",
    "map_err",
    "map_or",
    "map_or_else",
    "or_else",
    "to_option",
    "unwrap",
    "unwrap_or",
    "unwrap_or_else",
]


def unwrap_or[T](default: T) -> Callable[[Result[T, object]], T]:
    """Curried `result.unwrap_or`."""

    def _unwrap_or(result: Result[T, object]) -> T:
        return res.unwrap_or(result, default)

    return _unwrap_or


def unwrap_or_else[T, E](f: Callable[[E], T]) -> Callable[[Result[T, E]], T]:
    """Curried `result.unwrap_or_else`."""

    def _unwrap_or_else(result: Result[T, E]) -> T:
        return res.unwrap_or_else(result, f)

    return _unwrap_or_else


def map[T, U, E](f: Callable[[T], U]) -> Callable[[Result[T, E]], Result[U, E]]:
    """Curried `result.map`."""

    def _map(result: Result[T, E]) -> Result[U, E]:
        return res.map(result, f)

    return _map


def map_or[T, U](f: Callable[[T], U], default: U) -> Callable[[Result[T, object]], U]:
    """Curried `result.map_or`."""

    def _map_or(result: Result[T, object]) -> U:
        return res.map_or(result, f, default)

    return _map_or


def map_or_else[T, U, E](
    f: Callable[[T], U], default: Callable[[E], U]
) -> Callable[[Result[T, E]], U]:
    """
    Curried `result.map_or_else`.

    Example:
    ```python
    >>> import pyoresult as pr
    >>> from pyoresult.curried import result
    >>> describe = result.map_or_else(lambda x: f"got {x}", lambda e: f"failed: {e}")
    >>> describe(pr.Ok(1)), describe(pr.Err("timeout"))
    ('got 1', 'failed: timeout')

    ```
    """

    def _map_or_else(result: Result[T, E]) -> U:
        return res.map_or_else(result, f, default)

    return _map_or_else


def flat_map[T, U, E](
    f: Callable[[T], Result[U, E]],
) -> Callable[[Result[T, E]], Result[U, E]]:
    """Curried `result.flat_map`."""

    def _flat_map(result: Result[T, E]) -> Result[U, E]:
        return res.flat_map(result, f)

    return _flat_map


def map_err[T, E, F](f: Callable[[E], F]) -> Callable[[Result[T, E]], Result[T, F]]:
    """Curried `result.map_err`."""

    def _map_err(result: Result[T, E]) -> Result[T, F]:
        return res.map_err(result, f)

    return _map_err


def or_else[T, E, F](
    f: Callable[[E], Result[T, F]],
) -> Callable[[Result[T, E]], Result[T, F]]:
    """Curried `result.or_else`."""

    def _or_else(result: Result[T, E]) -> Result[T, F]:
        return res.or_else(result, f)

    return _or_else
