"""Data-last variants of the `pyoresult.option` operations.

Each function takes the configuration arguments and returns a function awaiting the `Option`, ready for `pyoresult.pipe` or `map`.

Single-argument operations are re-exported unchanged.

Example:
```python
>>> import pyoresult as pr
>>> from pyoresult.curried import option
>>> double = option.map(lambda x: x * 2)
>>> [double(value) for value in [1, pr.NONE, 3]]
[2, NONE, 6]

```
"""

from __future__ import annotations

from collections.abc import Callable

from .. import option as opt
from .._results import Option, Result
from ..option import from_, is_none, is_nullish, is_some, unwrap, values

__all__ = [
    "filter",
    "flat_map",
    "from_",
    "is_none",
    "is_nullish",
    "is_some",
    "map",
    "map_or",
    "map_or_else",
    "ok_or",
    "unwrap",
    "unwrap_or",
    "unwrap_or_else",
    "values",
]


def unwrap_or[T](default: T) -> Callable[[Option[T]], T]:
    """Curried `option.unwrap_or`."""

    def _unwrap_or(value: Option[T]) -> T:
        return opt.unwrap_or(value, default)

    return _unwrap_or


def unwrap_or_else[T](f: Callable[[], T]) -> Callable[[Option[T]], T]:
    """Curried `option.unwrap_or_else`."""

    def _unwrap_or_else(value: Option[T]) -> T:
        return opt.unwrap_or_else(value, f)

    return _unwrap_or_else


def map[T, U](f: Callable[[T], U]) -> Callable[[Option[T]], Option[U]]:
    """Curried `option.map`."""

    def _map(value: Option[T]) -> Option[U]:
        return opt.map(value, f)

    return _map


def map_or[T, U](default: U, f: Callable[[T], U]) -> Callable[[Option[T]], U]:
    """
    Curried `option.map_or`, **default** comes first like in the data-first form.

    Example:
    ```python
    >>> import pyoresult as pr
    >>> from pyoresult.curried import option
    >>> option.map_or(0, len)("four"), option.map_or(0, len)(pr.NONE)
    (4, 0)

    ```
    """

    def _map_or(value: Option[T]) -> U:
        return opt.map_or(value, default, f)

    return _map_or


def map_or_else[T, U](f: Callable[[], U], default: U) -> Callable[[Option[T]], U]:
    """Curried `option.map_or_else`."""

    def _map_or_else(value: Option[T]) -> U:
        return opt.map_or_else(value, f, default)

    return _map_or_else


def flat_map[T, U](f: Callable[[T], Option[U]]) -> Callable[[Option[T]], Option[U]]:
    """Curried `option.flat_map`."""

    def _flat_map(value: Option[T]) -> Option[U]:
        return opt.flat_map(value, f)

    return _flat_map


def filter[T](predicate: Callable[[T], bool]) -> Callable[[Option[T]], Option[T]]:
    """Curried `option.filter`."""

    def _filter(value: Option[T]) -> Option[T]:
        return opt.filter(value, predicate)

    return _filter


def ok_or[T, E](error: E) -> Callable[[Option[T]], Result[T, E]]:
    """Curried `option.ok_or`."""

    def _ok_or(value: Option[T]) -> Result[T, E]:
        return opt.ok_or(value, error)

    return _ok_or
