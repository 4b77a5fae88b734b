"""Data-first operations over `Option`.

An `Option[T]` is either a raw `T` or the `NONE` sentinel, hence there is no wrapper to call methods on: every operation is a function taking the option first.

Python's `None` is a regular present value here. Use `from_` at the boundary with code that signals absence with `None`.

Example:
```python
>>> from pyoresult import option
>>> port = option.from_({"port": 8080}.get("port"))
>>> option.map_or(port, "closed", lambda p: f"listening on {p}")
'listening on 8080'
>>> option.map_or(option.from_(None), "closed", lambda p: f"listening on {p}")
'closed'

```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeIs

from ._results import NONE, Err, NoneOption, Nullish, Ok, Option, Result
from ._results._option import ABSENT_MESSAGE, OptionUnwrapError

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


def from_[T](value: Nullish[T]) -> Option[T]:
    """Normalize both empty representations, `None` and `NONE`, to `NONE`.

    Any other value is returned unchanged, falsy ones included.

    Example:
    ```python
    >>> from pyoresult import option
    >>> option.from_(None)
    NONE
    >>> option.from_(0)
    0
    >>> option.from_([None])
    [None]

    ```
    """
    if value is None:
        return NONE
    return value


def is_some[T](value: Option[T]) -> TypeIs[T]:
    """Returns `True` unless **value** is `NONE`.

    `None` counts as present.

    Example:
    ```python
    >>> from pyoresult import option
    >>> option.is_some(False), option.is_some(None), option.is_some(option.NONE)
    (True, True, False)

    ```
    """
    return value is not NONE


def is_none[T](value: Option[T]) -> TypeIs[NoneOption]:
    """Returns `True` only for the `NONE` sentinel."""
    return value is NONE


def is_nullish[T](value: Nullish[T]) -> TypeIs[NoneOption | None]:
    """Returns `True` for either empty representation, `None` or `NONE`.

    Example:
    ```python
    >>> from pyoresult import option
    >>> option.is_nullish(None), option.is_nullish(option.NONE), option.is_nullish("")
    (True, True, False)

    ```
    """
    return value is None or value is NONE


def unwrap[T](value: Option[T]) -> T:
    """
    Returns the contained value.

    Raises:
        OptionUnwrapError: If **value** is `NONE`, with an absence message as `cause`.

    Example:
    ```python
    >>> from pyoresult import option
    >>> option.unwrap("car")
    'car'
    >>> option.unwrap(option.NONE)
    Traceback (most recent call last):
        ...
    pyoresult._results._option.OptionUnwrapError: called `unwrap` on `NONE`

    ```
    """
    if value is NONE:
        raise OptionUnwrapError("called `unwrap` on `NONE`", ABSENT_MESSAGE)
    return value


def unwrap_or[T](value: Option[T], default: T) -> T:
    """
    Returns the contained value or a provided default.

    Example:
    ```python
    >>> from pyoresult import option
    >>> option.unwrap_or("car", "bike")
    'car'
    >>> option.unwrap_or(option.NONE, "bike")
    'bike'

    ```
    """
    return default if value is NONE else value


def unwrap_or_else[T](value: Option[T], f: Callable[[], T]) -> T:
    """Returns the contained value or computes one with the zero-argument **f**."""
    return f() if value is NONE else value


def map[T, U](value: Option[T], f: Callable[[T], U]) -> Option[U]:
    """
    Applies **f** to a present value, leaving `NONE` untouched.

    Example:
    ```python
    >>> from pyoresult import option
    >>> option.map("Hello, World!", len)
    13
    >>> option.map(option.NONE, len)
    NONE

    ```
    """
    if value is NONE:
        return NONE
    return f(value)


def map_or[T, U](value: Option[T], default: U, f: Callable[[T], U]) -> U:
    """
    Applies **f** to a present value, or returns **default** for `NONE`.

    Note that **default** comes before **f**.

    Example:
    ```python
    >>> from pyoresult import option
    >>> option.map_or("foo", 42, len)
    3
    >>> option.map_or(option.NONE, 42, len)
    42

    ```
    """
    return default if value is NONE else f(value)


def map_or_else[T, U](value: Option[T], f: Callable[[], U], default: U) -> U:
    """
    Returns `f()` when **value** is present, or **default** for `NONE`.

    **f** takes no argument, and **default** is a plain value.

    Example:
    ```python
    >>> from pyoresult import option
    >>> option.map_or_else(42, lambda: "present", "absent")
    'present'
    >>> option.map_or_else(option.NONE, lambda: "present", "absent")
    'absent'

    ```
    """
    return default if value is NONE else f()


def flat_map[T, U](value: Option[T], f: Callable[[T], Option[U]]) -> Option[U]:
    """
    Calls **f** with a present value and returns its `Option`, otherwise `NONE`.

    Example:
    ```python
    >>> from pyoresult import option
    >>> def first(items: list[int]) -> option.Option[int]:
    ...     return items[0] if items else option.NONE
    >>> option.flat_map([3, 4], first)
    3
    >>> option.flat_map([], first)
    NONE

    ```
    """
    if value is NONE:
        return NONE
    return f(value)


def filter[T](value: Option[T], predicate: Callable[[T], bool]) -> Option[T]:
    """Keep a present value only if it satisfies **predicate**."""
    if value is NONE or not predicate(value):
        return NONE
    return value


def ok_or[T, E](value: Option[T], error: E) -> Result[T, E]:
    """
    Converts an `Option` into a `Result`, using **error** for `NONE`.

    Example:
    ```python
    >>> from pyoresult import option
    >>> option.ok_or(5, "missing")
    Ok(5)
    >>> option.ok_or(option.NONE, "missing")
    Err('missing')

    ```
    """
    if value is NONE:
        return Err(error)
    return Ok(value)


def values[T](options: Iterable[Option[T]]) -> list[T]:
    """Collect the present values, in order, skipping `NONE`."""
    return [value for value in options if value is not NONE]
