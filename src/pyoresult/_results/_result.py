from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import ClassVar, Literal, Never, TypeIs, cast

from .._core import Pipeable, UnwrapError, get_config
from ._option import NONE, Option


class ResultUnwrapError(UnwrapError): ...


def _raise_unwrap(message: str, payload: object) -> Never:
    if isinstance(payload, BaseException):
        raise ResultUnwrapError(message, payload) from payload
    raise ResultUnwrapError(message, payload)


class Result[T, E](Pipeable, ABC):
    """Outcome of an operation that either succeeded with a `T` (`Ok`) or failed with an `E` (`Err`).

    Instances are immutable. `ok` is the boolean discriminant: `Ok` only carries `value`, `Err` only carries `error`.

    Every method mirrors the data-first function of the same name in `pyoresult.result`.

    Example:
    ```python
    >>> import pyoresult as pr
    >>> def parse(text: str) -> pr.Result[int, str]:
    ...     return pr.Ok(int(text)) if text.isdigit() else pr.Err(f"not a number: {text!r}")
    >>> parse("21").map(lambda x: x * 2)
    Ok(42)
    >>> parse("abc").map(lambda x: x * 2)
    Err("not a number: 'abc'")
    >>> match parse("7"):
    ...     case pr.Ok(value):
    ...         print(value)
    ...     case pr.Err(error):
    ...         print(error)
    7

    ```
    """

    __slots__ = ()
    ok: ClassVar[bool]

    @abstractmethod
    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        """Returns `True` if the result is `Ok`."""
        ...

    @abstractmethod
    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        """Returns `True` if the result is `Err`."""
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """
        Returns the contained `Ok` value.

        Returns:
            T: The contained `Ok` value.

        Raises:
            ResultUnwrapError: If the result is `Err`. The error payload is available as `cause`, and is also chained as `__cause__` when it is an exception.

        Example:
        ```python
        >>> import pyoresult as pr
        >>> pr.Ok(2).unwrap()
        2
        >>> pr.Err("emergency failure").unwrap()
        Traceback (most recent call last):
            ...
        pyoresult._results._result.ResultUnwrapError: called `unwrap` on an `Err` value

        ```
        """
        ...

    @abstractmethod
    def unwrap_err(self) -> E:
        """
        Returns the contained `Err` value.

        Raises:
            ResultUnwrapError: If the result is `Ok`, with the value as `cause`.

        Example:
        ```python
        >>> import pyoresult as pr
        >>> pr.Err("emergency failure").unwrap_err()
        'emergency failure'

        ```
        """
        ...

    def expect(self, msg: str) -> T:
        """
        Returns the contained `Ok` value, or raises `ResultUnwrapError` with a custom message if the result is `Err`.

        Args:
            msg (str): The message to display if the result is `Err`.

        Returns:
            T: The contained `Ok` value.

        Example:
        ```python
        >>> import pyoresult as pr
        >>> pr.Err("timeout").expect("config must load")
        Traceback (most recent call last):
            ...
        pyoresult._results._result.ResultUnwrapError: config must load (called `expect` on an `Err` value)

        ```
        """
        if self.is_ok():
            return self.unwrap()
        _raise_unwrap(f"{msg} (called `expect` on an `Err` value)", self.unwrap_err())

    def unwrap_or(self, default: T) -> T:
        """
        Returns the contained `Ok` value or a provided default.

        Args:
            default (T): The value to return if the result is `Err`.

        Returns:
            T: The contained `Ok` value or the default.

        Example:
        ```python
        >>> import pyoresult as pr
        >>> pr.Ok(9).unwrap_or(2)
        9
        >>> pr.Err("error").unwrap_or(2)
        2

        ```
        """
        return self.unwrap() if self.is_ok() else default

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """
        Returns the contained `Ok` value or computes it from the error.

        Args:
            f (Callable[[E], T]): Callable that takes the `Err` value and returns a `T`.

        Returns:
            T: The contained `Ok` value or the result of `f(error)`.

        Example:
        ```python
        >>> import pyoresult as pr
        >>> pr.Ok(2).unwrap_or_else(len)
        2
        >>> pr.Err("foo").unwrap_or_else(len)
        3

        ```
        """
        return self.unwrap() if self.is_ok() else f(self.unwrap_err())

    def map[U](self, f: Callable[[T], U]) -> Result[U, E]:
        """
        Maps a `Result[T, E]` to `Result[U, E]` by applying a function to a contained `Ok` value, leaving `Err` untouched.

        The `Err` instance itself is returned, and **f** is never called on it.

        Args:
            f (Callable[[T], U]): Callable to apply to the `Ok` value.

        Returns:
            Result[U, E]: `Ok(f(value))` if `Ok`, otherwise the same `Err`.

        Example:
        ```python
        >>> import pyoresult as pr
        >>> pr.Ok("Hello").map(len)
        Ok(5)
        >>> failure = pr.Err("bad")
        >>> failure.map(len) is failure
        True

        ```
        """
        if self.is_ok():
            return Ok(f(self.unwrap()))
        return cast(Result[U, E], self)

    def map_or[U](self, f: Callable[[T], U], default: U) -> U:
        """
        Applies **f** to the `Ok` value, or returns **default** if `Err`.

        Args:
            f (Callable[[T], U]): Callable to apply to the `Ok` value.
            default (U): The value to return if the result is `Err`.

        Returns:
            U: `f(value)` or the default.

        Example:
        ```python
        >>> import pyoresult as pr
        >>> pr.Ok("foo").map_or(len, 42)
        3
        >>> pr.Err("bar").map_or(len, 42)
        42

        ```
        """
        return f(self.unwrap()) if self.is_ok() else default

    def map_or_else[U](self, f: Callable[[T], U], default: Callable[[E], U]) -> U:
        """
        Applies **f** to the `Ok` value, or **default** to the `Err` value.

        Args:
            f (Callable[[T], U]): Callable to apply to the `Ok` value.
            default (Callable[[E], U]): Callable to apply to the `Err` value.

        Returns:
            U: The result of the called function.

        Example:
        ```python
        >>> import pyoresult as pr
        >>> pr.Ok(21).map_or_else(lambda x: x * 2, len)
        42
        >>> pr.Err("four").map_or_else(lambda x: x * 2, len)
        4

        ```
        """
        return f(self.unwrap()) if self.is_ok() else default(self.unwrap_err())

    def flat_map[U](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """
        Calls **f** with the `Ok` value and returns its result, otherwise returns the same `Err`.

        Some languages call this operation `and_then` or `bind`.

        Args:
            f (Callable[[T], Result[U, E]]): Callable that takes the `Ok` value and returns a `Result`.

        Returns:
            Result[U, E]: The result of `f(value)` if `Ok`, otherwise the same `Err`.

        Example:
        ```python
        >>> import pyoresult as pr
        >>> def half(x: int) -> pr.Result[int, str]:
        ...     return pr.Ok(x // 2) if x % 2 == 0 else pr.Err(f"{x} is odd")
        >>> pr.Ok(8).flat_map(half).flat_map(half)
        Ok(2)
        >>> pr.Ok(6).flat_map(half).flat_map(half)
        Err('3 is odd')

        ```
        """
        if self.is_ok():
            return f(self.unwrap())
        return cast(Result[U, E], self)

    def map_err[F](self, f: Callable[[E], F]) -> Result[T, F]:
        """
        Maps a `Result[T, E]` to `Result[T, F]` by applying a function to a contained `Err` value, leaving `Ok` untouched.

        Args:
            f (Callable[[E], F]): Callable to apply to the `Err` value.

        Returns:
            Result[T, F]: `Err(f(error))` if `Err`, otherwise the same `Ok`.

        Example:
        ```python
        >>> import pyoresult as pr
        >>> pr.Err("bad").map_err(str.upper)
        Err('BAD')
        >>> pr.Ok(1).map_err(str.upper)
        Ok(1)

        ```
        """
        if self.is_err():
            return Err(f(self.unwrap_err()))
        return cast(Result[T, F], self)

    def or_else[F](self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """
        Calls **f** with the `Err` value and returns its result, otherwise returns the same `Ok`.

        Args:
            f (Callable[[E], Result[T, F]]): Callable that takes the `Err` value and returns a `Result`.

        Returns:
            Result[T, F]: The same `Ok`, or the result of `f(error)`.

        Example:
        ```python
        >>> import pyoresult as pr
        >>> pr.Err("missing").or_else(lambda e: pr.Ok(0))
        Ok(0)

        ```
        """
        if self.is_ok():
            return cast(Result[T, F], self)
        return f(self.unwrap_err())

    def to_option(self) -> Option[T]:
        """
        Converts the `Result` into an `Option`, discarding the error.

        Returns:
            Option[T]: The `Ok` value, or `NONE`.

        Example:
        ```python
        >>> import pyoresult as pr
        >>> pr.Ok(2).to_option()
        2
        >>> pr.Err("nothing here").to_option()
        NONE

        ```
        """
        return self.unwrap() if self.is_ok() else NONE

    def err_option(self) -> Option[E]:
        """
        Converts the `Result` into an `Option` of its error, discarding the value.

        Example:
        ```python
        >>> import pyoresult as pr
        >>> pr.Err("nothing here").err_option()
        'nothing here'
        >>> pr.Ok(2).err_option()
        NONE

        ```
        """
        return self.unwrap_err() if self.is_err() else NONE


@dataclass(slots=True, frozen=True)
class Ok[T, E](Result[T, E]):
    """`Result` variant representing a success.

    Args:
        value (T): The contained value.
    """

    ok: ClassVar[Literal[True]] = True
    value: T

    def __repr__(self) -> str:
        return f"Ok({get_config().payload_repr(self.value)})"

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return True

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> Never:
        _raise_unwrap("called `unwrap_err` on an `Ok` value", self.value)


@dataclass(slots=True, frozen=True)
class Err[T, E](Result[T, E]):
    """`Result` variant representing a failure.

    Args:
        error (E): The contained error.
    """

    ok: ClassVar[Literal[False]] = False
    error: E

    def __repr__(self) -> str:
        return f"Err({get_config().payload_repr(self.error)})"

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return False

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        _raise_unwrap("called `unwrap` on an `Err` value", self.error)

    def unwrap_err(self) -> E:
        return self.error
