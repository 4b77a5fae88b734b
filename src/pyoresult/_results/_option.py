from __future__ import annotations

from typing import Final, Self

from .._core import UnwrapError

ABSENT_MESSAGE: Final = "value is absent"


class OptionUnwrapError(UnwrapError): ...


class NoneOption:
    """The absent sentinel of `Option`.

    There is exactly one instance, `NONE`: calling `NoneOption()` returns it, and copying or pickling keeps its identity.

    It is distinct from Python's `None`, which `Option` treats as an ordinary present value.

    Example:
    ```python
    >>> import pyoresult as pr
    >>> pr.NoneOption() is pr.NONE
    True
    >>> pr.NONE
    NONE
    >>> bool(pr.NONE)
    False

    ```
    """

    __slots__ = ()
    __match_args__ = ()
    _instance: NoneOption | None = None

    def __new__(cls) -> Self:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NONE"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> tuple[type[NoneOption], tuple[()]]:
        return (NoneOption, ())

    def __copy__(self) -> Self:
        return self

    def __deepcopy__(self, memo: dict[int, object]) -> Self:
        return self


NONE: Final = NoneOption()
"""Singleton instance representing the absence of a value."""

type Option[T] = T | NoneOption
"""A raw value of type `T`, or `NONE`."""

type Nullish[T] = T | NoneOption | None
"""An `Option` that also admits Python's `None` as a second empty representation.

Only `option.from_` and `result.into_result` collapse it into an `Option`.
"""
