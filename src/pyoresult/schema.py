"""Bridge from the "safe parse" shape of schema validation libraries to `Result`.

Validation libraries commonly report `{"success": True, "data": ...}` or `{"success": False, "error": ...}`, either as a mapping or as an object with those attributes.

`to_result` only reads those fields, it does not import any validation library.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal, NotRequired, Protocol, TypedDict, cast

from ._results import Err, Ok, Result

__all__ = [
    "SafeParseError",
    "SafeParseLike",
    "SafeParseReturn",
    "SafeParseSuccess",
    "to_result",
]


class SafeParseSuccess[T](TypedDict):
    success: Literal[True]
    data: T
    error: NotRequired[None]


class SafeParseError[E](TypedDict):
    success: Literal[False]
    error: E
    data: NotRequired[None]


type SafeParseReturn[T, E] = SafeParseSuccess[T] | SafeParseError[E]


class SafeParseLike(Protocol):
    """Attribute flavour of the safe parse shape."""

    @property
    def success(self) -> bool: ...
    @property
    def data(self) -> Any: ...
    @property
    def error(self) -> Any: ...


def to_result[T, E](parsed: SafeParseReturn[T, E] | SafeParseLike) -> Result[T, E]:
    """Convert a safe parse outcome into a `Result`.

    Args:
        parsed (SafeParseReturn[T, E] | SafeParseLike): A mapping or an object with a boolean `success`, and `data` on success or `error` on failure.

    Returns:
        Result[T, E]: `Ok(data)` if `success` is truthy, otherwise `Err(error)`.
        A missing `data` or `error` field is read as `None`.

    Example:
    ```python
    >>> from pyoresult import schema
    >>> schema.to_result({"success": True, "data": {"id": 1}})
    Ok({'id': 1})
    >>> schema.to_result({"success": False, "error": "bad"})
    Err('bad')

    ```
    """
    if isinstance(parsed, Mapping):
        fields = cast(Mapping[str, Any], parsed)
        if fields.get("success"):
            return Ok(fields.get("data"))
        return Err(fields.get("error"))
    if getattr(parsed, "success", False):
        return Ok(getattr(parsed, "data", None))
    return Err(getattr(parsed, "error", None))
