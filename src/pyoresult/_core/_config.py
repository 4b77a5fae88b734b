import logging
import os
from dataclasses import dataclass
from functools import cache
from typing import Final

from ._format import truncated_repr

logger = logging.getLogger(__name__)

REPR_MAX_LENGTH_ENV: Final = "PYORESULT_REPR_MAX_LENGTH"
DEFAULT_REPR_MAX_LENGTH: Final = 80


@dataclass(slots=True, frozen=True)
class Config:
    """Read-only settings of the library, resolved once from the environment.

    Attributes:
        repr_max_length (int): Maximum length of the payload shown by `repr(Ok(...))` and `repr(Err(...))`.
    """

    repr_max_length: int = DEFAULT_REPR_MAX_LENGTH

    def payload_repr(self, value: object) -> str:
        return truncated_repr(value, self.repr_max_length)

    @classmethod
    def from_env(cls) -> "Config":
        raw = os.environ.get(REPR_MAX_LENGTH_ENV)
        if raw is None:
            return cls()
        try:
            max_length = int(raw)
        except ValueError:
            logger.warning(
                "ignoring %s=%r, expected an integer", REPR_MAX_LENGTH_ENV, raw
            )
            return cls()
        if max_length < 1:
            logger.warning(
                "ignoring %s=%r, expected a positive integer", REPR_MAX_LENGTH_ENV, raw
            )
            return cls()
        return cls(repr_max_length=max_length)


@cache
def get_config() -> Config:
    """Get the library `Config`, read from the environment on first call.

    Example:
    ```python
    >>> import pyoresult as pr
    >>> pr.get_config().repr_max_length > 0
    True

    ```
    """
    return Config.from_env()
