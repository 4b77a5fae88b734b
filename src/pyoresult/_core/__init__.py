from ._config import Config, get_config
from ._errors import UnwrapError
from ._main import Pipeable

__all__ = [
    "Config",
    "Pipeable",
    "UnwrapError",
    "get_config",
]
