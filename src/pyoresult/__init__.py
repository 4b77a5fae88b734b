import logging

from . import curried, option, result, schema
from ._core import Config, UnwrapError, get_config
from ._pipe import flow, flow_async, pipe, pipe_async
from ._results import (
    NONE,
    Err,
    NoneOption,
    Nullish,
    Ok,
    Option,
    OptionUnwrapError,
    Result,
    ResultUnwrapError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "NONE",
    "Config",
    "Err",
    "NoneOption",
    "Nullish",
    "Ok",
    "Option",
    "OptionUnwrapError",
    "Result",
    "ResultUnwrapError",
    "UnwrapError",
    "curried",
    "flow",
    "flow_async",
    "get_config",
    "option",
    "pipe",
    "pipe_async",
    "result",
    "schema",
]
