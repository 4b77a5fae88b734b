from ._capture import into_result, perform, perform_async
from ._option import NONE, NoneOption, Nullish, Option, OptionUnwrapError
from ._result import Err, Ok, Result, ResultUnwrapError

__all__ = [
    "NONE",
    "Err",
    "NoneOption",
    "Nullish",
    "Ok",
    "Option",
    "OptionUnwrapError",
    "Result",
    "ResultUnwrapError",
    "into_result",
    "perform",
    "perform_async",
]
