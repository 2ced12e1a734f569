"""Core wrapper types and their contract errors."""

from .errors import ContractError, ErrorCode, InvalidAccess, InvalidConstruction
from .messages import DEFAULT_FAILURE_MESSAGE
from .option import Nothing, Option, Some, is_none, is_some
from .result import Failure, Result, Success, is_err, is_ok
from .sentinel import MISSING, Missing, is_absent, is_present

__all__ = [
    # errors
    "ContractError",
    "ErrorCode",
    "InvalidAccess",
    "InvalidConstruction",
    # messages
    "DEFAULT_FAILURE_MESSAGE",
    # option
    "Nothing",
    "Option",
    "Some",
    "is_none",
    "is_some",
    # result
    "Failure",
    "Result",
    "Success",
    "is_err",
    "is_ok",
    # sentinel
    "MISSING",
    "Missing",
    "is_absent",
    "is_present",
]
