"""Immutable Result and Option wrappers for fallible and optional values."""

from .core import (
    DEFAULT_FAILURE_MESSAGE,
    MISSING,
    ContractError,
    ErrorCode,
    Failure,
    InvalidAccess,
    InvalidConstruction,
    Missing,
    Nothing,
    Option,
    Result,
    Some,
    Success,
    is_absent,
    is_err,
    is_none,
    is_ok,
    is_present,
    is_some,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_FAILURE_MESSAGE",
    "MISSING",
    "ContractError",
    "ErrorCode",
    "Failure",
    "InvalidAccess",
    "InvalidConstruction",
    "Missing",
    "Nothing",
    "Option",
    "Result",
    "Some",
    "Success",
    "is_absent",
    "is_err",
    "is_none",
    "is_ok",
    "is_present",
    "is_some",
]
