"""Error kinds and contract exceptions.

Misusing a wrapper (building it from an input that matches no shape, or
reading a field the active variant does not carry) raises a
``ContractError`` subclass tagged with its ``ErrorCode``.
"""

from __future__ import annotations

from enum import IntEnum

__all__ = ["ErrorCode", "ContractError", "InvalidConstruction", "InvalidAccess"]


class ErrorCode(IntEnum):
    """Stable identifiers for the two kinds of contract violation.

    - 1: Invalid construction (input matched no wrapper shape)
    - 2: Invalid access (field read on the wrong variant or missing data)
    """

    INVALID_CONSTRUCTION = 1
    INVALID_ACCESS = 2

    def __str__(self) -> str:
        """Return human-readable name."""
        return self.name.lower().replace("_", " ")


class ContractError(ValueError):
    """Base class for wrapper contract violations."""

    code: ErrorCode

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidConstruction(ContractError):
    """Raised when a wrapper is built from an input that matches no shape."""

    code = ErrorCode.INVALID_CONSTRUCTION


class InvalidAccess(ContractError):
    """Raised when an accessor is read on the wrong variant or missing data.

    Check ``is_ok()`` / ``is_some()`` first, or use ``match()``.
    """

    code = ErrorCode.INVALID_ACCESS
