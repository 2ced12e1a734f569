"""Result type for operations that may fail.

A Result is exactly one of two variants, fixed when it is built:

- ``Success`` carries the payload of a successful operation.
- ``Failure`` carries an error value and a human-readable message.

Usage:
    def fetch(url: str) -> Result[bytes, NetworkError]:
        try:
            return Result.construct(payload=download(url))
        except NetworkError as e:
            return Result.construct(error=e, message="timeout")

    result = fetch("https://example.org")
    if result.is_ok():
        print(len(result.payload))
    else:
        print(f"{result.message}: {result.error!r}")

    # Branch-safe access, never raises InvalidAccess
    size = result.match(len, lambda error, message: 0)

    # Or with pattern matching
    match fetch("https://example.org"):
        case Success(body):
            print(len(body))
        case Failure(error, message):
            print(message)

The ``payload``, ``error`` and ``message`` accessors raise
:class:`InvalidAccess` when read on the wrong variant.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Never, TypeGuard

from .errors import InvalidAccess, InvalidConstruction
from .messages import (
    DEFAULT_FAILURE_MESSAGE,
    ERROR_UNAVAILABLE,
    MESSAGE_NOT_TEXT,
    MESSAGE_UNAVAILABLE,
    MISSING_ERROR_FIELD,
    PAYLOAD_UNAVAILABLE,
)
from .sentinel import MISSING, Missing, is_absent

__all__ = ["Result", "Success", "Failure", "is_ok", "is_err"]


class Result[P, E](ABC):
    """Outcome of an operation: a ``Success`` or a ``Failure``.

    Build one with :meth:`construct` (or :meth:`from_dict`), or instantiate a
    variant directly. Instances are immutable.
    """

    __slots__ = ()

    @classmethod
    def construct(
        cls,
        *,
        payload: P | Missing = MISSING,
        error: E | Missing = MISSING,
        message: str | Missing = MISSING,
    ) -> Result[P, E]:
        """Build a Result from the fields that were supplied.

        Presence decides the variant, not truthiness: ``payload=None`` still
        yields a ``Success``. If both ``payload`` and ``error`` are given the
        payload wins.

        Args:
            payload: Success value.
            error: Error value for a failed outcome.
            message: Failure message, defaults to "No message has been provided".

        Returns:
            ``Success(payload)`` or ``Failure(error, message)``.

        Raises:
            InvalidConstruction: Neither ``payload`` nor ``error`` was supplied,
                or ``message`` is not a string.
        """
        if payload is not MISSING:
            return Success(payload)
        if error is MISSING:
            raise InvalidConstruction(MISSING_ERROR_FIELD)
        if message is MISSING:
            return Failure(error)
        return Failure(error, message)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Result[object, object]:
        """Build a Result from a mapping with "payload", "error" and "message" keys."""
        return Result.construct(
            payload=data.get("payload", MISSING),
            error=data.get("error", MISSING),
            message=data.get("message", MISSING),  # type: ignore[arg-type]
        )

    @abstractmethod
    def is_ok(self) -> bool: ...

    def is_err(self) -> bool:
        return not self.is_ok()

    @property
    @abstractmethod
    def payload(self) -> P: ...

    @property
    @abstractmethod
    def error(self) -> E: ...

    @property
    @abstractmethod
    def message(self) -> str: ...

    @abstractmethod
    def match[R](
        self,
        on_success: Callable[[P], R],
        on_failure: Callable[[E, str], R],
    ) -> R:
        """Dispatch on the variant and return the callback's result."""


@dataclass(frozen=True, slots=True)
class Success[P](Result[P, Never]):
    """Successful outcome.

    Attributes:
        value: The stored payload, exactly as given.
    """

    value: P

    def is_ok(self) -> bool:
        """Returns True."""
        return True

    @property
    def payload(self) -> P:
        """The success value.

        Raises:
            InvalidAccess: The stored payload is ``None`` or ``MISSING``.
        """
        if is_absent(self.value):
            raise InvalidAccess(PAYLOAD_UNAVAILABLE)
        return self.value

    @property
    def error(self) -> Never:
        raise InvalidAccess(ERROR_UNAVAILABLE)

    @property
    def message(self) -> Never:
        raise InvalidAccess(MESSAGE_UNAVAILABLE)

    def match[R](
        self,
        on_success: Callable[[P], R],
        on_failure: Callable[[Never, str], R],
    ) -> R:
        return on_success(self.value)

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@dataclass(frozen=True, slots=True)
class Failure[E](Result[Never, E]):
    """Failed outcome.

    Attributes:
        cause: The stored error value, exactly as given.
        text: The failure message.
    """

    cause: E
    text: str = DEFAULT_FAILURE_MESSAGE

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise InvalidConstruction(MESSAGE_NOT_TEXT)

    def is_ok(self) -> bool:
        """Returns False."""
        return False

    @property
    def payload(self) -> Never:
        raise InvalidAccess(PAYLOAD_UNAVAILABLE)

    @property
    def error(self) -> E:
        """The error value.

        Raises:
            InvalidAccess: The stored error is ``None`` or ``MISSING``.
        """
        if is_absent(self.cause):
            raise InvalidAccess(ERROR_UNAVAILABLE)
        return self.cause

    @property
    def message(self) -> str:
        return self.text

    def match[R](
        self,
        on_success: Callable[[Never], R],
        on_failure: Callable[[E, str], R],
    ) -> R:
        return on_failure(self.cause, self.text)

    def __repr__(self) -> str:
        return f"Failure({self.cause!r}, {self.text!r})"


def is_ok[P, E](result: Result[P, E]) -> TypeGuard[Success[P]]:
    """Type guard that checks if a Result is a Success.

    Example:
        if is_ok(result):
            # Type checker knows result is Success[P] here
            print(result.value)
    """
    return isinstance(result, Success)


def is_err[P, E](result: Result[P, E]) -> TypeGuard[Failure[E]]:
    """Type guard that checks if a Result is a Failure."""
    return isinstance(result, Failure)
