"""Option type for values that may be absent.

``Option.of(value)`` keeps ``None`` (and ``MISSING``) out of application
code: a present value becomes ``Some(value)``, an absent one becomes
``Nothing``, which remembers which sentinel it was built from.

Usage:
    name = Option.of(headers.get("x-user"))

    print(name.payload if name.is_some() else "anonymous")
    print(name.unwrap())  # the value, or None

    match name:
        case Some(user):
            greet(user)
        case Nothing():
            pass
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Never, TypeGuard

from .errors import InvalidAccess, InvalidConstruction
from .messages import NOTHING_REQUIRES_SENTINEL, OPTION_PAYLOAD_UNAVAILABLE, SOME_REQUIRES_VALUE
from .sentinel import Absent, is_absent

__all__ = ["Option", "Some", "Nothing", "is_some", "is_none"]


class Option[P](ABC):
    """A value that is either present (``Some``) or absent (``Nothing``)."""

    __slots__ = ()

    @classmethod
    def of(cls, value: P | Absent) -> Option[P]:
        """Wrap a possibly-absent value. Never raises."""
        if is_absent(value):
            return Nothing(value)  # type: ignore[arg-type]
        return Some(value)  # type: ignore[arg-type]

    @abstractmethod
    def is_some(self) -> bool: ...

    def is_none(self) -> bool:
        return not self.is_some()

    @property
    @abstractmethod
    def payload(self) -> P: ...

    @abstractmethod
    def unwrap(self) -> P | Absent: ...

    @abstractmethod
    def match[R](self, on_some: Callable[[P], R], on_none: Callable[[], R]) -> R:
        """Dispatch on the variant and return the callback's result."""


@dataclass(frozen=True, slots=True)
class Some[P](Option[P]):
    """A present value."""

    value: P

    def __post_init__(self) -> None:
        if is_absent(self.value):
            raise InvalidConstruction(SOME_REQUIRES_VALUE)

    def is_some(self) -> bool:
        return True

    @property
    def payload(self) -> P:
        return self.value

    def unwrap(self) -> P:
        return self.value

    def match[R](self, on_some: Callable[[P], R], on_none: Callable[[], R]) -> R:
        return on_some(self.value)

    def __repr__(self) -> str:
        return f"Some({self.value!r})"


@dataclass(frozen=True, slots=True)
class Nothing(Option[Never]):
    """An absent value.

    Attributes:
        sentinel: The marker the Option was built from (``None`` or ``MISSING``),
            handed back by :meth:`unwrap`.
    """

    __match_args__ = ()

    sentinel: Absent = None

    def __post_init__(self) -> None:
        if not is_absent(self.sentinel):
            raise InvalidConstruction(NOTHING_REQUIRES_SENTINEL)

    def is_some(self) -> bool:
        return False

    @property
    def payload(self) -> Never:
        raise InvalidAccess(OPTION_PAYLOAD_UNAVAILABLE)

    def unwrap(self) -> Absent:
        return self.sentinel

    def match[R](self, on_some: Callable[[Never], R], on_none: Callable[[], R]) -> R:
        return on_none()

    def __repr__(self) -> str:
        if self.sentinel is None:
            return "Nothing()"
        return f"Nothing({self.sentinel!r})"


def is_some[P](option: Option[P]) -> TypeGuard[Some[P]]:
    """Type guard that checks if an Option is Some."""
    return isinstance(option, Some)


def is_none[P](option: Option[P]) -> TypeGuard[Nothing]:
    """Type guard that checks if an Option is Nothing."""
    return isinstance(option, Nothing)
