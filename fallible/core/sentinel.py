"""Absent-value markers.

Two values count as "no value": ``None`` (null-like) and ``MISSING``
(undefined-like). ``MISSING`` doubles as the default for keyword arguments
whose *presence* matters, so ``payload=None`` can be told apart from no
payload at all.
"""

from __future__ import annotations

from enum import Enum
from typing import Final, Literal

__all__ = ["Missing", "MISSING", "Absent", "is_absent", "is_present"]


class Missing(Enum):
    """Singleton type for the undefined-like marker."""

    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = Missing.MISSING

type Absent = None | Literal[Missing.MISSING]


def is_absent(value: object) -> bool:
    """Return True if value is ``None`` or ``MISSING``.

    Identity checks only: ``0``, ``""``, ``False`` and empty containers are
    present values.
    """
    return value is None or value is MISSING


def is_present(value: object) -> bool:
    """Return True if value is not absent-equivalent."""
    return not is_absent(value)
