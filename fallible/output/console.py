"""Console output for wrapper reports.

Reports are written through ``ConsoleProtocol`` so callers can render to a
terminal with Rich, or capture lines in tests with ``MockConsole``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

__all__ = [
    "Style",
    "ConsoleProtocol",
    "RichConsole",
    "MockConsole",
    "OutputRecord",
]


class Style(Enum):
    """Line styles used by reports."""

    DEFAULT = auto()
    SUCCESS = auto()  # ok Result
    ERROR = auto()  # failed Result, contract violation
    DIM = auto()  # secondary detail (cause, absent Option)

    def __str__(self) -> str:
        return self.name.lower()


class ConsoleProtocol(Protocol):
    """Sink for styled report lines."""

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        """Print a line with optional styling."""
        ...

    def success(self, message: str) -> None:
        """Print a line prefixed with ``OK``."""
        ...

    def error(self, message: str) -> None:
        """Print a line prefixed with ``error:``."""
        ...


class RichConsole:
    """Console backed by ``rich.console.Console``."""

    def __init__(self, *, stderr: bool = False) -> None:
        # Import Rich lazily so the core types never pull it in
        from rich.console import Console
        from rich.text import Text

        self._text = Text
        self._console = Console(stderr=stderr, highlight=False)
        self._style_map = {
            Style.DEFAULT: "",
            Style.SUCCESS: "green",
            Style.ERROR: "red bold",
            Style.DIM: "dim",
        }

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        rich_style = self._style_map.get(style, "")
        if rich_style:
            self._console.print(message, style=rich_style, markup=False)
        else:
            self._console.print(message, markup=False)

    def success(self, message: str) -> None:
        self._console.print(self._text.assemble(("OK", "green"), " ", message))

    def error(self, message: str) -> None:
        self._console.print(self._text.assemble(("error:", "red bold"), " ", message))


@dataclass(frozen=True, slots=True)
class OutputRecord:
    """A single line captured by MockConsole."""

    message: str
    style: Style


def _empty_outputs() -> list[OutputRecord]:
    return []


@dataclass
class MockConsole:
    """Console that records lines instead of printing them."""

    outputs: list[OutputRecord] = field(default_factory=_empty_outputs)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(OutputRecord(message, style))

    def success(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"OK {message}", Style.SUCCESS))

    def error(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"error: {message}", Style.ERROR))

    # Test helpers

    @property
    def messages(self) -> list[str]:
        return [o.message for o in self.outputs]

    @property
    def text(self) -> str:
        return "\n".join(self.messages)

    def has_error(self) -> bool:
        return any(o.style == Style.ERROR for o in self.outputs)

    def count(self, style: Style) -> int:
        return sum(1 for o in self.outputs if o.style == style)
