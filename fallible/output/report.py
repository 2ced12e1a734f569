"""Report rendering for wrapper values."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fallible.core.errors import ContractError
from fallible.core.option import Nothing, Option, Some
from fallible.core.result import Failure, Result, Success
from fallible.output.console import Style

if TYPE_CHECKING:
    from fallible.output.console import ConsoleProtocol

__all__ = ["print_result", "print_option", "print_contract_error"]


def print_result(result: Result[object, object], console: ConsoleProtocol) -> None:
    """Print a Result: the payload when ok, the message and cause otherwise."""
    match result:
        case Success(value):
            console.success(repr(value))
        case Failure(cause, text):
            console.error(text)
            console.print(f"cause: {cause!r}", Style.DIM)


def print_option(option: Option[object], console: ConsoleProtocol) -> None:
    match option:
        case Some(value):
            console.print(f"some: {value!r}")
        case Nothing():
            console.print("none", Style.DIM)


def print_contract_error(error: ContractError, console: ConsoleProtocol) -> None:
    """Print a contract violation and its kind."""
    console.error(error.message)
    console.print(f"kind: {error.code}", Style.DIM)
