"""
Parse context handed to a command when it is invoked.
"""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .console import Console
from .constants import COMMAND_DEST, EXIT_OK
from .symbols import Argument, Option

if TYPE_CHECKING:
    from .command import Command


class ParseResult:
    """Read-only view of the argparse namespace for the selected command."""

    def __init__(
        self,
        namespace: argparse.Namespace,
        command_name: str | None = None,
        tokens: Sequence[str] = (),
    ):
        self._namespace = namespace
        self.command_name = command_name
        self.tokens = list(tokens)

    @property
    def namespace(self) -> argparse.Namespace:
        return self._namespace

    def get_value_for_argument(self, argument: Argument) -> Any:
        """Return the parsed value of argument, or None if absent."""
        return getattr(self._namespace, argument.dest, None)

    def get_value_for_option(self, option: Option) -> Any:
        """Return the parsed value of option, or None if absent."""
        return getattr(self._namespace, option.dest, None)

    def get_value(self, symbol: Argument | Option) -> Any:
        if isinstance(symbol, Argument):
            return self.get_value_for_argument(symbol)
        return self.get_value_for_option(symbol)

    def values(self) -> dict[str, Any]:
        """Parsed values keyed by dest, without internal routing keys."""
        return {
            key: value
            for key, value in vars(self._namespace).items()
            if not key.startswith(COMMAND_DEST)
        }

    def __repr__(self) -> str:
        return f"ParseResult(command={self.command_name!r}, values={self.values()!r})"


# A validator inspects the parse result of one command and returns an error
# message, or None when the input is acceptable.
Validator = Callable[[ParseResult], str | None]


@dataclass
class InvocationContext:
    """
    Everything a command sees during one invocation.

    exit_code may be set by the command; it is returned by execute() unless
    run() returns an explicit integer.
    """

    parse_result: ParseResult
    command: Command | None = None
    console: Console = field(default_factory=Console)
    exit_code: int = EXIT_OK
