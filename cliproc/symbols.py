"""
Declared command inputs.

An Argument or Option is declared once on a command and used twice: it is
forwarded to argparse when the command is registered, and later passed back
to Command.read_argument()/read_option() to look up the parsed value.
"""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any


# Actions that take no value and therefore reject type/choices/metavar
_VALUELESS_ACTIONS = frozenset(
    {"store_true", "store_false", "store_const", "append_const", "count"}
)


def _to_dest(name: str) -> str:
    return name.lstrip("-").replace("-", "_")


def _drop_none(kwargs: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in kwargs.items() if value is not None}


@dataclass(frozen=True)
class Argument:
    """
    Positional input declared by a command.

    An argument with a default and no explicit nargs becomes optional
    (nargs="?"), since argparse ignores defaults on required positionals.
    """

    name: str
    help: str = ""
    type: Callable[[str], Any] | None = None
    nargs: int | str | None = None
    default: Any = None
    choices: Sequence[Any] | None = None
    metavar: str | None = None

    def __post_init__(self) -> None:
        if not self.name or self.name.startswith("-"):
            raise ValueError(
                f"Argument name '{self.name}' must be non-empty and must not start with '-'"
            )

    @property
    def dest(self) -> str:
        """Namespace attribute holding the parsed value."""
        return _to_dest(self.name)

    def add_to(self, parser: argparse.ArgumentParser) -> argparse.Action:
        """Forward this declaration to the parser."""
        nargs = self.nargs
        if nargs is None and self.default is not None:
            nargs = "?"
        kwargs = _drop_none(
            {
                "help": self.help,
                "type": self.type,
                "nargs": nargs,
                "default": self.default,
                "choices": self.choices,
                "metavar": self.metavar,
            }
        )
        return parser.add_argument(self.dest, **kwargs)


@dataclass(frozen=True)
class Option:
    """
    Named input declared by a command.

    Set is_flag for a boolean switch; an unsupplied flag parses as False.
    """

    name: str
    aliases: tuple[str, ...] = ()
    help: str = ""
    type: Callable[[str], Any] | None = None
    default: Any = None
    required: bool = False
    is_flag: bool = False
    choices: Sequence[Any] | None = None
    metavar: str | None = None
    action: str | None = None

    def __post_init__(self) -> None:
        for flag in (self.name, *self.aliases):
            if not flag.startswith("-"):
                raise ValueError(f"Option name '{flag}' must start with '-'")

    @property
    def dest(self) -> str:
        """Namespace attribute holding the parsed value."""
        return _to_dest(self.name)

    @property
    def flags(self) -> list[str]:
        """Option strings in declaration order."""
        return [self.name, *self.aliases]

    def add_to(self, parser: argparse.ArgumentParser) -> argparse.Action:
        """Forward this declaration to the parser."""
        action = "store_true" if self.is_flag else self.action
        kwargs: dict[str, Any] = {
            "dest": self.dest,
            "help": self.help,
            "action": action,
            "default": self.default,
        }
        if action not in _VALUELESS_ACTIONS:
            kwargs |= {
                "type": self.type,
                "choices": self.choices,
                "metavar": self.metavar,
            }
        kwargs = _drop_none(kwargs)
        if self.required:
            kwargs["required"] = True
        return parser.add_argument(*self.flags, **kwargs)
