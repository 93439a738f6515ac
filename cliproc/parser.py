"""
argparse adapter used as the dispatcher.

CommandParser is a plain ArgumentParser plus per-parser validators. Subparsers
created through add_subparsers() inherit the class, so every registered
command gets its own validator list.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Any

from .context import ParseResult, Validator


class DefaultsHelpFormatter(argparse.HelpFormatter):
    """
    Help formatter that appends default values to help text.

    Defaults that are suppressed, None or False (unset flags) are not shown.
    """

    def _get_help_string(self, action: argparse.Action) -> str:
        help_text = action.help or ""
        if action.default is argparse.SUPPRESS or action.default is None:
            return help_text
        if action.default is False:
            return help_text
        # argparse %-formats help strings; let it substitute the default
        return help_text + " (default: %(default)s)"


class CommandParser(argparse.ArgumentParser):
    """ArgumentParser that runs validators once parsing succeeds."""

    def __init__(self, *args: Any, command_name: str | None = None, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.command_name = command_name
        self._validators: list[Validator] = []

    @property
    def validators(self) -> list[Validator]:
        return list(self._validators)

    def add_validator(self, validator: Validator) -> None:
        """Add a rule evaluated against this parser's parse result."""
        self._validators.append(validator)

    def parse_known_args(  # type: ignore[override]
        self,
        args: Sequence[str] | None = None,
        namespace: argparse.Namespace | None = None,
    ) -> tuple[argparse.Namespace, list[str]]:
        namespace, extras = super().parse_known_args(args, namespace)
        self.validate(namespace, args or ())
        return namespace, extras

    def validate(self, namespace: argparse.Namespace, tokens: Sequence[str] = ()) -> None:
        """
        Run validators in order; the first error goes through self.error().

        self.error() prints usage and exits with status 2, the same path as
        any other argparse usage error.
        """
        if not self._validators:
            return
        result = ParseResult(namespace, self.command_name, tokens)
        for validator in self._validators:
            message = validator(result)
            if message:
                self.error(message)
