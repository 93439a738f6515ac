"""
Command registration bookkeeping.

The registry validates keywords and aliases before the processor touches the
parser, so a rejected registration leaves the dispatcher unchanged.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from .constants import (
    COMMAND_NAME_PATTERN,
    MAX_ALIAS_COUNT,
    MAX_COMMAND_COUNT,
    MAX_COMMAND_NAME_LENGTH,
)
from .errors import CommandRegistrationError, DupCommandError

if TYPE_CHECKING:
    from .command import Command

# Helper functions for CommandRegistry.register()


def _validate_keyword(keyword: str) -> None:
    """Validate command keyword format."""
    if not keyword:
        raise CommandRegistrationError("", "Command must have a name")

    if len(keyword) > MAX_COMMAND_NAME_LENGTH:
        raise CommandRegistrationError(
            keyword,
            f"Command name exceeds maximum length of {MAX_COMMAND_NAME_LENGTH} characters",
        )

    if not re.match(COMMAND_NAME_PATTERN, keyword):
        raise CommandRegistrationError(
            keyword,
            "Command name must start with a letter and contain only letters, "
            "numbers, underscores, and hyphens (e.g., 'my-command', 'cmd_1')",
        )


def _check_command_count_limit(commands: dict, keyword: str) -> None:
    """Check maximum command count limit."""
    if len(commands) >= MAX_COMMAND_COUNT:
        raise CommandRegistrationError(
            keyword,
            f"Cannot register command: maximum command count ({MAX_COMMAND_COUNT}) exceeded",
        )


def _validate_aliases(
    keyword: str, aliases: list[str], commands: dict, aliases_dict: dict
) -> None:
    """Validate aliases against the format and every registered name."""
    if len(aliases) > MAX_ALIAS_COUNT:
        raise CommandRegistrationError(
            keyword,
            f"Command has {len(aliases)} aliases, exceeding maximum of {MAX_ALIAS_COUNT}",
        )

    seen: set[str] = set()
    for alias in aliases:
        if not re.match(COMMAND_NAME_PATTERN, alias):
            raise CommandRegistrationError(
                keyword,
                f"Alias '{alias}' must start with a lowercase letter and contain "
                f"only lowercase letters, numbers, underscores, and hyphens",
            )
        if alias == keyword or alias in seen:
            raise CommandRegistrationError(keyword, f"Alias '{alias}' is repeated")
        if alias in commands:
            raise CommandRegistrationError(
                keyword, f"Alias '{alias}' clashes with command '{alias}'"
            )
        if alias in aliases_dict:
            raise CommandRegistrationError(
                keyword,
                f"Alias '{alias}' already registered for command '{aliases_dict[alias]}'",
            )
        seen.add(alias)


class CommandRegistry:
    """Registered commands by keyword and alias, in registration order."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}
        self._aliases: dict[str, str] = {}

    def register(self, command: Command) -> None:
        """
        Register a command and its aliases.

        Validation happens before anything is stored; on error the registry
        is unchanged.

        Raises:
            CommandRegistrationError: If keyword or alias is invalid, clashes,
                or resource limits are exceeded
            DupCommandError: If the keyword is already registered
        """
        keyword = command.keyword
        _check_command_count_limit(self._commands, keyword)
        _validate_keyword(keyword)

        if keyword in self._commands:
            raise DupCommandError(command)
        if keyword in self._aliases:
            raise CommandRegistrationError(
                keyword,
                f"Name is already an alias of command '{self._aliases[keyword]}'",
            )

        _validate_aliases(keyword, command.aliases, self._commands, self._aliases)

        self._commands[keyword] = command
        for alias in command.aliases:
            self._aliases[alias] = keyword

    def get_command(self, name: str) -> Command | None:
        """Get command by keyword or alias."""
        if name in self._commands:
            return self._commands[name]
        if name in self._aliases:
            return self._commands[self._aliases[name]]
        return None

    def list_commands(self) -> list[str]:
        """List registered keywords in registration order."""
        return list(self._commands.keys())

    def list_aliases(self) -> dict[str, str]:
        """Map of alias to keyword."""
        return self._aliases.copy()

    def is_registered(self, name: str) -> bool:
        """Check if a keyword or alias is registered."""
        return name in self._commands or name in self._aliases

    def clear(self) -> None:
        self._commands.clear()
        self._aliases.clear()

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self):
        return iter(self._commands.values())
