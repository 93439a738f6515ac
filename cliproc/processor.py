"""
Command processor.

Owns the root argparse parser, turns registered Command objects into
subcommands, and dispatches the parsed argument vector to the selected
command.
"""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Iterable, Sequence
from dataclasses import replace
from typing import Any

from .command import Command
from .config import ProcessorConfig
from .console import Console
from .constants import COMMAND_DEST, EXIT_FAILURE, EXIT_OK, EXIT_USAGE
from .context import InvocationContext, ParseResult
from .errors import CommandRegistrationError
from .log import Logger, LoggerFactory
from .parser import CommandParser, DefaultsHelpFormatter
from .registry import CommandRegistry

_KEYWORD_DEST = COMMAND_DEST + "_keyword"


def _exit_code(exc: SystemExit) -> int:
    """Map a SystemExit raised by argparse to an integer exit status."""
    if exc.code is None:
        return EXIT_OK
    if isinstance(exc.code, int):
        return exc.code
    return EXIT_FAILURE


def _credits(command: Command) -> str | None:
    parts = []
    if command.version:
        parts.append(f"version {command.version}")
    if command.author:
        parts.append(f"by {command.author}")
    return ", ".join(parts) or None


# Helpers copying a command's declarations into its parser entry. They run
# one after another on the same entry.


def _add_arguments(command: Command, entry: CommandParser) -> None:
    for argument in command.arguments:
        argument.add_to(entry)


def _add_options(command: Command, entry: CommandParser) -> None:
    for option in command.options:
        option.add_to(entry)
    declared = {flag for option in command.options for flag in option.flags}
    if command.version and "--version" not in declared:
        entry.add_argument(
            "--version",
            action="version",
            version=f"{command.keyword} {command.version}",
            help="show the command's version and exit",
        )


def _add_validators(command: Command, entry: CommandParser) -> None:
    for validator in command.validators:
        entry.add_validator(validator)


class CommandProcessor:
    """
    Registers commands and runs the one selected by the argument vector.

    Without an explicit lg, the root logger "/" is created from config on
    first use and cached by name, so later processors in the same process
    share it and its level. Pass lg to give a processor its own logger.

    Example:
        >>> processor = CommandProcessor(sys.argv[1:], "Bakery tools")
        >>> processor.register([Bake(), Slice()])
        >>> sys.exit(processor.execute())
    """

    def __init__(
        self,
        arguments: Sequence[str],
        description: str = "",
        config: ProcessorConfig | None = None,
        lg: Logger | None = None,
        console: Console | None = None,
    ):
        """
        Initialize the processor.

        Args:
            arguments: Argument vector without the program name, used verbatim
            description: Top-level description shown in help; overrides config
            config: Processor configuration
            lg: Root logger; created from config when omitted
            console: Console handed to commands; auto-detected when omitted
        """
        self.config = config or ProcessorConfig()
        self._arguments = list(arguments)
        self._registry = CommandRegistry()
        self._console = console or Console()
        self.lg = lg or LoggerFactory.create_root(self.config.log_config())

        formatter_class: type[argparse.HelpFormatter] = (
            DefaultsHelpFormatter
            if self.config.defaults_in_help
            else argparse.HelpFormatter
        )
        self._root = CommandParser(
            prog=self.config.prog,
            description=description or self.config.description,
            formatter_class=formatter_class,
        )
        if self.config.version:
            self._root.add_argument(
                "--version",
                action="version",
                version=f"%(prog)s {self.config.version}",
            )
        self._subparsers = self._root.add_subparsers(
            dest=_KEYWORD_DEST,
            title="commands",
            metavar="COMMAND",
            required=True,
        )

    @classmethod
    def from_argv(
        cls,
        argv: Sequence[str] | None = None,
        description: str = "",
        config: ProcessorConfig | None = None,
        **kwargs: Any,
    ) -> CommandProcessor:
        """
        Create a processor from a full argv (program name first).

        Defaults to sys.argv. The program name becomes prog unless config
        already sets one.
        """
        argv = list(sys.argv if argv is None else argv)
        config = config or ProcessorConfig()
        if config.prog is None and argv:
            config = replace(config, prog=os.path.basename(argv[0]))
        return cls(argv[1:], description, config=config, **kwargs)

    @property
    def arguments(self) -> list[str]:
        return list(self._arguments)

    @property
    def parser(self) -> CommandParser:
        """Root parser."""
        return self._root

    @property
    def registry(self) -> CommandRegistry:
        return self._registry

    @property
    def commands(self) -> list[Command]:
        """Registered commands in registration order."""
        return list(self._registry)

    @property
    def console(self) -> Console:
        return self._console

    def register(self, commands: Command | Iterable[Command]) -> CommandProcessor:
        """
        Register one command or each command of an iterable, in order.

        Raises:
            DupCommandError: If a keyword is registered twice
            CommandRegistrationError: If a name, alias or declaration is invalid
        """
        if isinstance(commands, Command):
            self._register_one(commands)
        else:
            for command in commands:
                self._register_one(command)
        return self

    def _register_one(self, command: Command) -> None:
        # Dry run on a scratch parser so conflicting declarations are caught
        # before the registry or the root parser change.
        self._build_entry(command, CommandParser(add_help=True))
        self._registry.register(command)

        entry = self._subparsers.add_parser(
            command.keyword,
            aliases=command.aliases,
            help=command.description,
            description=command.description,
            epilog=_credits(command),
            formatter_class=self._root.formatter_class,
            command_name=command.keyword,
        )
        self._build_entry(command, entry)
        entry.set_defaults(**{COMMAND_DEST: command})

        command.setup_lg(self.lg)
        self.lg.debug(
            "registered command",
            extra={
                "command": command.keyword,
                "aliases": ",".join(command.aliases) or "-",
                "arguments": len(command.arguments),
                "options": len(command.options),
                "validators": len(command.validators),
            },
        )

    def _build_entry(self, command: Command, entry: CommandParser) -> None:
        try:
            _add_arguments(command, entry)
            _add_options(command, entry)
        except (argparse.ArgumentError, ValueError, TypeError) as e:
            raise CommandRegistrationError(command.keyword, str(e)) from e
        _add_validators(command, entry)

    def execute(self) -> int:
        """
        Parse the stored arguments and run the selected command.

        Returns:
            int: 0 on success; argparse's status (2) for usage errors and
                failed validators; 0 for --help/--version; 1 if a validator or the
                command raised; otherwise the command's own exit code
        """
        try:
            namespace = self._root.parse_args(self._arguments)
        except SystemExit as e:
            code = _exit_code(e)
            self.lg.debug("argument parsing exited", extra={"code": code})
            return code
        except Exception as e:
            self.lg.error("argument parsing failed", exc_info=True)
            self._console.print_error(str(e))
            return EXIT_FAILURE

        command: Command | None = getattr(namespace, COMMAND_DEST, None)
        if command is None:
            self._root.print_usage(sys.stderr)
            return EXIT_USAGE

        parse_result = ParseResult(namespace, command.keyword, self._arguments)
        context = InvocationContext(parse_result, command, self._console)
        self.lg.trace(
            "dispatching",
            extra={"command": command.keyword, "values": parse_result.values()},
        )

        try:
            code = command.execute(context)
        except Exception as e:
            self.lg.error(
                "command failed", extra={"command": command.keyword}, exc_info=True
            )
            self._console.print_error(f"{command.keyword}: {e}")
            return EXIT_FAILURE

        self.lg.debug("command finished", extra={"command": command.keyword, "code": code})
        return code
