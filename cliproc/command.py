"""
Base command class.

A command describes itself (name, description, author, version), declares
its inputs, and implements run(). CommandProcessor forwards the declarations
to argparse and calls execute() when the command is selected.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .errors import (
    ContextNotReadyError,
    LifecycleError,
    MissingLoggerError,
    UndefNameError,
    ValueNotFoundError,
)
from .symbols import Argument, Option

if TYPE_CHECKING:
    from .context import InvocationContext, Validator
    from .log import Logger


@dataclass
class CommandConfig:
    """Identity and declared inputs of a command."""

    name: str
    description: str = ""
    author: str = ""
    version: str = ""
    arguments: list[Argument] = field(default_factory=list)
    options: list[Option] = field(default_factory=list)
    validators: list[Validator] = field(default_factory=list)
    aliases: list[str] = field(default_factory=list)


class Command(ABC):
    """
    Base class for commands registered with a CommandProcessor.

    Subclasses either override _create_config() or are constructed with a
    CommandConfig, and implement run(). Declared inputs are read back inside
    run() with read_argument()/read_option().

    Example:
        >>> class Greet(Command):
        ...     who = Argument("name", help="Who to greet")
        ...     loud = Option("--loud", is_flag=True)
        ...
        ...     def _create_config(self):
        ...         return CommandConfig(
        ...             name="greet",
        ...             description="Say hello",
        ...             author="Jane Doe",
        ...             version="1.0.0",
        ...             arguments=[self.who],
        ...             options=[self.loud],
        ...         )
        ...
        ...     def run(self):
        ...         text = f"Hello, {self.read_argument(self.who)}"
        ...         if self.read_option(self.loud):
        ...             text = text.upper()
        ...         self.context.console.print(text)
    """

    def __init__(self, config: CommandConfig | None = None):
        """
        Initialize the command.

        Args:
            config: Command configuration; _create_config() is used when omitted
        """
        self.config = config or self._create_config()
        self._context: InvocationContext | None = None
        self._logger: Logger | None = None

    def _create_config(self) -> CommandConfig:
        """Create default configuration. Override in subclasses."""
        raise UndefNameError(cls=self.__class__)

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def keyword(self) -> str:
        """Command line keyword: the lowercased name."""
        return self.config.name.lower()

    @property
    def description(self) -> str:
        return self.config.description

    @property
    def author(self) -> str:
        return self.config.author

    @property
    def version(self) -> str:
        return self.config.version

    @property
    def arguments(self) -> list[Argument]:
        return list(self.config.arguments)

    @property
    def options(self) -> list[Option]:
        return list(self.config.options)

    @property
    def validators(self) -> list[Validator]:
        return list(self.config.validators)

    @property
    def aliases(self) -> list[str]:
        return list(self.config.aliases)

    @property
    def invoked(self) -> bool:
        """True once execute() has supplied the invocation context."""
        return self._context is not None

    @property
    def context(self) -> InvocationContext:
        """
        Get the invocation context passed to execute().

        Raises:
            ContextNotReadyError: If the command has not been executed yet
        """
        if self._context is None:
            raise ContextNotReadyError(self.name)
        return self._context

    @property
    def lg(self) -> Logger:
        """
        Get the command logger.

        Raises:
            MissingLoggerError: If accessed before the command is registered
        """
        if self._logger is None:
            raise MissingLoggerError(
                f"Logger not initialized for command '{self.name}'. "
                "Register the command with a CommandProcessor first."
            )
        return self._logger

    def setup_lg(self, parent: Logger) -> None:
        """Derive this command's logger from the processor logger."""
        from .log import LoggerFactory

        self._logger = LoggerFactory.derive(parent, self.keyword)

    def execute(self, context: InvocationContext) -> int:
        """
        Store the context and run the command.

        Returns:
            int: run()'s integer result, otherwise context.exit_code

        Raises:
            LifecycleError: If the command was already executed
        """
        if self._context is not None:
            raise LifecycleError(f"Command '{self.name}' has already been executed")
        self._context = context
        result = self.run()
        if isinstance(result, int) and not isinstance(result, bool):
            return result
        return context.exit_code

    @abstractmethod
    def run(self) -> int | None:
        """Command body, called by execute() once the context is set."""

    def read_argument(self, argument: Argument) -> Any:
        """
        Get the parsed value of a declared argument.

        Raises:
            ContextNotReadyError: If called before execute()
            ValueNotFoundError: If the argument has no parsed value
        """
        value = self.context.parse_result.get_value_for_argument(argument)
        if value is None:
            raise ValueNotFoundError("argument", argument.name)
        return value

    def read_option(self, option: Option) -> Any:
        """
        Get the parsed value of a declared option.

        Raises:
            ContextNotReadyError: If called before execute()
            ValueNotFoundError: If the option has no parsed value
        """
        value = self.context.parse_result.get_value_for_option(option)
        if value is None:
            raise ValueNotFoundError("option", option.name)
        return value

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, version={self.version!r})"
