"""
Object-oriented command registration on top of argparse.

Define commands as classes, register them with a CommandProcessor, and let
argparse do the parsing, help and usage errors:

    class Greet(Command):
        who = Argument("name")
        loud = Option("--loud", is_flag=True)

        def _create_config(self):
            return CommandConfig(
                name="greet",
                description="Say hello",
                author="Jane Doe",
                version="1.0.0",
                arguments=[self.who],
                options=[self.loud],
            )

        def run(self):
            text = f"Hello, {self.read_argument(self.who)}"
            if self.read_option(self.loud):
                text = text.upper()
            self.context.console.print(text)

    processor = CommandProcessor(sys.argv[1:], "Greeting tools")
    processor.register(Greet())
    sys.exit(processor.execute())
"""

from .command import Command, CommandConfig
from .config import ProcessorConfig
from .console import Console
from .context import InvocationContext, ParseResult, Validator
from .errors import (
    CliprocError,
    CommandRegistrationError,
    ConfigurationError,
    ContextNotReadyError,
    DupCommandError,
    LifecycleError,
    MissingLoggerError,
    UndefNameError,
    ValueNotFoundError,
)
from .parser import CommandParser, DefaultsHelpFormatter
from .processor import CommandProcessor
from .registry import CommandRegistry
from .symbols import Argument, Option

__version__ = "0.1.0"

__all__ = [
    # Core API
    "Command",
    "CommandConfig",
    "CommandProcessor",
    "CommandRegistry",
    "CommandParser",
    "DefaultsHelpFormatter",
    "Argument",
    "Option",
    "Validator",
    "InvocationContext",
    "ParseResult",
    "Console",
    "ProcessorConfig",
    # Errors
    "CliprocError",
    "UndefNameError",
    "DupCommandError",
    "CommandRegistrationError",
    "LifecycleError",
    "ContextNotReadyError",
    "ValueNotFoundError",
    "MissingLoggerError",
    "ConfigurationError",
]
