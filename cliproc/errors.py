"""
Error classes for the cliproc package.

Parse and usage errors (unknown commands, bad values, failed validators) are
reported by argparse itself. The exceptions here cover programmer mistakes in
command definitions and registration.
"""

from typing import Any


class CliprocError(Exception):
    """Base exception for cliproc package."""

    pass


class UndefNameError(CliprocError):
    """Raised when a command does not define its configuration."""

    def __init__(self, cls: Any | None = None) -> None:
        self.cls = cls
        if cls:
            super().__init__(
                f"Command class {cls.__name__} must override _create_config() "
                "or be constructed with a CommandConfig"
            )
        else:
            super().__init__("Command name is not defined")


class DupCommandError(CliprocError):
    """Raised when attempting to register a command keyword twice."""

    def __init__(self, command: Any) -> None:
        self.command = command
        super().__init__(f"Command '{command.keyword}' is already registered")


class CommandRegistrationError(CliprocError):
    """Raised when command registration fails validation."""

    def __init__(self, command_name: str, reason: str):
        self.command_name = command_name
        self.reason = reason
        super().__init__(f"Failed to register command '{command_name}': {reason}")


class LifecycleError(CliprocError):
    """Raised when a command is used out of order."""

    def __init__(self, message: str):
        super().__init__(f"Lifecycle error: {message}")


class ContextNotReadyError(LifecycleError):
    """Raised when the invocation context is read before the command is executed."""

    def __init__(self, command_name: str):
        self.command_name = command_name
        super().__init__(
            f"Command '{command_name}' context can only be accessed after the "
            "command is initialized by having its execute() method called by "
            "the CommandProcessor"
        )


class ValueNotFoundError(CliprocError, LookupError):
    """Raised when a declared argument or option has no parsed value."""

    def __init__(self, kind: str, name: str):
        self.kind = kind
        self.name = name
        super().__init__(f"The {kind} '{name}' could not be found")


class MissingLoggerError(CliprocError):
    """Raised when a command logger is accessed before registration."""

    def __init__(self, message: str):
        super().__init__(f"Missing logger error: {message}")


class ConfigurationError(CliprocError):
    """Raised when processor configuration is invalid."""

    def __init__(self, message: str):
        super().__init__(f"Configuration error: {message}")
