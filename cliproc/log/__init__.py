"""
Logging for cliproc.

Extends Python's standard logging with:
- A custom TRACE level below DEBUG
- Bracketed extra fields: lg.info("msg", extra={"command": "greet"})
- Colored console output
- Slash-named "view" loggers ("/", "/greet") sharing the root's handlers
- Complete disabling with level=False or level="false"
"""

import logging

from .config import LogConfig, resolve_level
from .constants import LogConstants
from .exceptions import InvalidLogLevelError, LogError
from .factory import LoggerFactory
from .formatters import LogFormatter
from .logger import Logger

logging.TRACE = LogConstants.CUSTOM_LEVELS["TRACE"]  # type: ignore[attr-defined]
logging.addLevelName(logging.TRACE, "TRACE")  # type: ignore[attr-defined]


def create_root_lg(level: str | int | bool = "warning", colors: bool = True) -> Logger:
    """
    Create the root logger.

    Convenience wrapper around LoggerFactory.create_root().

    Example:
        >>> lg = create_root_lg("debug")
    """
    return LoggerFactory.create_root(LogConfig.from_params(level, colors))


def derive_lg(lg: Logger, tags: str | list[str]) -> Logger:
    """Derive a view logger from lg. See LoggerFactory.derive()."""
    return LoggerFactory.derive(lg, tags)


__all__ = [
    "InvalidLogLevelError",
    "LogConfig",
    "LogConstants",
    "LogError",
    "LogFormatter",
    "Logger",
    "LoggerFactory",
    "create_root_lg",
    "derive_lg",
    "resolve_level",
]
