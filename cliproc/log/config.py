"""
Configuration for the logging system.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .constants import LogConstants
from .exceptions import InvalidLogLevelError


def resolve_level(level: str | int | bool) -> int | bool:
    """
    Resolve log level from string, numeric value, or boolean.

    Args:
        level: Log level as string name, numeric value, or False to disable logging

    Returns:
        Numeric log level, or False to disable logging

    Raises:
        InvalidLogLevelError: If the log level is invalid
    """
    if isinstance(level, bool):
        return False if not level else logging.INFO
    if isinstance(level, int):
        return level
    if level.isnumeric():
        return int(level)
    if level.lower() in LogConstants.LEVEL_NAMES:
        return LogConstants.LEVEL_NAMES[level.lower()]
    raise InvalidLogLevelError(level)


@dataclass(frozen=True)
class LogConfig:
    """Immutable configuration for root loggers."""

    level: int | bool = logging.WARNING  # False disables logging
    colors: bool = True

    @classmethod
    def from_params(cls, level: str | int | bool, colors: bool = True) -> LogConfig:
        """
        Create LogConfig from individual parameters.

        Args:
            level: Log level (string name, numeric value, or False to disable logging)
            colors: Whether to enable colored output

        Returns:
            LogConfig instance
        """
        return cls(level=resolve_level(level), colors=colors)

    @classmethod
    def from_config(cls, config_dict: dict[str, Any], section: str = "logging") -> LogConfig:
        """
        Create LogConfig from a configuration dictionary.

        Args:
            config_dict: Configuration dictionary, e.g. loaded from YAML
            section: Dotted path to the logging section (default: "logging")
        """
        current: Any = config_dict
        for part in section.split("."):
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                current = {}
                break

        level = current.get("level", "warning")
        colors = current.get("colors", True)
        if isinstance(colors, dict):
            colors = colors.get("enabled", True)
        return cls.from_params(level=level, colors=colors)
