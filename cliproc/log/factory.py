"""
Factory for creating root loggers and derived "view" loggers.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Any, cast

from .config import LogConfig
from .formatters import LogFormatter
from .logger import Logger


class LoggerFactory:
    """Factory for creating and configuring loggers."""

    @staticmethod
    def create_root(config: LogConfig, stream: IO[str] | None = None) -> Logger:
        """
        Create the root logger ("/") with the specified configuration.

        Example:
            >>> config = LogConfig.from_params(level="debug")
            >>> lg = LoggerFactory.create_root(config)
            >>> lg.debug("registered command", extra={"command": "greet"})
            [12:34:56,789] [D] registered command [command:greet] [/]
        """
        return LoggerFactory.create("/", config, stream=stream)

    @staticmethod
    def create(
        name: str,
        config: LogConfig,
        stream: IO[str] | None = None,
        extra: dict[str, Any] | None = None,
        register: bool = True,
    ) -> Logger:
        """
        Create a logger with its own stderr handler.

        A registered logger is cached by name: an existing logger of the same
        name is returned as is. With register=False a detached logger is
        returned that is neither looked up nor cached.
        """
        if register:
            existing = LoggerFactory._check_existing_logger(name)
            if existing is not None:
                return existing

        lg = Logger(name, config, extra)
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(LogFormatter(config))
        lg.addHandler(handler)
        lg.propagate = False
        lg.parent = logging.root
        if register:
            logging.root.manager.loggerDict[name] = lg
        return lg

    @staticmethod
    def derive(parent: Logger, tags: str | list[str]) -> Logger:
        """
        Derive a "view" logger that delegates to the root's handlers.

        Examples:
            >>> derived = LoggerFactory.derive(root, "greet")
            >>> derived.name
            '/greet'
            >>> LoggerFactory.derive(root, ["greet", "io"]).name
            '/greet/io'
        """
        if isinstance(tags, str):
            tags = [tags]

        prefix = parent.name if parent.name == "/" else parent.name + "/"
        name = prefix + "/".join(tags)

        # A cached view is reused only for the same parent; otherwise it is
        # replaced so records reach the current root's handlers
        existing = LoggerFactory._check_existing_logger(name)
        if existing is not None and existing.parent is parent:
            return existing

        root = parent._root_logger or parent
        lg = Logger(name, parent.config)
        lg.setLevel(logging.NOTSET)
        lg._root_logger = root
        lg.parent = parent
        lg.propagate = False
        logging.root.manager.loggerDict[name] = lg
        return lg

    @staticmethod
    def _check_existing_logger(name: str) -> Logger | None:
        existing = logging.root.manager.loggerDict.get(name)
        if isinstance(existing, Logger):
            return cast(Logger, existing)
        return None
