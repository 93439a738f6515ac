"""
Logger class for the logging system.

Extends the standard Python logger with a TRACE level, pre-populated extra
fields, and "view" loggers that share the root logger's handlers.
"""

from __future__ import annotations

import logging
from typing import Any

from .config import LogConfig
from .constants import LogConstants

EXTRA_ATTR = "cliproc_extra"


class Logger(logging.Logger):
    """Enhanced logger with extra-field records and a trace() method."""

    def __init__(
        self,
        name: str,
        config: LogConfig | None = None,
        extra: dict[str, Any] | None = None,
    ):
        """
        Initialize the logger.

        Args:
            name: Logger name
            config: Logger configuration; a default LogConfig if None
            extra: Pre-populated extra fields to include in all log records
        """
        config = config or LogConfig()
        if config.level is False:
            super().__init__(name, logging.CRITICAL + 1)
            self._logging_disabled = True
        else:
            super().__init__(name, config.level)
            self._logging_disabled = False

        self._config = config
        self._extra = dict(extra or {})
        self._root_logger: Logger | None = None  # Set for derived "view" loggers

    @property
    def config(self) -> LogConfig:
        return self._config

    @property
    def disabled(self) -> bool:  # type: ignore[override]
        return self._logging_disabled

    @disabled.setter
    def disabled(self, value: bool) -> None:
        self._logging_disabled = value

    def get_level(self) -> int:
        """Effective numeric level, walking up to the view root when NOTSET."""
        if self.level == logging.NOTSET and self._root_logger is not None:
            return self._root_logger.get_level()
        return self.level

    def isEnabledFor(self, level: int) -> bool:
        if self._logging_disabled:
            return False
        if self._root_logger is not None and self._root_logger.disabled:
            return False
        return level >= self.get_level()

    def makeRecord(  # type: ignore[override]
        self,
        name: str,
        level: int,
        fn: str,
        lno: int,
        msg: object,
        args: Any,
        exc_info: Any,
        func: str | None = None,
        extra: dict[str, Any] | None = None,
        sinfo: str | None = None,
    ) -> logging.LogRecord:
        record = super().makeRecord(
            name, level, fn, lno, msg, args, exc_info, func, None, sinfo
        )
        fields = {**self._extra, **(extra or {})}
        setattr(record, EXTRA_ATTR, fields)
        return record

    def trace(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log at TRACE level, below DEBUG."""
        trace_level = LogConstants.CUSTOM_LEVELS["TRACE"]
        if self.isEnabledFor(trace_level):
            self._log(trace_level, msg, args, **kwargs)

    def callHandlers(self, record: logging.LogRecord) -> None:
        """Route records of view loggers to the root logger's handlers."""
        if self._root_logger is not None:
            self._root_logger.callHandlers(record)
            return
        super().callHandlers(record)
