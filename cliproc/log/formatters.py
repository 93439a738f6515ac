"""
Log formatter producing "[time] [L] message [key:value] [logger]" lines.
"""

from __future__ import annotations

import logging

from .config import LogConfig
from .constants import LogConstants
from .logger import EXTRA_ATTR


class LogFormatter(logging.Formatter):
    """Formatter with bracketed extra fields and optional ANSI colors."""

    def __init__(self, config: LogConfig):
        super().__init__(LogConstants.DEFAULT_FORMAT)
        self._config = config

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = getattr(record, EXTRA_ATTR, None) or {}
        extra = "".join(f" [{key}:{value}]" for key, value in sorted(fields.items()))

        if not self._config.colors:
            return f"{line}{extra} [{record.name}]"

        color = LogConstants.LEVEL_COLORS.get(record.levelno, "")
        reset = LogConstants.RESET
        meta = LogConstants.META_COLOR
        # Traceback follows the first line; only the head is colored
        head, sep, tail = line.partition("\n")
        return f"{color}{head}{extra}{reset} {meta}[{record.name}]{reset}{sep}{tail}"
