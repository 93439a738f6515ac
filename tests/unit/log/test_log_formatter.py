"""
Tests for cliproc/log/formatters.py.
"""

import logging
import sys

import pytest

from cliproc.log import LogConfig, LogConstants, LogFormatter
from cliproc.log.logger import EXTRA_ATTR


def _record(level=logging.INFO, msg="hello", extra=None, exc_info=None):
    record = logging.LogRecord("/greet", level, __file__, 1, msg, None, exc_info)
    if extra is not None:
        setattr(record, EXTRA_ATTR, extra)
    return record


@pytest.mark.unit
class TestLogFormatter:
    """Test LogFormatter output."""

    def test_plain_line(self):
        formatter = LogFormatter(LogConfig(colors=False))

        line = formatter.format(_record())

        assert line.endswith("] [I] hello [/greet]")

    def test_extra_sorted(self):
        formatter = LogFormatter(LogConfig(colors=False))

        line = formatter.format(_record(extra={"b": 2, "a": 1}))

        assert line.endswith("hello [a:1] [b:2] [/greet]")

    def test_colored_line(self):
        formatter = LogFormatter(LogConfig(colors=True))

        line = formatter.format(_record(level=logging.ERROR))

        assert line.startswith(LogConstants.LEVEL_COLORS[logging.ERROR])
        assert f"{LogConstants.META_COLOR}[/greet]{LogConstants.RESET}" in line

    def test_traceback_after_first_line(self):
        formatter = LogFormatter(LogConfig(colors=True))
        try:
            raise ValueError("bad")
        except ValueError:
            record = _record(level=logging.ERROR, exc_info=sys.exc_info())

        line = formatter.format(record)

        head, _, tail = line.partition("\n")
        assert head.endswith(f"[/greet]{LogConstants.RESET}")
        assert "ValueError: bad" in tail
