"""
Pytest configuration and shared fixtures.

This module provides central pytest configuration, custom markers,
and shared fixtures for the cliproc test suite.
"""

import logging
from collections.abc import Callable, Generator
from io import StringIO

import pytest

from cliproc import Command, CommandProcessor, Console, ProcessorConfig

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, isolated, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests (full system integration)"
    )


def pytest_collection_modifyitems(config, items):
    """Add 'unit' marker to tests without other markers."""
    for item in items:
        if not any(mark.name == "e2e" for mark in item.iter_markers()):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Logging State
# =============================================================================


def _drop_cliproc_loggers() -> None:
    for name in list(logging.root.manager.loggerDict.keys()):
        if name.startswith("/"):
            del logging.root.manager.loggerDict[name]


@pytest.fixture(autouse=True)
def reset_logging_state() -> Generator[None, None, None]:
    """
    Reset cliproc loggers before and after each test.

    Loggers are cached by name ("/", "/greet"), so a logger created by one
    test would otherwise keep that test's stream and level.
    """
    _drop_cliproc_loggers()
    yield
    _drop_cliproc_loggers()


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture
def console_streams() -> tuple[StringIO, StringIO]:
    """Provide (stdout, stderr) buffers for a test console."""
    return StringIO(), StringIO()


@pytest.fixture
def console(console_streams: tuple[StringIO, StringIO]) -> Console:
    """Provide a colorless console writing to in-memory buffers."""
    out, err = console_streams
    return Console(file=out, stderr_file=err, no_color=True)


@pytest.fixture
def make_processor(console: Console) -> Callable[..., CommandProcessor]:
    """
    Provide a factory building a processor with the test console.

    Usage:
        processor = make_processor(["greet", "Ada"], GreetCommand())
    """

    def _make(
        argv: list[str],
        *commands: Command,
        config: ProcessorConfig | None = None,
        description: str = "",
    ) -> CommandProcessor:
        config = config or ProcessorConfig(prog="tool", log_colors=False)
        processor = CommandProcessor(
            argv, description, config=config, console=console
        )
        if commands:
            processor.register(commands)
        return processor

    return _make
