"""
Testing utilities for cliproc commands.

Lets a command's run() be exercised without going through a full
CommandProcessor.execute() cycle.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Any

from .command import Command
from .console import Console
from .context import InvocationContext, ParseResult
from .log import LogConfig, LoggerFactory


def make_context(
    command: Command,
    argv: Sequence[str] | None = None,
    console: Console | None = None,
    **values: Any,
) -> InvocationContext:
    """
    Build an InvocationContext for command.

    With argv, the command's declarations are parsed for real by a scratch
    CommandProcessor holding only this command (argv excludes the command
    keyword). Otherwise keyword arguments are used as the parsed namespace,
    keyed by dest.

    Example:
        >>> greet = Greet()
        >>> ctx = make_context(greet, name="Ada", loud=True)
        >>> greet.execute(ctx)
        0
        >>> ctx = make_context(Greet(), argv=["Ada", "--loud"])
    """
    console = console or Console(no_color=True)
    if argv is None:
        namespace = argparse.Namespace(**values)
        return InvocationContext(
            ParseResult(namespace, command.keyword), command, console
        )

    from .processor import CommandProcessor

    tokens = [command.keyword, *argv]
    # Detached root so the scratch processor does not claim the cached "/"
    lg = LoggerFactory.create("/", LogConfig(), register=False)
    processor = CommandProcessor(tokens, console=console, lg=lg)
    processor.register(command)
    namespace = processor.parser.parse_args(tokens)
    return InvocationContext(
        ParseResult(namespace, command.keyword, tokens), command, console
    )
