"""
Console wrapper used by commands and by the processor for error output.

Wraps rich with a small theme and honours NO_COLOR / FORCE_COLOR.
"""

from __future__ import annotations

import os
import sys
from typing import IO, Any

from rich.console import Console as RichConsole
from rich.markup import escape
from rich.theme import Theme

CLIPROC_THEME = {
    "info": "cyan",
    "warning": "yellow",
    "error": "red bold",
    "success": "green",
    "muted": "dim",
}


def _should_use_color(file: IO[str]) -> bool:
    """Determine if color output should be used."""
    # https://no-color.org/
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    isatty = getattr(file, "isatty", None)
    return bool(isatty and isatty())


class Console:
    """
    Thin facade over rich.console.Console.

    Example:
        console = Console()
        console.print("[success]done[/success]")
        console.print_error("something went wrong")
    """

    def __init__(
        self,
        *,
        file: IO[str] | None = None,
        stderr_file: IO[str] | None = None,
        no_color: bool | None = None,
        quiet: bool = False,
    ):
        """
        Initialize the console.

        Args:
            file: Output stream for regular output (default: sys.stdout)
            stderr_file: Output stream for errors and warnings (default: sys.stderr)
            no_color: Disable colors, or auto-detect when None
            quiet: Suppress non-essential output
        """
        out = file or sys.stdout
        err = stderr_file or sys.stderr
        if no_color is None:
            no_color = not _should_use_color(out)

        self._quiet = quiet
        self._no_color = no_color
        theme = Theme(CLIPROC_THEME)
        self._out = RichConsole(
            file=out, no_color=no_color, theme=theme, highlight=False, soft_wrap=True
        )
        self._err = RichConsole(
            file=err, no_color=no_color, theme=theme, highlight=False, soft_wrap=True
        )

    @property
    def quiet(self) -> bool:
        return self._quiet

    @property
    def no_color(self) -> bool:
        return self._no_color

    @property
    def rich(self) -> RichConsole:
        """Underlying rich console for tables, rules and the like."""
        return self._out

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Print to standard output, rich markup allowed."""
        if self._quiet:
            return
        self._out.print(*args, **kwargs)

    def print_success(self, message: str) -> None:
        if self._quiet:
            return
        self._out.print(f"[success]{escape(message)}[/success]")

    def print_warning(self, message: str) -> None:
        self._err.print(f"[warning]Warning:[/warning] {escape(message)}")

    def print_error(self, message: str) -> None:
        self._err.print(f"[error]Error:[/error] {escape(message)}")
