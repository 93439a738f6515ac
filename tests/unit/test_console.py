"""
Tests for cliproc/console.py.
"""

from io import StringIO

import pytest

from cliproc import Console
from cliproc.console import _should_use_color


class _Tty(StringIO):
    def isatty(self):
        return True


@pytest.mark.unit
class TestShouldUseColor:
    """Test color auto-detection."""

    def test_no_color_env(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        monkeypatch.setenv("FORCE_COLOR", "1")

        assert _should_use_color(_Tty()) is False

    def test_force_color_env(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("FORCE_COLOR", "1")

        assert _should_use_color(StringIO()) is True

    def test_tty_detection(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.delenv("FORCE_COLOR", raising=False)

        assert _should_use_color(_Tty()) is True
        assert _should_use_color(StringIO()) is False


@pytest.mark.unit
class TestConsole:
    """Test Console output routing."""

    def test_print(self, console, console_streams):
        console.print("plain text")

        assert console_streams[0].getvalue() == "plain text\n"
        assert console_streams[1].getvalue() == ""

    def test_print_success(self, console, console_streams):
        console.print_success("baked 3 loaves")

        assert console_streams[0].getvalue() == "baked 3 loaves\n"

    def test_print_warning_goes_to_stderr(self, console, console_streams):
        console.print_warning("oven is cold")

        assert console_streams[0].getvalue() == ""
        assert console_streams[1].getvalue() == "Warning: oven is cold\n"

    def test_print_error_goes_to_stderr(self, console, console_streams):
        console.print_error("no flour")

        assert console_streams[1].getvalue() == "Error: no flour\n"

    def test_error_markup_escaped(self, console, console_streams):
        """Test brackets in messages are printed literally."""
        console.print_error("bad value [x]")

        assert console_streams[1].getvalue() == "Error: bad value [x]\n"

    def test_quiet(self, console_streams):
        out, err = console_streams
        console = Console(file=out, stderr_file=err, no_color=True, quiet=True)

        console.print("hidden")
        console.print_success("hidden")
        console.print_error("shown")

        assert console.quiet is True
        assert out.getvalue() == ""
        assert "shown" in err.getvalue()

    def test_no_color_detected(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")

        assert Console(file=StringIO()).no_color is True

    def test_rich_console_exposed(self, console, console_streams):
        console.rich.rule()

        assert console_streams[0].getvalue() != ""
