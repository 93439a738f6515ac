"""
Tests for cliproc/errors.py.
"""

import pytest

from cliproc import (
    CliprocError,
    CommandRegistrationError,
    ConfigurationError,
    ContextNotReadyError,
    DupCommandError,
    LifecycleError,
    UndefNameError,
    ValueNotFoundError,
)
from tests.helpers.commands import GreetCommand


@pytest.mark.unit
class TestErrors:
    """Test error messages and hierarchy."""

    def test_undef_name_with_class(self):
        error = UndefNameError(cls=GreetCommand)

        assert error.cls is GreetCommand
        assert "GreetCommand must override _create_config()" in str(error)

    def test_undef_name_without_class(self):
        assert str(UndefNameError()) == "Command name is not defined"

    def test_dup_command(self):
        command = GreetCommand()

        error = DupCommandError(command)

        assert error.command is command
        assert str(error) == "Command 'greet' is already registered"

    def test_registration_error(self):
        error = CommandRegistrationError("greet", "bad alias")

        assert error.command_name == "greet"
        assert error.reason == "bad alias"
        assert str(error) == "Failed to register command 'greet': bad alias"

    def test_context_not_ready_is_lifecycle_error(self):
        error = ContextNotReadyError("greet")

        assert isinstance(error, LifecycleError)
        assert "execute()" in str(error)

    def test_value_not_found_is_lookup_error(self):
        error = ValueNotFoundError("option", "--loud")

        assert isinstance(error, LookupError)
        assert str(error) == "The option '--loud' could not be found"

    @pytest.mark.parametrize(
        "error",
        [
            UndefNameError(),
            CommandRegistrationError("x", "y"),
            LifecycleError("z"),
            ConfigurationError("w"),
        ],
    )
    def test_common_base(self, error):
        assert isinstance(error, CliprocError)
