"""
Sample commands shared across the test suite.
"""

from cliproc import Argument, Command, CommandConfig, Option, ParseResult


class GreetCommand(Command):
    """greet <name> [--loud]; records what it read."""

    who = Argument("name", help="who to greet")
    loud = Option("--loud", is_flag=True, help="shout the greeting")

    def __init__(self, config: CommandConfig | None = None):
        super().__init__(config)
        self.calls = 0
        self.name_value = None
        self.loud_value = None

    def _create_config(self) -> CommandConfig:
        return CommandConfig(
            name="greet",
            description="Say hello",
            author="Test Author",
            version="1.2.3",
            arguments=[self.who],
            options=[self.loud],
        )

    def run(self) -> None:
        self.calls += 1
        self.name_value = self.read_argument(self.who)
        self.loud_value = self.read_option(self.loud)
        text = f"Hello, {self.name_value}!"
        if self.loud_value:
            text = text.upper()
        self.context.console.print(text)


def _non_negative(result: ParseResult) -> str | None:
    if result.get_value(AddCommand.left) < 0 or result.get_value(AddCommand.right) < 0:
        return "operands must be non-negative"
    return None


class AddCommand(Command):
    """add <left> <right> [--scale F] [--label TEXT], aliases: plus, sum."""

    left = Argument("left", type=int, help="first operand")
    right = Argument("right", type=int, help="second operand")
    scale = Option("--scale", aliases=("-s",), type=float, default=1.0, help="multiplier")
    label = Option("--label", help="optional label")

    def __init__(self, config: CommandConfig | None = None):
        super().__init__(config)
        self.calls = 0
        self.total = None

    def _create_config(self) -> CommandConfig:
        return CommandConfig(
            name="Add",
            description="Add two numbers",
            author="Test Author",
            version="0.1.0",
            arguments=[self.left, self.right],
            options=[self.scale, self.label],
            validators=[_non_negative],
            aliases=["plus", "sum"],
        )

    def run(self) -> int:
        self.calls += 1
        left = self.read_argument(self.left)
        right = self.read_argument(self.right)
        self.total = (left + right) * self.read_option(self.scale)
        self.context.console.print(f"{self.total:g}")
        return 0


class FailingCommand(Command):
    """Raises from run()."""

    def _create_config(self) -> CommandConfig:
        return CommandConfig(name="fail", description="Always fails")

    def run(self) -> None:
        raise RuntimeError("boom")


class ExitCodeCommand(Command):
    """Sets context.exit_code instead of returning it."""

    def __init__(self, code: int = 3):
        super().__init__()
        self.code = code

    def _create_config(self) -> CommandConfig:
        return CommandConfig(name="status", description="Exit with a status")

    def run(self) -> None:
        self.context.exit_code = self.code


class NoopCommand(Command):
    """Configured entirely through the constructor."""

    def __init__(self, name: str = "noop", **kwargs):
        super().__init__(CommandConfig(name=name, **kwargs))
        self.calls = 0

    def run(self) -> None:
        self.calls += 1
