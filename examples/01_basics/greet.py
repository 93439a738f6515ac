#!/usr/bin/env python3
"""
Minimal cliproc application with a single command.

    python greet.py greet Ada --loud
    python greet.py hi Ada --times 2
    python greet.py --help
"""

import pathlib
import sys

# Add the project root to the path
project_root = str(pathlib.Path(__file__).resolve().parents[2])
sys.path.append(project_root) if project_root not in sys.path else None

from cliproc import Argument, Command, CommandConfig, CommandProcessor, Option


class GreetCommand(Command):
    """Greets someone, optionally loudly and repeatedly."""

    who = Argument("name", help="who to greet")
    loud = Option("--loud", aliases=("-l",), is_flag=True, help="shout the greeting")
    times = Option("--times", aliases=("-n",), type=int, default=1, help="repeat count")

    def _create_config(self) -> CommandConfig:
        return CommandConfig(
            name="greet",
            description="Say hello to someone",
            author="cliproc examples",
            version="1.0.0",
            arguments=[self.who],
            options=[self.loud, self.times],
            aliases=["hi"],
        )

    def run(self) -> int:
        text = f"Hello, {self.read_argument(self.who)}!"
        if self.read_option(self.loud):
            text = text.upper()
        for _ in range(self.read_option(self.times)):
            self.context.console.print(text)
        self.lg.info("greeted", extra={"name": self.read_argument(self.who)})
        return 0


def main() -> int:
    processor = CommandProcessor.from_argv(description="Greeting example")
    processor.register(GreetCommand())
    return processor.execute()


if __name__ == "__main__":
    sys.exit(main())
