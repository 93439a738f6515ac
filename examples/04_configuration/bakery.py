#!/usr/bin/env python3
"""
Several commands, validators and a YAML-configured processor.

    python bakery.py bake cake 3 --dark-chocolate
    python bakery.py bake bread 0          # rejected by validator
    python bakery.py slice --pieces 8
    CLIPROC_LOG_LEVEL=debug python bakery.py bake muffin 12
"""

import pathlib
import sys

# Add the project root to the path
project_root = str(pathlib.Path(__file__).resolve().parents[2])
sys.path.append(project_root) if project_root not in sys.path else None

from cliproc import (
    Argument,
    Command,
    CommandConfig,
    CommandProcessor,
    Option,
    ParseResult,
    ProcessorConfig,
)

CONFIG_FILE = pathlib.Path(__file__).with_name("bakery.yaml")


class BakeCommand(Command):
    kind = Argument("kind", choices=["cake", "bread", "muffin"], help="what to bake")
    amount = Argument("amount", type=int, help="how many")
    dark = Option("--dark-chocolate", is_flag=True, help="use dark chocolate")

    def _create_config(self) -> CommandConfig:
        return CommandConfig(
            name="Bake",
            description="Bake goods",
            author="Bakery team",
            version="1.4.0",
            arguments=[self.kind, self.amount],
            options=[self.dark],
            validators=[self._positive_amount],
        )

    def _positive_amount(self, result: ParseResult) -> str | None:
        if result.get_value(self.amount) <= 0:
            return "amount must be positive"
        return None

    def run(self) -> None:
        kind = self.read_argument(self.kind)
        amount = self.read_argument(self.amount)
        extra = " with dark chocolate" if self.read_option(self.dark) else ""
        self.lg.debug("baking", extra={"kind": kind, "amount": amount})
        self.context.console.print_success(f"Baked {amount} x {kind}{extra}")


class SliceCommand(Command):
    pieces = Option("--pieces", type=int, default=4, help="number of slices")

    def _create_config(self) -> CommandConfig:
        return CommandConfig(
            name="slice",
            description="Slice the last thing baked",
            author="Bakery team",
            version="0.9.0",
            options=[self.pieces],
            aliases=["cut"],
        )

    def run(self) -> int:
        pieces = self.read_option(self.pieces)
        if pieces > 16:
            self.context.console.print_warning("that is a lot of slices")
            self.context.exit_code = 3
        self.context.console.print(f"Sliced into {pieces} pieces")
        return self.context.exit_code


def main() -> int:
    config = ProcessorConfig.from_yaml(CONFIG_FILE).apply_env_overrides()
    processor = CommandProcessor(sys.argv[1:], config=config)
    processor.register([BakeCommand(), SliceCommand()])
    return processor.execute()


if __name__ == "__main__":
    sys.exit(main())
