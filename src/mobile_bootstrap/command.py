"""The descriptor for one invocable subcommand."""

from dataclasses import dataclass, field
from typing import Callable, TextIO

from mobile_bootstrap.flags import FlagSet


@dataclass(frozen=True)
class Command:
    """
    Identity, help text and entry point of a subcommand.

    run receives the descriptor itself, with flags already parsed, and
    raises CommandError to report failure.
    """

    name: str
    usage: str
    short: str
    long: str
    run: Callable[["Command"], None] = field(repr=False, compare=False)
    flags: FlagSet = field(repr=False, compare=False)

    def __post_init__(self):
        if not self.name:
            raise ValueError("command name must not be empty")

    def print_usage(self, program: str, stream: TextIO) -> None:
        stream.write(f"usage: {program} {self.name} {self.usage}\n{self.long}")
