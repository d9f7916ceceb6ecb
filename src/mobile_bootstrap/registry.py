"""
Ordered, read-only collection of the commands known to the CLI.

Order is display order for help output. Lookup is by name equality.
"""

from typing import Iterable, Iterator, Optional

from mobile_bootstrap.command import Command


class CommandRegistry:
    def __init__(self, commands: Iterable[Command]):
        self._commands = tuple(commands)
        seen = set()
        for cmd in self._commands:
            if cmd.name in seen:
                raise ValueError(f"duplicate command name {cmd.name!r}")
            seen.add(cmd.name)

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def names(self) -> list[str]:
        return [cmd.name for cmd in self._commands]

    def lookup(self, name: str) -> Optional[Command]:
        """Return the first command called name, or None."""
        for cmd in self._commands:
            if cmd.name == name:
                return cmd
        return None
