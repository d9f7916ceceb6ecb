"""
Per-command flag parsing.

Each command owns one FlagSet. It wraps an argparse parser that raises
FlagError instead of printing and exiting, so the dispatcher decides what
a bad invocation looks like to the user.
"""

import argparse

from mobile_bootstrap.errors import FlagError


class _FlagParser(argparse.ArgumentParser):
    def error(self, message):
        raise FlagError(message)


class FlagSet:
    """Recognized flags and leftover positional arguments for one command."""

    def __init__(self, name: str):
        self.name = name
        self._parser = _FlagParser(prog=name, add_help=False, allow_abbrev=False)
        self._parser.add_argument("args", nargs="*")
        self._flag_types: dict[str, type] = {}
        self.values = argparse.Namespace()
        self.args: list[str] = []

    def add_flag(self, *names, **kwargs) -> None:
        """Declare a flag; accepts the same arguments as add_argument()."""
        action = self._parser.add_argument(*names, **kwargs)
        # nargs == 0: store_true / store_false style switches
        self._flag_types[action.dest] = bool if action.nargs == 0 else (action.type or str)

    def flag_types(self) -> dict[str, type]:
        """Map of declared flag dest -> the type a default must have."""
        return dict(self._flag_types)

    def set_defaults(self, **defaults) -> None:
        self._parser.set_defaults(**defaults)

    def parse(self, argv: list[str]) -> list[str]:
        """
        Parse argv, storing flag values on .values and positionals on .args.
        Flags and positionals may be interleaved.
        Raises FlagError for anything the command does not accept.
        """
        namespace = self._parser.parse_intermixed_args(list(argv))
        self.args = list(vars(namespace).pop("args"))
        self.values = namespace
        return self.args
