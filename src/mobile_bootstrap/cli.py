"""
CLI dispatcher for mobile-bootstrap.

Routes the first argument to a registered command, or to the help pathway:

    mobile-bootstrap <command> [flags] [args]
    mobile-bootstrap help [command]
    mobile-bootstrap help documentation <path>

Exit codes:
    0  success
    1  a known command failed (bad flags or execution error)
    2  usage error (no command, unknown command, malformed help)
"""

import sys
from typing import Optional

from mobile_bootstrap.config import (
    Settings,
    command_defaults,
    program_name,
    read_project_config,
)
from mobile_bootstrap.documentation import write_documentation
from mobile_bootstrap.errors import CommandError, ConfigError, FlagError
from mobile_bootstrap.usage import render_usage

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


class Dispatcher:
    def __init__(self, settings: Settings):
        self.settings = settings
        self.registry = settings.registry
        # Rendered once up front: a broken template aborts at startup.
        self._usage = render_usage(self.registry)

    def _err(self, message: str) -> None:
        print(message, file=self.settings.stderr)

    def dispatch(self, argv: list[str]) -> int:
        """Run one invocation and return the process exit code."""
        if not argv or argv[0].startswith("-"):
            self.settings.stderr.write(self._usage)
            return EXIT_USAGE

        if argv[0] == "help":
            if len(argv) == 3 and argv[1] == "documentation":
                return self.help_documentation(argv[2])
            return self.help(argv[1:])

        cmd = self.registry.lookup(argv[0])
        if cmd is None:
            program = self.settings.program
            self._err(
                f"{program}: unknown subcommand '{argv[0]}'\n"
                f"Run '{program} help' for usage."
            )
            return EXIT_USAGE

        try:
            config = read_project_config(self.settings.project_root)
            defaults = command_defaults(config, cmd.name, cmd.flags.flag_types())
            cmd.flags.set_defaults(**defaults)
        except ConfigError as exc:
            self._err(f"{self.settings.program}: {exc}")
            return EXIT_FAILURE

        try:
            cmd.flags.parse(argv[1:])
        except FlagError as exc:
            self._err(f"{cmd.name}: {exc}")
            cmd.print_usage(self.settings.program, self.settings.stdout)
            return EXIT_FAILURE

        try:
            cmd.run(cmd)
        except CommandError as exc:
            if exc.message:
                self._err(f"{self.settings.program}: {exc.message}")
            return EXIT_FAILURE
        return EXIT_OK

    def help(self, args: list[str]) -> int:
        """Print full usage, or one command's usage."""
        program = self.settings.program
        if not args:
            self.settings.stdout.write(self._usage)
            return EXIT_OK
        if len(args) != 1:
            self._err(f"usage: {program} help command\n\nToo many arguments given.")
            return EXIT_USAGE

        cmd = self.registry.lookup(args[0])
        if cmd is None:
            self._err(f"Unknown help topic '{args[0]}'.  Run '{program} help'.")
            return EXIT_USAGE
        cmd.print_usage(program, self.settings.stdout)
        return EXIT_OK

    def help_documentation(self, path: str) -> int:
        """Write the generated reference document to path."""
        try:
            write_documentation(self.registry, path)
        except OSError as exc:
            self._err(f"{self.settings.program}: {exc}")
            return EXIT_FAILURE
        return EXIT_OK


def main(argv: Optional[list[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    from mobile_bootstrap.commands import build_registry

    settings = Settings(program=program_name(sys.argv[0]), registry=build_registry())
    return Dispatcher(settings).dispatch(argv)


if __name__ == "__main__":
    sys.exit(main())
