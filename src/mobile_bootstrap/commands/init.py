"""The init command: install the binding generator."""

from mobile_bootstrap.command import Command
from mobile_bootstrap.commands.toolchain import (
    GO_TOOLS,
    add_build_flags,
    progress,
    run_tool,
)
from mobile_bootstrap.dependencies import check_dependencies
from mobile_bootstrap.errors import CommandError
from mobile_bootstrap.flags import FlagSet

GOBIND_PACKAGE = "golang.org/x/mobile/cmd/gobind@latest"

USAGE = "[-n] [-x] [-v]"

SHORT = "install mobile toolchain helpers"

LONG = """
Init installs gobind, the binding generator used by the bind command,
into $GOPATH/bin with 'go install'.

A Go toolchain must be on PATH; init reports where to get one if it
is missing.

The -n, -x and -v flags behave as for the build command.
"""


def run_init(cmd: Command) -> None:
    values = cmd.flags.values
    if cmd.flags.args:
        raise CommandError("init takes no arguments")
    if not values.dry_run:
        check_dependencies(GO_TOOLS)

    progress(values, f"installing {GOBIND_PACKAGE}")
    run_tool(["go", "install", GOBIND_PACKAGE], values)


def new_command() -> Command:
    flags = FlagSet("init")
    add_build_flags(flags)
    return Command(
        name="init", usage=USAGE, short=SHORT, long=LONG, run=run_init, flags=flags
    )
