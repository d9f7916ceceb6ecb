"""The version command."""

import shutil
import subprocess

from mobile_bootstrap import PROGRAM_NAME, __version__
from mobile_bootstrap.command import Command
from mobile_bootstrap.errors import CommandError
from mobile_bootstrap.flags import FlagSet

USAGE = ""

SHORT = "print version"

LONG = """
Version prints the versions of mobile-bootstrap and of the Go toolchain
on PATH, if there is one.
"""


def _go_version():
    if not shutil.which("go"):
        return None
    result = subprocess.run(["go", "version"], capture_output=True)
    if result.returncode != 0:
        return None
    return result.stdout.decode(errors="replace").strip()


def run_version(cmd: Command) -> None:
    if cmd.flags.args:
        raise CommandError("version takes no arguments")
    print(f"{PROGRAM_NAME} version {__version__}")
    go_version = _go_version()
    print(go_version if go_version else "go: not found on PATH")


def new_command() -> Command:
    return Command(
        name="version",
        usage=USAGE,
        short=SHORT,
        long=LONG,
        run=run_version,
        flags=FlagSet("version"),
    )
