"""The bind command: generate language bindings for Go packages."""

from mobile_bootstrap.command import Command
from mobile_bootstrap.commands.toolchain import (
    add_build_flags,
    parse_targets,
    progress,
    run_tool,
)
from mobile_bootstrap.dependencies import check_dependencies
from mobile_bootstrap.errors import CommandError
from mobile_bootstrap.flags import FlagSet

BIND_TOOLS = {"gobind": "run 'mobile-bootstrap init'"}

USAGE = "[--target android|ios] [-o outdir] [-n] [-x] [-v] packages"

SHORT = "build a library for Android and iOS"

LONG = """
Bind generates language bindings for the packages named by the import
paths. At least one package must be named.

For the android target bind generates Java sources, for the ios target
Objective-C sources. Both are written below the directory named by the
-o flag, which defaults to "bind".

The --target, -n, -x and -v flags behave as for the build command.

Defaults for these flags may be set in the [bind] table of mobile.toml.
"""


def run_bind(cmd: Command) -> None:
    values = cmd.flags.values
    if not cmd.flags.args:
        raise CommandError("no package specified")
    platforms = parse_targets(values.target)
    if not values.dry_run:
        check_dependencies(BIND_TOOLS)

    langs = ",".join(["go"] + [platform.bind_lang for platform in platforms])
    progress(values, f"binding {len(cmd.flags.args)} package(s) for {langs}")
    run_tool(
        ["gobind", f"-lang={langs}", f"-outdir={values.outdir}", *cmd.flags.args],
        values,
    )


def new_command() -> Command:
    flags = FlagSet("bind")
    add_build_flags(flags)
    flags.add_flag("--target", default="android")
    flags.add_flag("-o", "--outdir", default="bind")
    return Command(
        name="bind", usage=USAGE, short=SHORT, long=LONG, run=run_bind, flags=flags
    )
