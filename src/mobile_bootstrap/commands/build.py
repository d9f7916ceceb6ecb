"""The build command: compile Go packages into per-platform libraries."""

from mobile_bootstrap.command import Command
from mobile_bootstrap.commands.toolchain import (
    GO_TOOLS,
    Platform,
    add_build_flags,
    parse_targets,
    progress,
    run_tool,
)
from mobile_bootstrap.dependencies import check_dependencies
from mobile_bootstrap.errors import CommandError
from mobile_bootstrap.flags import FlagSet

USAGE = "[--target android|ios] [-o output] [-n] [-x] [-v] [packages]"

SHORT = "compile mobile libraries from Go packages"

LONG = """
Build compiles the packages named by the import paths into a library
for each target platform. If no package is named, the package in the
current directory is built.

The --target flag takes a comma-separated list of platforms. Supported
platforms are android and ios; the default is android. Android targets
produce a shared library (-buildmode=c-shared), iOS targets a static
archive (-buildmode=c-archive).

The -o flag names the output file. It may only be used with a single
target. By default the library is written to android/libmobile.so or
ios/libmobile.a.

The -n flag prints the commands but does not run them.
The -x flag prints the commands as they run.
The -v flag prints the platform being built.

Defaults for these flags may be set in the [build] table of mobile.toml.
"""


def build_platform(platform: Platform, packages: list, output: str, values) -> str:
    """Build packages for one platform and return the output path."""
    output = output or platform.library
    progress(values, f"building for {platform.name}")
    run_tool(
        [
            "go",
            "build",
            f"-buildmode={platform.buildmode}",
            "-o",
            output,
            *packages,
        ],
        values,
        extra_env=platform.env(),
    )
    return output


def run_build(cmd: Command) -> None:
    values = cmd.flags.values
    platforms = parse_targets(values.target)
    if values.output and len(platforms) > 1:
        raise CommandError("-o cannot be used with more than one target")
    if not values.dry_run:
        check_dependencies(GO_TOOLS)

    packages = cmd.flags.args or ["."]
    for platform in platforms:
        build_platform(platform, packages, values.output, values)


def new_command() -> Command:
    flags = FlagSet("build")
    add_build_flags(flags)
    flags.add_flag("--target", default="android")
    flags.add_flag("-o", "--output", default=None)
    return Command(
        name="build", usage=USAGE, short=SHORT, long=LONG, run=run_build, flags=flags
    )
