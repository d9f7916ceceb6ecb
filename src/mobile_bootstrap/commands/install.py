"""The install command: build for Android and push the library to a device."""

from mobile_bootstrap.command import Command
from mobile_bootstrap.commands.build import build_platform
from mobile_bootstrap.commands.toolchain import (
    GO_TOOLS,
    PLATFORMS,
    add_build_flags,
    progress,
    run_tool,
)
from mobile_bootstrap.dependencies import check_dependencies
from mobile_bootstrap.flags import FlagSet

DEVICE_DIR = "/data/local/tmp"

INSTALL_TOOLS = {
    **GO_TOOLS,
    "adb": "https://developer.android.com/tools/releases/platform-tools",
}

USAGE = "[-o output] [--device-dir dir] [-n] [-x] [-v] [packages]"

SHORT = "compile android library and push to device"

LONG = """
Install compiles the package named by the import path for Android and
copies the library to the attached device with 'adb push'. The
destination directory on the device is set with --device-dir and
defaults to /data/local/tmp.

The -o, -n, -x and -v flags behave as for the build command.
"""


def run_install(cmd: Command) -> None:
    values = cmd.flags.values
    if not values.dry_run:
        check_dependencies(INSTALL_TOOLS)

    packages = cmd.flags.args or ["."]
    output = build_platform(PLATFORMS["android"], packages, values.output, values)
    progress(values, f"installing {output}")
    run_tool(["adb", "push", output, values.device_dir], values)


def new_command() -> Command:
    flags = FlagSet("install")
    add_build_flags(flags)
    flags.add_flag("-o", "--output", default=None)
    flags.add_flag("--device-dir", default=DEVICE_DIR)
    return Command(
        name="install",
        usage=USAGE,
        short=SHORT,
        long=LONG,
        run=run_install,
        flags=flags,
    )
