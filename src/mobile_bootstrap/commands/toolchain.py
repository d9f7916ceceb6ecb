"""
Shared plumbing for commands that drive the Go toolchain.

Common flags:
    -n   print the commands that would run, without running them
    -x   print the commands as they run
    -v   print progress messages
"""

import os
import shlex
import subprocess
import sys
from dataclasses import dataclass

from mobile_bootstrap.errors import CommandError
from mobile_bootstrap.flags import FlagSet

GO_TOOLS = {"go": "https://go.dev/dl/"}


@dataclass(frozen=True)
class Platform:
    name: str
    goos: str
    goarch: str
    buildmode: str
    library: str
    bind_lang: str

    def env(self) -> dict:
        return {"GOOS": self.goos, "GOARCH": self.goarch, "CGO_ENABLED": "1"}


PLATFORMS = {
    "android": Platform(
        "android", "android", "arm64", "c-shared", "android/libmobile.so", "java"
    ),
    "ios": Platform("ios", "ios", "arm64", "c-archive", "ios/libmobile.a", "objc"),
}


def add_build_flags(flags: FlagSet) -> None:
    flags.add_flag("-n", dest="dry_run", action="store_true")
    flags.add_flag("-x", dest="trace", action="store_true")
    flags.add_flag("-v", dest="verbose", action="store_true")


def parse_targets(value: str) -> list:
    """Split a comma-separated --target value into Platforms."""
    names = [part.strip() for part in value.split(",") if part.strip()]
    if not names:
        raise CommandError("no target platform given")
    unknown = [name for name in names if name not in PLATFORMS]
    if unknown:
        raise CommandError(
            f"unsupported target platform {unknown[0]!r} "
            f"(supported: {', '.join(PLATFORMS)})"
        )
    return [PLATFORMS[name] for name in names]


def progress(values, message: str) -> None:
    if values.verbose:
        print(message, file=sys.stderr)


def run_tool(args: list, values, extra_env: dict = None) -> None:
    """Run one toolchain command, honouring -n and -x.

    Tool output is not captured; the tool reports its own errors, and a
    non-zero exit fails the calling command.
    """
    if values.dry_run or values.trace:
        prefix = " ".join(f"{k}={v}" for k, v in (extra_env or {}).items())
        line = shlex.join(args)
        print(f"{prefix} {line}" if prefix else line, file=sys.stderr)
    if values.dry_run:
        return

    env = {**os.environ, **extra_env} if extra_env else None
    result = subprocess.run(args, env=env, capture_output=False)
    if result.returncode != 0:
        raise CommandError(f"{shlex.join(args[:2])} failed: exit status {result.returncode}")
