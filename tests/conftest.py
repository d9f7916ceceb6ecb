"""
Pytest configuration and shared fixtures.

Marks:
    integration -- requires the go toolchain on PATH

Tests decorated with this mark are skipped automatically when go is
absent, so the unit test suite always runs cleanly.

Local setup:
    - Install Go: https://go.dev/dl/
"""

import io
import shutil

import pytest

from mobile_bootstrap.command import Command
from mobile_bootstrap.config import Settings
from mobile_bootstrap.errors import CommandError
from mobile_bootstrap.flags import FlagSet
from mobile_bootstrap.registry import CommandRegistry

# ---------------------------------------------------------------------------
# Dependency detection
# ---------------------------------------------------------------------------

_HAVE_GO = shutil.which("go") is not None


# ---------------------------------------------------------------------------
# Auto-skip via markers
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(config, items):
    for item in items:
        if item.get_closest_marker("integration") and not _HAVE_GO:
            item.add_marker(pytest.mark.skip(reason="integration deps missing: go"))


# ---------------------------------------------------------------------------
# Fake commands
# ---------------------------------------------------------------------------


class Recorder:
    """Entry point that records each call and optionally fails."""

    def __init__(self, error=None):
        self.calls = []
        self.error = error

    def __call__(self, cmd):
        self.calls.append((cmd.name, vars(cmd.flags.values).copy(), list(cmd.flags.args)))
        if self.error is not None:
            raise CommandError(self.error)


def fake_command(name, short=None, run=None, flags=None):
    if flags is None:
        flags = FlagSet(name)
        flags.add_flag("-v", dest="verbose", action="store_true")
    return Command(
        name=name,
        usage="[-v] args",
        short=short or f"do the {name} thing",
        long=f"\n{name.capitalize()} does the {name} thing.\n",
        run=run or Recorder(),
        flags=flags,
    )


@pytest.fixture()
def registry():
    return CommandRegistry(
        [
            fake_command("build", "compile the app"),
            fake_command("bind", "generate bindings"),
            fake_command("init", "install helpers"),
        ]
    )


@pytest.fixture()
def settings(registry, tmp_path):
    return Settings(
        program="mobile-bootstrap",
        registry=registry,
        stdout=io.StringIO(),
        stderr=io.StringIO(),
        project_root=tmp_path,
    )
