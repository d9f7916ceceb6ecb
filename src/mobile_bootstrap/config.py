"""
Process settings and project configuration.

Settings is built once in main() and handed to the Dispatcher. Optional
per-project defaults are read from mobile.toml at the project root:

    [build]
    target = "android,ios"
    output = "out/libapp.so"

Each table is named after a command; its keys become that command's flag
defaults. Dashes in keys are accepted in place of underscores.
"""

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, TextIO

import tomli

from mobile_bootstrap import PROGRAM_NAME
from mobile_bootstrap.errors import ConfigError
from mobile_bootstrap.registry import CommandRegistry

CONFIG_FILE = "mobile.toml"


def program_name(argv0: Optional[str]) -> str:
    """Name to use in diagnostics, derived from argv[0]."""
    if not argv0:
        return PROGRAM_NAME
    name = Path(argv0).name
    # python -m mobile_bootstrap and direct script runs
    if name.endswith(".py"):
        return PROGRAM_NAME
    return name


@dataclass
class Settings:
    program: str
    registry: CommandRegistry
    stdout: TextIO = field(default_factory=lambda: sys.stdout)
    stderr: TextIO = field(default_factory=lambda: sys.stderr)
    project_root: Path = field(default_factory=lambda: Path(os.getcwd()))


def read_project_config(project_root: Path) -> dict:
    """Read mobile.toml from project_root. Missing file means no defaults."""
    config_path = project_root / CONFIG_FILE
    if not config_path.exists():
        return {}
    try:
        with open(config_path, "rb") as f:
            return tomli.load(f)
    except (tomli.TOMLDecodeError, UnicodeDecodeError, OSError) as exc:
        raise ConfigError(f"{config_path}: {exc}") from exc


def command_defaults(config: dict, name: str, flag_types: dict) -> dict:
    """
    Flag defaults for command name, with keys normalized to dest names.

    flag_types maps each declared flag dest to the type its value must
    have; keys outside it, or values of the wrong type, are rejected.
    """
    table = config.get(name, {})
    if not isinstance(table, dict):
        raise ConfigError(f"{CONFIG_FILE}: [{name}] must be a table")

    defaults = {}
    for key, value in table.items():
        dest = key.replace("-", "_")
        if dest not in flag_types:
            raise ConfigError(f"{CONFIG_FILE}: [{name}] has no flag {key!r}")
        expected = flag_types[dest]
        if isinstance(expected, type) and not isinstance(value, expected):
            raise ConfigError(
                f"{CONFIG_FILE}: [{name}] {key} must be {expected.__name__}, "
                f"not {type(value).__name__}"
            )
        defaults[dest] = value
    return defaults
