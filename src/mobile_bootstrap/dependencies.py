"""
Reusable dependency checking for mobile-bootstrap commands.

Each command provides its own tools dict; this module provides the check function.
"""

import shutil

from mobile_bootstrap.errors import CommandError


def missing_tools(tools: dict) -> dict:
    """Return the subset of tools that are not on PATH."""
    return {name: url for name, url in tools.items() if not shutil.which(name)}


def check_dependencies(tools: dict) -> None:
    """
    Verify that all tools in `tools` are on PATH.
    Prints install guidance and fails the command if any are missing.

    Args:
        tools: mapping of tool name -> install URL/instructions

    Raises:
        CommandError with an empty message, since the guidance is already printed.
    """
    missing = missing_tools(tools)
    if not missing:
        return

    print("\nMissing required tools:\n")
    for name, url in missing.items():
        print(f"  {name:10s}  Install from: {url}")
    print()
    raise CommandError()
