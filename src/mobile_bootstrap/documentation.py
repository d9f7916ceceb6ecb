"""
Reference documentation generated from the command registry.

Output is a Python module whose docstring holds the usage text followed by
every command's usage line and long description:

    mobile-bootstrap help documentation src/mobile_bootstrap/doc.py

The file is regenerate-only. Content depends on nothing but the registry,
so repeated runs produce identical bytes.
"""

from pathlib import Path

from mobile_bootstrap import PROGRAM_NAME
from mobile_bootstrap.registry import CommandRegistry
from mobile_bootstrap.usage import render_usage

DOCUMENTATION_HEADER = f"""\
# Copyright 2026 The mobile-bootstrap Authors. All rights reserved.
# Use of this source code is governed by the MIT license
# found in the project metadata.

# DO NOT EDIT. GENERATED BY '{PROGRAM_NAME} help documentation'.
"""


def _capitalize_first(text: str) -> str:
    if not text:
        return text
    first = text[0].upper()
    # keep characters whose upper case is not a single code point (ß -> SS)
    if len(first) != 1:
        first = text[0]
    return first + text[1:]


def render_documentation(registry: CommandRegistry) -> bytes:
    """Render the reference document as UTF-8 bytes."""
    parts = [DOCUMENTATION_HEADER, '\nr"""\n', render_usage(registry)]

    for cmd in registry:
        parts.append("\n\n")
        parts.append(_capitalize_first(cmd.short))
        parts.append(f"\n\nUsage:\n\n\t{PROGRAM_NAME} {cmd.name} {cmd.usage}\n")
        parts.append(cmd.long)

    parts.append('"""\n__all__ = []\n')
    return "".join(parts).encode("utf-8")


def write_documentation(registry: CommandRegistry, path) -> None:
    """Write the reference document to path, replacing any existing file."""
    Path(path).write_bytes(render_documentation(registry))
