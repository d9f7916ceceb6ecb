"""
Top-level usage text.

The static boilerplate lives in templates/usage.txt and is rendered with
string.Template. Fields:
    $program   -- canonical program name
    $commands  -- one line per registered command, in registry order
"""

from pathlib import Path
from string import Template

from mobile_bootstrap import PROGRAM_NAME
from mobile_bootstrap.errors import UsageTemplateError
from mobile_bootstrap.registry import CommandRegistry

_TEMPLATES_DIR = Path(__file__).parent / "templates"
_NAME_WIDTH = 11


def _command_lines(registry: CommandRegistry) -> str:
    return "".join(f"\n\t{cmd.name:{_NAME_WIDTH}s} {cmd.short}" for cmd in registry)


def render_usage(registry: CommandRegistry) -> str:
    """Render the full usage text for registry."""
    try:
        template_text = (_TEMPLATES_DIR / "usage.txt").read_text(encoding="utf-8")
        return Template(template_text).substitute(
            program=PROGRAM_NAME,
            commands=_command_lines(registry),
        )
    except (OSError, KeyError, ValueError) as exc:
        raise UsageTemplateError(f"cannot render usage template: {exc}") from exc
