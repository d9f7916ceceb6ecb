"""Tests for the dispatcher and the help pathway."""

from unittest.mock import patch

import pytest
from conftest import Recorder, fake_command

from mobile_bootstrap.cli import Dispatcher, main
from mobile_bootstrap.errors import UsageTemplateError
from mobile_bootstrap.registry import CommandRegistry


def _out(settings):
    return settings.stdout.getvalue()


def _err(settings):
    return settings.stderr.getvalue()


# ---------------------------------------------------------------------------
# Dispatch to commands
# ---------------------------------------------------------------------------


def test_every_registered_command_runs_once(settings, registry):
    for name in registry.names():
        assert Dispatcher(settings).dispatch([name]) == 0
    for cmd in registry:
        assert len(cmd.run.calls) == 1


def test_flags_and_args_reach_entry_point(settings, registry):
    assert Dispatcher(settings).dispatch(["build", "-v", "pkg/a", "pkg/b"]) == 0
    name, values, args = registry.lookup("build").run.calls[0]
    assert name == "build"
    assert values["verbose"] is True
    assert args == ["pkg/a", "pkg/b"]


def test_unknown_command_exits_2(settings, registry):
    assert Dispatcher(settings).dispatch(["frobnicate"]) == 2
    err = _err(settings)
    assert "unknown subcommand 'frobnicate'" in err
    assert "mobile-bootstrap help" in err
    assert all(not cmd.run.calls for cmd in registry)


def test_no_arguments_prints_usage_to_stderr(settings):
    assert Dispatcher(settings).dispatch([]) == 2
    assert "Commands:" in _err(settings)
    assert _out(settings) == ""


def test_leading_dash_is_usage_error(settings, registry):
    assert Dispatcher(settings).dispatch(["-h"]) == 2
    assert "Commands:" in _err(settings)
    assert all(not cmd.run.calls for cmd in registry)


def test_bad_flag_prints_command_usage_and_exits_1(settings, registry):
    assert Dispatcher(settings).dispatch(["build", "--bad-flag"]) == 1
    assert _out(settings).startswith("usage: mobile-bootstrap build [-v] args\n")
    assert "Build does the build thing." in _out(settings)
    assert "--bad-flag" in _err(settings)
    assert not registry.lookup("build").run.calls


def test_failure_with_message(settings):
    registry = CommandRegistry([fake_command("build", run=Recorder(error="boom"))])
    settings.registry = registry
    assert Dispatcher(settings).dispatch(["build"]) == 1
    assert _err(settings) == "mobile-bootstrap: boom\n"


def test_failure_with_empty_message_is_silent(settings):
    registry = CommandRegistry([fake_command("build", run=Recorder(error=""))])
    settings.registry = registry
    assert Dispatcher(settings).dispatch(["build"]) == 1
    assert _err(settings) == ""
    assert _out(settings) == ""


def test_program_name_used_in_diagnostics(settings):
    settings.program = "mb"
    settings.registry = CommandRegistry(
        [fake_command("build", run=Recorder(error="boom"))]
    )
    Dispatcher(settings).dispatch(["build"])
    assert _err(settings) == "mb: boom\n"


# ---------------------------------------------------------------------------
# Project config defaults
# ---------------------------------------------------------------------------


def test_project_config_sets_flag_defaults(settings, registry):
    (settings.project_root / "mobile.toml").write_text(
        "[build]\nverbose = true\n", encoding="utf-8"
    )
    assert Dispatcher(settings).dispatch(["build"]) == 0
    _, values, _ = registry.lookup("build").run.calls[0]
    assert values["verbose"] is True


def test_invalid_project_config_fails_command(settings, registry):
    (settings.project_root / "mobile.toml").write_text("[build\n", encoding="utf-8")
    assert Dispatcher(settings).dispatch(["build"]) == 1
    assert "mobile.toml" in _err(settings)
    assert not registry.lookup("build").run.calls


def test_undecodable_project_config_fails_command(settings, registry):
    (settings.project_root / "mobile.toml").write_bytes(b'[build]\nx = "\xff"\n')
    assert Dispatcher(settings).dispatch(["build"]) == 1
    assert _err(settings).startswith("mobile-bootstrap: ")
    assert "mobile.toml" in _err(settings)
    assert not registry.lookup("build").run.calls


def test_unreadable_project_config_fails_command(settings, registry):
    (settings.project_root / "mobile.toml").mkdir()
    assert Dispatcher(settings).dispatch(["build"]) == 1
    assert _err(settings).startswith("mobile-bootstrap: ")
    assert "mobile.toml" in _err(settings)
    assert not registry.lookup("build").run.calls


@pytest.mark.parametrize(
    "toml, message",
    [
        ("[build]\nverbsoe = true\n", "has no flag 'verbsoe'"),
        ('[build]\nargs = "x"\n', "has no flag 'args'"),
        ('[build]\nverbose = "no"\n', "verbose must be bool, not str"),
    ],
)
def test_bad_project_config_keys_fail_command(settings, registry, toml, message):
    (settings.project_root / "mobile.toml").write_text(toml, encoding="utf-8")
    assert Dispatcher(settings).dispatch(["build"]) == 1
    assert message in _err(settings)
    assert not registry.lookup("build").run.calls


def test_flags_may_follow_positionals(settings, registry):
    assert Dispatcher(settings).dispatch(["build", "pkg/a", "-v", "pkg/b"]) == 0
    _, values, args = registry.lookup("build").run.calls[0]
    assert values["verbose"] is True
    assert args == ["pkg/a", "pkg/b"]


def test_help_ignores_broken_project_config(settings):
    (settings.project_root / "mobile.toml").write_text("[build\n", encoding="utf-8")
    assert Dispatcher(settings).dispatch(["help"]) == 0


# ---------------------------------------------------------------------------
# Help pathway
# ---------------------------------------------------------------------------


def test_help_lists_commands_in_order(settings, registry):
    assert Dispatcher(settings).dispatch(["help"]) == 0
    out = _out(settings)
    positions = []
    for cmd in registry:
        line = f"\t{cmd.name:11s} {cmd.short}"
        assert line in out
        positions.append(out.index(line))
    assert positions == sorted(positions)
    assert _err(settings) == ""


def test_help_for_one_command(settings):
    assert Dispatcher(settings).dispatch(["help", "bind"]) == 0
    assert _out(settings) == (
        "usage: mobile-bootstrap bind [-v] args\n\nBind does the bind thing.\n"
    )


def test_help_unknown_topic(settings):
    assert Dispatcher(settings).dispatch(["help", "frobnicate"]) == 2
    assert "Unknown help topic 'frobnicate'" in _err(settings)
    assert "Commands:" not in _out(settings)
    assert "Commands:" not in _err(settings)


@pytest.mark.parametrize(
    "args",
    [
        ["help", "build", "bind"],
        ["help", "a", "b", "c"],
        ["help", "documentation", "out.py", "extra"],
    ],
)
def test_help_too_many_arguments(settings, args):
    assert Dispatcher(settings).dispatch(args) == 2
    assert "Too many arguments given." in _err(settings)


def test_help_documentation_without_path_is_unknown_topic(settings):
    assert Dispatcher(settings).dispatch(["help", "documentation"]) == 2
    assert "Unknown help topic 'documentation'" in _err(settings)


def test_help_documentation_writes_file(settings, tmp_path):
    target = tmp_path / "doc.py"
    assert Dispatcher(settings).dispatch(["help", "documentation", str(target)]) == 0
    assert "DO NOT EDIT" in target.read_text(encoding="utf-8")
    assert _out(settings) == ""


def test_help_documentation_write_failure_exits_1(settings, tmp_path):
    target = tmp_path / "missing" / "doc.py"
    assert Dispatcher(settings).dispatch(["help", "documentation", str(target)]) == 1
    assert _err(settings).startswith("mobile-bootstrap: ")


# ---------------------------------------------------------------------------
# Startup
# ---------------------------------------------------------------------------


def test_broken_usage_template_aborts_at_startup(settings):
    with patch(
        "mobile_bootstrap.cli.render_usage",
        side_effect=UsageTemplateError("cannot render usage template"),
    ):
        with pytest.raises(UsageTemplateError):
            Dispatcher(settings)


def test_main_uses_shipped_registry(capsys):
    assert main(["help"]) == 0
    out = capsys.readouterr().out
    for name in ("bind", "build", "init", "install", "version"):
        assert f"\t{name:11s} " in out


def test_main_unknown_command(capsys):
    assert main(["frobnicate"]) == 2
    assert "unknown subcommand 'frobnicate'" in capsys.readouterr().err
