"""
Tests for the command line interface.

Created: 2026-10-16
"""

from unittest.mock import AsyncMock, patch

import pytest
from click.testing import CliRunner

from muxpick import __version__
from muxpick.cli import cli
from muxpick.core.exceptions import TmuxError
from muxpick.tui.controller import View


@pytest.fixture
def runner(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("MUXPICK_LOG_FILE", str(tmp_path / "muxpick.log"))
    return CliRunner()


def test_version(runner):
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_keys(runner):
    result = runner.invoke(cli, ["keys"])

    assert result.exit_code == 0
    assert "Navigation" in result.output
    assert "New worktree branch" in result.output


@pytest.mark.parametrize(
    "args,view",
    [
        ([], View.SESSION_PICKER),
        (["sessions"], View.SESSION_PICKER),
        (["palette"], View.COMMAND_PALETTE),
        (["files"], View.FILE_PICKER),
        (["worktrees"], View.WORKTREE_PICKER),
        (["buffers"], View.BUFFER_PICKER),
    ],
)
def test_launch_views(runner, args, view):
    with patch("muxpick.tui.app.run_app", new_callable=AsyncMock) as run_app:
        result = runner.invoke(cli, args)

    assert result.exit_code == 0
    run_app.assert_called_once()
    assert run_app.call_args[1]["initial_view"] is view


def test_launch_error(runner):
    with patch(
        "muxpick.tui.app.run_app",
        new_callable=AsyncMock,
        side_effect=TmuxError("no server running"),
    ):
        result = runner.invoke(cli, ["sessions"])

    assert result.exit_code == 1
    assert "✗ no server running" in result.output


def test_invalid_config(runner, tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("tui: [unclosed\n")

    result = runner.invoke(cli, ["--config", str(config_file), "status"])

    assert result.exit_code == 1
    assert "✗ Invalid config file" in result.output


def test_wrong_typed_config_value(runner, tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("tui:\n  tick_rate_ms: fast\n")

    with patch("muxpick.tui.app.run_app", new_callable=AsyncMock) as run_app:
        result = runner.invoke(cli, ["--config", str(config_file), "sessions"])

    assert result.exit_code == 1
    assert "✗ tui.tick_rate_ms must be an integer" in result.output
    run_app.assert_not_called()


def test_status(runner, tmp_path):
    with patch("muxpick.cli.shutil.which", return_value=None), patch(
        "muxpick.cli.GitClient.is_git_repo", return_value=False
    ), patch("muxpick.cli.discover_sockets", return_value=[]):
        result = runner.invoke(cli, ["status"])

    assert result.exit_code == 0
    assert f"Muxpick v{__version__}" in result.output
    assert "tmux not found" in result.output
    assert "No running servers found" in result.output
    assert "using defaults" in result.output
