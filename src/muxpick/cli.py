"""
CLI entry point for Muxpick.

Modified: 2026-10-16
"""

import asyncio
import shutil
import sys
import click
from pathlib import Path
from typing import Optional

from muxpick import __version__
from muxpick.config.settings import Settings, setup_logging
from muxpick.core.exceptions import MuxpickError
from muxpick.core.git_client import GitClient
from muxpick.core.nvim import discover_sockets
from muxpick.core.tmux_client import TmuxClient
from muxpick.tui.controller import View


def _load_settings(ctx: click.Context) -> Settings:
    """Load settings once per invocation and start logging."""
    settings = ctx.obj.get("settings")
    if settings is None:
        settings = Settings.load(ctx.obj.get("config_path"))
        setup_logging(settings)
        ctx.obj["settings"] = settings
    return settings


def _launch(ctx: click.Context, view: View) -> None:
    """Run the TUI starting on ``view``."""
    try:
        from muxpick.tui.app import run_app

        settings = _load_settings(ctx)
        asyncio.run(run_app(settings, initial_view=view))
    except KeyboardInterrupt:
        click.echo("\nGoodbye!")
    except MuxpickError as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to config file (default: ~/.config/muxpick/config.yaml)",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path]):
    """Muxpick - tmux session, worktree and file picker."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path

    if ctx.invoked_subcommand is None:
        _launch(ctx, View.SESSION_PICKER)


@cli.command()
@click.pass_context
def sessions(ctx: click.Context):
    """Pick a tmux session (default)."""
    _launch(ctx, View.SESSION_PICKER)


@cli.command()
@click.pass_context
def palette(ctx: click.Context):
    """Open the command palette."""
    _launch(ctx, View.COMMAND_PALETTE)


@cli.command()
@click.pass_context
def files(ctx: click.Context):
    """Browse files from the current directory."""
    _launch(ctx, View.FILE_PICKER)


@cli.command()
@click.pass_context
def worktrees(ctx: click.Context):
    """Pick a git worktree of the current repository."""
    _launch(ctx, View.WORKTREE_PICKER)


@cli.command()
@click.pass_context
def buffers(ctx: click.Context):
    """Jump to a buffer of a running Neovim."""
    _launch(ctx, View.BUFFER_PICKER)


@cli.command()
def keys():
    """Show keybindings."""
    from muxpick.tui.keybindings import registry

    click.echo(registry.format_help_text())


@cli.command()
@click.pass_context
def status(ctx: click.Context):
    """Show tool availability and configuration."""
    click.echo(f"Muxpick v{__version__}")

    try:
        settings = _load_settings(ctx)
    except MuxpickError as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)

    click.echo("\ntmux:")
    tmux = TmuxClient()
    if shutil.which(tmux.binary) is None:
        click.echo("  ✗ tmux not found on PATH")
    else:
        try:
            session_list = tmux.list_sessions()
            click.echo(f"  ✓ {len(session_list)} session(s)")
            if tmux.inside_tmux():
                click.echo(f"  Current session: {tmux.current_session()}")
        except MuxpickError as e:
            click.echo(f"  ✗ Error: {e}")

    click.echo("\nGit:")
    cwd = Path.cwd()
    if GitClient.is_git_repo(cwd):
        try:
            git = GitClient(cwd)
            click.echo(f"  ✓ Repository: {git.root}")
            click.echo(f"  Worktrees: {len(git.list_worktrees())}")
        except MuxpickError as e:
            click.echo(f"  ✗ Error: {e}")
    else:
        click.echo(f"  Not a git repository: {cwd}")

    click.echo("\nNeovim:")
    sockets = discover_sockets()
    if sockets:
        for socket in sockets:
            click.echo(f"  ✓ Server: {socket}")
    else:
        click.echo("  No running servers found")

    click.echo("\nConfiguration:")
    config_path = ctx.obj.get("config_path") or Path.home() / ".config" / "muxpick" / "config.yaml"
    state = "loaded" if Path(config_path).exists() else "using defaults"
    click.echo(f"  Config File: {config_path} ({state})")
    click.echo(f"  Log File: {Path(settings.logging.file).expanduser()}")
    click.echo(f"  Log Level: {settings.logging.level}")


if __name__ == "__main__":
    cli()
