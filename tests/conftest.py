"""Shared test fixtures for Muxpick tests.

Created: 2026-10-16
"""

import pytest
from pathlib import Path
from typing import Optional

from muxpick.config.settings import Settings
from muxpick.core.exceptions import GitError
from muxpick.core.models import GitWorktree, NvimBuffer, TmuxSession
from muxpick.tui.controller import AppController, View

from tests.utils import FakeGit, FakeNvim, FakeSurface, FakeTmux


@pytest.fixture
def sample_sessions():
    """Standard set of tmux sessions."""
    return [
        TmuxSession(name="main", windows=3, attached=True, path=Path("/work")),
        TmuxSession(name="dev", windows=1, path=Path("/work/dev")),
        TmuxSession(name="notes", windows=2, path=Path("/home/user/notes")),
    ]


@pytest.fixture
def sample_worktrees():
    """Main worktree plus two feature worktrees, one dirty."""
    return [
        GitWorktree(path=Path("/src/app"), branch="main", head="a1b2c3d", is_main=True),
        GitWorktree(path=Path("/src/app-feature-x"), branch="feature-x", head="d4e5f6a"),
        GitWorktree(
            path=Path("/src/app-bugfix"), branch="bugfix", head="0badf00", has_changes=True
        ),
    ]


@pytest.fixture
def sample_buffers():
    """Buffers from a single Neovim instance."""
    socket = Path("/run/user/1000/nvim.1234.0")
    return [
        (socket, NvimBuffer(bufnr=1, name="/work/README.md")),
        (socket, NvimBuffer(bufnr=4, name="/work/src/main.py", modified=True)),
    ]


@pytest.fixture
def fake_tmux(sample_sessions):
    return FakeTmux(sample_sessions)


@pytest.fixture
def fake_git(sample_worktrees):
    return FakeGit(sample_worktrees)


@pytest.fixture
def fake_nvim(sample_buffers):
    return FakeNvim(sample_buffers)


@pytest.fixture
def fake_surface():
    return FakeSurface()


@pytest.fixture
def make_controller(fake_tmux, fake_git, fake_nvim, fake_surface, tmp_path):
    """Factory for controllers wired to the fake collaborators.

    Usage:
        controller = make_controller(initial_view=View.FILE_PICKER)
    """

    def factory(
        initial_view: View = View.SESSION_PICKER,
        git=fake_git,
        is_git_repo: bool = True,
        current_path: Optional[Path] = None,
        settings: Optional[Settings] = None,
    ) -> AppController:
        def git_factory(path):
            if git is None:
                raise GitError("not a git repository", command="rev-parse")
            return git

        return AppController(
            tmux=fake_tmux,
            nvim=fake_nvim,
            settings=settings or Settings(),
            current_path=current_path or tmp_path,
            initial_view=initial_view,
            surface=fake_surface,
            git_factory=git_factory,
            git_probe=lambda path: is_git_repo,
        )

    return factory
