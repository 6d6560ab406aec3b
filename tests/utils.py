"""Test utilities and helper functions.

Fake collaborators stand in for tmux, git, Neovim and the terminal so the
controller and pickers can be exercised without subprocesses.

Created: 2026-10-16
"""

import subprocess
from pathlib import Path
from typing import Dict, List, Optional

from muxpick.core import actions
from muxpick.core.actions import Action
from muxpick.core.models import GitWorktree, TmuxSession
from muxpick.tui.controller import AppController
from muxpick.tui.surface import TerminalSurface


class FakeTmux:
    """In-memory tmux that records every call."""

    def __init__(self, sessions: Optional[List[TmuxSession]] = None, current: str = "main"):
        self.sessions = list(sessions or [])
        self.current = current
        self.calls: List[tuple] = []
        self.fail_on: Dict[str, Exception] = {}

    def _record(self, name: str, *args) -> None:
        self.calls.append((name, *args))
        if name in self.fail_on:
            raise self.fail_on[name]

    def call_names(self) -> List[str]:
        return [call[0] for call in self.calls]

    def current_path(self) -> Path:
        self._record("current_path")
        return Path("/work")

    def current_session(self) -> str:
        self._record("current_session")
        return self.current

    def list_sessions(self) -> List[TmuxSession]:
        self._record("list_sessions")
        return list(self.sessions)

    def has_session(self, name: str) -> bool:
        self._record("has_session", name)
        return any(session.name == name for session in self.sessions)

    def switch_session(self, name: str) -> None:
        self._record("switch_session", name)

    def create_session(self, name: str, path: Optional[Path] = None) -> None:
        self._record("create_session", name, path)
        self.sessions.append(TmuxSession(name=name, path=path))

    def kill_session(self, name: str) -> None:
        self._record("kill_session", name)
        self.sessions = [s for s in self.sessions if s.name != name]

    def new_window(self, command, cwd=None) -> None:
        self._record("new_window", list(command), cwd)

    def popup_command(self, command: str, width: str, height: str, cwd=None) -> None:
        self._record("popup_command", command, width, height, cwd)


class FakeGit:
    """In-memory git repository with a fixed worktree list."""

    def __init__(self, worktrees: List[GitWorktree]):
        self.worktrees = list(worktrees)
        self.created: List[str] = []
        self.deleted: List[Path] = []
        self.merged: List[tuple] = []
        self.list_calls = 0
        self.fail_on: Dict[str, Exception] = {}

    def _check(self, name: str) -> None:
        if name in self.fail_on:
            raise self.fail_on[name]

    def list_worktrees(self) -> List[GitWorktree]:
        self.list_calls += 1
        return list(self.worktrees)

    def create_worktree(self, branch: str) -> Path:
        self._check("create_worktree")
        self.created.append(branch)
        main = self.worktrees[0].path
        path = main.parent / f"{main.name}-{branch}"
        self.worktrees.append(GitWorktree(path=path, branch=branch))
        return path

    def delete_worktree(self, path: Path) -> None:
        self._check("delete_worktree")
        self.deleted.append(path)
        self.worktrees = [wt for wt in self.worktrees if wt.path != path]

    def merge_to_main(self, path: Path, branch: str) -> None:
        self._check("merge_to_main")
        self.merged.append((path, branch))
        self.delete_worktree(path)


class FakeNvim:
    """Neovim stand-in with a fixed buffer list."""

    def __init__(self, buffers=None):
        self.buffers = list(buffers or [])
        self.opened_files: List[Path] = []
        self.opened_buffers: List[tuple] = []

    def list_buffers(self):
        return list(self.buffers)

    def open_file(self, path: Path) -> None:
        self.opened_files.append(path)

    def open_buffer(self, socket: Path, bufnr: int) -> None:
        self.opened_buffers.append((socket, bufnr))


class FakeSurface(TerminalSurface):
    """Surface that records enter/exit/draw calls."""

    def __init__(self):
        self.events: List[str] = []

    def enter(self) -> None:
        self.events.append("enter")

    def exit(self) -> None:
        self.events.append("exit")

    def draw(self) -> None:
        self.events.append("draw")


def completed(stdout: str = "", returncode: int = 0, stderr: str = "") -> subprocess.CompletedProcess:
    """Factory for subprocess results.

    Example:
        mock_run.return_value = completed("main\\t1\\t0\\t/work\\n")
    """
    return subprocess.CompletedProcess(
        args=[], returncode=returncode, stdout=stdout, stderr=stderr
    )


def type_text(text: str) -> List[Action]:
    """Character actions for each character of ``text``."""
    return [actions.Character(char) for char in text]


def dispatch_all(controller: AppController, *items: Action) -> None:
    """Dispatch each action in order, as separate key presses."""
    for action in items:
        controller.dispatch(action)
