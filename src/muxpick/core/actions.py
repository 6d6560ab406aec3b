"""
Action vocabulary for Muxpick.

Every key press is mapped to an Action, and every component answers an
Action with an optional follow-up Action. Actions are immutable values that
carry all the data needed to execute them, including the callback tag a
dialog resolves into.

Modified: 2026-10-16
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from muxpick.core.models import PaletteCommand


class Action:
    """Base class for all actions."""

    @property
    def kind(self) -> str:
        return type(self).__name__


@dataclass(frozen=True)
class Quit(Action):
    pass


@dataclass(frozen=True)
class GoBack(Action):
    pass


@dataclass(frozen=True)
class Render(Action):
    pass


# Navigation


@dataclass(frozen=True)
class MoveUp(Action):
    pass


@dataclass(frozen=True)
class MoveDown(Action):
    pass


@dataclass(frozen=True)
class MoveLeft(Action):
    pass


@dataclass(frozen=True)
class MoveRight(Action):
    pass


@dataclass(frozen=True)
class PageUp(Action):
    pass


@dataclass(frozen=True)
class PageDown(Action):
    pass


# Input


@dataclass(frozen=True)
class Character(Action):
    char: str


@dataclass(frozen=True)
class Backspace(Action):
    pass


@dataclass(frozen=True)
class Enter(Action):
    pass


@dataclass(frozen=True)
class Escape(Action):
    pass


# Sessions


@dataclass(frozen=True)
class SwitchSession(Action):
    name: str


@dataclass(frozen=True)
class CreateSession(Action):
    name: str
    path: Optional[Path] = None


@dataclass(frozen=True)
class KillSession(Action):
    name: str


# Files and buffers


@dataclass(frozen=True)
class OpenFile(Action):
    path: Path


@dataclass(frozen=True)
class OpenBuffer(Action):
    socket: Path
    bufnr: int


# Worktrees


@dataclass(frozen=True)
class SwitchWorktree(Action):
    path: Path


@dataclass(frozen=True)
class CreateWorktree(Action):
    branch: str


@dataclass(frozen=True)
class DeleteWorktree(Action):
    path: Path


@dataclass(frozen=True)
class MergeWorktree(Action):
    path: Path


# Command palette


@dataclass(frozen=True)
class ExecuteCommand(Action):
    command: PaletteCommand


# Dialog callbacks


class InputCallback(Enum):
    """What an input dialog does with the submitted text."""

    CREATE_SESSION = "create_session"
    CREATE_WORKTREE = "create_worktree"

    def to_action(self, text: str) -> Action:
        if self is InputCallback.CREATE_SESSION:
            return CreateSession(text, None)
        return CreateWorktree(text)


class ConfirmCallback:
    """What a confirm dialog does when the user answers yes."""

    def to_action(self) -> Action:
        raise NotImplementedError


@dataclass(frozen=True)
class ConfirmDeleteWorktree(ConfirmCallback):
    path: Path

    def to_action(self) -> Action:
        return DeleteWorktree(self.path)


@dataclass(frozen=True)
class ConfirmMergeWorktree(ConfirmCallback):
    path: Path

    def to_action(self) -> Action:
        return MergeWorktree(self.path)


@dataclass(frozen=True)
class ConfirmKillSession(ConfirmCallback):
    name: str

    def to_action(self) -> Action:
        return KillSession(self.name)


# Dialogs


@dataclass(frozen=True)
class ShowInput(Action):
    title: str
    callback: InputCallback


@dataclass(frozen=True)
class ShowConfirm(Action):
    title: str
    message: str
    callback: ConfirmCallback


@dataclass(frozen=True)
class CloseDialog(Action):
    pass


# View switching


@dataclass(frozen=True)
class ShowSessionPicker(Action):
    pass


@dataclass(frozen=True)
class ShowCommandPalette(Action):
    pass


@dataclass(frozen=True)
class ShowFilePicker(Action):
    pass


@dataclass(frozen=True)
class ShowWorktreePicker(Action):
    pass


@dataclass(frozen=True)
class ShowBufferPicker(Action):
    pass


# Git


@dataclass(frozen=True)
class ShowGitDiff(Action):
    pass
