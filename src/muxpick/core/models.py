"""
Core data models for Muxpick.

Every item a picker shows exposes ``display_name()`` for the list row and
``search_text()`` for fuzzy filtering.

Modified: 2026-10-16
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Any


# Field separator used in tmux ``-F`` format strings
TMUX_FIELD_SEP = "\t"


@dataclass(frozen=True)
class TmuxSession:
    """A tmux session as reported by ``tmux list-sessions``."""

    name: str
    windows: int = 1
    attached: bool = False
    path: Optional[Path] = None

    FORMAT = TMUX_FIELD_SEP.join(
        ["#{session_name}", "#{session_windows}", "#{session_attached}", "#{session_path}"]
    )

    @classmethod
    def from_tmux_line(cls, line: str) -> "TmuxSession":
        """
        Create a TmuxSession from one line of ``list-sessions -F FORMAT`` output.

        Args:
            line: Tab-separated name, window count, attached count, path

        Returns:
            TmuxSession instance
        """
        fields = line.split(TMUX_FIELD_SEP)
        name = fields[0]

        try:
            windows = int(fields[1]) if len(fields) > 1 else 1
        except ValueError:
            windows = 1

        try:
            attached = int(fields[2]) > 0 if len(fields) > 2 else False
        except ValueError:
            attached = False

        path = Path(fields[3]) if len(fields) > 3 and fields[3] else None

        return cls(name=name, windows=windows, attached=attached, path=path)

    def display_name(self) -> str:
        suffix = " (attached)" if self.attached else ""
        plural = "window" if self.windows == 1 else "windows"
        return f"{self.name}: {self.windows} {plural}{suffix}"

    def search_text(self) -> str:
        return self.name


@dataclass(frozen=True)
class GitWorktree:
    """
    A git worktree as reported by ``git worktree list --porcelain``.

    The first entry git reports is the main worktree; it can never be
    deleted or merged.
    """

    path: Path
    branch: str = ""
    head: str = ""
    is_main: bool = False
    has_changes: bool = False

    def display_name(self) -> str:
        branch = self.branch or f"(detached {self.head[:7]})"
        markers = ""
        if self.is_main:
            markers += " [main]"
        if self.has_changes:
            markers += " *"
        return f"{branch}{markers}  {self.path}"

    def search_text(self) -> str:
        return f"{self.branch} {self.path.name}"


@dataclass(frozen=True)
class NvimBuffer:
    """A listed buffer in a running Neovim instance."""

    bufnr: int
    name: str
    modified: bool = False

    @classmethod
    def from_buffer_info(cls, info: Dict[str, Any]) -> "NvimBuffer":
        """Create from one entry of Neovim's ``getbufinfo()`` result."""
        return cls(
            bufnr=int(info["bufnr"]),
            name=info.get("name") or "",
            modified=bool(info.get("changed", 0)),
        )

    def display_name(self) -> str:
        name = Path(self.name).name if self.name else "[No Name]"
        modified = " [+]" if self.modified else ""
        parent = str(Path(self.name).parent) if self.name else ""
        return f"{self.bufnr:>3} {name}{modified}  {parent}".rstrip()

    def search_text(self) -> str:
        return self.name


@dataclass(frozen=True)
class FileEntry:
    """A directory entry shown by the file picker."""

    path: Path
    is_dir: bool
    name: str

    def display_name(self) -> str:
        if self.is_dir:
            return f"📁 {self.name}/"
        return f"   {self.name}"

    def search_text(self) -> str:
        return self.name


@dataclass(frozen=True)
class BufferEntry:
    """A Neovim buffer together with the server socket that owns it."""

    socket: Path
    buffer: NvimBuffer

    def display_name(self) -> str:
        return self.buffer.display_name()

    def search_text(self) -> str:
        return self.buffer.search_text()


class PaletteCommand(Enum):
    """Commands reachable from the command palette."""

    OPEN_FILE = "open_file"
    NEW_SESSION = "new_session"
    KILL_SESSION = "kill_session"
    SWITCH_BUFFER = "switch_buffer"
    LIST_WORKTREES = "list_worktrees"
    CREATE_WORKTREE = "create_worktree"
    GIT_STATUS = "git_status"

    @property
    def requires_git(self) -> bool:
        return self in _GIT_COMMANDS

    def display_name(self) -> str:
        return _COMMAND_TEXT[self][0]

    def description(self) -> str:
        return _COMMAND_TEXT[self][1]

    def search_text(self) -> str:
        return f"{self.display_name()} {self.description()}"

    @classmethod
    def all(cls) -> List["PaletteCommand"]:
        """All commands, in palette order."""
        return list(cls)

    @classmethod
    def non_git_commands(cls) -> List["PaletteCommand"]:
        """Commands usable outside a git repository."""
        return [cmd for cmd in cls if not cmd.requires_git]


_GIT_COMMANDS = {
    PaletteCommand.LIST_WORKTREES,
    PaletteCommand.CREATE_WORKTREE,
    PaletteCommand.GIT_STATUS,
}

_COMMAND_TEXT = {
    PaletteCommand.OPEN_FILE: ("Open File", "Browse and open a file in Neovim"),
    PaletteCommand.NEW_SESSION: ("New Session", "Create a new tmux session"),
    PaletteCommand.KILL_SESSION: ("Kill Session", "Kill the current tmux session"),
    PaletteCommand.SWITCH_BUFFER: ("Nvim Buffers", "Jump to an open Neovim buffer"),
    PaletteCommand.LIST_WORKTREES: ("Worktrees", "List and switch git worktrees"),
    PaletteCommand.CREATE_WORKTREE: ("New Worktree", "Create a worktree for a new branch"),
    PaletteCommand.GIT_STATUS: ("Git Diff", "Show uncommitted changes in a popup"),
}
