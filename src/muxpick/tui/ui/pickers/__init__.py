"""
Pickers shown by the Muxpick TUI.

Modified: 2026-10-16
"""

from .buffer_picker import BufferPicker
from .command_palette import CommandPalette
from .file_picker import FilePicker
from .session_picker import SessionPicker
from .worktree_picker import WorktreePicker

__all__ = [
    "BufferPicker",
    "CommandPalette",
    "FilePicker",
    "SessionPicker",
    "WorktreePicker",
]
