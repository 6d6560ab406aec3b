"""
Core logic for Muxpick.

Domain models, the action vocabulary and the tmux/git/Neovim clients.
Nothing in here depends on Textual.

Modified: 2026-10-16
"""

from muxpick.core.exceptions import (
    MuxpickError,
    TmuxError,
    GitError,
    EditorError,
    DispatchLoopError,
    ConfigurationError,
)

__all__ = [
    "MuxpickError",
    "TmuxError",
    "GitError",
    "EditorError",
    "DispatchLoopError",
    "ConfigurationError",
]
