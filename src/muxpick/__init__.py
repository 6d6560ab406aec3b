"""
Muxpick - tmux session, worktree and file picker

A keyboard-driven terminal picker for tmux sessions, git worktrees,
files and Neovim buffers.

Created: 2026-10-16
"""

__version__ = "0.1.0"
__author__ = "Ryan Young"
