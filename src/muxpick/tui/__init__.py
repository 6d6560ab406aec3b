"""
TUI (Terminal User Interface) for Muxpick.

Textual app driving a single-view fuzzy picker with modal dialogs.

Modified: 2026-10-16
"""

__all__ = ["app", "controller", "keybindings", "messages", "surface"]
