"""
Modal screens for the Muxpick TUI.

Modified: 2026-10-16
"""

from .dialog_screen import DialogScreen

__all__ = ["DialogScreen"]
