"""
UI components for Muxpick TUI.

Modified: 2026-10-16
"""

__all__ = [
    "component",
    "dialogs",
    "fuzzy_list",
    "help_bar",
    "pickers",
]
