"""Custom Textual messages for Muxpick.

Modified: 2026-10-16
"""

from textual.message import Message

from ..core.actions import Action


class ActionRequested(Message):
    """Message sent when a key press maps to an action."""

    def __init__(self, action: Action):
        super().__init__()
        self.action = action
