"""Session picker: switch to, create or kill tmux sessions.

Modified: 2026-10-16
"""

from typing import Optional

from ....core import actions
from ....core.actions import Action, ConfirmKillSession, InputCallback
from ....core.models import TmuxSession
from ....core.tmux_client import TmuxClient
from ..component import DEFAULT_PAGE_SIZE, Picker
from ..fuzzy_list import FuzzyList


class SessionPicker(Picker[TmuxSession]):
    """Lists tmux sessions. Always live; refreshed whenever it is shown."""

    def __init__(self, tmux: TmuxClient, page_size: int = DEFAULT_PAGE_SIZE):
        super().__init__(
            FuzzyList("Sessions", TmuxSession.display_name, TmuxSession.search_text),
            page_size=page_size,
        )
        self.tmux = tmux

    def refresh(self) -> None:
        """Reload sessions from tmux. Errors propagate."""
        self.fuzzy_list.set_items(self.tmux.list_sessions())

    def on_enter(self, item: TmuxSession) -> Optional[Action]:
        return actions.SwitchSession(item.name)

    def handles_command_char(self, char: str) -> bool:
        return char in ("n", "d")

    def on_command_char(self, char: str, item: Optional[TmuxSession]) -> Optional[Action]:
        if char == "n":
            return actions.ShowInput("New Session", InputCallback.CREATE_SESSION)

        if item is None:
            return None
        return actions.ShowConfirm(
            "Delete Session",
            f"Delete session '{item.name}'?",
            ConfirmKillSession(item.name),
        )

    def help_text(self) -> str:
        return "Enter:switch  n:new  d:delete  Esc:back"
