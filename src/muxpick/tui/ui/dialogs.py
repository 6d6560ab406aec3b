"""Modal dialogs: free-text input and yes/no confirmation.

A dialog returns a follow-up action only when it resolves. The controller
then clears it and dispatches that action on its own.

Modified: 2026-10-16
"""

from typing import Optional

from rich.align import Align
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.text import Text

from ...core import actions
from ...core.actions import Action, ConfirmCallback, InputCallback
from .component import Component


DIALOG_WIDTH = 60


class InputDialog(Component):
    """Single-line text prompt, e.g. for a new session name."""

    def __init__(self, title: str, callback: InputCallback):
        self.title = title
        self.callback = callback
        self.text = ""

    def handle_action(self, action: Action) -> Optional[Action]:
        if isinstance(action, actions.Character):
            self.text += action.char
        elif isinstance(action, actions.Backspace):
            self.text = self.text[:-1]
        elif isinstance(action, actions.Enter):
            value = self.text.strip()
            if not value:
                return actions.CloseDialog()
            return self.callback.to_action(value)
        elif isinstance(action, actions.Escape):
            return actions.CloseDialog()
        return None

    def render(self, height: int = 0) -> RenderableType:
        prompt = Text.assemble(("> ", "bold cyan"), self.text, ("█", "dim"))
        return Panel(
            prompt,
            title=self.title,
            border_style="bright_blue",
            width=DIALOG_WIDTH,
            padding=(1, 2),
        )

    def help_text(self) -> str:
        return "Enter:confirm  Esc:cancel"


class ConfirmDialog(Component):
    """Yes/no question; Yes is selected by default."""

    def __init__(self, title: str, message: str, callback: ConfirmCallback):
        self.title = title
        self.message = message
        self.callback = callback
        self.selected = True

    def handle_action(self, action: Action) -> Optional[Action]:
        if isinstance(
            action,
            (actions.MoveUp, actions.MoveDown, actions.MoveLeft, actions.MoveRight),
        ):
            self.selected = not self.selected
        elif isinstance(action, actions.Character):
            if action.char in ("y", "Y"):
                self.selected = True
            elif action.char in ("n", "N"):
                self.selected = False
        elif isinstance(action, actions.Enter):
            if self.selected:
                return self.callback.to_action()
            return actions.CloseDialog()
        elif isinstance(action, actions.Escape):
            return actions.CloseDialog()
        return None

    def render(self, height: int = 0) -> RenderableType:
        yes_style = "bold reverse green" if self.selected else "dim"
        no_style = "dim" if self.selected else "bold reverse red"
        buttons = Text.assemble((" Yes ", yes_style), "   ", (" No ", no_style))
        return Panel(
            Group(Text(self.message), Text(""), Align.center(buttons)),
            title=self.title,
            border_style="yellow",
            width=DIALOG_WIDTH,
            padding=(1, 2),
        )

    def help_text(self) -> str:
        return "Y:yes  N:no  ←→:select  Esc:cancel"
