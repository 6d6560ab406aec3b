"""Modal screen that displays the controller's open dialog.

The screen only draws; keys still reach the app, which routes them
through the controller.

Modified: 2026-10-16
"""

from rich.console import RenderableType
from textual.app import ComposeResult
from textual.screen import ModalScreen
from textual.widgets import Static


class DialogScreen(ModalScreen):
    """Centered overlay for an input or confirm dialog."""

    DEFAULT_CSS = """
    DialogScreen {
        align: center middle;
    }

    DialogScreen > Static#dialog-body {
        width: auto;
        height: auto;
        background: $surface;
    }
    """

    def __init__(self, renderable: RenderableType) -> None:
        """Initialize the screen.

        Args:
            renderable: Initial dialog rendering
        """
        super().__init__()
        self._initial = renderable

    def compose(self) -> ComposeResult:
        """Compose the modal layout."""
        yield Static(self._initial, id="dialog-body")

    def update(self, renderable: RenderableType) -> None:
        """Redraw the dialog."""
        if self.is_mounted:
            self.query_one("#dialog-body", Static).update(renderable)
        else:
            self._initial = renderable
