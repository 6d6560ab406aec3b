"""Help bar widget for Muxpick.

Shows the active view and the keyboard hints for the current mode.

Modified: 2026-10-16
"""

from typing import Optional

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Static
from textual.widget import Widget
from textual.reactive import reactive


class HelpBar(Widget):
    """One-line bar: context on the left, key hints on the right."""

    DEFAULT_CSS = """
    HelpBar {
        height: 1;
        background: $panel;
        color: $text;
        dock: bottom;
    }

    HelpBar > Horizontal {
        width: 100%;
        height: 1;
    }

    HelpBar .help-context {
        width: auto;
        padding: 0 1;
        text-style: bold;
        color: $accent;
    }

    HelpBar .help-hints {
        width: 1fr;
        padding: 0 1;
        color: $text-muted;
    }
    """

    # Reactive properties
    context = reactive("")
    hints = reactive("")

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.context_widget: Optional[Static] = None
        self.hints_widget: Optional[Static] = None

    def compose(self) -> ComposeResult:
        """Create help bar layout."""
        with Horizontal():
            self.context_widget = Static("", classes="help-context")
            self.hints_widget = Static("", classes="help-hints")

            yield self.context_widget
            yield self.hints_widget

    def update_context(self, context: str) -> None:
        """Update the view name shown on the left."""
        self.context = context
        if self.context_widget:
            self.context_widget.update(context)

    def update_hints(self, hints: str) -> None:
        """Update keyboard hints for the current mode."""
        self.hints = hints
        if self.hints_widget:
            self.hints_widget.update(hints)
