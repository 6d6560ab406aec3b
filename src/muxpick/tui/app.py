"""Main Muxpick TUI application.

Textual owns the event loop: key presses become actions, the controller
handles them, and a timer redraws the active view.

Modified: 2026-10-16
"""

import asyncio
from typing import Optional
import logging

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Static
from textual import events

from ..core import actions
from ..core.exceptions import MuxpickError
from ..config.settings import Settings

from .controller import AppController, View
from .messages import ActionRequested
from .keybindings import key_to_action
from .surface import TextualSurface
from .ui.dialogs import InputDialog
from .ui.fuzzy_list import CHROME_ROWS
from .ui.help_bar import HelpBar
from .ui.modals import DialogScreen


logger = logging.getLogger(__name__)


class MuxpickApp(App):
    """Main application class for Muxpick."""

    TITLE = "Muxpick"
    SUB_TITLE = "tmux session picker"

    CSS = """
    Screen {
        background: $background;
    }

    #view {
        height: 1fr;
        padding: 0 1;
    }
    """

    # Keybindings
    BINDINGS = [
        Binding("ctrl+c", "request_quit", "Quit", show=False, priority=True),
    ]

    def __init__(self, controller: AppController, settings: Optional[Settings] = None):
        """Initialize the application.

        Args:
            controller: Action router holding all picker state
            settings: Loaded settings (defaults to the controller's)
        """
        super().__init__()

        self.controller = controller
        self.settings = settings or controller.settings
        if controller.surface is None:
            controller.surface = TextualSurface(self)

        # Error that ended the session, re-raised by run_app
        self.failure: Optional[MuxpickError] = None

        # UI components
        self.help_bar: Optional[HelpBar] = None
        self.dialog_screen: Optional[DialogScreen] = None

    def compose(self) -> ComposeResult:
        """Create the application layout."""
        yield Static("", id="view")

        self.help_bar = HelpBar(id="help-bar")
        yield self.help_bar

    def on_mount(self) -> None:
        """Start the redraw timer."""
        self.set_interval(self.settings.tui.tick_rate_ms / 1000, self.update_display)
        self.update_display()

    def update_display(self) -> None:
        """Redraw the active view, the dialog overlay and the help bar."""
        controller = self.controller

        height = max(self.size.height - 1, CHROME_ROWS + 1)
        self.query_one("#view", Static).update(controller.render_view(height))

        if self.help_bar:
            self.help_bar.update_context(
                f"{controller.view.value}  {controller.current_path}"
            )
            self.help_bar.update_hints(controller.help_text())

        dialog = controller.render_dialog()
        if dialog is not None:
            if self.dialog_screen is None:
                self.dialog_screen = DialogScreen(dialog)
                self.push_screen(self.dialog_screen)
            else:
                self.dialog_screen.update(dialog)
        elif self.dialog_screen is not None:
            self.dialog_screen = None
            self.pop_screen()

    # Action handlers

    def action_request_quit(self) -> None:
        """Quit through the controller."""
        self.post_message(ActionRequested(actions.Quit()))

    def shutdown(self) -> None:
        """Give the terminal back in a consistent state and stop."""
        surface = self.controller.surface
        if surface is not None:
            surface.enter()

        if self.failure is not None:
            self.exit(return_code=1)
        else:
            self.exit()

    # Message handlers

    def on_action_requested(self, message: ActionRequested) -> None:
        """Route an action through the controller."""
        try:
            self.controller.dispatch(message.action)
        except MuxpickError as e:
            logger.error(f"Error handling {message.action.kind}: {e}", exc_info=True)
            self.failure = e
            self.shutdown()
            return

        if not self.controller.running:
            self.shutdown()
            return

        self.update_display()

    def on_key(self, event: events.Key) -> None:
        """Handle keyboard events."""
        action = key_to_action(
            event.key,
            event.character,
            text_entry=isinstance(self.controller.dialog, InputDialog),
        )
        if action is None:
            return

        event.stop()
        event.prevent_default()
        self.post_message(ActionRequested(action))


async def run_app(
    settings: Optional[Settings] = None,
    initial_view: View = View.SESSION_PICKER,
) -> None:
    """Run the Muxpick TUI application.

    Args:
        settings: Loaded settings
        initial_view: View shown first

    Raises:
        MuxpickError: If an action failed while the app was running
    """
    settings = settings or Settings.load()
    controller = AppController.create(settings, initial_view=initial_view)

    app = MuxpickApp(controller, settings)
    await app.run_async()

    if app.failure is not None:
        raise app.failure


if __name__ == "__main__":
    asyncio.run(run_app())
