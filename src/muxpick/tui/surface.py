"""Terminal surface handed to the controller.

The controller leaves the surface before giving the terminal to an external
process (tmux attach, a diff popup) and re-enters it afterwards. With
Textual, leaving means suspending the application driver.

Modified: 2026-10-16
"""

import logging
from contextlib import ExitStack
from typing import Optional

from textual.app import App, SuspendNotSupported


logger = logging.getLogger(__name__)


class TerminalSurface:
    """Interface the controller uses to release and re-acquire the terminal."""

    def enter(self) -> None:
        """(Re)acquire the alternate screen and raw input."""
        raise NotImplementedError

    def exit(self) -> None:
        """Release the terminal to its original mode."""
        raise NotImplementedError

    def draw(self) -> None:
        """Render one frame."""
        raise NotImplementedError


class TextualSurface(TerminalSurface):
    """Surface backed by a running Textual app.

    ``exit`` and ``enter`` are idempotent, so the app can always call
    ``enter`` before shutting down to leave the driver in a consistent state.
    """

    def __init__(self, app: App):
        self.app = app
        self._suspension: Optional[ExitStack] = None

    @property
    def suspended(self) -> bool:
        return self._suspension is not None

    def exit(self) -> None:
        if self._suspension is not None:
            return

        stack = ExitStack()
        try:
            stack.enter_context(self.app.suspend())
        except SuspendNotSupported:
            logger.debug("Driver cannot suspend; keeping the screen")
            return
        self._suspension = stack

    def enter(self) -> None:
        if self._suspension is None:
            return

        stack, self._suspension = self._suspension, None
        stack.close()
        self.draw()

    def draw(self) -> None:
        self.app.refresh(layout=True)
