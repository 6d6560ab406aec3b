"""Component contract for views and dialogs.

The controller only ever talks to the active view or dialog through
``handle_action``, ``render`` and ``help_text``.

Modified: 2026-10-16
"""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from rich.console import RenderableType

from ...core import actions
from ...core.actions import Action
from .fuzzy_list import FuzzyList


T = TypeVar("T")

DEFAULT_PAGE_SIZE = 10


class Component(ABC):
    """A view or dialog the controller can route actions to."""

    @abstractmethod
    def handle_action(self, action: Action) -> Optional[Action]:
        """Consume an action, optionally returning a follow-up action.

        May raise a MuxpickError from a collaborator call.
        """

    @abstractmethod
    def render(self, height: int) -> RenderableType:
        """Build the renderable for the available height."""

    @abstractmethod
    def help_text(self) -> str:
        """Fixed hint line for this component."""


class Picker(Component, Generic[T]):
    """A component wrapping a FuzzyList with the standard key handling.

    Subclasses implement ``on_enter`` and may claim single-character
    commands through ``on_command_char``; those are only consulted while
    the query is empty, otherwise the character goes to the filter.
    """

    def __init__(self, fuzzy_list: FuzzyList[T], page_size: int = DEFAULT_PAGE_SIZE):
        self.fuzzy_list = fuzzy_list
        self.page_size = page_size

    def refresh(self) -> None:
        """Re-query the underlying data source."""

    @abstractmethod
    def on_enter(self, item: T) -> Optional[Action]:
        """Commit the selected item."""

    def on_command_char(self, char: str, item: Optional[T]) -> Optional[Action]:
        """Return an action for a command character, or None to filter."""
        return None

    def handles_command_char(self, char: str) -> bool:
        return False

    def handle_action(self, action: Action) -> Optional[Action]:
        fuzzy_list = self.fuzzy_list

        if isinstance(action, actions.MoveUp):
            fuzzy_list.move_up()
        elif isinstance(action, actions.MoveDown):
            fuzzy_list.move_down()
        elif isinstance(action, actions.PageUp):
            fuzzy_list.page_up(self.page_size)
        elif isinstance(action, actions.PageDown):
            fuzzy_list.page_down(self.page_size)
        elif isinstance(action, actions.Character):
            if not fuzzy_list.query and self.handles_command_char(action.char):
                return self.on_command_char(action.char, fuzzy_list.selected())
            fuzzy_list.push_char(action.char)
        elif isinstance(action, actions.Backspace):
            fuzzy_list.pop_char()
        elif isinstance(action, actions.Enter):
            item = fuzzy_list.selected()
            if item is None:
                return None
            return self.on_enter(item)
        elif isinstance(action, actions.Escape):
            if not fuzzy_list.query:
                return actions.GoBack()
            fuzzy_list.clear_query()
        else:
            return None

        return actions.Render()

    def render(self, height: int) -> RenderableType:
        return self.fuzzy_list.render(height)
