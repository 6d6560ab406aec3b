"""Command palette.

Modified: 2026-10-16
"""

from typing import Optional

from ....core import actions
from ....core.actions import Action
from ....core.models import PaletteCommand
from ..component import DEFAULT_PAGE_SIZE, Picker
from ..fuzzy_list import FuzzyList


def _palette_label(command: PaletteCommand) -> str:
    return f"{command.display_name()} - {command.description()}"


class CommandPalette(Picker[PaletteCommand]):
    """Lists palette commands; git-only commands are hidden outside a repo."""

    def __init__(self, is_git_repo: bool, page_size: int = DEFAULT_PAGE_SIZE):
        super().__init__(
            FuzzyList("Commands", _palette_label, PaletteCommand.search_text),
            page_size=page_size,
        )
        self.is_git_repo = is_git_repo
        self.refresh()

    def refresh(self) -> None:
        if self.is_git_repo:
            commands = PaletteCommand.all()
        else:
            commands = PaletteCommand.non_git_commands()
        self.fuzzy_list.set_items(commands)

    def on_enter(self, item: PaletteCommand) -> Optional[Action]:
        return actions.ExecuteCommand(item)

    def help_text(self) -> str:
        return "Enter:execute  Esc:back"
