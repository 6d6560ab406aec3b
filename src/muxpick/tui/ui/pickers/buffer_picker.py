"""Neovim buffer picker.

Modified: 2026-10-16
"""

from typing import Optional

from ....core import actions
from ....core.actions import Action
from ....core.models import BufferEntry
from ....core.nvim import NvimIntegration
from ..component import DEFAULT_PAGE_SIZE, Picker
from ..fuzzy_list import FuzzyList


class BufferPicker(Picker[BufferEntry]):
    """Lists buffers across all reachable Neovim instances."""

    def __init__(self, nvim: NvimIntegration, page_size: int = DEFAULT_PAGE_SIZE):
        super().__init__(
            FuzzyList("Nvim Buffers", BufferEntry.display_name, BufferEntry.search_text),
            page_size=page_size,
        )
        self.nvim = nvim
        self.refresh()

    def refresh(self) -> None:
        # list_buffers already degrades to [] when nothing answers
        entries = [
            BufferEntry(socket=socket, buffer=buffer)
            for socket, buffer in self.nvim.list_buffers()
        ]
        self.fuzzy_list.set_items(entries)

    def on_enter(self, item: BufferEntry) -> Optional[Action]:
        return actions.OpenBuffer(item.socket, item.buffer.bufnr)

    def help_text(self) -> str:
        return "Enter:open  Esc:back"
