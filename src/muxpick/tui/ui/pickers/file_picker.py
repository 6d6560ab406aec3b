"""File picker: browse directories and open files.

Modified: 2026-10-16
"""

import logging
from pathlib import Path
from typing import List, Optional

from ....core import actions
from ....core.actions import Action
from ....core.models import FileEntry
from ..component import DEFAULT_PAGE_SIZE, Picker
from ..fuzzy_list import FuzzyList


logger = logging.getLogger(__name__)


def list_directory(directory: Path, show_hidden: bool = False) -> List[FileEntry]:
    """
    Entries of ``directory``: ``..`` first, then directories, then files.

    Each group is sorted case-insensitively. An unreadable directory yields
    just the ``..`` entry.
    """
    entries: List[FileEntry] = []

    if directory.parent != directory:
        entries.append(FileEntry(path=directory.parent, is_dir=True, name=".."))

    try:
        children = list(directory.iterdir())
    except OSError as e:
        logger.warning(f"Cannot read {directory}: {e}")
        return entries

    listed = []
    for child in children:
        if not show_hidden and child.name.startswith("."):
            continue
        try:
            is_dir = child.is_dir()
        except OSError:
            is_dir = False
        listed.append(FileEntry(path=child, is_dir=is_dir, name=child.name))

    listed.sort(key=lambda entry: (not entry.is_dir, entry.name.lower()))
    entries.extend(listed)
    return entries


class FilePicker(Picker[FileEntry]):
    """Directory browser rooted at the working directory."""

    def __init__(
        self,
        start_path: Path,
        show_hidden: bool = False,
        page_size: int = DEFAULT_PAGE_SIZE,
    ):
        super().__init__(
            FuzzyList("Files", FileEntry.display_name, FileEntry.search_text),
            page_size=page_size,
        )
        start_path = Path(start_path)
        self.current_dir = start_path if start_path.is_dir() else start_path.parent
        self.show_hidden = show_hidden
        self.refresh()

    def refresh(self) -> None:
        self.fuzzy_list.title = f"Files: {self.current_dir}"
        self.fuzzy_list.set_items(list_directory(self.current_dir, self.show_hidden))

    def navigate_to(self, path: Path) -> None:
        self.current_dir = path
        self.fuzzy_list.clear_query()
        self.refresh()

    def on_enter(self, item: FileEntry) -> Optional[Action]:
        if item.is_dir:
            self.navigate_to(item.path)
            return actions.Render()
        return actions.OpenFile(item.path)

    def help_text(self) -> str:
        return "Enter:open/navigate  Esc:back"
