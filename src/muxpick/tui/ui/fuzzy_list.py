"""Fuzzy-filterable list shared by every picker.

Filtering is a case-insensitive subsequence test: an item is kept when the
characters of the query appear, in order, somewhere in its search text.
Kept items stay in their original order. There is no scoring or ranking, so
typing never reorders the list, it only removes entries from it.

Modified: 2026-10-16
"""

from typing import Callable, Generic, List, Optional, Sequence, TypeVar

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.text import Text


T = TypeVar("T")

# Rows taken by the panel border and the query line
CHROME_ROWS = 4


def is_subsequence(query: str, text: str) -> bool:
    """Return True if ``query`` is a case-insensitive subsequence of ``text``."""
    remaining = iter(text.lower())
    return all(char in remaining for char in query.lower())


class FuzzyList(Generic[T]):
    """Ordered list with an incremental filter and a selection cursor.

    The cursor is None exactly when the filtered view is empty; otherwise it
    is an index into the filtered view.
    """

    def __init__(
        self,
        title: str,
        display: Callable[[T], str],
        search: Callable[[T], str],
    ):
        self.title = title
        self._display = display
        self._search = search
        self._items: List[T] = []
        self._query = ""
        self._filtered: List[int] = []
        self._cursor: Optional[int] = None

    @property
    def query(self) -> str:
        return self._query

    @property
    def cursor(self) -> Optional[int]:
        return self._cursor

    @property
    def items(self) -> List[T]:
        return list(self._items)

    def filtered(self) -> List[T]:
        """Items in the current filtered view, in original order."""
        return [self._items[i] for i in self._filtered]

    def __len__(self) -> int:
        return len(self._filtered)

    def set_items(self, items: Sequence[T]) -> None:
        """Replace all items and re-apply the current query."""
        self._items = list(items)
        self._refilter()

    def push_char(self, char: str) -> None:
        self._query += char
        self._refilter()

    def pop_char(self) -> None:
        self._query = self._query[:-1]
        self._refilter()

    def clear_query(self) -> None:
        self._query = ""
        self._refilter()

    def _refilter(self) -> None:
        # Every edit puts the cursor back on the top match
        if self._query:
            self._filtered = [
                index
                for index, item in enumerate(self._items)
                if is_subsequence(self._query, self._search(item))
            ]
        else:
            self._filtered = list(range(len(self._items)))
        self._cursor = 0 if self._filtered else None

    def move_up(self) -> None:
        if self._cursor is not None and self._cursor > 0:
            self._cursor -= 1

    def move_down(self) -> None:
        if self._cursor is not None and self._cursor < len(self._filtered) - 1:
            self._cursor += 1

    def page_up(self, n: int) -> None:
        self._move_to(self._cursor - n if self._cursor is not None else None)

    def page_down(self, n: int) -> None:
        self._move_to(self._cursor + n if self._cursor is not None else None)

    def _move_to(self, position: Optional[int]) -> None:
        if position is not None:
            self._cursor = max(0, min(len(self._filtered) - 1, position))

    def selected(self) -> Optional[T]:
        if self._cursor is None:
            return None
        return self._items[self._filtered[self._cursor]]

    def visible_window(self, rows: int) -> range:
        """Range of filtered positions to draw so the cursor stays on screen."""
        rows = max(1, rows)
        total = len(self._filtered)
        if total <= rows or self._cursor is None:
            return range(0, min(total, rows))
        start = min(max(0, self._cursor - rows // 2), total - rows)
        return range(start, start + rows)

    def render(self, height: int = 20) -> RenderableType:
        """Title, the visible entries (selected one highlighted) and the query line."""
        lines: List[Text] = []
        window = self.visible_window(height - CHROME_ROWS)

        if not self._filtered:
            lines.append(Text("  No matches" if self._query else "  Empty", style="dim"))

        for position in window:
            label = self._display(self._items[self._filtered[position]])
            if position == self._cursor:
                lines.append(Text(f"> {label}", style="bold reverse"))
            else:
                lines.append(Text(f"  {label}"))

        counter = f"{len(self._filtered)}/{len(self._items)}"
        query_line = Text.assemble(("> ", "bold cyan"), self._query, ("█", "dim"))
        query_line.append(f"  {counter}", style="dim")

        return Panel(
            Group(*lines, Text(""), query_line),
            title=self.title,
            title_align="left",
            border_style="cyan",
        )
