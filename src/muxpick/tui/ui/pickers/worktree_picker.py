"""Worktree picker: switch to, create, delete or merge git worktrees.

Modified: 2026-10-16
"""

import logging
from typing import Optional

from ....core import actions
from ....core.actions import (
    Action,
    ConfirmDeleteWorktree,
    ConfirmMergeWorktree,
    InputCallback,
)
from ....core.exceptions import GitError
from ....core.git_client import GitClient
from ....core.models import GitWorktree
from ..component import DEFAULT_PAGE_SIZE, Picker
from ..fuzzy_list import FuzzyList


logger = logging.getLogger(__name__)


class WorktreePicker(Picker[GitWorktree]):
    """Lists worktrees of the repository; empty outside a repository."""

    def __init__(self, git: Optional[GitClient], page_size: int = DEFAULT_PAGE_SIZE):
        super().__init__(
            FuzzyList("Worktrees", GitWorktree.display_name, GitWorktree.search_text),
            page_size=page_size,
        )
        self.git = git
        self.refresh()

    def refresh(self) -> None:
        if self.git is None:
            return
        try:
            worktrees = self.git.list_worktrees()
        except GitError as e:
            logger.warning(f"Could not list worktrees: {e}")
            worktrees = []
        self.fuzzy_list.set_items(worktrees)

    def on_enter(self, item: GitWorktree) -> Optional[Action]:
        return actions.SwitchWorktree(item.path)

    def handles_command_char(self, char: str) -> bool:
        return char in ("n", "d", "m")

    def on_command_char(self, char: str, item: Optional[GitWorktree]) -> Optional[Action]:
        if char == "n":
            return actions.ShowInput("New Worktree Branch", InputCallback.CREATE_WORKTREE)

        # The main worktree can be neither deleted nor merged
        if item is None or item.is_main:
            return None

        if char == "d":
            if item.has_changes:
                message = f"Worktree '{item.branch}' has uncommitted changes. Delete anyway?"
            else:
                message = f"Delete worktree '{item.branch}'?"
            return actions.ShowConfirm(
                "Delete Worktree", message, ConfirmDeleteWorktree(item.path)
            )

        return actions.ShowConfirm(
            "Merge to Main",
            f"Merge '{item.branch}' to main and delete worktree?",
            ConfirmMergeWorktree(item.path),
        )

    def help_text(self) -> str:
        return "Enter:switch  n:new  d:delete  m:merge  Esc:back"
