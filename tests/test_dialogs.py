"""
Tests for input and confirm dialogs.

Created: 2026-10-16
"""

from pathlib import Path

from muxpick.core import actions
from muxpick.core.actions import ConfirmDeleteWorktree, ConfirmKillSession, InputCallback
from muxpick.tui.ui.dialogs import ConfirmDialog, InputDialog

from tests.utils import type_text


class TestInputDialog:
    """Test the text input dialog."""

    def test_typing_and_backspace(self):
        dialog = InputDialog("New Session", InputCallback.CREATE_SESSION)

        for action in type_text("projx"):
            assert dialog.handle_action(action) is None
        dialog.handle_action(actions.Backspace())

        assert dialog.text == "proj"

    def test_enter_resolves_create_session(self):
        dialog = InputDialog("New Session", InputCallback.CREATE_SESSION)
        for action in type_text("proj"):
            dialog.handle_action(action)

        assert dialog.handle_action(actions.Enter()) == actions.CreateSession("proj", None)

    def test_enter_resolves_create_worktree(self):
        dialog = InputDialog("New Worktree Branch", InputCallback.CREATE_WORKTREE)
        for action in type_text(" feature/x "):
            dialog.handle_action(action)

        assert dialog.handle_action(actions.Enter()) == actions.CreateWorktree("feature/x")

    def test_empty_input_closes(self):
        dialog = InputDialog("New Session", InputCallback.CREATE_SESSION)
        dialog.handle_action(actions.Character(" "))

        assert dialog.handle_action(actions.Enter()) == actions.CloseDialog()

    def test_escape_closes(self):
        dialog = InputDialog("New Session", InputCallback.CREATE_SESSION)
        dialog.handle_action(actions.Character("a"))

        assert dialog.handle_action(actions.Escape()) == actions.CloseDialog()

    def test_navigation_is_ignored(self):
        dialog = InputDialog("New Session", InputCallback.CREATE_SESSION)

        assert dialog.handle_action(actions.MoveUp()) is None
        assert dialog.handle_action(actions.PageDown()) is None
        assert dialog.text == ""


class TestConfirmDialog:
    """Test the yes/no dialog."""

    def make_dialog(self):
        return ConfirmDialog("Delete Session", "Delete session 'dev'?", ConfirmKillSession("dev"))

    def test_yes_is_default(self):
        dialog = self.make_dialog()

        assert dialog.selected is True
        assert dialog.handle_action(actions.Enter()) == actions.KillSession("dev")

    def test_moves_toggle_selection(self):
        dialog = self.make_dialog()

        dialog.handle_action(actions.MoveUp())
        assert dialog.selected is False

        dialog.handle_action(actions.MoveRight())
        assert dialog.selected is True

        dialog.handle_action(actions.MoveLeft())
        assert dialog.handle_action(actions.Enter()) == actions.CloseDialog()

    def test_y_and_n_select(self):
        dialog = self.make_dialog()

        dialog.handle_action(actions.Character("n"))
        assert dialog.selected is False

        dialog.handle_action(actions.Character("Y"))
        assert dialog.selected is True

        dialog.handle_action(actions.Character("x"))
        assert dialog.selected is True

    def test_escape_closes(self):
        dialog = self.make_dialog()

        assert dialog.handle_action(actions.Escape()) == actions.CloseDialog()

    def test_delete_worktree_callback(self):
        path = Path("/src/app-feature-x")
        dialog = ConfirmDialog("Delete Worktree", "Delete?", ConfirmDeleteWorktree(path))

        assert dialog.handle_action(actions.Enter()) == actions.DeleteWorktree(path)

    def test_help_text(self):
        assert "Esc:cancel" in self.make_dialog().help_text()
