"""Action router for Muxpick.

Owns the active view, the optional dialog and the working directory, and
routes every action through them in a fixed order:

1. an open dialog gets the action exclusively; when it resolves it is
   cleared and its follow-up action is dispatched on its own;
2. global actions (session, worktree, file and view-switching commands) are
   handled here;
3. anything else goes to the active view, whose follow-up is dispatched
   again from step 1.

Follow-ups are processed from an explicit work list. An action kind may
appear only once per chain, which rules out handlers feeding each other
forever.

Modified: 2026-10-16
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, List, Optional

from rich.console import RenderableType

from ..config.settings import Settings
from ..core import actions
from ..core.actions import Action, ConfirmKillSession, InputCallback
from ..core.exceptions import DispatchLoopError, GitError, TmuxError
from ..core.git_client import GitClient
from ..core.models import PaletteCommand
from ..core.nvim import NvimIntegration
from ..core.tmux_client import TmuxClient
from .surface import TerminalSurface
from .ui.component import Component, Picker
from .ui.dialogs import ConfirmDialog, InputDialog
from .ui.pickers import (
    BufferPicker,
    CommandPalette,
    FilePicker,
    SessionPicker,
    WorktreePicker,
)


logger = logging.getLogger(__name__)


class View(Enum):
    """Which picker is on screen."""

    SESSION_PICKER = "sessions"
    COMMAND_PALETTE = "palette"
    FILE_PICKER = "files"
    WORKTREE_PICKER = "worktrees"
    BUFFER_PICKER = "buffers"


def session_name_for(path: Path) -> str:
    """tmux session name for a worktree path (its last segment)."""
    name = Path(path).name or "worktree"
    # tmux rewrites these characters in session names
    return name.replace(".", "_").replace(":", "_")


class AppController:
    """Routes actions to the dialog, the global handlers or the active view."""

    def __init__(
        self,
        tmux: TmuxClient,
        nvim: NvimIntegration,
        settings: Optional[Settings] = None,
        current_path: Optional[Path] = None,
        initial_view: View = View.SESSION_PICKER,
        surface: Optional[TerminalSurface] = None,
        git_factory: Callable[..., GitClient] = GitClient,
        git_probe: Callable[[Path], bool] = GitClient.is_git_repo,
    ):
        """Build the controller and the session picker.

        Args:
            tmux: Session collaborator
            nvim: Editor collaborator
            settings: Loaded settings (defaults when omitted)
            current_path: Working directory handed to new views
            initial_view: View shown first
            surface: Terminal surface; may be attached later
            git_factory: Builds a GitClient for a path, raising GitError
                outside a repository
            git_probe: Non-raising "is this a repository" check

        Raises:
            TmuxError: If the initial session listing fails
        """
        self.settings = settings or Settings()
        self.tmux = tmux
        self.nvim = nvim
        self.surface = surface
        self.current_path = Path(current_path) if current_path else Path.cwd()
        self.git_factory = git_factory
        self.git_probe = git_probe

        self.view = initial_view
        self.dialog: Optional[Component] = None
        self.running = True

        page_size = self.settings.tui.page_size
        self.session_picker = SessionPicker(tmux, page_size=page_size)
        self.session_picker.refresh()

        self._pickers: Dict[View, Optional[Picker]] = {
            View.SESSION_PICKER: self.session_picker,
            View.COMMAND_PALETTE: None,
            View.FILE_PICKER: None,
            View.WORKTREE_PICKER: None,
            View.BUFFER_PICKER: None,
        }
        self._picker_factories: Dict[View, Callable[[], Picker]] = {
            View.COMMAND_PALETTE: self._build_command_palette,
            View.FILE_PICKER: self._build_file_picker,
            View.WORKTREE_PICKER: self._build_worktree_picker,
            View.BUFFER_PICKER: self._build_buffer_picker,
        }
        self._ensure_picker(initial_view)

        self._global_handlers: Dict[type, Callable[[Action], Optional[Action]]] = {
            actions.Quit: self._quit,
            actions.CloseDialog: self._close_dialog,
            actions.ShowInput: self._show_input,
            actions.ShowConfirm: self._show_confirm,
            actions.SwitchSession: self._switch_session,
            actions.CreateSession: self._create_session,
            actions.KillSession: self._kill_session,
            actions.OpenFile: self._open_file,
            actions.OpenBuffer: self._open_buffer,
            actions.SwitchWorktree: self._switch_worktree,
            actions.CreateWorktree: self._create_worktree,
            actions.DeleteWorktree: self._delete_worktree,
            actions.MergeWorktree: self._merge_worktree,
            actions.ExecuteCommand: self._execute_command,
            actions.ShowSessionPicker: self._show_session_picker,
            actions.ShowCommandPalette: self._show_picker(View.COMMAND_PALETTE),
            actions.ShowFilePicker: self._show_picker(View.FILE_PICKER),
            actions.ShowWorktreePicker: self._show_picker(View.WORKTREE_PICKER),
            actions.ShowBufferPicker: self._show_picker(View.BUFFER_PICKER),
            actions.ShowGitDiff: self._show_git_diff,
            actions.Render: self._render,
            actions.GoBack: self._go_back,
        }

        self._palette_handlers: Dict[PaletteCommand, Callable[[], Optional[Action]]] = {
            PaletteCommand.OPEN_FILE: lambda: self._activate(View.FILE_PICKER),
            PaletteCommand.NEW_SESSION: self._prompt_new_session,
            PaletteCommand.KILL_SESSION: self._confirm_kill_current_session,
            PaletteCommand.SWITCH_BUFFER: lambda: self._activate(View.BUFFER_PICKER),
            PaletteCommand.LIST_WORKTREES: lambda: self._activate(View.WORKTREE_PICKER),
            PaletteCommand.CREATE_WORKTREE: self._prompt_new_worktree,
            PaletteCommand.GIT_STATUS: lambda: actions.ShowGitDiff(),
        }

    @classmethod
    def create(
        cls,
        settings: Settings,
        initial_view: View = View.SESSION_PICKER,
    ) -> "AppController":
        """Build a controller wired to the real tmux, git and Neovim."""
        tmux = TmuxClient()
        try:
            current_path = tmux.current_path()
        except TmuxError as e:
            logger.warning(f"Falling back to the process cwd: {e}")
            current_path = Path.cwd()

        base_dir = settings.worktrees.base_dir
        return cls(
            tmux=tmux,
            nvim=NvimIntegration(tmux),
            settings=settings,
            current_path=current_path,
            initial_view=initial_view,
            git_factory=lambda path: GitClient(path, base_dir=base_dir),
        )

    # Views

    def _build_command_palette(self) -> Picker:
        return CommandPalette(
            self.git_probe(self.current_path),
            page_size=self.settings.tui.page_size,
        )

    def _build_file_picker(self) -> Picker:
        return FilePicker(
            self.current_path,
            show_hidden=self.settings.files.show_hidden,
            page_size=self.settings.tui.page_size,
        )

    def _build_worktree_picker(self) -> Picker:
        return WorktreePicker(self._git(), page_size=self.settings.tui.page_size)

    def _build_buffer_picker(self) -> Picker:
        return BufferPicker(self.nvim, page_size=self.settings.tui.page_size)

    def _ensure_picker(self, view: View) -> Picker:
        picker = self._pickers[view]
        if picker is None:
            picker = self._picker_factories[view]()
            self._pickers[view] = picker
        return picker

    def picker(self, view: View) -> Optional[Picker]:
        """The picker for ``view`` if it has been built."""
        return self._pickers[view]

    def active_view(self) -> Picker:
        return self._ensure_picker(self.view)

    def _activate(self, view: View) -> None:
        self._ensure_picker(view)
        self.view = view

    def _git(self) -> Optional[GitClient]:
        try:
            return self.git_factory(self.current_path)
        except GitError as e:
            logger.info(f"{self.current_path} is not a git repository: {e}")
            return None

    # Rendering

    def help_text(self) -> str:
        if self.dialog is not None:
            return self.dialog.help_text()
        return self.active_view().help_text()

    def render_view(self, height: int) -> RenderableType:
        return self.active_view().render(height)

    def render_dialog(self) -> Optional[RenderableType]:
        if self.dialog is None:
            return None
        return self.dialog.render(0)

    # Dispatch

    def dispatch(self, action: Action) -> None:
        """Handle ``action`` and every follow-up it produces.

        If any handler raises, the view and dialog that were active when the
        dispatch began are restored before the error propagates.

        Raises:
            MuxpickError: From a collaborator call
            DispatchLoopError: If an action kind is produced twice in one chain
        """
        view, dialog = self.view, self.dialog
        chain: List[str] = []
        pending: List[Action] = [action]

        try:
            while pending:
                current = pending.pop()
                if current.kind in chain:
                    raise DispatchLoopError(
                        f"{current.kind} produced twice while dispatching {action.kind}",
                        chain=tuple(chain + [current.kind]),
                    )
                chain.append(current.kind)

                follow_up = self._dispatch_one(current)
                if follow_up is not None:
                    pending.append(follow_up)
        except Exception:
            self.view, self.dialog = view, dialog
            raise

        logger.debug(f"Dispatched {' -> '.join(chain)}")

    def _dispatch_one(self, action: Action) -> Optional[Action]:
        if self.dialog is not None:
            follow_up = self.dialog.handle_action(action)
            if follow_up is not None:
                self.dialog = None
            return follow_up

        handler = self._global_handlers.get(type(action))
        if handler is not None:
            return handler(action)

        return self.active_view().handle_action(action)

    # Surface

    def _leave_surface(self) -> None:
        if self.surface is not None:
            self.surface.exit()

    def _enter_surface(self) -> None:
        if self.surface is not None:
            self.surface.enter()

    # Global handlers

    def _quit(self, action: actions.Quit) -> None:
        self.running = False

    def _close_dialog(self, action: actions.CloseDialog) -> None:
        self.dialog = None

    def _show_input(self, action: actions.ShowInput) -> None:
        self.dialog = InputDialog(action.title, action.callback)

    def _show_confirm(self, action: actions.ShowConfirm) -> None:
        self.dialog = ConfirmDialog(action.title, action.message, action.callback)

    def _switch_session(self, action: actions.SwitchSession) -> None:
        self._leave_surface()
        self.tmux.switch_session(action.name)
        self.running = False

    def _create_session(self, action: actions.CreateSession) -> None:
        self.tmux.create_session(action.name, action.path)
        self._leave_surface()
        self.tmux.switch_session(action.name)
        self.dialog = None
        self.running = False

    def _kill_session(self, action: actions.KillSession) -> None:
        self.tmux.kill_session(action.name)
        self.dialog = None
        self.session_picker.refresh()

    def _open_file(self, action: actions.OpenFile) -> None:
        self._leave_surface()
        self.nvim.open_file(action.path)
        self.running = False

    def _open_buffer(self, action: actions.OpenBuffer) -> None:
        self._leave_surface()
        self.nvim.open_buffer(action.socket, action.bufnr)
        self.running = False

    def _switch_worktree(self, action: actions.SwitchWorktree) -> None:
        name = session_name_for(action.path)

        if not self.tmux.has_session(name):
            self.tmux.create_session(name, action.path)

        self._leave_surface()
        self.tmux.switch_session(name)
        self.running = False

    def _create_worktree(self, action: actions.CreateWorktree) -> Optional[Action]:
        git = self._git()
        if git is None:
            logger.warning(f"Cannot create worktree {action.branch}: not a git repository")
            self.dialog = None
            return None

        path = git.create_worktree(action.branch)
        self.dialog = None
        return actions.SwitchWorktree(path)

    def _delete_worktree(self, action: actions.DeleteWorktree) -> None:
        git = self._git()
        if git is not None:
            git.delete_worktree(action.path)
            self._refresh_worktrees()
        self.dialog = None

    def _merge_worktree(self, action: actions.MergeWorktree) -> None:
        git = self._git()
        if git is not None:
            worktree = next(
                (wt for wt in git.list_worktrees() if wt.path == action.path),
                None,
            )
            if worktree is None:
                logger.warning(f"No worktree at {action.path}; nothing merged")
            else:
                git.merge_to_main(worktree.path, worktree.branch)
            self._refresh_worktrees()
        self.dialog = None

    def _refresh_worktrees(self) -> None:
        picker = self._pickers[View.WORKTREE_PICKER]
        if picker is not None:
            picker.refresh()

    def _execute_command(self, action: actions.ExecuteCommand) -> Optional[Action]:
        logger.info(f"Executing palette command {action.command.value}")
        return self._palette_handlers[action.command]()

    def _prompt_new_session(self) -> None:
        self.dialog = InputDialog("New Session Name", InputCallback.CREATE_SESSION)

    def _prompt_new_worktree(self) -> None:
        self.dialog = InputDialog("New Worktree Branch", InputCallback.CREATE_WORKTREE)

    def _confirm_kill_current_session(self) -> None:
        current = self.tmux.current_session()
        self.dialog = ConfirmDialog(
            "Kill Session",
            f"Kill current session '{current}'?",
            ConfirmKillSession(current),
        )

    def _show_session_picker(self, action: actions.ShowSessionPicker) -> None:
        self.view = View.SESSION_PICKER
        self.session_picker.refresh()

    def _show_picker(self, view: View) -> Callable[[Action], None]:
        def handler(action: Action) -> None:
            self._activate(view)

        return handler

    def _show_git_diff(self, action: actions.ShowGitDiff) -> None:
        diff = self.settings.git_diff
        self._leave_surface()
        try:
            self.tmux.popup_command(diff.command, diff.width, diff.height, cwd=self.current_path)
        finally:
            self._enter_surface()

    def _render(self, action: actions.Render) -> None:
        pass

    def _go_back(self, action: actions.GoBack) -> None:
        if self.view is View.SESSION_PICKER:
            self.running = False
            return
        self.view = View.SESSION_PICKER
        self.session_picker.refresh()
