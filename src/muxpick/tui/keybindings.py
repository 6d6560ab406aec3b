"""Central keybinding registry for Muxpick.

Provides a single source of truth for all keybindings and for the mapping
from Textual key names to actions.

Modified: 2026-10-16
"""

from dataclasses import dataclass
from typing import Dict, List, Optional
from enum import Enum

from ..core import actions
from ..core.actions import Action


class KeyContext(Enum):
    """Context where a keybinding is active."""
    GLOBAL = "global"
    SESSION = "session"
    WORKTREE = "worktree"
    FILE = "file"
    PALETTE = "palette"
    BUFFER = "buffer"
    DIALOG = "dialog"


@dataclass
class Keybinding:
    """Represents a single keybinding."""
    key: str  # The key or key combination
    description: str  # Human-readable description
    context: KeyContext = KeyContext.GLOBAL  # Where this binding is active
    category: str = "General"  # Category for grouping in help
    hidden: bool = False  # Whether to show in help menu


# Keys that map to the same action everywhere. Navigation is modifier-gated:
# plain j/k are ordinary characters.
KEY_ACTIONS: Dict[str, Action] = {
    "ctrl+c": actions.Quit(),
    "escape": actions.Escape(),
    "enter": actions.Enter(),
    "up": actions.MoveUp(),
    "ctrl+k": actions.MoveUp(),
    "down": actions.MoveDown(),
    "ctrl+j": actions.MoveDown(),
    "left": actions.MoveLeft(),
    "right": actions.MoveRight(),
    "pageup": actions.PageUp(),
    "pagedown": actions.PageDown(),
    "backspace": actions.Backspace(),
}


def key_to_action(
    key: str,
    character: Optional[str] = None,
    text_entry: bool = False,
) -> Optional[Action]:
    """
    Map a Textual key event to an action.

    Args:
        key: Textual key name (e.g. "ctrl+j", "pagedown", "q")
        character: Printable character for the key, if any
        text_entry: True while an input dialog is open, so ``q`` types
            instead of quitting

    Returns:
        The action, or None for unmapped keys
    """
    if key in KEY_ACTIONS:
        return KEY_ACTIONS[key]

    if character is None or len(character) != 1 or not character.isprintable():
        return None

    if character == "q" and not text_entry:
        return actions.Quit()

    return actions.Character(character)


class KeybindingRegistry:
    """Central registry for all keybindings."""

    def __init__(self):
        self.keybindings: Dict[str, Keybinding] = {}
        self._initialize_default_bindings()

    def _initialize_default_bindings(self):
        """Initialize default keybindings."""

        # Global bindings
        self.register("q", "Quit", KeyContext.GLOBAL, "Application")
        self.register("ctrl+c", "Quit", KeyContext.GLOBAL, "Application", hidden=True)
        self.register("escape", "Clear filter, then go back", KeyContext.GLOBAL, "Application")

        # Navigation
        self.register("up/ctrl+k", "Move up", KeyContext.GLOBAL, "Navigation")
        self.register("down/ctrl+j", "Move down", KeyContext.GLOBAL, "Navigation")
        self.register("pageup", "Page up", KeyContext.GLOBAL, "Navigation")
        self.register("pagedown", "Page down", KeyContext.GLOBAL, "Navigation")
        self.register("enter", "Select item", KeyContext.GLOBAL, "Navigation")
        self.register("backspace", "Delete filter character", KeyContext.GLOBAL, "Navigation")

        # Sessions
        self.register("session:n", "New session", KeyContext.SESSION, "Sessions")
        self.register("session:d", "Delete session", KeyContext.SESSION, "Sessions")

        # Worktrees
        self.register("worktree:n", "New worktree branch", KeyContext.WORKTREE, "Worktrees")
        self.register("worktree:d", "Delete worktree", KeyContext.WORKTREE, "Worktrees")
        self.register("worktree:m", "Merge worktree to main", KeyContext.WORKTREE, "Worktrees")

        # Files and buffers
        self.register("file:enter", "Open file or enter directory", KeyContext.FILE, "Files")
        self.register("buffer:enter", "Jump to buffer", KeyContext.BUFFER, "Files")
        self.register("palette:enter", "Run command", KeyContext.PALETTE, "Commands")

        # Dialogs
        self.register("dialog:y", "Select yes", KeyContext.DIALOG, "Dialogs")
        self.register("dialog:n", "Select no", KeyContext.DIALOG, "Dialogs")
        self.register("dialog:left/right", "Toggle yes/no", KeyContext.DIALOG, "Dialogs")
        self.register("dialog:escape", "Cancel", KeyContext.DIALOG, "Dialogs")

    def register(self, key: str, description: str,
                 context: KeyContext = KeyContext.GLOBAL,
                 category: str = "General",
                 hidden: bool = False) -> None:
        """Register a keybinding."""
        self.keybindings[key] = Keybinding(
            key=key,
            description=description,
            context=context,
            category=category,
            hidden=hidden
        )

    def get_bindings_by_category(self) -> Dict[str, List[Keybinding]]:
        """Get keybindings organized by category."""
        result = {}
        for binding in self.keybindings.values():
            if not binding.hidden:
                if binding.category not in result:
                    result[binding.category] = []
                result[binding.category].append(binding)
        return result

    def format_help_text(self) -> str:
        """Format help text for display."""
        lines = []
        lines.append("Muxpick - tmux session and worktree picker\n")
        lines.append("=" * 40 + "\n")

        # Group by category
        categories = self.get_bindings_by_category()
        for category in sorted(categories.keys()):
            lines.append(f"\n{category}:")
            lines.append("-" * len(category) + "-")

            for binding in categories[category]:
                # Context prefix is only for uniqueness in the registry
                key_str = binding.key.split(":", 1)[-1].ljust(12)
                lines.append(f"  {key_str} {binding.description}")

        lines.append("\n" + "=" * 40)
        lines.append("Command characters apply only while the filter is empty")

        return "\n".join(lines)


# Global registry instance
registry = KeybindingRegistry()
