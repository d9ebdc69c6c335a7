"""File picker - directory tree restricted to an allow-list of extensions."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from rich.style import Style
from rich.text import Text
from textual.widgets import DirectoryTree
from textual.widgets.directory_tree import DirEntry
from textual.widgets.tree import TreeNode

from logscope.core.messages import Action, Call, KeyPressed, Message, PathChosen
from logscope.core.view import DISABLED_FILE_STYLE

_CURSOR_KEYS = {
    "up": "cursor_up",
    "k": "cursor_up",
    "down": "cursor_down",
    "j": "cursor_down",
    "pageup": "page_up",
    "pagedown": "page_down",
    "home": "scroll_home",
    "g": "scroll_home",
    "end": "scroll_end",
    "G": "scroll_end",
}
_OPEN_KEYS = frozenset({"enter", "right", "l"})
_BACK_KEYS = frozenset({"left", "h", "backspace"})


class LogFilePicker(DirectoryTree):
    """Directory tree where only allowed file types can be chosen.

    Files outside the allow-list are still listed, dimmed; choosing one is
    reported by ``did_select_disabled_file`` so the app can show a notice.
    """

    can_focus = False

    def __init__(
        self,
        path: str | Path,
        allowed_types: Iterable[str] = (),
        show_hidden: bool = False,
        **kwargs,
    ) -> None:
        self.start_dir = Path(path)
        self.allowed_types = tuple(ext.lower() for ext in allowed_types)
        self.show_hidden = show_hidden
        super().__init__(path, **kwargs)

    def is_allowed(self, path: str | Path) -> bool:
        """Whether ``path`` may be chosen. An empty allow-list allows all."""
        if not self.allowed_types:
            return True
        name = Path(path).name.lower()
        return any(name.endswith(ext) for ext in self.allowed_types)

    def filter_paths(self, paths: Iterable[Path]) -> Iterable[Path]:
        if self.show_hidden:
            return paths
        return [path for path in paths if not path.name.startswith(".")]

    def render_label(
        self, node: TreeNode[DirEntry], base_style: Style, style: Style
    ) -> Text:
        label = super().render_label(node, base_style, style)
        if node.data is not None and not node.allow_expand:
            if not self.is_allowed(node.data.path):
                label.stylize(DISABLED_FILE_STYLE)
        return label

    # === Dispatcher protocol ===

    def init(self) -> Action | None:
        return Call(self.return_to_start)

    def return_to_start(self):
        """Return to the start directory and re-read it."""
        if Path(self.path) != self.start_dir:
            # Changing the root reloads the tree by itself.
            self.path = self.start_dir
            return None
        return self.reload()

    def update(self, message: Message) -> Action | None:
        if not isinstance(message, KeyPressed):
            return None

        token = message.token
        if token in _CURSOR_KEYS:
            getattr(self, f"action_{_CURSOR_KEYS[token]}")()
        elif token in _OPEN_KEYS:
            self.action_select_cursor()
        elif token in _BACK_KEYS:
            parent = Path(self.path).parent
            if parent != Path(self.path):
                self.path = parent
        return None

    def did_select_file(self, message: Message) -> tuple[bool, str]:
        if isinstance(message, PathChosen) and self.is_allowed(message.path):
            return True, message.path
        return False, ""

    def did_select_disabled_file(self, message: Message) -> tuple[bool, str]:
        if isinstance(message, PathChosen) and not self.is_allowed(message.path):
            return True, message.path
        return False, ""
