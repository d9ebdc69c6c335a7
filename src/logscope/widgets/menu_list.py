"""Main menu - a filterable list of menu items."""

from __future__ import annotations

from typing import Iterable

from rich.text import Text
from textual.widgets import OptionList
from textual.widgets.option_list import Option

from logscope.core.messages import Action, KeyPressed, Message
from logscope.core.state import MenuItem

_CURSOR_KEYS = {
    "up": "cursor_up",
    "k": "cursor_up",
    "down": "cursor_down",
    "j": "cursor_down",
    "home": "first",
    "g": "first",
    "end": "last",
    "G": "last",
    "pageup": "page_up",
    "pagedown": "page_down",
}


def _prompt(item: MenuItem) -> Text:
    return Text.assemble((item.title, "bold"), "\n", (item.description, "dim"))


class MenuList(OptionList):
    """Selectable list of menu items.

    Keys are fed in by the app through ``update`` rather than by focus, so
    the list never grabs input for itself.
    """

    can_focus = False

    def __init__(
        self, items: Iterable[MenuItem], title: str = "logscope", **kwargs
    ) -> None:
        self._menu_items = tuple(items)
        self._shown = list(self._menu_items)
        self._filter_query = ""
        self._filtering = False
        self._menu_title = title
        options = [Option(_prompt(item)) for item in self._menu_items]
        super().__init__(*options, **kwargs)

    def on_mount(self) -> None:
        self.border_title = self._menu_title
        if self._shown and self.highlighted is None:
            self.highlighted = 0

    @property
    def items(self) -> tuple[MenuItem, ...]:
        """Items currently shown, after filtering."""
        return tuple(self._shown)

    @property
    def filter_text(self) -> str:
        """The active filter query, empty when unfiltered."""
        return self._filter_query

    @property
    def filtering(self) -> bool:
        """True while the filter prompt is taking keystrokes."""
        return self._filtering

    def highlighted_item(self) -> MenuItem | None:
        index = self.highlighted
        if index is None or not 0 <= index < len(self._shown):
            return None
        return self._shown[index]

    def set_size(self, width: int, height: int) -> None:
        self.styles.width = width
        self.styles.height = height

    def update(self, message: Message) -> Action | None:
        if not isinstance(message, KeyPressed):
            return None
        if self._filtering:
            self._update_filter(message)
            return None

        token = message.token
        if token == "/":
            self._filtering = True
            self._show_filter()
        elif token in _CURSOR_KEYS:
            getattr(self, f"action_{_CURSOR_KEYS[token]}")()
        elif message.key == "escape" and self._filter_query:
            self.apply_filter("")
        return None

    def _update_filter(self, message: KeyPressed) -> None:
        if message.key == "enter":
            self._filtering = False
            self._show_filter()
        elif message.key == "escape":
            self._filtering = False
            self.apply_filter("")
        elif message.key == "backspace":
            self.apply_filter(self._filter_query[:-1])
        elif message.character and message.character.isprintable():
            self.apply_filter(self._filter_query + message.character)

    def apply_filter(self, text: str) -> None:
        """Show only items whose title contains ``text`` (case-insensitive)."""
        self._filter_query = text
        needle = text.casefold()
        self._shown = [
            item for item in self._menu_items if needle in item.filter_value.casefold()
        ]
        self.clear_options()
        self.add_options([Option(_prompt(item)) for item in self._shown])
        self.highlighted = 0 if self._shown else None
        self._show_filter()

    def _show_filter(self) -> None:
        if self._filtering:
            self.border_subtitle = f"Filter: {self._filter_query}_"
        elif self._filter_query:
            self.border_subtitle = f"Filter: {self._filter_query}"
        else:
            self.border_subtitle = ""
