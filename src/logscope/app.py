"""Main logscope application - feeds terminal events through the dispatcher."""

from __future__ import annotations

from functools import partial
from typing import Iterable

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Vertical
from textual.css.query import NoMatches
from textual.widgets import ContentSwitcher, DirectoryTree, Static

from logscope.config import Settings
from logscope.core.messages import (
    Action,
    Call,
    KeyPressed,
    Message,
    PathChosen,
    Quit,
    Resized,
    Tick,
)
from logscope.core.state import DEFAULT_MENU_ITEMS, AppModel, new_model
from logscope.core.update import init, update
from logscope.core.view import (
    FILE_SELECT_PANE,
    LOG_PANE,
    LOG_PLACEHOLDER,
    MENU_PANE,
    PICK_PROMPT,
    render,
)
from logscope.widgets.file_picker import LogFilePicker
from logscope.widgets.menu_list import MenuList


class LogScope(App, inherit_bindings=False):
    """Pick a log file from a menu and a directory browser.

    Every key goes through ``update``; the app only translates Textual
    events into messages and carries out the actions that come back.
    """

    TITLE = "logscope"
    CSS_PATH = "styles.tcss"
    ENABLE_COMMAND_PALETTE = False

    # Claimed ahead of any screen-level copy binding so it reaches update().
    BINDINGS = [
        Binding("ctrl+c", "feed_key('ctrl+c')", "Quit", show=False, priority=True),
    ]

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self.settings = settings or Settings()
        self.menu_list = MenuList(DEFAULT_MENU_ITEMS, title=self.TITLE, id="menu-list")
        self.file_picker = LogFilePicker(
            self.settings.start_dir,
            allowed_types=self.settings.allowed_types,
            show_hidden=self.settings.show_hidden,
            id="file-picker",
        )
        self.model: AppModel = new_model(self.menu_list, self.file_picker)

    def compose(self) -> ComposeResult:
        with ContentSwitcher(initial=MENU_PANE, id="panes"):
            with Container(id=MENU_PANE):
                yield self.menu_list
            with Vertical(id=FILE_SELECT_PANE):
                yield Static(PICK_PROMPT, id="picker-header")
                yield self.file_picker
            yield Static(LOG_PLACEHOLDER, id=LOG_PANE)

    def on_mount(self) -> None:
        self.run_actions(init(self.model))
        self.show_frame()

    # === Dispatch ===

    def feed(self, message: Message) -> None:
        """Run one message through the dispatcher and redraw."""
        previous = self.model
        self.model, actions = update(
            previous, message, error_delay=self.settings.error_timeout
        )
        if self.model.state is not previous.state:
            self.log(f"view: {previous.state.value} -> {self.model.state.value}")
        self.run_actions(actions)
        self.show_frame()

    def run_actions(self, actions: Iterable[Action]) -> None:
        for action in actions:
            if isinstance(action, Quit):
                self.exit()
            elif isinstance(action, Tick):
                self.set_timer(action.delay, partial(self.feed, action.message))
            elif isinstance(action, Call):
                self.call_later(action.callback)
            else:
                self.log.warning(f"Unknown action: {action!r}")

    def show_frame(self) -> None:
        frame = render(self.model)
        try:
            switcher = self.query_one("#panes", ContentSwitcher)
        except NoMatches:
            # Resize can arrive before the panes are composed.
            return
        if frame.pane is None:
            switcher.display = False
            return
        switcher.current = frame.pane
        if frame.pane == FILE_SELECT_PANE:
            self.query_one("#picker-header", Static).update(frame.header)
        elif frame.pane == LOG_PANE:
            self.query_one(f"#{LOG_PANE}", Static).update(frame.header)

    # === Terminal events ===

    def action_feed_key(self, key: str) -> None:
        self.feed(KeyPressed(key))

    def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()
        self.feed(KeyPressed(event.key, event.character))

    def on_resize(self, event: events.Resize) -> None:
        self.feed(Resized(event.size.width, event.size.height))

    def on_directory_tree_file_selected(
        self, event: DirectoryTree.FileSelected
    ) -> None:
        event.stop()
        self.feed(PathChosen(str(event.path)))
