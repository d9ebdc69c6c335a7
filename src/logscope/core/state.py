"""Application model - view states, menu items and the immutable app state."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Protocol

from logscope.core.errors import InvalidFileError


class ViewState(enum.Enum):
    """The screen that is currently active."""

    MENU = "menu"
    FILE_SELECT = "file-select"
    # Nothing transitions here yet. Kept so a log viewer can target it later.
    LOG = "log"


class MenuAction(enum.IntEnum):
    """What confirming a menu entry asks the app to do."""

    REOPEN_LAST = 1
    SELECT_FILE = 2


@dataclass(frozen=True)
class MenuItem:
    """A single entry of the main menu."""

    title: str
    description: str
    action: MenuAction

    @property
    def filter_value(self) -> str:
        return self.title


DEFAULT_MENU_ITEMS: tuple[MenuItem, ...] = (
    MenuItem(
        "Open previously opened log file",
        "Reopen the log file from your last session",
        MenuAction.REOPEN_LAST,
    ),
    MenuItem(
        "Select log file",
        "Browse the filesystem for a log file",
        MenuAction.SELECT_FILE,
    ),
)


class ListWidget(Protocol):
    """Selectable list the menu delegates cursor movement and filtering to."""

    def highlighted_item(self) -> MenuItem | None: ...

    def set_size(self, width: int, height: int) -> None: ...

    def update(self, message: Any) -> Any | None: ...


class FileBrowserWidget(Protocol):
    """Directory browser restricted to an allow-list of file extensions."""

    def init(self) -> Any | None: ...

    def update(self, message: Any) -> Any | None: ...

    def did_select_file(self, message: Any) -> tuple[bool, str]: ...

    def did_select_disabled_file(self, message: Any) -> tuple[bool, str]: ...


@dataclass(frozen=True)
class MenuModel:
    widget: ListWidget
    option: int = 0


@dataclass(frozen=True)
class FilePickerModel:
    widget: FileBrowserWidget
    selected_file: str = ""


@dataclass(frozen=True)
class AppModel:
    """Everything the dispatcher needs to decide the next step.

    Models are replaced on every update, never mutated. The widgets they
    reference are shared and keep their own state.
    """

    state: ViewState
    menu: MenuModel
    file_picker: FilePickerModel
    quitting: bool = False
    err: InvalidFileError | None = None


def new_model(list_widget: ListWidget, browser: FileBrowserWidget) -> AppModel:
    """Build the startup model with the menu active and nothing chosen."""
    return AppModel(
        state=ViewState.MENU,
        menu=MenuModel(widget=list_widget),
        file_picker=FilePickerModel(widget=browser),
    )
