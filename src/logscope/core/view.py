"""Projection of the app model onto what the screen should show."""

from __future__ import annotations

from dataclasses import dataclass

from rich.style import Style
from rich.text import Text

from logscope.core.state import AppModel, ViewState

DISABLED_FILE_STYLE = Style(color="color(243)")
SELECTED_STYLE = Style(color="color(212)", bold=True)

PICK_PROMPT = "Pick a file:"
LOG_PLACEHOLDER = "The log view is not available yet."

MENU_PANE = ViewState.MENU.value
FILE_SELECT_PANE = ViewState.FILE_SELECT.value
LOG_PANE = ViewState.LOG.value


@dataclass(frozen=True)
class Frame:
    """Which pane to show and the text heading it.

    ``pane`` is ``None`` when nothing should be drawn.
    """

    pane: str | None
    header: Text | str = ""

    @property
    def plain(self) -> str:
        return self.header.plain if isinstance(self.header, Text) else self.header


def render(model: AppModel) -> Frame:
    if model.quitting:
        return Frame(pane=None)
    if model.state is ViewState.MENU:
        return Frame(pane=MENU_PANE)
    if model.state is ViewState.FILE_SELECT:
        return Frame(pane=FILE_SELECT_PANE, header=file_picker_header(model))
    return Frame(pane=LOG_PANE, header=LOG_PLACEHOLDER)


def file_picker_header(model: AppModel) -> Text:
    """Error notice, prompt, or the chosen path - in that order of priority."""
    if model.err is not None:
        return Text(str(model.err), style=DISABLED_FILE_STYLE)
    selected = model.file_picker.selected_file
    if not selected:
        return Text(PICK_PROMPT)
    return Text.assemble("Selected file: ", (selected, SELECTED_STYLE))
