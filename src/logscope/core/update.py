"""Message dispatcher - decides the next model and what to schedule."""

from __future__ import annotations

import logging
from dataclasses import replace

from logscope.core.errors import InvalidFileError
from logscope.core.messages import (
    Action,
    ClearError,
    KeyPressed,
    Message,
    Quit,
    Resized,
    Tick,
    batch,
)
from logscope.core.state import AppModel, MenuAction, ViewState

logger = logging.getLogger(__name__)

QUIT_KEYS = frozenset({"ctrl+c", "q"})
BACK_KEY = "escape"
CONFIRM_KEY = "enter"

# Seconds an invalid-file notice stays on screen.
ERROR_CLEAR_DELAY = 2.0

# Menu margin: 1 row above and below, 2 columns left and right.
MENU_FRAME_WIDTH = 4
MENU_FRAME_HEIGHT = 2

# Menu actions that open the file picker when confirmed.
_OPENS_PICKER = frozenset({MenuAction.SELECT_FILE})

Result = tuple[AppModel, list[Action]]


def init(model: AppModel) -> list[Action]:
    """First actions to run once the driver starts."""
    return batch(model.file_picker.widget.init())


def update(
    model: AppModel,
    message: Message,
    *,
    error_delay: float = ERROR_CLEAR_DELAY,
) -> Result:
    """Apply ``message`` to ``model``.

    Returns the replacement model and the actions the driver should run.
    Quit keys win in every state; an error-clear tick empties ``err`` no
    matter which screen is showing.
    """
    if model.quitting:
        return model, []

    if isinstance(message, KeyPressed) and message.key in QUIT_KEYS:
        logger.debug("Quit requested with %s", message.key)
        return replace(model, quitting=True), [Quit()]

    if isinstance(message, ClearError):
        model = replace(model, err=None)

    if model.state is ViewState.FILE_SELECT:
        return _update_file_picker(model, message, error_delay)
    # Every other state, LOG included, is driven by the menu list.
    return _update_menu(model, message)


def _update_menu(model: AppModel, message: Message) -> Result:
    widget = model.menu.widget

    if isinstance(message, KeyPressed) and message.key == CONFIRM_KEY:
        item = widget.highlighted_item()
        if item is not None and item.action in _OPENS_PICKER:
            logger.info("Menu: %r chosen, opening file picker", item.title)
            model = replace(
                model,
                state=ViewState.FILE_SELECT,
                menu=replace(model.menu, option=int(item.action)),
            )
    elif isinstance(message, Resized):
        widget.set_size(
            max(message.width - MENU_FRAME_WIDTH, 0),
            max(message.height - MENU_FRAME_HEIGHT, 0),
        )

    return model, batch(widget.update(message))


def _update_file_picker(
    model: AppModel, message: Message, error_delay: float
) -> Result:
    if isinstance(message, KeyPressed) and message.key == BACK_KEY:
        return replace(model, state=ViewState.MENU), []

    widget = model.file_picker.widget
    command = widget.update(message)

    did_select, path = widget.did_select_file(message)
    if did_select:
        model = replace(
            model, file_picker=replace(model.file_picker, selected_file=path)
        )

    # Checked last so a disabled selection wins over a valid one.
    did_select, path = widget.did_select_disabled_file(message)
    if did_select:
        logger.info("Rejected disabled file %s", path)
        model = replace(
            model,
            err=InvalidFileError(path),
            file_picker=replace(model.file_picker, selected_file=""),
        )
        return model, batch(command, Tick(error_delay, ClearError()))

    return model, batch(command)
