"""Messages fed into the dispatcher and the actions it schedules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Union


# === Incoming messages ===


@dataclass(frozen=True)
class KeyPressed:
    """A key press, named the way Textual names keys ("ctrl+c", "escape").

    ``character`` is the printable character typed, if any; Textual names
    punctuation keys ("slash") so widgets match on the character instead.
    """

    key: str
    character: str | None = None

    @property
    def token(self) -> str:
        """The typed character for printable keys, otherwise the key name."""
        if self.character and self.character.isprintable():
            return self.character
        return self.key


@dataclass(frozen=True)
class Resized:
    width: int
    height: int


@dataclass(frozen=True)
class PathChosen:
    """The directory browser reports a file was chosen (keyboard or mouse)."""

    path: str


@dataclass(frozen=True)
class ClearError:
    """Delivered by the error-clear timer."""


Message = Union[KeyPressed, Resized, PathChosen, ClearError]


# === Scheduled actions ===


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class Tick:
    """Deliver ``message`` back to the dispatcher once, after ``delay`` seconds."""

    delay: float
    message: Any


@dataclass(frozen=True)
class Call:
    """A widget command, run by the driver on its event loop."""

    callback: Callable[[], Awaitable[Any] | Any]


Action = Union[Quit, Tick, Call]


def batch(*actions: Action | None) -> list[Action]:
    """Collect actions, dropping empty widget commands."""
    return [action for action in actions if action is not None]
