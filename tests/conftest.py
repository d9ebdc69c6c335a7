"""Shared fakes for exercising the dispatcher without a terminal."""

from __future__ import annotations

from pathlib import Path

import pytest

from logscope.core.messages import PathChosen
from logscope.core.state import DEFAULT_MENU_ITEMS, MenuItem, new_model


class FakeList:
    """List widget double that records what it was sent."""

    def __init__(self, item: MenuItem | None = None, command=None) -> None:
        self.item = item
        self.command = command
        self.sizes: list[tuple[int, int]] = []
        self.received: list = []

    def highlighted_item(self) -> MenuItem | None:
        return self.item

    def set_size(self, width: int, height: int) -> None:
        self.sizes.append((width, height))

    def update(self, message):
        self.received.append(message)
        return self.command


class FakeBrowser:
    """File browser double with fixed sets of valid and disabled paths."""

    def __init__(
        self,
        valid: tuple[str, ...] = (),
        disabled: tuple[str, ...] = (),
        command=None,
        init_command=None,
    ) -> None:
        self.valid = set(valid)
        self.disabled = set(disabled)
        self.command = command
        self.init_command = init_command
        self.received: list = []

    def init(self):
        return self.init_command

    def update(self, message):
        self.received.append(message)
        return self.command

    def did_select_file(self, message) -> tuple[bool, str]:
        if isinstance(message, PathChosen) and message.path in self.valid:
            return True, message.path
        return False, ""

    def did_select_disabled_file(self, message) -> tuple[bool, str]:
        if isinstance(message, PathChosen) and message.path in self.disabled:
            return True, message.path
        return False, ""


@pytest.fixture
def select_item() -> MenuItem:
    return DEFAULT_MENU_ITEMS[1]


@pytest.fixture
def reopen_item() -> MenuItem:
    return DEFAULT_MENU_ITEMS[0]


@pytest.fixture
def fake_list(select_item: MenuItem) -> FakeList:
    return FakeList(item=select_item)


@pytest.fixture
def fake_browser() -> FakeBrowser:
    return FakeBrowser(valid=("/var/log/app.txt",), disabled=("/etc/shadow",))


@pytest.fixture
def model(fake_list: FakeList, fake_browser: FakeBrowser):
    return new_model(fake_list, fake_browser)


@pytest.fixture
def log_dir(tmp_path: Path) -> Path:
    """A small directory tree with allowed, disabled and hidden files."""
    (tmp_path / "app.txt").write_text("started\n")
    (tmp_path / "go.mod").write_text("module example\n")
    (tmp_path / "image.png").write_bytes(b"\x89PNG")
    (tmp_path / ".secret.txt").write_text("hidden\n")
    (tmp_path / "nested").mkdir()
    (tmp_path / "nested" / "inner.md").write_text("# inner\n")
    return tmp_path
