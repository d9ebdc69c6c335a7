"""Errors raised or recorded by logscope."""

from __future__ import annotations


class InvalidFileError(ValueError):
    """The user chose a file that is not on the allow-list."""

    def __init__(self, path: str) -> None:
        super().__init__(f"{path} is not valid.")
        self.path = path

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InvalidFileError):
            return NotImplemented
        return self.path == other.path

    def __hash__(self) -> int:
        return hash((InvalidFileError, self.path))


class ConfigError(ValueError):
    """An environment setting could not be parsed."""
