"""Runtime settings read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

from textual.logging import TextualHandler

from logscope.core.errors import ConfigError
from logscope.core.update import ERROR_CLEAR_DELAY

DEFAULT_ALLOWED_TYPES: tuple[str, ...] = (".mod", ".sum", ".go", ".txt", ".md")

_TRUTHY = {"1", "true", "yes", "on"}


def _parse_types(raw: str) -> tuple[str, ...]:
    types = []
    for part in raw.split(","):
        part = part.strip().lower()
        if not part:
            continue
        types.append(part if part.startswith(".") else f".{part}")
    return tuple(types)


@dataclass(frozen=True)
class Settings:
    """Where the file picker starts and what it accepts."""

    start_dir: Path = field(default_factory=Path.home)
    allowed_types: tuple[str, ...] = DEFAULT_ALLOWED_TYPES
    show_hidden: bool = False
    error_timeout: float = ERROR_CLEAR_DELAY
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> Settings:
        """Build settings from ``LOGSCOPE_*`` variables.

        Raises ConfigError for values that cannot be parsed.
        """
        if env is None:
            env = os.environ

        kwargs: dict = {}

        if start := env.get("LOGSCOPE_START_DIR"):
            kwargs["start_dir"] = Path(start).expanduser()

        if (types := env.get("LOGSCOPE_ALLOWED_TYPES")) is not None:
            kwargs["allowed_types"] = _parse_types(types)

        if hidden := env.get("LOGSCOPE_SHOW_HIDDEN"):
            kwargs["show_hidden"] = hidden.strip().lower() in _TRUTHY

        if timeout := env.get("LOGSCOPE_ERROR_TIMEOUT"):
            try:
                kwargs["error_timeout"] = float(timeout)
            except ValueError:
                raise ConfigError(
                    f"LOGSCOPE_ERROR_TIMEOUT must be a number, got {timeout!r}"
                ) from None
            if kwargs["error_timeout"] < 0:
                raise ConfigError("LOGSCOPE_ERROR_TIMEOUT cannot be negative")

        if level := env.get("LOGSCOPE_LOG_LEVEL"):
            level = level.strip().upper()
            if not isinstance(logging.getLevelName(level), int):
                raise ConfigError(f"Unknown log level: {level}")
            kwargs["log_level"] = level

        return cls(**kwargs)


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Send logscope's log records to the Textual devtools console."""
    logger = logging.getLogger("logscope")
    logger.setLevel(level)
    if not any(isinstance(h, TextualHandler) for h in logger.handlers):
        logger.addHandler(TextualHandler())
    return logger
