"""History source protocol and implementations."""

import logging
import os
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

from hsift.constants import DEFAULT_HISTORY_PATH, HISTFILE_ENV, MOCK_HISTORY

logger = logging.getLogger(__name__)


class SourceUnavailable(Exception):
    """Raised when no history can be loaded; the session cannot start."""

    def __init__(self, location: str, reason: str) -> None:
        super().__init__(f"History file not found: {location} ({reason})")
        self.location = location
        self.reason = reason


class HistorySource(Protocol):
    """Protocol that every history backend must satisfy."""

    def load(self) -> str:
        """Return the whole history as newline-separated text, oldest first."""
        ...

    def describe(self) -> str:
        """Return a short human-readable label for diagnostics."""
        ...


def resolve_history_path(path: Path | None = None) -> Path:
    """Pick the history file: explicit path, then $HISTFILE, then ~/.bash_history."""
    if path is not None:
        return path.expanduser()
    env_path = os.environ.get(HISTFILE_ENV)
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_HISTORY_PATH.expanduser()


class FileHistorySource:
    """Reads a shell history file from disk.

    Undecodable bytes are replaced rather than rejected, so a history file
    with stray binary never prevents a session from starting.
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = resolve_history_path(path)

    @property
    def path(self) -> Path:
        return self._path

    def describe(self) -> str:
        return str(self._path)

    def load(self) -> str:
        if not self._path.is_file():
            raise SourceUnavailable(str(self._path), "no such file")
        try:
            text = self._path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            raise SourceUnavailable(str(self._path), exc.strerror or str(exc)) from exc
        logger.info("loaded %d bytes of history from %s", len(text), self._path)
        return text


class MemoryHistorySource:
    """In-memory source seeded from a list of lines, oldest first."""

    def __init__(self, lines: Iterable[str] | None = None) -> None:
        self._lines: list[str] = list(MOCK_HISTORY if lines is None else lines)

    def describe(self) -> str:
        return "<memory>"

    def load(self) -> str:
        return "".join(f"{line}\n" for line in self._lines)
