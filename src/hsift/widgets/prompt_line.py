"""Prompt line: ``user@host$`` followed by the query being typed."""

import getpass
import socket

from rich.text import Text
from textual.reactive import reactive
from textual.widgets import Static


def shell_prompt() -> str:
    """Return a bash-like ``user@host$ `` prefix for the prompt line."""
    try:
        user = getpass.getuser()
    except (KeyError, OSError):
        user = "?"
    return f"{user}@{socket.gethostname()}$ "


class PromptLine(Static):
    """One-line echo of the current query, rendered bold after the prompt.

    ``typed`` is kept in sync by the app; any change re-renders in place.
    """

    DEFAULT_CSS = """
    PromptLine {
        height: 1;
    }
    """

    typed: reactive[str] = reactive("", init=False)

    def __init__(
        self,
        prompt: str | None = None,
        *,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(id=id, classes=classes)
        self._prompt = shell_prompt() if prompt is None else prompt

    @property
    def prompt(self) -> str:
        return self._prompt

    def _line(self) -> Text:
        return Text.assemble(self._prompt, (self.typed, "bold"))

    def on_mount(self) -> None:
        self.update(self._line())

    def watch_typed(self, typed: str) -> None:
        self.update(self._line())
