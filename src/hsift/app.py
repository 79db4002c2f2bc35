"""Main application: the interactive search session."""

import logging
from collections.abc import Sequence

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.screen import ModalScreen
from textual.widgets import Static

from hsift.config import Settings, load_theme, save_theme
from hsift.constants import APP_TITLE, CHROME_ROWS, LABEL_HELP, LABEL_HISTORY
from hsift.domain.history import build_snapshot
from hsift.keys import decode_key
from hsift.models import InputEvent, Outcome, OutcomeKind
from hsift.screens.help import HelpScreen
from hsift.selection import SelectionStateMachine
from hsift.sources import MemoryHistorySource
from hsift.widgets.prompt_line import PromptLine
from hsift.widgets.result_list import ResultList

logger = logging.getLogger(__name__)


class HsiftApp(App[str | None]):
    """hsift: interactive shell history search.

    Every key press is decoded into an ``InputEvent`` and handed to the
    ``SelectionStateMachine``; the widgets are redrawn from whatever the
    machine emits.  The app exits with the selected command, or with None
    when the user aborts.
    """

    CSS_PATH = "app.tcss"
    TITLE = APP_TITLE

    BINDINGS = [
        Binding("ctrl+c", "abort", "Abort", show=False, priority=True),
        Binding("f1", "toggle_help", "Help", show=False),
    ]

    def __init__(
        self,
        snapshot: Sequence[str] | None = None,
        settings: Settings | None = None,
        initial_query: str = "",
        prompt: str | None = None,
    ) -> None:
        super().__init__()
        if snapshot is None:
            snapshot = build_snapshot(MemoryHistorySource().load())
        self._snapshot = tuple(snapshot)
        self._settings = settings or Settings()
        self._initial_query = initial_query
        self._prompt = prompt
        self._machine: SelectionStateMachine | None = None

    @property
    def machine(self) -> SelectionStateMachine | None:
        return self._machine

    def compose(self) -> ComposeResult:
        yield PromptLine(self._prompt, id="prompt")
        yield Static(LABEL_HELP, id="help-label")
        yield Static(LABEL_HISTORY, id="history-label")
        yield ResultList(highlight_matches=self._settings.highlight_matches, id="results")

    def on_mount(self) -> None:
        self.query_one("#help-label", Static).display = self._settings.show_help
        saved_theme = load_theme()
        if saved_theme and saved_theme in self.available_themes:
            self.theme = saved_theme

        capacity = self._viewport_rows(self.size.height)
        self._machine = SelectionStateMachine(self._snapshot, capacity)
        logger.info("session started: %d entries, capacity %d", len(self._snapshot), capacity)
        for ch in self._initial_query:
            self._machine.handle(InputEvent.append(ch))
        self._redraw()

    def watch_theme(self, theme: str) -> None:
        """Persist theme changes whenever the theme is changed."""
        save_theme(theme)

    def _viewport_rows(self, height: int) -> int:
        """Return how many result rows fit in a terminal ``height`` rows tall."""
        chrome = CHROME_ROWS if self._settings.show_help else CHROME_ROWS - 1
        return max(height - chrome, 0)

    def _get_results(self) -> ResultList:
        return self.query_one("#results", ResultList)

    def _redraw(self) -> None:
        """Push the machine's full state into the widgets."""
        if self._machine is None:
            return
        self.query_one("#prompt", PromptLine).typed = self._machine.query
        self._get_results().show(self._machine.results, self._machine.query, self._machine.cursor)

    def _dispatch(self, event: InputEvent) -> None:
        """Feed one event to the machine and reflect its outcome on screen."""
        if self._machine is None:
            return
        outcome: Outcome | None = self._machine.handle(event)
        if outcome is None:
            return
        if outcome.kind == OutcomeKind.QUERY_CHANGED:
            self._redraw()
        elif outcome.kind == OutcomeKind.CURSOR_CHANGED:
            self._get_results().move_highlight(outcome.previous, outcome.cursor)  # type: ignore[arg-type]
        elif outcome.kind == OutcomeKind.SELECTION_FINALIZED:
            logger.info("selection finalized: %r", outcome.result)
            self.exit(outcome.result)

    def on_key(self, event: events.Key) -> None:
        # Keys bubbling up from an overlay (help, command palette) are not input.
        if isinstance(self.screen, ModalScreen):
            return
        event.stop()
        self._dispatch(decode_key(event.key, event.character))

    def on_resize(self, event: events.Resize) -> None:
        """Adopt the new viewport height; rows refresh on the next query change."""
        if self._machine is None:
            return
        self._machine.capacity = self._viewport_rows(event.size.height)
        self._dispatch(InputEvent.resize())

    def action_toggle_help(self) -> None:
        self.push_screen(HelpScreen())

    def action_abort(self) -> None:
        """Leave the session without a result."""
        logger.info("session aborted")
        self.exit(None)
