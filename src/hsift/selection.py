"""Keystroke-driven selection state for one interactive session."""

import logging
from collections.abc import Sequence

from hsift.constants import CURSOR_IN_PROMPT
from hsift.domain.history import match
from hsift.models import EventKind, InputEvent, Outcome, OutcomeKind

logger = logging.getLogger(__name__)


class SelectionStateMachine:
    """Owns the query, the result list and the highlighted row.

    Every edit rebuilds the result list from the snapshot and puts the
    cursor back on the query line, so the cursor can never point at a row
    that no longer exists.  Once a confirm event has been handled the
    machine is finished and ignores anything else it is fed.

    ``capacity`` may be changed at any time (e.g. on terminal resize); the
    new value applies from the next query change.
    """

    def __init__(self, snapshot: Sequence[str], capacity: int) -> None:
        self._snapshot = snapshot
        self._capacity = max(capacity, 0)
        self._query = ""
        self._cursor = CURSOR_IN_PROMPT
        self._results: list[str] = match(snapshot, None, self._capacity)
        self._finished = False

    @property
    def query(self) -> str:
        return self._query

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def results(self) -> tuple[str, ...]:
        return tuple(self._results)

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def capacity(self) -> int:
        return self._capacity

    @capacity.setter
    def capacity(self, value: int) -> None:
        self._capacity = max(value, 0)

    @property
    def selected(self) -> str | None:
        """Return the highlighted entry, or None while the query line has focus."""
        if self._cursor == CURSOR_IN_PROMPT:
            return None
        return self._results[self._cursor]

    def handle(self, event: InputEvent) -> Outcome | None:
        """Apply one input event and return what it emitted, if anything."""
        if self._finished:
            return None

        kind = event.kind
        if kind == EventKind.APPEND:
            self._query += event.char or ""
            outcome = self._refilter()
        elif kind == EventKind.DELETE_LAST:
            self._query = self._query[:-1]
            outcome = self._refilter()
        elif kind == EventKind.MOVE_UP:
            outcome = self._move_up()
        elif kind == EventKind.MOVE_DOWN:
            outcome = self._move_down()
        elif kind == EventKind.CONFIRM:
            outcome = self._confirm()
        else:
            outcome = None

        logger.debug("event=%s outcome=%s", event, outcome)
        return outcome

    def _refilter(self) -> Outcome:
        self._results = match(self._snapshot, self._query or None, self._capacity)
        self._cursor = CURSOR_IN_PROMPT
        suggestion = self._results[0] if self._results else None
        return Outcome(OutcomeKind.QUERY_CHANGED, suggestion=suggestion)

    def _move_up(self) -> Outcome:
        previous = self._cursor
        if self._cursor > CURSOR_IN_PROMPT:
            self._cursor -= 1
        return Outcome(OutcomeKind.CURSOR_CHANGED, previous=previous, cursor=self._cursor)

    def _move_down(self) -> Outcome:
        previous = self._cursor
        if self._cursor + 1 < len(self._results):
            self._cursor += 1
        elif self._results:
            self._cursor = 0
        return Outcome(OutcomeKind.CURSOR_CHANGED, previous=previous, cursor=self._cursor)

    def _confirm(self) -> Outcome:
        # At the query line the typed text is returned verbatim, not the top row.
        result = self.selected if self._cursor != CURSOR_IN_PROMPT else self._query
        self._finished = True
        return Outcome(OutcomeKind.SELECTION_FINALIZED, result=result)
