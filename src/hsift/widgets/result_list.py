"""Result list widget: one history entry per row with a highlight marker."""

from rich.text import Text
from textual.widget import Widget

from hsift.constants import CURSOR_IN_PROMPT
from hsift.domain.history import match_span

_MARKER = ">"
_NO_MARKER = " "


class ResultList(Widget):
    """Read-only rows of matching history entries.

    Rows are drawn top to bottom starting at the most relevant match.  The
    highlighted row is prefixed with ``>``; every other row with a space, so
    the text never shifts when the highlight moves.  While a query is
    active the first occurrence of it in each row is rendered bold.

    The widget holds no state of its own beyond what it was last shown:
    the app pushes a fresh snapshot of rows/query/cursor after every
    transition.
    """

    DEFAULT_CSS = """
    ResultList {
        height: 1fr;
    }
    """

    can_focus = False

    def __init__(
        self,
        *,
        highlight_matches: bool = True,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(id=id, classes=classes)
        self._highlight_matches = highlight_matches
        self._rows: tuple[str, ...] = ()
        self._query = ""
        self._cursor = CURSOR_IN_PROMPT

    @property
    def rows(self) -> tuple[str, ...]:
        return self._rows

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def row_count(self) -> int:
        return len(self._rows)

    def show(self, rows: tuple[str, ...], query: str, cursor: int) -> None:
        """Replace all rows, e.g. after the query changed."""
        self._rows = rows
        self._query = query
        self._cursor = cursor
        self.refresh()

    def move_highlight(self, previous: int, cursor: int) -> None:
        """Move the ``>`` marker from ``previous`` to ``cursor``."""
        if previous == cursor:
            return
        self._cursor = cursor
        self.refresh()

    def row_text(self, index: int) -> Text:
        """Return the styled text for row ``index``."""
        entry = self._rows[index]
        selected = index == self._cursor
        line = Text(_MARKER if selected else _NO_MARKER)
        line.append(entry)
        if self._highlight_matches:
            span = match_span(entry, self._query)
            if span is not None:
                start, end = span
                line.stylize("bold", start + 1, end + 1)
        if selected:
            line.stylize("reverse", 1)
        return line

    def render(self) -> Text:
        lines = Text("\n", no_wrap=True, overflow="ellipsis")
        return lines.join(self.row_text(i) for i in range(len(self._rows)))
