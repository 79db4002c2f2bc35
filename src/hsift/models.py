"""Domain models."""

from dataclasses import dataclass
from enum import Enum, auto


class EventKind(Enum):
    APPEND = auto()
    DELETE_LAST = auto()
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    CONFIRM = auto()
    RESIZE = auto()
    IGNORED = auto()


@dataclass(frozen=True)
class InputEvent:
    """One abstract keystroke, already decoded from the terminal.

    Only ``APPEND`` carries a payload (``char``); every other kind is a
    bare tag.
    """

    kind: EventKind
    char: str | None = None

    @classmethod
    def append(cls, char: str) -> "InputEvent":
        return cls(EventKind.APPEND, char)

    @classmethod
    def delete_last(cls) -> "InputEvent":
        return cls(EventKind.DELETE_LAST)

    @classmethod
    def move_up(cls) -> "InputEvent":
        return cls(EventKind.MOVE_UP)

    @classmethod
    def move_down(cls) -> "InputEvent":
        return cls(EventKind.MOVE_DOWN)

    @classmethod
    def confirm(cls) -> "InputEvent":
        return cls(EventKind.CONFIRM)

    @classmethod
    def resize(cls) -> "InputEvent":
        return cls(EventKind.RESIZE)

    @classmethod
    def ignored(cls) -> "InputEvent":
        return cls(EventKind.IGNORED)


class OutcomeKind(Enum):
    QUERY_CHANGED = auto()
    CURSOR_CHANGED = auto()
    SELECTION_FINALIZED = auto()


@dataclass(frozen=True)
class Outcome:
    """What a single state machine transition emitted.

    - QUERY_CHANGED: ``suggestion`` is the first entry of the new result
      list, or None when nothing matched.
    - CURSOR_CHANGED: ``previous`` and ``cursor`` are the old and new
      highlight positions, so a display can redraw just those two rows.
    - SELECTION_FINALIZED: ``result`` is the string handed back to the shell.
    """

    kind: OutcomeKind
    suggestion: str | None = None
    previous: int | None = None
    cursor: int | None = None
    result: str | None = None
