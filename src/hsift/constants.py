"""Application-wide constants."""

from pathlib import Path

APP_TITLE = "hsift"

HISTFILE_ENV = "HISTFILE"
DEFAULT_HISTORY_PATH = Path("~/.bash_history")

# Cursor value meaning "focus is on the query line, no row highlighted".
CURSOR_IN_PROMPT = -1

LABEL_HISTORY = " HISTORY "
LABEL_HELP = "Type to filter history, use UP and DOWN arrows to navigate, ENTER to select"

# Rows above the result list: prompt line, help label, history label bar.
CHROME_ROWS = 3

DEFAULT_LIST_LIMIT = 20

DEFAULT_LOG_PATH = Path("~/.cache/hsift/hsift.log")

# Exit code for a session aborted with ctrl+c (128 + SIGINT).
EXIT_ABORTED = 130

HELP_TEXT = """\
 Filter
 ──────────────────────────────
 any key      Append to the query
 Backspace    Delete last character

 Navigation
 ──────────────────────────────
 ↓            Highlight next row (wraps)
 ↑            Highlight previous row
              (above the first row: query)

 Select
 ──────────────────────────────
 Enter        Use highlighted row, or the
              typed query if none is
              highlighted

 General
 ──────────────────────────────
 F1           Toggle this help
 Ctrl+C       Abort without a result\
"""

# Sample history used by the in-memory source when none is supplied.
MOCK_HISTORY: list[str] = [
    "ls -la",
    "git status",
    "ls -la",
    "git commit -m 'wip'",
    "ls /tmp",
    "docker ps",
    "git log --oneline",
    "python -m pytest",
    "cd ~/src",
    "grep -rn TODO .",
]
