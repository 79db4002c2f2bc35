"""Command-line entry point: load history, run the session, hand back the result."""

import logging
from enum import Enum
from pathlib import Path
from typing import Optional

import typer

from hsift import __version__
from hsift.config import ConfigError, load_settings
from hsift.constants import DEFAULT_LIST_LIMIT, DEFAULT_LOG_PATH, EXIT_ABORTED
from hsift.domain.history import build_snapshot, match
from hsift.sources import FileHistorySource, SourceUnavailable
from hsift.terminal import InjectionError, inject

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Interactively search shell history and put the chosen command on the prompt.",
    add_completion=False,
)

# Module-level defaults for Typer arguments
_QUERY_HELP = "Query to start with (with --list: the query to match)"
_HISTORY_FILE_HELP = "History file to search (default: $HISTFILE, then ~/.bash_history)"
_PRINT_HELP = "Print the selected command to stdout instead of typing it into the terminal"
_LIST_HELP = "Print matching history entries without starting the interactive session"
_LIMIT_HELP = "Maximum number of entries printed by --list"
_LOG_LEVEL_HELP = "Logging level for the log file"
_LOG_FILE_HELP = "Where to write the log (the terminal belongs to the UI)"


class LogLevel(str, Enum):
    debug = "debug"
    info = "info"
    warning = "warning"
    error = "error"


def configure_logging(level: LogLevel, log_file: Path) -> None:
    """Send log records to ``log_file``; stderr is unusable while the UI runs."""
    log_file = log_file.expanduser()
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=getattr(logging, level.value.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        filename=str(log_file),
        filemode="a",
        force=True,
    )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"hsift {__version__}")
        raise typer.Exit()


def load_snapshot(history_file: Path | None) -> tuple[str, ...]:
    """Load and split history, exiting with a diagnostic if none is available."""
    source = FileHistorySource(history_file)
    try:
        raw = source.load()
    except SourceUnavailable as exc:
        logger.error("%s", exc)
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    snapshot = build_snapshot(raw)
    if not snapshot:
        logger.warning("history at %s is empty", source.describe())
    else:
        logger.info("history at %s: %d entries", source.describe(), len(snapshot))
    return snapshot


def deliver(command: str, print_only: bool) -> None:
    """Hand the selected command back to the shell.

    By default the command is typed into the terminal.  If that fails the
    session is already over, so the command is printed instead and the
    failure reported on stderr.
    """
    if not command:
        return
    if print_only:
        typer.echo(command)
        return
    try:
        inject(command)
    except InjectionError as exc:
        typer.echo(f"{exc}; printing the command instead", err=True)
        typer.echo(command)


@app.command()
def main(
    query: Optional[str] = typer.Argument(  # noqa: B008
        None,
        help=_QUERY_HELP,
        show_default=False,
    ),
    history_file: Optional[Path] = typer.Option(  # noqa: B008
        None,
        "--history-file",
        "-f",
        help=_HISTORY_FILE_HELP,
        show_default=False,
    ),
    print_only: bool = typer.Option(False, "--print", "-p", help=_PRINT_HELP),  # noqa: B008
    list_only: bool = typer.Option(False, "--list", "-l", help=_LIST_HELP),  # noqa: B008
    limit: int = typer.Option(DEFAULT_LIST_LIMIT, "--limit", "-n", min=0, help=_LIMIT_HELP),  # noqa: B008
    log_level: LogLevel = typer.Option(  # noqa: B008
        LogLevel.warning,
        "--log-level",
        case_sensitive=False,
        help=_LOG_LEVEL_HELP,
    ),
    log_file: Path = typer.Option(DEFAULT_LOG_PATH, "--log-file", help=_LOG_FILE_HELP),  # noqa: B008
    version: bool = typer.Option(  # noqa: B008
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Search shell history and return the chosen command to the shell."""
    configure_logging(log_level, log_file)

    try:
        settings = load_settings()
    except ConfigError as exc:
        typer.echo(f"Config error: {exc}", err=True)
        raise typer.Exit(code=2) from exc

    snapshot = load_snapshot(history_file or settings.history_file)

    if list_only:
        for entry in match(snapshot, query, limit):
            typer.echo(entry)
        return

    # Textual is only needed for the interactive session.
    from hsift.app import HsiftApp

    result = HsiftApp(snapshot, settings=settings, initial_query=query or "").run()
    if result is None:
        raise typer.Exit(code=EXIT_ABORTED)
    deliver(result, print_only)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
