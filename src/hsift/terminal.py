"""Push a command into the controlling terminal's pending input.

Uses the ``TIOCSTI`` ioctl, which simulates typed input one byte at a time,
so after the tool exits the shell shows the command at its prompt ready to
be edited or run.  Some kernels disable ``TIOCSTI`` for unprivileged
processes (Linux 6.2+ with ``dev.tty.legacy_tiocsti=0``); the call then
fails and ``InjectionError`` is raised so the caller can fall back to
printing the command.
"""

import fcntl
import logging
import termios

logger = logging.getLogger(__name__)


class InjectionError(Exception):
    """Raised when the command cannot be written into the terminal input."""


def inject(command: str, fd: int = 0) -> None:
    """Write each byte of ``command`` into the input queue of terminal ``fd``."""
    data = command.encode("utf-8")
    try:
        for i in range(len(data)):
            fcntl.ioctl(fd, termios.TIOCSTI, data[i : i + 1])
    except OSError as exc:
        logger.warning("TIOCSTI failed after %d of %d bytes: %s", i, len(data), exc)
        raise InjectionError(f"Cannot write to terminal input: {exc}") from exc
    logger.debug("injected %d bytes into fd %d", len(data), fd)
