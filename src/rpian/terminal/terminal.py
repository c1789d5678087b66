"""Terminal back-end for raw stdin/stdout interaction.

Provides a ``Terminal`` protocol and a concrete ``ProcessTerminal``
implementation that writes escape sequences to ``sys.stdout`` (flushing after
every write) and reads keys from ``sys.stdin`` in raw mode.
"""

from __future__ import annotations

import logging
import os
import select
import sys
import termios
import tty
from typing import Protocol

from rpian.terminal.keys import ESC, is_complete_sequence

logger = logging.getLogger(__name__)

# Seconds to wait for the rest of an escape sequence after a lone ESC byte.
_SEQUENCE_TIMEOUT = 0.05


# ---------------------------------------------------------------------------
# Terminal protocol
# ---------------------------------------------------------------------------


class Terminal(Protocol):
    """Interface for terminal I/O operations."""

    def write(self, data: str) -> None: ...

    def read_char(self) -> str: ...

    def read_sequence(self) -> str: ...

    def read_line(self) -> str: ...

    @property
    def columns(self) -> int: ...

    @property
    def rows(self) -> int: ...


# ---------------------------------------------------------------------------
# ProcessTerminal implementation
# ---------------------------------------------------------------------------


class ProcessTerminal:
    """Concrete terminal backed by ``sys.stdin``/``sys.stdout``.

    Writes are flushed immediately so partial sequences never sit in a
    buffer between calls. ``OSError`` from the underlying streams propagates
    to the caller, which routes it to the installed error handler.
    """

    # -- properties ---------------------------------------------------------

    @property
    def columns(self) -> int:
        try:
            return os.get_terminal_size(sys.stdout.fileno()).columns
        except (ValueError, OSError):
            return 80

    @property
    def rows(self) -> int:
        try:
            return os.get_terminal_size(sys.stdout.fileno()).lines
        except (ValueError, OSError):
            return 24

    # -- output -------------------------------------------------------------

    def write(self, data: str) -> None:
        """Write *data* to stdout and flush it."""
        sys.stdout.write(data)
        sys.stdout.flush()

    # -- input --------------------------------------------------------------

    def read_char(self) -> str:
        """Read a single keypress without echo.

        Returns ``""`` at end of input.
        """
        if not _isatty(sys.stdin):
            return sys.stdin.read(1)

        fd = sys.stdin.fileno()
        original = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            return _read_utf8_char(fd)
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, original)

    def read_sequence(self) -> str:
        """Read one keypress, including a complete escape sequence if any."""
        if not _isatty(sys.stdin):
            return sys.stdin.read(1)

        fd = sys.stdin.fileno()
        original = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            data = _read_utf8_char(fd)
            if data != ESC:
                return data
            while is_complete_sequence(data) == "incomplete":
                ready, _, _ = select.select([fd], [], [], _SEQUENCE_TIMEOUT)
                if not ready:
                    # A bare ESC press.
                    break
                ch = _read_utf8_char(fd)
                if not ch:
                    break
                data += ch
            logger.debug("Read key sequence %r", data)
            return data
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, original)

    def read_line(self) -> str:
        """Read a line with echo. Returns ``""`` at end of input."""
        return sys.stdin.readline()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _isatty(stream: object) -> bool:
    try:
        return stream.isatty()  # type: ignore[attr-defined]
    except (AttributeError, ValueError):
        return False


def _read_utf8_char(fd: int) -> str:
    """Read one UTF-8 encoded character from *fd*, byte by byte."""
    first = os.read(fd, 1)
    if not first:
        return ""
    lead = first[0]
    if lead < 0x80:
        extra = 0
    elif lead >= 0xF0:
        extra = 3
    elif lead >= 0xE0:
        extra = 2
    elif lead >= 0xC0:
        extra = 1
    else:
        extra = 0
    raw = first
    for _ in range(extra):
        nxt = os.read(fd, 1)
        if not nxt:
            break
        raw += nxt
    return raw.decode("utf-8", errors="replace")
