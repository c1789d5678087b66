"""Error taxonomy and the pluggable, process-wide error handler.

Library functions never raise for terminal failures. Instead they report
them to the installed ``ErrorHandler`` and return without emitting anything
further. Two kinds of failure exist:

* I/O failures -- a write to or read from the terminal failed.
* Boundary failures -- a coordinate or shape falls outside the configured
  viewport, or a shape is too small to draw.

The default ``NullErrorHandler`` discards I/O failures and only logs
boundary failures at DEBUG level. Install ``LoggingErrorHandler`` to see
both, or ``RaisingErrorHandler`` to turn them into exceptions.

Installing a handler replaces shared global state without any locking.
Install it once at startup, before other threads touch the terminal.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

logger = logging.getLogger("rpian.terminal")


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class TerminalError(Exception):
    """Base class for errors raised by ``RaisingErrorHandler``."""


class BoundaryError(TerminalError):
    """A coordinate or shape fell outside the viewport or was degenerate."""


class TerminalIOError(TerminalError):
    """Reading from or writing to the terminal failed."""

    def __init__(self, error: OSError) -> None:
        super().__init__(str(error))
        self.error = error


# ---------------------------------------------------------------------------
# Handler protocol and implementations
# ---------------------------------------------------------------------------


@runtime_checkable
class ErrorHandler(Protocol):
    """Receives failures reported by the library."""

    def handle_io_error(self, error: OSError) -> None: ...

    def handle_boundary_error(self, message: str) -> None: ...


class NullErrorHandler:
    """Default handler: ignore I/O errors, log boundary errors at DEBUG."""

    def handle_io_error(self, error: OSError) -> None:
        pass

    def handle_boundary_error(self, message: str) -> None:
        logger.debug("Boundary error: %s", message)


class LoggingErrorHandler:
    """Report every failure through :mod:`logging`."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger

    def handle_io_error(self, error: OSError) -> None:
        self._log.error("Terminal I/O error: %s", error)

    def handle_boundary_error(self, message: str) -> None:
        self._log.warning("Boundary error: %s", message)


class RaisingErrorHandler:
    """Raise ``TerminalIOError`` / ``BoundaryError`` from the failing call."""

    def handle_io_error(self, error: OSError) -> None:
        raise TerminalIOError(error) from error

    def handle_boundary_error(self, message: str) -> None:
        raise BoundaryError(message)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

_handler: ErrorHandler = NullErrorHandler()


def set_error_handler(handler: ErrorHandler) -> ErrorHandler:
    """Install *handler* globally and return the one it replaces.

    Not thread-safe: callers must serialize installation themselves.
    """
    global _handler
    previous = _handler
    _handler = handler
    logger.debug("Installed error handler %s", type(handler).__name__)
    return previous


def get_error_handler() -> ErrorHandler:
    return _handler


def handle_io_error(error: OSError, handler: ErrorHandler | None = None) -> None:
    """Report an I/O failure to *handler* (default: the installed one)."""
    (handler or _handler).handle_io_error(error)


def handle_boundary_error(message: str, handler: ErrorHandler | None = None) -> None:
    """Report a boundary failure to *handler* (default: the installed one)."""
    (handler or _handler).handle_boundary_error(message)
