"""Explicit terminal context.

Every emitting, drawing and input function takes an optional ``ctx``. When
it is omitted the ambient context is used: the one installed with
``use_context``, or else one assembled from the process-wide terminal,
viewport and error handler. Passing a ``TerminalContext`` explicitly keeps a
call independent of global state.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from rpian.terminal.errors import ErrorHandler, NullErrorHandler, get_error_handler
from rpian.terminal.terminal import ProcessTerminal, Terminal
from rpian.terminal.viewport import Viewport, check_position, get_viewport

logger = logging.getLogger(__name__)


@dataclass
class TerminalContext:
    """Terminal back-end, viewport bounds and error handler for a call."""

    terminal: Terminal = field(default_factory=ProcessTerminal)
    viewport: Viewport | None = None
    error_handler: ErrorHandler = field(default_factory=NullErrorHandler)

    def write(self, data: str) -> bool:
        """Write *data*; report an ``OSError`` to the handler and return False."""
        try:
            self.terminal.write(data)
        except OSError as e:
            self.error_handler.handle_io_error(e)
            return False
        return True

    def check(self, x: int, y: int) -> bool:
        """Report a boundary error and return False if ``(x, y)`` is out of bounds."""
        problem = check_position(x, y, self.viewport)
        if problem is None:
            return True
        self.error_handler.handle_boundary_error(problem)
        return False

    def boundary_error(self, message: str) -> None:
        self.error_handler.handle_boundary_error(message)


# ---------------------------------------------------------------------------
# Ambient context
# ---------------------------------------------------------------------------

_terminal: Terminal = ProcessTerminal()
_active: TerminalContext | None = None


def set_terminal(terminal: Terminal) -> Terminal:
    """Replace the process-wide terminal back-end, returning the old one."""
    global _terminal
    previous = _terminal
    _terminal = terminal
    return previous


def get_terminal() -> Terminal:
    return _terminal


def current_context(ctx: TerminalContext | None = None) -> TerminalContext:
    """Resolve the context a call should use."""
    if ctx is not None:
        return ctx
    if _active is not None:
        return _active
    return TerminalContext(
        terminal=_terminal,
        viewport=get_viewport(),
        error_handler=get_error_handler(),
    )


@contextmanager
def use_context(ctx: TerminalContext) -> Iterator[TerminalContext]:
    """Make *ctx* the ambient context for the duration of the block."""
    global _active
    previous = _active
    _active = ctx
    logger.debug("Entering explicit terminal context")
    try:
        yield ctx
    finally:
        _active = previous
