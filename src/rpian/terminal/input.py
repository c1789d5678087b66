"""Keyboard and line input.

Read failures are reported to the error handler and come back as ``""``,
the same value returned at end of input.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from rpian.terminal.context import TerminalContext, current_context
from rpian.terminal.keys import parse_key

logger = logging.getLogger(__name__)


def _read(context: TerminalContext, reader: Callable[[], str]) -> str:
    try:
        return reader()
    except OSError as e:
        context.error_handler.handle_io_error(e)
        return ""


def read_key(*, ctx: TerminalContext | None = None) -> str:
    """Read one keypress and return its key id, e.g. ``"a"``, ``"up"``, ``"ctrl+c"``.

    Sequences that are not recognised are returned unchanged.
    """
    context = current_context(ctx)
    data = _read(context, context.terminal.read_sequence)
    if not data:
        return ""
    key = parse_key(data)
    if key is None:
        logger.debug("Unrecognised key sequence %r", data)
        return data
    return key


def read_char(*, ctx: TerminalContext | None = None) -> str:
    """Read one raw character without echo."""
    context = current_context(ctx)
    return _read(context, context.terminal.read_char)


def read_line(*, ctx: TerminalContext | None = None) -> str:
    """Read a line and return it with surrounding whitespace removed."""
    context = current_context(ctx)
    return _read(context, context.terminal.read_line).strip()
