"""Bounds-checked cell renderer shared by the box and line primitives.

A shape is described as a sequence of ``(x, y, glyph)`` cells. Cells are
validated one at a time just before they are emitted. The first cell that
falls outside the viewport produces a single boundary error and stops the
operation; nothing after it is written. A failed write stops it as well.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable

from rpian.terminal.ansi import cursor_to_sequence
from rpian.terminal.context import TerminalContext, current_context
from rpian.terminal.utils import glyph_width, visible_width
from rpian.terminal.viewport import check_position

logger = logging.getLogger(__name__)

Cell = tuple[int, int, str]


def _span_problem(x: int, y: int, width: int, context: TerminalContext) -> str | None:
    problem = check_position(x, y, context.viewport)
    if problem is None and width > 1:
        problem = check_position(x + width - 1, y, context.viewport)
    return problem


def render_cells(
    cells: Iterable[Cell],
    *,
    pause: float | None = None,
    ctx: TerminalContext | None = None,
) -> int:
    """Emit each cell as a cursor move followed by its glyph.

    *pause*, if given, is a delay in seconds between consecutive cells.
    Returns the number of cells drawn.
    """
    context = current_context(ctx)
    drawn = 0
    for x, y, glyph in cells:
        problem = _span_problem(x, y, max(glyph_width(glyph), 1), context)
        if problem is not None:
            logger.debug("Stopping after %d cells: %s", drawn, problem)
            context.boundary_error(problem)
            break
        if pause and drawn:
            time.sleep(pause)
        if not context.write(cursor_to_sequence(x, y) + glyph):
            break
        drawn += 1
    return drawn


def write_at(x: int, y: int, text: str, *, ctx: TerminalContext | None = None) -> bool:
    """Write *text* starting at ``(x, y)`` if all of it fits in the viewport."""
    context = current_context(ctx)
    problem = _span_problem(x, y, max(visible_width(text), 1), context)
    if problem is not None:
        context.boundary_error(problem)
        return False
    return context.write(cursor_to_sequence(x, y) + text)
