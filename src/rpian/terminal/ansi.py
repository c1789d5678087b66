"""ANSI escape-code emitter.

Each public function writes one complete escape sequence (or one piece of
text) through the terminal and flushes it. A failed write never escapes as
an ``OSError``: it goes to the error handler and the function returns
``False``.
"""

from __future__ import annotations

from enum import IntEnum

from rpian.terminal.context import TerminalContext, current_context

# ---------------------------------------------------------------------------
# ANSI escape constants
# ---------------------------------------------------------------------------

CSI = "\x1b["

_CLEAR_SCREEN = "\x1b[2J\x1b[H"
_CLEAR_LINE = "\x1b[2K"
_CLEAR_TO_LINE_END = "\x1b[K"
_CLEAR_TO_LINE_START = "\x1b[1K"
_CLEAR_TO_SCREEN_END = "\x1b[J"
_CLEAR_TO_SCREEN_START = "\x1b[1J"
_SAVE_CURSOR = "\x1b7"
_RESTORE_CURSOR = "\x1b8"
_SHOW_CURSOR = "\x1b[?25h"
_HIDE_CURSOR = "\x1b[?25l"
_RESET = "\x1b[0m"


class Color(IntEnum):
    """The eight standard ANSI colors."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7


class Attribute(IntEnum):
    """SGR text attributes."""

    RESET = 0
    BRIGHT = 1
    DIM = 2
    UNDERLINE = 4
    BLINK = 5
    REVERSE = 7
    HIDDEN = 8


# ---------------------------------------------------------------------------
# Sequence builders
# ---------------------------------------------------------------------------


def sgr_sequence(*codes: int) -> str:
    """Select Graphic Rendition sequence for *codes*."""
    return f"{CSI}{';'.join(str(c) for c in codes)}m"


def fg_sequence(color: Color) -> str:
    return sgr_sequence(30 + int(color))


def bg_sequence(color: Color) -> str:
    return sgr_sequence(40 + int(color))


def cursor_to_sequence(x: int, y: int) -> str:
    """Cursor Position sequence; the terminal expects row first."""
    return f"{CSI}{y};{x}H"


# ---------------------------------------------------------------------------
# Text output
# ---------------------------------------------------------------------------


def print_text(text: str, *, ctx: TerminalContext | None = None) -> bool:
    """Write *text* as-is and flush."""
    return current_context(ctx).write(text)


def println(text: str = "", *, ctx: TerminalContext | None = None) -> bool:
    return print_text(text + "\n", ctx=ctx)


def put_char(ch: str, *, ctx: TerminalContext | None = None) -> bool:
    return print_text(ch, ctx=ctx)


# ---------------------------------------------------------------------------
# Cursor
# ---------------------------------------------------------------------------


def move_cursor_to(x: int, y: int, *, ctx: TerminalContext | None = None) -> bool:
    """Move the cursor to column *x*, row *y* (1-based).

    A position outside the viewport is a boundary error and nothing is
    written.
    """
    context = current_context(ctx)
    if not context.check(x, y):
        return False
    return context.write(cursor_to_sequence(x, y))


def save_cursor_location(*, ctx: TerminalContext | None = None) -> bool:
    return print_text(_SAVE_CURSOR, ctx=ctx)


def restore_cursor_location(*, ctx: TerminalContext | None = None) -> bool:
    return print_text(_RESTORE_CURSOR, ctx=ctx)


def show_cursor(*, ctx: TerminalContext | None = None) -> bool:
    return print_text(_SHOW_CURSOR, ctx=ctx)


def hide_cursor(*, ctx: TerminalContext | None = None) -> bool:
    return print_text(_HIDE_CURSOR, ctx=ctx)


# ---------------------------------------------------------------------------
# Erasing
# ---------------------------------------------------------------------------


def clear_screen(*, ctx: TerminalContext | None = None) -> bool:
    """Erase the whole screen and home the cursor to (1, 1)."""
    return print_text(_CLEAR_SCREEN, ctx=ctx)


def clear_line(*, ctx: TerminalContext | None = None) -> bool:
    return print_text(_CLEAR_LINE, ctx=ctx)


def clear_to_line_end(*, ctx: TerminalContext | None = None) -> bool:
    return print_text(_CLEAR_TO_LINE_END, ctx=ctx)


def clear_to_line_start(*, ctx: TerminalContext | None = None) -> bool:
    return print_text(_CLEAR_TO_LINE_START, ctx=ctx)


def clear_to_screen_end(*, ctx: TerminalContext | None = None) -> bool:
    return print_text(_CLEAR_TO_SCREEN_END, ctx=ctx)


def clear_to_screen_start(*, ctx: TerminalContext | None = None) -> bool:
    return print_text(_CLEAR_TO_SCREEN_START, ctx=ctx)


# ---------------------------------------------------------------------------
# Colors and attributes
# ---------------------------------------------------------------------------


def set_foreground_color(color: Color, *, ctx: TerminalContext | None = None) -> bool:
    return print_text(fg_sequence(color), ctx=ctx)


def set_background_color(color: Color, *, ctx: TerminalContext | None = None) -> bool:
    return print_text(bg_sequence(color), ctx=ctx)


def reset_color(*, ctx: TerminalContext | None = None) -> bool:
    """Restore the terminal's default colors (and attributes)."""
    return print_text(_RESET, ctx=ctx)


def set_attribute(attribute: Attribute, *, ctx: TerminalContext | None = None) -> bool:
    return print_text(sgr_sequence(int(attribute)), ctx=ctx)


def reset_attributes(*, ctx: TerminalContext | None = None) -> bool:
    return set_attribute(Attribute.RESET, ctx=ctx)
