"""Tests for rpian.terminal.ansi -- escape-code emission."""

from __future__ import annotations

import pytest

from rpian.terminal.ansi import (
    Attribute,
    Color,
    bg_sequence,
    clear_line,
    clear_screen,
    clear_to_line_end,
    clear_to_line_start,
    clear_to_screen_end,
    clear_to_screen_start,
    cursor_to_sequence,
    fg_sequence,
    hide_cursor,
    move_cursor_to,
    print_text,
    println,
    put_char,
    reset_attributes,
    reset_color,
    restore_cursor_location,
    save_cursor_location,
    set_attribute,
    set_background_color,
    set_foreground_color,
    sgr_sequence,
    show_cursor,
)
from rpian.terminal.context import TerminalContext, get_terminal
from rpian.terminal.errors import RaisingErrorHandler, TerminalIOError, set_error_handler
from rpian.terminal.viewport import Viewport, set_viewport


# ---------------------------------------------------------------------------
# Sequence builders
# ---------------------------------------------------------------------------


class TestSequenceBuilders:
    def test_cursor_position_is_row_first(self) -> None:
        assert cursor_to_sequence(5, 10) == "\x1b[10;5H"

    def test_foreground_colors(self) -> None:
        assert fg_sequence(Color.BLACK) == "\x1b[30m"
        assert fg_sequence(Color.RED) == "\x1b[31m"
        assert fg_sequence(Color.WHITE) == "\x1b[37m"

    def test_background_colors(self) -> None:
        assert bg_sequence(Color.BLUE) == "\x1b[44m"
        assert bg_sequence(Color.WHITE) == "\x1b[47m"

    def test_sgr_joins_codes(self) -> None:
        assert sgr_sequence(1, 31) == "\x1b[1;31m"

    def test_attribute_codes(self) -> None:
        assert [a.value for a in Attribute] == [0, 1, 2, 4, 5, 7, 8]

    def test_color_codes(self) -> None:
        assert [c.value for c in Color] == list(range(8))


# ---------------------------------------------------------------------------
# Emitters
# ---------------------------------------------------------------------------


class TestEmitters:
    """Every operation writes exactly one complete sequence."""

    @pytest.mark.parametrize(
        ("emit", "expected"),
        [
            (clear_line, "\x1b[2K"),
            (clear_to_line_end, "\x1b[K"),
            (clear_to_line_start, "\x1b[1K"),
            (clear_to_screen_end, "\x1b[J"),
            (clear_to_screen_start, "\x1b[1J"),
            (save_cursor_location, "\x1b7"),
            (restore_cursor_location, "\x1b8"),
            (show_cursor, "\x1b[?25h"),
            (hide_cursor, "\x1b[?25l"),
            (reset_color, "\x1b[0m"),
            (reset_attributes, "\x1b[0m"),
        ],
    )
    def test_fixed_sequences(self, ctx, term, emit, expected) -> None:
        assert emit(ctx=ctx) is True
        assert term.writes == [expected]

    def test_colors_and_attributes(self, ctx, term) -> None:
        set_foreground_color(Color.GREEN, ctx=ctx)
        set_background_color(Color.MAGENTA, ctx=ctx)
        set_attribute(Attribute.UNDERLINE, ctx=ctx)
        assert term.writes == ["\x1b[32m", "\x1b[45m", "\x1b[4m"]

    def test_text_output(self, ctx, term) -> None:
        print_text("hi", ctx=ctx)
        println("there", ctx=ctx)
        put_char("!", ctx=ctx)
        assert term.output == "hithere\n!"
        assert term.write_count == 3

    def test_move_cursor(self, ctx, term) -> None:
        assert move_cursor_to(3, 4, ctx=ctx) is True
        assert term.writes == ["\x1b[4;3H"]

    def test_clear_screen_homes_cursor(self, ctx, term) -> None:
        assert clear_screen(ctx=ctx) is True
        assert term.writes == ["\x1b[2J\x1b[H"]

    def test_ambient_terminal_is_used_without_ctx(self) -> None:
        show_cursor()
        assert get_terminal().output == "\x1b[?25h"


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------


class TestEmitterFailures:
    def test_move_outside_viewport_writes_nothing(self, ctx, term, handler) -> None:
        assert move_cursor_to(81, 1, ctx=ctx) is False
        assert term.write_count == 0
        assert len(handler.boundary_errors) == 1

    def test_move_to_zero_is_rejected_without_viewport(self, term, handler) -> None:
        context = TerminalContext(terminal=term, error_handler=handler)
        assert move_cursor_to(0, 5, ctx=context) is False
        assert move_cursor_to(500, 500, ctx=context) is True
        assert len(handler.boundary_errors) == 1

    def test_global_viewport_bounds_ambient_calls(self) -> None:
        set_viewport(10, 10)
        assert move_cursor_to(11, 1) is False
        assert get_terminal().write_count == 0

    def test_write_failure_reaches_handler(self, ctx, term, handler) -> None:
        term.fail_writes_after = 0
        assert show_cursor(ctx=ctx) is False
        assert len(handler.io_errors) == 1
        assert isinstance(handler.io_errors[0], BrokenPipeError)

    def test_clear_screen_ignores_viewport(self, term, handler) -> None:
        context = TerminalContext(terminal=term, viewport=Viewport(0, 0), error_handler=handler)
        assert clear_screen(ctx=context) is True
        assert term.write_count == 1
        assert handler.boundary_errors == []

    def test_clear_screen_reports_failed_write(self, ctx, term, handler) -> None:
        term.fail_writes_after = 0
        assert clear_screen(ctx=ctx) is False
        assert len(handler.io_errors) == 1

    def test_raising_handler_turns_failure_into_exception(self) -> None:
        set_error_handler(RaisingErrorHandler())
        get_terminal().fail_writes_after = 0
        with pytest.raises(TerminalIOError) as info:
            reset_color()
        assert isinstance(info.value.error, BrokenPipeError)

    def test_degenerate_viewport_rejects_origin(self, term, handler) -> None:
        context = TerminalContext(terminal=term, viewport=Viewport(0, 0), error_handler=handler)
        assert move_cursor_to(1, 1, ctx=context) is False
        assert len(handler.boundary_errors) == 1
        assert term.write_count == 0
