"""Tests for rpian.terminal.utils -- display width."""

from __future__ import annotations

from rpian.terminal.drawing import write_at
from rpian.terminal.utils import glyph_width, visible_width


class TestGlyphWidth:
    def test_ascii(self) -> None:
        assert glyph_width("a") == 1

    def test_box_drawing_is_narrow(self) -> None:
        assert glyph_width("─") == 1
        assert glyph_width("╭") == 1

    def test_cjk_is_wide(self) -> None:
        assert glyph_width("世") == 2

    def test_control_is_zero(self) -> None:
        assert glyph_width("\x07") == 0

    def test_empty(self) -> None:
        assert glyph_width("") == 0

    def test_emoji_sequence_is_wide(self) -> None:
        assert glyph_width("❤️") == 2


class TestVisibleWidth:
    def test_plain_ascii(self) -> None:
        assert visible_width("hello") == 5

    def test_escape_codes_do_not_count(self) -> None:
        assert visible_width("\x1b[31mred\x1b[0m") == 3
        assert visible_width("\x1b7ab\x1b8") == 2

    def test_mixed_width(self) -> None:
        assert visible_width("A世B") == 4

    def test_combining_mark(self) -> None:
        assert visible_width("e\u0301") == 1


class TestWideGlyphBounds:
    def test_wide_glyph_must_fit(self, term, handler) -> None:
        from rpian.terminal.context import TerminalContext
        from rpian.terminal.drawing import render_cells
        from rpian.terminal.viewport import Viewport

        context = TerminalContext(terminal=term, viewport=Viewport(5, 5), error_handler=handler)
        assert render_cells([(4, 1, "世"), (5, 1, "世")], ctx=context) == 1
        assert len(handler.boundary_errors) == 1

    def test_write_at(self, ctx, term, handler) -> None:
        assert write_at(78, 1, "abc", ctx=ctx) is True
        assert write_at(79, 1, "abc", ctx=ctx) is False
        assert term.writes == ["\x1b[1;78Habc"]
        assert len(handler.boundary_errors) == 1
