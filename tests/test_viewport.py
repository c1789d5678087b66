"""Tests for rpian.terminal.viewport."""

from __future__ import annotations

import pytest

from rpian.terminal.ansi import move_cursor_to
from rpian.terminal.boxes import draw_box, draw_shaded_rectangle
from rpian.terminal.context import get_terminal
from rpian.terminal.errors import set_error_handler
from rpian.terminal.lines import Line
from rpian.terminal.viewport import (
    Viewport,
    check_position,
    clear_viewport,
    get_viewport,
    set_viewport,
)

from .virtual_terminal import RecordingErrorHandler


class TestViewportRegistry:
    def test_unset_by_default(self) -> None:
        assert get_viewport() is None

    def test_set_and_get(self) -> None:
        set_viewport(40, 12)
        assert get_viewport() == Viewport(40, 12)

    def test_set_replaces_previous(self) -> None:
        set_viewport(40, 12)
        set_viewport(100, 50)
        assert get_viewport() == Viewport(100, 50)

    def test_set_is_not_checked_against_real_terminal(self) -> None:
        set_viewport(10_000, 10_000)
        assert get_viewport().width == 10_000

    def test_clear(self) -> None:
        set_viewport(40, 12)
        clear_viewport()
        assert get_viewport() is None

    def test_negative_size_rejected(self) -> None:
        with pytest.raises(ValueError):
            Viewport(-1, 5)


class TestContains:
    def test_corners(self) -> None:
        vp = Viewport(80, 24)
        assert vp.contains(1, 1)
        assert vp.contains(80, 24)
        assert not vp.contains(81, 24)
        assert not vp.contains(80, 25)
        assert not vp.contains(0, 1)

    def test_empty_viewport_contains_nothing(self) -> None:
        assert not Viewport(0, 0).contains(1, 1)


class TestCheckPosition:
    def test_valid(self) -> None:
        assert check_position(5, 5, Viewport(10, 10)) is None

    def test_below_one_always_invalid(self) -> None:
        assert check_position(0, 1, None) is not None
        assert check_position(1, -3, None) is not None

    def test_unbounded_without_viewport(self) -> None:
        assert check_position(9999, 9999, None) is None

    def test_outside_viewport_mentions_size(self) -> None:
        message = check_position(11, 1, Viewport(10, 10))
        assert message is not None
        assert "10x10" in message


class TestFromTerminal:
    def test_fallback_when_not_a_terminal(self, monkeypatch) -> None:
        import os

        def no_terminal(fd: int = 0):
            raise OSError("not a tty")

        monkeypatch.setattr(os, "get_terminal_size", no_terminal)
        assert Viewport.from_terminal() == Viewport(80, 24)
        assert Viewport.from_terminal(fallback=(20, 5)) == Viewport(20, 5)


class TestEmptyViewport:
    """A 0x0 viewport rejects every drawing call at its first cell."""

    @pytest.fixture
    def recorder(self):
        handler = RecordingErrorHandler()
        set_error_handler(handler)
        set_viewport(0, 0)
        return handler

    def test_draw_box(self, recorder) -> None:
        assert draw_box(1, 1, 2, 2) == 0
        assert len(recorder.boundary_errors) == 1
        assert get_terminal().write_count == 0

    def test_line_show(self, recorder) -> None:
        assert Line().show() == 0
        assert len(recorder.boundary_errors) == 1
        assert get_terminal().write_count == 0

    def test_shaded_rectangle(self, recorder) -> None:
        assert draw_shaded_rectangle(1, 1, 1, 1) == 0
        assert len(recorder.boundary_errors) == 1
        assert get_terminal().write_count == 0

    def test_move_cursor(self, recorder) -> None:
        assert move_cursor_to(1, 1) is False
        assert len(recorder.boundary_errors) == 1
        assert get_terminal().write_count == 0
