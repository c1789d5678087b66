"""Tests for rpian.terminal.context -- explicit and ambient contexts."""

from __future__ import annotations

from rpian.terminal.ansi import show_cursor
from rpian.terminal.boxes import draw_box
from rpian.terminal.context import (
    TerminalContext,
    current_context,
    get_terminal,
    set_terminal,
    use_context,
)
from rpian.terminal.errors import NullErrorHandler, set_error_handler
from rpian.terminal.terminal import ProcessTerminal
from rpian.terminal.viewport import Viewport, set_viewport

from .virtual_terminal import RecordingErrorHandler, VirtualTerminal


class TestTerminalContext:
    def test_defaults(self) -> None:
        context = TerminalContext()
        assert isinstance(context.terminal, ProcessTerminal)
        assert context.viewport is None
        assert isinstance(context.error_handler, NullErrorHandler)

    def test_write_reports_os_error(self, term, handler) -> None:
        term.fail_writes_after = 0
        context = TerminalContext(terminal=term, error_handler=handler)
        assert context.write("x") is False
        assert len(handler.io_errors) == 1

    def test_check(self, ctx, handler) -> None:
        assert ctx.check(80, 24) is True
        assert ctx.check(81, 24) is False
        assert len(handler.boundary_errors) == 1


class TestCurrentContext:
    def test_explicit_wins(self, ctx) -> None:
        assert current_context(ctx) is ctx

    def test_built_from_globals(self) -> None:
        recorder = RecordingErrorHandler()
        set_error_handler(recorder)
        set_viewport(30, 10)
        context = current_context()
        assert context.terminal is get_terminal()
        assert context.viewport == Viewport(30, 10)
        assert context.error_handler is recorder

    def test_set_terminal_returns_previous(self) -> None:
        current = get_terminal()
        replacement = VirtualTerminal()
        assert set_terminal(replacement) is current
        assert get_terminal() is replacement


class TestUseContext:
    def test_ambient_calls_use_installed_context(self, ctx, term) -> None:
        with use_context(ctx):
            show_cursor()
        assert term.output == "\x1b[?25h"
        assert get_terminal().output == ""

    def test_restored_after_block(self, ctx) -> None:
        with use_context(ctx):
            assert current_context() is ctx
        assert current_context() is not ctx

    def test_restored_after_exception(self, ctx) -> None:
        try:
            with use_context(ctx):
                raise RuntimeError("boom")
        except RuntimeError:
            pass
        assert current_context() is not ctx

    def test_explicit_context_ignores_global_viewport(self, term, handler) -> None:
        set_viewport(2, 2)
        context = TerminalContext(terminal=term, viewport=Viewport(80, 24), error_handler=handler)
        assert draw_box(1, 1, 5, 5, ctx=context) == 16
        assert handler.boundary_errors == []
