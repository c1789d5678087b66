"""Tests for rpian.terminal.input -- reading keys, characters and lines."""

from __future__ import annotations

from rpian.terminal.context import get_terminal
from rpian.terminal.input import read_char, read_key, read_line


class TestReadKey:
    def test_decodes_sequences(self, ctx, term) -> None:
        term.simulate_keys("\x1b[A", "q", "\x03", "\r")
        assert [read_key(ctx=ctx) for _ in range(4)] == ["up", "q", "ctrl+c", "enter"]

    def test_unrecognised_sequence_returned_raw(self, ctx, term) -> None:
        term.simulate_keys("\x1b[99x")
        assert read_key(ctx=ctx) == "\x1b[99x"

    def test_end_of_input(self, ctx) -> None:
        assert read_key(ctx=ctx) == ""

    def test_read_failure(self, ctx, term, handler) -> None:
        term.fail_reads = True
        assert read_key(ctx=ctx) == ""
        assert len(handler.io_errors) == 1

    def test_uses_ambient_terminal(self) -> None:
        get_terminal().simulate_keys("\x1b[B")
        assert read_key() == "down"


class TestReadChar:
    def test_raw_character(self, ctx, term) -> None:
        term.simulate_keys(" ", "x")
        assert read_char(ctx=ctx) == " "
        assert read_char(ctx=ctx) == "x"

    def test_read_failure(self, ctx, term, handler) -> None:
        term.fail_reads = True
        assert read_char(ctx=ctx) == ""
        assert len(handler.io_errors) == 1


class TestReadLine:
    def test_trims_whitespace(self, ctx, term) -> None:
        term.simulate_lines("  hello world \n")
        assert read_line(ctx=ctx) == "hello world"

    def test_end_of_input(self, ctx) -> None:
        assert read_line(ctx=ctx) == ""

    def test_read_failure(self, ctx, term, handler) -> None:
        term.fail_reads = True
        assert read_line(ctx=ctx) == ""
        assert len(handler.io_errors) == 1
