"""Unicode symbol catalogs.

Each catalog is a closed ``str`` enum whose value is the glyph itself, so a
member can be written directly or passed to ``symbol_char``.
"""

from __future__ import annotations

from enum import Enum

from rpian.terminal.symbols.arrow import ArrowSymbol
from rpian.terminal.symbols.braille import BrailleSymbol, braille_char
from rpian.terminal.symbols.chess import (
    ChessPieceSymbol,
    is_white_piece,
    opposite_color_piece,
)
from rpian.terminal.symbols.circle import CircleSymbol
from rpian.terminal.symbols.emoji import EmojiSymbol
from rpian.terminal.symbols.math import MathSymbol
from rpian.terminal.symbols.star import StarSymbol
from rpian.terminal.symbols.triangle import TriangleSymbol


def symbol_char(symbol: Enum) -> str:
    """Return the glyph for any catalog member."""
    return str(symbol.value)


__all__ = [
    "ArrowSymbol",
    "BrailleSymbol",
    "ChessPieceSymbol",
    "CircleSymbol",
    "EmojiSymbol",
    "MathSymbol",
    "StarSymbol",
    "TriangleSymbol",
    "braille_char",
    "is_white_piece",
    "opposite_color_piece",
    "symbol_char",
]
