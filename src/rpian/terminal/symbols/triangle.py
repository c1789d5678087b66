"""Triangle glyphs."""

from __future__ import annotations

from enum import Enum


class TriangleSymbol(str, Enum):
    WHITE_UP = "△"  # U+25B3
    WHITE_DOWN = "▽"  # U+25BD
    WHITE_LEFT = "◁"  # U+25C1
    WHITE_RIGHT = "▷"  # U+25B7
    BLACK_UP = "▲"  # U+25B2
    BLACK_DOWN = "▼"  # U+25BC
    BLACK_LEFT = "◀"  # U+25C0
    BLACK_RIGHT = "▶"  # U+25B6
    SMALL_BLACK_UP = "▴"  # U+25B4
    SMALL_BLACK_DOWN = "▾"  # U+25BE
    SMALL_BLACK_LEFT = "◂"  # U+25C2
    SMALL_BLACK_RIGHT = "▸"  # U+25B8
    SMALL_WHITE_UP = "▵"  # U+25B5
    SMALL_WHITE_RIGHT = "▹"  # U+25B9
    SMALL_WHITE_DOWN = "▿"  # U+25BF
    SMALL_WHITE_LEFT = "◃"  # U+25C3
    BLACK_UP_DOUBLE = "⏶"  # U+23F6
    BLACK_DOWN_DOUBLE = "⏷"  # U+23F7
    BLACK_LEFT_DOUBLE = "⏴"  # U+23F4
    BLACK_RIGHT_DOUBLE = "⏵"  # U+23F5
