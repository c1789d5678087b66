"""Circle glyphs, also used as line end caps."""

from __future__ import annotations

from enum import Enum


class CircleSymbol(str, Enum):
    CIRCLE = "○"  # U+25CB
    FILLED_CIRCLE = "●"  # U+25CF
    LARGE_CIRCLE = "◯"  # U+25EF
    MEDIUM_FILLED_CIRCLE = "⬤"  # U+2B24
    DOTTED_CIRCLE = "◌"  # U+25CC
    LEFT_HALF_BLACK = "◐"  # U+25D0
    RIGHT_HALF_BLACK = "◑"  # U+25D1
    CIRCLED_DOT = "◍"  # U+25CD
    VERTICAL_FILL = "◓"  # U+25D3
    HORIZONTAL_FILL = "◒"  # U+25D2
    BULLSEYE = "◎"  # U+25CE
    SUN = "☉"  # U+2609
    FISH_EYE = "◉"  # U+25C9
    TWO_DOTS_INSIDE = "⚇"  # U+2687
    FILLED_TWO_DOTS_INSIDE = "⚉"  # U+2689
    RED_CIRCLE = "\U0001f534"
    BLUE_CIRCLE = "\U0001f535"
    CIRCLED_PLUS = "⊕"  # U+2295
    CIRCLED_MINUS = "⊖"  # U+2296
    CIRCLED_TIMES = "⊗"  # U+2297
