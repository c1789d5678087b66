"""Star glyphs, also used as line end caps."""

from __future__ import annotations

from enum import Enum


class StarSymbol(str, Enum):
    BLACK_STAR = "★"  # U+2605
    WHITE_STAR = "☆"  # U+2606
    FOUR_POINTED_BLACK = "✦"  # U+2726
    FOUR_POINTED_WHITE = "✧"  # U+2727
    FIVE_POINTED_BLACK = "✭"  # U+272D
    FIVE_POINTED_WHITE = "✮"  # U+272E
    SIX_POINTED_BLACK = "✶"  # U+2736
    EIGHT_POINTED_BLACK = "✴"  # U+2734
    EIGHT_POINTED_WHITE = "✵"  # U+2735
    CIRCLED_WHITE = "✪"  # U+272A
    CIRCLED_BLACK = "✫"  # U+272B
    OPEN_CENTER_BLACK = "✯"  # U+272F
    HEAVY_EIGHT_POINTED = "✷"  # U+2737
    SPARKLING = "❈"  # U+2748
    SUN = "☀"  # U+2600
    ASTERISK = "✱"  # U+2731
    BOLD_FIVE_POINTED_BLACK = "⭐"  # U+2B50
    OUTLINED_BLACK = "✰"  # U+2730
    HEAVY_FOUR_BALLOON = "✣"  # U+2723
