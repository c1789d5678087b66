"""Arrow glyphs."""

from __future__ import annotations

from enum import Enum


class ArrowSymbol(str, Enum):
    # Basic
    LEFT = "←"  # U+2190
    UP = "↑"  # U+2191
    RIGHT = "→"  # U+2192
    DOWN = "↓"  # U+2193
    # Double
    LEFT_DOUBLE = "⇐"  # U+21D0
    UP_DOUBLE = "⇑"  # U+21D1
    RIGHT_DOUBLE = "⇒"  # U+21D2
    DOWN_DOUBLE = "⇓"  # U+21D3
    # Long / heavy
    LEFT_HEAVY = "⟵"  # U+27F5
    UP_HEAVY = "⟰"  # U+27F0
    RIGHT_HEAVY = "⟶"  # U+27F6
    DOWN_HEAVY = "⟱"  # U+27F1
    # Dashed
    LEFT_DASHED = "⇠"  # U+21E0
    UP_DASHED = "⇡"  # U+21E1
    RIGHT_DASHED = "⇢"  # U+21E2
    DOWN_DASHED = "⇣"  # U+21E3
    # Curved
    LEFT_CURVED = "↶"  # U+21B6
    UP_CURVED = "⤴"  # U+2934
    RIGHT_CURVED = "↷"  # U+21B7
    DOWN_CURVED = "⤵"  # U+2935
    # Diagonal
    UP_LEFT = "↖"  # U+2196
    UP_RIGHT = "↗"  # U+2197
    DOWN_RIGHT = "↘"  # U+2198
    DOWN_LEFT = "↙"  # U+2199
    # Special
    LEFT_RIGHT = "↔"  # U+2194
    UP_DOWN = "↕"  # U+2195
    LEFTWARDS_TAIL = "↢"  # U+21A2
    RIGHTWARDS_TAIL = "↣"  # U+21A3
    CIRCULAR = "↻"  # U+21BB
