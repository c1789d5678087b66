"""Braille patterns.

Dot numbering follows the Braille cell::

    1 4
    2 5
    3 6

Pattern ``U+2800 + mask`` has dot *n* raised when bit ``n - 1`` is set.
"""

from __future__ import annotations

from enum import Enum

_BRAILLE_BASE = 0x2800


def braille_char(*dots: int) -> str:
    """Glyph with the given dots (1-6) raised."""
    mask = 0
    for dot in dots:
        if not 1 <= dot <= 6:
            raise ValueError(f"Braille dot must be 1-6, got {dot}")
        mask |= 1 << (dot - 1)
    return chr(_BRAILLE_BASE + mask)


def _member_name(mask: int) -> str:
    if mask == 0:
        return "BLANK"
    return "DOT" + "".join(str(d) for d in range(1, 7) if mask & (1 << (d - 1)))


# BLANK, DOT1, DOT2, DOT12, ... DOT123456
BrailleSymbol = Enum(
    "BrailleSymbol",
    [(_member_name(mask), chr(_BRAILLE_BASE + mask)) for mask in range(64)],
    type=str,
    module=__name__,
)
BrailleSymbol.__doc__ = "All 64 six-dot Braille patterns."
