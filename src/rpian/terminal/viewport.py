"""Viewport registry: the caller-declared addressable terminal area.

The viewport is used purely for bounds checking. It is never compared with
the real terminal size; the library trusts whatever the caller declares.
Until ``set_viewport`` is called there is no viewport and only the 1-based
``column >= 1, row >= 1`` rule applies.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass


@dataclass(frozen=True)
class Viewport:
    """Addressable area of ``width`` columns by ``height`` rows."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"Viewport dimensions must be non-negative, got {self.width}x{self.height}"
            )

    def contains(self, x: int, y: int) -> bool:
        """True if the 1-based cell ``(x, y)`` lies inside the viewport."""
        return 1 <= x <= self.width and 1 <= y <= self.height

    @classmethod
    def from_terminal(cls, fallback: tuple[int, int] = (80, 24)) -> Viewport:
        """Build a viewport from the real terminal size, or *fallback*."""
        try:
            size = os.get_terminal_size(sys.stdout.fileno())
        except (AttributeError, ValueError, OSError):
            return cls(*fallback)
        return cls(size.columns, size.lines)


_viewport: Viewport | None = None


def set_viewport(width: int, height: int) -> None:
    """Store new viewport bounds, replacing any previous ones."""
    global _viewport
    _viewport = Viewport(width, height)


def get_viewport() -> Viewport | None:
    """Return the last stored viewport, or ``None`` if none is set."""
    return _viewport


def clear_viewport() -> None:
    """Forget the viewport; drawing becomes unbounded again."""
    global _viewport
    _viewport = None


def check_position(x: int, y: int, viewport: Viewport | None) -> str | None:
    """Return a description of why ``(x, y)`` is not addressable, or ``None``."""
    if x < 1 or y < 1:
        return f"Position ({x}, {y}) is before the top-left cell (1, 1)"
    if viewport is not None and not viewport.contains(x, y):
        return (
            f"Position ({x}, {y}) is outside the "
            f"{viewport.width}x{viewport.height} viewport"
        )
    return None
