"""Straight lines in the eight compass directions.

A line starts at ``(x, y)`` and takes ``length`` steps of one cell in its
direction. Horizontal and vertical directions use bar glyphs; diagonals use
``╱`` (north-east / south-west) or ``╲`` (north-west / south-east) unless a
diagonal style is given. ``plot_line`` joins two arbitrary points instead.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

from rpian.terminal.context import TerminalContext, current_context
from rpian.terminal.drawing import Cell, render_cells
from rpian.terminal.symbols import CircleSymbol, StarSymbol
from rpian.terminal.timing import wait_for_seconds


class Direction(Enum):
    NORTH = (0, -1)
    SOUTH = (0, 1)
    EAST = (1, 0)
    WEST = (-1, 0)
    NORTH_EAST = (1, -1)
    NORTH_WEST = (-1, -1)
    SOUTH_EAST = (1, 1)
    SOUTH_WEST = (-1, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def is_horizontal(self) -> bool:
        return self.dy == 0

    @property
    def is_vertical(self) -> bool:
        return self.dx == 0

    @property
    def is_diagonal(self) -> bool:
        return self.dx != 0 and self.dy != 0


# Line glyphs are all one cell wide: a line advances one cell per glyph.


class HorizontalLineStyle(str, Enum):
    LIGHT = "─"  # U+2500
    HEAVY = "━"  # U+2501
    DOUBLE = "═"  # U+2550
    LIGHT_TRIPLE_DASH = "┄"  # U+2504
    HEAVY_TRIPLE_DASH = "┅"  # U+2505
    LIGHT_QUADRUPLE_DASH = "┈"  # U+2508
    HEAVY_QUADRUPLE_DASH = "┉"  # U+2509
    DOTTED = "·"  # U+00B7
    LIGHT_DOUBLE_DASH = "╌"  # U+254C
    HEAVY_DOUBLE_DASH = "╍"  # U+254D
    WAVY = "⁓"  # U+2053
    SPACE = " "


class VerticalLineStyle(str, Enum):
    LIGHT = "│"  # U+2502
    HEAVY = "┃"  # U+2503
    DOUBLE = "║"  # U+2551
    LIGHT_TRIPLE_DASH = "┆"  # U+2506
    HEAVY_TRIPLE_DASH = "┇"  # U+2507
    LIGHT_QUADRUPLE_DASH = "┊"  # U+250A
    HEAVY_QUADRUPLE_DASH = "┋"  # U+250B
    DOTTED = "·"  # U+00B7
    LIGHT_DOUBLE_DASH = "╎"  # U+254E
    HEAVY_DOUBLE_DASH = "╏"  # U+254F
    SPACE = " "


class DiagonalLineStyle(str, Enum):
    FORWARD_DIAGONAL = "╱"  # U+2571
    BACKWARD_DIAGONAL = "╲"  # U+2572
    FORWARD_SLASH = "/"
    BACKWARD_SLASH = "\\"
    SPACE = " "


@dataclass(frozen=True)
class VertexStyle:
    """End cap drawn in place of a line's first or last glyph.

    ``symbol`` is a star or circle glyph; ``None`` caps the line with a blank.
    """

    symbol: StarSymbol | CircleSymbol | None = None

    @property
    def glyph(self) -> str:
        return " " if self.symbol is None else self.symbol.value


def _filled_circle() -> VertexStyle:
    return VertexStyle(CircleSymbol.FILLED_CIRCLE)


@dataclass
class LineStyle:
    """Glyph choices for a ``Line``. A ``None`` vertex means no cap."""

    horizontal: HorizontalLineStyle = HorizontalLineStyle.LIGHT
    vertical: VerticalLineStyle = VerticalLineStyle.LIGHT
    diagonal: DiagonalLineStyle | None = None
    start_vertex: VertexStyle | None = field(default_factory=_filled_circle)
    end_vertex: VertexStyle | None = field(default_factory=_filled_circle)


def line_glyph(
    direction: Direction,
    horizontal: HorizontalLineStyle = HorizontalLineStyle.LIGHT,
    vertical: VerticalLineStyle = VerticalLineStyle.LIGHT,
    diagonal: DiagonalLineStyle | None = None,
) -> str:
    """Glyph used for every body cell of a line heading in *direction*."""
    if direction.is_horizontal:
        return horizontal.value
    if direction.is_vertical:
        return vertical.value
    if diagonal is not None:
        return diagonal.value
    if direction in (Direction.NORTH_EAST, Direction.SOUTH_WEST):
        return DiagonalLineStyle.FORWARD_DIAGONAL.value
    return DiagonalLineStyle.BACKWARD_DIAGONAL.value


def line_cells(x: int, y: int, length: int, direction: Direction) -> Iterator[tuple[int, int]]:
    """Yield the ``length`` coordinates of a line, starting at ``(x, y)``."""
    for step in range(max(length, 0)):
        yield x + step * direction.dx, y + step * direction.dy


# ---------------------------------------------------------------------------
# Free functions
# ---------------------------------------------------------------------------


def _draw_straight(
    x: int,
    y: int,
    length: int,
    direction: Direction,
    glyph: str,
    ctx: TerminalContext | None,
) -> int:
    context = current_context(ctx)
    if length < 1:
        context.boundary_error(f"A line needs a length of at least 1, got {length}")
        return 0
    cells = ((cx, cy, glyph) for cx, cy in line_cells(x, y, length, direction))
    return render_cells(cells, ctx=context)


def horizontal_line(
    x: int,
    y: int,
    length: int,
    style: HorizontalLineStyle = HorizontalLineStyle.LIGHT,
    direction: Direction = Direction.EAST,
    *,
    ctx: TerminalContext | None = None,
) -> int:
    if not direction.is_horizontal:
        raise ValueError(f"{direction.name} is not a horizontal direction")
    return _draw_straight(x, y, length, direction, style.value, ctx)


def vertical_line(
    x: int,
    y: int,
    length: int,
    style: VerticalLineStyle = VerticalLineStyle.LIGHT,
    direction: Direction = Direction.SOUTH,
    *,
    ctx: TerminalContext | None = None,
) -> int:
    if not direction.is_vertical:
        raise ValueError(f"{direction.name} is not a vertical direction")
    return _draw_straight(x, y, length, direction, style.value, ctx)


def diagonal_line(
    x: int,
    y: int,
    length: int,
    direction: Direction,
    style: DiagonalLineStyle | None = None,
    *,
    ctx: TerminalContext | None = None,
) -> int:
    """Draw a line in any direction; diagonal glyphs follow the slope."""
    return _draw_straight(x, y, length, direction, line_glyph(direction, diagonal=style), ctx)


def plot_line(
    symbol: str | Enum,
    x1: int,
    y1: int,
    x2: int,
    y2: int,
    *,
    ctx: TerminalContext | None = None,
) -> int:
    """Draw *symbol* on every cell of the Bresenham line from ``(x1, y1)`` to ``(x2, y2)``."""
    glyph = str(symbol.value) if isinstance(symbol, Enum) else symbol
    return render_cells(((x, y, glyph) for x, y in bresenham(x1, y1, x2, y2)), ctx=ctx)


def bresenham(x1: int, y1: int, x2: int, y2: int) -> Iterator[tuple[int, int]]:
    dx = abs(x2 - x1)
    dy = -abs(y2 - y1)
    sx = 1 if x1 < x2 else -1
    sy = 1 if y1 < y2 else -1
    err = dx + dy
    x, y = x1, y1
    while True:
        yield x, y
        if x == x2 and y == y2:
            return
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x += sx
        if e2 <= dx:
            err += dx
            y += sy


# ---------------------------------------------------------------------------
# Line shape
# ---------------------------------------------------------------------------


@dataclass
class Line:
    """A movable line, drawn on demand.

    The first and last cells carry the style's vertex caps when they are
    set. Hiding blanks every cell the line covers, caps included.
    """

    x: int = 1
    y: int = 1
    length: int = 10
    direction: Direction = Direction.EAST
    style: LineStyle = field(default_factory=LineStyle)

    def cells(self, visible: bool = True) -> list[Cell]:
        body = (
            line_glyph(self.direction, self.style.horizontal, self.style.vertical, self.style.diagonal)
            if visible
            else " "
        )
        last = self.length - 1
        result: list[Cell] = []
        for i, (cx, cy) in enumerate(line_cells(self.x, self.y, self.length, self.direction)):
            glyph = body
            if i == 0 and self.style.start_vertex is not None:
                glyph = self.style.start_vertex.glyph if visible else " "
            elif i == last and self.style.end_vertex is not None:
                glyph = self.style.end_vertex.glyph if visible else " "
            result.append((cx, cy, glyph))
        return result

    def show(self, pause: float | None = None, *, ctx: TerminalContext | None = None) -> int:
        """Draw the line, sleeping *pause* seconds between cells if given."""
        return self._render(True, pause, ctx)

    def hide(self, *, ctx: TerminalContext | None = None) -> int:
        return self._render(False, None, ctx)

    def move_to(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def flash(self, duration: float, *, ctx: TerminalContext | None = None) -> int:
        """Show the line for *duration* seconds, then hide it."""
        context = current_context(ctx)
        drawn = self.show(ctx=context)
        wait_for_seconds(duration)
        self.hide(ctx=context)
        return drawn

    def _render(self, visible: bool, pause: float | None, ctx: TerminalContext | None) -> int:
        context = current_context(ctx)
        if self.length < 1:
            context.boundary_error(f"A line needs a length of at least 1, got {self.length}")
            return 0
        return render_cells(self.cells(visible), pause=pause, ctx=context)
