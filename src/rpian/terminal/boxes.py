"""Box outlines and shaded rectangles.

``draw_box`` outlines a rectangle and never touches its interior.
``hide_box`` blanks exactly the cells ``draw_box`` drew, so a box can be
removed without disturbing anything drawn inside or next to it.
``draw_shaded_rectangle`` fills every cell with one shade glyph.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from rpian.terminal.context import TerminalContext, current_context
from rpian.terminal.drawing import Cell, render_cells


class BoxStyle(Enum):
    SINGLE = "single"
    DOUBLE = "double"
    ROUNDED = "rounded"
    DOUBLE_ROUNDED = "double_rounded"
    DOTTED = "dotted"
    DASHED = "dashed"


class ShadeStyle(Enum):
    LIGHT = "light"
    MEDIUM = "medium"
    DARK = "dark"
    SOLID = "solid"


class BlockChar(str, Enum):
    FULL = "█"
    UPPER_HALF = "▀"
    LOWER_HALF = "▄"
    LEFT_HALF = "▌"
    RIGHT_HALF = "▐"
    LIGHT_SHADE = "░"
    MEDIUM_SHADE = "▒"
    DARK_SHADE = "▓"


class BoxPart(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_RIGHT = "bottom_right"
    VERTICAL_LEFT = "vertical_left"
    VERTICAL_RIGHT = "vertical_right"
    HORIZONTAL_DOWN = "horizontal_down"
    HORIZONTAL_UP = "horizontal_up"
    CROSS = "cross"


CORNERS = (BoxPart.TOP_LEFT, BoxPart.TOP_RIGHT, BoxPart.BOTTOM_LEFT, BoxPart.BOTTOM_RIGHT)


@dataclass(frozen=True)
class BoxGlyphs:
    """The eleven box-drawing glyphs of one style.

    ``vertical_left`` is the tee on a box's left edge (``├``) and
    ``vertical_right`` the one on its right edge (``┤``).
    """

    horizontal: str
    vertical: str
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    vertical_left: str
    vertical_right: str
    horizontal_down: str
    horizontal_up: str
    cross: str

    def part(self, part: BoxPart) -> str:
        return getattr(self, part.value)


_SINGLE = BoxGlyphs("─", "│", "┌", "┐", "└", "┘", "├", "┤", "┬", "┴", "┼")
_DOUBLE = BoxGlyphs("═", "║", "╔", "╗", "╚", "╝", "╠", "╣", "╦", "╩", "╬")

BOX_GLYPHS: dict[BoxStyle, BoxGlyphs] = {
    BoxStyle.SINGLE: _SINGLE,
    BoxStyle.DOUBLE: _DOUBLE,
    BoxStyle.ROUNDED: BoxGlyphs("─", "│", "╭", "╮", "╰", "╯", "├", "┤", "┬", "┴", "┼"),
    BoxStyle.DOUBLE_ROUNDED: BoxGlyphs("═", "║", "╒", "╕", "╘", "╛", "╞", "╡", "╤", "╧", "╪"),
    # Dotted and dashed boxes keep single-line corners and tees.
    BoxStyle.DOTTED: BoxGlyphs("┄", "┆", "┌", "┐", "└", "┘", "├", "┤", "┬", "┴", "┼"),
    BoxStyle.DASHED: BoxGlyphs("┈", "┊", "┌", "┐", "└", "┘", "├", "┤", "┬", "┴", "┼"),
}

_SHADE_CHARS: dict[ShadeStyle, BlockChar] = {
    ShadeStyle.LIGHT: BlockChar.LIGHT_SHADE,
    ShadeStyle.MEDIUM: BlockChar.MEDIUM_SHADE,
    ShadeStyle.DARK: BlockChar.DARK_SHADE,
    ShadeStyle.SOLID: BlockChar.FULL,
}


# ---------------------------------------------------------------------------
# Glyph lookup
# ---------------------------------------------------------------------------


def get_box_char(style: BoxStyle, part: BoxPart) -> str:
    return BOX_GLYPHS[style].part(part)


def get_corner_char(style: BoxStyle, corner: BoxPart) -> str:
    if corner not in CORNERS:
        raise ValueError(f"{corner} is not a corner")
    return BOX_GLYPHS[style].part(corner)


def block_char(block: BlockChar) -> str:
    return block.value


def shade_char(style: ShadeStyle) -> str:
    return _SHADE_CHARS[style].value


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------


def box_perimeter(x: int, y: int, width: int, height: int) -> Iterator[tuple[int, int, BoxPart]]:
    """Yield every perimeter cell of a box with the part drawn there.

    Order: top row left to right, then the left and right edge of each
    interior row, then the bottom row left to right. ``width`` and
    ``height`` must both be at least 2.
    """
    right = x + width - 1
    bottom = y + height - 1

    yield x, y, BoxPart.TOP_LEFT
    for col in range(x + 1, right):
        yield col, y, BoxPart.HORIZONTAL
    yield right, y, BoxPart.TOP_RIGHT

    for row in range(y + 1, bottom):
        yield x, row, BoxPart.VERTICAL
        yield right, row, BoxPart.VERTICAL

    yield x, bottom, BoxPart.BOTTOM_LEFT
    for col in range(x + 1, right):
        yield col, bottom, BoxPart.HORIZONTAL
    yield right, bottom, BoxPart.BOTTOM_RIGHT


def rectangle_cells(x: int, y: int, width: int, height: int) -> Iterator[tuple[int, int]]:
    """Every cell of a rectangle, row by row."""
    for row in range(y, y + height):
        for col in range(x, x + width):
            yield col, row


def _reject_degenerate_box(width: int, height: int, context: TerminalContext) -> bool:
    if width < 2 or height < 2:
        context.boundary_error(
            f"A box needs at least 2 columns and 2 rows, got {width}x{height}"
        )
        return True
    return False


# ---------------------------------------------------------------------------
# Drawing
# ---------------------------------------------------------------------------


def draw_box(
    x: int,
    y: int,
    width: int,
    height: int,
    style: BoxStyle = BoxStyle.SINGLE,
    *,
    ctx: TerminalContext | None = None,
) -> int:
    """Outline a ``width`` x ``height`` box whose top-left cell is ``(x, y)``.

    Returns the number of cells drawn.
    """
    context = current_context(ctx)
    if _reject_degenerate_box(width, height, context):
        return 0
    glyphs = BOX_GLYPHS[style]
    cells: Iterator[Cell] = (
        (col, row, glyphs.part(part)) for col, row, part in box_perimeter(x, y, width, height)
    )
    return render_cells(cells, ctx=context)


def hide_box(
    x: int,
    y: int,
    width: int,
    height: int,
    *,
    ctx: TerminalContext | None = None,
) -> int:
    """Blank the cells a matching ``draw_box`` call drew."""
    context = current_context(ctx)
    if _reject_degenerate_box(width, height, context):
        return 0
    cells = ((col, row, " ") for col, row, _ in box_perimeter(x, y, width, height))
    return render_cells(cells, ctx=context)


def draw_shaded_rectangle(
    x: int,
    y: int,
    width: int,
    height: int,
    style: ShadeStyle = ShadeStyle.MEDIUM,
    *,
    ctx: TerminalContext | None = None,
) -> int:
    """Fill every cell of the rectangle with the glyph for *style*."""
    context = current_context(ctx)
    if width < 1 or height < 1:
        context.boundary_error(f"Cannot shade an empty {width}x{height} rectangle")
        return 0
    glyph = shade_char(style)
    cells = ((col, row, glyph) for col, row in rectangle_cells(x, y, width, height))
    return render_cells(cells, ctx=context)
