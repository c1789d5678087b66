"""rpian-terminal: ANSI cursor control, symbols and bounded drawing primitives."""

# Escape-code emitter
from rpian.terminal.ansi import (
    Attribute,
    Color,
    bg_sequence,
    clear_line,
    clear_screen,
    clear_to_line_end,
    clear_to_line_start,
    clear_to_screen_end,
    clear_to_screen_start,
    cursor_to_sequence,
    fg_sequence,
    hide_cursor,
    move_cursor_to,
    print_text,
    println,
    put_char,
    reset_attributes,
    reset_color,
    restore_cursor_location,
    save_cursor_location,
    set_attribute,
    set_background_color,
    set_foreground_color,
    sgr_sequence,
    show_cursor,
)

# Boxes and shading
from rpian.terminal.boxes import (
    BlockChar,
    BoxGlyphs,
    BoxPart,
    BoxStyle,
    ShadeStyle,
    block_char,
    box_perimeter,
    draw_box,
    draw_shaded_rectangle,
    get_box_char,
    get_corner_char,
    hide_box,
)

# Context
from rpian.terminal.context import (
    TerminalContext,
    current_context,
    get_terminal,
    set_terminal,
    use_context,
)

# Cell renderer
from rpian.terminal.drawing import render_cells, write_at

# Error handling
from rpian.terminal.errors import (
    BoundaryError,
    ErrorHandler,
    LoggingErrorHandler,
    NullErrorHandler,
    RaisingErrorHandler,
    TerminalError,
    TerminalIOError,
    get_error_handler,
    handle_boundary_error,
    handle_io_error,
    set_error_handler,
)

# Input
from rpian.terminal.input import read_char, read_key, read_line
from rpian.terminal.keys import parse_key

# Lines
from rpian.terminal.lines import (
    DiagonalLineStyle,
    Direction,
    HorizontalLineStyle,
    Line,
    LineStyle,
    VertexStyle,
    VerticalLineStyle,
    diagonal_line,
    horizontal_line,
    line_cells,
    plot_line,
    vertical_line,
)

# Terminal back-end
from rpian.terminal.terminal import ProcessTerminal, Terminal

# Timing
from rpian.terminal.timing import wait_for_micros, wait_for_millis, wait_for_seconds

# Utilities
from rpian.terminal.utils import glyph_width, visible_width

# Viewport
from rpian.terminal.viewport import (
    Viewport,
    check_position,
    clear_viewport,
    get_viewport,
    set_viewport,
)

__all__ = [
    # Escape codes
    "Attribute",
    "Color",
    "bg_sequence",
    "clear_line",
    "clear_screen",
    "clear_to_line_end",
    "clear_to_line_start",
    "clear_to_screen_end",
    "clear_to_screen_start",
    "cursor_to_sequence",
    "fg_sequence",
    "hide_cursor",
    "move_cursor_to",
    "print_text",
    "println",
    "put_char",
    "reset_attributes",
    "reset_color",
    "restore_cursor_location",
    "save_cursor_location",
    "set_attribute",
    "set_background_color",
    "set_foreground_color",
    "sgr_sequence",
    "show_cursor",
    # Boxes
    "BlockChar",
    "BoxGlyphs",
    "BoxPart",
    "BoxStyle",
    "ShadeStyle",
    "block_char",
    "box_perimeter",
    "draw_box",
    "draw_shaded_rectangle",
    "get_box_char",
    "get_corner_char",
    "hide_box",
    # Context
    "TerminalContext",
    "current_context",
    "get_terminal",
    "set_terminal",
    "use_context",
    # Drawing
    "render_cells",
    "write_at",
    # Errors
    "BoundaryError",
    "ErrorHandler",
    "LoggingErrorHandler",
    "NullErrorHandler",
    "RaisingErrorHandler",
    "TerminalError",
    "TerminalIOError",
    "get_error_handler",
    "handle_boundary_error",
    "handle_io_error",
    "set_error_handler",
    # Input
    "parse_key",
    "read_char",
    "read_key",
    "read_line",
    # Lines
    "DiagonalLineStyle",
    "Direction",
    "HorizontalLineStyle",
    "Line",
    "LineStyle",
    "VertexStyle",
    "VerticalLineStyle",
    "diagonal_line",
    "horizontal_line",
    "line_cells",
    "plot_line",
    "vertical_line",
    # Terminal
    "ProcessTerminal",
    "Terminal",
    # Timing
    "wait_for_micros",
    "wait_for_millis",
    "wait_for_seconds",
    # Utilities
    "glyph_width",
    "visible_width",
    # Viewport
    "Viewport",
    "check_position",
    "clear_viewport",
    "get_viewport",
    "set_viewport",
]
