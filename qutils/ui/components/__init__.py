"""
Reusable visual building blocks.

Non-interactive components for rendering terminal output.
"""

from .box import (
    BoxStyle,
    BoxGlyphs,
    PLAIN_GLYPHS,
    ROUNDED_GLYPHS,
    THICK_GLYPHS,
    get_box_glyphs,
    resolve_box_style,
)
from .formatting import (
    strip_ansi,
    get_true_string_length,
    pad_visible,
)
from .table import (
    ShapeMismatchError,
    TableOptions,
    make_table_string,
)

__all__ = [
    # Box drawing
    "BoxStyle",
    "BoxGlyphs",
    "PLAIN_GLYPHS",
    "ROUNDED_GLYPHS",
    "THICK_GLYPHS",
    "get_box_glyphs",
    "resolve_box_style",
    # Formatting
    "strip_ansi",
    "get_true_string_length",
    "pad_visible",
    # Tables
    "ShapeMismatchError",
    "TableOptions",
    "make_table_string",
]
