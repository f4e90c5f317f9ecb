"""
Box drawing primitives.

Unicode box-drawing characters and helpers for rendering bordered output.
Three border styles are available: thin lines, heavy lines, and thin lines
with rounded corners.
"""

from dataclasses import dataclass
from enum import Enum

# Thin
BOX_H = "─"   # Horizontal
BOX_V = "│"   # Vertical
BOX_TL = "┌"  # Top-left
BOX_TR = "┐"  # Top-right
BOX_BL = "└"  # Bottom-left
BOX_BR = "┘"  # Bottom-right
BOX_T_DOWN = "┬"   # Top T-junction
BOX_T_UP = "┴"     # Bottom T-junction
BOX_T_RIGHT = "├"  # Left T-junction
BOX_T_LEFT = "┤"   # Right T-junction
BOX_CROSS = "┼"

# Rounded corners (edges and junctions are thin)
BOX_ROUND_TL = "╭"
BOX_ROUND_TR = "╮"
BOX_ROUND_BL = "╰"
BOX_ROUND_BR = "╯"

# Heavy
BOX_HEAVY_H = "━"
BOX_HEAVY_V = "┃"
BOX_HEAVY_TL = "┏"
BOX_HEAVY_TR = "┓"
BOX_HEAVY_BL = "┗"
BOX_HEAVY_BR = "┛"
BOX_HEAVY_T_DOWN = "┳"
BOX_HEAVY_T_UP = "┻"
BOX_HEAVY_T_RIGHT = "┣"
BOX_HEAVY_T_LEFT = "┫"
BOX_HEAVY_CROSS = "╋"


class BoxStyle(Enum):
    PLAIN = "plain"
    THICK = "thick"
    ROUNDED = "rounded"


@dataclass(frozen=True)
class BoxGlyphs:
    """One character per structural role of a box grid."""
    horizontal: str
    vertical: str
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    top_tee: str     # ┬ where a column boundary meets the top edge
    bottom_tee: str  # ┴ where a column boundary meets the bottom edge
    left_tee: str    # ├ where a row separator meets the left edge
    right_tee: str   # ┤ where a row separator meets the right edge
    cross: str


PLAIN_GLYPHS = BoxGlyphs(
    horizontal=BOX_H,
    vertical=BOX_V,
    top_left=BOX_TL,
    top_right=BOX_TR,
    bottom_left=BOX_BL,
    bottom_right=BOX_BR,
    top_tee=BOX_T_DOWN,
    bottom_tee=BOX_T_UP,
    left_tee=BOX_T_RIGHT,
    right_tee=BOX_T_LEFT,
    cross=BOX_CROSS,
)

ROUNDED_GLYPHS = BoxGlyphs(
    horizontal=BOX_H,
    vertical=BOX_V,
    top_left=BOX_ROUND_TL,
    top_right=BOX_ROUND_TR,
    bottom_left=BOX_ROUND_BL,
    bottom_right=BOX_ROUND_BR,
    top_tee=BOX_T_DOWN,
    bottom_tee=BOX_T_UP,
    left_tee=BOX_T_RIGHT,
    right_tee=BOX_T_LEFT,
    cross=BOX_CROSS,
)

THICK_GLYPHS = BoxGlyphs(
    horizontal=BOX_HEAVY_H,
    vertical=BOX_HEAVY_V,
    top_left=BOX_HEAVY_TL,
    top_right=BOX_HEAVY_TR,
    bottom_left=BOX_HEAVY_BL,
    bottom_right=BOX_HEAVY_BR,
    top_tee=BOX_HEAVY_T_DOWN,
    bottom_tee=BOX_HEAVY_T_UP,
    left_tee=BOX_HEAVY_T_RIGHT,
    right_tee=BOX_HEAVY_T_LEFT,
    cross=BOX_HEAVY_CROSS,
)

GLYPHS_BY_STYLE = {
    BoxStyle.PLAIN: PLAIN_GLYPHS,
    BoxStyle.THICK: THICK_GLYPHS,
    BoxStyle.ROUNDED: ROUNDED_GLYPHS,
}


def resolve_box_style(rounded: bool = False, thick: bool = False) -> BoxStyle:
    """
    Pick a border style from flags.

    There is no heavy-rounded glyph set, so rounded wins when both are set.
    """
    if rounded:
        return BoxStyle.ROUNDED
    if thick:
        return BoxStyle.THICK
    return BoxStyle.PLAIN


def get_box_glyphs(style: BoxStyle = BoxStyle.PLAIN) -> BoxGlyphs:
    return GLYPHS_BY_STYLE[style]

