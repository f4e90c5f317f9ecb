"""
Boxed text tables.

Renders a rectangular grid of cells as a multi-line string framed with
box-drawing characters:

    ┌──────────┬─────┐
    │ Name     │ Age │
    ├──────────┼─────┤
    │ John Doe │ 30  │
    └──────────┴─────┘

Cells may contain ANSI color codes; they are kept in the output but ignored
when sizing columns.
"""

import math
from dataclasses import dataclass, field
from typing import List, Sequence, Union

from .box import BoxGlyphs, get_box_glyphs, resolve_box_style
from .formatting import get_true_string_length, pad_visible

Cell = Union[str, int, float]

SHAPE_MISMATCH_MESSAGE = "All table rows must have the same length"


class ShapeMismatchError(ValueError):
    """Raised when table rows don't all have the same number of cells."""

    def __init__(self, message: str = SHAPE_MISMATCH_MESSAGE):
        super().__init__(message)


def cell_text(value: Cell) -> str:
    """
    Stringify a cell.

    Integral floats drop their trailing `.0` up to 1e21, larger ones keep
    exponent form (`1e+21`). NaN and infinities become `NaN`, `Infinity`
    and `-Infinity`.
    """
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)
    return str(value)


def get_column_widths(rows: Sequence[Sequence[str]]) -> List[int]:
    """Visible width of the widest cell in each column."""
    if not rows:
        return []
    return [
        max(get_true_string_length(row[col]) for row in rows)
        for col in range(len(rows[0]))
    ]


def _border(widths: List[int], padding: int, left: str, join: str, right: str, fill: str) -> str:
    segments = [fill * (width + 2 * padding) for width in widths]
    return left + join.join(segments) + right


def _content_line(cells: Sequence[str], widths: List[int], padding: int, glyphs: BoxGlyphs) -> str:
    pad = " " * padding
    parts = []
    for text, width in zip(cells, widths):
        parts.append(f"{glyphs.vertical}{pad}{pad_visible(text, width)}{pad}")
    return "".join(parts) + glyphs.vertical


@dataclass
class TableOptions:
    """
    Everything needed to render a table.

    Attributes:
        rows: Grid of cells; every row must have the same length
        padding: Spaces on each side of every cell
        rounded: Thin borders with rounded corners (wins over thick)
        thick: Heavy borders
    """
    rows: List[List[Cell]] = field(default_factory=list)
    padding: int = 1
    rounded: bool = False
    thick: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "TableOptions":
        return cls(
            rows=[list(row) for row in data.get("rows", [])],
            padding=data.get("padding", 1),
            rounded=data.get("rounded", False),
            thick=data.get("thick", False),
        )

    def render(self) -> str:
        """Render the table. Raises ShapeMismatchError for jagged rows."""
        if self.rows:
            expected = len(self.rows[0])
            if any(len(row) != expected for row in self.rows):
                raise ShapeMismatchError()

        glyphs = get_box_glyphs(resolve_box_style(self.rounded, self.thick))
        text_rows = [[cell_text(cell) for cell in row] for row in self.rows]
        widths = get_column_widths(text_rows)
        h = glyphs.horizontal

        top = _border(widths, self.padding, glyphs.top_left, glyphs.top_tee, glyphs.top_right, h)
        middle = _border(widths, self.padding, glyphs.left_tee, glyphs.cross, glyphs.right_tee, h)
        bottom = _border(widths, self.padding, glyphs.bottom_left, glyphs.bottom_tee, glyphs.bottom_right, h)

        lines = [top]
        last = len(text_rows) - 1
        for i, row in enumerate(text_rows):
            lines.append(_content_line(row, widths, self.padding, glyphs))
            lines.append(bottom if i == last else middle)

        return "\n".join(lines)


def make_table_string(
    rows: Sequence[Sequence[Cell]],
    padding: int = 1,
    rounded: bool = False,
    thick: bool = False,
) -> str:
    """
    Render rows as a boxed table string.

    Args:
        rows: Grid of cells (strings or numbers); rows must be equal length
        padding: Spaces on each side of every cell
        rounded: Use rounded corners
        thick: Use heavy lines (ignored when rounded is set)

    Returns:
        Multi-line table string without a trailing newline

    Raises:
        ShapeMismatchError: If rows differ in length
    """
    options = TableOptions(
        rows=[list(row) for row in rows],
        padding=padding,
        rounded=rounded,
        thick=thick,
    )
    return options.render()
