"""
Tests for box drawing primitives.
"""

import pytest

from qutils.ui.components.box import (
    PLAIN_GLYPHS,
    ROUNDED_GLYPHS,
    THICK_GLYPHS,
    BoxStyle,
    get_box_glyphs,
    resolve_box_style,
)


class TestResolveBoxStyle:
    """Tests for resolve_box_style() - flags to style."""

    def test_default_is_plain(self):
        assert resolve_box_style() is BoxStyle.PLAIN

    def test_thick(self):
        assert resolve_box_style(thick=True) is BoxStyle.THICK

    def test_rounded(self):
        assert resolve_box_style(rounded=True) is BoxStyle.ROUNDED

    def test_rounded_takes_precedence(self):
        assert resolve_box_style(rounded=True, thick=True) is BoxStyle.ROUNDED


class TestGlyphSets:
    """The three glyph sets differ only where they should."""

    def test_lookup(self):
        assert get_box_glyphs(BoxStyle.PLAIN) is PLAIN_GLYPHS
        assert get_box_glyphs(BoxStyle.THICK) is THICK_GLYPHS
        assert get_box_glyphs(BoxStyle.ROUNDED) is ROUNDED_GLYPHS

    def test_rounded_only_changes_corners(self):
        for role in ("horizontal", "vertical", "top_tee", "bottom_tee", "left_tee", "right_tee", "cross"):
            assert getattr(ROUNDED_GLYPHS, role) == getattr(PLAIN_GLYPHS, role)
        corners = (
            ROUNDED_GLYPHS.top_left,
            ROUNDED_GLYPHS.top_right,
            ROUNDED_GLYPHS.bottom_left,
            ROUNDED_GLYPHS.bottom_right,
        )
        assert corners == ("╭", "╮", "╰", "╯")

    def test_thick_glyphs(self):
        assert THICK_GLYPHS.horizontal == "━"
        assert THICK_GLYPHS.vertical == "┃"
        assert THICK_GLYPHS.cross == "╋"

    def test_glyph_sets_are_frozen(self):
        with pytest.raises(AttributeError):
            PLAIN_GLYPHS.horizontal = "="


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
