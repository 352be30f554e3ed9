"""Tests for document style primitives."""
import dataclasses

import pytest

from bugdoc.reporting.document.styles import (
    Border,
    CellBorders,
    COLORS,
    DEFAULT_STYLE,
    HeadingSpec,
    Spacing,
    StyleSheet,
)


class TestBorders:

    def test_all_sides_uses_same_border(self):
        border = Border(size=2, color="123456")
        borders = CellBorders.all_sides(border)

        assert borders.top == borders.bottom == borders.left == borders.right == border

    def test_default_cell_border(self):
        """Cells use a thin single light-grey line."""
        border = DEFAULT_STYLE.cell_border
        assert (border.style, border.size, border.color) == ("single", 1, "DDDDDD")

    def test_divider_border_is_thicker(self):
        assert DEFAULT_STYLE.divider_border.size == 4
        assert DEFAULT_STYLE.divider_border.color == COLORS["divider"]

    def test_border_is_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_STYLE.cell_border.size = 10


class TestStyleSheet:

    def test_heading_levels(self):
        assert DEFAULT_STYLE.heading_levels == (1, 2)
        assert DEFAULT_STYLE.heading_spec(1).size == 28
        assert DEFAULT_STYLE.heading_spec(2).size == 24
        assert DEFAULT_STYLE.heading_spec(3) is None

    def test_column_widths_sum_to_table_width(self):
        assert DEFAULT_STYLE.column_widths == (1440, 7920)
        assert sum(DEFAULT_STYLE.column_widths) == DEFAULT_STYLE.table_width == 9360

    def test_table_fits_page_text_width(self):
        margins = DEFAULT_STYLE.page_margins
        text_width = DEFAULT_STYLE.page_width - margins.left - margins.right
        assert DEFAULT_STYLE.table_width == text_width

    def test_custom_style_is_independent(self):
        """A custom sheet does not leak into the default one."""
        custom = StyleSheet(
            body_size=24,
            headings={1: HeadingSpec(36, "000000", Spacing(0, 0))},
        )
        assert custom.body_size == 24
        assert DEFAULT_STYLE.body_size == 22
        assert 2 in DEFAULT_STYLE.heading_levels
        assert custom.heading_levels == (1,)

    def test_headings_cannot_be_changed_in_place(self):
        with pytest.raises(TypeError):
            DEFAULT_STYLE.headings[0] = (1, HeadingSpec(99, "000000", Spacing(0, 0)))
        assert DEFAULT_STYLE.heading_spec(1).size == 28

    def test_style_sheet_is_hashable(self):
        assert hash(DEFAULT_STYLE) == hash(StyleSheet())
        reordered = {
            2: DEFAULT_STYLE.heading_spec(2),
            1: DEFAULT_STYLE.heading_spec(1),
        }
        assert StyleSheet(headings=reordered) == DEFAULT_STYLE
