"""
Document Styles Module.

Defines borders, colors, font sizes and the StyleSheet passed to every
block builder. Pure data, no rendering.

Units follow WordprocessingML:
- font sizes in half-points (22 = 11 pt)
- spacing, indents, widths and margins in twips (1440 = 1 inch)
- border thickness in eighths of a point
"""
from dataclasses import dataclass
from typing import Optional, Tuple


# ============================================================================
# VALUE TYPES
# ============================================================================

@dataclass(frozen=True)
class Border:
    """Single border edge."""
    style: str = "single"
    size: int = 1
    color: str = "DDDDDD"


@dataclass(frozen=True)
class CellBorders:
    """Border set for the four sides of a table cell."""
    top: Border
    bottom: Border
    left: Border
    right: Border

    @classmethod
    def all_sides(cls, border: Border) -> "CellBorders":
        return cls(top=border, bottom=border, left=border, right=border)


@dataclass(frozen=True)
class Spacing:
    """Vertical paragraph spacing in twips."""
    before: int = 0
    after: int = 0


@dataclass(frozen=True)
class Margins:
    """Cell or page margins in twips."""
    top: int = 0
    bottom: int = 0
    left: int = 0
    right: int = 0


@dataclass(frozen=True)
class Shading:
    """Solid background fill."""
    fill: str
    type: str = "clear"


# ============================================================================
# COLOR PALETTE
# ============================================================================

COLORS = {
    "title": "1F3864",
    "heading1": "1F3864",
    "heading2": "2E75B6",
    "accent": "2E75B6",
    "subtitle": "666666",
    "caption": "888888",
    "code": "C0392B",
    "label_fill": "F2F2F2",
    "header_fill": "1F3864",
    "divider": "CCCCCC",
    "border": "DDDDDD",
    "white": "FFFFFF",
}


# ============================================================================
# TYPOGRAPHY
# ============================================================================

FONT_FAMILY = "Arial"
FONT_FAMILY_CODE = "Courier New"

FONT_SIZE_TITLE = 40
FONT_SIZE_HEADING1 = 28
FONT_SIZE_HEADING2 = 24
FONT_SIZE_BODY = 22
FONT_SIZE_TABLE = 20
FONT_SIZE_CAPTION = 20
FONT_SIZE_CODE = 18


# ============================================================================
# PAGE CONFIGURATION (US Letter)
# ============================================================================

PAGE_WIDTH = 12240
PAGE_HEIGHT = 15840
PAGE_MARGIN = 1440


CELL_BORDER = Border(style="single", size=1, color=COLORS["border"])
CELL_BORDERS = CellBorders.all_sides(CELL_BORDER)
DIVIDER_BORDER = Border(style="single", size=4, color=COLORS["divider"])


@dataclass(frozen=True)
class HeadingSpec:
    """Run and spacing settings for one heading level."""
    size: int
    color: str
    spacing: Spacing


DEFAULT_HEADINGS = (
    (1, HeadingSpec(FONT_SIZE_HEADING1, COLORS["heading1"], Spacing(320, 120))),
    (2, HeadingSpec(FONT_SIZE_HEADING2, COLORS["heading2"], Spacing(200, 80))),
)


@dataclass(frozen=True)
class StyleSheet:
    """All style options recognised by the block builders.

    One instance is passed explicitly to every builder, so swapping the
    look of the whole document means constructing a different StyleSheet.
    """
    headings: Tuple[Tuple[int, HeadingSpec], ...] = DEFAULT_HEADINGS
    font: str = FONT_FAMILY
    body_size: int = FONT_SIZE_BODY
    body_spacing: Spacing = Spacing(60, 60)
    label_bold: bool = True

    code_font: str = FONT_FAMILY_CODE
    code_size: int = FONT_SIZE_CODE
    code_indent: int = 480
    code_color: str = COLORS["code"]

    accent_color: str = COLORS["accent"]

    title_size: int = FONT_SIZE_TITLE
    title_color: str = COLORS["title"]
    subtitle_color: str = COLORS["subtitle"]
    caption_size: int = FONT_SIZE_CAPTION
    caption_color: str = COLORS["caption"]

    # Bug tables
    table_text_size: int = FONT_SIZE_TABLE
    header_text_size: int = FONT_SIZE_BODY
    header_fill: str = COLORS["header_fill"]
    header_text_color: str = COLORS["white"]
    label_fill: str = COLORS["label_fill"]
    label_width: int = 1440
    content_width: int = 7920
    header_margins: Margins = Margins(top=100, bottom=100, left=160, right=160)
    cell_margins: Margins = Margins(top=80, bottom=80, left=160, right=160)
    line_spacing: Spacing = Spacing(40, 40)
    cell_border: Border = CELL_BORDER

    divider_border: Border = DIVIDER_BORDER
    divider_spacing: Spacing = Spacing(160, 160)
    spacer_spacing: Spacing = Spacing(160, 0)

    page_width: int = PAGE_WIDTH
    page_height: int = PAGE_HEIGHT
    page_margins: Margins = Margins(
        top=PAGE_MARGIN, bottom=PAGE_MARGIN, left=PAGE_MARGIN, right=PAGE_MARGIN
    )

    def __post_init__(self):
        # Accept a level -> HeadingSpec mapping, store as sorted pairs
        headings = self.headings
        if hasattr(headings, "items"):
            headings = headings.items()
        object.__setattr__(self, "headings", tuple(sorted(headings, key=lambda pair: pair[0])))

    def heading_spec(self, level: int) -> Optional[HeadingSpec]:
        for heading_level, spec in self.headings:
            if heading_level == level:
                return spec
        return None

    @property
    def heading_levels(self) -> Tuple[int, ...]:
        return tuple(level for level, _ in self.headings)

    @property
    def cell_borders(self) -> CellBorders:
        return CellBorders.all_sides(self.cell_border)

    @property
    def column_widths(self) -> Tuple[int, int]:
        return (self.label_width, self.content_width)

    @property
    def table_width(self) -> int:
        return self.label_width + self.content_width


DEFAULT_STYLE = StyleSheet()
