"""
DOCX Builder Module.

Encodes a bug log Document (block tree) into a Word document with
python-docx. Layout decisions are already made in the tree; this module
only maps each node to WordprocessingML.

Key Features:
- Default font and named heading styles set once on the document
- US Letter page geometry from PageConfig
- Fixed-width tables with merged title cells, shading, padding and borders
- Divider paragraphs as bottom borders, headings tagged with outline levels
"""
import logging
from io import BytesIO
from typing import Dict

from docx import Document as DocxDocument
from docx.enum.style import WD_STYLE_TYPE
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Pt, RGBColor, Twips

from .document.blocks import (
    Alignment,
    Cell,
    Document,
    Paragraph,
    StyleDefaults,
    StyledRun,
    Table,
)
from .document.styles import Border, CellBorders, Margins, Shading

logger = logging.getLogger("BugDoc.DOCXBuilder")


ALIGNMENT_MAP = {
    Alignment.LEFT: WD_ALIGN_PARAGRAPH.LEFT,
    Alignment.CENTER: WD_ALIGN_PARAGRAPH.CENTER,
    Alignment.RIGHT: WD_ALIGN_PARAGRAPH.RIGHT,
    Alignment.JUSTIFY: WD_ALIGN_PARAGRAPH.JUSTIFY,
}

# Elements allowed after w:pBdr / w:outlineLvl inside w:pPr (schema order)
_PBDR_SUCCESSORS = (
    "w:shd", "w:tabs", "w:suppressAutoHyphens", "w:kinsoku", "w:wordWrap",
    "w:overflowPunct", "w:topLinePunct", "w:autoSpaceDE", "w:autoSpaceDN",
    "w:bidi", "w:adjustRightInd", "w:snapToGrid", "w:spacing", "w:ind",
    "w:contextualSpacing", "w:mirrorIndents", "w:suppressOverlap", "w:jc",
    "w:textDirection", "w:textAlignment", "w:textboxTightWrap",
    "w:outlineLvl", "w:divId", "w:cnfStyle", "w:rPr", "w:sectPr", "w:pPrChange",
)
_OUTLINE_SUCCESSORS = ("w:divId", "w:cnfStyle", "w:rPr", "w:sectPr", "w:pPrChange")
_TBLW_SUCCESSORS = (
    "w:jc", "w:tblCellSpacing", "w:tblInd", "w:tblBorders", "w:shd", "w:tblLayout",
    "w:tblCellMar", "w:tblLook", "w:tblCaption", "w:tblDescription", "w:tblPrChange",
)
_THEME_FONT_ATTRS = ("w:asciiTheme", "w:hAnsiTheme", "w:eastAsiaTheme", "w:cstheme")


# =============================================================================
# OXML HELPERS
# =============================================================================

def _border_element(tag: str, border: Border, space: str = "0"):
    el = OxmlElement(tag)
    el.set(qn("w:val"), border.style)
    el.set(qn("w:sz"), str(border.size))
    el.set(qn("w:space"), space)
    el.set(qn("w:color"), border.color)
    return el


def _set_bottom_border(p_pr, border: Border):
    p_bdr = OxmlElement("w:pBdr")
    p_bdr.append(_border_element("w:bottom", border, space="1"))
    p_pr.insert_element_before(p_bdr, *_PBDR_SUCCESSORS)


def _set_outline_level(p_pr, level: int):
    existing = p_pr.find(qn("w:outlineLvl"))
    if existing is not None:
        p_pr.remove(existing)
    outline = OxmlElement("w:outlineLvl")
    outline.set(qn("w:val"), str(level))
    p_pr.insert_element_before(outline, *_OUTLINE_SUCCESSORS)


def _clear_theme_fonts(r_pr):
    """Drop theme font references so the explicit w:ascii/w:hAnsi names apply."""
    r_fonts = r_pr.find(qn("w:rFonts"))
    if r_fonts is None:
        return
    for attr in _THEME_FONT_ATTRS:
        r_fonts.attrib.pop(qn(attr), None)


def _set_table_width(tbl_pr, width: int):
    tbl_w = tbl_pr.find(qn("w:tblW"))
    if tbl_w is None:
        tbl_w = OxmlElement("w:tblW")
        tbl_pr.insert_element_before(tbl_w, *_TBLW_SUCCESSORS)
    tbl_w.set(qn("w:w"), str(width))
    tbl_w.set(qn("w:type"), "dxa")


def _set_cell_borders(tc_pr, borders: CellBorders):
    tc_borders = OxmlElement("w:tcBorders")
    for side in ("top", "left", "bottom", "right"):
        tc_borders.append(_border_element(f"w:{side}", getattr(borders, side)))
    tc_pr.append(tc_borders)


def _set_cell_shading(tc_pr, shading: Shading):
    shd = OxmlElement("w:shd")
    shd.set(qn("w:val"), shading.type)
    shd.set(qn("w:color"), "auto")
    shd.set(qn("w:fill"), shading.fill)
    tc_pr.append(shd)


def _set_cell_margins(tc_pr, margins: Margins):
    tc_mar = OxmlElement("w:tcMar")
    for side in ("top", "left", "bottom", "right"):
        el = OxmlElement(f"w:{side}")
        el.set(qn("w:w"), str(getattr(margins, side)))
        el.set(qn("w:type"), "dxa")
        tc_mar.append(el)
    tc_pr.append(tc_mar)


# =============================================================================
# DOCUMENT SETUP
# =============================================================================

def _apply_style_defaults(doc, defaults: StyleDefaults) -> Dict[str, str]:
    """Configure Normal and heading styles. Returns style id -> style name."""
    normal = doc.styles["Normal"]
    normal.font.name = defaults.default_font
    _clear_theme_fonts(normal.element.get_or_add_rPr())
    normal.font.size = Pt(defaults.default_size / 2)

    names = {}
    for heading_style in defaults.heading_styles:
        try:
            style = doc.styles[heading_style.name]
        except KeyError:
            style = doc.styles.add_style(heading_style.name, WD_STYLE_TYPE.PARAGRAPH)
        style.base_style = normal
        style.next_paragraph_style = normal
        style.quick_style = True

        style.font.name = heading_style.font or defaults.default_font
        _clear_theme_fonts(style.element.get_or_add_rPr())
        style.font.size = Pt(heading_style.size / 2)
        style.font.bold = heading_style.bold
        style.font.color.rgb = RGBColor.from_string(heading_style.color)
        style.paragraph_format.space_before = Twips(heading_style.spacing.before)
        style.paragraph_format.space_after = Twips(heading_style.spacing.after)
        _set_outline_level(style.element.get_or_add_pPr(), heading_style.outline_level)

        names[heading_style.style_id] = heading_style.name
    return names


def _apply_page(doc, document: Document):
    section = doc.sections[0]
    page = document.page
    section.page_width = Twips(page.width)
    section.page_height = Twips(page.height)
    section.top_margin = Twips(page.margins.top)
    section.bottom_margin = Twips(page.margins.bottom)
    section.left_margin = Twips(page.margins.left)
    section.right_margin = Twips(page.margins.right)


# =============================================================================
# BLOCK RENDERERS
# =============================================================================

def _add_run(p, run: StyledRun):
    r = p.add_run(run.text)
    if run.bold:
        r.bold = True
    if run.italic:
        r.italic = True
    r.font.size = Pt(run.size / 2)
    if run.color:
        r.font.color.rgb = RGBColor.from_string(run.color)
    if run.font:
        r.font.name = run.font
    return r


def _render_paragraph(doc, p, paragraph: Paragraph, style_names: Dict[str, str]):
    """Apply a Paragraph block to an existing python-docx paragraph."""
    if paragraph.style_id:
        name = style_names.get(paragraph.style_id)
        if name:
            p.style = doc.styles[name]
        else:
            logger.warning(f"DOCX: unknown paragraph style '{paragraph.style_id}', using Normal")

    p_pr = p._p.get_or_add_pPr()
    if paragraph.border_bottom is not None:
        _set_bottom_border(p_pr, paragraph.border_bottom)

    fmt = p.paragraph_format
    fmt.space_before = Twips(paragraph.spacing.before)
    fmt.space_after = Twips(paragraph.spacing.after)
    if paragraph.indent_left:
        fmt.left_indent = Twips(paragraph.indent_left)
    if paragraph.alignment is not None:
        p.alignment = ALIGNMENT_MAP[paragraph.alignment]

    if paragraph.outline_level is not None:
        _set_outline_level(p_pr, paragraph.outline_level)

    for run in paragraph.runs:
        _add_run(p, run)


def _fill_cell(doc, docx_cell, cell: Cell, style_names: Dict[str, str]):
    tc_pr = docx_cell._tc.get_or_add_tcPr()
    if cell.borders is not None:
        _set_cell_borders(tc_pr, cell.borders)
    if cell.shading is not None:
        _set_cell_shading(tc_pr, cell.shading)
    _set_cell_margins(tc_pr, cell.margins)

    # A new cell already holds one empty paragraph; an empty Cell keeps it
    for index, block in enumerate(cell.blocks):
        if isinstance(block, Table):
            _add_table(doc, docx_cell, block, style_names)
        elif index == 0:
            _render_paragraph(doc, docx_cell.paragraphs[0], block, style_names)
        else:
            _render_paragraph(doc, docx_cell.add_paragraph(), block, style_names)


def _add_table(doc, container, table: Table, style_names: Dict[str, str]):
    """Add ``table`` to the document body or to a table cell."""
    grid = container.add_table(rows=len(table.rows), cols=len(table.column_widths))
    grid.autofit = False
    _set_table_width(grid._tbl.tblPr, table.width)
    for column, width in zip(grid.columns, table.column_widths):
        column.width = Twips(width)

    for row_index, row in enumerate(table.rows):
        column_index = 0
        for cell in row.cells:
            docx_cell = grid.cell(row_index, column_index)
            if cell.column_span > 1:
                last = grid.cell(row_index, column_index + cell.column_span - 1)
                docx_cell = docx_cell.merge(last)
            docx_cell.width = Twips(cell.width)
            _fill_cell(doc, docx_cell, cell, style_names)
            column_index += cell.column_span
    return grid


# =============================================================================
# MAIN BUILDER FUNCTIONS
# =============================================================================

def build_docx(document: Document):
    """Encode a Document block tree as a python-docx Document.

    Args:
        document: Assembled bug log

    Returns:
        python-docx Document ready to be saved
    """
    doc = DocxDocument()
    style_names = _apply_style_defaults(doc, document.style_defaults)
    _apply_page(doc, document)

    for block in document.body:
        if isinstance(block, Table):
            _add_table(doc, doc, block, style_names)
        else:
            _render_paragraph(doc, doc.add_paragraph(), block, style_names)

    logger.debug(
        f"DOCX built: {len(document.body)} blocks, {len(document.tables())} tables"
    )
    return doc


def render_docx(document: Document) -> bytes:
    """Encode ``document`` and return the .docx file contents."""
    buffer = BytesIO()
    build_docx(document).save(buffer)
    data = buffer.getvalue()
    buffer.close()
    return data
