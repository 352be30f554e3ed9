"""
PDF Export Module.

Renders the same Document block tree as the DOCX builder into a PDF
preview with ReportLab, keeping page geometry, colors, cell shading,
column spans and dividers. Off by default; enabled through
Config.PDF_PREVIEW_PATH.
"""
import logging
from io import BytesIO
from typing import Dict, List, Tuple
from xml.sax.saxutils import escape

from reportlab.lib.colors import HexColor
from reportlab.lib.enums import TA_CENTER, TA_JUSTIFY, TA_LEFT, TA_RIGHT
from reportlab.lib.styles import ParagraphStyle
from reportlab.platypus import Paragraph as PdfParagraph
from reportlab.platypus import SimpleDocTemplate, Spacer, TableStyle
from reportlab.platypus import Table as PdfTable
from reportlab.platypus.flowables import HRFlowable

from .document.blocks import Alignment, Document, Paragraph, StyledRun, Table

logger = logging.getLogger("BugDoc.PDFExport")


# Word font name -> (regular, bold, italic, bold italic) standard PDF fonts
FONT_MAP: Dict[str, Tuple[str, str, str, str]] = {
    "Arial": ("Helvetica", "Helvetica-Bold", "Helvetica-Oblique", "Helvetica-BoldOblique"),
    "Courier New": ("Courier", "Courier-Bold", "Courier-Oblique", "Courier-BoldOblique"),
    "Times New Roman": ("Times-Roman", "Times-Bold", "Times-Italic", "Times-BoldItalic"),
}

ALIGNMENT_MAP = {
    Alignment.LEFT: TA_LEFT,
    Alignment.CENTER: TA_CENTER,
    Alignment.RIGHT: TA_RIGHT,
    Alignment.JUSTIFY: TA_JUSTIFY,
}

LEADING_FACTOR = 1.2


def twips_to_pt(value: int) -> float:
    return value / 20.0


def half_points_to_pt(value: int) -> float:
    return value / 2.0


def _font_family(name: str) -> str:
    return FONT_MAP.get(name, FONT_MAP["Arial"])[0]


def _run_markup(run: StyledRun, default_font: str) -> str:
    """ReportLab mini-markup for one run. Leading spaces are kept as &nbsp;."""
    stripped = run.text.lstrip(" ")
    text = "&nbsp;" * (len(run.text) - len(stripped)) + escape(stripped)
    if run.bold:
        text = f"<b>{text}</b>"
    if run.italic:
        text = f"<i>{text}</i>"

    attrs = [
        f'name="{_font_family(run.font or default_font)}"',
        f'size="{half_points_to_pt(run.size)}"',
    ]
    if run.color:
        attrs.append(f'color="#{run.color}"')
    return f"<font {' '.join(attrs)}>{text}</font>"


class PDFRenderer:
    """Converts block tree nodes into ReportLab flowables."""

    def __init__(self, document: Document):
        self.document = document
        self.default_font = document.style_defaults.default_font
        self.default_size = document.style_defaults.default_size
        self._style_count = 0

    def _paragraph_style(self, paragraph: Paragraph) -> ParagraphStyle:
        self._style_count += 1
        size = max(
            (half_points_to_pt(r.size) for r in paragraph.runs),
            default=half_points_to_pt(self.default_size),
        )
        return ParagraphStyle(
            f"Block{self._style_count}",
            fontName=_font_family(self.default_font),
            fontSize=size,
            leading=size * LEADING_FACTOR,
            spaceBefore=twips_to_pt(paragraph.spacing.before),
            spaceAfter=twips_to_pt(paragraph.spacing.after),
            leftIndent=twips_to_pt(paragraph.indent_left),
            alignment=ALIGNMENT_MAP.get(paragraph.alignment, TA_LEFT),
        )

    def paragraph(self, paragraph: Paragraph):
        spacing = paragraph.spacing
        if paragraph.border_bottom is not None:
            border = paragraph.border_bottom
            return HRFlowable(
                width="100%",
                thickness=border.size / 8.0,
                color=HexColor(f"#{border.color}"),
                spaceBefore=twips_to_pt(spacing.before),
                spaceAfter=twips_to_pt(spacing.after),
            )

        if not paragraph.text.strip():
            # Blank line: keep its vertical footprint
            line = 0.0
            if paragraph.runs:
                line = max(half_points_to_pt(r.size) for r in paragraph.runs) * LEADING_FACTOR
            return Spacer(1, twips_to_pt(spacing.before + spacing.after) + line)

        markup = "".join(_run_markup(r, self.default_font) for r in paragraph.runs)
        return PdfParagraph(markup, self._paragraph_style(paragraph))

    def table(self, table: Table) -> PdfTable:
        data: List[List] = []
        commands = [("VALIGN", (0, 0), (-1, -1), "TOP")]

        for row_index, row in enumerate(table.rows):
            cells: List = []
            column = 0
            for cell in row.cells:
                last = column + cell.column_span - 1
                area = ((column, row_index), (last, row_index))
                flowables = [self.block(b) for b in cell.blocks]
                cells.append(flowables or "")
                cells.extend([""] * (cell.column_span - 1))

                if cell.column_span > 1:
                    commands.append(("SPAN",) + area)
                if cell.shading is not None:
                    commands.append(("BACKGROUND",) + area + (HexColor(f"#{cell.shading.fill}"),))
                if cell.borders is not None:
                    edge = cell.borders.top
                    commands.append(("BOX",) + area + (edge.size / 8.0, HexColor(f"#{edge.color}")))
                margins = cell.margins
                commands.extend([
                    ("TOPPADDING",) + area + (twips_to_pt(margins.top),),
                    ("BOTTOMPADDING",) + area + (twips_to_pt(margins.bottom),),
                    ("LEFTPADDING",) + area + (twips_to_pt(margins.left),),
                    ("RIGHTPADDING",) + area + (twips_to_pt(margins.right),),
                ])
                column = last + 1
            cells.extend([""] * (len(table.column_widths) - len(cells)))
            data.append(cells)

        pdf_table = PdfTable(
            data,
            colWidths=[twips_to_pt(w) for w in table.column_widths],
            hAlign="LEFT",
        )
        pdf_table.setStyle(TableStyle(commands))
        return pdf_table

    def block(self, block):
        if isinstance(block, Table):
            return self.table(block)
        return self.paragraph(block)

    def story(self) -> List:
        return [self.block(b) for b in self.document.body]


def render_pdf(document: Document) -> bytes:
    """Render ``document`` as PDF and return the file contents."""
    page = document.page
    buffer = BytesIO()

    doc = SimpleDocTemplate(
        buffer,
        pagesize=(twips_to_pt(page.width), twips_to_pt(page.height)),
        leftMargin=twips_to_pt(page.margins.left),
        rightMargin=twips_to_pt(page.margins.right),
        topMargin=twips_to_pt(page.margins.top),
        bottomMargin=twips_to_pt(page.margins.bottom),
    )
    story = PDFRenderer(document).story()
    doc.build(story)

    pdf_bytes = buffer.getvalue()
    buffer.close()
    logger.debug(f"PDF rendered: {len(story)} flowables, {len(pdf_bytes)} bytes")
    return pdf_bytes
