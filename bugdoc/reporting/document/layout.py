"""
Document Layout Module.

Block builders for bug log documents: headings, body text, code blocks,
dividers, spacers and the per-bug table. Each function takes its text
and a StyleSheet and returns a new immutable block. No I/O, no encoder
specifics.
"""
import logging
from typing import Sequence

from .blocks import Alignment, Cell, Paragraph, Row, StyledRun, Table
from .styles import DEFAULT_STYLE, Shading, Spacing, StyleSheet
from ...records import BugRecord

logger = logging.getLogger(__name__)


# ============================================================================
# TEXT BLOCKS
# ============================================================================

def heading(level: int, text: str, style: StyleSheet = DEFAULT_STYLE) -> Paragraph:
    """Build a level 1 or level 2 heading.

    The paragraph carries the ``Heading{level}`` style id and an outline
    level of ``level - 1`` so encoders can expose it in navigation panes.

    Raises:
        ValueError: if ``style`` defines no heading for ``level``.
    """
    spec = style.heading_spec(level)
    if spec is None:
        raise ValueError(f"Unsupported heading level: {level}")

    return Paragraph(
        runs=(StyledRun(text=text, size=spec.size, color=spec.color, bold=True),),
        spacing=spec.spacing,
        style_id=f"Heading{level}",
        outline_level=level - 1,
    )


def body(text: str, style: StyleSheet = DEFAULT_STYLE) -> Paragraph:
    return Paragraph(
        runs=(normal_run(text, style),),
        spacing=style.body_spacing,
    )


def label(text: str, style: StyleSheet = DEFAULT_STYLE) -> StyledRun:
    return StyledRun(text=text, size=style.body_size, bold=style.label_bold)


def normal_run(text: str, style: StyleSheet = DEFAULT_STYLE) -> StyledRun:
    return StyledRun(text=text, size=style.body_size)


def key_value(key: str, value: str, style: StyleSheet = DEFAULT_STYLE) -> Paragraph:
    """Body paragraph rendered as ``Key: value`` with a bold key."""
    return Paragraph(
        runs=(label(f"{key}: ", style), normal_run(value, style)),
        spacing=style.body_spacing,
    )


def code_block(text: str, style: StyleSheet = DEFAULT_STYLE) -> Paragraph:
    """Indented fixed-width paragraph. Text is kept verbatim, leading spaces included."""
    return Paragraph(
        runs=(StyledRun(
            text=text,
            size=style.code_size,
            color=style.code_color,
            font=style.code_font,
        ),),
        spacing=style.body_spacing,
        indent_left=style.code_indent,
    )


def divider(style: StyleSheet = DEFAULT_STYLE) -> Paragraph:
    """Empty paragraph with a bottom border, used as a horizontal rule."""
    return Paragraph(
        spacing=style.divider_spacing,
        border_bottom=style.divider_border,
    )


def spacer(style: StyleSheet = DEFAULT_STYLE) -> Paragraph:
    return Paragraph(spacing=style.spacer_spacing)


# ============================================================================
# DOCUMENT FURNITURE
# ============================================================================

def title(text: str, style: StyleSheet = DEFAULT_STYLE) -> Paragraph:
    return Paragraph(
        runs=(StyledRun(text=text, size=style.title_size, color=style.title_color, bold=True),),
        spacing=Spacing(0, 80),
        alignment=Alignment.CENTER,
    )


def subtitle(text: str, style: StyleSheet = DEFAULT_STYLE) -> Paragraph:
    return Paragraph(
        runs=(StyledRun(
            text=text, size=style.body_size, color=style.subtitle_color, italic=True
        ),),
        spacing=Spacing(0, 320),
        alignment=Alignment.CENTER,
    )


def summary(text: str, style: StyleSheet = DEFAULT_STYLE) -> Paragraph:
    """Centered closing caption under the last divider."""
    return Paragraph(
        runs=(StyledRun(
            text=text, size=style.caption_size, color=style.caption_color, italic=True
        ),),
        spacing=Spacing(200, 0),
        alignment=Alignment.CENTER,
    )


# ============================================================================
# BUG TABLE
# ============================================================================

def _header_row(record: BugRecord, style: StyleSheet) -> Row:
    text = f"Bug #{record.number}: {record.title}"
    cell = Cell(
        blocks=(Paragraph(runs=(StyledRun(
            text=text,
            size=style.header_text_size,
            color=style.header_text_color,
            bold=True,
        ),)),),
        width=style.table_width,
        margins=style.header_margins,
        shading=Shading(style.header_fill),
        borders=style.cell_borders,
        column_span=2,
    )
    return Row(cells=(cell,))


def _content_row(name: str, lines: Sequence[str], style: StyleSheet) -> Row:
    """Label cell on the left, one paragraph per line on the right."""
    label_cell = Cell(
        blocks=(Paragraph(runs=(StyledRun(
            text=name,
            size=style.table_text_size,
            color=style.accent_color,
            bold=True,
        ),)),),
        width=style.label_width,
        margins=style.cell_margins,
        shading=Shading(style.label_fill),
        borders=style.cell_borders,
    )
    content_cell = Cell(
        blocks=tuple(
            Paragraph(
                runs=(StyledRun(text=line, size=style.table_text_size),),
                spacing=style.line_spacing,
            )
            for line in lines
        ),
        width=style.content_width,
        margins=style.cell_margins,
        borders=style.cell_borders,
    )
    return Row(cells=(label_cell, content_cell))


def bug_table(record: BugRecord, style: StyleSheet = DEFAULT_STYLE) -> Table:
    """Build the three-row table for one bug.

    Rows:
    1. ``Bug #N: title`` spanning both columns on a dark fill
    2. "Cause" label + one paragraph per cause line
    3. "Fix" label + one paragraph per fix line

    Empty line lists give an empty content cell. Nothing is validated.
    """
    table = Table(
        rows=(
            _header_row(record, style),
            _content_row("Cause", record.cause_lines, style),
            _content_row("Fix", record.fix_lines, style),
        ),
        column_widths=style.column_widths,
    )
    logger.debug(
        f"Bug #{record.number} table: {len(record.cause_lines)} cause lines, "
        f"{len(record.fix_lines)} fix lines"
    )
    return table
