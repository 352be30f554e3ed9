"""
Document model for bug log reports.

Format-neutral block tree plus the functions that build it. Encoders
(DOCX, PDF) live one level up in ``bugdoc.reporting``.

Module Structure:
- styles.py: Borders, colors, sizes and the StyleSheet
- blocks.py: Frozen block tree (runs, paragraphs, tables, document)
- layout.py: Block builders and the per-bug table
- builder.py: Document assembly

Usage:
    from bugdoc.reporting.document import assemble_document

    doc = assemble_document(records, "Title", "Subtitle")
"""
from .styles import (
    Border,
    CellBorders,
    COLORS,
    DEFAULT_STYLE,
    HeadingSpec,
    Margins,
    Shading,
    Spacing,
    StyleSheet,
)
from .blocks import (
    Alignment,
    Block,
    Cell,
    Document,
    HeadingStyle,
    PageConfig,
    Paragraph,
    Row,
    StyleDefaults,
    StyledRun,
    Table,
)
from .layout import (
    body,
    bug_table,
    code_block,
    divider,
    heading,
    key_value,
    label,
    normal_run,
    spacer,
    subtitle,
    summary,
    title,
)
from .builder import assemble_document, build_bug_log, heading_styles, summary_text


__all__ = [
    # Styles
    "Border",
    "CellBorders",
    "COLORS",
    "DEFAULT_STYLE",
    "HeadingSpec",
    "Margins",
    "Shading",
    "Spacing",
    "StyleSheet",
    # Blocks
    "Alignment",
    "Block",
    "Cell",
    "Document",
    "HeadingStyle",
    "PageConfig",
    "Paragraph",
    "Row",
    "StyleDefaults",
    "StyledRun",
    "Table",
    # Builders
    "body",
    "bug_table",
    "code_block",
    "divider",
    "heading",
    "key_value",
    "label",
    "normal_run",
    "spacer",
    "subtitle",
    "summary",
    "title",
    # Assembly
    "assemble_document",
    "build_bug_log",
    "heading_styles",
    "summary_text",
]
