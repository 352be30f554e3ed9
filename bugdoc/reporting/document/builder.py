"""
Document Builder Module.

Assembles the bug log body from title furniture and one table per bug,
and attaches page and style configuration once at document level.

Body order:
    title, subtitle, divider,
    (spacer, bug table, spacer) for each record,
    divider, summary
"""
import logging
from typing import List, Optional, Sequence, Tuple

from .blocks import Block, Document, HeadingStyle, PageConfig, StyleDefaults
from .layout import bug_table, divider, spacer, subtitle, summary, title
from .styles import DEFAULT_STYLE, StyleSheet
from ...records import BugRecord, REPORT_CLOSING, REPORT_SUBTITLE, REPORT_TITLE, RENDERX_BUGS


logger = logging.getLogger("BugDoc.DocumentBuilder")


def heading_styles(style: StyleSheet = DEFAULT_STYLE) -> Tuple[HeadingStyle, ...]:
    """Named heading paragraph styles derived from ``style.headings``."""
    return tuple(
        HeadingStyle(
            style_id=f"Heading{level}",
            name=f"Heading {level}",
            size=spec.size,
            color=spec.color,
            spacing=spec.spacing,
            outline_level=level - 1,
            font=style.font,
        )
        for level, spec in style.headings
    )


def summary_text(count: int, closing: Optional[str] = None) -> str:
    """Closing line, e.g. ``"4 bugs fixed — renderer stable"``."""
    noun = "bug" if count == 1 else "bugs"
    text = f"{count} {noun} fixed"
    if closing:
        text = f"{text} — {closing}"
    return text


def assemble_document(
    records: Sequence[BugRecord],
    title_text: str,
    subtitle_text: str,
    closing: Optional[str] = None,
    style: StyleSheet = DEFAULT_STYLE,
) -> Document:
    """Build the complete bug log document.

    Args:
        records: Bugs in display order. Rendered as given, no sorting or
            de-duplication.
        title_text: Centered document title
        subtitle_text: Italic line under the title
        closing: Optional phrase appended to the summary line
        style: Style sheet shared by every block

    Returns:
        Document with page setup, style defaults and the block body
    """
    body: List[Block] = [
        title(title_text, style),
        subtitle(subtitle_text, style),
        divider(style),
    ]

    for record in records:
        body.append(spacer(style))
        body.append(bug_table(record, style))
        body.append(spacer(style))

    body.append(divider(style))
    body.append(summary(summary_text(len(records), closing), style))

    logger.debug(f"Assembled document: {len(records)} bugs, {len(body)} blocks")

    return Document(
        style_defaults=StyleDefaults(
            default_font=style.font,
            default_size=style.body_size,
            heading_styles=heading_styles(style),
        ),
        page=PageConfig(
            width=style.page_width,
            height=style.page_height,
            margins=style.page_margins,
        ),
        body=tuple(body),
    )


def build_bug_log(style: StyleSheet = DEFAULT_STYLE) -> Document:
    """Assemble the RenderX Vulkan bug log from the compiled record set."""
    return assemble_document(
        RENDERX_BUGS,
        REPORT_TITLE,
        REPORT_SUBTITLE,
        closing=REPORT_CLOSING,
        style=style,
    )
