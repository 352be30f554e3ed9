"""
Block tree for bug log documents.

Format-neutral description of what goes on the page. Built once by the
layout/builder functions and handed to an encoder (docx_builder,
pdf_export). Every node is a frozen dataclass holding tuples, so a tree
cannot change after it has been appended to a document body.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Union

from .styles import Border, CellBorders, Margins, Shading, Spacing


class Alignment(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFY = "justify"


@dataclass(frozen=True)
class StyledRun:
    """Smallest styled piece of text. Size is in half-points."""
    text: str
    size: int
    color: Optional[str] = None
    bold: bool = False
    italic: bool = False
    font: Optional[str] = None


@dataclass(frozen=True)
class Paragraph:
    runs: Tuple[StyledRun, ...] = ()
    spacing: Spacing = Spacing()
    alignment: Optional[Alignment] = None
    indent_left: int = 0
    border_bottom: Optional[Border] = None
    style_id: Optional[str] = None
    outline_level: Optional[int] = None

    @property
    def text(self) -> str:
        return "".join(run.text for run in self.runs)


@dataclass(frozen=True)
class Cell:
    blocks: Tuple["Block", ...]
    width: int
    margins: Margins = Margins()
    shading: Optional[Shading] = None
    borders: Optional[CellBorders] = None
    column_span: int = 1

    @property
    def paragraphs(self) -> Tuple[Paragraph, ...]:
        return tuple(b for b in self.blocks if isinstance(b, Paragraph))


@dataclass(frozen=True)
class Row:
    cells: Tuple[Cell, ...]


@dataclass(frozen=True)
class Table:
    rows: Tuple[Row, ...]
    column_widths: Tuple[int, ...]

    @property
    def width(self) -> int:
        return sum(self.column_widths)


Block = Union[Paragraph, Table]


@dataclass(frozen=True)
class HeadingStyle:
    """Named paragraph style registered once at document level."""
    style_id: str
    name: str
    size: int
    color: str
    spacing: Spacing
    outline_level: int
    font: Optional[str] = None
    bold: bool = True


@dataclass(frozen=True)
class StyleDefaults:
    default_font: str
    default_size: int
    heading_styles: Tuple[HeadingStyle, ...] = ()


@dataclass(frozen=True)
class PageConfig:
    width: int
    height: int
    margins: Margins


@dataclass(frozen=True)
class Document:
    style_defaults: StyleDefaults
    page: PageConfig
    body: Tuple[Block, ...] = field(default_factory=tuple)

    def tables(self) -> Tuple[Table, ...]:
        """Table blocks of the body, in document order."""
        return tuple(b for b in self.body if isinstance(b, Table))
