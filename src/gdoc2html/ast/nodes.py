#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2html/ast/nodes.py
"""Node classes for the Google Docs document model.

This module defines the typed, read-only representation of a document as
returned by the document API's "get document" call. Parsers build these
nodes from JSON; renderers and analysis passes walk them with visitors.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

Structural elements (the unit of body and table-cell content):
    - Paragraph, Table, SectionBreak, UnsupportedElement

Paragraph elements (the text flow of a paragraph):
    - TextRun, InlineObjectElement, PageBreak, ColumnBreak
    - FootnoteReference, HorizontalRule

Table structure:
    - TableRow, TableCell

Side tables on the Document:
    - inline_objects and positioned_objects map IDs to EmbeddedObject

Style records (TextStyle, ParagraphStyle, Bullet, RgbColor) are plain
dataclasses and are not visited.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from gdoc2html.constants import BaselineOffset, LinkedImageSource
from gdoc2html.utils.units import unit_to_byte


class Node(ABC):
    """Base class for all document model nodes."""

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Style records
# ============================================================================


@dataclass(frozen=True)
class RgbColor:
    """Foreground color with channels in the 0-1 range."""

    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0

    def to_css(self) -> str:
        """Return the color as a CSS ``rgb()`` value with 0-255 channels."""
        return f"rgb({unit_to_byte(self.red)}, {unit_to_byte(self.green)}, {unit_to_byte(self.blue)})"


@dataclass(frozen=True)
class TextStyle:
    """Character formatting of a text run.

    Parameters
    ----------
    bold, italic, underline, strikethrough : bool
        Decoration flags
    baseline_offset : {'NONE', 'SUBSCRIPT', 'SUPERSCRIPT'}
        Vertical offset of the run
    link_url : str or None
        Hyperlink target
    font_size : float or None
        Font size in points
    foreground_color : RgbColor or None
        Text color

    """

    bold: bool = False
    italic: bool = False
    underline: bool = False
    strikethrough: bool = False
    baseline_offset: BaselineOffset = "NONE"
    link_url: Optional[str] = None
    font_size: Optional[float] = None
    foreground_color: Optional[RgbColor] = None


@dataclass(frozen=True)
class Bullet:
    """Marks a paragraph as a list item."""

    list_id: Optional[str] = None
    nesting_level: int = 0


@dataclass(frozen=True)
class ParagraphStyle:
    """Paragraph-level style: named style type and horizontal alignment."""

    named_style_type: Optional[str] = None
    alignment: Optional[str] = None


# ============================================================================
# Paragraph elements
# ============================================================================


@dataclass
class TextRun(Node):
    """A run of text sharing one TextStyle."""

    content: str = ""
    style: TextStyle = field(default_factory=TextStyle)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_text_run``."""
        return visitor.visit_text_run(self)


@dataclass
class InlineObjectElement(Node):
    """Reference to an entry of ``Document.inline_objects``."""

    inline_object_id: str = ""

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_inline_object_element``."""
        return visitor.visit_inline_object_element(self)


@dataclass
class PageBreak(Node):
    """Page break inside the text flow."""

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_page_break``."""
        return visitor.visit_page_break(self)


@dataclass
class ColumnBreak(Node):
    """Column break inside the text flow."""

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_column_break``."""
        return visitor.visit_column_break(self)


@dataclass
class FootnoteReference(Node):
    """Footnote marker; only the displayed number is kept."""

    footnote_number: str = ""
    footnote_id: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_footnote_reference``."""
        return visitor.visit_footnote_reference(self)


@dataclass
class HorizontalRule(Node):
    """Horizontal rule inside the text flow."""

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_horizontal_rule``."""
        return visitor.visit_horizontal_rule(self)


ParagraphElement = Union[TextRun, InlineObjectElement, PageBreak, ColumnBreak, FootnoteReference, HorizontalRule]


# ============================================================================
# Structural elements
# ============================================================================


@dataclass
class Paragraph(Node):
    """A paragraph of body or cell content.

    Parameters
    ----------
    elements : list of ParagraphElement
        Ordered text flow
    style : ParagraphStyle
        Named style type and alignment
    bullet : Bullet or None
        Present when the paragraph is a list item
    positioned_object_ids : list of str
        IDs of positioned objects anchored to this paragraph

    """

    elements: list[ParagraphElement] = field(default_factory=list)
    style: ParagraphStyle = field(default_factory=ParagraphStyle)
    bullet: Optional[Bullet] = None
    positioned_object_ids: list[str] = field(default_factory=list)

    @property
    def has_inline_objects(self) -> bool:
        """Whether any element of the text flow references an inline object."""
        return any(isinstance(element, InlineObjectElement) for element in self.elements)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_paragraph``."""
        return visitor.visit_paragraph(self)


@dataclass
class TableCell(Node):
    """A table cell with span metadata and nested structural content.

    Parameters
    ----------
    content : list of StructuralElement
        Paragraphs and nested tables inside the cell
    column_span : int, default 1
        Number of grid columns covered (always >= 1)
    row_span : int, default 1
        Number of grid rows covered (always >= 1)

    """

    content: list[StructuralElement] = field(default_factory=list)
    column_span: int = 1
    row_span: int = 1

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_table_cell``."""
        return visitor.visit_table_cell(self)


@dataclass
class TableRow(Node):
    """Ordered cells of one table row, as listed by the source."""

    cells: list[TableCell] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_table_row``."""
        return visitor.visit_table_row(self)


@dataclass
class Table(Node):
    """A table whose spans are only implied by per-cell metadata."""

    rows: list[TableRow] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_table``."""
        return visitor.visit_table(self)


@dataclass
class SectionBreak(Node):
    """Section break; renders to nothing."""

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_section_break``."""
        return visitor.visit_section_break(self)


@dataclass
class UnsupportedElement(Node):
    """Structural element of a kind this model does not represent.

    Kept in place so it still ends a run of list items; renders to nothing.

    Parameters
    ----------
    kind : str
        Key of the source element, e.g. ``"tableOfContents"``

    """

    kind: str = ""

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_unsupported_element``."""
        return visitor.visit_unsupported_element(self)


StructuralElement = Union[Paragraph, Table, SectionBreak, UnsupportedElement]


# ============================================================================
# Embedded objects and the document root
# ============================================================================


@dataclass(frozen=True)
class EmbeddedObject:
    """An embedded image from one of the document's object side tables.

    Parameters
    ----------
    content_uri : str or None
        Image source; None when the object carries no image descriptor
    width, height : float or None
        Size magnitudes in points
    title : str or None
        Optional object title
    has_image : bool
        Whether an image descriptor was present at all

    """

    content_uri: Optional[str] = None
    width: Optional[float] = None
    height: Optional[float] = None
    title: Optional[str] = None
    has_image: bool = False


@dataclass
class Document(Node):
    """Root node: ordered body content plus the two object side tables.

    Parameters
    ----------
    content : list of StructuralElement
        Top-level body content in document order
    inline_objects : dict
        Inline object ID to EmbeddedObject (None when the object has no
        embedded payload)
    positioned_objects : dict
        Positioned object ID to EmbeddedObject (same convention)
    metadata : dict
        Document-level values such as ``title`` and ``document_id``

    """

    content: list[StructuralElement] = field(default_factory=list)
    inline_objects: dict[str, Optional[EmbeddedObject]] = field(default_factory=dict)
    positioned_objects: dict[str, Optional[EmbeddedObject]] = field(default_factory=dict)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_document``."""
        return visitor.visit_document(self)


@dataclass(frozen=True)
class LinkedImage:
    """A hyperlink or bare URL recognized as pointing at an image.

    Derived by the linked-image pre-pass, never part of the input.

    Parameters
    ----------
    url : str
        The image URL as written in the document
    text : str
        Stripped text of the run it was found in
    location : str
        Human-readable position tag, e.g. ``document-block-3-element-0``
    index : int
        Ordinal in encounter order
    source : {'hyperlink', 'text-url'}
        Whether the URL came from a link target or the run's raw text

    """

    url: str
    text: str
    location: str
    index: int
    source: LinkedImageSource = "hyperlink"
