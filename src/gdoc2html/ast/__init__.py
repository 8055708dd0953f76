"""Typed document model for Google Docs API responses.

Exports the node classes and the visitor base class.
"""

from gdoc2html.ast.nodes import (
    Bullet,
    ColumnBreak,
    Document,
    EmbeddedObject,
    FootnoteReference,
    HorizontalRule,
    InlineObjectElement,
    LinkedImage,
    Node,
    PageBreak,
    Paragraph,
    ParagraphElement,
    ParagraphStyle,
    RgbColor,
    SectionBreak,
    StructuralElement,
    Table,
    TableCell,
    TableRow,
    TextRun,
    TextStyle,
    UnsupportedElement,
)
from gdoc2html.ast.visitors import NodeVisitor

__all__ = [
    "Bullet",
    "ColumnBreak",
    "Document",
    "EmbeddedObject",
    "FootnoteReference",
    "HorizontalRule",
    "InlineObjectElement",
    "LinkedImage",
    "Node",
    "NodeVisitor",
    "PageBreak",
    "Paragraph",
    "ParagraphElement",
    "ParagraphStyle",
    "RgbColor",
    "SectionBreak",
    "StructuralElement",
    "Table",
    "TableCell",
    "TableRow",
    "TextRun",
    "TextStyle",
    "UnsupportedElement",
]
