#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2html/ast/visitors.py
"""Visitor pattern implementation for document model traversal.

Visitors keep algorithms (rendering, image detection) separate from the
node classes. Structural visits are abstract; row and paragraph-element visits
default to doing nothing so analysis passes only override what they need.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from gdoc2html.ast.nodes import (
    ColumnBreak,
    Document,
    FootnoteReference,
    HorizontalRule,
    InlineObjectElement,
    PageBreak,
    Paragraph,
    SectionBreak,
    Table,
    TableCell,
    TableRow,
    TextRun,
    UnsupportedElement,
)


class NodeVisitor(ABC):
    """Abstract base class for document model visitors.

    Examples
    --------
    Counting text runs:

        >>> class RunCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...     def visit_document(self, node):
        ...         for block in node.content:
        ...             block.accept(self)
        ...     def visit_paragraph(self, node):
        ...         for element in node.elements:
        ...             element.accept(self)
        ...     def visit_table(self, node):
        ...         for row in node.rows:
        ...             row.accept(self)
        ...     def visit_table_row(self, node):
        ...         for cell in node.cells:
        ...             cell.accept(self)
        ...     def visit_table_cell(self, node):
        ...         for block in node.content:
        ...             block.accept(self)
        ...     def visit_section_break(self, node):
        ...         pass
        ...     def visit_text_run(self, node):
        ...         self.count += 1

    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node."""
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_table(self, node: Table) -> Any:
        """Visit a Table node."""
        pass

    @abstractmethod
    def visit_table_cell(self, node: TableCell) -> Any:
        """Visit a TableCell node."""
        pass

    @abstractmethod
    def visit_section_break(self, node: SectionBreak) -> Any:
        """Visit a SectionBreak node."""
        pass

    def visit_table_row(self, node: TableRow) -> Any:
        """Visit a TableRow node.

        Renderers that place cells on a reconstructed grid never visit rows.
        """
        return None

    def visit_unsupported_element(self, node: UnsupportedElement) -> Any:
        """Visit an UnsupportedElement node."""
        return None

    def visit_text_run(self, node: TextRun) -> Any:
        """Visit a TextRun node."""
        return None

    def visit_inline_object_element(self, node: InlineObjectElement) -> Any:
        """Visit an InlineObjectElement node."""
        return None

    def visit_page_break(self, node: PageBreak) -> Any:
        """Visit a PageBreak node."""
        return None

    def visit_column_break(self, node: ColumnBreak) -> Any:
        """Visit a ColumnBreak node."""
        return None

    def visit_footnote_reference(self, node: FootnoteReference) -> Any:
        """Visit a FootnoteReference node."""
        return None

    def visit_horizontal_rule(self, node: HorizontalRule) -> Any:
        """Visit a HorizontalRule node."""
        return None
