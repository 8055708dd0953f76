#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2html/renderers/html.py
"""HTML rendering of Google Docs documents.

This module provides the GoogleDocsHtmlRenderer class, which walks the
document model with the visitor pattern and produces one HTML fragment.

Rendering is two-pass. The first pass turns every structural element into a
tagged block (paragraph, list item, table, section break). The second pass
merges each run of consecutive list items into a single ``<ul>`` and
concatenates everything else in order. Table cells go through the same
two passes for their own content.

Inline images are numbered by two independent cursors: one for the body and
one shared by every table of the document, nested tables included.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Iterable, Optional

from gdoc2html.ast import (
    ColumnBreak,
    Document,
    FootnoteReference,
    HorizontalRule,
    InlineObjectElement,
    NodeVisitor,
    PageBreak,
    Paragraph,
    SectionBreak,
    StructuralElement,
    Table,
    TableCell,
    TextRun,
    UnsupportedElement,
)
from gdoc2html.constants import BlockType
from gdoc2html.options.html import GoogleDocsHtmlOptions
from gdoc2html.renderers.base import BaseRenderer
from gdoc2html.renderers.images import EmbeddedObjectResolver, ImageCursor
from gdoc2html.renderers.linked_images import LinkedImageDetector, LinkedImageIndex
from gdoc2html.renderers.paragraph import ParagraphRenderer
from gdoc2html.renderers.table import TableRenderer
from gdoc2html.renderers.text import TextFormatter
from gdoc2html.utils.decorators import debug_timer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderedBlock:
    """Intermediate result of rendering one structural element."""

    type: BlockType
    content: str = ""
    list_id: Optional[str] = None
    nesting_level: int = 0


def aggregate_list_items(blocks: Iterable[RenderedBlock], list_class: str) -> str:
    """Concatenate blocks, wrapping each run of list items in one ``<ul>``.

    Examples
    --------
        >>> aggregate_list_items(
        ...     [RenderedBlock("listItem", "<li>a</li>"), RenderedBlock("listItem", "<li>b</li>")],
        ...     "list-disc",
        ... )
        '<ul class="list-disc"><li>a</li><li>b</li></ul>'

    """
    html: list[str] = []
    pending_items: list[str] = []
    for block in blocks:
        if block.type == "listItem":
            pending_items.append(block.content)
            continue
        if pending_items:
            html.append(f'<ul class="{list_class}">{"".join(pending_items)}</ul>')
            pending_items = []
        html.append(block.content)

    if pending_items:
        html.append(f'<ul class="{list_class}">{"".join(pending_items)}</ul>')
    return "".join(html)


@dataclass
class _RenderState:
    """Per-call rendering context, swapped while rendering table cells."""

    formatter: TextFormatter
    body_cursor: ImageCursor = field(default_factory=ImageCursor)
    table_cursor: ImageCursor = field(default_factory=ImageCursor)
    in_table_cell: bool = False
    depth: int = 0

    @property
    def images(self) -> EmbeddedObjectResolver:
        return self.formatter.images

    @property
    def cursor(self) -> ImageCursor:
        return self.table_cursor if self.in_table_cell else self.body_cursor


class GoogleDocsHtmlRenderer(NodeVisitor, BaseRenderer):
    """Render a Google Docs document model to an HTML fragment.

    A renderer instance keeps per-call state while rendering, so one instance
    must not render two documents concurrently. Sequential calls are
    independent and produce identical output for identical input.

    Parameters
    ----------
    options : GoogleDocsHtmlOptions or None, default = None
        HTML rendering options

    Examples
    --------
        >>> from gdoc2html.parsers import GoogleDocsParser
        >>> doc = GoogleDocsParser().parse(response_json)
        >>> html = GoogleDocsHtmlRenderer().render_to_string(doc)

    """

    def __init__(self, options: GoogleDocsHtmlOptions | None = None):
        """Initialize the HTML renderer with options."""
        BaseRenderer._validate_options_type(options, GoogleDocsHtmlOptions, "html")
        options = options or GoogleDocsHtmlOptions()
        BaseRenderer.__init__(self, options)
        self.options: GoogleDocsHtmlOptions = options
        self._paragraphs = ParagraphRenderer(self, options)
        self._tables = TableRenderer(options)
        self._state: Optional[_RenderState] = None

    def render_to_string(self, doc: Document) -> str:
        """Render a document to an HTML string.

        Parameters
        ----------
        doc : Document
            The document to render

        Returns
        -------
        str
            HTML fragment; empty for a document without content

        """
        with debug_timer(logger, "Rendering (html)"):
            linked_images = LinkedImageIndex(LinkedImageDetector().detect(doc))
            images = EmbeddedObjectResolver(doc.inline_objects, doc.positioned_objects, self.options)
            self._state = _RenderState(formatter=TextFormatter(linked_images, images, self.options))
            try:
                return doc.accept(self)
            finally:
                self._state = None

    def render_block(self, block: StructuralElement) -> RenderedBlock:
        """Dispatch one structural element to its tagged intermediate block.

        - Section break: an empty ``sectionBreak`` block.
        - Unsupported element: an empty ``empty`` block, which still ends a
          run of list items.
        - Bullet paragraph: a ``listItem`` block. Positioned objects of list
          items are rendered only inside table cells, ahead of the item.
        - Other paragraphs: positioned images first, then either the raw
          inline flow (when the paragraph holds inline objects) or the
          paragraph markup.
        - Table: a ``table`` block.
        """
        if isinstance(block, SectionBreak):
            return RenderedBlock("sectionBreak", block.accept(self))

        if isinstance(block, UnsupportedElement):
            return RenderedBlock("empty", block.accept(self))

        if isinstance(block, Table):
            return RenderedBlock("table", block.accept(self))

        bullet = block.bullet
        if bullet is not None:
            positioned = self._render_positioned(block) if self.state.in_table_cell else ""
            return RenderedBlock(
                "listItem", positioned + block.accept(self), list_id=bullet.list_id, nesting_level=bullet.nesting_level
            )

        positioned = self._render_positioned(block)
        if block.has_inline_objects:
            body = self._paragraphs.render_inline_flow(block)
        else:
            body = block.accept(self)
        return RenderedBlock("paragraph", positioned + body)

    def _render_positioned(self, paragraph: Paragraph) -> str:
        return "".join(self.state.images.resolve_positioned(object_id) for object_id in paragraph.positioned_object_ids)

    def render_content(self, content: list[StructuralElement]) -> str:
        """Render a content list through both passes."""
        blocks = [self.render_block(block) for block in content]
        return aggregate_list_items(blocks, self.options.style.list_class)

    @property
    def state(self) -> _RenderState:
        if self._state is None:
            raise RuntimeError("Renderer state is only available during render_to_string()")
        return self._state

    # ------------------------------------------------------------------
    # Structural visits
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> str:
        """Render the body content."""
        return self.render_content(node.content)

    def visit_paragraph(self, node: Paragraph) -> str:
        """Render a paragraph with its enclosing tag."""
        return self._paragraphs.render(node, in_table_cell=self.state.in_table_cell)

    def visit_table(self, node: Table) -> str:
        """Render a table, or nothing beyond the nesting limit."""
        depth = self.state.depth + 1
        if depth > self.options.max_nesting_depth:
            logger.warning(f"Table nesting exceeds {self.options.max_nesting_depth} levels; skipping nested table")
            return ""

        saved_state = self.state
        self._state = replace(saved_state, depth=depth)
        try:
            return self._tables.render(node, self)
        finally:
            self._state = saved_state

    def visit_table_cell(self, node: TableCell) -> str:
        """Render a cell's content with the table cursor and cell paragraph classes."""
        saved_state = self.state
        self._state = replace(saved_state, in_table_cell=True)
        try:
            return self.render_content(node.content)
        finally:
            self._state = saved_state

    def visit_section_break(self, node: SectionBreak) -> str:
        """Section breaks produce no markup."""
        return ""

    def visit_unsupported_element(self, node: UnsupportedElement) -> str:
        """Unsupported elements produce no markup."""
        return ""

    # ------------------------------------------------------------------
    # Paragraph element visits
    # ------------------------------------------------------------------

    def visit_text_run(self, node: TextRun) -> str:
        """Format a text run."""
        return self.state.formatter.format(node)

    def visit_inline_object_element(self, node: InlineObjectElement) -> str:
        """Render an inline image, consuming one ordinal of the active cursor."""
        image_index = self.state.cursor.next()
        return self.state.images.resolve_inline(node.inline_object_id, image_index)

    def visit_page_break(self, node: PageBreak) -> str:
        """Render a page break marker."""
        return self.state.formatter.render_page_break(node)

    def visit_column_break(self, node: ColumnBreak) -> str:
        """Render a column break marker."""
        return self.state.formatter.render_column_break(node)

    def visit_footnote_reference(self, node: FootnoteReference) -> str:
        """Render a footnote number."""
        return self.state.formatter.render_footnote_reference(node)

    def visit_horizontal_rule(self, node: HorizontalRule) -> str:
        """Render a horizontal rule."""
        return self.state.formatter.render_horizontal_rule(node)
