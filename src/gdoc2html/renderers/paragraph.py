#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2html/renderers/paragraph.py
"""Paragraph rendering: tag and class selection plus text-flow assembly."""

from __future__ import annotations

import re
from dataclasses import replace
from typing import Any

from gdoc2html.ast import Paragraph, ParagraphElement, TextRun
from gdoc2html.options.html import GoogleDocsHtmlOptions

_LINE_BREAK_RE = re.compile(r"[\n\x0b]")


def strip_paragraph_terminator(elements: list[ParagraphElement]) -> list[ParagraphElement]:
    """Drop the newline that terminates every paragraph's final text run.

    The document API ends each paragraph's last run with ``\\n``; it marks
    the paragraph boundary rather than a line break.
    """
    if not elements:
        return elements
    last = elements[-1]
    if isinstance(last, TextRun) and last.content.endswith("\n"):
        return [*elements[:-1], replace(last, content=last.content[:-1])]
    return elements


class ParagraphRenderer:
    """Render a paragraph as a heading, paragraph, or naked list item.

    Elements are rendered by dispatching them to ``element_visitor``, which
    must implement the paragraph-element ``visit_*`` methods (text runs,
    inline objects, breaks, footnotes, rules) and return HTML strings.

    Parameters
    ----------
    element_visitor : NodeVisitor
        Visitor rendering individual paragraph elements
    options : GoogleDocsHtmlOptions
        Rendering options

    """

    def __init__(self, element_visitor: Any, options: GoogleDocsHtmlOptions):
        self.element_visitor = element_visitor
        self.options = options

    def render(self, paragraph: Paragraph, in_table_cell: bool = False) -> str:
        """Render the paragraph with its enclosing tag.

        Parameters
        ----------
        paragraph : Paragraph
            Paragraph to render
        in_table_cell : bool, default False
            Table cells use the tighter paragraph class without bottom margin

        Returns
        -------
        str
            ``<br>`` when the paragraph has no visible content; otherwise an
            ``<li>`` for bullet paragraphs, the heading/title tag for known
            named styles, or a ``<p>`` with an alignment class

        """
        style = self.options.style
        content = self.render_inline_flow(paragraph)
        if not content.strip():
            return style.line_break

        if paragraph.bullet is not None:
            nesting_level = paragraph.bullet.nesting_level
            indent = ""
            if nesting_level > 0:
                indent = f' style="margin-left: {nesting_level * self.options.list_indent_px}px;"'
            return f'<li class="{style.list_item_class}"{indent}>{content}</li>'

        named_style = paragraph.style.named_style_type
        if named_style in style.named_styles:
            tag, classes = style.named_styles[named_style]
            return f'<{tag} class="{classes}">{content}</{tag}>'

        base_class = style.paragraph_cell_class if in_table_cell else style.paragraph_class
        classes = f"{base_class} {style.alignment_class(paragraph.style.alignment)}"
        return f'<p class="{classes}">{content}</p>'

    def render_inline_flow(self, paragraph: Paragraph) -> str:
        """Render the paragraph's elements in order without an enclosing tag.

        Newlines and vertical tabs in the joined result become line breaks.
        """
        rendered = [element.accept(self.element_visitor) for element in strip_paragraph_terminator(paragraph.elements)]
        return _LINE_BREAK_RE.sub(self.options.style.line_break, "".join(part or "" for part in rendered))
