#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2html/renderers/text.py
"""Inline formatting of text runs and fixed-markup paragraph elements."""

from __future__ import annotations

import re

from gdoc2html.ast import ColumnBreak, FootnoteReference, HorizontalRule, PageBreak, TextRun, TextStyle
from gdoc2html.constants import BARE_URL_PATTERN
from gdoc2html.options.html import GoogleDocsHtmlOptions
from gdoc2html.renderers.images import EmbeddedObjectResolver
from gdoc2html.renderers.linked_images import LinkedImageIndex
from gdoc2html.utils.html_utils import escape_attribute, escape_html, inline_style

_BARE_URL_RE = re.compile(BARE_URL_PATTERN)


def format_points(value: float) -> str:
    """Format a point size the way it reads in CSS: ``12`` rather than ``12.0``."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


class TextFormatter:
    """Turn a text run and its style into an HTML fragment.

    The decisions are taken in a fixed order, each able to short-circuit
    the next:

    1. A link target matching a detected linked image yields the image block
       and nothing else.
    2. Bare URLs in the text matching a linked image are replaced in place
       by image blocks. Other URLs stay literal text.
    3. Decorations wrap the result, innermost first: ``<strong>``, ``<em>``,
       ``<u>``, ``<s>``, then ``<sub>``/``<sup>``.
    4. A remaining link target wraps an anchor opening in a new tab.
    5. Font size and color wrap a ``<span>`` with an inline style.

    Parameters
    ----------
    linked_images : LinkedImageIndex
        Detected linked images of the current document
    images : EmbeddedObjectResolver
        Produces the image block markup
    options : GoogleDocsHtmlOptions
        Rendering options

    """

    def __init__(self, linked_images: LinkedImageIndex, images: EmbeddedObjectResolver, options: GoogleDocsHtmlOptions):
        self.linked_images = linked_images
        self.images = images
        self.options = options

    def format(self, run: TextRun) -> str:
        """Format one text run."""
        text_style = run.style

        linked_image = self.linked_images.lookup(text_style.link_url)
        if linked_image is not None:
            return self.images.render_linked_image(linked_image)

        content = self._substitute_bare_urls(run.content)
        content = self._apply_decorations(content, text_style)

        if text_style.link_url:
            href = escape_attribute(text_style.link_url, enabled=self.options.escape_html)
            content = f'<a href="{href}" target="_blank">{content}</a>'

        span_style = self._span_style(text_style)
        if span_style:
            content = f'<span style="{span_style}">{content}</span>'
        return content

    def render_page_break(self, node: PageBreak) -> str:
        return f'<div class="{self.options.style.page_break_class}"></div>'

    def render_column_break(self, node: ColumnBreak) -> str:
        return f'<div class="{self.options.style.column_break_class}"></div>'

    def render_footnote_reference(self, node: FootnoteReference) -> str:
        number = escape_html(node.footnote_number, enabled=self.options.escape_html)
        return f'<sup class="{self.options.style.footnote_class}">{number}</sup>'

    def render_horizontal_rule(self, node: HorizontalRule) -> str:
        return f'<hr class="{self.options.style.horizontal_rule_class}">'

    def _substitute_bare_urls(self, text: str) -> str:
        escape = self.options.escape_html
        parts = []
        position = 0
        for match in _BARE_URL_RE.finditer(text):
            parts.append(escape_html(text[position : match.start()], enabled=escape))
            url = match.group(0)
            linked_image = self.linked_images.lookup(url)
            if linked_image is not None:
                parts.append(self.images.render_linked_image(linked_image))
            else:
                parts.append(escape_html(url, enabled=escape))
            position = match.end()
        parts.append(escape_html(text[position:], enabled=escape))
        return "".join(parts)

    @staticmethod
    def _apply_decorations(content: str, text_style: TextStyle) -> str:
        if text_style.bold:
            content = f"<strong>{content}</strong>"
        if text_style.italic:
            content = f"<em>{content}</em>"
        if text_style.underline:
            content = f"<u>{content}</u>"
        if text_style.strikethrough:
            content = f"<s>{content}</s>"
        if text_style.baseline_offset == "SUBSCRIPT":
            content = f"<sub>{content}</sub>"
        elif text_style.baseline_offset == "SUPERSCRIPT":
            content = f"<sup>{content}</sup>"
        return content

    @staticmethod
    def _span_style(text_style: TextStyle) -> str:
        declarations = []
        if text_style.font_size:
            declarations.append(f"font-size: {format_points(text_style.font_size)}pt;")
        if text_style.foreground_color is not None:
            declarations.append(f"color: {text_style.foreground_color.to_css()};")
        return inline_style(declarations)
