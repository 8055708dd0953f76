"""Option dataclasses for gdoc2html parsing and rendering."""

from gdoc2html.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from gdoc2html.options.html import GoogleDocsHtmlOptions, GoogleDocsParserOptions, HtmlStyleTable

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "GoogleDocsHtmlOptions",
    "GoogleDocsParserOptions",
    "HtmlStyleTable",
]
