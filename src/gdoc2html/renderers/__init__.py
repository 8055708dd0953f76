"""Renderers for the gdoc2html document model."""

from gdoc2html.renderers.base import BaseRenderer
from gdoc2html.renderers.html import GoogleDocsHtmlRenderer, RenderedBlock, aggregate_list_items
from gdoc2html.renderers.images import EmbeddedObjectResolver, ImageCursor
from gdoc2html.renderers.linked_images import LinkedImageDetector, LinkedImageIndex, is_image_url
from gdoc2html.renderers.paragraph import ParagraphRenderer
from gdoc2html.renderers.table import Empty, Occupied, Origin, TableGrid, TableRenderer, build_table_grid
from gdoc2html.renderers.text import TextFormatter

__all__ = [
    "BaseRenderer",
    "EmbeddedObjectResolver",
    "Empty",
    "GoogleDocsHtmlRenderer",
    "ImageCursor",
    "LinkedImageDetector",
    "LinkedImageIndex",
    "Occupied",
    "Origin",
    "ParagraphRenderer",
    "RenderedBlock",
    "TableGrid",
    "TableRenderer",
    "TextFormatter",
    "aggregate_list_items",
    "build_table_grid",
    "is_image_url",
]
