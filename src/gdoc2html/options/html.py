#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for rendering Google Docs documents to HTML.

The literal class names and inline styles emitted by the renderer live in
``HtmlStyleTable`` so a site theme can be swapped without touching the
tree-walk. Defaults reproduce the utility-class vocabulary of the content
site the renderer was built for.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from gdoc2html.constants import (
    DEFAULT_EMBEDDED_PROXY_DOMAINS,
    DEFAULT_IMAGE_PROXY_PATH,
    DEFAULT_INLINE_IMAGE_UNAVAILABLE_TEXT,
    DEFAULT_LINKED_IMAGE_UNAVAILABLE_TEXT,
    DEFAULT_LIST_INDENT_PX,
    DEFAULT_MAX_NESTING_DEPTH,
    DEFAULT_NUMBER_IMAGES,
    DEFAULT_POINTS_TO_PIXELS,
    DEFAULT_POSITIONED_IMAGE_UNAVAILABLE_TEXT,
    DEFAULT_PROXY_DOMAINS,
)
from gdoc2html.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin


def _default_named_styles() -> dict[str, tuple[str, str]]:
    return {
        "TITLE": ("h1", "text-4xl font-bold mb-6 text-center text-blue-700"),
        "SUBTITLE": ("h2", "text-2xl font-semibold mb-4 text-center text-blue-700"),
        "HEADING_1": ("h1", "text-3xl font-bold mb-4 mt-8 text-blue-700 border-b-2 border-blue-200 pb-2"),
        "HEADING_2": ("h2", "text-2xl font-semibold mb-3 mt-6 text-red-600"),
        "HEADING_3": ("h3", "text-xl font-semibold mb-2 mt-4 text-green-600"),
        "HEADING_4": ("h4", "text-lg font-medium mb-2 mt-3 text-blue-600"),
        "HEADING_5": ("h5", "text-base font-medium mb-1 mt-2 text-blue-600"),
        "HEADING_6": ("h6", "text-sm font-medium mb-1 mt-2 text-blue-600"),
    }


def _default_alignment_classes() -> dict[str, str]:
    return {
        "CENTER": "text-center",
        "END": "text-right",
        "JUSTIFIED": "text-justify",
    }


@dataclass(frozen=True)
class HtmlStyleTable(CloneFrozenMixin):
    """Class names and inline styles used in the generated markup.

    Parameters
    ----------
    named_styles : dict[str, tuple[str, str]]
        Named style type to ``(tag, classes)``. Paragraphs whose named style
        is not a key here render as ``<p>``.
    paragraph_class : str
        Classes of a body ``<p>`` before the alignment class
    paragraph_cell_class : str
        Classes of a ``<p>`` inside a table cell before the alignment class
    alignment_classes : dict[str, str]
        Paragraph alignment to class; anything else gets ``default_alignment_class``
    list_class, list_item_class : str
        Classes of the merged ``<ul>`` and of each ``<li>``
    table_wrapper_class, table_class, table_style, cell_style : str
        Scroll wrapper, ``<table>`` and ``<td>`` presentation
    image_container_class : str
        Wrapper ``<div>`` around every image block
    embedded_image_class, linked_image_class : str
        Classes of the ``<img>`` for embedded and linked images
    embedded_image_style : str
        Declarations appended after the computed size of embedded images
    embedded_fallback_class, linked_fallback_class : str
        Hidden fallback block revealed when the image fails to load
    caption_container_class, caption_class : str
        Caption below an image

    """

    named_styles: dict[str, tuple[str, str]] = field(default_factory=_default_named_styles)
    paragraph_class: str = "mb-4 leading-relaxed"
    paragraph_cell_class: str = "leading-relaxed"
    alignment_classes: dict[str, str] = field(default_factory=_default_alignment_classes)
    default_alignment_class: str = "text-left"
    list_class: str = "list-disc list-inside space-y-1 mb-4 ml-4"
    list_item_class: str = "mb-1 leading-relaxed"
    table_wrapper_class: str = "overflow-scroll w-100vw"
    table_class: str = "w-full border-collapse mb-6"
    table_style: str = "border: 1px solid black; background-color: white;"
    cell_style: str = "border: 1px solid black; padding: 0.75rem; background-color: white;"
    image_container_class: str = "my-6 flex justify-center"
    embedded_image_class: str = "rounded-lg shadow-md"
    linked_image_class: str = "max-w-full h-auto rounded-lg shadow-md"
    embedded_image_style: str = "display:block;margin:0 auto;max-width:100%;"
    embedded_fallback_class: str = "bg-gray-100 border-2 border-dashed border-gray-300 rounded-lg p-4 text-center"
    linked_fallback_class: str = "bg-gray-100 border-2 border-dashed border-gray-300 rounded-lg p-8 text-center"
    linked_fallback_icon_class: str = "mx-auto h-12 w-12 text-gray-400"
    fallback_title_class: str = "mt-2 text-sm text-gray-600 font-medium"
    fallback_detail_class: str = "text-xs text-gray-500 mt-1"
    caption_container_class: str = "text-center"
    caption_class: str = "text-sm text-gray-600 mt-2 italic"
    page_break_class: str = "page-break"
    column_break_class: str = "column-break"
    footnote_class: str = "footnote-ref"
    horizontal_rule_class: str = "my-4"
    line_break: str = "<br>"

    def alignment_class(self, alignment: str | None) -> str:
        """Return the horizontal alignment class for a paragraph alignment value."""
        if alignment is None:
            return self.default_alignment_class
        return self.alignment_classes.get(alignment, self.default_alignment_class)


@dataclass(frozen=True)
class GoogleDocsHtmlOptions(BaseRendererOptions):
    """Configuration options for rendering a Google Docs document to HTML.

    Parameters
    ----------
    style : HtmlStyleTable
        Class names and inline styles of the generated markup.
    image_proxy_path : str, default "/api/image-proxy"
        Same-origin path images from the document service are routed through.
    proxy_domains : tuple of str
        URL fragments of the hosts whose linked images are proxied.
    embedded_proxy_domains : tuple of str
        URL fragments of the hosts whose embedded (inline and positioned)
        images are proxied.
    points_to_pixels : float, default 1.333
        Ratio used to turn point sizes into CSS pixels.
    list_indent_px : int, default 20
        Left margin per list nesting level.
    max_nesting_depth : int, default 32
        Deepest table nesting rendered; deeper tables render as nothing.
    number_images : bool, default True
        Emit ``data-image-index`` on embedded inline images.
    inline_image_unavailable_text, positioned_image_unavailable_text, linked_image_unavailable_text : str
        Messages shown in the fallback block when an image fails to load.

    Examples
    --------
    Custom theme:
        >>> from gdoc2html.options import GoogleDocsHtmlOptions, HtmlStyleTable
        >>> options = GoogleDocsHtmlOptions(style=HtmlStyleTable(paragraph_class="prose"))

    """

    style: HtmlStyleTable = field(
        default_factory=HtmlStyleTable,
        metadata={"help": "Class names and inline styles of the generated markup", "importance": "advanced"},
    )
    image_proxy_path: str = field(
        default=DEFAULT_IMAGE_PROXY_PATH,
        metadata={"help": "Same-origin path for proxied images", "importance": "core"},
    )
    proxy_domains: tuple[str, ...] = field(
        default=DEFAULT_PROXY_DOMAINS,
        metadata={"help": "Hosts whose linked images are routed through the proxy", "importance": "advanced"},
    )
    embedded_proxy_domains: tuple[str, ...] = field(
        default=DEFAULT_EMBEDDED_PROXY_DOMAINS,
        metadata={"help": "Hosts whose embedded images are routed through the proxy", "importance": "advanced"},
    )
    points_to_pixels: float = field(
        default=DEFAULT_POINTS_TO_PIXELS,
        metadata={"help": "Point to pixel ratio for image sizes", "type": float, "importance": "advanced"},
    )
    list_indent_px: int = field(
        default=DEFAULT_LIST_INDENT_PX,
        metadata={"help": "Left margin in pixels per list nesting level", "type": int, "importance": "advanced"},
    )
    max_nesting_depth: int = field(
        default=DEFAULT_MAX_NESTING_DEPTH,
        metadata={"help": "Maximum nested table depth rendered", "type": int, "importance": "security"},
    )
    number_images: bool = field(
        default=DEFAULT_NUMBER_IMAGES,
        metadata={"help": "Add data-image-index to inline images", "importance": "advanced"},
    )
    inline_image_unavailable_text: str = field(
        default=DEFAULT_INLINE_IMAGE_UNAVAILABLE_TEXT,
        metadata={"help": "Fallback text for inline images", "importance": "advanced"},
    )
    positioned_image_unavailable_text: str = field(
        default=DEFAULT_POSITIONED_IMAGE_UNAVAILABLE_TEXT,
        metadata={"help": "Fallback text for positioned images", "importance": "advanced"},
    )
    linked_image_unavailable_text: str = field(
        default=DEFAULT_LINKED_IMAGE_UNAVAILABLE_TEXT,
        metadata={"help": "Fallback text for linked images", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if self.points_to_pixels <= 0:
            raise ValueError(f"points_to_pixels must be positive, got {self.points_to_pixels}")
        if self.list_indent_px < 0:
            raise ValueError(f"list_indent_px must be non-negative, got {self.list_indent_px}")
        if self.max_nesting_depth < 1:
            raise ValueError(f"max_nesting_depth must be at least 1, got {self.max_nesting_depth}")
        if not self.image_proxy_path.startswith("/"):
            raise ValueError(f"image_proxy_path must be an absolute path, got {self.image_proxy_path!r}")


@dataclass(frozen=True)
class GoogleDocsParserOptions(BaseParserOptions):
    """Configuration options for loading Google Docs API responses.

    The parser is deliberately lenient; there are no schema switches.
    """
