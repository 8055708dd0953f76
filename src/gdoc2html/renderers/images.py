#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2html/renderers/images.py
"""Image block markup for embedded and linked images.

Every image block pairs a visible ``<img>`` with a hidden fallback block.
The image's ``onerror`` handler hides the image and reveals the fallback, so
a broken image degrades to a labelled placeholder in the browser.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional

from gdoc2html.ast import EmbeddedObject, LinkedImage
from gdoc2html.constants import DEFAULT_INLINE_IMAGE_TITLE, DEFAULT_LINKED_IMAGE_ALT, IMAGE_ONERROR_SCRIPT
from gdoc2html.options.html import GoogleDocsHtmlOptions
from gdoc2html.utils.html_utils import escape_attribute, escape_html, proxify_image_url
from gdoc2html.utils.units import points_to_pixels

logger = logging.getLogger(__name__)

_LINKED_IMAGE_ICON_PATH = (
    "M4 16l4.586-4.586a2 2 0 012.828 0L16 16m-2-2l1.586-1.586a2 2 0 012.828 0L20 16m-6-6h.01"
    "M6 20h12a2 2 0 002-2V6a2 2 0 00-2-2H6a2 2 0 002 2v12a2 2 0 002 2z"
)


@dataclass
class ImageCursor:
    """Monotonic inline-image ordinal shared across a render call.

    ``next()`` returns the current ordinal and then increments it, so the
    first image gets 0.
    """

    index: int = 0

    def next(self) -> int:
        current = self.index
        self.index += 1
        return current


class EmbeddedObjectResolver:
    """Render inline and positioned embedded images of one document.

    Parameters
    ----------
    inline_objects : mapping
        Inline object ID to EmbeddedObject (or None)
    positioned_objects : mapping
        Positioned object ID to EmbeddedObject (or None)
    options : GoogleDocsHtmlOptions
        Rendering options

    """

    def __init__(
        self,
        inline_objects: Mapping[str, Optional[EmbeddedObject]],
        positioned_objects: Mapping[str, Optional[EmbeddedObject]],
        options: GoogleDocsHtmlOptions,
    ):
        self.inline_objects = inline_objects
        self.positioned_objects = positioned_objects
        self.options = options

    def resolve_inline(self, object_id: str, image_index: int) -> str:
        """Render an inline object as an image block.

        Parameters
        ----------
        object_id : str
            Key into the inline object table
        image_index : int
            Ordinal of this inline image within its cursor

        Returns
        -------
        str
            Image block markup, or an empty string when the ID is unknown or
            the object carries no image with a content URI

        """
        embedded = self._lookup(self.inline_objects, object_id, "inline")
        if embedded is None:
            return ""

        extra_attributes = f' data-image-index="{image_index}"' if self.options.number_images else ""
        return self._render_embedded(
            embedded,
            unavailable_text=self.options.inline_image_unavailable_text,
            style_before_class=False,
            extra_attributes=extra_attributes,
        )

    def resolve_positioned(self, object_id: str) -> str:
        """Render a positioned object as an image block, or ``""`` if unresolvable."""
        embedded = self._lookup(self.positioned_objects, object_id, "positioned")
        if embedded is None:
            return ""

        return self._render_embedded(
            embedded,
            unavailable_text=self.options.positioned_image_unavailable_text,
            style_before_class=True,
        )

    def render_linked_image(self, image: LinkedImage) -> str:
        """Render a detected linked image as an image block.

        The run's stripped text becomes the alt text, and also a caption when
        it differs from the URL.
        """
        style = self.options.style
        escape = self.options.escape_html
        src = escape_attribute(self._image_src(image.url, linked=True), enabled=escape)
        alt = escape_attribute(image.text or DEFAULT_LINKED_IMAGE_ALT, enabled=escape)

        caption = ""
        if image.text and image.text != image.url:
            caption = self._caption(image.text)

        return (
            f'<div class="{style.image_container_class}">'
            f'<img src="{src}" alt="{alt}" class="{style.linked_image_class}" onerror="{IMAGE_ONERROR_SCRIPT}" />'
            f'<div style="display: none;" class="{style.linked_fallback_class}">'
            f'<svg class="{style.linked_fallback_icon_class}" fill="none" viewBox="0 0 24 24" stroke="currentColor">'
            f'<path stroke-linecap="round" stroke-linejoin="round" stroke-width="2" d="{_LINKED_IMAGE_ICON_PATH}" />'
            f"</svg>"
            f'<p class="{style.fallback_title_class}">{DEFAULT_LINKED_IMAGE_ALT}</p>'
            f'<p class="{style.fallback_detail_class}">{escape_html(self.options.linked_image_unavailable_text, enabled=escape)}</p>'
            f"</div>"
            f"{caption}"
            f"</div>"
        )

    def size_style(self, embedded: EmbeddedObject) -> str:
        """Return the inline ``style`` value for an embedded image.

        Width and height are converted from points to rounded pixels. Without
        a height, ``height:auto;`` is appended so the aspect ratio holds.

        Examples
        --------
            >>> resolver.size_style(EmbeddedObject(content_uri="x", width=150.0, has_image=True))
            'width: 200px;display:block;margin:0 auto;max-width:100%;height:auto;'

        """
        ratio = self.options.points_to_pixels
        parts = []
        has_height = False
        if embedded.width:
            parts.append(f"width: {points_to_pixels(embedded.width, ratio)}px;")
        if embedded.height:
            parts.append(f"height: {points_to_pixels(embedded.height, ratio)}px;")
            has_height = True

        parts.append(self.options.style.embedded_image_style)
        if not has_height:
            parts.append("height:auto;")
        return "".join(parts)

    def _lookup(
        self, objects: Mapping[str, Optional[EmbeddedObject]], object_id: str, kind: str
    ) -> Optional[EmbeddedObject]:
        embedded = objects.get(object_id)
        if embedded is None or not embedded.has_image or not embedded.content_uri:
            logger.debug(f"Skipping unresolvable {kind} object '{object_id}'")
            return None
        return embedded

    def _image_src(self, url: str, linked: bool = False) -> str:
        domains = self.options.proxy_domains if linked else self.options.embedded_proxy_domains
        return proxify_image_url(url, self.options.image_proxy_path, domains)

    def _caption(self, text: str) -> str:
        style = self.options.style
        return (
            f'<div class="{style.caption_container_class}">'
            f'<p class="{style.caption_class}">{escape_html(text, enabled=self.options.escape_html)}</p>'
            f"</div>"
        )

    def _render_embedded(
        self,
        embedded: EmbeddedObject,
        unavailable_text: str,
        style_before_class: bool,
        extra_attributes: str = "",
    ) -> str:
        style = self.options.style
        escape = self.options.escape_html
        title = embedded.title or DEFAULT_INLINE_IMAGE_TITLE
        src = escape_attribute(self._image_src(embedded.content_uri or ""), enabled=escape)
        alt = escape_attribute(title, enabled=escape)

        style_attribute = f'style="{self.size_style(embedded)}"'
        class_attribute = f'class="{style.embedded_image_class}"'
        if style_before_class:
            presentation = f"{style_attribute} {class_attribute}"
        else:
            presentation = f"{class_attribute} {style_attribute}"

        caption = self._caption(title) if title != DEFAULT_INLINE_IMAGE_TITLE else ""

        return (
            f'<div class="{style.image_container_class}">'
            f'<img src="{src}" alt="{alt}" {presentation} onerror="{IMAGE_ONERROR_SCRIPT}"{extra_attributes} />'
            f'<div style="display:none;" class="{style.embedded_fallback_class}">'
            f'<p class="{style.fallback_title_class}">Image: {escape_html(title, enabled=escape)}</p>'
            f'<p class="{style.fallback_detail_class}">{escape_html(unavailable_text, enabled=escape)}</p>'
            f"</div>"
            f"{caption}"
            f"</div>"
        )
