#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2html/renderers/linked_images.py
"""Detection of hyperlinks and bare URLs that point at images.

The detector runs once per render, before any markup is produced. Its result
is used by the text formatter to replace a matching link or URL with an image
block instead of an anchor.

"""

from __future__ import annotations

import logging
import re
from typing import Iterator, Optional, Sequence

from gdoc2html.ast import (
    Document,
    LinkedImage,
    NodeVisitor,
    Paragraph,
    SectionBreak,
    StructuralElement,
    Table,
    TableCell,
    TableRow,
    TextRun,
)
from gdoc2html.constants import BARE_URL_PATTERN, IMAGE_EXTENSIONS, IMAGE_HOST_PATTERNS

logger = logging.getLogger(__name__)

_BARE_URL_RE = re.compile(BARE_URL_PATTERN)


def is_image_url(url: str) -> bool:
    """Return True if the URL looks like it points at an image.

    The check is a case-insensitive substring match against known image file
    extensions and image-hosting patterns. It is intentionally loose: any URL
    containing ``image`` qualifies.

    Examples
    --------
        >>> is_image_url("https://example.com/photo.PNG")
        True
        >>> is_image_url("https://example.com/page.html")
        False

    """
    lower_url = url.lower()
    return any(ext in lower_url for ext in IMAGE_EXTENSIONS) or any(
        pattern in lower_url for pattern in IMAGE_HOST_PATTERNS
    )


def find_bare_urls(text: str) -> list[str]:
    """Return every ``http(s)://`` token of the text in order."""
    return _BARE_URL_RE.findall(text)


class LinkedImageIndex:
    """Lookup of detected linked images by URL.

    Lookup is by exact URL string and the first detected record for a URL
    wins, so unrelated links sharing a URL resolve to the same record.

    Parameters
    ----------
    images : sequence of LinkedImage
        Records in detection order

    """

    def __init__(self, images: Sequence[LinkedImage] = ()):
        self._images = list(images)
        self._by_url: dict[str, LinkedImage] = {}
        for image in self._images:
            self._by_url.setdefault(image.url, image)

    def lookup(self, url: str | None) -> Optional[LinkedImage]:
        """Return the first record detected for ``url``, or None."""
        if not url:
            return None
        return self._by_url.get(url)

    def __contains__(self, url: object) -> bool:
        return isinstance(url, str) and url in self._by_url

    def __iter__(self) -> Iterator[LinkedImage]:
        return iter(self._images)

    def __len__(self) -> int:
        return len(self._images)


class LinkedImageDetector(NodeVisitor):
    """Collect linked-image records from every paragraph of a document.

    Text runs are scanned at every nesting level, including paragraphs inside
    table cells and nested tables. For each run the link target is checked
    first, then every bare URL in the run's text, each producing its own
    record. Ordinals follow encounter order.

    Location tags have the form ``document-block-{i}-element-{j}`` for body
    content and ``table-row-{r}-cell-{c}-block-{i}-element-{j}`` inside a
    cell, where ``i`` is the block index within the enclosing content list.

    Examples
    --------
        >>> detector = LinkedImageDetector()
        >>> records = detector.detect(document)

    """

    def __init__(self) -> None:
        self._images: list[LinkedImage] = []
        self._location = "document"
        self._block_index = 0
        self._element_index = 0
        self._row_index = 0

    def detect(self, document: Document) -> list[LinkedImage]:
        """Return the linked images of the document in encounter order.

        Detection is best effort: any failure while walking the document is
        logged and yields an empty list so rendering proceeds without
        image-link substitution.
        """
        self._images = []
        try:
            document.accept(self)
        except Exception as e:
            logger.warning(f"Linked image detection failed, continuing without substitutions: {e}")
            return []

        logger.debug(f"Detected {len(self._images)} linked image(s)")
        return list(self._images)

    def visit_document(self, node: Document) -> None:
        """Scan top-level body content."""
        self._scan_content(node.content, "document")

    def visit_paragraph(self, node: Paragraph) -> None:
        """Scan each element of the paragraph, tracking its index."""
        for element_index, element in enumerate(node.elements):
            self._element_index = element_index
            element.accept(self)

    def visit_table(self, node: Table) -> None:
        """Scan every cell of every row."""
        saved_row = self._row_index
        for row_index, row in enumerate(node.rows):
            self._row_index = row_index
            row.accept(self)
        self._row_index = saved_row

    def visit_table_row(self, node: TableRow) -> None:
        """Scan each cell with a location prefix naming its row and cell."""
        row_index = self._row_index
        for cell_index, cell in enumerate(node.cells):
            self._location = f"table-row-{row_index}-cell-{cell_index}"
            cell.accept(self)

    def visit_table_cell(self, node: TableCell) -> None:
        """Scan the cell's content under the current location prefix."""
        self._scan_content(node.content, self._location)

    def visit_section_break(self, node: SectionBreak) -> None:
        """Section breaks carry no text."""
        pass

    def visit_text_run(self, node: TextRun) -> None:
        """Record the run's link target and bare URLs that look like images."""
        location = f"{self._location}-block-{self._block_index}-element-{self._element_index}"

        link_url = node.style.link_url
        if link_url and is_image_url(link_url):
            self._record(link_url, node.content.strip(), location, "hyperlink")

        for url in find_bare_urls(node.content):
            if is_image_url(url):
                self._record(url, node.content.strip(), location, "text-url")

    def _scan_content(self, content: list[StructuralElement], location: str) -> None:
        saved = (self._location, self._block_index, self._element_index)
        for block_index, block in enumerate(content):
            self._location = location
            self._block_index = block_index
            block.accept(self)
        self._location, self._block_index, self._element_index = saved

    def _record(self, url: str, text: str, location: str, source: str) -> None:
        self._images.append(
            LinkedImage(url=url, text=text, location=location, index=len(self._images), source=source)  # type: ignore[arg-type]
        )
