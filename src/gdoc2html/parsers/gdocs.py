#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2html/parsers/gdocs.py
"""Google Docs API response to Document converter.

This module turns the JSON returned by the document service's "get document"
call into the typed model of ``gdoc2html.ast``. The conversion never
validates: missing optional fields become defaults, unknown paragraph elements
are dropped, unknown structural elements become ``UnsupportedElement``
placeholders, and span values are clamped to at least one. Only input that is
not a JSON object at all is rejected.

"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Optional

from gdoc2html.ast import (
    Bullet,
    ColumnBreak,
    Document,
    EmbeddedObject,
    FootnoteReference,
    HorizontalRule,
    InlineObjectElement,
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
from gdoc2html.exceptions import MalformedDocumentError, ParsingError
from gdoc2html.options.html import GoogleDocsParserOptions
from gdoc2html.parsers.base import BaseParser, ParserInput

logger = logging.getLogger(__name__)

_BASELINE_OFFSETS = {"NONE", "SUBSCRIPT", "SUPERSCRIPT"}
_LOCATION_KEYS = {"startIndex", "endIndex"}


def _as_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def _as_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _as_number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def _magnitude(dimension: Any) -> Optional[float]:
    """Return a positive magnitude from a ``{"magnitude": n, "unit": "PT"}`` record.

    Zero counts as absent.
    """
    magnitude = _as_number(_as_dict(dimension).get("magnitude"))
    return magnitude if magnitude else None


def _span(value: Any) -> int:
    number = _as_number(value)
    if number is None:
        return 1
    return max(1, int(number))


class GoogleDocsParser(BaseParser):
    """Convert a document API response into a Document.

    Parameters
    ----------
    options : GoogleDocsParserOptions or None
        Parser options

    Examples
    --------
        >>> parser = GoogleDocsParser()
        >>> doc = parser.parse({"body": {"content": []}})
        >>> doc.content
        []

    """

    def __init__(self, options: GoogleDocsParserOptions | None = None):
        """Initialize the parser with options."""
        BaseParser._validate_options_type(options, GoogleDocsParserOptions, "gdocs")
        options = options or GoogleDocsParserOptions()
        super().__init__(options)
        self.options: GoogleDocsParserOptions = options

    def parse(self, input_data: ParserInput) -> Document:
        """Parse a document API response.

        Parameters
        ----------
        input_data : mapping, str, Path, IO[bytes], or bytes
            The decoded response, JSON text, a path to a JSON file, or a
            binary stream/bytes holding JSON

        Returns
        -------
        Document
            Document model; empty when the payload has no ``body.content``

        Raises
        ------
        MalformedDocumentError
            If the payload is not a JSON object
        ParsingError
            If a file path cannot be read

        """
        payload = self._load_payload(input_data)

        body = payload.get("body")
        content = _as_dict(body).get("content")
        if not isinstance(content, list):
            logger.warning("Document has no body.content; rendering an empty document")
            content = []

        document = Document(
            content=self._parse_content(content),
            inline_objects=self._parse_object_table(payload.get("inlineObjects"), "inlineObjectProperties"),
            positioned_objects=self._parse_object_table(
                payload.get("positionedObjects"), "positionedObjectProperties"
            ),
        )
        if self.options.extract_metadata:
            document.metadata = self.extract_metadata(payload)
        return document

    def extract_metadata(self, document: Any) -> dict[str, Any]:
        """Return the title, document ID and revision ID when present."""
        payload = _as_dict(document)
        metadata: dict[str, Any] = {}
        for source_key, target_key in (("title", "title"), ("documentId", "document_id"), ("revisionId", "revision_id")):
            value = _as_str(payload.get(source_key))
            if value:
                metadata[target_key] = value
        return metadata

    def _load_payload(self, input_data: ParserInput) -> dict[str, Any]:
        if isinstance(input_data, Mapping):
            return dict(input_data)

        try:
            if isinstance(input_data, bytes):
                data = json.loads(input_data.decode("utf-8"))
            elif isinstance(input_data, str) and input_data.lstrip().startswith(("{", "[")):
                data = json.loads(input_data)
            elif isinstance(input_data, (str, Path)):
                data = json.loads(self._read_file(Path(input_data)))
            elif hasattr(input_data, "read"):
                raw = input_data.read()
                data = json.loads(raw.decode("utf-8") if isinstance(raw, bytes) else raw)
            else:
                raise MalformedDocumentError(received_type=type(input_data))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise MalformedDocumentError(f"Input is not valid JSON: {e}", original_error=e) from e

        if not isinstance(data, dict):
            raise MalformedDocumentError(received_type=type(data))
        return data

    @staticmethod
    def _read_file(path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except OSError as e:
            raise ParsingError(f"Could not read document file {path}: {e}", parsing_stage="read", original_error=e) from e

    def _parse_content(self, content: list[Any]) -> list[StructuralElement]:
        return [self._parse_structural_element(_as_dict(block)) for block in content]

    def _parse_structural_element(self, block: dict[str, Any]) -> StructuralElement:
        if "sectionBreak" in block:
            return SectionBreak()
        if isinstance(block.get("paragraph"), dict):
            return self._parse_paragraph(block["paragraph"])
        if isinstance(block.get("table"), dict):
            return self._parse_table(block["table"])
        kind = next((key for key in block if key not in _LOCATION_KEYS), "")
        logger.debug(f"Keeping placeholder for unsupported structural element {kind!r}")
        return UnsupportedElement(kind=kind)

    def _parse_paragraph(self, data: dict[str, Any]) -> Paragraph:
        paragraph_style = _as_dict(data.get("paragraphStyle"))
        bullet_data = data.get("bullet")
        bullet = None
        if isinstance(bullet_data, dict):
            nesting_level = _as_number(bullet_data.get("nestingLevel"))
            bullet = Bullet(
                list_id=_as_str(bullet_data.get("listId")),
                nesting_level=int(nesting_level) if nesting_level else 0,
            )

        elements: list[ParagraphElement] = []
        for element_data in _as_list(data.get("elements")):
            element = self._parse_paragraph_element(_as_dict(element_data))
            if element is not None:
                elements.append(element)

        return Paragraph(
            elements=elements,
            style=ParagraphStyle(
                named_style_type=_as_str(paragraph_style.get("namedStyleType")),
                alignment=_as_str(paragraph_style.get("alignment")),
            ),
            bullet=bullet,
            positioned_object_ids=[
                object_id for object_id in _as_list(data.get("positionedObjectIds")) if isinstance(object_id, str)
            ],
        )

    def _parse_paragraph_element(self, data: dict[str, Any]) -> Optional[ParagraphElement]:
        if isinstance(data.get("textRun"), dict):
            text_run = data["textRun"]
            return TextRun(
                content=_as_str(text_run.get("content")) or "",
                style=self._parse_text_style(_as_dict(text_run.get("textStyle"))),
            )
        if isinstance(data.get("inlineObjectElement"), dict):
            object_id = _as_str(data["inlineObjectElement"].get("inlineObjectId")) or ""
            return InlineObjectElement(inline_object_id=object_id)
        if "pageBreak" in data:
            return PageBreak()
        if "columnBreak" in data:
            return ColumnBreak()
        if isinstance(data.get("footnoteReference"), dict):
            footnote = data["footnoteReference"]
            return FootnoteReference(
                footnote_number=_as_str(footnote.get("footnoteNumber")) or "",
                footnote_id=_as_str(footnote.get("footnoteId")),
            )
        if "horizontalRule" in data:
            return HorizontalRule()
        logger.debug(f"Dropping unsupported paragraph element with keys {sorted(data)}")
        return None

    @staticmethod
    def _parse_text_style(data: dict[str, Any]) -> TextStyle:
        baseline_offset = data.get("baselineOffset")
        color = None
        rgb = _as_dict(_as_dict(data.get("foregroundColor")).get("color")).get("rgbColor")
        if isinstance(rgb, dict):
            color = RgbColor(
                red=_as_number(rgb.get("red")) or 0.0,
                green=_as_number(rgb.get("green")) or 0.0,
                blue=_as_number(rgb.get("blue")) or 0.0,
            )

        return TextStyle(
            bold=data.get("bold") is True,
            italic=data.get("italic") is True,
            underline=data.get("underline") is True,
            strikethrough=data.get("strikethrough") is True,
            baseline_offset=baseline_offset if baseline_offset in _BASELINE_OFFSETS else "NONE",
            link_url=_as_str(_as_dict(data.get("link")).get("url")) or None,
            font_size=_magnitude(data.get("fontSize")),
            foreground_color=color,
        )

    def _parse_table(self, data: dict[str, Any]) -> Table:
        rows = []
        for row_data in _as_list(data.get("tableRows")):
            cells = []
            for cell_data in _as_list(_as_dict(row_data).get("tableCells")):
                cell = _as_dict(cell_data)
                cell_style = _as_dict(cell.get("tableCellStyle"))
                cells.append(
                    TableCell(
                        content=self._parse_content(_as_list(cell.get("content"))),
                        column_span=_span(cell_style.get("columnSpan")),
                        row_span=_span(cell_style.get("rowSpan")),
                    )
                )
            rows.append(TableRow(cells=cells))
        return Table(rows=rows)

    @staticmethod
    def _parse_object_table(data: Any, properties_key: str) -> dict[str, Optional[EmbeddedObject]]:
        objects: dict[str, Optional[EmbeddedObject]] = {}
        for object_id, wrapper in _as_dict(data).items():
            embedded = _as_dict(_as_dict(wrapper).get(properties_key)).get("embeddedObject")
            if not isinstance(embedded, dict):
                objects[object_id] = None
                continue

            image_properties = embedded.get("imageProperties")
            size = _as_dict(embedded.get("size"))
            objects[object_id] = EmbeddedObject(
                content_uri=_as_str(_as_dict(image_properties).get("contentUri")) or None,
                width=_magnitude(size.get("width")),
                height=_magnitude(size.get("height")),
                title=_as_str(embedded.get("title")) or None,
                has_image=isinstance(image_properties, dict),
            )
        return objects
