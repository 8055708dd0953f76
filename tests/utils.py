"""Test utilities for the gdoc2html test suite.

Builders for document API response fragments, so tests read as the shape of
the JSON they feed the parser rather than as nested dict literals.
"""

import json
from pathlib import Path
from typing import Any, Optional

FIXTURES_DIR = Path(__file__).parent / "fixtures"
DOCUMENTS_DIR = FIXTURES_DIR / "documents"


def text_run(content: str, **text_style: Any) -> dict:
    """Build a ``textRun`` paragraph element."""
    run: dict[str, Any] = {"content": content}
    if text_style:
        run["textStyle"] = text_style
    return {"textRun": run}


def link_run(content: str, url: str, **text_style: Any) -> dict:
    """Build a hyperlinked ``textRun``."""
    return text_run(content, link={"url": url}, **text_style)


def inline_object(object_id: str) -> dict:
    """Build an ``inlineObjectElement`` paragraph element."""
    return {"inlineObjectElement": {"inlineObjectId": object_id}}


def paragraph(
    *elements: dict,
    named_style: Optional[str] = None,
    alignment: Optional[str] = None,
    list_id: Optional[str] = None,
    nesting_level: Optional[int] = None,
    positioned_object_ids: Optional[list] = None,
) -> dict:
    """Build a ``paragraph`` structural element."""
    data: dict[str, Any] = {"elements": list(elements)}
    style: dict[str, Any] = {}
    if named_style:
        style["namedStyleType"] = named_style
    if alignment:
        style["alignment"] = alignment
    if style:
        data["paragraphStyle"] = style
    if list_id is not None:
        bullet: dict[str, Any] = {"listId": list_id}
        if nesting_level is not None:
            bullet["nestingLevel"] = nesting_level
        data["bullet"] = bullet
    if positioned_object_ids:
        data["positionedObjectIds"] = positioned_object_ids
    return {"paragraph": data}


def cell(*content: dict, column_span: Optional[int] = None, row_span: Optional[int] = None) -> dict:
    """Build a ``tableCells`` entry."""
    data: dict[str, Any] = {"content": list(content)}
    cell_style: dict[str, Any] = {}
    if column_span is not None:
        cell_style["columnSpan"] = column_span
    if row_span is not None:
        cell_style["rowSpan"] = row_span
    if cell_style:
        data["tableCellStyle"] = cell_style
    return data


def table(*rows: list) -> dict:
    """Build a ``table`` structural element from lists of cells."""
    return {"table": {"tableRows": [{"tableCells": list(cells)} for cells in rows]}}


def embedded_image(
    uri: Optional[str],
    width: Optional[float] = None,
    height: Optional[float] = None,
    title: Optional[str] = None,
    properties_key: str = "inlineObjectProperties",
) -> dict:
    """Build one entry of the ``inlineObjects`` or ``positionedObjects`` table."""
    embedded: dict[str, Any] = {"imageProperties": {"contentUri": uri} if uri else {}}
    size: dict[str, Any] = {}
    if width is not None:
        size["width"] = {"magnitude": width, "unit": "PT"}
    if height is not None:
        size["height"] = {"magnitude": height, "unit": "PT"}
    if size:
        embedded["size"] = size
    if title is not None:
        embedded["title"] = title
    return {properties_key: {"embeddedObject": embedded}}


def positioned_image(uri: Optional[str], **kwargs: Any) -> dict:
    """Build one entry of the ``positionedObjects`` table."""
    return embedded_image(uri, properties_key="positionedObjectProperties", **kwargs)


def document(
    *content: dict,
    inline_objects: Optional[dict] = None,
    positioned_objects: Optional[dict] = None,
    title: Optional[str] = None,
) -> dict:
    """Build a "get document" response."""
    data: dict[str, Any] = {"body": {"content": list(content)}}
    if inline_objects is not None:
        data["inlineObjects"] = inline_objects
    if positioned_objects is not None:
        data["positionedObjects"] = positioned_objects
    if title is not None:
        data["title"] = title
    return data


def load_document_fixture(name: str) -> dict:
    """Load a saved response from ``tests/fixtures/documents``."""
    with open(DOCUMENTS_DIR / name, encoding="utf-8") as f:
        return json.load(f)
