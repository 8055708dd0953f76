"""gdoc2html - Render Google Docs API documents to styled HTML.

gdoc2html takes the JSON returned by the document service's "get document"
call and renders it to an HTML fragment using a utility-class vocabulary
(headings, aligned paragraphs, merged bullet lists, bordered tables with
merged cells, and images with load-failure fallbacks).

The library parses the response into a typed document model, then walks it
with a visitor-based renderer. Parsing never validates: missing fields
degrade to empty output rather than errors.

Examples
--------
Render a saved response::

    >>> import json
    >>> from gdoc2html import render_document_to_html
    >>> with open("document.json") as f:
    ...     html = render_document_to_html(json.load(f))

Fetch and render a document::

    >>> from gdoc2html import GoogleDocsClient, render_document_by_id
    >>> with GoogleDocsClient(token) as client:
    ...     html = render_document_by_id(client, "1AbC...")

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

__version__ = "1.0.0"

from gdoc2html.api import (
    RenderedDocument,
    extract_first_image_url,
    fetch_folder_documents,
    get_document_thumbnail,
    parse_document,
    proxify_image_url,
    render_document_by_id,
    render_document_to_html,
)
from gdoc2html.ast import Document
from gdoc2html.exceptions import (
    DependencyError,
    DocumentFetchError,
    Gdoc2HtmlError,
    MalformedDocumentError,
    ParsingError,
    RenderingError,
)
from gdoc2html.google_api import DriveFile, GoogleDocsClient, upscale_thumbnail_link
from gdoc2html.options import GoogleDocsHtmlOptions, GoogleDocsParserOptions, HtmlStyleTable
from gdoc2html.utils.sections import ExerciseSections, split_exercise_html

__all__ = [
    "DependencyError",
    "Document",
    "DocumentFetchError",
    "DriveFile",
    "ExerciseSections",
    "Gdoc2HtmlError",
    "GoogleDocsClient",
    "GoogleDocsHtmlOptions",
    "GoogleDocsParserOptions",
    "HtmlStyleTable",
    "MalformedDocumentError",
    "ParsingError",
    "RenderedDocument",
    "RenderingError",
    "__version__",
    "extract_first_image_url",
    "fetch_folder_documents",
    "get_document_thumbnail",
    "parse_document",
    "proxify_image_url",
    "render_document_by_id",
    "render_document_to_html",
    "split_exercise_html",
    "upscale_thumbnail_link",
]
