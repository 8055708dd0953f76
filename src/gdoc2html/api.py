"""The major exported API functions for rendering documents."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/gdoc2html/api.py
import logging
from dataclasses import dataclass, fields
from typing import Any, Optional, Union

from gdoc2html.ast import Document
from gdoc2html.exceptions import Gdoc2HtmlError, RenderingError
from gdoc2html.google_api import GoogleDocsClient, upscale_thumbnail_link
from gdoc2html.options.html import GoogleDocsHtmlOptions, GoogleDocsParserOptions, HtmlStyleTable
from gdoc2html.parsers.base import ParserInput
from gdoc2html.parsers.gdocs import GoogleDocsParser
from gdoc2html.renderers.html import GoogleDocsHtmlRenderer
from gdoc2html.utils.decorators import debug_timer
from gdoc2html.utils.html_utils import proxify_image_url as _proxify_image_url

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderedDocument:
    """One rendered document of a storage folder."""

    id: str
    name: str
    thumbnail: Optional[str]
    html: str


def _create_options_from_kwargs(
    options: Optional[GoogleDocsHtmlOptions], **kwargs: Any
) -> Optional[GoogleDocsHtmlOptions]:
    """Overlay keyword arguments on rendering options.

    Keys naming a ``GoogleDocsHtmlOptions`` field update it directly; keys
    naming an ``HtmlStyleTable`` field update the nested style table. Other
    keys are skipped.
    """
    if not kwargs:
        return options

    base = options or GoogleDocsHtmlOptions()
    option_names = {f.name for f in fields(GoogleDocsHtmlOptions)}
    style_names = {f.name for f in fields(HtmlStyleTable)}

    top_level = {k: v for k, v in kwargs.items() if k in option_names}
    style_kwargs = {k: v for k, v in kwargs.items() if k in style_names and k not in option_names}
    missing = [k for k in kwargs if k not in top_level and k not in style_kwargs]
    if missing:
        logger.debug(f"Skipping unknown renderer options: {missing}")

    if style_kwargs:
        top_level["style"] = top_level.get("style", base.style).create_updated(**style_kwargs)
    return base.create_updated(**top_level)


def parse_document(source: ParserInput, *, parser_options: Optional[GoogleDocsParserOptions] = None) -> Document:
    """Parse a document API response into the document model.

    Parameters
    ----------
    source : mapping, str, Path, IO[bytes], or bytes
        Decoded response, JSON text, path to a JSON file, or binary JSON
    parser_options : GoogleDocsParserOptions, optional
        Parser options

    Returns
    -------
    Document
        Document model

    Raises
    ------
    MalformedDocumentError
        If the input is not a JSON object

    """
    with debug_timer(logger, "Parsing (gdocs)"):
        return GoogleDocsParser(parser_options).parse(source)


def render_document_to_html(
    document: Union[Document, ParserInput],
    *,
    options: Optional[GoogleDocsHtmlOptions] = None,
    **kwargs: Any,
) -> str:
    """Render a document to an HTML fragment.

    Each call uses its own renderer, so calls are independent and may run in
    parallel on distinct documents.

    Parameters
    ----------
    document : Document or raw input
        A parsed Document, or anything ``parse_document`` accepts
    options : GoogleDocsHtmlOptions, optional
        Rendering options
    kwargs : Any
        Individual option or style-table fields overriding ``options``

    Returns
    -------
    str
        HTML fragment

    Raises
    ------
    MalformedDocumentError
        If raw input is not a JSON object
    RenderingError
        If rendering fails unexpectedly

    Examples
    --------
        >>> render_document_to_html({"body": {"content": []}})
        ''
        >>> html = render_document_to_html(response, escape_html=False, paragraph_class="prose")

    """
    doc = document if isinstance(document, Document) else parse_document(document)
    final_options = _create_options_from_kwargs(options, **kwargs)

    try:
        return GoogleDocsHtmlRenderer(final_options).render_to_string(doc)
    except Gdoc2HtmlError:
        raise
    except Exception as e:
        raise RenderingError(f"HTML rendering failed: {e!r}", rendering_stage="html", original_error=e) from e


def render_document_by_id(
    client: GoogleDocsClient,
    document_id: str,
    *,
    options: Optional[GoogleDocsHtmlOptions] = None,
) -> str:
    """Fetch a document by ID and render it to HTML.

    Raises
    ------
    DocumentFetchError
        If the document cannot be retrieved

    """
    return render_document_to_html(client.get_document(document_id), options=options)


def fetch_folder_documents(
    client: GoogleDocsClient,
    folder_id: str,
    *,
    options: Optional[GoogleDocsHtmlOptions] = None,
) -> list[RenderedDocument]:
    """Render every document of a folder, in the folder's listing order.

    Documents are fetched one after another; the first failure aborts the
    whole listing with ``DocumentFetchError``.
    """
    rendered = []
    for drive_file in client.list_files_in_folder(folder_id):
        rendered.append(
            RenderedDocument(
                id=drive_file.id,
                name=drive_file.name,
                thumbnail=drive_file.thumbnail_link or None,
                html=render_document_by_id(client, drive_file.id, options=options),
            )
        )
    logger.debug(f"Rendered {len(rendered)} document(s) from folder {folder_id}")
    return rendered


def proxify_image_url(url: str, options: Optional[GoogleDocsHtmlOptions] = None) -> str:
    """Route a content-host image URL through the configured image proxy.

    URLs from other hosts and URLs already under the proxy path are returned
    unchanged, so applying this twice is the same as applying it once.
    """
    options = options or GoogleDocsHtmlOptions()
    return _proxify_image_url(url, options.image_proxy_path, options.proxy_domains)


def extract_first_image_url(
    document: Union[Document, ParserInput],
    options: Optional[GoogleDocsHtmlOptions] = None,
) -> Optional[str]:
    """Return the proxied URL of the document's first embedded image.

    Only the first entry of each object table is considered: the first
    inline object, then the first positioned object.

    Returns
    -------
    str or None
        Image URL, or None when neither first entry carries one

    """
    doc = document if isinstance(document, Document) else parse_document(document)
    for objects in (doc.inline_objects, doc.positioned_objects):
        first = next(iter(objects.values()), None)
        if first is not None and first.content_uri:
            return proxify_image_url(first.content_uri, options)
    return None


def get_document_thumbnail(
    client: GoogleDocsClient,
    document_id: str,
    options: Optional[GoogleDocsHtmlOptions] = None,
) -> Optional[str]:
    """Return a preview image URL for a document.

    The document's first embedded image is preferred. Otherwise the storage
    thumbnail is upscaled and proxied.

    Raises
    ------
    DocumentFetchError
        If the document or its file metadata cannot be retrieved

    """
    first_image = extract_first_image_url(client.get_document(document_id), options)
    if first_image:
        return first_image

    thumbnail_link = client.get_file_thumbnail_link(document_id)
    if not thumbnail_link:
        return None
    return proxify_image_url(upscale_thumbnail_link(thumbnail_link), options)


__all__ = [
    "RenderedDocument",
    "extract_first_image_url",
    "fetch_folder_documents",
    "get_document_thumbnail",
    "parse_document",
    "proxify_image_url",
    "render_document_by_id",
    "render_document_to_html",
]
