#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2html/google_api.py
"""Thin HTTP client for the document and file-storage services.

Only retrieval is implemented here. Obtaining credentials is left to the
caller, who passes a ready OAuth bearer token. No retry policy is applied:
failures surface as ``DocumentFetchError`` and callers decide whether to try
again.

The client needs the optional ``httpx`` dependency (``pip install
gdoc2html[network]``).

"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from gdoc2html.constants import (
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_THUMBNAIL_SIZE,
    DEPS_NETWORK,
    DOCS_API_DOCUMENT_URL,
    DRIVE_API_FILE_URL,
    DRIVE_API_FILES_URL,
    DRIVE_LIST_FIELDS,
    DRIVE_LIST_ORDER_BY,
    DRIVE_LIST_PAGE_SIZE,
    GOOGLE_DOCUMENT_MIME_TYPE,
)
from gdoc2html.exceptions import DocumentFetchError
from gdoc2html.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)

_SQUARE_SIZE_RE = re.compile(r"=s\d+")
_BOX_SIZE_RE = re.compile(r"=w\d+-h\d+")


@dataclass(frozen=True)
class DriveFile:
    """A document listed in a storage folder."""

    id: str
    name: str = ""
    thumbnail_link: Optional[str] = None
    created_time: Optional[str] = None
    modified_time: Optional[str] = None

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> "DriveFile":
        """Build a DriveFile from one entry of the ``files`` list response."""
        return cls(
            id=str(data.get("id", "")),
            name=str(data.get("name", "")),
            thumbnail_link=data.get("thumbnailLink"),
            created_time=data.get("createdTime"),
            modified_time=data.get("modifiedTime"),
        )


def upscale_thumbnail_link(link: str, size: int = DEFAULT_THUMBNAIL_SIZE) -> str:
    """Request a larger rendition of a storage thumbnail.

    Thumbnail links carry their size as ``=s220`` or ``=w200-h150``; the
    first occurrence of each form is rewritten to ``size`` (a 4:3 box for the
    second form).

    Examples
    --------
        >>> upscale_thumbnail_link("https://lh3.googleusercontent.com/abc=s220")
        'https://lh3.googleusercontent.com/abc=s800'

    """
    link = _SQUARE_SIZE_RE.sub(f"=s{size}", link, count=1)
    return _BOX_SIZE_RE.sub(f"=w{size}-h{size * 3 // 4}", link, count=1)


class GoogleDocsClient:
    """Fetch documents and folder listings over HTTP.

    Parameters
    ----------
    access_token : str
        OAuth bearer token with read access to documents and files
    timeout : float, default 30.0
        Request timeout in seconds
    transport : httpx.BaseTransport, optional
        Custom transport, e.g. ``httpx.MockTransport`` in tests

    Examples
    --------
        >>> with GoogleDocsClient(token) as client:
        ...     payload = client.get_document("1AbC...")

    """

    def __init__(self, access_token: str, *, timeout: float = DEFAULT_HTTP_TIMEOUT, transport: Any = None):
        self.access_token = access_token
        self.timeout = timeout
        self.transport = transport
        self._client: Any = None

    @requires_dependencies("network", DEPS_NETWORK)
    def _http(self) -> Any:
        """Return the underlying ``httpx.Client``, creating it on first use."""
        import httpx

        if self._client is None:
            self._client = httpx.Client(
                timeout=self.timeout,
                transport=self.transport,
                headers={"Authorization": f"Bearer {self.access_token}", "Accept": "application/json"},
            )
        return self._client

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "GoogleDocsClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def get_document(self, document_id: str) -> dict[str, Any]:
        """Return the raw "get document" response for ``document_id``.

        Raises
        ------
        DocumentFetchError
            On transport failure, a non-success status, or a non-JSON body

        """
        logger.debug(f"Fetching document {document_id}")
        return self._get_json(DOCS_API_DOCUMENT_URL.format(document_id=document_id), {}, document_id)

    def list_files_in_folder(self, folder_id: str) -> list[DriveFile]:
        """List the non-trashed documents of a folder in natural name order.

        Shared drives are included. Result pages are followed until the
        service stops returning a page token.
        """
        params: dict[str, Any] = {
            "q": f"'{folder_id}' in parents and mimeType='{GOOGLE_DOCUMENT_MIME_TYPE}' and trashed=false",
            "fields": f"nextPageToken,{DRIVE_LIST_FIELDS}",
            "orderBy": DRIVE_LIST_ORDER_BY,
            "pageSize": DRIVE_LIST_PAGE_SIZE,
            "supportsAllDrives": "true",
            "includeItemsFromAllDrives": "true",
        }

        files: list[DriveFile] = []
        while True:
            data = self._get_json(DRIVE_API_FILES_URL, params, folder_id)
            files.extend(DriveFile.from_api(entry) for entry in data.get("files") or [] if isinstance(entry, dict))
            page_token = data.get("nextPageToken")
            if not page_token:
                break
            params = {**params, "pageToken": page_token}

        logger.debug(f"Folder {folder_id} lists {len(files)} document(s)")
        return files

    def get_file_thumbnail_link(self, file_id: str) -> Optional[str]:
        """Return the storage service's thumbnail link for a file, if any."""
        data = self._get_json(
            DRIVE_API_FILE_URL.format(file_id=file_id),
            {"fields": "thumbnailLink", "supportsAllDrives": "true"},
            file_id,
        )
        link = data.get("thumbnailLink")
        return link if isinstance(link, str) and link else None

    def _get_json(self, url: str, params: Mapping[str, Any], resource_id: str) -> dict[str, Any]:
        client = self._http()
        import httpx

        try:
            response = client.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise DocumentFetchError(
                f"Request for '{resource_id}' failed with status {e.response.status_code}",
                resource_id=resource_id,
                status_code=e.response.status_code,
                original_error=e,
            ) from e
        except httpx.HTTPError as e:
            raise DocumentFetchError(
                f"Request for '{resource_id}' failed: {e}", resource_id=resource_id, original_error=e
            ) from e

        try:
            data = response.json()
        except ValueError as e:
            raise DocumentFetchError(
                f"Response for '{resource_id}' is not JSON",
                resource_id=resource_id,
                status_code=response.status_code,
                original_error=e,
            ) from e

        if not isinstance(data, dict):
            raise DocumentFetchError(
                f"Response for '{resource_id}' is not a JSON object",
                resource_id=resource_id,
                status_code=response.status_code,
            )
        return data
