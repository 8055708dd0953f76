"""HTML-related utility helpers."""

from __future__ import annotations

from html import escape as _html_escape
from typing import Iterable
from urllib.parse import quote

from gdoc2html.constants import (
    DEFAULT_IMAGE_PROXY_PATH,
    DEFAULT_PROXY_DOMAINS,
    URI_COMPONENT_SAFE_CHARS,
)


def escape_html(text: str, *, enabled: bool = True) -> str:
    """Escape ``&``, ``<`` and ``>`` in text content when enabled."""
    if not enabled:
        return text
    return _html_escape(text, quote=False)


def escape_attribute(value: str, *, enabled: bool = True) -> str:
    """Escape a value for a double-quoted attribute.

    Single quotes are left alone so percent-encoded proxy URLs survive
    byte-for-byte.
    """
    if not enabled:
        return value
    return _html_escape(value, quote=False).replace('"', "&quot;")


def encode_uri_component(value: str) -> str:
    """Percent-encode a string exactly like JavaScript's ``encodeURIComponent``."""
    return quote(value, safe=URI_COMPONENT_SAFE_CHARS)


def should_proxy(url: str, proxy_domains: Iterable[str] = DEFAULT_PROXY_DOMAINS) -> bool:
    """Whether the URL is served from one of the document service's content hosts."""
    lower_url = url.lower()
    return any(domain in lower_url for domain in proxy_domains)


def proxify_image_url(
    url: str,
    proxy_path: str = DEFAULT_IMAGE_PROXY_PATH,
    proxy_domains: Iterable[str] = DEFAULT_PROXY_DOMAINS,
) -> str:
    """Route a content-host image URL through the same-origin image proxy.

    Parameters
    ----------
    url : str
        Original image URL
    proxy_path : str
        Path of the proxy endpoint, e.g. ``/api/image-proxy``
    proxy_domains : iterable of str
        Host fragments that require proxying

    Returns
    -------
    str
        ``<proxy_path>?url=<percent-encoded url>`` for content-host URLs,
        the URL unchanged otherwise (including URLs already proxied)

    """
    if not url or url.startswith(proxy_path):
        return url
    if should_proxy(url, proxy_domains):
        return f"{proxy_path}?url={encode_uri_component(url)}"
    return url


def inline_style(declarations: Iterable[str]) -> str:
    """Concatenate ``prop: value;`` declarations into a style attribute value."""
    return "".join(declarations)


__all__ = [
    "escape_html",
    "escape_attribute",
    "encode_uri_component",
    "should_proxy",
    "proxify_image_url",
    "inline_style",
]
