#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the gdoc2html library.

This module centralizes the hardcoded values used across gdoc2html so the
tree-walk code never carries literal class strings or magic numbers.

Constants are organized by category:
1. Type Definitions - Literal types mirroring the document API enums
2. Unit Conversion - Point to pixel conversion
3. Image Handling - Image detection heuristics and proxy settings
4. Rendering Defaults - Option defaults for the HTML renderer
5. Network - Document API endpoints and request defaults
6. Configuration Files - Names searched by the CLI
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

NamedStyleType = Literal[
    "NORMAL_TEXT",
    "TITLE",
    "SUBTITLE",
    "HEADING_1",
    "HEADING_2",
    "HEADING_3",
    "HEADING_4",
    "HEADING_5",
    "HEADING_6",
]
ParagraphAlignment = Literal["START", "CENTER", "END", "JUSTIFIED"]
BaselineOffset = Literal["NONE", "SUBSCRIPT", "SUPERSCRIPT"]
LinkedImageSource = Literal["hyperlink", "text-url"]
BlockType = Literal["paragraph", "listItem", "table", "sectionBreak", "empty"]

# =============================================================================
# Unit Conversion
# =============================================================================

# Document sizes are expressed in points; 1pt is approximately 1.333 CSS px
DEFAULT_POINTS_TO_PIXELS = 1.333

# =============================================================================
# Image Handling
# =============================================================================

IMAGE_EXTENSIONS: tuple[str, ...] = (".jpg", ".jpeg", ".png", ".gif", ".webp", ".svg", ".bmp")
IMAGE_HOST_PATTERNS: tuple[str, ...] = (
    "googleusercontent.com",
    "drive.google.com/file/d/",
    "imgur.com",
    "image",
)

# Bare URL pattern used both for detection and in-place substitution
BARE_URL_PATTERN = r"https?://[^\s]+"

DEFAULT_IMAGE_PROXY_PATH = "/api/image-proxy"
DEFAULT_PROXY_DOMAINS: tuple[str, ...] = ("googleusercontent.com", "drive.google.com")
# Embedded objects only ever point at the content host
DEFAULT_EMBEDDED_PROXY_DOMAINS: tuple[str, ...] = ("googleusercontent.com",)

# Characters left untouched by JavaScript's encodeURIComponent
URI_COMPONENT_SAFE_CHARS = "-_.!~*'()"

DEFAULT_INLINE_IMAGE_TITLE = "Image"
DEFAULT_LINKED_IMAGE_ALT = "Linked Image"
DEFAULT_INLINE_IMAGE_UNAVAILABLE_TEXT = "Image temporairement indisponible"
DEFAULT_POSITIONED_IMAGE_UNAVAILABLE_TEXT = "L'image ne peut pas être affichée"
DEFAULT_LINKED_IMAGE_UNAVAILABLE_TEXT = "Image could not be loaded"

# Client-side swap between the visible image and its hidden fallback block
IMAGE_ONERROR_SCRIPT = "this.style.display='none'; this.nextElementSibling.style.display='block';"

# =============================================================================
# Rendering Defaults
# =============================================================================

DEFAULT_ESCAPE_HTML = True
DEFAULT_LIST_INDENT_PX = 20
DEFAULT_MAX_NESTING_DEPTH = 32
DEFAULT_NUMBER_IMAGES = True

# =============================================================================
# Network
# =============================================================================

DOCS_API_DOCUMENT_URL = "https://docs.googleapis.com/v1/documents/{document_id}"
DRIVE_API_FILES_URL = "https://www.googleapis.com/drive/v3/files"
DRIVE_API_FILE_URL = "https://www.googleapis.com/drive/v3/files/{file_id}"
GOOGLE_DOCUMENT_MIME_TYPE = "application/vnd.google-apps.document"
DRIVE_LIST_FIELDS = "files(id,name,thumbnailLink,createdTime,modifiedTime)"
DRIVE_LIST_ORDER_BY = "name_natural"
DRIVE_LIST_PAGE_SIZE = 100
DEFAULT_HTTP_TIMEOUT = 30.0
DEFAULT_THUMBNAIL_SIZE = 800

DEPS_NETWORK = [("httpx", "httpx", ">=0.28.1")]

# =============================================================================
# Configuration Files
# =============================================================================

CONFIG_FILENAMES: tuple[str, ...] = (".gdoc2html.toml", ".gdoc2html.yaml", ".gdoc2html.yml", ".gdoc2html.json")
PYPROJECT_TOOL_SECTION = "gdoc2html"

# CLI exit codes
EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_USAGE_ERROR = 2
