"""Base classes for parser and renderer options.

This module defines the foundation classes for the option dataclasses used
by the gdoc2html parser and renderer.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from gdoc2html.constants import DEFAULT_ESCAPE_HTML


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for renderer options.

    Parameters
    ----------
    escape_html : bool, default True
        Escape HTML special characters in document text and attribute values.

    """

    escape_html: bool = field(
        default=DEFAULT_ESCAPE_HTML,
        metadata={
            "help": "Escape HTML special characters in text and attributes",
            "cli_name": "no-escape",
            "importance": "security",
        },
    )


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for parser options.

    Parameters
    ----------
    extract_metadata : bool, default True
        Keep document-level metadata (title, document ID) on the model.

    """

    extract_metadata: bool = field(
        default=True,
        metadata={"help": "Keep document title and ID as metadata", "importance": "core"},
    )
