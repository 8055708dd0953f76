#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2html/renderers/base.py
"""Base classes for document renderers.

This module defines the abstract base class that renderers of the gdoc2html
document model inherit from.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from gdoc2html.ast import Document
from gdoc2html.exceptions import InvalidOptionsError, OutputWriteError
from gdoc2html.options.base import BaseRendererOptions
from gdoc2html.utils.io_utils import write_content


class BaseRenderer(ABC):
    """Abstract base class for document renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> class TitleRenderer(BaseRenderer):
        ...     def render_to_string(self, doc):
        ...         return doc.metadata.get("title", "")

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, doc: Document) -> str:
        """Render the document to a string.

        Parameters
        ----------
        doc : Document
            Document to render

        Returns
        -------
        str
            Rendered document

        """
        pass

    def render(self, doc: Document, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the document and write it to a path or stream.

        Parameters
        ----------
        doc : Document
            Document to render
        output : str, Path, IO[bytes], or IO[str]
            Output destination

        Raises
        ------
        OutputWriteError
            If the output cannot be written

        """
        self.write_text_output(self.render_to_string(doc), output)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write text output to a file or IO stream.

        Parameters
        ----------
        text : str
            Rendered text to write
        output : str, Path, IO[bytes], or IO[str]
            Output destination

        Raises
        ------
        OutputWriteError
            If a file path cannot be written

        Examples
        --------
            >>> from io import StringIO
            >>> buffer = StringIO()
            >>> BaseRenderer.write_text_output("<p>Hello</p>", buffer)
            >>> buffer.getvalue()
            '<p>Hello</p>'

        """
        try:
            write_content(text, output)
        except OSError as e:
            raise OutputWriteError(str(output), original_error=e) from e
