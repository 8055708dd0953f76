#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2html/parsers/base.py
"""Base classes for document parsers.

This module defines the abstract base class for parsers turning source
payloads into the gdoc2html document model.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Any, Mapping, Union

from gdoc2html.ast import Document
from gdoc2html.exceptions import InvalidOptionsError
from gdoc2html.options.base import BaseParserOptions

logger = logging.getLogger(__name__)

ParserInput = Union[str, Path, IO[bytes], bytes, Mapping[str, Any]]


class BaseParser(ABC):
    """Abstract base class for document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Examples
    --------
    Creating a custom parser:

        >>> class MyCustomParser(BaseParser):
        ...     def parse(self, input_data):
        ...         return Document()
        ...     def extract_metadata(self, document):
        ...         return {}

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: ParserInput) -> Document:
        """Parse the input payload into a Document.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], bytes, or mapping
            The payload to parse

        Returns
        -------
        Document
            Document model

        Raises
        ------
        ParsingError
            If the payload cannot be read as a document at all

        """
        raise NotImplementedError

    @abstractmethod
    def extract_metadata(self, document: Any) -> dict[str, Any]:
        """Extract document-level metadata from the raw payload.

        Implementations return an empty dict when nothing is available.
        """
        raise NotImplementedError
