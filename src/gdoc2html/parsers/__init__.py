"""Parsers producing the gdoc2html document model."""

from gdoc2html.parsers.base import BaseParser
from gdoc2html.parsers.gdocs import GoogleDocsParser

__all__ = ["BaseParser", "GoogleDocsParser"]
