"""Command-line interface for the gdoc2html rendering library.

Renders a document API response (a local JSON file, standard input, or a
document fetched by ID) to an HTML fragment.

Environment Variable Support
----------------------------
``GDOC2HTML_CONFIG`` names a configuration file used when ``--config`` is
absent. ``GDOC2HTML_TOKEN`` supplies the bearer token for ``--document-id``.

Examples
--------
Render a saved response::

    $ gdoc2html document.json

Write to a file::

    $ gdoc2html document.json --out page.html

Fetch and render by ID::

    $ GDOC2HTML_TOKEN=ya29... gdoc2html --document-id 1AbC...

Keep only the correction of an exercise document::

    $ gdoc2html exercise.json --section correction
"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any

from gdoc2html.constants import EXIT_ERROR, EXIT_SUCCESS, EXIT_USAGE_ERROR

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser of the ``gdoc2html`` command."""
    from gdoc2html import __version__

    parser = argparse.ArgumentParser(
        prog="gdoc2html",
        description="Render a Google Docs API document response to an HTML fragment.",
    )
    parser.add_argument("input", nargs="?", help="Path to a document JSON file, or '-' for standard input")
    parser.add_argument("-o", "--out", help="Output file (default: standard output)")
    parser.add_argument("--document-id", help="Fetch the document with this ID instead of reading INPUT")
    parser.add_argument(
        "--token",
        default=os.environ.get("GDOC2HTML_TOKEN"),
        help="OAuth bearer token for --document-id (default: $GDOC2HTML_TOKEN)",
    )
    parser.add_argument("--config", help="Configuration file (.toml, .yaml, .json, or pyproject.toml)")
    parser.add_argument("--no-config", action="store_true", help="Do not load any configuration file")
    parser.add_argument(
        "--section",
        choices=["all", "exercise", "correction"],
        default="all",
        help="Output the whole document or one half of an exercise document",
    )
    parser.add_argument(
        "--no-escape",
        dest="escape_html",
        action="store_false",
        default=None,
        help="Do not HTML-escape document text",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log output to this file")
    parser.add_argument("--trace", action="store_true", help="Timestamped, logger-named log output")
    parser.add_argument("--version", action="version", version=f"gdoc2html {__version__}")
    return parser


def _read_input(parsed_args: argparse.Namespace) -> Any:
    from gdoc2html.google_api import GoogleDocsClient

    if parsed_args.document_id:
        with GoogleDocsClient(parsed_args.token) as client:
            return client.get_document(parsed_args.document_id)
    if parsed_args.input == "-":
        return sys.stdin.buffer.read()
    return Path(parsed_args.input)


def _select_section(html: str, section: str) -> str:
    if section == "all":
        return html

    from gdoc2html.utils.sections import split_exercise_html

    sections = split_exercise_html(html)
    return sections.exercise if section == "exercise" else sections.correction


def main(args: list[str] | None = None) -> int:
    """Execute the CLI and return its exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    from gdoc2html.logging_utils import configure_logging

    configure_logging(parsed_args.log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    if not parsed_args.input and not parsed_args.document_id:
        print("Error: INPUT or --document-id is required", file=sys.stderr)
        return EXIT_USAGE_ERROR
    if parsed_args.document_id and not parsed_args.token:
        print("Error: --document-id requires --token or GDOC2HTML_TOKEN", file=sys.stderr)
        return EXIT_USAGE_ERROR

    # Lazy imports keep --help and --version fast
    from gdoc2html.api import render_document_to_html
    from gdoc2html.cli.config import load_config_with_priority, options_from_config
    from gdoc2html.exceptions import Gdoc2HtmlError
    from gdoc2html.renderers.base import BaseRenderer

    try:
        config = {}
        if not parsed_args.no_config:
            config = load_config_with_priority(parsed_args.config, os.environ.get("GDOC2HTML_CONFIG"))
        options = options_from_config(config)
        if parsed_args.escape_html is not None:
            options = options.create_updated(escape_html=parsed_args.escape_html)
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE_ERROR

    try:
        html = render_document_to_html(_read_input(parsed_args), options=options)
        html = _select_section(html, parsed_args.section)
        if parsed_args.out:
            BaseRenderer.write_text_output(html, parsed_args.out)
            logger.info(f"Wrote {parsed_args.out}")
        else:
            sys.stdout.write(html)
    except Gdoc2HtmlError as e:
        logger.debug("Rendering failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
