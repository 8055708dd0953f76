#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_io_and_dependencies.py
"""Unit tests for output writing, logging setup and dependency checks."""

import io
import logging

import pytest

from gdoc2html.exceptions import DependencyError, OutputWriteError
from gdoc2html.logging_utils import configure_logging, resolve_log_level
from gdoc2html.renderers.base import BaseRenderer
from gdoc2html.utils.decorators import requires_dependencies
from gdoc2html.utils.io_utils import write_content


@pytest.mark.unit
class TestWriteContent:
    """Tests for write_content."""

    def test_text_stream(self):
        buffer = io.StringIO()
        write_content("<p>é</p>", buffer)
        assert buffer.getvalue() == "<p>é</p>"

    def test_binary_stream(self):
        buffer = io.BytesIO()
        write_content("<p>é</p>", buffer)
        assert buffer.getvalue() == "<p>é</p>".encode("utf-8")

    def test_path(self, tmp_path):
        target = tmp_path / "out.html"
        write_content("<p>x</p>", target)
        assert target.read_text(encoding="utf-8") == "<p>x</p>"

    def test_unsupported_destination(self):
        with pytest.raises(TypeError):
            write_content("x", 42)  # type: ignore[arg-type]

    def test_write_error_wrapped(self, tmp_path):
        with pytest.raises(OutputWriteError) as exc_info:
            BaseRenderer.write_text_output("x", tmp_path / "missing-dir" / "out.html")
        assert exc_info.value.rendering_stage == "file_write"


@pytest.mark.unit
class TestLogging:
    """Tests for CLI logging configuration."""

    def test_resolve_log_level(self):
        assert resolve_log_level("debug") == logging.DEBUG
        assert resolve_log_level(logging.ERROR) == logging.ERROR
        assert resolve_log_level("chatty") == logging.INFO

    def test_log_file_handler(self, tmp_path):
        log_file = tmp_path / "run.log"
        root_logger = configure_logging("INFO", log_file=str(log_file), trace_mode=True)
        assert len(root_logger.handlers) == 2
        logging.getLogger("gdoc2html.test").info("hello")
        for handler in root_logger.handlers:
            handler.flush()
        assert "[gdoc2html.test] hello" in log_file.read_text(encoding="utf-8")
        root_logger.handlers[1].close()


@pytest.mark.unit
class TestRequiresDependencies:
    """Tests for the optional dependency guard."""

    def test_missing_package(self):
        @requires_dependencies("feature", [("not-a-real-pkg", "not_a_real_pkg_xyz", "")])
        def guarded():
            return "ran"

        with pytest.raises(DependencyError) as exc_info:
            guarded()
        assert exc_info.value.missing_packages == [("not-a-real-pkg", "")]
        assert "pip install" in str(exc_info.value)

    def test_present_package(self):
        @requires_dependencies("feature", [("pyyaml", "yaml", "")])
        def guarded():
            return "ran"

        assert guarded() == "ran"
