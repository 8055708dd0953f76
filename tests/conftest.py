"""Pytest configuration and shared fixtures for the gdoc2html test suite."""

import logging

import pytest
from utils import document, paragraph, text_run

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=20)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )

    import os

    profile = os.getenv("HYPOTHESIS_PROFILE", "dev")
    settings.load_profile(profile)
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests - full pipeline tests")
    config.addinivalue_line("markers", "network: Tests of the HTTP client against a mocked transport")
    config.addinivalue_line("markers", "fuzzing: Property-based tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def simple_response() -> dict:
    """Provide a two-paragraph document response.

    Returns
    -------
    dict
        A heading followed by a body paragraph.

    """
    return document(
        paragraph(text_run("Chapitre 1\n"), named_style="HEADING_1"),
        paragraph(text_run("Hello world\n")),
        title="Simple",
    )


@pytest.fixture(autouse=True)
def _reset_root_logging():
    """Restore root logger handlers after tests that configure logging."""
    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level
    yield
    root_logger.handlers[:] = saved_handlers
    root_logger.setLevel(saved_level)
