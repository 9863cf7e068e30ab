"""Pytest configuration and shared fixtures for the mdtodom test suite.

This module provides shared fixtures and test configuration used across the
unit and integration tests.
"""

import logging
import os
from typing import Callable

import pytest

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=50)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )

    settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))
except ImportError:
    # Hypothesis not installed, skip configuration
    pass

from mdtodom.ast import Document, Node
from mdtodom.dom.soup import SoupDocument
from mdtodom.options import DomRendererOptions
from mdtodom.renderer import DOMRenderer


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "security: Tests of raw HTML handling")


@pytest.fixture
def soup_document() -> SoupDocument:
    """Provide a fresh BeautifulSoup-backed output document."""
    return SoupDocument()


@pytest.fixture
def render_html(soup_document) -> Callable[..., str]:
    """Provide a helper that renders a block list (or a tree) to an HTML string.

    Returns
    -------
    Callable
        ``render_html(blocks_or_tree, **option_values) -> str``

    """

    def _render(source, **option_values) -> str:
        tree = source if isinstance(source, Node) else Document(children=list(source))
        options = DomRendererOptions(**option_values) if option_values else None
        root = DOMRenderer(soup_document, options).render(tree)
        return soup_document.serialize(root)

    return _render


@pytest.fixture
def restore_root_logger():
    """Restore the root logger's level and handlers after the test.

    The command-line entry point installs its own handlers on the root logger.
    """
    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
