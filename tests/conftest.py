"""Pytest configuration and shared fixtures for the notion2html test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import logging

import pytest

from notion2html.options import HtmlRendererOptions
from notion2html.renderers.html import HtmlRenderer

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    # Register custom Hypothesis profiles
    settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=20)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )

    # Load profile from environment or use default
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


@pytest.fixture
def renderer() -> HtmlRenderer:
    """Provide a renderer with default options."""
    return HtmlRenderer(HtmlRendererOptions())


@pytest.fixture
def messages() -> list:
    """Provide a list collecting soft-failure messages through ``log_sink``."""
    return []


@pytest.fixture
def sink_renderer(messages) -> HtmlRenderer:
    """Provide a non-strict renderer whose soft failures are appended to ``messages``."""
    return HtmlRenderer(HtmlRendererOptions(log_sink=messages.append))


@pytest.fixture
def strict_renderer() -> HtmlRenderer:
    """Provide a renderer in strict mode."""
    return HtmlRenderer(HtmlRendererOptions(strict_mode=True))


@pytest.fixture
def clean_package_logger():
    """Remove handlers installed by ``configure_logging`` during a test."""
    yield
    package_logger = logging.getLogger("notion2html")
    for handler in list(package_logger.handlers):
        if getattr(handler, "_notion2html_handler", False):
            package_logger.removeHandler(handler)
            handler.close()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
