#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_logging_utils.py
"""Unit tests for configure_logging."""

import logging

import pytest
from utils import make_page

from notion2html.ast import Block
from notion2html.logging_utils import PACKAGE_LOGGER_NAME, configure_logging
from notion2html.renderers.html import HtmlRenderer


def installed_handlers(logger: logging.Logger) -> list:
    return [h for h in logger.handlers if getattr(h, "_notion2html_handler", False)]


@pytest.mark.unit
@pytest.mark.usefixtures("clean_package_logger")
class TestConfigureLogging:
    """Tests for package logger configuration."""

    def test_configures_package_logger_only(self):
        root_handlers = list(logging.getLogger().handlers)
        logger = configure_logging("DEBUG")
        assert logger.name == PACKAGE_LOGGER_NAME
        assert logger.level == logging.DEBUG
        assert logger.propagate is False
        assert len(installed_handlers(logger)) == 1
        assert logging.getLogger().handlers == root_handlers

    def test_numeric_level(self):
        assert configure_logging(logging.WARNING).level == logging.WARNING

    def test_unknown_level_name_defaults_to_info(self):
        assert configure_logging("chatty").level == logging.INFO

    def test_reconfigure_replaces_handlers(self):
        configure_logging("INFO")
        logger = configure_logging("ERROR")
        handlers = installed_handlers(logger)
        assert len(handlers) == 1
        assert handlers[0].level == logging.ERROR

    def test_foreign_handlers_kept(self):
        logger = logging.getLogger(PACKAGE_LOGGER_NAME)
        foreign = logging.NullHandler()
        logger.addHandler(foreign)
        try:
            configure_logging("INFO")
            assert foreign in logger.handlers
        finally:
            logger.removeHandler(foreign)

    def test_log_file_receives_render_warnings(self, tmp_path):
        log_file = tmp_path / "render.log"
        configure_logging("WARNING", log_file=str(log_file), trace_mode=True)
        HtmlRenderer().render_to_string(make_page(Block(type="mystery")))
        for handler in installed_handlers(logging.getLogger(PACKAGE_LOGGER_NAME)):
            handler.flush()
        content = log_file.read_text(encoding="utf-8")
        assert "Unsupported block type 'mystery'" in content
        assert "[notion2html.renderers.base]" in content

    def test_propagate_option(self):
        assert configure_logging("INFO", propagate=True).propagate is True
