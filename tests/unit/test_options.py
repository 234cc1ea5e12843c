#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_options.py
"""Unit tests for renderer options."""

from dataclasses import FrozenInstanceError, fields

import pytest

from notion2html.exceptions import InvalidOptionsError
from notion2html.options import BaseRendererOptions, HtmlRendererOptions
from notion2html.renderers.html import HtmlRenderer
from notion2html.utils.ids import to_no_dash_id
from notion2html.utils.inline import parse_inline_spans


@pytest.mark.unit
class TestHtmlRendererOptions:
    """Tests for HtmlRendererOptions defaults and validation."""

    def test_defaults(self):
        options = HtmlRendererOptions()
        assert options.add_id_attribute is False
        assert options.strict_mode is False
        assert options.escape_html is True
        assert options.base_url == "https://www.notion.so/"
        assert options.id_canonicalizer is to_no_dash_id
        assert options.inline_parser is parse_inline_spans
        assert options.block_override is None
        assert options.link_override is None
        assert options.log_sink is None
        assert options.data is None

    def test_frozen(self):
        options = HtmlRendererOptions()
        with pytest.raises(FrozenInstanceError):
            options.strict_mode = True

    def test_create_updated(self):
        options = HtmlRendererOptions(add_id_attribute=True)
        updated = options.create_updated(strict_mode=True)
        assert updated.add_id_attribute is True
        assert updated.strict_mode is True
        assert options.strict_mode is False
        assert isinstance(updated, HtmlRendererOptions)

    def test_every_field_has_help(self):
        for f in fields(HtmlRendererOptions):
            assert f.metadata.get("help"), f.name

    @pytest.mark.parametrize("name", ["block_override", "link_override", "log_sink", "id_canonicalizer", "inline_parser"])
    def test_non_callable_hooks_rejected(self, name):
        with pytest.raises(ValueError, match=name):
            HtmlRendererOptions(**{name: "not callable"})

    def test_empty_base_url_rejected(self):
        with pytest.raises(ValueError, match="base_url"):
            HtmlRendererOptions(base_url="")

    def test_data_is_opaque(self):
        payload = {"anything": object()}
        assert HtmlRendererOptions(data=payload).data is payload


@pytest.mark.unit
class TestRendererOptionsType:
    """Tests for options type checking in HtmlRenderer."""

    def test_wrong_options_class_rejected(self):
        with pytest.raises(InvalidOptionsError) as exc_info:
            HtmlRenderer(BaseRendererOptions())
        assert exc_info.value.expected_type is HtmlRendererOptions

    def test_none_gives_defaults(self):
        assert HtmlRenderer(None).options == HtmlRendererOptions()
