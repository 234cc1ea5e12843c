#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_error_handling.py
"""Unit tests for soft failures, strict mode and fatal invariant violations."""

import pytest
from utils import block, make_page

from notion2html.ast import Block, InlineSpan, NotionDate
from notion2html.exceptions import Notion2HtmlError, RenderingError, RenderInvariantError
from notion2html.options import HtmlRendererOptions
from notion2html.renderers.html import HtmlRenderer


def date_block(date: NotionDate) -> Block:
    return Block(type="text", inline_content=[InlineSpan(text="‣", date=date)])


@pytest.mark.unit
class TestSoftFailures:
    """Tests for failures that degrade output in non-strict mode."""

    def test_malformed_date_continues(self, sink_renderer, messages):
        html = sink_renderer.render_to_string(make_page(date_block(NotionDate(start_date="garbage"))))
        assert 'class="notion-date"' in html
        assert len(messages) == 1

    def test_range_without_end_continues(self, sink_renderer, messages):
        date = NotionDate(type="daterange", start_date="2019-04-09", date_format="YYYY-MM-DD")
        html = sink_renderer.render_to_string(make_page(date_block(date)))
        assert "@2019-04-09</span>" in html
        assert len(messages) == 1

    def test_failures_are_logged_as_warnings(self, renderer, caplog):
        with caplog.at_level("WARNING", logger="notion2html"):
            renderer.render_to_string(make_page(date_block(NotionDate(start_date="garbage"))))
        assert any(record.levelname == "WARNING" and "garbage" in record.getMessage() for record in caplog.records)


@pytest.mark.unit
class TestStrictMode:
    """Tests for strict mode escalation."""

    @pytest.mark.parametrize(
        "child",
        [
            Block(type="mystery"),
            Block(type="column_list"),
            date_block(NotionDate(start_date="garbage")),
            date_block(NotionDate(type="daterange", start_date="2019-04-09")),
        ],
    )
    def test_soft_failures_raise(self, strict_renderer, child):
        with pytest.raises(RenderingError) as exc_info:
            strict_renderer.render_to_string(make_page(child))
        assert exc_info.value.rendering_stage == "strict"
        assert isinstance(exc_info.value, Notion2HtmlError)

    def test_sink_called_before_raising(self, messages):
        renderer = HtmlRenderer(HtmlRendererOptions(strict_mode=True, log_sink=messages.append))
        with pytest.raises(RenderingError):
            renderer.render_to_string(make_page(Block(type="mystery")))
        assert len(messages) == 1

    def test_state_reset_after_abort(self, strict_renderer):
        with pytest.raises(RenderingError):
            strict_renderer.render_to_string(make_page(block("bulleted_list", children=[Block(type="mystery")])))
        assert strict_renderer.buffer_depth == 0
        assert strict_renderer.level == 0
        assert strict_renderer.list_stack == []
        html = strict_renderer.render_to_string(make_page(block("text", text="ok")))
        assert "ok" in html

    def test_valid_page_renders_in_strict_mode(self, strict_renderer):
        page = make_page(block("header", text="H"), block("bulleted_list", text="a"), Block(type="divider"))
        assert "<h1" in strict_renderer.render_to_string(page)


@pytest.mark.unit
class TestFatalErrors:
    """Tests for invariant violations, fatal regardless of strict mode."""

    def test_negative_indentation(self):
        renderer = None

        def override(b, entering):
            if b.type == "divider" and entering:
                renderer.level = -1
                renderer.write_indent()
            return False

        renderer = HtmlRenderer(HtmlRendererOptions(block_override=override))
        with pytest.raises(RenderInvariantError):
            renderer.render_to_string(make_page(Block(type="divider")))
        assert renderer.buffer_depth == 0

    def test_unbalanced_level(self):
        renderer = None

        def override(b, entering):
            if b.type == "divider" and entering:
                renderer.level += 1
            return False

        renderer = HtmlRenderer(HtmlRendererOptions(block_override=override))
        with pytest.raises(RenderInvariantError, match="Indentation level"):
            renderer.render_to_string(make_page(Block(type="divider")))

    def test_unpopped_buffer(self):
        renderer = None

        def override(b, entering):
            if b.type == "divider" and entering:
                renderer.push_new_buffer()
            return False

        renderer = HtmlRenderer(HtmlRendererOptions(block_override=override))
        with pytest.raises(RenderInvariantError):
            renderer.render_to_string(make_page(Block(type="divider")))
        assert renderer.buffer_depth == 0

    def test_buffer_underflow(self):
        renderer = None

        def override(b, entering):
            if b.type == "divider" and entering:
                renderer.pop_buffer()
                renderer.pop_buffer()
            return False

        renderer = HtmlRenderer(HtmlRendererOptions(block_override=override))
        with pytest.raises(RenderInvariantError):
            renderer.render_to_string(make_page(Block(type="divider")))
        assert renderer.buffer_depth == 0

    def test_list_stack_mismatch(self):
        renderer = None

        def override(b, entering):
            return b.type == "numbered_list" and entering

        renderer = HtmlRenderer(HtmlRendererOptions(block_override=override))
        with pytest.raises(RenderInvariantError, match="ol"):
            renderer.render_to_string(make_page(block("numbered_list", text="a")))
        assert renderer.list_stack == []

    def test_fatal_errors_ignore_non_strict_mode(self, messages):
        def override(b, entering):
            return b.type == "bulleted_list" and entering

        renderer = HtmlRenderer(HtmlRendererOptions(block_override=override, log_sink=messages.append))
        with pytest.raises(RenderInvariantError):
            renderer.render_to_string(make_page(block("bulleted_list")))
        assert messages == []


@pytest.mark.unit
class TestReentrance:
    """Tests for nested render calls on the same renderer."""

    def test_nested_render_rejected(self):
        renderer = None
        errors = []

        def override(b, entering):
            if b.type == "divider" and entering:
                try:
                    renderer.render_to_string(make_page())
                except RenderingError as e:
                    errors.append(e)
            return False

        renderer = HtmlRenderer(HtmlRendererOptions(block_override=override))
        html = renderer.render_to_string(make_page(Block(type="divider")))
        assert len(errors) == 1
        assert errors[0].rendering_stage == "setup"
        assert "notion-divider" in html

    def test_separate_renderers_are_independent(self):
        inner = HtmlRenderer()
        results = []

        def override(b, entering):
            if b.type == "divider" and entering:
                results.append(inner.render_to_string(make_page(block("text", text="inner"))))
            return False

        outer = HtmlRenderer(HtmlRendererOptions(block_override=override))
        html = outer.render_to_string(make_page(Block(type="divider")))
        assert "inner" in results[0]
        assert "inner" not in html
