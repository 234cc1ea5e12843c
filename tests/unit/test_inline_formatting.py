#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_inline_formatting.py
"""Unit tests for inline span rendering (InlineContentMixin).

Tests cover:
- Formatting wrappers and their nesting
- Links, link overrides, mentions and dates
- The &nbsp; placeholder for empty content
- Escaping of text

"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from notion2html.ast import AttrFlag, InlineSpan, NotionDate
from notion2html.options import HtmlRendererOptions
from notion2html.renderers.base import default_render_inline_link
from notion2html.renderers.html import HtmlRenderer


@pytest.mark.unit
class TestFormatInline:
    """Tests for format_inline."""

    def test_plain_text(self, renderer):
        assert renderer.format_inline(InlineSpan(text="hello")) == "hello"

    @pytest.mark.parametrize(
        "flag,expected",
        [
            (AttrFlag.BOLD, "<b>x</b>"),
            (AttrFlag.ITALIC, "<i>x</i>"),
            (AttrFlag.STRIKETHROUGH, "<strike>x</strike>"),
            (AttrFlag.CODE, "<code>x</code>"),
        ],
    )
    def test_single_flag(self, renderer, flag, expected):
        assert renderer.format_inline(InlineSpan(text="x", attr_flags=flag)) == expected

    def test_wrappers_are_well_nested(self, renderer):
        span = InlineSpan(text="x", attr_flags=AttrFlag.BOLD | AttrFlag.ITALIC | AttrFlag.CODE)
        assert renderer.format_inline(span) == "<b><i><code>x</code></i></b>"

    def test_text_is_escaped(self, renderer):
        assert renderer.format_inline(InlineSpan(text="a < b & c")) == "a &lt; b &amp; c"

    def test_escaping_can_be_disabled(self):
        renderer = HtmlRenderer(HtmlRendererOptions(escape_html=False))
        assert renderer.format_inline(InlineSpan(text="<em>raw</em>")) == "<em>raw</em>"

    def test_plain_and_formatted_spans_escape_alike(self, renderer):
        assert renderer.format_inline(InlineSpan(text="<")) == "&lt;"
        assert renderer.format_inline(InlineSpan(text="<", attr_flags=AttrFlag.BOLD)) == "<b>&lt;</b>"
        assert renderer.format_inline(InlineSpan(text="")) == ""

    def test_link(self, renderer):
        span = InlineSpan(text="Notion", link="https://notion.so")
        assert renderer.format_inline(span) == '<a class="notion-link" href="https://notion.so">Notion</a>'

    def test_bold_link(self, renderer):
        span = InlineSpan(text="Notion", link="https://notion.so", attr_flags=AttrFlag.BOLD)
        assert renderer.format_inline(span) == '<b><a class="notion-link" href="https://notion.so">Notion</a></b>'

    def test_link_href_is_escaped(self, renderer):
        span = InlineSpan(text="q", link='https://x.org/?a=1&b="2"')
        assert 'href="https://x.org/?a=1&amp;b=&quot;2&quot;"' in renderer.format_inline(span)

    def test_user_mention(self, renderer):
        span = InlineSpan(text="‣", user_id="user-1")
        assert renderer.format_inline(span) == '<span class="notion-user">@user-1</span>'

    def test_date(self, renderer):
        span = InlineSpan(text="‣", date=NotionDate(start_date="2019-04-09", date_format="YYYY-MM-DD"))
        assert renderer.format_inline(span) == '<span class="notion-date">@2019-04-09</span>'

    def test_date_markup_is_escaped(self, renderer):
        span = InlineSpan(text="‣", date=NotionDate(start_date="2019-04-09", date_format="YYYY<script>"))
        html = renderer.format_inline(span)
        assert "<script>" not in html
        assert html == '<span class="notion-date">@2019&lt;script&gt;</span>'

    def test_date_markup_kept_when_escaping_disabled(self):
        renderer = HtmlRenderer(HtmlRendererOptions(escape_html=False))
        span = InlineSpan(text="‣", date=NotionDate(start_date="2019-04-09", date_format="<b>YYYY</b>"))
        assert renderer.format_inline(span) == '<span class="notion-date">@<b>2019</b></span>'

    def test_link_wins_over_mention_and_date(self, renderer):
        span = InlineSpan(text="t", link="https://a.b", user_id="u", date=NotionDate(start_date="2019-04-09"))
        html = renderer.format_inline(span)
        assert html.startswith("<a ")
        assert "notion-user" not in html
        assert "notion-date" not in html

    def test_mention_wins_over_date(self, renderer):
        span = InlineSpan(text="t", user_id="u", date=NotionDate(start_date="2019-04-09"))
        assert renderer.format_inline(span) == '<span class="notion-user">@u</span>'

    def test_empty_text_renders_nothing(self, renderer):
        assert renderer.format_inline(InlineSpan(text="", attr_flags=AttrFlag.BOLD)) == ""


@pytest.mark.unit
class TestLinkOverride:
    """Tests for the link_override hook."""

    def test_handled_override_replaces_markup(self):
        options = HtmlRendererOptions(link_override=lambda span: (f"[{span.text}]", True))
        renderer = HtmlRenderer(options)
        assert renderer.format_inline(InlineSpan(text="x", link="https://a.b")) == "[x]"

    def test_unhandled_override_keeps_default(self):
        options = HtmlRendererOptions(link_override=lambda span: ("ignored", False))
        renderer = HtmlRenderer(options)
        span = InlineSpan(text="x", link="https://a.b")
        assert renderer.format_inline(span) == default_render_inline_link(span)

    def test_override_not_called_for_plain_text(self):
        calls = []

        def override(span):
            calls.append(span)
            return "", False

        renderer = HtmlRenderer(HtmlRendererOptions(link_override=override))
        renderer.format_inline(InlineSpan(text="plain"))
        assert calls == []

    def test_override_output_keeps_formatting_wrappers(self):
        options = HtmlRendererOptions(link_override=lambda span: ("L", True))
        renderer = HtmlRenderer(options)
        span = InlineSpan(text="x", link="https://a.b", attr_flags=AttrFlag.ITALIC)
        assert renderer.format_inline(span) == "<i>L</i>"


@pytest.mark.unit
class TestInlineContent:
    """Tests for render_inlines and get_inline_content."""

    def test_get_inline_content_concatenates(self, renderer):
        spans = [InlineSpan(text="a "), InlineSpan(text="b", attr_flags=AttrFlag.BOLD)]
        assert renderer.get_inline_content(spans) == "a <b>b</b>"

    def test_get_inline_content_empty_list(self, renderer):
        assert renderer.get_inline_content([]) == "&nbsp;"

    def test_get_inline_content_leaves_no_buffers(self, renderer):
        renderer.get_inline_content([InlineSpan(text="x")])
        assert renderer.buffer_depth == 0

    def test_render_inlines_indents_one_level_deeper(self, renderer):
        renderer.writer.level = 1
        renderer.render_inlines([InlineSpan(text="x")])
        assert renderer.writer.buf.getvalue() == "    x"
        assert renderer.writer.level == 1

    def test_render_inlines_placeholder(self, renderer):
        renderer.render_inlines([])
        assert renderer.writer.buf.getvalue() == "  &nbsp;"

    @given(st.lists(st.sampled_from(list(AttrFlag)), max_size=5))
    def test_empty_spans_give_single_placeholder(self, flags):
        renderer = HtmlRenderer()
        spans = [InlineSpan(text="", attr_flags=flag) for flag in flags]
        assert renderer.get_inline_content(spans) == "&nbsp;"
