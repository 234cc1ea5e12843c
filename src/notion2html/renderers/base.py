#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2html/renderers/base.py
"""Base classes for page renderers.

This module defines the abstract ``BaseRenderer`` every renderer inherits
from, including the soft-failure channel shared by all of them, and the
``InlineContentMixin`` that turns ``InlineSpan`` sequences into markup.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Sequence

from notion2html.ast.nodes import AttrFlag, InlineSpan, Page
from notion2html.constants import CSS_LINK, CSS_USER, NBSP_PLACEHOLDER
from notion2html.exceptions import InvalidOptionsError, RenderingError
from notion2html.options.base import BaseRendererOptions
from notion2html.utils.dates import DateFormatter
from notion2html.utils.html_utils import escape_attribute, escape_html

logger = logging.getLogger(__name__)

# Applied in this order; closing tags are emitted in reverse so they nest.
INLINE_ATTR_TAGS: tuple[tuple[AttrFlag, str, str], ...] = (
    (AttrFlag.BOLD, "<b>", "</b>"),
    (AttrFlag.ITALIC, "<i>", "</i>"),
    (AttrFlag.STRIKETHROUGH, "<strike>", "</strike>"),
    (AttrFlag.CODE, "<code>", "</code>"),
)


class BaseRenderer(ABC):
    """Abstract base class for page renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options or BaseRendererOptions()

    @abstractmethod
    def render_to_string(self, page: Page) -> str:
        """Render a page to a string.

        Parameters
        ----------
        page : Page
            Page to render

        Returns
        -------
        str
            Rendered page

        Raises
        ------
        RenderingError
            If a soft failure occurs in strict mode
        RenderInvariantError
            If an internal invariant is violated

        """
        pass

    def render_to_bytes(self, page: Page) -> bytes:
        """Render a page to UTF-8 encoded bytes."""
        return self.render_to_string(page).encode("utf-8")

    def report_failure(self, message: str, *args: Any) -> None:
        """Report a soft failure.

        The message is logged as a warning and passed to ``log_sink`` when
        configured. In strict mode a ``RenderingError`` is raised afterwards;
        otherwise the caller is expected to skip or degrade the affected
        fragment and carry on.

        Parameters
        ----------
        message : str
            Message, ``%``-formatted with ``args`` when any are given
        *args : Any
            Format arguments

        Raises
        ------
        RenderingError
            In strict mode

        """
        text = message % args if args else message
        logger.warning(text)
        if self.options.log_sink is not None:
            self.options.log_sink(text)
        if self.options.strict_mode:
            raise RenderingError(text, rendering_stage="strict")

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                renderer_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )


def default_render_inline_link(span: InlineSpan, escape: bool = True) -> str:
    """Return the default HTML for an inline link."""
    text = escape_html(span.text, enabled=escape)
    return f'<a class="{CSS_LINK}" href="{escape_attribute(span.link)}">{text}</a>'


class InlineContentMixin:
    """Mixin rendering ``InlineSpan`` sequences.

    The implementing class must provide:
    - ``writer``: the active ``IndentWriter``
    - ``options``: options with ``link_override`` and ``escape_html``
    - ``date_formatter``: a ``DateFormatter``

    """

    writer: Any
    options: Any
    date_formatter: DateFormatter

    def format_inline(self, span: InlineSpan) -> str:
        """Return the markup for one span.

        Formatting wrappers are applied in bold, italic, strikethrough, code
        order. The body is, by precedence, the link markup, a user mention,
        the formatted date, or the literal text; the first one present wins.

        """
        if span.is_plain:
            return escape_html(span.text, enabled=self.options.escape_html)

        start = ""
        close = ""
        for flag, open_tag, close_tag in INLINE_ATTR_TAGS:
            if span.attr_flags & flag:
                start += open_tag
                close = close_tag + close

        if span.link:
            body = default_render_inline_link(span, self.options.escape_html)
            if self.options.link_override is not None:
                html, handled = self.options.link_override(span)
                if handled:
                    body = html
        elif span.user_id:
            body = f'<span class="{CSS_USER}">@{escape_html(span.user_id)}</span>'
        elif span.date is not None:
            body = self.date_formatter.format_date(span.date, escape=self.options.escape_html)
        else:
            body = escape_html(span.text, enabled=self.options.escape_html)

        if not body:
            return ""
        return start + body + close

    def render_inline(self, span: InlineSpan) -> None:
        """Write the markup for one span to the active buffer."""
        self.writer.write_string(self.format_inline(span))

    def render_inlines(self, spans: Sequence[InlineSpan]) -> None:
        """Write an indented line of spans.

        Writes ``&nbsp;`` instead when the spans produce no output, so that
        visually empty blocks still take up space.

        """
        writer = self.writer
        writer.level += 1
        writer.write_indent()
        before = len(writer.buf)
        for span in spans:
            self.render_inline(span)
        if len(writer.buf) == before:
            writer.write_string(NBSP_PLACEHOLDER)
        writer.level -= 1

    def get_inline_content(self, spans: Sequence[InlineSpan]) -> str:
        """Like ``render_inlines`` but return the markup instead of writing it.

        No indentation is added.

        """
        if not spans:
            return NBSP_PLACEHOLDER
        with self.writer.capture() as captured:
            for span in spans:
                self.render_inline(span)
            if len(self.writer.buf) == 0:
                self.writer.write_string(NBSP_PLACEHOLDER)
        return captured.text
