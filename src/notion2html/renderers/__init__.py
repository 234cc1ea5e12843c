#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/notion2html/renderers/__init__.py
"""Renderers turning Notion pages into output text.

- HtmlRenderer: Render to HTML

Examples
--------
    >>> from notion2html.ast import Block, Page
    >>> from notion2html.options import HtmlRendererOptions
    >>> from notion2html.renderers import HtmlRenderer
    >>> renderer = HtmlRenderer(HtmlRendererOptions(add_id_attribute=True))
    >>> html = renderer.render_to_string(Page(root=Block(type="page", id="p1", title="Hello")))

"""

from notion2html.renderers.base import BaseRenderer, InlineContentMixin, default_render_inline_link
from notion2html.renderers.html import HtmlRenderer, SiblingContext
from notion2html.renderers.writer import IndentWriter, TextBuffer

__all__ = [
    "BaseRenderer",
    "HtmlRenderer",
    "IndentWriter",
    "InlineContentMixin",
    "SiblingContext",
    "TextBuffer",
    "default_render_inline_link",
]
