#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2html/renderers/html.py
"""HTML rendering of Notion pages.

This module provides the ``HtmlRenderer`` class which walks the block tree of
a ``Page`` and writes HTML. Every block is visited twice: once when entering
(before its children) and once when exiting (after them). For each event the
optional ``block_override`` callback is tried first; if it does not report the
event as handled, the default routine for the block's type runs.

Notion does not nest list items inside a list block: a bulleted list is just a
run of sibling ``bulleted_list`` blocks. The renderer therefore looks at the
previous and next sibling to decide when to open and close the ``<ul>``/``<ol>``
wrapper.

Examples
--------
    >>> from notion2html.ast import Block, InlineSpan, Page
    >>> from notion2html.renderers.html import HtmlRenderer
    >>> page = Page(root=Block(type="page", id="p", title="Notes", content=[
    ...     Block(type="bulleted_list", id="a", inline_content=[InlineSpan(text="one")]),
    ...     Block(type="bulleted_list", id="b", inline_content=[InlineSpan(text="two")]),
    ... ]))
    >>> html = HtmlRenderer().render_to_string(page)

"""

from __future__ import annotations

import logging
import posixpath
from typing import Mapping, NamedTuple, Optional, Sequence

from notion2html.ast.nodes import Block, InlineSpan, Page, PageType
from notion2html.constants import (
    BLOCK_BOOKMARK,
    BLOCK_BULLETED_LIST,
    BLOCK_CODE,
    BLOCK_COLLECTION_VIEW,
    BLOCK_COLUMN,
    BLOCK_COLUMN_LIST,
    BLOCK_DIVIDER,
    BLOCK_EMBED,
    BLOCK_FILE,
    BLOCK_GIST,
    BLOCK_HEADER,
    BLOCK_IMAGE,
    BLOCK_NUMBERED_LIST,
    BLOCK_PAGE,
    BLOCK_PDF,
    BLOCK_QUOTE,
    BLOCK_SUB_HEADER,
    BLOCK_SUB_SUB_HEADER,
    BLOCK_TEXT,
    BLOCK_TODO,
    BLOCK_TOGGLE,
    BLOCK_TWEET,
    BLOCK_VIDEO,
    CSS_BOOKMARK,
    CSS_BULLETED_LIST,
    CSS_CODE,
    CSS_CODE_LANG_PREFIX,
    CSS_COLLECTION_VIEW,
    CSS_COLUMN,
    CSS_COLUMN_LIST,
    CSS_DIVIDER,
    CSS_EMBED,
    CSS_EMBED_GIST,
    CSS_IMAGE,
    CSS_NUMBERED_LIST,
    CSS_PAGE,
    CSS_PAGE_CONTENT,
    CSS_PAGE_LINK,
    CSS_QUOTE,
    CSS_SUB_PAGE,
    CSS_TEXT,
    CSS_TODO,
    CSS_TODO_CHECKED,
    CSS_TOGGLE,
    CSS_TOGGLE_WRAPPER,
    CSS_VIDEO,
    CSS_WRAP,
    INDENT_WRAPPER_BLOCK_TYPES,
    SELF_CLOSING_TAGS,
)
from notion2html.exceptions import ParsingError, RenderingError, RenderInvariantError
from notion2html.options.html import BlockRenderFunc, HtmlRendererOptions
from notion2html.renderers.base import BaseRenderer, InlineContentMixin
from notion2html.renderers.writer import IndentWriter, TextBuffer
from notion2html.utils.dates import DateFormatter
from notion2html.utils.decorators import debug_timer
from notion2html.utils.html_utils import escape_attribute, escape_html, prettify_html, wrap_in_document

logger = logging.getLogger(__name__)

# Block type tag -> name of the HtmlRenderer method rendering it.
_DEFAULT_RENDER_METHODS: Mapping[str, str] = {
    BLOCK_PAGE: "render_page",
    BLOCK_TEXT: "render_text",
    BLOCK_NUMBERED_LIST: "render_numbered_list",
    BLOCK_BULLETED_LIST: "render_bulleted_list",
    BLOCK_HEADER: "render_header",
    BLOCK_SUB_HEADER: "render_sub_header",
    BLOCK_SUB_SUB_HEADER: "render_sub_sub_header",
    BLOCK_TODO: "render_todo",
    BLOCK_TOGGLE: "render_toggle",
    BLOCK_QUOTE: "render_quote",
    BLOCK_DIVIDER: "render_divider",
    BLOCK_CODE: "render_code",
    BLOCK_BOOKMARK: "render_bookmark",
    BLOCK_IMAGE: "render_image",
    BLOCK_COLUMN_LIST: "render_column_list",
    BLOCK_COLUMN: "render_column",
    BLOCK_COLLECTION_VIEW: "render_collection_view",
    BLOCK_EMBED: "render_embed",
    BLOCK_GIST: "render_gist",
    BLOCK_TWEET: "render_tweet",
    BLOCK_VIDEO: "render_video",
    BLOCK_FILE: "render_file",
    BLOCK_PDF: "render_pdf",
}


class SiblingContext(NamedTuple):
    """The sibling list containing the block being rendered, and its position."""

    blocks: Sequence[Block]
    index: int


_NO_SIBLINGS = SiblingContext((), 0)


def needs_wrapper(block: Block) -> bool:
    """Return True if the block's children get a ``notion-wrap`` div for indentation."""
    return bool(block.content) and block.type in INDENT_WRAPPER_BLOCK_TYPES


class HtmlRenderer(InlineContentMixin, BaseRenderer):
    """Render Notion pages to HTML.

    A renderer instance keeps traversal state while rendering and must not be
    used from several threads at once. Create one renderer per page, or use
    ``notion2html.render``.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML rendering options

    Examples
    --------
    Replace the rendering of dividers:

        >>> renderer = HtmlRenderer()
        >>> def override(block, entering):
        ...     if block.type != "divider":
        ...         return False
        ...     if entering:
        ...         renderer.write_string("<hr>")
        ...         renderer.newline()
        ...     return True
        >>> renderer = HtmlRenderer(HtmlRendererOptions(block_override=override))

    """

    def __init__(self, options: HtmlRendererOptions | None = None):
        """Initialize the HTML renderer with options."""
        BaseRenderer._validate_options_type(options, HtmlRendererOptions, "html")
        options = options or HtmlRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: HtmlRendererOptions = options
        self.date_formatter = DateFormatter(self.report_failure)
        self.writer = IndentWriter()
        self.page: Optional[Page] = None
        self.siblings: SiblingContext = _NO_SIBLINGS
        self.list_stack: list[str] = []
        self._rendering = False

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def render_to_string(self, page: Page) -> str:
        """Render a page to an HTML string.

        Parameters
        ----------
        page : Page
            Page to render

        Returns
        -------
        str
            HTML text

        Raises
        ------
        RenderingError
            On a soft failure in strict mode, or if this renderer is already
            rendering
        RenderInvariantError
            If the traversal ends unbalanced

        """
        if self._rendering:
            raise RenderingError("HtmlRenderer is already rendering a page", rendering_stage="setup")

        self._rendering = True
        self.page = page
        self.writer.reset()
        self.siblings = _NO_SIBLINGS
        self.list_stack = []
        try:
            with debug_timer(logger, f"Rendering page {page.id}"):
                self.writer.push_new_buffer()
                if page.root is not None:
                    # The root is top-level even if it was reached as a child before.
                    page.root.parent = None
                self.render_block(page.root)
                buf = self.writer.pop_buffer()
            self._check_balanced()
            html_text = buf.getvalue()
        finally:
            self.writer.reset()
            self.list_stack = []
            self.siblings = _NO_SIBLINGS
            self._rendering = False

        if self.options.standalone:
            html_text = wrap_in_document(html_text, title=page.root.title, language=self.options.language)
        if self.options.pretty_print:
            html_text = prettify_html(html_text)
        return html_text

    def _check_balanced(self) -> None:
        if self.writer.level != 0:
            raise RenderInvariantError(f"Indentation level is {self.writer.level} after rendering, should be 0")
        if self.writer.depth != 0:
            raise RenderInvariantError(f"{self.writer.depth} capture buffer(s) left after rendering")
        if self.list_stack:
            raise RenderInvariantError(f"Unclosed list wrapper(s) after rendering: {self.list_stack}")

    @property
    def buffer_depth(self) -> int:
        """Number of pushed capture buffers; zero whenever no render is in progress."""
        return self.writer.depth

    # ------------------------------------------------------------------
    # Output helpers, also used by override callbacks
    # ------------------------------------------------------------------

    @property
    def level(self) -> int:
        return self.writer.level

    @level.setter
    def level(self, value: int) -> None:
        self.writer.level = value

    def write_string(self, s: str) -> None:
        self.writer.write_string(s)

    def newline(self) -> None:
        self.writer.newline()

    def write_indent(self) -> None:
        self.writer.write_indent()

    def write_indent_plus(self, add: int) -> None:
        self.writer.write_indent_plus(add)

    def push_new_buffer(self) -> None:
        self.writer.push_new_buffer()

    def pop_buffer(self) -> TextBuffer:
        return self.writer.pop_buffer()

    def canonical_id(self, block: Block) -> str:
        return self.options.id_canonicalizer(block.id)

    def _id_attr(self, block: Block) -> str:
        if not self.options.add_id_attribute or not block.id:
            return ""
        return f' id="{escape_attribute(self.canonical_id(block))}"'

    def write_element(
        self,
        block: Block,
        tag: str,
        attrs: Mapping[str, str],
        content: str,
        entering: bool,
    ) -> None:
        """Write the opening or closing part of a block element.

        When entering, writes ``<tag attrs>``, then ``content`` on its own line
        if given, then the block's inline content. When exiting, writes the
        closing tag unless the tag is self-closing.

        Parameters
        ----------
        block : Block
            Block being rendered
        tag : str
            Element name
        attrs : mapping
            Attributes in output order; values are escaped
        content : str
            Extra HTML written after the opening tag (not escaped)
        entering : bool
            Whether this is the entry event

        """
        if not entering:
            if tag not in SELF_CLOSING_TAGS:
                self.write_indent()
                self.write_string(f"</{tag}>")
                self.newline()
            return

        s = "<" + tag
        for name, value in attrs.items():
            s += f' {name}="{escape_attribute(value)}"'
        s += self._id_attr(block) + ">"
        self.write_indent()
        self.write_string(s)
        self.newline()
        if content:
            self.write_indent()
            self.write_string(content)
            self.newline()
        self.render_inlines(block.inline_content)
        self.newline()

    # ------------------------------------------------------------------
    # Sibling lookups
    # ------------------------------------------------------------------

    def prev_block(self) -> Optional[Block]:
        """The sibling before the block being rendered, or None."""
        blocks, index = self.siblings
        if index <= 0 or index > len(blocks):
            return None
        return blocks[index - 1]

    def next_block(self) -> Optional[Block]:
        """The sibling after the block being rendered, or None."""
        blocks, index = self.siblings
        if index + 1 >= len(blocks):
            return None
        return blocks[index + 1]

    def is_prev_block_of_type(self, block_type: str) -> bool:
        block = self.prev_block()
        return block is not None and block.type == block_type

    def is_next_block_of_type(self, block_type: str) -> bool:
        block = self.next_block()
        return block is not None and block.type == block_type

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def default_render_func(self, block_type: str) -> Optional[BlockRenderFunc]:
        """Return the default rendering routine for a block type.

        Unknown types are reported as a soft failure and return None; such
        blocks render no markup of their own but their children are still
        rendered in place.

        """
        method_name = _DEFAULT_RENDER_METHODS.get(block_type)
        if method_name is None:
            url = self.page.notion_url(self.options.base_url) if self.page is not None else "?"
            self.report_failure("Unsupported block type '%s' in %s", block_type, url)
            return None
        return getattr(self, method_name)

    def _dispatch(self, block: Block, default: Optional[BlockRenderFunc], entering: bool) -> None:
        handled = False
        if self.options.block_override is not None:
            handled = self.options.block_override(block, entering)
        if not handled and default is not None:
            default(block, entering)

    def render_block(self, block: Optional[Block]) -> None:
        """Render a block and, recursively, its children. ``None`` blocks and children are skipped."""
        if block is None:
            return
        default = self.default_render_func(block.type)
        self._dispatch(block, default, True)

        wrapped = needs_wrapper(block)
        if wrapped:
            self.newline()
            self.write_indent()
            self.write_string(f'<div class="{CSS_WRAP}">')
            self.newline()

        self.writer.level += 1
        saved = self.siblings
        for i, child in enumerate(block.content):
            if child is None:
                continue
            child.parent = block
            self.siblings = SiblingContext(block.content, i)
            self.render_block(child)
        self.siblings = saved
        self.writer.level -= 1

        if wrapped:
            self.newline()
            self.write_indent()
            self.write_string("</div>")
            self.newline()

        self._dispatch(block, default, False)

    # ------------------------------------------------------------------
    # Lists
    # ------------------------------------------------------------------

    def _render_list_item(self, block: Block, entering: bool, list_tag: str, css_class: str) -> bool:
        if entering:
            if not self.is_prev_block_of_type(block.type):
                self.write_indent()
                self.write_string(f'<{list_tag} class="{css_class}">')
                self.newline()
                self.list_stack.append(list_tag)
                self.writer.level += 1
            self.write_element(block, "li", {"class": css_class}, "", entering)
            return True

        self.write_indent()
        self.write_string("</li>")
        if not self.is_next_block_of_type(block.type):
            if not self.list_stack or self.list_stack[-1] != list_tag:
                raise RenderInvariantError(f"Closing <{list_tag}> but open list wrappers are {self.list_stack}")
            self.list_stack.pop()
            self.writer.level -= 1
            self.newline()
            self.write_indent()
            self.write_string(f"</{list_tag}>")
        self.newline()
        return True

    def render_numbered_list(self, block: Block, entering: bool) -> bool:
        return self._render_list_item(block, entering, "ol", CSS_NUMBERED_LIST)

    def render_bulleted_list(self, block: Block, entering: bool) -> bool:
        return self._render_list_item(block, entering, "ul", CSS_BULLETED_LIST)

    # ------------------------------------------------------------------
    # Block routines
    # ------------------------------------------------------------------

    def render_page(self, block: Block, entering: bool) -> bool:
        """Render a page block.

        The top-level page becomes a container; nested pages become a link,
        styled differently for sub-pages and links to pages living elsewhere.

        """
        page_type = block.get_page_type()
        title = escape_html(block.title)
        if page_type is PageType.TOP_LEVEL:
            content = f'<div class="{CSS_PAGE_CONTENT}">{title}</div>'
            self.write_element(block, "div", {"class": CSS_PAGE}, content, entering)
            return True

        if not entering:
            return True

        css_class = CSS_SUB_PAGE if page_type is PageType.SUB_PAGE else CSS_PAGE_LINK
        uri = self.options.base_url + self.canonical_id(block)
        self.write_indent()
        self.write_string(
            f'<div class="{css_class}"{self._id_attr(block)}><a href="{escape_attribute(uri)}">{title}</a></div>'
        )
        self.newline()
        return True

    def render_text(self, block: Block, entering: bool) -> bool:
        self.write_element(block, "div", {"class": CSS_TEXT}, "", entering)
        return True

    def render_header_level(self, block: Block, level: int, entering: bool) -> bool:
        self.write_element(block, f"h{level}", {"class": f"notion-header-{level}"}, "", entering)
        return True

    def render_header(self, block: Block, entering: bool) -> bool:
        return self.render_header_level(block, 1, entering)

    def render_sub_header(self, block: Block, entering: bool) -> bool:
        return self.render_header_level(block, 2, entering)

    def render_sub_sub_header(self, block: Block, entering: bool) -> bool:
        return self.render_header_level(block, 3, entering)

    def render_todo(self, block: Block, entering: bool) -> bool:
        css_class = CSS_TODO_CHECKED if block.is_checked else CSS_TODO
        self.write_element(block, "div", {"class": css_class}, "", entering)
        return True

    def render_toggle(self, block: Block, entering: bool) -> bool:
        if entering:
            self.write_element(block, "div", {"class": CSS_TOGGLE}, "", entering)
            self.write_indent()
            self.write_string(f'<div class="{CSS_TOGGLE_WRAPPER}">')
            self.newline()
        else:
            self.write_indent()
            self.write_string("</div>")
            self.newline()
            self.write_element(block, "div", {"class": CSS_TOGGLE}, "", entering)
        return True

    def render_quote(self, block: Block, entering: bool) -> bool:
        self.write_element(block, "blockquote", {"class": CSS_QUOTE}, "", entering)
        return True

    def render_divider(self, block: Block, entering: bool) -> bool:
        if not entering:
            return True
        self.write_indent()
        self.write_string(f'<hr class="{CSS_DIVIDER}"{self._id_attr(block)}>')
        self.newline()
        return True

    def render_code(self, block: Block, entering: bool) -> bool:
        if not entering:
            self.write_string("</code></pre>")
            self.newline()
            return True
        css_class = CSS_CODE
        lang = block.code_language.strip().lower()
        if lang:
            css_class += " " + CSS_CODE_LANG_PREFIX + lang
        code = escape_html(block.code)
        self.write_indent()
        self.write_string(f'<pre class="{escape_attribute(css_class)}"{self._id_attr(block)}><code>{code}')
        return True

    def render_bookmark(self, block: Block, entering: bool) -> bool:
        href = escape_attribute(block.link)
        content = f'<a href="{href}">{escape_html(block.link)}</a>'
        self.write_element(block, "div", {"class": CSS_BOOKMARK}, content, entering)
        return True

    def render_image(self, block: Block, entering: bool) -> bool:
        self.write_element(block, "img", {"class": CSS_IMAGE, "src": block.image_url}, "", entering)
        return True

    def render_column_list(self, block: Block, entering: bool) -> bool:
        if not block.content:
            if entering:
                self.report_failure("Column list %s has no columns", block.id)
            return True
        self.write_element(block, "div", {"class": CSS_COLUMN_LIST}, "", entering)
        return True

    def render_column(self, block: Block, entering: bool) -> bool:
        self.write_element(block, "div", {"class": CSS_COLUMN}, "", entering)
        return True

    def _titled_link(self, block: Block, uri: str) -> str:
        title = block.title or posixpath.basename(uri)
        return f'<a href="{escape_attribute(uri)}">{escape_html(title)}</a>'

    def render_embed(self, block: Block, entering: bool) -> bool:
        content = "Oembed: " + self._titled_link(block, block.format.display_source)
        self.write_element(block, "div", {"class": CSS_EMBED}, content, entering)
        return True

    def render_gist(self, block: Block, entering: bool) -> bool:
        attrs = {"src": block.source + ".js", "class": CSS_EMBED_GIST}
        self.write_element(block, "script", attrs, "", entering)
        return True

    def render_tweet(self, block: Block, entering: bool) -> bool:
        uri = escape_attribute(block.source)
        content = f'Embedded tweet <a href="{uri}">{escape_html(block.source)}</a>'
        self.write_element(block, "div", {"class": CSS_EMBED}, content, entering)
        return True

    def render_video(self, block: Block, entering: bool) -> bool:
        fmt = block.format
        uri = fmt.display_source or block.source
        attrs = {
            "class": CSS_VIDEO,
            "width": str(fmt.block_width),
            "src": uri,
            "frameborder": "0",
            "allow": "encrypted-media",
            "allowfullscreen": "true",
        }
        height = fmt.block_height
        if height == 0:
            height = int(fmt.block_width * fmt.block_aspect_ratio)
        if height > 0:
            attrs["height"] = str(height)
        self.write_element(block, "iframe", attrs, "", entering)
        return True

    def render_file(self, block: Block, entering: bool) -> bool:
        content = "Embedded file: " + self._titled_link(block, block.source)
        self.write_element(block, "div", {"class": CSS_EMBED}, content, entering)
        return True

    def render_pdf(self, block: Block, entering: bool) -> bool:
        content = "Embedded PDF: " + self._titled_link(block, block.source)
        self.write_element(block, "div", {"class": CSS_EMBED}, content, entering)
        return True

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def _cell_spans(self, value: object) -> list[InlineSpan]:
        try:
            return self.options.inline_parser(value)
        except ParsingError as e:
            self.report_failure("Cannot parse table cell %r: %s", value, e.message)
            return []

    def render_collection_view(self, block: Block, entering: bool) -> bool:
        """Render the first view of a collection as a table.

        Other views of the collection are ignored. Rows and columns are
        emitted in source order.

        """
        if not entering:
            return True
        if not block.collection_views:
            self.report_failure("Collection view %s has no views", block.id)
            return True
        view = block.collection_views[0]
        if not view.columns:
            self.report_failure("Collection view %s has no columns", block.id)
            return True

        w = self.writer
        self.newline()
        self.write_indent()
        self.write_string(f'<table class="{CSS_COLLECTION_VIEW}"{self._id_attr(block)}>')
        self.newline()

        w.level += 1
        self.write_indent()
        self.write_string("<thead>")
        self.newline()
        self.write_indent_plus(1)
        self.write_string("<tr>")
        self.newline()
        for column in view.columns:
            self.write_indent_plus(2)
            self.write_string(f"<th>{escape_html(view.column_name(column))}</th>")
            self.newline()
        self.write_indent_plus(1)
        self.write_string("</tr>")
        self.newline()
        self.write_indent()
        self.write_string("</thead>")
        self.newline()

        self.write_indent()
        self.write_string("<tbody>")
        self.newline()
        for row in view.rows:
            self.write_indent_plus(1)
            self.write_string("<tr>")
            self.newline()
            for column in view.columns:
                value = self.get_inline_content(self._cell_spans(row.get(column)))
                self.write_indent_plus(2)
                self.write_string(f"<td>{value}</td>")
                self.newline()
            self.write_indent_plus(1)
            self.write_string("</tr>")
            self.newline()
        self.write_indent()
        self.write_string("</tbody>")
        self.newline()
        w.level -= 1

        self.write_indent()
        self.write_string("</table>")
        self.newline()
        return True
