#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML rendering of Notion pages."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from notion2html.ast.nodes import Block, InlineSpan
from notion2html.constants import (
    DEFAULT_ADD_ID_ATTRIBUTE,
    DEFAULT_ESCAPE_HTML,
    DEFAULT_HTML_LANGUAGE,
    DEFAULT_HTML_STANDALONE,
    DEFAULT_NOTION_BASE_URL,
    DEFAULT_PRETTY_PRINT,
)
from notion2html.options.base import BaseRendererOptions
from notion2html.utils.ids import to_no_dash_id
from notion2html.utils.inline import parse_inline_spans

BlockRenderFunc = Callable[[Block, bool], bool]
LinkRenderFunc = Callable[[InlineSpan], tuple[str, bool]]
IdCanonicalizer = Callable[[str], str]
InlineParser = Callable[[Any], list[InlineSpan]]


# src/notion2html/options/html.py
@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    """Configuration options for rendering a Notion page to HTML.

    Parameters
    ----------
    add_id_attribute : bool, default False
        Add ``id="<block id without dashes>"`` to every element emitted for a
        block.
    block_override : callable or None, default None
        ``(block, entering) -> bool`` called before the default rendering of
        every block, once on entry and once on exit. Returning True means the
        callback fully handled that event and the default rendering for it is
        skipped. Callbacks usually close over the renderer to write output
        with ``write_string``/``write_indent``/``newline``.
    link_override : callable or None, default None
        ``(span) -> (html, handled)`` called for inline links. When
        ``handled`` is True, ``html`` replaces the default ``<a>`` markup.
    data : any, default None
        Opaque caller data, not used by the renderer. Available to override
        callbacks through ``renderer.options.data``.
    escape_html : bool, default True
        Escape HTML special characters in inline text.
    base_url : str, default "https://www.notion.so/"
        Prefix for links to sub-pages and linked pages.
    id_canonicalizer : callable, default to_no_dash_id
        Converts block ids to the form used in ``id`` attributes and page links.
    inline_parser : callable, default parse_inline_spans
        Converts raw collection cell values to ``InlineSpan`` lists. Should
        raise ``ParsingError`` for malformed values.
    pretty_print : bool, default False
        Re-indent the final HTML with BeautifulSoup (requires beautifulsoup4).
    standalone : bool, default False
        Wrap the output in a complete HTML document titled after the root block.
    language : str, default "en"
        ``lang`` attribute of the standalone document.

    Examples
    --------
    Add ids and fail on unknown blocks:
        >>> options = HtmlRendererOptions(add_id_attribute=True, strict_mode=True)

    Skip all images:
        >>> options = HtmlRendererOptions(block_override=lambda block, entering: block.type == "image")

    """

    add_id_attribute: bool = field(
        default=DEFAULT_ADD_ID_ATTRIBUTE,
        metadata={"help": "Add id attributes with the block id (dashes removed)", "importance": "core"},
    )
    block_override: Optional[BlockRenderFunc] = field(
        default=None,
        compare=False,
        metadata={"help": "Callable (block, entering) -> handled, tried before default rendering", "importance": "advanced"},
    )
    link_override: Optional[LinkRenderFunc] = field(
        default=None,
        compare=False,
        metadata={"help": "Callable (span) -> (html, handled) for inline links", "importance": "advanced"},
    )
    data: Any = field(
        default=None,
        compare=False,
        metadata={"help": "Opaque caller data for override callbacks", "importance": "advanced"},
    )
    escape_html: bool = field(
        default=DEFAULT_ESCAPE_HTML,
        metadata={"help": "Escape HTML special characters in text", "importance": "security"},
    )
    base_url: str = field(
        default=DEFAULT_NOTION_BASE_URL,
        metadata={"help": "URL prefix for links to sub-pages and linked pages", "importance": "advanced"},
    )
    id_canonicalizer: IdCanonicalizer = field(
        default=to_no_dash_id,
        compare=False,
        metadata={"help": "Callable converting block ids for id attributes and links", "importance": "advanced"},
    )
    inline_parser: InlineParser = field(
        default=parse_inline_spans,
        compare=False,
        metadata={"help": "Callable converting raw table cell values to inline spans", "importance": "advanced"},
    )
    pretty_print: bool = field(
        default=DEFAULT_PRETTY_PRINT,
        metadata={"help": "Re-indent output HTML (requires beautifulsoup4)", "importance": "core"},
    )
    standalone: bool = field(
        default=DEFAULT_HTML_STANDALONE,
        metadata={"help": "Generate complete HTML document (vs content fragment)", "importance": "core"},
    )
    language: str = field(
        default=DEFAULT_HTML_LANGUAGE,
        metadata={"help": "Document language code for the standalone <html lang> attribute", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate callables and URL settings.

        Raises
        ------
        ValueError
            If a hook is not callable or ``base_url`` is empty.

        """
        super().__post_init__()

        for name in ("block_override", "link_override"):
            hook = getattr(self, name)
            if hook is not None and not callable(hook):
                raise ValueError(f"{name} must be callable, got {type(hook).__name__}")

        for name in ("id_canonicalizer", "inline_parser"):
            if not callable(getattr(self, name)):
                raise ValueError(f"{name} must be callable")

        if not self.base_url:
            raise ValueError("base_url must not be empty")
