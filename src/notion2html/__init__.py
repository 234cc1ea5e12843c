"""notion2html - render Notion pages to HTML.

notion2html takes an already decoded Notion page (a tree of typed blocks with
formatted inline text) and produces an HTML fragment. Notion's flat list items
are grouped into ``<ol>``/``<ul>`` elements, collection views become tables and
inline dates are formatted with the page's own display format.

Rendering of any block can be replaced or suppressed with a ``block_override``
callback, and inline links with a ``link_override`` callback.

Requirements
------------
- Python 3.10+
- beautifulsoup4 for ``pretty_print`` (optional)

Examples
--------
    >>> from notion2html import Block, InlineSpan, Page, render
    >>> page = Page(root=Block(type="page", id="p1", title="Hello", content=[
    ...     Block(type="text", id="t1", inline_content=[InlineSpan(text="World")]),
    ... ]))
    >>> html = render(page).decode("utf-8")

With options:

    >>> from notion2html import HtmlRendererOptions
    >>> html = render(page, HtmlRendererOptions(add_id_attribute=True, standalone=True))

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "notion2html requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "0.1.0"

from notion2html.api import render
from notion2html.ast import AttrFlag, Block, BlockFormat, CollectionView, InlineSpan, NotionDate, Page, PageType
from notion2html.exceptions import (
    DependencyError,
    Notion2HtmlError,
    ParsingError,
    RenderingError,
    RenderInvariantError,
)
from notion2html.logging_utils import configure_logging
from notion2html.options import BaseRendererOptions, HtmlRendererOptions
from notion2html.renderers import HtmlRenderer

__all__ = [
    "__version__",
    "render",
    # AST
    "AttrFlag",
    "Block",
    "BlockFormat",
    "CollectionView",
    "InlineSpan",
    "NotionDate",
    "Page",
    "PageType",
    # Options and renderers
    "BaseRendererOptions",
    "HtmlRendererOptions",
    "HtmlRenderer",
    "configure_logging",
    # Exceptions
    "DependencyError",
    "Notion2HtmlError",
    "ParsingError",
    "RenderingError",
    "RenderInvariantError",
]
