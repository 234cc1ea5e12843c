"""Test utilities for the notion2html test suite.

Builders for small block trees so tests read like the page they describe.
"""

from notion2html.ast import Block, InlineSpan, Page


def spans(*texts: str) -> list:
    """Plain inline spans, one per text."""
    return [InlineSpan(text=t) for t in texts]


def block(block_type: str, block_id: str = "", text: str = "", children=None, **kwargs) -> Block:
    """Create a block with optional single-span inline text."""
    inline = spans(text) if text else []
    return Block(type=block_type, id=block_id, inline_content=inline, content=list(children or []), **kwargs)


def make_page(*children: Block, title: str = "Test Page", page_id: str = "root-page") -> Page:
    """Create a top-level page containing ``children``."""
    return Page(root=Block(type="page", id=page_id, title=title, content=list(children)))


def body_lines(html: str) -> list:
    """Non-empty lines of ``html`` with indentation stripped."""
    return [line.strip() for line in html.splitlines() if line.strip()]
