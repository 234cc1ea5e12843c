#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2html/ast/__init__.py
"""Data model for Notion pages.

Examples
--------
Building a small page by hand:

    >>> from notion2html.ast import Block, InlineSpan, Page
    >>> page = Page(root=Block(type="page", id="root", title="Notes", content=[
    ...     Block(type="text", id="t1", inline_content=[InlineSpan(text="Hello")]),
    ... ]))

"""

from __future__ import annotations

from notion2html.ast.nodes import (
    AttrFlag,
    Block,
    BlockFormat,
    CollectionView,
    InlineSpan,
    NotionDate,
    Page,
    PageType,
)

__all__ = [
    "AttrFlag",
    "Block",
    "BlockFormat",
    "CollectionView",
    "InlineSpan",
    "NotionDate",
    "Page",
    "PageType",
]
