#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2html/ast/nodes.py
"""Data model for Notion pages.

A page is a tree of ``Block`` objects. Every block has a type tag
(``"text"``, ``"bulleted_list"``, ``"collection_view"``, ...), an ordered list
of child blocks it owns, and a sequence of ``InlineSpan`` objects holding its
formatted text. Type-specific payload (code text, image url, video sizing, ...)
lives in plain fields that are empty for block types that do not use them.

The tree is supplied fully built by the caller; the renderer only reads it,
apart from setting each block's ``parent`` back-reference as it walks.

Node Overview
-------------
- Page: the document, wrapping the root ``Block``
- Block: one content block
- BlockFormat: sizing information for video and embed blocks
- InlineSpan: a run of text with formatting attributes
- AttrFlag: bold / italic / strikethrough / code flags
- NotionDate: an inline date, date-time or range
- CollectionView: column schema and rows of a table (database) block

"""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from enum import Enum, IntFlag
from typing import Any, Mapping, Optional

from notion2html.constants import DEFAULT_NOTION_BASE_URL
from notion2html.utils.ids import to_no_dash_id


class AttrFlag(IntFlag):
    """Inline formatting attributes of an ``InlineSpan``."""

    NONE = 0
    BOLD = 1
    ITALIC = 2
    STRIKETHROUGH = 4
    CODE = 8


class PageType(Enum):
    """How a ``page`` block relates to the block containing it."""

    TOP_LEVEL = "top_level"
    SUB_PAGE = "sub_page"
    LINK = "link"


@dataclass
class NotionDate:
    """A date embedded in inline text.

    Parameters
    ----------
    type : str, default "date"
        One of ``date``, ``datetime``, ``daterange``, ``datetimerange``
    start_date : str
        Start date as ``YYYY-MM-DD``
    start_time : str
        Optional start time as ``HH:MM``
    end_date : str
        End date, only used for range types
    end_time : str
        Optional end time, only used for range types
    date_format : str
        Display format using ``YYYY``, ``MM``, ``DD`` and ``MMM`` tokens.
        Empty or ``relative`` uses the default ``MMM DD, YYYY``.
    time_format : str
        ``H:mm`` selects a 24-hour clock; anything else is 12-hour

    """

    type: str = "date"
    start_date: str = ""
    start_time: str = ""
    end_date: str = ""
    end_time: str = ""
    date_format: str = ""
    time_format: str = ""

    @property
    def is_range(self) -> bool:
        """True if this date is a range with a start and an end."""
        return "range" in self.type

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> NotionDate:
        """Build a date from the mapping Notion stores in rich text.

        Unknown keys are ignored and missing keys fall back to defaults.

        Examples
        --------
            >>> d = NotionDate.from_dict({"type": "daterange", "start_date": "2019-04-09", "end_date": "2019-04-12"})
            >>> d.is_range
            True

        """
        return cls(
            type=str(data.get("type") or "date"),
            start_date=str(data.get("start_date") or ""),
            start_time=str(data.get("start_time") or ""),
            end_date=str(data.get("end_date") or ""),
            end_time=str(data.get("end_time") or ""),
            date_format=str(data.get("date_format") or ""),
            time_format=str(data.get("time_format") or ""),
        )


@dataclass
class InlineSpan:
    """A run of inline text.

    At most one of ``link``, ``user_id`` and ``date`` is normally set. When a
    span carries one of them, it replaces ``text`` in the output.

    Parameters
    ----------
    text : str
        Literal text
    attr_flags : AttrFlag
        Formatting attributes
    link : str
        Target URL when the span is a link
    user_id : str
        Id of the mentioned user
    date : NotionDate or None
        Embedded date

    """

    text: str = ""
    attr_flags: AttrFlag = AttrFlag.NONE
    link: str = ""
    user_id: str = ""
    date: Optional[NotionDate] = None

    @property
    def is_plain(self) -> bool:
        return not (self.attr_flags or self.link or self.user_id or self.date is not None)


@dataclass
class BlockFormat:
    """Display sizing of video and embed blocks."""

    block_width: int = 0
    block_height: int = 0
    block_aspect_ratio: float = 0.0
    display_source: str = ""


@dataclass
class CollectionView:
    """A table view over a collection (Notion database).

    Parameters
    ----------
    columns : list of str
        Property ids in display order
    schema : dict
        Maps property id to column display name
    rows : list of dict
        Each row maps property id to the raw rich-text value of that cell

    """

    columns: list[str] = field(default_factory=list)
    schema: dict[str, str] = field(default_factory=dict)
    rows: list[dict[str, Any]] = field(default_factory=list)

    def column_name(self, property_id: str) -> str:
        """Return the display name for a column, or "" if not in the schema."""
        return self.schema.get(property_id, "")


@dataclass(eq=False)
class Block:
    """A single content block.

    Blocks compare by identity. The ``parent`` back-reference is a weak
    reference set by the renderer when it descends into the parent; it is
    ``None`` before the block has been visited and is never used for
    ownership.

    Parameters
    ----------
    type : str
        Block type tag (see ``notion2html.constants.BLOCK_*``)
    id : str
        Block id, with or without dashes
    content : list of Block
        Child blocks, in order
    inline_content : list of InlineSpan
        Formatted text of the block
    title : str
        Title of page, embed, file and pdf blocks
    code : str
        Source text of code blocks
    code_language : str
        Language name of code blocks
    link : str
        Target of bookmark blocks
    source : str
        Source URL of gist, tweet, video, file and pdf blocks
    image_url : str
        Image location of image blocks
    is_checked : bool
        State of to-do blocks
    parent_id : str
        Id of the block that owns this block in the source data. Used to tell
        sub-pages apart from links to pages living elsewhere.
    format : BlockFormat
        Sizing of video and embed blocks
    collection_views : list of CollectionView
        Views of collection_view blocks; only the first is rendered

    """

    type: str
    id: str = ""
    content: list[Block] = field(default_factory=list)
    inline_content: list[InlineSpan] = field(default_factory=list)
    title: str = ""
    code: str = ""
    code_language: str = ""
    link: str = ""
    source: str = ""
    image_url: str = ""
    is_checked: bool = False
    parent_id: str = ""
    format: BlockFormat = field(default_factory=BlockFormat)
    collection_views: list[CollectionView] = field(default_factory=list)
    _parent_ref: Optional[weakref.ReferenceType[Block]] = field(default=None, init=False, repr=False)

    @property
    def parent(self) -> Optional[Block]:
        """The block this block was reached from, or None."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @parent.setter
    def parent(self, value: Optional[Block]) -> None:
        self._parent_ref = weakref.ref(value) if value is not None else None

    def get_page_type(self) -> PageType:
        """Classify a page block relative to its parent.

        Returns
        -------
        PageType
            ``TOP_LEVEL`` when the block has no parent, ``SUB_PAGE`` when the
            parent owns it, ``LINK`` when it is a reference to a page owned
            elsewhere.

        """
        parent = self.parent
        if parent is None:
            return PageType.TOP_LEVEL
        if not self.parent_id or to_no_dash_id(self.parent_id) == to_no_dash_id(parent.id):
            return PageType.SUB_PAGE
        return PageType.LINK


@dataclass(eq=False)
class Page:
    """A Notion page: the root block and its descendants.

    Parameters
    ----------
    root : Block
        Root block, normally of type ``page``
    id : str, optional
        Page id; defaults to the root block id

    """

    root: Block
    id: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            self.id = self.root.id

    def notion_url(self, base_url: str = DEFAULT_NOTION_BASE_URL) -> str:
        """Return the URL of this page on notion.so."""
        return base_url + to_no_dash_id(self.id)
