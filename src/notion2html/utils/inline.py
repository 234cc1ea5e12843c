#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2html/utils/inline.py
"""Parsing of Notion rich-text property values into ``InlineSpan`` lists.

Notion stores formatted text as a list of segments. Each segment is a list
whose first element is the text and whose optional second element is a list
of attributes, each itself a list of an attribute code and an optional
argument::

    [
        ["Hello "],
        ["world", [["b"], ["i"]]],
        ["notion", [["a", "https://notion.so"]]],
        ["‣", [["u", "4c6a54c6-8b3e-4ea2-af9c-faabcc88d58d"]]],
        ["‣", [["d", {"type": "date", "start_date": "2019-04-09"}]]],
    ]

Supported attribute codes are ``b`` (bold), ``i`` (italic), ``s``
(strikethrough), ``c`` (code), ``a`` (link), ``u`` (user mention) and ``d``
(date). Other codes (colors, page mentions, ...) are ignored.

This is the default ``inline_parser`` of ``HtmlRendererOptions``; callers with
their own decoded data model can supply a different one.

"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from notion2html.ast.nodes import AttrFlag, InlineSpan, NotionDate
from notion2html.exceptions import InlineParseError

logger = logging.getLogger(__name__)

_FLAG_ATTRS = {
    "b": AttrFlag.BOLD,
    "i": AttrFlag.ITALIC,
    "s": AttrFlag.STRIKETHROUGH,
    "c": AttrFlag.CODE,
}


def _attr_argument(attr: Sequence[Any], value: Any) -> Any:
    if len(attr) < 2:
        raise InlineParseError(f"Attribute '{attr[0]}' requires an argument", value)
    return attr[1]


def _parse_segment(segment: Any, value: Any) -> InlineSpan:
    if isinstance(segment, str):
        return InlineSpan(text=segment)
    if not isinstance(segment, (list, tuple)) or not segment:
        raise InlineParseError(f"Expected a non-empty list for rich-text segment, got {segment!r}", value)

    text = segment[0]
    if not isinstance(text, str):
        raise InlineParseError(f"Segment text must be a string, got {type(text).__name__}", value)
    span = InlineSpan(text=text)

    attrs = segment[1] if len(segment) > 1 else []
    if not isinstance(attrs, (list, tuple)):
        raise InlineParseError(f"Segment attributes must be a list, got {type(attrs).__name__}", value)

    for attr in attrs:
        if not isinstance(attr, (list, tuple)) or not attr or not isinstance(attr[0], str):
            raise InlineParseError(f"Malformed attribute {attr!r}", value)
        code = attr[0]
        if code in _FLAG_ATTRS:
            span.attr_flags |= _FLAG_ATTRS[code]
        elif code == "a":
            span.link = str(_attr_argument(attr, value))
        elif code == "u":
            span.user_id = str(_attr_argument(attr, value))
        elif code == "d":
            date_data = _attr_argument(attr, value)
            if not isinstance(date_data, Mapping):
                raise InlineParseError(f"Date attribute must be a mapping, got {date_data!r}", value)
            span.date = NotionDate.from_dict(date_data)
        else:
            logger.debug("Ignoring unsupported inline attribute '%s'", code)
    return span


def parse_inline_spans(value: Any) -> list[InlineSpan]:
    """Convert a raw rich-text value into inline spans.

    Parameters
    ----------
    value : any
        Raw property value. ``None`` and empty lists give no spans; a plain
        string gives a single unformatted span.

    Returns
    -------
    list of InlineSpan
        Spans in source order

    Raises
    ------
    InlineParseError
        If the value does not have the rich-text structure

    Examples
    --------
        >>> spans = parse_inline_spans([["Hi "], ["there", [["b"]]]])
        >>> [s.text for s in spans]
        ['Hi ', 'there']

    """
    if value is None:
        return []
    if isinstance(value, str):
        return [InlineSpan(text=value)]
    if not isinstance(value, (list, tuple)):
        raise InlineParseError(f"Expected rich-text list, got {type(value).__name__}", value)
    return [_parse_segment(segment, value) for segment in value]
