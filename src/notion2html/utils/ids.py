#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2html/utils/ids.py
"""Notion block identifier helpers.

Notion ids are UUIDs that appear both with dashes
(``4c6a54c6-8b3e-4ea2-af9c-faabcc88d58d``) and without
(``4c6a54c68b3e4ea2af9cfaabcc88d58d``). The dash-free form is what the renderer
uses for ``id`` attributes and page links.

"""

from __future__ import annotations

import re

_NO_DASH_ID_RE = re.compile(r"^[0-9a-fA-F]{32}$")

# 8-4-4-4-12
_DASH_GROUPS = (8, 4, 4, 4, 12)


def to_no_dash_id(block_id: str) -> str:
    """Return ``block_id`` with all dashes removed.

    >>> to_no_dash_id("abc-123-def")
    'abc123def'

    """
    return block_id.replace("-", "")


def is_no_dash_id(block_id: str) -> bool:
    """Return True if ``block_id`` is a 32 character hex id without dashes."""
    return bool(_NO_DASH_ID_RE.match(block_id))


def to_dash_id(block_id: str) -> str:
    """Convert a dash-free 32 character id to the dashed UUID layout.

    Ids that already contain dashes, or that are not 32 hex characters, are
    returned unchanged.

    Parameters
    ----------
    block_id : str
        Identifier to convert

    Returns
    -------
    str
        Dashed identifier

    Examples
    --------
        >>> to_dash_id("4c6a54c68b3e4ea2af9cfaabcc88d58d")
        '4c6a54c6-8b3e-4ea2-af9c-faabcc88d58d'

    """
    if not is_no_dash_id(block_id):
        return block_id
    parts = []
    start = 0
    for size in _DASH_GROUPS:
        parts.append(block_id[start : start + size])
        start += size
    return "-".join(parts)
