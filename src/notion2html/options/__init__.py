#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for notion2html renderers.

Options are frozen dataclasses. Use ``create_updated`` to derive a modified
copy:

    >>> from notion2html.options import HtmlRendererOptions
    >>> strict = HtmlRendererOptions().create_updated(strict_mode=True)

"""

from __future__ import annotations

from notion2html.options.base import BaseRendererOptions, CloneFrozenMixin, LogSink
from notion2html.options.html import (
    BlockRenderFunc,
    HtmlRendererOptions,
    IdCanonicalizer,
    InlineParser,
    LinkRenderFunc,
)

__all__ = [
    "BaseRendererOptions",
    "BlockRenderFunc",
    "CloneFrozenMixin",
    "HtmlRendererOptions",
    "IdCanonicalizer",
    "InlineParser",
    "LinkRenderFunc",
    "LogSink",
]
