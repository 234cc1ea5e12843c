#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2html/api.py
"""Top-level rendering entry point."""

from __future__ import annotations

import logging
from typing import Any, Optional

from notion2html.ast.nodes import Page
from notion2html.options.html import HtmlRendererOptions
from notion2html.renderers.html import HtmlRenderer

logger = logging.getLogger(__name__)


def render(page: Page, options: Optional[HtmlRendererOptions] = None, **kwargs: Any) -> bytes:
    """Render a Notion page to UTF-8 encoded HTML.

    A new ``HtmlRenderer`` is created for every call, so ``render`` may be
    called concurrently from several threads.

    Parameters
    ----------
    page : Page
        Page to render
    options : HtmlRendererOptions, optional
        Rendering options
    kwargs : Any
        Option fields overriding those of ``options``

    Returns
    -------
    bytes
        UTF-8 encoded HTML

    Raises
    ------
    RenderingError
        On a soft failure in strict mode
    RenderInvariantError
        If the traversal ends unbalanced (a broken block override)
    InvalidOptionsError
        If ``options`` is not an ``HtmlRendererOptions``

    Examples
    --------
        >>> from notion2html import Block, Page, render
        >>> html = render(Page(root=Block(type="page", id="p1", title="Hello")), add_id_attribute=True)

    """
    final_options: Optional[HtmlRendererOptions]
    if kwargs and options is not None:
        final_options = options.create_updated(**kwargs)
    elif kwargs:
        final_options = HtmlRendererOptions(**kwargs)
    else:
        final_options = options

    logger.debug("Rendering page %s", page.id)
    return HtmlRenderer(final_options).render_to_bytes(page)
