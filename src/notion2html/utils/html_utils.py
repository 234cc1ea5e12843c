"""HTML-related utility helpers."""

from __future__ import annotations

import logging
from html import escape as _html_escape

from notion2html.constants import DEFAULT_DOCUMENT_TITLE, DEPS_PRETTY
from notion2html.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)


def escape_html(text: str, *, enabled: bool = True) -> str:
    """Escape HTML special characters in text content when enabled."""
    if not enabled:
        return text
    return _html_escape(text, quote=False)


def escape_attribute(value: str) -> str:
    """Escape a value for use inside a double-quoted attribute."""
    return _html_escape(value, quote=True)


def wrap_in_document(content: str, *, title: str = DEFAULT_DOCUMENT_TITLE, language: str = "en") -> str:
    """Wrap an HTML fragment in a minimal standalone document.

    Parameters
    ----------
    content : str
        Rendered HTML fragment
    title : str, default "Notion Page"
        Text for the ``<title>`` element; escaped here
    language : str, default "en"
        Value for the ``<html lang>`` attribute

    Returns
    -------
    str
        Complete HTML document

    """
    parts = [
        "<!DOCTYPE html>",
        f'<html lang="{escape_attribute(language)}">',
        "<head>",
        '<meta charset="UTF-8">',
        '<meta name="viewport" content="width=device-width, initial-scale=1.0">',
        f"<title>{escape_html(title or DEFAULT_DOCUMENT_TITLE)}</title>",
        "</head>",
        "<body>",
        content.rstrip("\n"),
        "</body>",
        "</html>",
    ]
    return "\n".join(parts) + "\n"


@requires_dependencies("pretty", DEPS_PRETTY)
def prettify_html(html_text: str) -> str:
    """Re-indent HTML with BeautifulSoup.

    Parameters
    ----------
    html_text : str
        HTML to reformat

    Returns
    -------
    str
        Reformatted HTML

    Raises
    ------
    DependencyError
        If beautifulsoup4 is not installed

    """
    from bs4 import BeautifulSoup

    soup = BeautifulSoup(html_text, "html.parser")
    logger.debug("Prettifying %d characters of HTML", len(html_text))
    return soup.prettify()
