#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2html/utils/dates.py
"""Formatting of dates embedded in Notion rich text.

Notion sends dates in a fixed canonical form (``2019-04-09`` and optionally
``00:35``) together with a user-chosen display format written with its own
tokens (``MMM DD, YYYY``) and a time format (``H:mm`` for a 24-hour clock).
``DateFormatter`` parses the former and translates the latter into a
``strftime`` pattern.

Relative display formats ("Today", "3 days ago") are not supported; they are
rendered with the default absolute format.

Examples
--------
    >>> from notion2html.ast import NotionDate
    >>> formatter = DateFormatter()
    >>> formatter.format_date(NotionDate(start_date="2019-04-09", date_format="YYYY-MM-DD"))
    '<span class="notion-date">@2019-04-09</span>'

"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional

from notion2html.ast.nodes import NotionDate
from notion2html.constants import (
    CSS_DATE,
    DATE_FORMAT_TOKENS,
    DATE_RANGE_SEPARATOR,
    DEFAULT_DATE_DISPLAY_FORMAT,
    NOTION_DATE_PATTERN,
    NOTION_TIME_PATTERN,
    RELATIVE_DATE_FORMAT,
    TIME_FORMAT_24_HOUR,
    TIME_PATTERN_12_HOUR,
    TIME_PATTERN_24_HOUR,
)
from notion2html.exceptions import DateParseError
from notion2html.utils.html_utils import escape_html

logger = logging.getLogger(__name__)

# Value used when a date literal cannot be parsed. Formats with an unpadded
# year on glibc, so a malformed date renders as "1-01-01" under YYYY-MM-DD.
ZERO_TIMESTAMP = datetime.min


def parse_notion_date_time(date: str, time: str = "") -> datetime:
    """Parse a Notion date and optional time.

    Parameters
    ----------
    date : str
        Date as ``YYYY-MM-DD``
    time : str, optional
        Time as ``HH:MM``

    Returns
    -------
    datetime
        Parsed timestamp (naive)

    Raises
    ------
    DateParseError
        If either literal is malformed

    """
    literal = date
    pattern = NOTION_DATE_PATTERN
    if time:
        literal += " " + time
        pattern += " " + NOTION_TIME_PATTERN
    try:
        return datetime.strptime(literal, pattern)
    except ValueError as e:
        raise DateParseError(f"Cannot parse date '{literal}' with pattern '{pattern}': {e}", literal, e) from e


def translate_format_template(date_format: str, time_format: str = "", with_time: bool = False) -> str:
    """Translate a Notion display format into a ``strftime`` pattern.

    ``MMM`` becomes the abbreviated month name, ``MM`` the zero-padded month,
    ``DD`` the zero-padded day and ``YYYY`` the four digit year. Literal ``%``
    characters are escaped first. When ``with_time`` is set a time pattern is
    appended: 24-hour if ``time_format`` is ``H:mm``, 12-hour with AM/PM
    otherwise.

    Parameters
    ----------
    date_format : str
        Notion display format; empty or ``relative`` means the default
        ``MMM DD, YYYY``
    time_format : str, optional
        Notion time format selector
    with_time : bool, default False
        Whether to append a time pattern

    Returns
    -------
    str
        ``strftime`` pattern

    Examples
    --------
        >>> translate_format_template("YYYY-MM-DD")
        '%Y-%m-%d'
        >>> translate_format_template("MMM DD, YYYY", "H:mm", with_time=True)
        '%b %d, %Y %H:%M'

    """
    if not date_format or date_format == RELATIVE_DATE_FORMAT:
        date_format = DEFAULT_DATE_DISPLAY_FORMAT

    pattern = date_format.replace("%", "%%")
    for token, directive in DATE_FORMAT_TOKENS:
        pattern = pattern.replace(token, directive)

    if with_time:
        if time_format == TIME_FORMAT_24_HOUR:
            pattern += TIME_PATTERN_24_HOUR
        else:
            pattern += TIME_PATTERN_12_HOUR
    return pattern


class DateFormatter:
    """Render ``NotionDate`` values as HTML.

    Parameters
    ----------
    report_failure : callable, optional
        Called with a message when a date literal is malformed. The renderer
        passes its soft-failure handler here, which raises in strict mode. When
        it returns, formatting continues with ``ZERO_TIMESTAMP``. Without a
        handler failures are only logged.

    """

    def __init__(self, report_failure: Optional[Callable[[str], None]] = None):
        self._report_failure = report_failure

    def _fail(self, message: str) -> None:
        if self._report_failure is not None:
            self._report_failure(message)
        else:
            logger.warning(message)

    def parse_date_time(self, date: str, time: str = "") -> datetime:
        """Parse a Notion date/time, degrading to ``ZERO_TIMESTAMP`` on failure."""
        try:
            return parse_notion_date_time(date, time)
        except DateParseError as e:
            self._fail(e.message)
            return ZERO_TIMESTAMP

    def format_date_time(self, date: NotionDate, day: str, time: str = "") -> str:
        """Format one point in time of ``date`` using its display format."""
        dt = self.parse_date_time(day, time)
        pattern = translate_format_template(date.date_format, date.time_format, with_time=bool(time))
        return dt.strftime(pattern)

    def format_date(self, date: NotionDate, escape: bool = True) -> str:
        """Format a date or date range as a ``notion-date`` span.

        A range renders as ``start → end``. A range without an end date is
        reported as a failure and only its start is rendered. The formatted
        text is HTML-escaped unless ``escape`` is False.

        """
        text = self.format_date_time(date, date.start_date, date.start_time)
        if date.is_range:
            if date.end_date:
                text += DATE_RANGE_SEPARATOR + self.format_date_time(date, date.end_date, date.end_time)
            else:
                self._fail(f"Date range starting {date.start_date!r} has no end date")
        return f'<span class="{CSS_DATE}">@{escape_html(text, enabled=escape)}</span>'
