#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for notion2html.

This module centralizes the hardcoded values used across the renderer:
block type tags, CSS class names, markup fragments and option defaults.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Block Type Tags - Notion block type identifiers
3. Markup - CSS classes, placeholders and tag tables
4. Dates - Date and time formatting
5. Option Defaults - Default values for renderer options
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

NotionDateType = Literal["date", "datetime", "daterange", "datetimerange"]

# =============================================================================
# Block Type Tags
# =============================================================================

BLOCK_PAGE = "page"
BLOCK_TEXT = "text"
BLOCK_NUMBERED_LIST = "numbered_list"
BLOCK_BULLETED_LIST = "bulleted_list"
BLOCK_HEADER = "header"
BLOCK_SUB_HEADER = "sub_header"
BLOCK_SUB_SUB_HEADER = "sub_sub_header"
BLOCK_TODO = "to_do"
BLOCK_TOGGLE = "toggle"
BLOCK_QUOTE = "quote"
BLOCK_DIVIDER = "divider"
BLOCK_CODE = "code"
BLOCK_BOOKMARK = "bookmark"
BLOCK_IMAGE = "image"
BLOCK_COLUMN_LIST = "column_list"
BLOCK_COLUMN = "column"
BLOCK_COLLECTION_VIEW = "collection_view"
BLOCK_EMBED = "embed"
BLOCK_GIST = "gist"
BLOCK_TWEET = "tweet"
BLOCK_VIDEO = "video"
BLOCK_FILE = "file"
BLOCK_PDF = "pdf"

# Block types whose children get an extra <div class="notion-wrap"> for indentation.
INDENT_WRAPPER_BLOCK_TYPES = frozenset({BLOCK_TEXT})

# =============================================================================
# Markup
# =============================================================================

NBSP_PLACEHOLDER = "&nbsp;"
INDENT_UNIT = "  "
SELF_CLOSING_TAGS = frozenset({"img"})

CSS_PAGE = "notion-page"
CSS_PAGE_CONTENT = "notion-page-content"
CSS_PAGE_LINK = "notion-page-link"
CSS_SUB_PAGE = "notion-sub-page"
CSS_TEXT = "notion-text"
CSS_NUMBERED_LIST = "notion-numbered-list"
CSS_BULLETED_LIST = "notion-bulleted-list"
CSS_TODO = "notion-todo"
CSS_TODO_CHECKED = "notion-todo-checked"
CSS_TOGGLE = "notion-toggle"
CSS_TOGGLE_WRAPPER = "notion-toggle-wrapper"
CSS_QUOTE = "notion-quote"
CSS_DIVIDER = "notion-divider"
CSS_CODE = "notion-code"
CSS_CODE_LANG_PREFIX = "notion-lang-"
CSS_BOOKMARK = "notion-bookmark"
CSS_IMAGE = "notion-image"
CSS_COLUMN_LIST = "notion-column-list"
CSS_COLUMN = "notion-column"
CSS_COLLECTION_VIEW = "notion-collection-view"
CSS_EMBED = "notion-embed"
CSS_EMBED_GIST = "notion-embed-gist"
CSS_VIDEO = "notion-video"
CSS_WRAP = "notion-wrap"
CSS_LINK = "notion-link"
CSS_USER = "notion-user"
CSS_DATE = "notion-date"

# =============================================================================
# Dates
# =============================================================================

NOTION_DATE_PATTERN = "%Y-%m-%d"
NOTION_TIME_PATTERN = "%H:%M"
DEFAULT_DATE_DISPLAY_FORMAT = "MMM DD, YYYY"
RELATIVE_DATE_FORMAT = "relative"
TIME_FORMAT_24_HOUR = "H:mm"
TIME_PATTERN_24_HOUR = " %H:%M"
TIME_PATTERN_12_HOUR = " %I:%M %p"
DATE_RANGE_SEPARATOR = " → "

# Order matters: MMM must be replaced before MM.
DATE_FORMAT_TOKENS: tuple[tuple[str, str], ...] = (
    ("MMM", "%b"),
    ("MM", "%m"),
    ("DD", "%d"),
    ("YYYY", "%Y"),
)

# =============================================================================
# Option Defaults
# =============================================================================

DEFAULT_ADD_ID_ATTRIBUTE = False
DEFAULT_STRICT_MODE = False
DEFAULT_ESCAPE_HTML = True
DEFAULT_NOTION_BASE_URL = "https://www.notion.so/"
DEFAULT_PRETTY_PRINT = False
DEFAULT_HTML_STANDALONE = False
DEFAULT_HTML_LANGUAGE = "en"
DEFAULT_DOCUMENT_TITLE = "Notion Page"

# Optional dependencies as (install_name, import_name, version_spec)
DEPS_PRETTY = [("beautifulsoup4", "bs4", ">=4.9.0")]
