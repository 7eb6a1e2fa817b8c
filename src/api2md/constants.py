#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for api2md.

Constants are organized by category:
1. Type Definitions
2. Writer and Emitter Defaults
3. HTML Markup Defaults
4. Output Files and Configuration
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

OutputFormat = Literal["markdown", "html"]

# =============================================================================
# Writer and Emitter Defaults
# =============================================================================

DEFAULT_INDENT_PREFIX = "  "
MARKDOWN_QUOTE_PREFIX = "> "

# Heading levels are offset by one; the page template owns the top-level title.
HEADING_LEVEL_TAGS: dict[int, str] = {1: "h2", 2: "h3", 3: "h3"}
DEFAULT_HEADING_TAG = "h4"

# Separator written between adjacent emphasis runs ("**one**<!-- -->*two*")
# and between a closing marker and a word that follows it
EMPHASIS_SEPARATOR = "<!-- -->"
# Characters after which an emphasis marker can be written without a separator
EMPHASIS_SAFE_PRECEDING = ("", "\n", " ", "[", ">")

DEFAULT_SKIP_LINE_BEFORE_TABLE = True

# =============================================================================
# HTML Markup Defaults
# =============================================================================

DEFAULT_HEADING_CSS_CLASS = "doc-heading"
DEFAULT_TABLE_CSS_CLASS = "doc-table"
DEFAULT_CODE_SPAN_CSS_CLASS = "doc-code-span"
DEFAULT_FENCED_CODE_CSS_CLASS = "doc-fenced-code"
DEFAULT_NOTE_BOX_CSS_CLASS = ""
DEFAULT_CODE_LANGUAGE = "javascript"

# =============================================================================
# Output Files and Configuration
# =============================================================================

API_JSON_SUFFIX = ".api.json"
DEFAULT_INPUT_FOLDER = "./input"
FILE_EXTENSIONS: dict[str, str] = {"markdown": ".md", "html": ".html"}
CONFIG_FILENAMES = [".api2md.toml", ".api2md.yaml", ".api2md.yml", ".api2md.json"]
DEFAULT_STYLESHEET = "api2md.css"
