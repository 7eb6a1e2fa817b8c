#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/api2md/utils/escape.py
"""Format-specific text escaping utilities.

This module provides the escape functions used by the emitters to make
plain text safe for the output syntax.

"""

from __future__ import annotations

import html
import re

_MARKDOWN_SPECIAL_CHARS = re.compile(r"[*#\[\]_|`~]")
_WHITESPACE_RUN = re.compile(r"\s+")
# A line starting with one of these reads as a list item or a setext underline
_LINE_START_MARKER = re.compile(r"^([ \t]*)(?:([-+=])|([0-9]+)([.)]))", re.MULTILINE)


def escape_markdown(text: str, *, at_line_start: bool = False) -> str:
    r"""Escape text so that Markdown renders it literally.

    Backslashes and characters with syntactic meaning are backslash-escaped,
    horizontal-rule dashes are broken up, and ``&``, ``<`` and ``>`` become
    entities so the text cannot open HTML tags. List markers (``-``, ``+``,
    ``1.``, ``2)``) and setext underlines (``=``) are escaped where they
    begin a line.

    Parameters
    ----------
    text : str
        Text to escape
    at_line_start : bool, default = False
        The text will be written at the start of a line, so its first line
        is checked for line-start markers too. Lines after an embedded
        newline are always checked.

    Returns
    -------
    str
        Escaped text safe for Markdown

    Examples
    --------
        >>> escape_markdown("a*b*_c_")
        'a\\*b\\*\\_c\\_'
        >>> escape_markdown("x < y")
        'x &lt; y'
        >>> escape_markdown("1. first", at_line_start=True)
        '1\\. first'

    """
    if not text:
        return text

    result = text.replace("\\", "\\\\")
    result = _MARKDOWN_SPECIAL_CHARS.sub(lambda match: "\\" + match.group(0), result)
    result = result.replace("---", "\\-\\-\\-")
    result = result.replace("&", "&amp;")
    result = result.replace("<", "&lt;")
    result = result.replace(">", "&gt;")

    def escape_marker(match: re.Match[str]) -> str:
        if match.start() == 0 and not at_line_start:
            return match.group(0)
        indent, sign, digits, delimiter = match.groups()
        if sign:
            return f"{indent}\\{sign}"
        return f"{indent}{digits}\\{delimiter}"

    return _LINE_START_MARKER.sub(escape_marker, result)


def escape_inline_code(code: str, delimiter: str = "`") -> tuple[str, str]:
    """Pick a code span fence that the code itself cannot close.

    The fence is one delimiter longer than the longest delimiter run inside
    the code. Code that begins or ends with the delimiter is padded with a
    space on both sides, which Markdown strips again when rendering.

    Parameters
    ----------
    code : str
        Code span content
    delimiter : str, default = '`'
        Fence character

    Returns
    -------
    tuple[str, str]
        (code_to_write, fence)

    Examples
    --------
        >>> escape_inline_code("a.b")
        ('a.b', '`')
        >>> escape_inline_code("a`b")
        ('a`b', '``')
        >>> escape_inline_code("`x`")
        (' `x` ', '``')

    """
    longest_run = max((len(run) for run in re.findall(f"{re.escape(delimiter)}+", code)), default=0)
    fence = delimiter * (longest_run + 1)
    if code.startswith(delimiter) or code.endswith(delimiter):
        code = f" {code} "
    return code, fence


def escape_markdown_table(text: str) -> str:
    """Escape text for use inside a Markdown table cell.

    Table cells cannot contain raw pipes, and HTML entities are used rather
    than backslashes so the text also survives inside ``<code>`` elements.

    Parameters
    ----------
    text : str
        Text to escape

    Returns
    -------
    str
        Escaped text safe for a table cell

    """
    if not text:
        return text

    result = text.replace("&", "&amp;")
    result = result.replace('"', "&quot;")
    result = result.replace("<", "&lt;")
    result = result.replace(">", "&gt;")
    result = result.replace("|", "&#124;")
    return result


def escape_html(text: str, *, enabled: bool = True) -> str:
    """Escape HTML special characters when enabled."""
    if not enabled:
        return text
    return html.escape(text)


def collapse_whitespace(text: str) -> str:
    """Collapse every run of whitespace into a single space."""
    return _WHITESPACE_RUN.sub(" ", text)
