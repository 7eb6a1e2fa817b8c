#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/api2md/options/html.py
"""Configuration options for HTML emission."""

from __future__ import annotations

from dataclasses import dataclass, field

from api2md.constants import (
    DEFAULT_CODE_LANGUAGE,
    DEFAULT_CODE_SPAN_CSS_CLASS,
    DEFAULT_FENCED_CODE_CSS_CLASS,
    DEFAULT_HEADING_CSS_CLASS,
    DEFAULT_NOTE_BOX_CSS_CLASS,
    DEFAULT_TABLE_CSS_CLASS,
)
from api2md.options.base import BaseEmitterOptions


@dataclass(frozen=True)
class HtmlEmitterOptions(BaseEmitterOptions):
    """Options for :class:`~api2md.emitters.html.ApiHtmlEmitter`.

    Parameters
    ----------
    heading_css_class : str, default "doc-heading"
        Class attribute of heading elements.
    table_css_class : str, default "doc-table"
        Class attribute of ``<table>`` elements.
    code_span_css_class : str, default "doc-code-span"
        Class attribute of inline ``<code>`` elements, before the language class.
    fenced_code_css_class : str, default "doc-fenced-code"
        Class attribute of the ``<pre>`` around fenced code.
    note_box_css_class : str, default ""
        Class attribute of the note box ``<pre>``; omitted when empty.
    code_language : str, default "javascript"
        Language used for the ``language-X`` class of code elements.
    escape_code : bool, default False
        HTML-escape code text. Off by default so code reaches the page verbatim.

    """

    heading_css_class: str = field(default=DEFAULT_HEADING_CSS_CLASS, metadata={"help": "CSS class for headings"})
    table_css_class: str = field(default=DEFAULT_TABLE_CSS_CLASS, metadata={"help": "CSS class for tables"})
    code_span_css_class: str = field(
        default=DEFAULT_CODE_SPAN_CSS_CLASS, metadata={"help": "CSS class for inline code"}
    )
    fenced_code_css_class: str = field(
        default=DEFAULT_FENCED_CODE_CSS_CLASS, metadata={"help": "CSS class for fenced code blocks"}
    )
    note_box_css_class: str = field(
        default=DEFAULT_NOTE_BOX_CSS_CLASS, metadata={"help": "CSS class for note boxes"}
    )
    code_language: str = field(
        default=DEFAULT_CODE_LANGUAGE, metadata={"help": "Language class applied to code elements"}
    )
    escape_code: bool = field(default=False, metadata={"help": "HTML-escape the text of code elements"})
