#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/api2md/emitters/__init__.py
"""Emitters that render document node trees as Markdown or HTML.

Examples
--------
    >>> from api2md.ast import DocParagraph, DocPlainText
    >>> from api2md.emitters import ApiMarkdownEmitter
    >>> ApiMarkdownEmitter().emit(DocParagraph(nodes=[DocPlainText(text="Hello")]))
    'Hello\\n\\n'

"""

from api2md.emitters.api_markdown import ApiMarkdownEmitter, heading_tag_for_level
from api2md.emitters.base import BaseEmitter, EmitterContext
from api2md.emitters.html import ApiHtmlEmitter
from api2md.emitters.markdown import MarkdownEmitter
from api2md.emitters.references import ReferenceResolver, ResolvedLink

__all__ = [
    "ApiHtmlEmitter",
    "ApiMarkdownEmitter",
    "BaseEmitter",
    "EmitterContext",
    "MarkdownEmitter",
    "ReferenceResolver",
    "ResolvedLink",
    "heading_tag_for_level",
]
