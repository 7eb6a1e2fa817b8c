"""api2md - API documentation pages from structured doc comments.

api2md renders trees of documentation nodes (parsed API comments plus
declaration metadata) as Markdown or HTML, and writes a complete set of
pages for a loaded API model.

Key Features
------------
- Markdown and HTML emitters with one override level for custom node kinds
- Code links resolved against the API model, with non-fatal warnings
- Page-per-item documenters with breadcrumbs and member tables
- JSON serialization of node trees
- Configurable command line interface

Examples
--------
Rendering a node tree:

    >>> from api2md import render_markdown
    >>> from api2md.ast import DocEmphasisSpan, DocParagraph, DocPlainText
    >>> render_markdown(DocParagraph(nodes=[DocEmphasisSpan(nodes=[DocPlainText(text="hi")], bold=True)]))
    '**hi**\\n\\n'

Writing a documentation site:

    >>> from api2md import ApiModel, MarkdownDocumenter
    >>> model = ApiModel()
    >>> model.load_package("input/widgets.api.json")
    >>> MarkdownDocumenter(model).generate_files("markdown")

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from __future__ import annotations

from typing import Optional

from api2md.ast.nodes import DocNode
from api2md.documenters import HtmlDocumenter, MarkdownDocumenter
from api2md.emitters import ApiHtmlEmitter, ApiMarkdownEmitter
from api2md.exceptions import Api2MdError
from api2md.model import ApiItem, ApiModel
from api2md.model.resolution import DeclarationReferenceResolver
from api2md.options import HtmlEmitterOptions, MarkdownEmitterOptions

__version__ = "0.1.0"

__all__ = [
    "Api2MdError",
    "ApiHtmlEmitter",
    "ApiItem",
    "ApiMarkdownEmitter",
    "ApiModel",
    "HtmlDocumenter",
    "HtmlEmitterOptions",
    "MarkdownDocumenter",
    "MarkdownEmitterOptions",
    "render_html",
    "render_markdown",
]


def render_markdown(
    node: DocNode,
    api_model: Optional[DeclarationReferenceResolver] = None,
    options: Optional[MarkdownEmitterOptions] = None,
) -> str:
    """Render a node tree as Markdown with :class:`ApiMarkdownEmitter`."""
    return ApiMarkdownEmitter(api_model).emit(node, options)


def render_html(
    node: DocNode,
    api_model: Optional[DeclarationReferenceResolver] = None,
    options: Optional[HtmlEmitterOptions] = None,
) -> str:
    """Render a node tree as an HTML fragment with :class:`ApiHtmlEmitter`."""
    return ApiHtmlEmitter(api_model).emit(node, options)
