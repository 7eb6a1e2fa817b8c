#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/api2md/emitters/markdown.py
"""Markdown emitter for the base document node kinds.

This module provides the generic tree walker. It renders every base node
kind as Markdown and raises :class:`UnsupportedNodeKindError` for anything
else. Subclasses intercept additional kinds in ``write_node`` and delegate
the rest back here with ``super().write_node(...)``.

"""

from __future__ import annotations

import logging
import re
from dataclasses import replace
from typing import Optional, Sequence

from api2md.ast.nodes import (
    DocCodeSpan,
    DocErrorText,
    DocEscapedText,
    DocFencedCode,
    DocHtmlEndTag,
    DocHtmlStartTag,
    DocLinkTag,
    DocNode,
    DocNodeKind,
    DocParagraph,
    DocPlainText,
    DocSection,
)
from api2md.constants import EMPHASIS_SAFE_PRECEDING, EMPHASIS_SEPARATOR
from api2md.emitters.base import BaseEmitter, EmitterContext
from api2md.emitters.references import ReferenceResolver
from api2md.exceptions import UnsupportedNodeKindError
from api2md.model.resolution import DeclarationReferenceResolver
from api2md.options.markdown import MarkdownEmitterOptions
from api2md.utils.escape import collapse_whitespace, escape_inline_code, escape_markdown, escape_markdown_table

logger = logging.getLogger(__name__)

# Splits text into leading whitespace, content and trailing whitespace
_SURROUNDING_WHITESPACE = re.compile(r"^(\s*)(.*?)(\s*)$", re.DOTALL)
_EMPTY_OR_WHITESPACE = re.compile(r"^\s?$")
_WORD_START = re.compile(r"\w")


class MarkdownEmitter(BaseEmitter[MarkdownEmitterOptions]):
    """Render document node trees as Markdown.

    Parameters
    ----------
    api_model : DeclarationReferenceResolver or None, default = None
        Resolves code links; without it every code link is reported as
        unresolvable and rendered as nothing

    Examples
    --------
        >>> emitter = MarkdownEmitter()
        >>> emitter.emit(DocParagraph(nodes=[DocPlainText(text="a*b")]))
        'a\\\\*b\\n\\n'

    """

    options_class = MarkdownEmitterOptions
    # Emphasis written as markup characters can merge with the previous run
    emphasis_needs_separator = True

    def __init__(self, api_model: Optional[DeclarationReferenceResolver] = None):
        self.api_model = api_model
        self.reference_resolver = ReferenceResolver(api_model)

    def emit(self, node: DocNode, options: Optional[MarkdownEmitterOptions] = None) -> str:
        """Render ``node`` and everything below it.

        Parameters
        ----------
        node : DocNode
            Root of the tree to render
        options : MarkdownEmitterOptions or None, default = None
            Options for this render; defaults are used when None

        Returns
        -------
        str
            The rendered text, ending with a newline unless empty

        Raises
        ------
        InvalidOptionsError
            If ``options`` is not an instance of ``options_class``
        UnsupportedNodeKindError
            If the tree contains a node kind this emitter cannot render

        """
        context = self._create_context(options)
        self.write_node(node, context, False)
        context.writer.ensure_new_line()
        return context.writer.get_text()

    # ------------------------------------------------------------------
    # Tree walking
    # ------------------------------------------------------------------

    def write_node(self, node: DocNode, context: EmitterContext, siblings: bool) -> None:
        """Write one node.

        Parameters
        ----------
        node : DocNode
            Node to write
        context : EmitterContext
            State of the current render pass
        siblings : bool
            Whether the node shares its parent with other nodes

        """
        writer = context.writer
        kind = node.kind

        if kind == DocNodeKind.PLAIN_TEXT:
            assert isinstance(node, DocPlainText)
            self.write_plain_text(node.text, context)
        elif kind == DocNodeKind.ESCAPED_TEXT:
            assert isinstance(node, DocEscapedText)
            self.write_plain_text(node.decoded_text, context)
        elif kind == DocNodeKind.ERROR_TEXT:
            assert isinstance(node, DocErrorText)
            self.write_plain_text(node.text, context)
        elif kind in (DocNodeKind.HTML_START_TAG, DocNodeKind.HTML_END_TAG):
            assert isinstance(node, (DocHtmlStartTag, DocHtmlEndTag))
            writer.write(node.emit_as_html())
        elif kind == DocNodeKind.CODE_SPAN:
            assert isinstance(node, DocCodeSpan)
            self.write_code_span(node, context)
        elif kind == DocNodeKind.LINK_TAG:
            assert isinstance(node, DocLinkTag)
            if node.code_destination is not None:
                self.write_link_tag_with_code_destination(node, context)
            else:
                self.write_link_tag_with_url_destination(node, context)
        elif kind == DocNodeKind.PARAGRAPH:
            assert isinstance(node, DocParagraph)
            self.write_paragraph(node, context, siblings)
        elif kind == DocNodeKind.SECTION:
            assert isinstance(node, DocSection)
            self.write_nodes(node.nodes, context)
        elif kind == DocNodeKind.FENCED_CODE:
            assert isinstance(node, DocFencedCode)
            writer.ensure_new_line()
            writer.write("```")
            writer.write(node.language)
            writer.write_line()
            writer.write(node.code.strip())
            writer.write_line()
            writer.write_line("```")
        elif kind == DocNodeKind.SOFT_BREAK:
            if not _EMPTY_OR_WHITESPACE.match(writer.peek_last_character()):
                writer.write(" ")
        elif kind == DocNodeKind.LINE_BREAK:
            if context.inside_table:
                writer.write("<br/>")
            else:
                writer.write_line("\\")
        elif kind == DocNodeKind.HORIZONTAL_RULE:
            writer.ensure_skipped_line()
            writer.write_line("---")
            writer.write_line()
        else:
            raise UnsupportedNodeKindError(getattr(kind, "value", str(kind)), emitter_name=type(self).__name__)

    def write_nodes(self, nodes: Sequence[DocNode], context: EmitterContext) -> None:
        """Write sibling nodes in order."""
        siblings = len(nodes) > 1
        for node in nodes:
            self.write_node(node, context, siblings)

    # ------------------------------------------------------------------
    # Node writers
    # ------------------------------------------------------------------

    def write_paragraph(self, paragraph: DocParagraph, context: EmitterContext, siblings: bool) -> None:
        writer = context.writer
        nodes = trim_paragraph_nodes(paragraph.nodes)

        if context.inside_table:
            # Markdown table cells cannot hold blank lines, so only separate paragraphs that need it
            if siblings:
                writer.write("<p>")
                self.write_nodes(nodes, context)
                writer.write("</p>")
            else:
                self.write_nodes(nodes, context)
            return

        writer.ensure_skipped_line()
        self.write_nodes(nodes, context)
        writer.ensure_skipped_line()

    def write_code_span(self, code_span: DocCodeSpan, context: EmitterContext) -> None:
        writer = context.writer
        if context.inside_table:
            writer.write("<code>")
            writer.write("</p><p>".join(self.get_table_escaped_text(code_span.code).split("\n")))
            writer.write("</code>")
        else:
            code, fence = escape_inline_code(code_span.code)
            writer.write(fence)
            writer.write(code)
            writer.write(fence)

    def write_plain_text(self, text: str, context: EmitterContext) -> None:
        """Write text, escaped, inside the currently requested emphasis.

        Surrounding whitespace is written outside the emphasis markers, since
        Markdown does not close emphasis after a space. A separator is written
        where emphasis markers would otherwise touch the text around them.

        """
        writer = context.writer
        match = _SURROUNDING_WHITESPACE.match(text)
        assert match is not None
        leading, middle, trailing = match.groups()

        starts_line = writer.at_line_start or "\n" in leading
        writer.write(leading)
        if middle:
            opening, closing = self.get_emphasis_markers(context)
            if self.emphasis_needs_separator:
                if opening:
                    needs_separator = writer.peek_last_character() not in EMPHASIS_SAFE_PRECEDING
                else:
                    follows_closing = len(writer) == context.emphasis_closed_at
                    needs_separator = follows_closing and _WORD_START.match(middle) is not None
                if needs_separator:
                    # "**one***two*" would merge and "**a.**b" would not close
                    writer.write(EMPHASIS_SEPARATOR)
            writer.write(opening)
            writer.write(self.get_escaped_text(middle, at_line_start=starts_line))
            writer.write(closing)
            if closing:
                context.emphasis_closed_at = len(writer)
        writer.write(trailing)

    def get_emphasis_markers(self, context: EmitterContext) -> tuple[str, str]:
        """Return the opening and closing emphasis markup for the current flags.

        Italic uses ``*`` rather than ``_`` so it also closes directly before
        a word character.

        """
        opening = ""
        closing = ""
        if context.bold_requested:
            opening += "**"
            closing = "**" + closing
        if context.italic_requested:
            opening += "*"
            closing = "*" + closing
        return opening, closing

    def get_escaped_text(self, text: str, at_line_start: bool = False) -> str:
        return escape_markdown(text, at_line_start=at_line_start)

    def get_table_escaped_text(self, text: str) -> str:
        return escape_markdown_table(text)

    # ------------------------------------------------------------------
    # Links
    # ------------------------------------------------------------------

    def write_link_tag_with_url_destination(self, link_tag: DocLinkTag, context: EmitterContext) -> None:
        url = link_tag.url_destination or ""
        link_text = link_tag.link_text or url
        encoded_link_text = self.get_escaped_text(collapse_whitespace(link_text))
        context.writer.write(f"[{encoded_link_text}]({url})")

    def write_link_tag_with_code_destination(self, link_tag: DocLinkTag, context: EmitterContext) -> None:
        resolved = self.reference_resolver.resolve_code_link(link_tag, context.options)
        if resolved is None:
            return
        context.writer.write(f"[{self.get_escaped_text(resolved.text)}]({resolved.filename})")


def trim_paragraph_nodes(nodes: Sequence[DocNode]) -> list[DocNode]:
    """Return paragraph children with the outer whitespace of the first and last text trimmed.

    The input nodes are left untouched; trimmed text nodes are copies.

    """
    result = list(nodes)
    if result and isinstance(result[0], DocPlainText):
        result[0] = replace(result[0], text=result[0].text.lstrip())
    if result and isinstance(result[-1], DocPlainText):
        result[-1] = replace(result[-1], text=result[-1].text.rstrip())
    return result
