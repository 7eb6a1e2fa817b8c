#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/api2md/emitters/html.py
"""HTML emitter for API documentation pages.

The emitter writes raw HTML tags for every node kind that has a natural
HTML form and falls back to :class:`MarkdownEmitter` for the rest.

"""

from __future__ import annotations

import logging
import re

from api2md.ast.nodes import (
    DocCodeSpan,
    DocEmphasisSpan,
    DocFencedCode,
    DocHeading,
    DocLinkTag,
    DocNode,
    DocNodeKind,
    DocNoteBox,
    DocParagraph,
    DocTable,
)
from api2md.emitters.api_markdown import heading_tag_for_level
from api2md.emitters.base import EmitterContext
from api2md.emitters.markdown import MarkdownEmitter, trim_paragraph_nodes
from api2md.options.html import HtmlEmitterOptions
from api2md.utils.escape import collapse_whitespace, escape_html

logger = logging.getLogger(__name__)

_EMPTY_OR_WHITESPACE = re.compile(r"^\s?$")


def _class_attribute(*classes: str) -> str:
    value = " ".join(css_class for css_class in classes if css_class)
    return f' class="{escape_html(value)}"' if value else ""


class ApiHtmlEmitter(MarkdownEmitter):
    """Emitter producing HTML fragments for API documentation pages.

    Examples
    --------
        >>> emitter = ApiHtmlEmitter()
        >>> emitter.emit(DocHeading(title="Methods", level=1), HtmlEmitterOptions())
        '<h2 class="doc-heading">Methods</h2>\\n\\n'

    """

    options_class = HtmlEmitterOptions
    emphasis_needs_separator = False

    def write_node(self, node: DocNode, context: EmitterContext, siblings: bool) -> None:
        writer = context.writer
        options: HtmlEmitterOptions = context.options
        kind = node.kind

        if kind == DocNodeKind.HEADING:
            assert isinstance(node, DocHeading)
            tag = heading_tag_for_level(node.level)
            writer.ensure_new_line()
            writer.write_line(
                f"<{tag}{_class_attribute(options.heading_css_class)}>{self.get_escaped_text(node.title)}</{tag}>"
            )
            writer.write_line()
        elif kind == DocNodeKind.NOTE_BOX:
            assert isinstance(node, DocNoteBox)
            writer.ensure_new_line()
            with writer.indent():
                writer.write_line(f"<pre{_class_attribute(options.note_box_css_class)}>")
                self.write_node(node.content, context, False)
                writer.ensure_new_line()
                writer.write_line("</pre>")
            writer.write_line()
        elif kind == DocNodeKind.TABLE:
            assert isinstance(node, DocTable)
            self.write_table(node, context)
        elif kind == DocNodeKind.EMPHASIS_SPAN:
            assert isinstance(node, DocEmphasisSpan)
            with context.emphasis(node.bold, node.italic):
                self.write_nodes(node.nodes, context)
        elif kind == DocNodeKind.CODE_SPAN:
            assert isinstance(node, DocCodeSpan)
            language_class = f"language-{options.code_language}" if options.code_language else ""
            writer.write(f"<code{_class_attribute(options.code_span_css_class, language_class)}>")
            writer.write(escape_html(node.code, enabled=options.escape_code))
            writer.write("</code>")
        elif kind == DocNodeKind.FENCED_CODE:
            assert isinstance(node, DocFencedCode)
            language = node.language or options.code_language
            writer.ensure_new_line()
            writer.write_line(f"<pre{_class_attribute(options.fenced_code_css_class)}>")
            writer.write_line(f"<code{_class_attribute(f'language-{language}' if language else '')}>")
            writer.write(escape_html(node.code.strip(), enabled=options.escape_code))
            writer.write_line("</code>")
            writer.write_line("</pre>")
        elif kind == DocNodeKind.SOFT_BREAK:
            if not _EMPTY_OR_WHITESPACE.match(writer.peek_last_character()):
                writer.write("<br />")
        elif kind == DocNodeKind.LINE_BREAK:
            writer.write("<br />")
        elif kind == DocNodeKind.HORIZONTAL_RULE:
            writer.ensure_new_line()
            writer.write_line("<hr />")
        else:
            super().write_node(node, context, siblings)

    def write_paragraph(self, paragraph: DocParagraph, context: EmitterContext, siblings: bool) -> None:
        if context.inside_table:
            super().write_paragraph(paragraph, context, siblings)
            return

        writer = context.writer
        writer.ensure_new_line()
        writer.write("<p>")
        self.write_nodes(trim_paragraph_nodes(paragraph.nodes), context)
        writer.write_line("</p>")

    def write_table(self, table: DocTable, context: EmitterContext) -> None:
        writer = context.writer
        options: HtmlEmitterOptions = context.options
        if options.skip_line_before_table:
            writer.ensure_skipped_line()
        else:
            writer.ensure_new_line()

        column_count = table.column_count
        with context.table():
            writer.write_line(f"<table{_class_attribute(options.table_css_class)}>")
            writer.write_line("<thead>")
            writer.write_line("<tr>")
            for i in range(column_count):
                writer.write("<th>")
                if table.header is not None and i < len(table.header.cells):
                    self.write_node(table.header.cells[i].content, context, False)
                writer.write("</th>")
            writer.write_line()
            writer.write_line("</tr>")
            writer.write_line("</thead>")

            for row in table.rows:
                writer.write("<tr>")
                for cell in row.cells:
                    writer.write("<td>")
                    self.write_node(cell.content, context, False)
                    writer.write("</td>")
                writer.write_line()
                writer.write_line("</tr>")
            writer.write_line("</table>")

    def get_emphasis_markers(self, context: EmitterContext) -> tuple[str, str]:
        opening = ""
        closing = ""
        if context.bold_requested:
            opening += "<b>"
            closing = "</b>" + closing
        if context.italic_requested:
            opening += "<i>"
            closing = "</i>" + closing
        return opening, closing

    def get_escaped_text(self, text: str, at_line_start: bool = False) -> str:
        return escape_html(text)

    def write_link_tag_with_url_destination(self, link_tag: DocLinkTag, context: EmitterContext) -> None:
        url = link_tag.url_destination or ""
        link_text = link_tag.link_text or url
        encoded_link_text = self.get_escaped_text(collapse_whitespace(link_text))
        context.writer.write(f'<a href="{escape_html(url)}">{encoded_link_text}</a>')

    def write_link_tag_with_code_destination(self, link_tag: DocLinkTag, context: EmitterContext) -> None:
        resolved = self.reference_resolver.resolve_code_link(link_tag, context.options)
        if resolved is None:
            return
        context.writer.write(f'<a href="{escape_html(resolved.filename)}">{self.get_escaped_text(resolved.text)}</a>')
