#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/api2md/emitters/api_markdown.py
"""Markdown emitter for API documentation pages.

Adds Markdown renderings of the custom node kinds (headings, note boxes,
tables and emphasis spans) on top of :class:`MarkdownEmitter`.

"""

from __future__ import annotations

import logging

from api2md.ast.nodes import DocEmphasisSpan, DocHeading, DocNode, DocNodeKind, DocNoteBox, DocTable
from api2md.constants import DEFAULT_HEADING_TAG, HEADING_LEVEL_TAGS
from api2md.emitters.base import EmitterContext
from api2md.emitters.markdown import MarkdownEmitter

logger = logging.getLogger(__name__)


def heading_tag_for_level(level: int) -> str:
    """Return the HTML heading tag used for a logical heading level.

    Examples
    --------
        >>> heading_tag_for_level(1), heading_tag_for_level(3), heading_tag_for_level(7)
        ('h2', 'h3', 'h4')

    """
    return HEADING_LEVEL_TAGS.get(level, DEFAULT_HEADING_TAG)


class ApiMarkdownEmitter(MarkdownEmitter):
    """Markdown emitter that understands the custom API documentation nodes."""

    def write_node(self, node: DocNode, context: EmitterContext, siblings: bool) -> None:
        kind = node.kind

        if kind == DocNodeKind.HEADING:
            assert isinstance(node, DocHeading)
            self.write_heading(node, context)
        elif kind == DocNodeKind.NOTE_BOX:
            assert isinstance(node, DocNoteBox)
            self.write_note_box(node, context)
        elif kind == DocNodeKind.TABLE:
            assert isinstance(node, DocTable)
            self.write_table(node, context)
        elif kind == DocNodeKind.EMPHASIS_SPAN:
            assert isinstance(node, DocEmphasisSpan)
            with context.emphasis(node.bold, node.italic):
                self.write_nodes(node.nodes, context)
        else:
            super().write_node(node, context, siblings)

    def write_heading(self, heading: DocHeading, context: EmitterContext) -> None:
        writer = context.writer
        depth = int(heading_tag_for_level(heading.level)[1:])
        writer.ensure_skipped_line()
        writer.write_line("#" * depth + " " + self.get_escaped_text(heading.title))
        writer.write_line()

    def write_note_box(self, note_box: DocNoteBox, context: EmitterContext) -> None:
        writer = context.writer
        # A quote directly under a paragraph would continue that paragraph
        writer.ensure_skipped_line()
        with writer.indent(context.options.note_box_prefix):
            self.write_node(note_box.content, context, False)
            writer.ensure_new_line()
        writer.write_line()

    def write_table(self, table: DocTable, context: EmitterContext) -> None:
        writer = context.writer
        if context.options.skip_line_before_table:
            writer.ensure_skipped_line()
        else:
            writer.ensure_new_line()

        column_count = table.column_count
        with context.table():
            # Markdown requires a header row even when the table has none
            writer.write("| ")
            for i in range(column_count):
                writer.write(" ")
                if table.header is not None and i < len(table.header.cells):
                    self.write_node(table.header.cells[i].content, context, False)
                writer.write(" |")
            writer.write_line()

            writer.write("| ")
            for _ in range(column_count):
                writer.write(" --- |")
            writer.write_line()

            for row in table.rows:
                writer.write("| ")
                for cell in row.cells:
                    writer.write(" ")
                    self.write_node(cell.content, context, False)
                    writer.write(" |")
                writer.write_line()
            writer.write_line()
