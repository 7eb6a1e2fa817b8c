#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_api_markdown_emitter.py
"""Unit tests for ApiMarkdownEmitter.

Tests cover:
- Heading level mapping and spacing
- Note boxes rendered as block quotes
- Tables: header synthesis, ragged rows, in-cell formatting
- Emphasis spans, including nesting and adjacent runs

"""

from unittest.mock import patch

import mistune
import pytest

from api2md.ast import (
    DocCodeSpan,
    DocEmphasisSpan,
    DocHeading,
    DocLineBreak,
    DocNoteBox,
    DocParagraph,
    DocPlainText,
    DocSection,
    DocTable,
    DocTableCell,
    DocTableRow,
)
from api2md.emitters import ApiMarkdownEmitter, heading_tag_for_level
from api2md.exceptions import UnsupportedNodeKindError
from api2md.options import MarkdownEmitterOptions


def text_paragraph(text: str) -> DocParagraph:
    return DocParagraph(nodes=[DocPlainText(text=text)])


def cell(*nodes) -> DocTableCell:
    return DocTableCell(content=DocSection(nodes=list(nodes)))


def text_cell(text: str) -> DocTableCell:
    return cell(text_paragraph(text))


def row(*texts: str) -> DocTableRow:
    return DocTableRow(cells=[text_cell(t) for t in texts])


def emit(node, options=None) -> str:
    return ApiMarkdownEmitter().emit(node, options)


@pytest.mark.unit
class TestHeadings:
    """Tests for heading rendering."""

    @pytest.mark.parametrize("level,tag", [(1, "h2"), (2, "h3"), (3, "h3"), (4, "h4"), (5, "h4"), (50, "h4")])
    def test_heading_tag_for_level(self, level, tag):
        assert heading_tag_for_level(level) == tag

    @pytest.mark.parametrize("level,prefix", [(1, "##"), (2, "###"), (3, "###"), (5, "####")])
    def test_heading_prefix(self, level, prefix):
        assert emit(DocHeading(title="Methods", level=level)) == f"{prefix} Methods\n\n"

    def test_heading_title_is_escaped(self):
        assert emit(DocHeading(title="my_func")) == "## my\\_func\n\n"

    def test_heading_between_paragraphs(self):
        section = DocSection(nodes=[text_paragraph("x"), DocHeading(title="T"), text_paragraph("y")])
        assert emit(section) == "x\n\n## T\n\ny\n\n"

    def test_heading_after_inline_text(self):
        section = DocSection(nodes=[DocPlainText(text="x"), DocHeading(title="T")])
        assert emit(section) == "x\n\n## T\n\n"


@pytest.mark.unit
class TestNoteBoxes:
    """Tests for note box rendering."""

    def test_single_paragraph(self):
        node = DocNoteBox(content=DocSection(nodes=[text_paragraph("Note")]))
        assert emit(node) == "> Note\n>\n\n"

    def test_quote_stays_contiguous(self):
        node = DocNoteBox(content=DocSection(nodes=[text_paragraph("A"), text_paragraph("B")]))
        assert emit(node) == "> A\n>\n> B\n>\n\n"

    def test_note_box_after_paragraph(self):
        section = DocSection(nodes=[text_paragraph("x"), DocNoteBox(content=DocSection(nodes=[text_paragraph("n")]))])
        assert emit(section) == "x\n\n> n\n>\n\n"

    def test_note_box_after_inline_text(self):
        note_box = DocNoteBox(content=DocSection(nodes=[text_paragraph("n")]))
        section = DocSection(nodes=[DocPlainText(text="x"), note_box])
        assert emit(section).startswith("x\n\n> n\n")


@pytest.mark.unit
class TestTables:
    """Tests for table rendering."""

    def test_ragged_rows(self):
        table = DocTable(header=row("Name", "Kind"), rows=[row("a", "b"), row("c")])
        assert emit(table) == "|  Name | Kind |\n|  --- | --- |\n|  a | b |\n|  c |\n\n"

    def test_header_covers_widest_row(self):
        table = DocTable(header=row("Name"), rows=[row("a", "b")])
        assert emit(table).splitlines()[:2] == ["|  Name |  |", "|  --- | --- |"]

    def test_header_is_synthesized_when_missing(self):
        table = DocTable(rows=[row("a", "b")])
        assert emit(table) == "|   |  |\n|  --- | --- |\n|  a | b |\n\n"

    def test_blank_line_before_table_by_default(self):
        section = DocSection(nodes=[DocPlainText(text="x"), DocTable(rows=[row("a")])])
        assert emit(section).startswith("x\n\n|   |\n")

    def test_blank_line_before_table_can_be_disabled(self):
        section = DocSection(nodes=[DocPlainText(text="x"), DocTable(rows=[row("a")])])
        options = MarkdownEmitterOptions(skip_line_before_table=False)
        assert emit(section, options).startswith("x\n|   |\n")

    def test_cell_text_is_escaped(self):
        table = DocTable(rows=[row("a|b")])
        assert "|  a\\|b |" in emit(table)

    def test_code_span_in_cell(self):
        table = DocTable(rows=[DocTableRow(cells=[cell(DocParagraph(nodes=[DocCodeSpan(code="a|b<c>")]))])])
        assert "|  <code>a&#124;b&lt;c&gt;</code> |" in emit(table)

    def test_code_span_in_cell_uses_table_escaping(self):
        table = DocTable(rows=[DocTableRow(cells=[cell(DocParagraph(nodes=[DocCodeSpan(code="a|b")]))])])
        with patch.object(ApiMarkdownEmitter, "get_table_escaped_text", return_value="ESCAPED") as escaper:
            result = emit(table)
        escaper.assert_called_once_with("a|b")
        assert "|  <code>ESCAPED</code> |" in result

    def test_multiline_code_span_in_cell(self):
        table = DocTable(rows=[DocTableRow(cells=[cell(DocParagraph(nodes=[DocCodeSpan(code="x\ny")]))])])
        assert "|  <code>x</p><p>y</code> |" in emit(table)

    def test_line_break_in_cell(self):
        content = DocParagraph(nodes=[DocPlainText(text="a"), DocLineBreak(), DocPlainText(text="b")])
        table = DocTable(rows=[DocTableRow(cells=[cell(content)])])
        assert "|  a<br/>b |" in emit(table)

    def test_sibling_paragraphs_in_cell(self):
        table = DocTable(rows=[DocTableRow(cells=[cell(text_paragraph("one"), text_paragraph("two"))])])
        assert "|  <p>one</p><p>two</p> |" in emit(table)

    def test_table_flag_is_restored(self):
        section = DocSection(
            nodes=[
                DocTable(rows=[DocTableRow(cells=[cell(DocParagraph(nodes=[DocCodeSpan(code="x")]))])]),
                DocParagraph(nodes=[DocCodeSpan(code="y")]),
            ]
        )
        assert emit(section) == "|   |\n|  --- |\n|  <code>x</code> |\n\n`y`\n\n"

    def test_bare_row_is_unsupported(self):
        with pytest.raises(UnsupportedNodeKindError, match="TableRow"):
            emit(row("a"))


@pytest.mark.unit
class TestEmphasis:
    """Tests for emphasis spans."""

    def test_bold(self):
        node = DocParagraph(nodes=[DocEmphasisSpan(nodes=[DocPlainText(text="hi")], bold=True)])
        assert emit(node) == "**hi**\n\n"

    def test_bold_and_italic(self):
        node = DocParagraph(nodes=[DocEmphasisSpan(nodes=[DocPlainText(text="x")], bold=True, italic=True)])
        assert emit(node) == "***x***\n\n"

    def test_adjacent_runs_are_separated(self):
        node = DocParagraph(
            nodes=[
                DocEmphasisSpan(nodes=[DocPlainText(text="one")], bold=True),
                DocEmphasisSpan(nodes=[DocPlainText(text="two")], italic=True),
            ]
        )
        assert emit(node) == "**one**<!-- -->*two*\n\n"

    @pytest.mark.parametrize(
        "span,expected,tag",
        [
            (DocEmphasisSpan(nodes=[DocPlainText(text="a")], italic=True), "*a*<!-- -->b\n\n", "<em>a</em>"),
            (DocEmphasisSpan(nodes=[DocPlainText(text="a.")], bold=True), "**a.**<!-- -->b\n\n", "<strong>a.</strong>"),
        ],
    )
    def test_word_directly_after_span_is_separated(self, span, expected, tag):
        result = emit(DocParagraph(nodes=[span, DocPlainText(text="b")]))
        assert result == expected
        assert tag in mistune.html(result)

    def test_punctuation_after_span_needs_no_separator(self):
        node = DocParagraph(
            nodes=[DocEmphasisSpan(nodes=[DocPlainText(text="a")], bold=True), DocPlainText(text=", then")]
        )
        assert emit(node) == "**a**, then\n\n"

    def test_italic_inside_word(self):
        node = DocParagraph(
            nodes=[DocPlainText(text="un"), DocEmphasisSpan(nodes=[DocPlainText(text="do")], italic=True)]
        )
        result = emit(node)
        assert result == "un<!-- -->*do*\n\n"
        assert "<em>do</em>" in mistune.html(result)

    def test_whitespace_stays_outside_markers(self):
        node = DocParagraph(
            nodes=[
                DocPlainText(text="x"),
                DocEmphasisSpan(nodes=[DocPlainText(text=" padded ")], bold=True),
                DocPlainText(text="y"),
            ]
        )
        assert emit(node) == "x **padded** y\n\n"

    def test_nested_span_replaces_then_restores_flags(self):
        node = DocParagraph(
            nodes=[
                DocEmphasisSpan(
                    nodes=[
                        DocPlainText(text="a"),
                        DocEmphasisSpan(nodes=[DocPlainText(text="b")], italic=True),
                        DocPlainText(text="c"),
                    ],
                    bold=True,
                ),
                DocPlainText(text=" d"),
            ]
        )
        assert emit(node) == "**a**<!-- -->*b*<!-- -->**c** d\n\n"

    def test_whitespace_only_text_has_no_markers(self):
        node = DocParagraph(
            nodes=[
                DocPlainText(text="a"),
                DocEmphasisSpan(nodes=[DocPlainText(text="  ")], bold=True),
                DocPlainText(text="b"),
            ]
        )
        assert emit(node) == "a  b\n\n"
