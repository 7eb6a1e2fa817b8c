#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_ast_serialization.py
"""Unit tests for node tree JSON serialization."""

import json

import pytest

from api2md.ast import (
    DeclarationReference,
    DocCodeSpan,
    DocEmphasisSpan,
    DocErrorText,
    DocFencedCode,
    DocHeading,
    DocHtmlStartTag,
    DocLinkTag,
    DocNoteBox,
    DocParagraph,
    DocPlainText,
    DocSection,
    DocSoftBreak,
    DocTable,
    DocTableCell,
    DocTableRow,
    ast_to_dict,
    ast_to_json,
    dict_to_ast,
    json_to_ast,
)
from api2md.ast.serialization import SCHEMA_VERSION


@pytest.fixture
def sample_section() -> DocSection:
    return DocSection(
        nodes=[
            DocHeading(title="Remarks", level=2),
            DocParagraph(
                nodes=[
                    DocPlainText(text="Use "),
                    DocCodeSpan(code="render()"),
                    DocSoftBreak(),
                    DocEmphasisSpan(nodes=[DocPlainText(text="carefully")], italic=True),
                    DocLinkTag(code_destination=DeclarationReference.parse("pkg#Widget.render:2")),
                    DocHtmlStartTag(name="br", self_closing=True),
                ]
            ),
            DocFencedCode(code="const w = new Widget();", language="ts"),
            DocNoteBox(content=DocSection(nodes=[DocParagraph(nodes=[DocPlainText(text="Note")])])),
            DocTable(
                header=DocTableRow(cells=[DocTableCell(content=DocSection(nodes=[DocPlainText(text="Name")]))]),
                rows=[DocTableRow(cells=[DocTableCell()])],
            ),
        ]
    )


@pytest.mark.unit
class TestSerialization:
    """Tests for ast_to_dict and ast_to_json."""

    def test_plain_text_dict(self):
        assert ast_to_dict(DocPlainText(text="hi")) == {"node_type": "PlainText", "text": "hi"}

    def test_link_tag_stores_reference_text(self):
        link = DocLinkTag(link_text="go", code_destination=DeclarationReference.parse("pkg#A.b"))
        assert ast_to_dict(link) == {"node_type": "LinkTag", "link_text": "go", "code_destination": "pkg#A.b"}

    def test_table_without_header(self):
        data = ast_to_dict(DocTable())
        assert data == {"node_type": "Table", "header": None, "rows": []}

    def test_json_carries_schema_version(self, sample_section):
        data = json.loads(ast_to_json(sample_section))
        assert data["schema_version"] == SCHEMA_VERSION
        assert data["node_type"] == "Section"
        assert len(data["nodes"]) == 5

    def test_unknown_object_rejected(self):
        with pytest.raises(ValueError, match="Unknown node type"):
            ast_to_dict(object())  # type: ignore[arg-type]


@pytest.mark.unit
class TestDeserialization:
    """Tests for dict_to_ast and json_to_ast."""

    def test_json_round_trip(self, sample_section):
        assert json_to_ast(ast_to_json(sample_section, indent=2)) == sample_section

    def test_missing_schema_version_is_accepted(self):
        node = json_to_ast('{"node_type": "PlainText", "text": "x"}')
        assert node == DocPlainText(text="x")

    def test_unsupported_schema_version(self):
        with pytest.raises(ValueError, match="Unsupported schema version"):
            json_to_ast('{"schema_version": 99, "node_type": "PlainText", "text": "x"}')

    def test_missing_node_type(self):
        with pytest.raises(ValueError, match="node_type"):
            dict_to_ast({"text": "x"})

    def test_unknown_node_type_strict(self):
        with pytest.raises(ValueError, match="Unknown node type: Video"):
            dict_to_ast({"node_type": "Video"})

    def test_unknown_node_type_lenient(self, caplog):
        node = dict_to_ast(
            {"node_type": "Section", "nodes": [{"node_type": "Video"}, {"node_type": "PlainText", "text": "ok"}]},
            strict_mode=False,
        )
        assert isinstance(node, DocSection)
        assert isinstance(node.nodes[0], DocErrorText)
        assert node.nodes[0].error_message == "Unknown node type: Video"
        assert node.nodes[1] == DocPlainText(text="ok")
        assert "Unknown node type: Video" in caplog.text

    def test_table_row_must_hold_cells(self):
        with pytest.raises(ValueError, match="Expected a TableCell"):
            dict_to_ast({"node_type": "TableRow", "cells": [{"node_type": "PlainText", "text": "x"}]})

    def test_note_box_content_must_be_section(self):
        with pytest.raises(ValueError, match="Expected a Section"):
            dict_to_ast({"node_type": "NoteBox", "content": {"node_type": "Paragraph", "nodes": []}})

    def test_invalid_reference_text(self):
        with pytest.raises(ValueError):
            dict_to_ast({"node_type": "LinkTag", "code_destination": "pkg#A..b"})
