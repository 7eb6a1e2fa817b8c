#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/api2md/ast/serialization.py
"""JSON serialization and deserialization for document nodes.

API model files store pre-parsed doc comments in this form, so that the
documenters can render them without a comment parser. Each node becomes a
dictionary with a ``node_type`` field (the node kind) plus its own fields.

Examples
--------
Serialize a section to JSON:

    >>> from api2md.ast import DocParagraph, DocPlainText, DocSection
    >>> from api2md.ast.serialization import ast_to_json
    >>> section = DocSection(nodes=[DocParagraph(nodes=[DocPlainText(text="Hello")])])
    >>> json_str = ast_to_json(section)

Deserialize it back:

    >>> from api2md.ast.serialization import json_to_ast
    >>> json_to_ast(json_str) == section
    True

"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, cast

from api2md.ast.nodes import (
    DocCodeSpan,
    DocEmphasisSpan,
    DocErrorText,
    DocEscapedText,
    DocFencedCode,
    DocHeading,
    DocHorizontalRule,
    DocHtmlEndTag,
    DocHtmlStartTag,
    DocLineBreak,
    DocLinkTag,
    DocNode,
    DocNodeKind,
    DocNoteBox,
    DocParagraph,
    DocPlainText,
    DocSection,
    DocSoftBreak,
    DocTable,
    DocTableCell,
    DocTableRow,
)
from api2md.ast.references import DeclarationReference

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1


# ============================================================================
# Serialization
# ============================================================================


def _serialize_nodes(node: DocParagraph | DocSection) -> dict[str, Any]:
    return {"node_type": node.kind.value, "nodes": [ast_to_dict(child) for child in node.nodes]}


def _serialize_link_tag(node: DocLinkTag) -> dict[str, Any]:
    result: dict[str, Any] = {"node_type": node.kind.value}
    if node.link_text is not None:
        result["link_text"] = node.link_text
    if node.url_destination is not None:
        result["url_destination"] = node.url_destination
    if node.code_destination is not None:
        result["code_destination"] = node.code_destination.emit_as_tsdoc()
    return result


def _serialize_table(node: DocTable) -> dict[str, Any]:
    return {
        "node_type": node.kind.value,
        "header": ast_to_dict(node.header) if node.header else None,
        "rows": [ast_to_dict(row) for row in node.rows],
    }


_SERIALIZATION_DISPATCH: dict[DocNodeKind, Callable[[Any], dict[str, Any]]] = {
    DocNodeKind.PLAIN_TEXT: lambda n: {"node_type": n.kind.value, "text": n.text},
    DocNodeKind.ESCAPED_TEXT: lambda n: {
        "node_type": n.kind.value,
        "encoded_text": n.encoded_text,
        "decoded_text": n.decoded_text,
    },
    DocNodeKind.ERROR_TEXT: lambda n: {"node_type": n.kind.value, "text": n.text, "error_message": n.error_message},
    DocNodeKind.PARAGRAPH: _serialize_nodes,
    DocNodeKind.SECTION: _serialize_nodes,
    DocNodeKind.SOFT_BREAK: lambda n: {"node_type": n.kind.value},
    DocNodeKind.LINE_BREAK: lambda n: {"node_type": n.kind.value},
    DocNodeKind.HORIZONTAL_RULE: lambda n: {"node_type": n.kind.value},
    DocNodeKind.CODE_SPAN: lambda n: {"node_type": n.kind.value, "code": n.code},
    DocNodeKind.FENCED_CODE: lambda n: {"node_type": n.kind.value, "code": n.code, "language": n.language},
    DocNodeKind.LINK_TAG: _serialize_link_tag,
    DocNodeKind.HTML_START_TAG: lambda n: {
        "node_type": n.kind.value,
        "name": n.name,
        "html_attributes": [list(pair) for pair in n.html_attributes],
        "self_closing": n.self_closing,
    },
    DocNodeKind.HTML_END_TAG: lambda n: {"node_type": n.kind.value, "name": n.name},
    DocNodeKind.HEADING: lambda n: {"node_type": n.kind.value, "title": n.title, "level": n.level},
    DocNodeKind.NOTE_BOX: lambda n: {"node_type": n.kind.value, "content": ast_to_dict(n.content)},
    DocNodeKind.TABLE: _serialize_table,
    DocNodeKind.TABLE_ROW: lambda n: {"node_type": n.kind.value, "cells": [ast_to_dict(c) for c in n.cells]},
    DocNodeKind.TABLE_CELL: lambda n: {"node_type": n.kind.value, "content": ast_to_dict(n.content)},
    DocNodeKind.EMPHASIS_SPAN: lambda n: {
        "node_type": n.kind.value,
        "bold": n.bold,
        "italic": n.italic,
        "nodes": [ast_to_dict(child) for child in n.nodes],
    },
}


def ast_to_dict(node: DocNode) -> dict[str, Any]:
    """Convert a document node to a dictionary representation.

    Parameters
    ----------
    node : DocNode
        The node to convert

    Returns
    -------
    dict
        Dictionary representation of the node

    Raises
    ------
    ValueError
        If the node kind has no serializer

    """
    serializer = _SERIALIZATION_DISPATCH.get(getattr(node, "kind", None))  # type: ignore[arg-type]
    if serializer is None:
        raise ValueError(f"Unknown node type for serialization: {type(node).__name__}")
    return serializer(node)


# ============================================================================
# Deserialization
# ============================================================================


def _deserialize_children(data: list[dict[str, Any]], strict_mode: bool) -> list[DocNode]:
    return [dict_to_ast(child, strict_mode=strict_mode) for child in data]


def _deserialize_section(data: dict[str, Any] | None, strict_mode: bool) -> DocSection:
    if data is None:
        return DocSection()
    node = dict_to_ast(data, strict_mode=strict_mode)
    if not isinstance(node, DocSection):
        raise ValueError(f"Expected a Section, got {data.get('node_type')}")
    return node


def _deserialize_link_tag(data: dict[str, Any], strict_mode: bool) -> DocLinkTag:
    code_destination = data.get("code_destination")
    return DocLinkTag(
        link_text=data.get("link_text"),
        url_destination=data.get("url_destination"),
        code_destination=DeclarationReference.parse(code_destination) if code_destination else None,
    )


def _deserialize_table_row(data: dict[str, Any], strict_mode: bool) -> DocTableRow:
    cells = []
    for cell_data in data.get("cells", []):
        cell = dict_to_ast(cell_data, strict_mode=strict_mode)
        if not isinstance(cell, DocTableCell):
            raise ValueError(f"Expected a TableCell, got {cell_data.get('node_type')}")
        cells.append(cell)
    return DocTableRow(cells=cells)


def _deserialize_table(data: dict[str, Any], strict_mode: bool) -> DocTable:
    header_data = data.get("header")
    return DocTable(
        header=_deserialize_table_row(header_data, strict_mode) if header_data else None,
        rows=[_deserialize_table_row(row, strict_mode) for row in data.get("rows", [])],
    )


_DESERIALIZATION_DISPATCH: dict[str, Callable[[dict[str, Any], bool], DocNode]] = {
    DocNodeKind.PLAIN_TEXT.value: lambda d, s: DocPlainText(text=d.get("text", "")),
    DocNodeKind.ESCAPED_TEXT.value: lambda d, s: DocEscapedText(
        encoded_text=d.get("encoded_text", ""), decoded_text=d.get("decoded_text", "")
    ),
    DocNodeKind.ERROR_TEXT.value: lambda d, s: DocErrorText(
        text=d.get("text", ""), error_message=d.get("error_message", "")
    ),
    DocNodeKind.PARAGRAPH.value: lambda d, s: DocParagraph(nodes=_deserialize_children(d.get("nodes", []), s)),
    DocNodeKind.SECTION.value: lambda d, s: DocSection(nodes=_deserialize_children(d.get("nodes", []), s)),
    DocNodeKind.SOFT_BREAK.value: lambda d, s: DocSoftBreak(),
    DocNodeKind.LINE_BREAK.value: lambda d, s: DocLineBreak(),
    DocNodeKind.HORIZONTAL_RULE.value: lambda d, s: DocHorizontalRule(),
    DocNodeKind.CODE_SPAN.value: lambda d, s: DocCodeSpan(code=d.get("code", "")),
    DocNodeKind.FENCED_CODE.value: lambda d, s: DocFencedCode(code=d.get("code", ""), language=d.get("language", "")),
    DocNodeKind.LINK_TAG.value: _deserialize_link_tag,
    DocNodeKind.HTML_START_TAG.value: lambda d, s: DocHtmlStartTag(
        name=d.get("name", ""),
        html_attributes=[(str(k), str(v)) for k, v in d.get("html_attributes", [])],
        self_closing=bool(d.get("self_closing", False)),
    ),
    DocNodeKind.HTML_END_TAG.value: lambda d, s: DocHtmlEndTag(name=d.get("name", "")),
    DocNodeKind.HEADING.value: lambda d, s: DocHeading(title=d.get("title", ""), level=int(d.get("level", 1))),
    DocNodeKind.NOTE_BOX.value: lambda d, s: DocNoteBox(content=_deserialize_section(d.get("content"), s)),
    DocNodeKind.TABLE.value: _deserialize_table,
    DocNodeKind.TABLE_ROW.value: _deserialize_table_row,
    DocNodeKind.TABLE_CELL.value: lambda d, s: DocTableCell(content=_deserialize_section(d.get("content"), s)),
    DocNodeKind.EMPHASIS_SPAN.value: lambda d, s: DocEmphasisSpan(
        nodes=_deserialize_children(d.get("nodes", []), s),
        bold=bool(d.get("bold", False)),
        italic=bool(d.get("italic", False)),
    ),
}


def dict_to_ast(data: dict[str, Any], strict_mode: bool = True) -> DocNode:
    """Convert a dictionary representation back to a document node.

    Parameters
    ----------
    data : dict
        Dictionary representation of a node
    strict_mode : bool, default True
        If True, raise ValueError on unknown node types.
        If False, replace unknown nodes with an ErrorText node.

    Returns
    -------
    DocNode
        Reconstructed node

    Raises
    ------
    ValueError
        If the dictionary has no or an unknown node type and strict_mode is True

    """
    node_type = data.get("node_type")
    deserializer = _DESERIALIZATION_DISPATCH.get(node_type) if node_type else None
    if deserializer is None:
        message = f"Unknown node type: {node_type}" if node_type else "Dictionary must contain 'node_type' field"
        if strict_mode:
            raise ValueError(message)
        logger.warning(f"{message}, skipping")
        return DocErrorText(text="", error_message=message)

    return deserializer(data, strict_mode)


def ast_to_json(node: DocNode, indent: int | None = None) -> str:
    """Serialize a node to a JSON string with a schema version.

    Parameters
    ----------
    node : DocNode
        The node to serialize
    indent : int or None, default = None
        Number of spaces for indentation (None for compact format)

    Returns
    -------
    str
        JSON string representation

    """
    versioned_dict = {"schema_version": SCHEMA_VERSION, **ast_to_dict(node)}
    return json.dumps(versioned_dict, indent=indent, ensure_ascii=False)


def json_to_ast(json_str: str, strict_mode: bool = True) -> DocNode:
    """Deserialize a JSON string to a document node.

    JSON without a ``schema_version`` field is read as version 1.

    Parameters
    ----------
    json_str : str
        JSON string representation
    strict_mode : bool, default True
        Passed through to :func:`dict_to_ast`

    Returns
    -------
    DocNode
        Reconstructed node

    Raises
    ------
    ValueError
        If the schema version is unsupported or a node type is unknown
    json.JSONDecodeError
        If the JSON string is malformed

    """
    data = cast(dict[str, Any], json.loads(json_str))
    schema_version = data.pop("schema_version", SCHEMA_VERSION)
    if schema_version != SCHEMA_VERSION:
        raise ValueError(
            f"Unsupported schema version: {schema_version}. "
            f"This version of api2md supports schema version {SCHEMA_VERSION} only."
        )
    return dict_to_ast(data, strict_mode=strict_mode)


__all__ = [
    "ast_to_dict",
    "dict_to_ast",
    "ast_to_json",
    "json_to_ast",
]
