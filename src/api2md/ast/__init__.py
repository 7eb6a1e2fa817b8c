#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/api2md/ast/__init__.py
"""Document node tree for API documentation.

This package defines the node taxonomy rendered by the emitters, the
symbolic declaration references used by code links, and a JSON
serialization of node trees.

"""

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
from api2md.ast.references import DeclarationReference, MemberReference
from api2md.ast.serialization import ast_to_dict, ast_to_json, dict_to_ast, json_to_ast
from api2md.ast.utils import extract_text, first_paragraph, section_from_text

__all__ = [
    "DocCodeSpan",
    "DocEmphasisSpan",
    "DocErrorText",
    "DocEscapedText",
    "DocFencedCode",
    "DocHeading",
    "DocHorizontalRule",
    "DocHtmlEndTag",
    "DocHtmlStartTag",
    "DocLineBreak",
    "DocLinkTag",
    "DocNode",
    "DocNodeKind",
    "DocNoteBox",
    "DocParagraph",
    "DocPlainText",
    "DocSection",
    "DocSoftBreak",
    "DocTable",
    "DocTableCell",
    "DocTableRow",
    "DeclarationReference",
    "MemberReference",
    "ast_to_dict",
    "ast_to_json",
    "dict_to_ast",
    "json_to_ast",
    "extract_text",
    "first_paragraph",
    "section_from_text",
]
