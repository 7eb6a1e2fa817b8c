#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/api2md/ast/utils.py
"""Utility functions for working with document nodes.

Functions
---------
extract_text : Extract plain text from a node or list of nodes
section_from_text : Build a section of paragraphs from plain text
first_paragraph : Return the first paragraph of a section, if any

"""

from __future__ import annotations

from typing import Union

from api2md.ast.nodes import (
    DocCodeSpan,
    DocEmphasisSpan,
    DocErrorText,
    DocEscapedText,
    DocLinkTag,
    DocNode,
    DocNoteBox,
    DocParagraph,
    DocPlainText,
    DocSection,
    DocSoftBreak,
    DocTable,
    DocTableCell,
    DocTableRow,
)


def extract_text(node_or_nodes: Union[DocNode, list[DocNode]], joiner: str = "") -> str:
    """Extract plain text from a node or list of nodes.

    Code spans contribute their code, links their explicit text, and soft
    breaks a single space. Markup-only nodes contribute nothing.

    Parameters
    ----------
    node_or_nodes : DocNode or list of DocNode
        A single node or list of nodes to extract text from
    joiner : str, default = ""
        String used to join the text of sibling nodes

    Returns
    -------
    str
        The concatenated text

    """
    if isinstance(node_or_nodes, list):
        return joiner.join(extract_text(node, joiner) for node in node_or_nodes)

    node = node_or_nodes
    if isinstance(node, (DocPlainText, DocErrorText)):
        return node.text
    if isinstance(node, DocEscapedText):
        return node.decoded_text
    if isinstance(node, DocCodeSpan):
        return node.code
    if isinstance(node, DocSoftBreak):
        return " "
    if isinstance(node, DocLinkTag):
        return node.link_text or ""
    if isinstance(node, (DocParagraph, DocSection, DocEmphasisSpan)):
        return extract_text(node.nodes, joiner)
    if isinstance(node, (DocNoteBox, DocTableCell)):
        return extract_text(node.content, joiner)
    if isinstance(node, DocTableRow):
        return extract_text(list(node.cells), joiner)
    if isinstance(node, DocTable):
        rows = ([node.header] if node.header else []) + node.rows
        return extract_text(list(rows), joiner)
    return ""


def section_from_text(text: str) -> DocSection:
    """Build a section with one paragraph per blank-line separated block.

    Single newlines inside a block become soft breaks.

    Parameters
    ----------
    text : str
        Plain text

    Returns
    -------
    DocSection
        Section of paragraphs; empty when the text is blank

    """
    paragraphs: list[DocNode] = []
    for block in text.strip().split("\n\n"):
        lines = [line.strip() for line in block.strip().splitlines() if line.strip()]
        if not lines:
            continue
        nodes: list[DocNode] = []
        for i, line in enumerate(lines):
            if i:
                nodes.append(DocSoftBreak())
            nodes.append(DocPlainText(text=line))
        paragraphs.append(DocParagraph(nodes=nodes))
    return DocSection(nodes=paragraphs)


def first_paragraph(section: DocSection | None) -> DocParagraph | None:
    """Return the first paragraph of a section, or None."""
    if section is None:
        return None
    for node in section.nodes:
        if isinstance(node, DocParagraph):
            return node
    return None
