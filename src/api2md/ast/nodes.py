#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/api2md/ast/nodes.py
"""Document node classes for rendered API documentation.

This module defines the node taxonomy that the emitters walk. Every node is
a small dataclass holding only the fields relevant to its kind, and every
node class declares its ``kind`` discriminant so emitters can dispatch on it.

Node Kinds
----------
Base kinds, understood by every emitter:
    - PlainText, EscapedText, ErrorText
    - Paragraph, Section
    - SoftBreak, LineBreak, HorizontalRule
    - CodeSpan, FencedCode
    - LinkTag (URL or code destination)
    - HtmlStartTag, HtmlEndTag

Custom kinds, understood by the API documentation emitters:
    - Heading, NoteBox
    - Table, TableRow, TableCell
    - EmphasisSpan

Emitters never mutate nodes; a tree can be rendered any number of times.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Optional

from api2md.ast.references import DeclarationReference


class DocNodeKind(str, Enum):
    """Discriminant for every document node variant."""

    PLAIN_TEXT = "PlainText"
    ESCAPED_TEXT = "EscapedText"
    ERROR_TEXT = "ErrorText"
    PARAGRAPH = "Paragraph"
    SECTION = "Section"
    SOFT_BREAK = "SoftBreak"
    LINE_BREAK = "LineBreak"
    HORIZONTAL_RULE = "HorizontalRule"
    CODE_SPAN = "CodeSpan"
    FENCED_CODE = "FencedCode"
    LINK_TAG = "LinkTag"
    HTML_START_TAG = "HtmlStartTag"
    HTML_END_TAG = "HtmlEndTag"
    # Custom kinds
    HEADING = "Heading"
    NOTE_BOX = "NoteBox"
    TABLE = "Table"
    TABLE_ROW = "TableRow"
    TABLE_CELL = "TableCell"
    EMPHASIS_SPAN = "EmphasisSpan"


class DocNode:
    """Base class for all document nodes.

    Subclasses set the ``kind`` class variable; emitters dispatch on it.

    """

    kind: ClassVar[DocNodeKind]


# ============================================================================
# Inline text
# ============================================================================


@dataclass
class DocPlainText(DocNode):
    """A run of plain text.

    Parameters
    ----------
    text : str
        The text content, unescaped

    """

    kind: ClassVar[DocNodeKind] = DocNodeKind.PLAIN_TEXT

    text: str = ""


@dataclass
class DocEscapedText(DocNode):
    """Text that was written with an escape sequence in the source comment.

    Parameters
    ----------
    encoded_text : str
        The text as written in the source, e.g. ``"\\{"``
    decoded_text : str
        The text it stands for, e.g. ``"{"``

    """

    kind: ClassVar[DocNodeKind] = DocNodeKind.ESCAPED_TEXT

    encoded_text: str = ""
    decoded_text: str = ""


@dataclass
class DocErrorText(DocNode):
    """Source text that could not be parsed, rendered as plain text.

    Parameters
    ----------
    text : str
        The raw text
    error_message : str, default = ""
        Why the text could not be parsed

    """

    kind: ClassVar[DocNodeKind] = DocNodeKind.ERROR_TEXT

    text: str = ""
    error_message: str = ""


@dataclass
class DocSoftBreak(DocNode):
    """A line wrap in the source comment."""

    kind: ClassVar[DocNodeKind] = DocNodeKind.SOFT_BREAK


@dataclass
class DocLineBreak(DocNode):
    """An explicit (hard) line break."""

    kind: ClassVar[DocNodeKind] = DocNodeKind.LINE_BREAK


@dataclass
class DocHorizontalRule(DocNode):
    """A thematic break between blocks."""

    kind: ClassVar[DocNodeKind] = DocNodeKind.HORIZONTAL_RULE


@dataclass
class DocCodeSpan(DocNode):
    """Inline code.

    Parameters
    ----------
    code : str
        Literal code text, never escaped by the emitter's text escaping

    """

    kind: ClassVar[DocNodeKind] = DocNodeKind.CODE_SPAN

    code: str = ""


@dataclass
class DocFencedCode(DocNode):
    """A fenced code block.

    Parameters
    ----------
    code : str
        Literal code text; surrounding whitespace is trimmed when emitted
    language : str, default = ""
        Language identifier for the fence

    """

    kind: ClassVar[DocNodeKind] = DocNodeKind.FENCED_CODE

    code: str = ""
    language: str = ""


@dataclass
class DocLinkTag(DocNode):
    """A hyperlink to either a literal URL or a declared API entity.

    Exactly one of ``url_destination`` and ``code_destination`` is set.

    Parameters
    ----------
    link_text : str or None, default = None
        Display text; when None the emitter picks a default
    url_destination : str or None, default = None
        Literal URL target
    code_destination : DeclarationReference or None, default = None
        Symbolic reference resolved against the API model

    Raises
    ------
    ValueError
        If neither or both destinations are given

    """

    kind: ClassVar[DocNodeKind] = DocNodeKind.LINK_TAG

    link_text: Optional[str] = None
    url_destination: Optional[str] = None
    code_destination: Optional[DeclarationReference] = None

    def __post_init__(self) -> None:
        if (self.url_destination is None) == (self.code_destination is None):
            raise ValueError("DocLinkTag requires exactly one of url_destination or code_destination")


@dataclass
class DocHtmlStartTag(DocNode):
    """An HTML start tag passed through verbatim.

    Parameters
    ----------
    name : str
        Element name
    html_attributes : list of (str, str), default = empty list
        Attribute name/value pairs in source order
    self_closing : bool, default = False
        Whether the tag is written as ``<name />``

    """

    kind: ClassVar[DocNodeKind] = DocNodeKind.HTML_START_TAG

    name: str = ""
    html_attributes: list[tuple[str, str]] = field(default_factory=list)
    self_closing: bool = False

    def emit_as_html(self) -> str:
        attributes = "".join(f' {key}="{value}"' for key, value in self.html_attributes)
        closer = " />" if self.self_closing else ">"
        return f"<{self.name}{attributes}{closer}"


@dataclass
class DocHtmlEndTag(DocNode):
    """An HTML end tag passed through verbatim."""

    kind: ClassVar[DocNodeKind] = DocNodeKind.HTML_END_TAG

    name: str = ""

    def emit_as_html(self) -> str:
        return f"</{self.name}>"


# ============================================================================
# Containers
# ============================================================================


@dataclass
class DocParagraph(DocNode):
    """A paragraph of inline nodes."""

    kind: ClassVar[DocNodeKind] = DocNodeKind.PARAGRAPH

    nodes: list[DocNode] = field(default_factory=list)


@dataclass
class DocSection(DocNode):
    """An ordered sequence of block nodes."""

    kind: ClassVar[DocNodeKind] = DocNodeKind.SECTION

    nodes: list[DocNode] = field(default_factory=list)


# ============================================================================
# Custom nodes
# ============================================================================


@dataclass
class DocHeading(DocNode):
    """A heading inside generated documentation.

    Parameters
    ----------
    title : str
        Heading text
    level : int, default = 1
        Logical level, 1 or deeper; emitters clamp deep levels

    Raises
    ------
    ValueError
        If ``level`` is less than 1

    """

    kind: ClassVar[DocNodeKind] = DocNodeKind.HEADING

    title: str = ""
    level: int = 1

    def __post_init__(self) -> None:
        if self.level < 1:
            raise ValueError(f"Heading level must be at least 1, got {self.level}")


@dataclass
class DocNoteBox(DocNode):
    """A visually distinct block, used for warnings and notices."""

    kind: ClassVar[DocNodeKind] = DocNodeKind.NOTE_BOX

    content: DocSection = field(default_factory=DocSection)


@dataclass
class DocTableCell(DocNode):
    """A table cell holding a section of content."""

    kind: ClassVar[DocNodeKind] = DocNodeKind.TABLE_CELL

    content: DocSection = field(default_factory=DocSection)


@dataclass
class DocTableRow(DocNode):
    """A table row. Rows in one table may have different cell counts."""

    kind: ClassVar[DocNodeKind] = DocNodeKind.TABLE_ROW

    cells: list[DocTableCell] = field(default_factory=list)


@dataclass
class DocTable(DocNode):
    """A table with an optional header row.

    Parameters
    ----------
    header : DocTableRow or None, default = None
        Header row; emitters still write a header section when absent
    rows : list of DocTableRow, default = empty list
        Data rows in order

    """

    kind: ClassVar[DocNodeKind] = DocNodeKind.TABLE

    header: Optional[DocTableRow] = None
    rows: list[DocTableRow] = field(default_factory=list)

    @property
    def column_count(self) -> int:
        """Widest of the header and every row."""
        count = len(self.header.cells) if self.header else 0
        for row in self.rows:
            count = max(count, len(row.cells))
        return count


@dataclass
class DocEmphasisSpan(DocNode):
    """Inline nodes rendered bold and/or italic.

    Nested spans replace the outer flags for their children; the outer
    flags apply again after the span closes.

    """

    kind: ClassVar[DocNodeKind] = DocNodeKind.EMPHASIS_SPAN

    nodes: list[DocNode] = field(default_factory=list)
    bold: bool = False
    italic: bool = False
