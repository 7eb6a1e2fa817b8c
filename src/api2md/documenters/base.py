#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/api2md/documenters/base.py
"""Base class for documenters.

A documenter walks an :class:`~api2md.model.ApiModel`, builds one document
node tree per documented item and writes each one through an emitter into
its own file. Subclasses choose the emitter, the file extension and how a
rendered body is wrapped into a complete page.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator, Optional, Union

from api2md.ast.nodes import (
    DocEmphasisSpan,
    DocFencedCode,
    DocHeading,
    DocLinkTag,
    DocNode,
    DocNoteBox,
    DocParagraph,
    DocPlainText,
    DocSection,
    DocTable,
    DocTableCell,
    DocTableRow,
)
from api2md.ast.references import DeclarationReference
from api2md.ast.utils import first_paragraph
from api2md.emitters.markdown import MarkdownEmitter
from api2md.model.items import CALLABLE_KINDS, ApiItem, ApiItemKind, ReleaseTag
from api2md.model.model import ApiModel
from api2md.options.base import BaseEmitterOptions
from api2md.utils.filenames import get_safe_filename_for_name, get_unscoped_package_name
from api2md.utils.io_utils import ensure_empty_folder, write_text_file

logger = logging.getLogger(__name__)

BETA_WARNING = (
    "This API is provided as a preview for developers and may change based on feedback that we receive. "
    "Do not use this API in a production environment."
)
DEPRECATED_PREFIX = "Warning: This API is now obsolete."
SIGNATURE_LANGUAGE = "typescript"

# Kinds that get no page of their own; they only appear in their parent's tables
_UNPAGED_KINDS = frozenset({ApiItemKind.ENTRY_POINT, ApiItemKind.ENUM_MEMBER})

# Member table headings, in page order
_MEMBER_GROUPS: list[tuple[ApiItemKind, str]] = [
    (ApiItemKind.PACKAGE, "Packages"),
    (ApiItemKind.NAMESPACE, "Namespaces"),
    (ApiItemKind.CLASS, "Classes"),
    (ApiItemKind.INTERFACE, "Interfaces"),
    (ApiItemKind.ENUM, "Enumerations"),
    (ApiItemKind.FUNCTION, "Functions"),
    (ApiItemKind.TYPE_ALIAS, "Type Aliases"),
    (ApiItemKind.VARIABLE, "Variables"),
    (ApiItemKind.CONSTRUCTOR, "Constructors"),
    (ApiItemKind.PROPERTY, "Properties"),
    (ApiItemKind.METHOD, "Methods"),
    (ApiItemKind.ENUM_MEMBER, "Enumeration Members"),
]

_KIND_LABELS: dict[ApiItemKind, str] = {
    ApiItemKind.ENTRY_POINT: "entry point",
    ApiItemKind.ENUM_MEMBER: "enumeration member",
    ApiItemKind.ENUM: "enumeration",
    ApiItemKind.TYPE_ALIAS: "type alias",
}


def get_kind_label(kind: ApiItemKind) -> str:
    """Return the lowercase label used for ``kind`` in titles and tables."""
    return _KIND_LABELS.get(kind, kind.value.lower())


class BaseDocumenter(ABC):
    """Generate one documentation page per API item.

    Parameters
    ----------
    api_model : ApiModel
        The loaded model to document
    emitter_options : BaseEmitterOptions or None, default = None
        Options passed to the emitter for every page; ``context_api_item``
        and ``get_filename_for_api_item`` are set per page

    """

    file_extension: str = ""

    def __init__(self, api_model: ApiModel, emitter_options: Optional[BaseEmitterOptions] = None):
        self.api_model = api_model
        self.emitter = self.create_emitter()
        self.emitter_options = emitter_options if emitter_options is not None else self.emitter.options_class()

    @abstractmethod
    def create_emitter(self) -> MarkdownEmitter:
        """Return the emitter used to render page bodies."""
        ...

    @abstractmethod
    def render_page(self, api_item: ApiItem, title: str, body: str) -> str:
        """Wrap a rendered page body into the final file content."""
        ...

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def generate_files(self, output_folder: Union[str, Path]) -> list[Path]:
        """Write every page into ``output_folder`` and return the written paths.

        The folder is created if missing and emptied before writing.

        Raises
        ------
        OutputWriteError
            If the folder cannot be prepared or a page cannot be written

        """
        output_folder = Path(output_folder)
        logger.info(f"Deleting old output from {output_folder}")
        ensure_empty_folder(output_folder)

        written: list[Path] = []
        for api_item in self.iter_documented_items():
            path = output_folder / self.get_filename_for_api_item(api_item)
            logger.debug(f"Writing {path}")
            write_text_file(path, self.render_api_item_page(api_item))
            written.append(path)

        logger.info(f"Wrote {len(written)} pages to {output_folder}")
        if self.reference_warnings:
            logger.info(f"{len(self.reference_warnings)} link warnings were reported")
        return written

    @property
    def reference_warnings(self) -> list[str]:
        return self.emitter.reference_resolver.warnings

    def iter_documented_items(self) -> Iterator[ApiItem]:
        """Yield the model followed by every item that gets its own page, depth first."""

        def walk(item: ApiItem) -> Iterator[ApiItem]:
            if item.kind not in _UNPAGED_KINDS:
                yield item
            for member in item.members:
                yield from walk(member)

        yield from walk(self.api_model)

    def has_page(self, api_item: ApiItem) -> bool:
        return api_item.kind not in _UNPAGED_KINDS

    # ------------------------------------------------------------------
    # File names
    # ------------------------------------------------------------------

    def get_filename_for_api_item(self, api_item: ApiItem) -> str:
        """Return the file name of ``api_item``'s page.

        The model maps to ``index``; every other item is named after its
        unscoped package followed by each level of its hierarchy, e.g.
        ``widgets.widget.render_1.md`` for the second ``render`` overload.

        """
        if api_item.kind == ApiItemKind.MODEL:
            return "index" + self.file_extension

        base_name = ""
        for item in api_item.get_hierarchy():
            if item.kind in (ApiItemKind.MODEL, ApiItemKind.ENTRY_POINT):
                continue
            if item.kind == ApiItemKind.PACKAGE:
                base_name = get_safe_filename_for_name(get_unscoped_package_name(item.display_name))
                continue
            qualified_name = get_safe_filename_for_name(item.display_name)
            if item.kind in CALLABLE_KINDS and item.overload_index > 1:
                qualified_name += f"_{item.overload_index - 1}"
            base_name += "." + qualified_name
        return base_name + self.file_extension

    def get_link_filename_for_api_item(self, api_item: ApiItem) -> str | None:
        """Return the relative link to ``api_item``'s page, or None if it has no page."""
        if not self.has_page(api_item):
            return None
        return "./" + self.get_filename_for_api_item(api_item)

    # ------------------------------------------------------------------
    # Page content
    # ------------------------------------------------------------------

    def render_api_item_page(self, api_item: ApiItem) -> str:
        options = self.emitter_options.create_updated(
            context_api_item=api_item,
            get_filename_for_api_item=self.get_link_filename_for_api_item,
        )
        body = self.emitter.emit(self.build_page_section(api_item), options)
        return self.render_page(api_item, self.get_page_title(api_item), body)

    def get_page_title(self, api_item: ApiItem) -> str:
        if api_item.kind == ApiItemKind.MODEL:
            return "API Reference"
        if api_item.kind == ApiItemKind.PACKAGE:
            return f"{api_item.display_name} package"
        return f"{api_item.get_scoped_name_within_package()} {get_kind_label(api_item.kind)}"

    def build_page_section(self, api_item: ApiItem) -> DocSection:
        """Build the node tree for the body of ``api_item``'s page."""
        section = DocSection()
        nodes = section.nodes

        nodes.append(self.build_breadcrumb(api_item))

        if api_item.release_tag == ReleaseTag.BETA:
            nodes.append(DocParagraph(nodes=[DocEmphasisSpan(nodes=[DocPlainText(text=BETA_WARNING)], bold=True)]))

        if api_item.deprecated is not None:
            notice = DocParagraph(nodes=[DocEmphasisSpan(nodes=[DocPlainText(text=DEPRECATED_PREFIX)], bold=True)])
            nodes.append(DocNoteBox(content=DocSection(nodes=[notice, *api_item.deprecated.nodes])))

        if api_item.summary is not None:
            nodes.extend(api_item.summary.nodes)

        if api_item.signature:
            nodes.append(DocParagraph(nodes=[DocEmphasisSpan(nodes=[DocPlainText(text="Signature:")], bold=True)]))
            nodes.append(DocFencedCode(code=api_item.signature, language=SIGNATURE_LANGUAGE))

        if api_item.remarks is not None:
            nodes.append(DocHeading(title="Remarks"))
            nodes.extend(api_item.remarks.nodes)

        nodes.extend(self.build_member_tables(api_item))
        return section

    def build_breadcrumb(self, api_item: ApiItem) -> DocParagraph:
        """Build the ``Home > package > Class > member`` trail of links."""
        paragraph = DocParagraph(nodes=[DocLinkTag(link_text="Home", url_destination="./index" + self.file_extension)])
        for item in api_item.get_hierarchy():
            if item.kind in (ApiItemKind.MODEL, ApiItemKind.ENTRY_POINT):
                continue
            paragraph.nodes.append(DocPlainText(text=" > "))
            paragraph.nodes.append(
                DocLinkTag(
                    link_text=item.display_name,
                    code_destination=DeclarationReference.parse(item.canonical_reference),
                )
            )
        return paragraph

    def build_member_tables(self, api_item: ApiItem) -> list[DocNode]:
        """Build one heading and table per kind of member the item has."""
        members = self.get_listed_members(api_item)
        nodes: list[DocNode] = []
        for kind, title in _MEMBER_GROUPS:
            group = [member for member in members if member.kind == kind]
            if not group:
                continue
            table = DocTable(
                header=DocTableRow(
                    cells=[
                        DocTableCell(content=DocSection(nodes=[DocParagraph(nodes=[DocPlainText(text=text)])]))
                        for text in ("Name", "Kind", "Description")
                    ]
                ),
                rows=[self.build_member_row(member) for member in group],
            )
            nodes.append(DocHeading(title=title))
            nodes.append(table)
        return nodes

    def get_listed_members(self, api_item: ApiItem) -> list[ApiItem]:
        """Return the members shown in ``api_item``'s tables, looking through entry points."""
        members: list[ApiItem] = []
        for member in api_item.members:
            if member.kind == ApiItemKind.ENTRY_POINT:
                members.extend(member.members)
            else:
                members.append(member)
        return members

    def build_member_row(self, member: ApiItem) -> DocTableRow:
        name = member.display_name + ("()" if member.is_callable else "")
        if self.has_page(member):
            name_node: DocNode = DocLinkTag(
                link_text=name,
                code_destination=DeclarationReference.parse(member.canonical_reference),
            )
        else:
            name_node = DocPlainText(text=name)

        description: list[DocNode] = []
        if member.release_tag == ReleaseTag.BETA:
            description.append(DocEmphasisSpan(nodes=[DocPlainText(text="(BETA)")], bold=True))
            description.append(DocPlainText(text=" "))
        if member.is_deprecated:
            description.append(DocEmphasisSpan(nodes=[DocPlainText(text="(DEPRECATED)")], bold=True))
            description.append(DocPlainText(text=" "))
        summary = first_paragraph(member.summary)
        if summary is not None:
            description.extend(summary.nodes)

        return DocTableRow(
            cells=[
                DocTableCell(content=DocSection(nodes=[DocParagraph(nodes=[name_node])])),
                DocTableCell(
                    content=DocSection(nodes=[DocParagraph(nodes=[DocPlainText(text=get_kind_label(member.kind))])])
                ),
                DocTableCell(content=DocSection(nodes=[DocParagraph(nodes=description)])),
            ]
        )
