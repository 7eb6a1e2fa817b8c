#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/api2md/documenters/markdown.py
"""Documenter writing one Markdown file per API item."""

from __future__ import annotations

from api2md.constants import FILE_EXTENSIONS
from api2md.documenters.base import BaseDocumenter
from api2md.emitters.api_markdown import ApiMarkdownEmitter
from api2md.model.items import ApiItem
from api2md.utils.escape import escape_markdown


class MarkdownDocumenter(BaseDocumenter):
    """Write ``<name>.md`` pages rendered by :class:`ApiMarkdownEmitter`.

    Examples
    --------
        >>> model = ApiModel()
        >>> model.load_package("input/widgets.api.json")
        >>> MarkdownDocumenter(model).generate_files("markdown")
        [PosixPath('markdown/index.md'), PosixPath('markdown/widgets.md'), ...]

    """

    file_extension = FILE_EXTENSIONS["markdown"]

    def create_emitter(self) -> ApiMarkdownEmitter:
        return ApiMarkdownEmitter(self.api_model)

    def render_page(self, api_item: ApiItem, title: str, body: str) -> str:
        return f"# {escape_markdown(title)}\n\n{body}"
