#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/api2md/documenters/__init__.py
"""Documenters that write a documentation site for a loaded API model."""

from api2md.documenters.base import BaseDocumenter, get_kind_label
from api2md.documenters.html import HtmlDocumenter
from api2md.documenters.markdown import MarkdownDocumenter

__all__ = ["BaseDocumenter", "HtmlDocumenter", "MarkdownDocumenter", "get_kind_label"]
