#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the api2md emitters.

Each emitter has its own frozen options dataclass. Options are immutable;
derive variants with ``create_updated``.
"""

from __future__ import annotations

from api2md.options.base import BaseEmitterOptions, CloneFrozenMixin, FilenameForApiItem
from api2md.options.html import HtmlEmitterOptions
from api2md.options.markdown import MarkdownEmitterOptions

__all__ = [
    "BaseEmitterOptions",
    "CloneFrozenMixin",
    "FilenameForApiItem",
    "HtmlEmitterOptions",
    "MarkdownEmitterOptions",
]
