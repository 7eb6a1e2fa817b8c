#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/api2md/options/markdown.py
"""Configuration options for Markdown emission."""

from __future__ import annotations

from dataclasses import dataclass, field

from api2md.constants import MARKDOWN_QUOTE_PREFIX
from api2md.options.base import BaseEmitterOptions


@dataclass(frozen=True)
class MarkdownEmitterOptions(BaseEmitterOptions):
    """Options for :class:`~api2md.emitters.markdown.MarkdownEmitter` and its subclasses.

    Parameters
    ----------
    note_box_prefix : str, default "> "
        Line prefix used for note boxes

    """

    note_box_prefix: str = field(
        default=MARKDOWN_QUOTE_PREFIX,
        metadata={"help": "Line prefix for note boxes"},
    )
