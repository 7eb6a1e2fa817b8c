#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/api2md/options/base.py
"""Base classes for emitter options.

Options are frozen dataclasses. Use :meth:`CloneFrozenMixin.create_updated`
to derive a modified copy instead of mutating an instance.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Callable, Optional

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from api2md.constants import DEFAULT_INDENT_PREFIX, DEFAULT_SKIP_LINE_BEFORE_TABLE

if TYPE_CHECKING:
    from api2md.model.items import ApiItem

FilenameForApiItem = Callable[["ApiItem"], Optional[str]]


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseEmitterOptions(CloneFrozenMixin):
    """Options shared by every emitter.

    Parameters
    ----------
    context_api_item : ApiItem or None, default None
        Item whose package anchors code links without a package name.
    get_filename_for_api_item : callable or None, default None
        Maps a resolved item to the filename its page is written to. When
        None (or when it returns None) code links render nothing.
    skip_line_before_table : bool, default True
        Write a blank line before a table when content precedes it.
    indent_prefix : str, default "  "
        Prefix pushed for nested blocks that have no prefix of their own.

    """

    context_api_item: Optional[ApiItem] = field(
        default=None,
        metadata={"help": "Item used as the resolution scope for code links", "exclude_from_cli": True},
    )
    get_filename_for_api_item: Optional[FilenameForApiItem] = field(
        default=None,
        metadata={"help": "Callback mapping an API item to its output filename", "exclude_from_cli": True},
    )
    skip_line_before_table: bool = field(
        default=DEFAULT_SKIP_LINE_BEFORE_TABLE,
        metadata={"help": "Separate tables from preceding content with a blank line"},
    )
    indent_prefix: str = field(
        default=DEFAULT_INDENT_PREFIX,
        metadata={"help": "Indent prefix for nested blocks"},
    )

    def get_filename(self, api_item: ApiItem) -> str | None:
        if self.get_filename_for_api_item is None:
            return None
        return self.get_filename_for_api_item(api_item)
