#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/api2md/model/resolution.py
"""Result type and collaborator protocol for declaration reference resolution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Protocol

from api2md.ast.references import DeclarationReference

if TYPE_CHECKING:
    from api2md.model.items import ApiItem


@dataclass(frozen=True)
class ResolvedReference:
    """Outcome of resolving a declaration reference.

    Holds either the resolved item or an error message, never both.

    Parameters
    ----------
    resolved_api_item : ApiItem or None, default = None
        The item the reference points at
    error_message : str or None, default = None
        Why resolution failed

    Raises
    ------
    ValueError
        If both or neither of the fields are set

    """

    resolved_api_item: Optional[ApiItem] = None
    error_message: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.resolved_api_item is None) == (self.error_message is None):
            raise ValueError("ResolvedReference requires exactly one of resolved_api_item or error_message")

    @classmethod
    def failure(cls, error_message: str) -> ResolvedReference:
        return cls(error_message=error_message)

    @property
    def succeeded(self) -> bool:
        return self.resolved_api_item is not None


class DeclarationReferenceResolver(Protocol):
    """The one operation emitters need from an API model."""

    def resolve_declaration_reference(
        self, reference: DeclarationReference, context_api_item: Optional[ApiItem]
    ) -> ResolvedReference:
        """Resolve ``reference`` relative to ``context_api_item``."""
        ...
