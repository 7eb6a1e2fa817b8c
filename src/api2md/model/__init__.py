#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/api2md/model/__init__.py
"""In-memory API model: items, packages and reference resolution."""

from api2md.model.items import CALLABLE_KINDS, ApiItem, ApiItemKind, ReleaseTag
from api2md.model.model import ApiModel
from api2md.model.resolution import DeclarationReferenceResolver, ResolvedReference

__all__ = [
    "CALLABLE_KINDS",
    "ApiItem",
    "ApiItemKind",
    "ApiModel",
    "DeclarationReferenceResolver",
    "ReleaseTag",
    "ResolvedReference",
]
