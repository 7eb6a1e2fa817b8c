#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/api2md/model/items.py
"""API items: the declarations that documentation pages are generated for.

The item tree mirrors the shape of a published API::

    Model
    └── Package            (@acme/widgets)
        └── EntryPoint     (unnamed)
            ├── Class      (Widget)
            │   ├── Constructor
            │   └── Method (render)
            └── Namespace  (Layout)
                └── Function (stack)

Each item owns its members and knows its parent, so an item can compute its
own hierarchy and its scoped name within the package.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from api2md.ast.nodes import DocSection


class ApiItemKind(str, Enum):
    """Kinds of declarations in the API model."""

    MODEL = "Model"
    PACKAGE = "Package"
    ENTRY_POINT = "EntryPoint"
    NAMESPACE = "Namespace"
    CLASS = "Class"
    INTERFACE = "Interface"
    CONSTRUCTOR = "Constructor"
    METHOD = "Method"
    PROPERTY = "Property"
    FUNCTION = "Function"
    ENUM = "Enum"
    ENUM_MEMBER = "EnumMember"
    VARIABLE = "Variable"
    TYPE_ALIAS = "TypeAlias"


class ReleaseTag(str, Enum):
    """Release stage of a declaration."""

    PUBLIC = "Public"
    BETA = "Beta"
    ALPHA = "Alpha"
    INTERNAL = "Internal"


CALLABLE_KINDS = frozenset({ApiItemKind.CONSTRUCTOR, ApiItemKind.METHOD, ApiItemKind.FUNCTION})
# Kinds that never contribute a component to a scoped name or filename
_STRUCTURAL_KINDS = frozenset({ApiItemKind.MODEL, ApiItemKind.PACKAGE, ApiItemKind.ENTRY_POINT})


@dataclass(eq=False)
class ApiItem:
    """A declaration in the API model.

    Parameters
    ----------
    kind : ApiItemKind
        What sort of declaration this is
    display_name : str
        Name as shown in documentation (empty for entry points)
    members : list of ApiItem, default = empty list
        Child declarations; their ``parent`` is set on construction
    overload_index : int, default = 1
        1-based index distinguishing overloads that share a name
    release_tag : ReleaseTag, default = ReleaseTag.PUBLIC
        Release stage
    summary : DocSection or None, default = None
        Short description
    remarks : DocSection or None, default = None
        Extended description
    deprecated : DocSection or None, default = None
        Deprecation notice; the item is deprecated when this is set
    signature : str, default = ""
        Declaration text shown in a code block

    """

    kind: ApiItemKind
    display_name: str
    members: list[ApiItem] = field(default_factory=list)
    overload_index: int = 1
    release_tag: ReleaseTag = ReleaseTag.PUBLIC
    summary: Optional[DocSection] = None
    remarks: Optional[DocSection] = None
    deprecated: Optional[DocSection] = None
    signature: str = ""
    parent: Optional[ApiItem] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        for member in self.members:
            member.parent = self

    def add_member(self, member: ApiItem) -> ApiItem:
        """Attach ``member`` as the last child of this item and return it."""
        member.parent = self
        self.members.append(member)
        return member

    def find_members_by_name(self, name: str) -> list[ApiItem]:
        return [member for member in self.members if member.display_name == name]

    def get_hierarchy(self) -> list[ApiItem]:
        """Return the items from the root down to and including this one."""
        hierarchy: list[ApiItem] = []
        current: ApiItem | None = self
        while current is not None:
            hierarchy.append(current)
            current = current.parent
        hierarchy.reverse()
        return hierarchy

    def get_associated_package(self) -> ApiItem | None:
        """Return the package containing this item (or the item itself), if any."""
        for item in reversed(self.get_hierarchy()):
            if item.kind == ApiItemKind.PACKAGE:
                return item
        return None

    def get_scoped_name_within_package(self) -> str:
        """Return the dot-joined name below the package, e.g. ``Layout.stack()``.

        Callable items get a trailing ``()``.

        """
        parts = [item.display_name for item in self.get_hierarchy() if item.kind not in _STRUCTURAL_KINDS]
        name = ".".join(parts)
        if name and self.kind in CALLABLE_KINDS:
            name += "()"
        return name

    @property
    def is_callable(self) -> bool:
        return self.kind in CALLABLE_KINDS

    @property
    def is_deprecated(self) -> bool:
        return self.deprecated is not None

    @property
    def has_namesakes(self) -> bool:
        """Whether a sibling shares this item's name, as overloads do."""
        if self.parent is None:
            return False
        return len(self.parent.find_members_by_name(self.display_name)) > 1

    @property
    def canonical_reference(self) -> str:
        """Text form of a declaration reference that resolves to this item."""
        package = self.get_associated_package()
        components = []
        for item in self.get_hierarchy():
            if item.kind in _STRUCTURAL_KINDS:
                continue
            component = item.display_name
            if item.overload_index > 1 or item.has_namesakes:
                component += f":{item.overload_index}"
            components.append(component)
        path = ".".join(components)
        if package is None:
            return path
        return f"{package.display_name}#{path}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value}, display_name={self.display_name!r})"
