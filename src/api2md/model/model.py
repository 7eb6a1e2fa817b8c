#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/api2md/model/model.py
"""The API model: loaded packages plus declaration reference resolution.

Packages are read from ``*.api.json`` (or ``*.api.yaml``) files. A package
file looks like::

    {
      "kind": "Package",
      "name": "@acme/widgets",
      "docs": {"summary": "Widgets for dashboards."},
      "members": [
        {
          "kind": "Class",
          "name": "Widget",
          "releaseTag": "Beta",
          "docs": {"summary": "A widget.", "remarks": {"node_type": "Section", "nodes": []}},
          "members": [{"kind": "Method", "name": "render", "signature": "render(): void"}]
        }
      ]
    }

Doc fields are either plain strings or serialized node trees (see
:mod:`api2md.ast.serialization`). Members of the package are placed under an
implicit, unnamed entry point.

"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

import yaml

from api2md.ast.nodes import DocSection
from api2md.ast.references import DeclarationReference
from api2md.ast.serialization import dict_to_ast
from api2md.ast.utils import section_from_text
from api2md.exceptions import ApiModelError
from api2md.model.items import ApiItem, ApiItemKind, ReleaseTag
from api2md.model.resolution import ResolvedReference

logger = logging.getLogger(__name__)


class ApiModel(ApiItem):
    """Root of the item tree, holding every loaded package.

    Examples
    --------
        >>> model = ApiModel()
        >>> package = model.load_package("input/widgets.api.json")
        >>> ref = DeclarationReference.parse("@acme/widgets#Widget.render")
        >>> model.resolve_declaration_reference(ref, None).resolved_api_item
        ApiItem(kind=Method, display_name='render')

    """

    def __init__(self) -> None:
        super().__init__(kind=ApiItemKind.MODEL, display_name="")

    @property
    def packages(self) -> list[ApiItem]:
        return [member for member in self.members if member.kind == ApiItemKind.PACKAGE]

    def add_package(self, package: ApiItem) -> ApiItem:
        """Add a package item, wrapping its members in an entry point if needed."""
        if package.kind != ApiItemKind.PACKAGE:
            raise ApiModelError(f"Expected a Package item, got {package.kind.value}")
        if self.try_get_package_by_name(package.display_name) is not None:
            raise ApiModelError(f'A package named "{package.display_name}" is already loaded')

        if not any(member.kind == ApiItemKind.ENTRY_POINT for member in package.members):
            entry_point = ApiItem(kind=ApiItemKind.ENTRY_POINT, display_name="", members=package.members)
            package.members = []
            package.add_member(entry_point)
        return self.add_member(package)

    def try_get_package_by_name(self, name: str) -> ApiItem | None:
        for package in self.packages:
            if package.display_name == name:
                return package
        return None

    def load_package(self, path: str | Path) -> ApiItem:
        """Load a package from a JSON or YAML model file and add it to the model.

        Parameters
        ----------
        path : str or Path
            Path to a ``*.api.json``, ``*.api.yaml`` or ``*.api.yml`` file

        Returns
        -------
        ApiItem
            The loaded package item

        Raises
        ------
        ApiModelError
            If the file cannot be read or does not describe a package

        """
        path = Path(path)
        logger.debug(f"Loading API model file {path}")
        try:
            text = path.read_text(encoding="utf-8")
            if path.suffix.lower() in (".yaml", ".yml"):
                data = yaml.safe_load(text)
            else:
                data = json.loads(text)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise ApiModelError(
                f"Unable to read API model file {path}: {e}", file_path=str(path), original_error=e
            ) from e

        if not isinstance(data, dict):
            raise ApiModelError(f"API model file {path} must contain an object", file_path=str(path))

        try:
            package = _item_from_dict(data)
        except (KeyError, ValueError, TypeError) as e:
            raise ApiModelError(f"Invalid API model file {path}: {e}", file_path=str(path), original_error=e) from e

        return self.add_package(package)

    def resolve_declaration_reference(
        self, reference: DeclarationReference, context_api_item: Optional[ApiItem]
    ) -> ResolvedReference:
        """Resolve a declaration reference to an item in this model.

        References without a package name resolve in the package of
        ``context_api_item``, or in the package named by their first
        component when that names a loaded package.

        Parameters
        ----------
        reference : DeclarationReference
            The reference to resolve
        context_api_item : ApiItem or None
            Item whose package anchors relative references

        Returns
        -------
        ResolvedReference
            The resolved item, or an error message

        """
        members = list(reference.member_references)

        if reference.package_name is not None:
            package = self.try_get_package_by_name(reference.package_name)
            if package is None:
                return ResolvedReference.failure(f'The package "{reference.package_name}" could not be located')
        else:
            package = context_api_item.get_associated_package() if context_api_item is not None else None
            if package is None and members and self.try_get_package_by_name(members[0].name) is not None:
                package = self.try_get_package_by_name(members[0].name)
                members = members[1:]
            if package is None:
                if context_api_item is None:
                    return ResolvedReference.failure(
                        "The reference does not include a package name, and no context item was provided"
                    )
                return ResolvedReference.failure(
                    "The reference does not include a package name, and the context item is not part of a package"
                )

        current = package
        entry_points = [member for member in package.members if member.kind == ApiItemKind.ENTRY_POINT]
        if members and entry_points:
            current = entry_points[0]

        for member_reference in members:
            found = current.find_members_by_name(member_reference.name)
            if member_reference.overload_index is not None:
                found = [item for item in found if item.overload_index == member_reference.overload_index]
            if not found:
                return ResolvedReference.failure(f'The member reference "{member_reference}" was not found')
            if len(found) > 1:
                return ResolvedReference.failure(f'The member reference "{member_reference}" was ambiguous')
            current = found[0]

        return ResolvedReference(resolved_api_item=current)


def _section_from_value(value: Any) -> DocSection | None:
    if value is None:
        return None
    if isinstance(value, str):
        return section_from_text(value)
    if isinstance(value, dict):
        node = dict_to_ast(value)
        if isinstance(node, DocSection):
            return node
        return DocSection(nodes=[node])
    raise ValueError(f"Doc content must be a string or a node object, got {type(value).__name__}")


def _item_from_dict(data: dict[str, Any]) -> ApiItem:
    kind = ApiItemKind(data["kind"])
    docs = data.get("docs") or {}
    return ApiItem(
        kind=kind,
        display_name=str(data.get("name", "")),
        members=[_item_from_dict(member) for member in data.get("members", [])],
        overload_index=int(data.get("overloadIndex", 1)),
        release_tag=ReleaseTag(data.get("releaseTag", ReleaseTag.PUBLIC.value)),
        summary=_section_from_value(docs.get("summary")),
        remarks=_section_from_value(docs.get("remarks")),
        deprecated=_section_from_value(docs.get("deprecated")),
        signature=str(data.get("signature", "")),
    )
