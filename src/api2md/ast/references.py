#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/api2md/ast/references.py
"""Symbolic declaration references used as code link destinations.

A declaration reference names a program entity by its position in the API
hierarchy rather than by URL. The text form is::

    package#Namespace.Class.member

The package part is optional; when omitted the reference is resolved
relative to the item being documented. A member component may carry an
overload selector, e.g. ``Widget.render:2`` for the second overload.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MemberReference:
    """One component of a declaration reference path.

    Parameters
    ----------
    name : str
        Member name as it appears in the API model
    overload_index : int or None, default = None
        1-based overload selector, or None to match any overload

    """

    name: str
    overload_index: int | None = None

    def __str__(self) -> str:
        if self.overload_index is None:
            return self.name
        return f"{self.name}:{self.overload_index}"


@dataclass(frozen=True)
class DeclarationReference:
    """A parsed symbolic reference to a declared API entity.

    Parameters
    ----------
    package_name : str or None
        Package the reference is anchored in, or None for a relative reference
    member_references : tuple of MemberReference
        Path from the package entry point down to the referenced member

    Examples
    --------
        >>> ref = DeclarationReference.parse("my-lib#Widget.render:2")
        >>> ref.package_name
        'my-lib'
        >>> [str(m) for m in ref.member_references]
        ['Widget', 'render:2']
        >>> ref.emit_as_tsdoc()
        'my-lib#Widget.render:2'

    """

    package_name: str | None
    member_references: tuple[MemberReference, ...] = ()

    @classmethod
    def parse(cls, text: str) -> DeclarationReference:
        """Parse the text form of a declaration reference.

        Parameters
        ----------
        text : str
            Reference text such as ``"pkg#Ns.Class.method"`` or ``"Class.method"``

        Returns
        -------
        DeclarationReference
            The parsed reference

        Raises
        ------
        ValueError
            If the text is empty, has an empty path component, or an invalid
            overload selector

        """
        source = text.strip()
        if not source:
            raise ValueError("Declaration reference is empty")

        package_name: str | None = None
        path = source
        if "#" in source:
            package_part, _, path = source.partition("#")
            package_name = package_part.strip() or None

        members: list[MemberReference] = []
        if path:
            for component in path.split("."):
                name, sep, selector = component.strip().partition(":")
                if not name:
                    raise ValueError(f"Empty member name in declaration reference: {text!r}")
                overload_index = None
                if sep:
                    if not selector.isdigit() or int(selector) < 1:
                        raise ValueError(f"Invalid overload selector {selector!r} in declaration reference: {text!r}")
                    overload_index = int(selector)
                members.append(MemberReference(name, overload_index))

        if package_name is None and not members:
            raise ValueError(f"Declaration reference has no package and no members: {text!r}")

        return cls(package_name=package_name, member_references=tuple(members))

    def emit_as_tsdoc(self) -> str:
        """Return the canonical text form of this reference."""
        path = ".".join(str(member) for member in self.member_references)
        if self.package_name:
            return f"{self.package_name}#{path}"
        return path

    def __str__(self) -> str:
        return self.emit_as_tsdoc()
