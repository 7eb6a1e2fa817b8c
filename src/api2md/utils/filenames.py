#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/api2md/utils/filenames.py
"""Helpers for turning API names into file names."""

from __future__ import annotations

import re

_UNSAFE_FILENAME_CHARS = re.compile(r"[^a-z0-9_\-.]", re.IGNORECASE)


def get_safe_filename_for_name(name: str) -> str:
    """Return a lowercase name with every character outside ``[a-z0-9_.-]`` replaced by ``_``.

    Examples
    --------
        >>> get_safe_filename_for_name("MyClass")
        'myclass'
        >>> get_safe_filename_for_name("operator[]")
        'operator__'

    """
    return _UNSAFE_FILENAME_CHARS.sub("_", name).lower()


def get_unscoped_package_name(package_name: str) -> str:
    """Strip an npm-style ``@scope/`` prefix from a package name.

    Examples
    --------
        >>> get_unscoped_package_name("@acme/widgets")
        'widgets'
        >>> get_unscoped_package_name("widgets")
        'widgets'

    """
    if package_name.startswith("@") and "/" in package_name:
        return package_name.split("/", 1)[1]
    return package_name
