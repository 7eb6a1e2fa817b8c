#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/api2md/utils/io_utils.py
"""File system helpers for writing generated documentation."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Union

from api2md.exceptions import OutputWriteError

logger = logging.getLogger(__name__)


def ensure_empty_folder(folder: Union[str, Path]) -> Path:
    """Create ``folder`` if needed and delete everything inside it.

    Parameters
    ----------
    folder : str or Path
        Folder to prepare

    Returns
    -------
    Path
        The folder

    Raises
    ------
    OutputWriteError
        If the folder cannot be created or cleared

    """
    folder = Path(folder)
    try:
        folder.mkdir(parents=True, exist_ok=True)
        for child in folder.iterdir():
            if child.is_dir() and not child.is_symlink():
                shutil.rmtree(child)
            else:
                child.unlink()
    except OSError as e:
        raise OutputWriteError(
            str(folder), message=f"Unable to prepare output folder {folder}: {e}", original_error=e
        ) from e
    logger.debug(f"Cleared output folder {folder}")
    return folder


def write_text_file(path: Union[str, Path], content: str) -> Path:
    """Write UTF-8 text to ``path``, raising OutputWriteError on failure."""
    path = Path(path)
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(str(path), original_error=e) from e
    return path
