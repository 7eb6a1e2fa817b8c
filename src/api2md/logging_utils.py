#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Centralized logging utilities for api2md entry points.

Library modules only create ``logging.getLogger(__name__)`` loggers; handlers
are installed here, once, by the command line interface.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

PLAIN_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_log_level(log_level: int | str) -> int:
    """Return a numeric level for a level name, falling back to ``INFO``."""
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.INFO


def _console_handler(rich_output: bool, trace_mode: bool, formatter: logging.Formatter) -> logging.Handler:
    if not rich_output:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(formatter)
        return handler

    # Rich renders level and time columns itself
    rich_handler = RichHandler(console=Console(stderr=True), show_time=trace_mode, show_path=trace_mode, markup=False)
    rich_handler.setFormatter(logging.Formatter("%(message)s"))
    return rich_handler


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    rich_output: bool = False,
) -> logging.Logger:
    """Replace the root logger's handlers with console (and optional file) output.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "INFO").
    log_file : str, optional
        Also append records to this file.
    trace_mode : bool, default False
        Include timestamps and logger names.
    rich_output : bool, default False
        Send console records through a ``rich`` handler so warnings are coloured.

    Returns
    -------
    logging.Logger
        The configured root logger instance.

    """
    level = resolve_log_level(log_level)
    formatter = (
        logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT) if trace_mode else logging.Formatter(PLAIN_FORMAT)
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handlers = [_console_handler(rich_output, trace_mode, formatter)]
    file_error: Optional[OSError] = None
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as exc:
            file_error = exc
        else:
            handlers[-1].setFormatter(formatter)

    for handler in handlers:
        handler.setLevel(level)
        root_logger.addHandler(handler)

    if file_error is not None:
        root_logger.warning("Could not create log file %s: %s", log_file, file_error)
    elif log_file:
        root_logger.info("Logging to file: %s", log_file)
    return root_logger
