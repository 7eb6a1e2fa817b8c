#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for api2md.

Examples
--------
Generate Markdown pages from ``./input/*.api.json`` into ``./markdown``::

    $ api2md markdown

Generate HTML pages with coloured warnings::

    $ api2md html -i ./etc -o ./site --rich

Keep tables directly under the preceding paragraph::

    $ api2md markdown --no-skip-line-before-table

Configuration files (``.api2md.toml``, ``.api2md.yaml``, ``.api2md.json`` or
``[tool.api2md]`` in ``pyproject.toml``) are discovered from the working
directory upwards, or named with ``--config`` or ``API2MD_CONFIG``. Command
line arguments always override configuration values.

"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict

from rich.console import Console
from rich.table import Table

from api2md.cli.builder import (
    EXIT_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    FORMAT_OPTIONS,
    build_options,
    create_parser,
)
from api2md.cli.config import SHARED_SECTION, load_config_with_priority, merge_configs
from api2md.constants import API_JSON_SUFFIX, DEFAULT_INPUT_FOLDER, DEFAULT_STYLESHEET
from api2md.documenters import BaseDocumenter, HtmlDocumenter, MarkdownDocumenter
from api2md.exceptions import Api2MdError, ValidationError
from api2md.logging_utils import configure_logging
from api2md.model import ApiModel

logger = logging.getLogger(__name__)

__all__ = ["create_parser", "handle_html_command", "handle_markdown_command", "load_api_model", "main"]


def load_api_model(input_folder: Path) -> ApiModel:
    """Load every ``*.api.json`` file in ``input_folder`` into a new model.

    Raises
    ------
    ApiModelError
        If a model file is malformed

    """
    model = ApiModel()
    for path in sorted(input_folder.glob(f"*{API_JSON_SUFFIX}")):
        logger.info(f"Reading {path.name}")
        model.load_package(path)
    return model


def _resolve_settings(args: argparse.Namespace) -> Dict[str, Any]:
    """Combine the configuration file with the parsed arguments."""
    config = load_config_with_priority(explicit_path=args.config, env_var_path=os.environ.get("API2MD_CONFIG"))
    for name in (SHARED_SECTION, args.command):
        if not isinstance(config.get(name) or {}, dict):
            raise argparse.ArgumentTypeError(f"[{name}] section in config must be a table")
    # Format sections override the shared emitter section
    section = merge_configs(config.get(SHARED_SECTION) or {}, config.get(args.command) or {})

    settings: Dict[str, Any] = {
        "input_folder": config.get("input_folder", DEFAULT_INPUT_FOLDER),
        "output_folder": config.get("output_folder", f"./{args.command}"),
        "log_level": config.get("log_level", "INFO"),
    }
    if args.command == "html":
        settings["template_file"] = section.pop("template_file", None)
        settings["stylesheet"] = section.pop("stylesheet", DEFAULT_STYLESHEET)

    for key in ("input_folder", "output_folder", "log_level", "template_file", "stylesheet"):
        if hasattr(args, key):
            settings[key] = getattr(args, key)

    settings["options"] = build_options(FORMAT_OPTIONS[args.command], section, args)
    return settings


def _print_summary(documenter: BaseDocumenter, written: list[Path], output_folder: Path) -> None:
    console = Console(stderr=True)
    table = Table(title="api2md")
    table.add_column("Output folder")
    table.add_column("Files", justify="right")
    table.add_column("Link warnings", justify="right")
    table.add_row(str(output_folder), str(len(written)), str(len(documenter.reference_warnings)))
    console.print(table)


def _run_documenter(args: argparse.Namespace) -> int:
    try:
        settings = _resolve_settings(args)
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    configure_logging(settings["log_level"], log_file=args.log_file, trace_mode=args.trace, rich_output=args.rich)

    input_folder = Path(settings["input_folder"])
    output_folder = Path(settings["output_folder"])
    if not input_folder.is_dir():
        logger.error(f"Input folder does not exist: {input_folder}")
        return EXIT_VALIDATION_ERROR

    try:
        api_model = load_api_model(input_folder)
        documenter: BaseDocumenter
        if args.command == "html":
            documenter = HtmlDocumenter(
                api_model,
                settings["options"],
                template_file=settings["template_file"],
                stylesheet=settings["stylesheet"],
            )
        else:
            documenter = MarkdownDocumenter(api_model, settings["options"])
        written = documenter.generate_files(output_folder)
    except ValidationError as e:
        logger.error(str(e))
        return EXIT_VALIDATION_ERROR
    except Api2MdError as e:
        logger.error(str(e))
        return EXIT_ERROR

    if args.rich:
        _print_summary(documenter, written, output_folder)
    return EXIT_SUCCESS


def handle_markdown_command(args: argparse.Namespace) -> int:
    """Generate Markdown pages; returns the process exit code."""
    return _run_documenter(args)


def handle_html_command(args: argparse.Namespace) -> int:
    """Generate HTML pages; returns the process exit code."""
    return _run_documenter(args)


_COMMAND_HANDLERS = {
    "markdown": handle_markdown_command,
    "html": handle_html_command,
}


def main(args: list[str] | None = None) -> int:
    """Execute the CLI and return the exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)
    return _COMMAND_HANDLERS[parsed_args.command](parsed_args)


if __name__ == "__main__":
    sys.exit(main())
