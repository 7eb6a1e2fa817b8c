#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/api2md/cli/builder.py
"""Argument parser construction for the api2md CLI.

Emitter option flags are generated from the options dataclasses using
their field metadata, so a new option field shows up on the command line
without further wiring.
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import MISSING, Field, fields
from typing import Any, Dict, Mapping, Optional, Type, TypeVar, Union

from api2md.constants import DEFAULT_INPUT_FOLDER
from api2md.options import BaseEmitterOptions, HtmlEmitterOptions, MarkdownEmitterOptions

logger = logging.getLogger(__name__)

OptionsT = TypeVar("OptionsT", bound=BaseEmitterOptions)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 2

# Options class per output format subcommand
FORMAT_OPTIONS: Dict[str, Type[BaseEmitterOptions]] = {
    "markdown": MarkdownEmitterOptions,
    "html": HtmlEmitterOptions,
}


def snake_to_kebab(name: str) -> str:
    return name.replace("_", "-")


def _cli_fields(options_class: Type[BaseEmitterOptions]) -> list[Field]:
    return [f for f in fields(options_class) if not f.metadata.get("exclude_from_cli", False)]


def _field_default(field: Field) -> Any:
    if field.default is not MISSING:
        return field.default
    if field.default_factory is not MISSING:
        return field.default_factory()
    return None


def add_options_arguments(
    group: Union[argparse.ArgumentParser, argparse._ArgumentGroup], options_class: Type[BaseEmitterOptions]
) -> None:
    """Add one flag per CLI-visible field of ``options_class``.

    Booleans that default to True become ``--no-<name>`` flags; other
    booleans become ``--<name>``; strings and numbers take a value. Unset
    flags are left out of the parsed namespace so configuration file values
    are not overridden by defaults.

    Parameters
    ----------
    group : ArgumentParser or _ArgumentGroup
        Target for the new arguments
    options_class : type
        Frozen options dataclass

    """
    for field in _cli_fields(options_class):
        default = _field_default(field)
        help_text = field.metadata.get("help", f"Configure {field.name}")
        kwargs: Dict[str, Any] = {"dest": field.name, "default": argparse.SUPPRESS}

        if isinstance(default, bool):
            if default:
                cli_name = f"--no-{snake_to_kebab(field.name)}"
                kwargs["action"] = "store_false"
            else:
                cli_name = f"--{snake_to_kebab(field.name)}"
                kwargs["action"] = "store_true"
            kwargs["help"] = help_text
        else:
            cli_name = f"--{snake_to_kebab(field.name)}"
            if isinstance(default, (int, float)):
                kwargs["type"] = type(default)
            kwargs["help"] = f"{help_text} (default: {default!r})"

        group.add_argument(cli_name, **kwargs)


def build_options(
    options_class: Type[OptionsT], config: Optional[Mapping[str, Any]], args: argparse.Namespace
) -> OptionsT:
    """Create emitter options from a config section overlaid with parsed arguments.

    Parameters
    ----------
    options_class : type
        Options dataclass to instantiate
    config : mapping or None
        Values from the format's configuration file section
    args : argparse.Namespace
        Parsed command line; only flags the user actually gave are present

    Returns
    -------
    BaseEmitterOptions
        The options instance

    Raises
    ------
    argparse.ArgumentTypeError
        If the configuration names an unknown option

    """
    known = {field.name for field in _cli_fields(options_class)}
    values: Dict[str, Any] = {}

    for key, value in (config or {}).items():
        if key not in known:
            raise argparse.ArgumentTypeError(f"Unknown {options_class.__name__} option in config: {key}")
        values[key] = value

    for name in known:
        if hasattr(args, name):
            values[name] = getattr(args, name)

    logger.debug(f"{options_class.__name__} values: {values}")
    return options_class(**values)


def create_parser() -> argparse.ArgumentParser:
    """Create the ``api2md`` argument parser with one subcommand per output format."""
    parser = argparse.ArgumentParser(
        prog="api2md",
        description="Generate API documentation pages from *.api.json model files.",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="{markdown,html}")
    subparsers.required = True

    for command, options_class in FORMAT_OPTIONS.items():
        sub = subparsers.add_parser(command, help=f"Generate documentation in {command} format")
        sub.add_argument(
            "-i",
            "--input-folder",
            dest="input_folder",
            default=argparse.SUPPRESS,
            help=f"Folder containing *.api.json files (default: {DEFAULT_INPUT_FOLDER})",
        )
        sub.add_argument(
            "-o",
            "--output-folder",
            dest="output_folder",
            default=argparse.SUPPRESS,
            help=f"Folder for the generated files; its contents are deleted first (default: ./{command})",
        )
        sub.add_argument("--config", default=None, help="Path to a configuration file (JSON, TOML or YAML)")
        sub.add_argument(
            "--log-level",
            dest="log_level",
            default=argparse.SUPPRESS,
            choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
            help="Logging level (default: INFO)",
        )
        sub.add_argument("--log-file", dest="log_file", default=None, help="Also write log records to this file")
        sub.add_argument("--trace", action="store_true", help="Include timestamps and logger names in log output")
        sub.add_argument("--rich", action="store_true", help="Colour log output and print a summary table")

        if command == "html":
            sub.add_argument(
                "--template-file",
                dest="template_file",
                default=argparse.SUPPRESS,
                help="Custom Jinja2 page template",
            )
            sub.add_argument(
                "--stylesheet",
                dest="stylesheet",
                default=argparse.SUPPRESS,
                help="Stylesheet file name linked from every page",
            )

        group = sub.add_argument_group(f"{command} emitter options")
        add_options_arguments(group, options_class)

    return parser
