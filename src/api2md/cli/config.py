#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the api2md CLI.

A configuration file holds top-level settings plus one section per output
format, for example in ``.api2md.toml``::

    input_folder = "./etc"
    log_level = "INFO"

    [emitter]
    skip_line_before_table = false

    [markdown]
    note_box_prefix = "> "

    [html]
    code_language = "typescript"
    stylesheet = "site.css"

Values in ``[emitter]`` apply to both formats; a format section overrides
them key by key. The same keys may live under ``[tool.api2md]`` in ``pyproject.toml``.
Every loading problem is reported as :class:`argparse.ArgumentTypeError` so the
CLI can turn it into a usage error.
"""

import argparse
import json
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Callable, Dict, Optional

import yaml

from api2md.constants import CONFIG_FILENAMES

PYPROJECT_FILENAME = "pyproject.toml"
SHARED_SECTION = "emitter"


def _read_toml(path: Path) -> Any:
    with open(path, "rb") as f:
        return tomllib.load(f)


def _read_yaml(path: Path) -> Any:
    return yaml.safe_load(path.read_text(encoding="utf-8"))


def _read_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


_READERS: Dict[str, Callable[[Path], Any]] = {
    ".toml": _read_toml,
    ".yaml": _read_yaml,
    ".yml": _read_yaml,
    ".json": _read_json,
}

_PARSE_ERRORS = (tomllib.TOMLDecodeError, json.JSONDecodeError, yaml.YAMLError)


def _parse(path: Path, reader: Callable[[Path], Any]) -> Any:
    try:
        return reader(path)
    except _PARSE_ERRORS as e:
        raise argparse.ArgumentTypeError(f"Invalid config file {path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading config file {path}: {e}") from e


def _load_pyproject_api2md_section(pyproject_path: Path) -> Dict[str, Any]:
    """Return the ``[tool.api2md]`` table of a pyproject file, or ``{}``."""
    section = _parse(pyproject_path, _read_toml).get("tool", {}).get("api2md")
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise argparse.ArgumentTypeError(
            f"[tool.api2md] section in {pyproject_path} must be a table, got {type(section).__name__}"
        )
    return section


def _config_in_directory(directory: Path) -> Optional[Path]:
    for filename in CONFIG_FILENAMES:
        candidate = directory / filename
        if candidate.is_file():
            return candidate

    pyproject = directory / PYPROJECT_FILENAME
    if not pyproject.is_file():
        return None
    try:
        has_section = bool(_load_pyproject_api2md_section(pyproject))
    except argparse.ArgumentTypeError:
        # A broken pyproject.toml belonging to some other tool does not stop the search
        return None
    return pyproject if has_section else None


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find the nearest configuration file at or above ``start_dir``.

    In each directory the dedicated files (``.api2md.toml``, ``.api2md.yaml``,
    ``.api2md.yml``, ``.api2md.json``) are checked first; a ``pyproject.toml``
    only counts when it has a ``[tool.api2md]`` section.

    Parameters
    ----------
    start_dir : Path, optional
        Directory to start from, defaults to the working directory

    Returns
    -------
    Path or None
        The first configuration file found, walking towards the root

    """
    start = (start_dir or Path.cwd()).resolve()
    for directory in (start, *start.parents):
        found = _config_in_directory(directory)
        if found is not None:
            return found
    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load one configuration file.

    Parameters
    ----------
    config_path : Path or str
        A ``.toml``, ``.yaml``/``.yml`` or ``.json`` file, or a ``pyproject.toml``

    Returns
    -------
    dict
        The configuration mapping

    Raises
    ------
    argparse.ArgumentTypeError
        If the file is missing, unreadable, malformed or not a mapping

    """
    path = Path(config_path)
    if not path.exists():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {path}")
    if not path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration path is not a file: {path}")

    if path.name.lower() == PYPROJECT_FILENAME:
        return _load_pyproject_api2md_section(path)

    suffix = path.suffix.lower()
    reader = _READERS.get(suffix)
    if reader is None:
        raise argparse.ArgumentTypeError(f"Unsupported config file format: {suffix}. Use .json, .toml, or .yaml")

    config = _parse(path, reader)
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"Config file {path} must contain a mapping at root level, got {type(config).__name__}"
        )
    return config


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Return ``base`` updated with ``override``, merging nested sections key by key.

    Examples
    --------
    >>> merge_configs({"html": {"escape_code": True}, "log_level": "INFO"}, {"html": {"code_language": "ts"}})
    {'html': {'escape_code': True, 'code_language': 'ts'}, 'log_level': 'INFO'}

    """
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = merge_configs(current, value)
        else:
            merged[key] = value
    return merged


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load the one configuration file that applies to this run.

    ``--config`` wins over ``API2MD_CONFIG``, which wins over discovery from
    the working directory. No configuration at all yields ``{}``.
    """
    chosen: Optional[Path | str] = explicit_path or env_var_path or find_config_in_parents()
    if not chosen:
        return {}
    return load_config_file(chosen)
