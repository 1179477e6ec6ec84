#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the md2deck CLI.

Configuration files hold two tables, ``renderer`` and ``parser``, whose keys
are the field names of ``DeckRendererOptions`` and ``MarkdownParserOptions``:

.. code-block:: toml

    [renderer]
    include_canvas = true
    paragraph_step = 15

    [parser]
    plain_list_markers = "+*"

The same tables may live under ``[tool.md2deck]`` in ``pyproject.toml``.
"""

import argparse
import json
import logging
import sys
from dataclasses import fields
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from md2deck.constants import CONFIG_FILENAMES, PYPROJECT_TOOL_SECTION
from md2deck.options.deck import DeckRendererOptions
from md2deck.options.markdown import MarkdownParserOptions

logger = logging.getLogger(__name__)

CONFIG_SECTIONS = ("renderer", "parser")


def _load_pyproject_md2deck_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load [tool.md2deck] section from pyproject.toml file.

    Returns
    -------
    dict
        Configuration dictionary from [tool.md2deck], or empty dict if absent

    Raises
    ------
    argparse.ArgumentTypeError
        If pyproject.toml cannot be parsed

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in pyproject.toml {pyproject_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading pyproject.toml {pyproject_path}: {e}") from e

    tool = data.get("tool", {})
    if not isinstance(tool, dict) or PYPROJECT_TOOL_SECTION not in tool:
        return {}

    config = tool[PYPROJECT_TOOL_SECTION]
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"[tool.{PYPROJECT_TOOL_SECTION}] section in {pyproject_path} must be a table, got {type(config).__name__}"
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find configuration file by searching parent directories.

    Walks up the directory tree from start_dir to the filesystem root,
    checking each directory for configuration files in priority order:
    1. .md2deck.toml
    2. .md2deck.yaml / .md2deck.yml
    3. .md2deck.json
    4. pyproject.toml (with [tool.md2deck] section)

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_md2deck_section(pyproject_path):
                    return pyproject_path
            except argparse.ArgumentTypeError:
                logger.debug("Skipping unreadable %s during config discovery", pyproject_path)

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from JSON, TOML, YAML, or pyproject.toml file.

    Auto-detects format based on file extension and name:
    - .json files: Loaded as JSON
    - .toml files: Loaded as TOML
    - .yaml/.yml files: Loaded as YAML
    - pyproject.toml: Extracts [tool.md2deck] section

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary loaded from file

    Raises
    ------
    argparse.ArgumentTypeError
        If the file cannot be read, parsed, or has invalid format

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")

    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration path is not a file: {config_path}")

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == "pyproject.toml":
        return _load_pyproject_md2deck_section(config_path)
    elif ext == ".toml":
        return _load_toml_config(config_path)
    elif ext in (".yaml", ".yml"):
        return _load_yaml_config(config_path)
    elif ext == ".json":
        return _load_json_config(config_path)
    raise argparse.ArgumentTypeError(f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml")


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading TOML config {config_path}: {e}") from e


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid JSON in config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading JSON config {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(f"JSON config file must contain an object, got {type(config).__name__}")
    return config


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise argparse.ArgumentTypeError(f"Invalid YAML in config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading YAML config {config_path}: {e}") from e

    # An empty YAML document loads as None
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(f"YAML config file must contain a mapping, got {type(config).__name__}")
    return config


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge two configuration dictionaries with deep merging.

    The override dictionary takes precedence over base for conflicting keys.
    Nested dictionaries are merged recursively, not replaced entirely.

    Examples
    --------
    >>> base = {"renderer": {"top": 80, "include_canvas": True}}
    >>> override = {"renderer": {"top": 95}}
    >>> merge_configs(base, override)
    {'renderer': {'top': 95, 'include_canvas': True}}

    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value

    return result


def load_config_with_priority(explicit_path: Optional[str] = None, start_dir: Optional[Path] = None) -> Dict[str, Any]:
    """Load configuration with proper priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path (--config flag)
    2. Auto-discovered config file in start_dir or one of its parents

    Returns
    -------
    dict
        Loaded configuration dictionary (empty dict if no config found)

    Raises
    ------
    argparse.ArgumentTypeError
        If a config file is specified but cannot be loaded

    """
    if explicit_path:
        logger.debug("Loading config from %s", explicit_path)
        return load_config_file(explicit_path)

    discovered_path = find_config_in_parents(start_dir)
    if discovered_path:
        logger.debug("Discovered config file %s", discovered_path)
        return load_config_file(discovered_path)

    return {}


def _build_options(options_class: type, section: str, values: Any) -> Any:
    if not isinstance(values, dict):
        raise argparse.ArgumentTypeError(f"[{section}] must be a table, got {type(values).__name__}")

    known = {f.name for f in fields(options_class)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise argparse.ArgumentTypeError(f"Unknown {section} option(s): {', '.join(unknown)}")

    try:
        return options_class(**values)
    except (TypeError, ValueError) as e:
        raise argparse.ArgumentTypeError(f"Invalid {section} options: {e}") from e


def options_from_config(config: Dict[str, Any]) -> tuple[MarkdownParserOptions, DeckRendererOptions]:
    """Build parser and renderer options from a merged configuration.

    Parameters
    ----------
    config : dict
        Configuration with optional ``parser`` and ``renderer`` tables

    Returns
    -------
    tuple[MarkdownParserOptions, DeckRendererOptions]
        Options objects; missing keys keep their defaults

    Raises
    ------
    argparse.ArgumentTypeError
        If the configuration has unknown sections or keys, or values the
        options reject

    """
    unknown_sections = sorted(set(config) - set(CONFIG_SECTIONS))
    if unknown_sections:
        raise argparse.ArgumentTypeError(
            f"Unknown configuration section(s): {', '.join(unknown_sections)}. "
            f"Expected: {', '.join(CONFIG_SECTIONS)}"
        )

    parser_options = _build_options(MarkdownParserOptions, "parser", config.get("parser", {}))
    renderer_options = _build_options(DeckRendererOptions, "renderer", config.get("renderer", {}))
    return parser_options, renderer_options
