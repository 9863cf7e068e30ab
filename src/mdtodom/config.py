#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtodom/config.py
"""Configuration file discovery and loading for mdtodom.

This module handles discovery of configuration files, loading them from TOML,
YAML or JSON, and turning the loaded mapping into renderer and parser
options.

A configuration file is a flat table. Keys name option fields of
DomRendererOptions or MarkdownParserOptions, or one of the command line
settings in ``CLI_CONFIG_KEYS``; hyphens and underscores are interchangeable:

.. code-block:: toml

    raw-html-mode = "sanitize"
    image_element = "object"
    plugins = ["strikethrough", "table"]
    welcome_page = "index.md"

"""

from __future__ import annotations

import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

import yaml

from mdtodom.constants import CONFIG_ENV_VAR, CONFIG_FILENAMES, PYPROJECT_TOOL_SECTION
from mdtodom.exceptions import ConfigError
from mdtodom.options.dom import DomRendererOptions
from mdtodom.options.markdown import MarkdownParserOptions

logger = logging.getLogger(__name__)

# Settings consumed by the command line tool rather than by an options class
CLI_CONFIG_KEYS = frozenset({"welcome_page", "template", "container_id", "log_level"})


def normalize_config_keys(config: dict[str, Any]) -> dict[str, Any]:
    """Return ``config`` with hyphenated keys converted to underscores.

    Examples
    --------
    >>> normalize_config_keys({"raw-html-mode": "drop"})
    {'raw_html_mode': 'drop'}

    """
    return {str(key).replace("-", "_"): value for key, value in config.items()}


def _load_pyproject_section(pyproject_path: Path) -> dict[str, Any]:
    """Load the [tool.mdtodom] section from a pyproject.toml file.

    Parameters
    ----------
    pyproject_path : Path
        Path to pyproject.toml file

    Returns
    -------
    dict
        Configuration from the section, or an empty dict if there is none

    Raises
    ------
    ConfigError
        If the file is not valid TOML or the section is not a table

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {pyproject_path}: {e}", str(pyproject_path), e) from e

    config = data.get("tool", {}).get(PYPROJECT_TOOL_SECTION, {})
    if not isinstance(config, dict):
        raise ConfigError(
            f"[tool.{PYPROJECT_TOOL_SECTION}] section in {pyproject_path} must be a table, "
            f"got {type(config).__name__}",
            str(pyproject_path),
        )
    return config


def find_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Walks up the directory tree from ``start_dir`` to the filesystem root,
    checking each directory for, in priority order:

    1. .mdtodom.toml
    2. .mdtodom.yaml / .mdtodom.yml
    3. .mdtodom.json
    4. pyproject.toml with a [tool.mdtodom] section

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except ConfigError as e:
                # A broken pyproject.toml elsewhere in the tree is not ours to report
                logger.debug("Skipping %s: %s", pyproject_path, e)

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def resolve_config_path(explicit: Optional[str] = None, no_config: bool = False) -> Optional[Path]:
    """Decide which configuration file to load.

    Priority: an explicit path, then the ``MDTODOM_CONFIG`` environment
    variable, then discovery from the working directory.

    Parameters
    ----------
    explicit : str, optional
        Path given on the command line
    no_config : bool, default False
        Disable environment lookup and discovery

    Returns
    -------
    Path or None
        Configuration file to load, if any

    """
    if explicit:
        return Path(explicit)
    if no_config:
        return None

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        logger.debug("Using config file from %s: %s", CONFIG_ENV_VAR, env_path)
        return Path(env_path)

    return find_config_file()


def load_config_file(config_path: Path | str) -> dict[str, Any]:
    """Load configuration from a TOML, YAML, JSON or pyproject.toml file.

    The format is chosen from the file name and extension.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration with normalized keys

    Raises
    ------
    ConfigError
        If the file cannot be read, parsed, or does not hold a mapping

    """
    config_path = Path(config_path)

    if not config_path.is_file():
        raise ConfigError(f"Configuration file does not exist: {config_path}", str(config_path))

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    try:
        if filename == "pyproject.toml":
            config = _load_pyproject_section(config_path)
        elif ext == ".toml":
            with open(config_path, "rb") as f:
                config = tomllib.load(f)
        elif ext in (".yaml", ".yml"):
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
            if config is None:
                config = {}
        elif ext == ".json":
            with open(config_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        else:
            raise ConfigError(
                f"Unsupported config file format: {ext}. Use .toml, .yaml, .yml or .json", str(config_path)
            )
    except ConfigError:
        raise
    except (OSError, tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigError(f"Error reading config file {config_path}: {e}", str(config_path), e) from e

    if not isinstance(config, dict):
        raise ConfigError(
            f"Config file {config_path} must contain a mapping at the top level, got {type(config).__name__}",
            str(config_path),
        )

    logger.debug("Loaded configuration from %s", config_path)
    return normalize_config_keys(config)


def options_from_config(config: dict[str, Any]) -> tuple[DomRendererOptions, MarkdownParserOptions]:
    """Build renderer and parser options from a configuration mapping.

    Keys listed in ``CLI_CONFIG_KEYS`` are accepted and ignored here.

    Parameters
    ----------
    config : dict
        Configuration mapping, e.g. from ``load_config_file``

    Returns
    -------
    tuple of (DomRendererOptions, MarkdownParserOptions)
        Options with the configured values over the defaults

    Raises
    ------
    ConfigError
        If a key is unknown or a value is rejected by the options class

    Examples
    --------
    >>> renderer_options, parser_options = options_from_config({"raw-html-mode": "drop"})
    >>> renderer_options.raw_html_mode
    'drop'

    """
    config = normalize_config_keys(config)
    renderer_fields = DomRendererOptions.field_names()
    parser_fields = MarkdownParserOptions.field_names()

    unknown = sorted(set(config) - renderer_fields - parser_fields - CLI_CONFIG_KEYS)
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

    renderer_values = {key: value for key, value in config.items() if key in renderer_fields}
    parser_values = {key: value for key, value in config.items() if key in parser_fields}

    try:
        return DomRendererOptions(**renderer_values), MarkdownParserOptions(**parser_values)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid configuration value: {e}", original_error=e) from e


__all__ = [
    "CLI_CONFIG_KEYS",
    "find_config_file",
    "load_config_file",
    "normalize_config_keys",
    "options_from_config",
    "resolve_config_path",
]
