#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the org2tg CLI.

Settings come from ``.org2tg.toml``, ``.org2tg.yaml``, ``.org2tg.yml``,
``.org2tg.json`` or the ``[tool.org2tg]`` table of ``pyproject.toml``.
An explicit ``--config`` path wins over ``ORG2TG_CONFIG``, which wins over
files discovered from the working directory upward.

Recognized keys::

    escape = true                     # TelegramRendererOptions.escape
    todo_keywords = ["TODO", "DONE"]  # OrgParserOptions.todo_keywords
    parse_tags = true                 # OrgParserOptions.parse_tags
    extract_metadata = true           # OrgParserOptions.extract_metadata
    log_level = "WARNING"
"""

from __future__ import annotations

import json
import logging
import os
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from org2tg.constants import CONFIG_ENV_VAR, CONFIG_FILENAMES
from org2tg.exceptions import ValidationError
from org2tg.options.org import OrgParserOptions
from org2tg.options.telegram import TelegramRendererOptions

logger = logging.getLogger(__name__)

_PARSER_KEYS = {"todo_keywords": list, "parse_tags": bool, "extract_metadata": bool}
_RENDERER_KEYS = {"escape": bool}
_CLI_KEYS = {"log_level": str}


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.org2tg]`` table from pyproject.toml.

    Returns an empty dict when the table is absent.
    """
    with open(pyproject_path, "rb") as f:
        data = tomllib.load(f)

    config = data.get("tool", {}).get("org2tg", {})
    if not isinstance(config, dict):
        raise ValidationError(
            f"[tool.org2tg] section in {pyproject_path} must be a table, got {type(config).__name__}",
            parameter_name="config",
            parameter_value=str(pyproject_path),
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Each directory from ``start_dir`` up to the filesystem root is checked
    for the dedicated config files first, then for a ``pyproject.toml`` that
    has a ``[tool.org2tg]`` table.

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
            if not config_path.is_file():
                continue
            if filename != "pyproject.toml":
                return config_path
            try:
                if _load_pyproject_section(config_path):
                    return config_path
            except (tomllib.TOMLDecodeError, ValidationError, OSError) as e:
                logger.debug(f"Skipping unreadable {config_path}: {e}")

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a JSON, TOML, YAML or pyproject.toml file.

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
    ValidationError
        If the file is missing, unreadable, malformed or of an unknown type

    Examples
    --------
    >>> config = load_config_file(".org2tg.toml")
    >>> config.get("escape")
    True

    """
    config_path = Path(config_path)

    if not config_path.is_file():
        raise ValidationError(
            f"Configuration file does not exist: {config_path}",
            parameter_name="config",
            parameter_value=str(config_path),
        )

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    try:
        if filename == "pyproject.toml":
            return _load_pyproject_section(config_path)
        if ext == ".toml":
            with open(config_path, "rb") as f:
                config = tomllib.load(f)
        elif ext in (".yaml", ".yml"):
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        elif ext == ".json":
            with open(config_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        else:
            raise ValidationError(
                f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml",
                parameter_name="config",
                parameter_value=str(config_path),
            )
    except ValidationError:
        raise
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError, OSError) as e:
        raise ValidationError(
            f"Error reading config file {config_path}: {e}",
            parameter_name="config",
            parameter_value=str(config_path),
            original_error=e,
        ) from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ValidationError(
            f"Config file {config_path} must contain a mapping, got {type(config).__name__}",
            parameter_name="config",
            parameter_value=str(config_path),
        )
    return config


def load_config_with_priority(explicit_path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration with priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path (--config flag)
    2. ``ORG2TG_CONFIG`` environment variable
    3. Config file discovered from the working directory upward

    Parameters
    ----------
    explicit_path : str, optional
        Explicit config file path from --config flag

    Returns
    -------
    dict
        Loaded configuration dictionary (empty dict if no config found)

    """
    if explicit_path:
        return load_config_file(explicit_path)

    env_var_path = os.environ.get(CONFIG_ENV_VAR)
    if env_var_path:
        return load_config_file(env_var_path)

    discovered_path = find_config_in_parents()
    if discovered_path:
        logger.debug(f"Using config file {discovered_path}")
        return load_config_file(discovered_path)

    return {}


def _check_type(key: str, value: Any, expected: type) -> None:
    if not isinstance(value, expected):
        raise ValidationError(
            f"Config key '{key}' must be {expected.__name__}, got {type(value).__name__}",
            parameter_name=key,
            parameter_value=value,
        )
    if key == "todo_keywords" and not all(isinstance(item, str) for item in value):
        raise ValidationError(
            "Config key 'todo_keywords' must be a list of strings", parameter_name=key, parameter_value=value
        )


def options_from_config(
    config: Dict[str, Any],
) -> tuple[OrgParserOptions, TelegramRendererOptions, Optional[str]]:
    """Build parser and renderer options from a configuration dictionary.

    Parameters
    ----------
    config : dict
        Loaded configuration; unknown keys are logged and ignored

    Returns
    -------
    tuple
        ``(parser_options, renderer_options, log_level)``; ``log_level`` is
        None when the config does not set it

    Raises
    ------
    ValidationError
        If a known key has a value of the wrong type

    """
    parser_kwargs: Dict[str, Any] = {}
    renderer_kwargs: Dict[str, Any] = {}
    log_level: Optional[str] = None

    for key, value in config.items():
        if key in _PARSER_KEYS:
            _check_type(key, value, _PARSER_KEYS[key])
            parser_kwargs[key] = list(value) if key == "todo_keywords" else value
        elif key in _RENDERER_KEYS:
            _check_type(key, value, _RENDERER_KEYS[key])
            renderer_kwargs[key] = value
        elif key in _CLI_KEYS:
            _check_type(key, value, _CLI_KEYS[key])
            log_level = value
        else:
            logger.warning(f"Ignoring unknown config key: {key}")

    return OrgParserOptions(**parser_kwargs), TelegramRendererOptions(**renderer_kwargs), log_level
