#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for prettydiff.

Render settings are merged from several layers, lowest priority first:

1. ``RenderConfig`` defaults
2. A configuration file (``.prettydiff.toml``, ``.prettydiff.yaml``,
   ``.prettydiff.yml``, ``.prettydiff.json`` or the ``[tool.prettydiff]``
   table of ``pyproject.toml``)
3. ``PRETTYDIFF_*`` environment variables
4. Command-line flags
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
from typing import Any, Dict, Mapping, Optional

import yaml

from prettydiff.constants import CONFIG_FILENAMES, ENV_PREFIX, PYPROJECT_TOOL_SECTION
from prettydiff.exceptions import ConfigError, ValidationError
from prettydiff.options import RenderConfig

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.prettydiff]`` table from a pyproject.toml file.

    Parameters
    ----------
    pyproject_path : Path
        Path to pyproject.toml file

    Returns
    -------
    dict
        The table's contents, or an empty dict if there is none

    Raises
    ------
    ConfigError
        If pyproject.toml cannot be parsed or the section is not a table

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {pyproject_path}: {e}", config_path=str(pyproject_path), original_error=e) from e
    except OSError as e:
        raise ConfigError(f"Error reading {pyproject_path}: {e}", config_path=str(pyproject_path), original_error=e) from e

    section = data.get("tool", {}).get(PYPROJECT_TOOL_SECTION, {})
    if not isinstance(section, dict):
        raise ConfigError(
            f"[tool.{PYPROJECT_TOOL_SECTION}] section in {pyproject_path} must be a table, got {type(section).__name__}",
            config_path=str(pyproject_path),
        )
    return section


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Each directory from ``start_dir`` up to the filesystem root is checked
    for the dedicated config files first, then for a ``pyproject.toml``
    with a ``[tool.prettydiff]`` table.

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
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except ConfigError as e:
                logger.debug("Skipping unreadable %s: %s", pyproject_path, e)

        if current.parent == current:
            return None
        current = current.parent


def load_config_file(config_path: str | Path) -> Dict[str, Any]:
    """Load settings from a TOML, YAML or JSON configuration file.

    Parameters
    ----------
    config_path : str or Path
        Path to the configuration file

    Returns
    -------
    dict
        Raw settings from the file

    Raises
    ------
    ConfigError
        If the file is missing, unreadable, malformed, or not a mapping

    """
    path = Path(config_path)
    if not path.is_file():
        raise ConfigError(f"Configuration file not found: {path}", config_path=str(path))

    if path.name == "pyproject.toml":
        return _load_pyproject_section(path)

    suffix = path.suffix.lower()
    try:
        if suffix == ".toml":
            with open(path, "rb") as f:
                data = tomllib.load(f)
        elif suffix in (".yaml", ".yml"):
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        elif suffix == ".json":
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        else:
            raise ConfigError(
                f"Unsupported configuration file format: {path.suffix or path.name}",
                config_path=str(path),
            )
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigError(f"Invalid configuration file {path}: {e}", config_path=str(path), original_error=e) from e
    except OSError as e:
        raise ConfigError(f"Error reading configuration file {path}: {e}", config_path=str(path), original_error=e) from e

    # An empty YAML document loads as None
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Configuration file {path} must contain a mapping, got {type(data).__name__}",
            config_path=str(path),
        )
    logger.debug("Loaded configuration from %s", path)
    return data


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigError(
        f"Invalid boolean value for {name}: {value!r}",
        parameter_name=name,
        parameter_value=value,
    )


def config_from_env(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Read render settings from ``PRETTYDIFF_*`` environment variables.

    Parameters
    ----------
    environ : mapping, optional
        Environment to read; defaults to ``os.environ``

    Returns
    -------
    dict
        Settings found, converted to their field types

    Raises
    ------
    ConfigError
        If a variable holds a value that cannot be converted

    """
    if environ is None:
        environ = os.environ

    settings: Dict[str, Any] = {}

    color = environ.get(f"{ENV_PREFIX}COLOR")
    if color is not None:
        settings["color"] = _parse_bool(f"{ENV_PREFIX}COLOR", color)

    spacing = environ.get(f"{ENV_PREFIX}SPACING")
    if spacing is not None:
        settings["spacing"] = spacing

    context = environ.get(f"{ENV_PREFIX}CONTEXT")
    if context is not None:
        try:
            settings["context"] = int(context)
        except ValueError as e:
            raise ConfigError(
                f"Invalid integer value for {ENV_PREFIX}CONTEXT: {context!r}",
                parameter_name=f"{ENV_PREFIX}CONTEXT",
                parameter_value=context,
                original_error=e,
            ) from e

    return settings


def render_config_from_mapping(
    settings: Mapping[str, Any],
    base: Optional[RenderConfig] = None,
    source: Optional[str] = None,
) -> RenderConfig:
    """Apply a mapping of settings on top of a render configuration.

    Parameters
    ----------
    settings : mapping
        Keys among ``color``, ``spacing`` and ``context``
    base : RenderConfig, optional
        Configuration to update; defaults to ``RenderConfig()``
    source : str, optional
        Where the settings came from, used in error messages

    Returns
    -------
    RenderConfig
        The updated configuration

    Raises
    ------
    ConfigError
        If a key is unknown or a value is rejected by ``RenderConfig``

    """
    if base is None:
        base = RenderConfig()

    known = set(RenderConfig.field_names())
    unknown = sorted(set(settings) - known)
    if unknown:
        raise ConfigError(
            f"Unknown configuration key(s) {', '.join(unknown)}"
            + (f" in {source}" if source else "")
            + f"; expected one of: {', '.join(sorted(known))}",
            config_path=source,
            parameter_name=unknown[0],
        )

    try:
        return base.create_updated(**settings)
    except ValidationError as e:
        raise ConfigError(
            f"Invalid configuration{f' in {source}' if source else ''}: {e.message}",
            config_path=source,
            parameter_name=e.parameter_name,
            parameter_value=e.parameter_value,
            original_error=e,
        ) from e


def load_render_config(
    config_path: Optional[str | Path] = None,
    environ: Optional[Mapping[str, str]] = None,
    discover: bool = True,
) -> RenderConfig:
    """Build a render configuration from a config file and the environment.

    Parameters
    ----------
    config_path : str or Path, optional
        Explicit configuration file; when omitted and ``discover`` is True
        the working directory and its parents are searched
    environ : mapping, optional
        Environment to read; defaults to ``os.environ``
    discover : bool, default True
        Search for a configuration file when ``config_path`` is omitted

    Returns
    -------
    RenderConfig
        Defaults overlaid with the file settings, then the environment

    """
    config = RenderConfig()

    path: Optional[Path] = Path(config_path) if config_path is not None else None
    if path is None and discover:
        path = find_config_in_parents()

    if path is not None:
        config = render_config_from_mapping(load_config_file(path), base=config, source=str(path))

    env_settings = config_from_env(environ)
    if env_settings:
        config = render_config_from_mapping(env_settings, base=config, source="environment")

    return config
