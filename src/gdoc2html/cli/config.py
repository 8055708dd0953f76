#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the gdoc2html CLI.

Configuration files hold rendering options. Top-level keys name
``GoogleDocsHtmlOptions`` fields; a ``style`` table holds
``HtmlStyleTable`` overrides::

    # .gdoc2html.toml
    image_proxy_path = "/img-proxy"
    number_images = false

    [style]
    paragraph_class = "prose"
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

from gdoc2html.constants import CONFIG_FILENAMES, PYPROJECT_TOOL_SECTION
from gdoc2html.options.html import GoogleDocsHtmlOptions, HtmlStyleTable

logger = logging.getLogger(__name__)


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.gdoc2html]`` table of a pyproject.toml, or ``{}``.

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

    config = data.get("tool", {}).get(PYPROJECT_TOOL_SECTION, {})
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"[tool.{PYPROJECT_TOOL_SECTION}] section in {pyproject_path} must be a table, got {type(config).__name__}"
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by walking up from ``start_dir``.

    Each directory is checked for the dedicated config files in order, then
    for a pyproject.toml with a non-empty ``[tool.gdoc2html]`` table.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory, defaults to the current working directory

    Returns
    -------
    Path or None
        First config file found

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
            except argparse.ArgumentTypeError:
                logger.debug(f"Skipping unreadable {pyproject_path}")

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover a configuration file in the parent directories, then the home directory."""
    config_in_parents = find_config_in_parents(start_dir)
    if config_in_parents:
        return config_in_parents

    home = Path.home()
    for filename in CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a JSON, TOML, YAML, or pyproject.toml file.

    Raises
    ------
    argparse.ArgumentTypeError
        If the file cannot be read, parsed, or does not hold a mapping

    Examples
    --------
    >>> config = load_config_file(".gdoc2html.toml")
    >>> config.get("number_images")
    False

    """
    config_path = Path(config_path)

    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == "pyproject.toml":
        return _load_pyproject_section(config_path)

    try:
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
            raise argparse.ArgumentTypeError(f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml")
    except argparse.ArgumentTypeError:
        raise
    except (OSError, ValueError, yaml.YAMLError) as e:
        # TOMLDecodeError and JSONDecodeError are ValueError subclasses
        raise argparse.ArgumentTypeError(f"Error reading config file {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(f"Config file {config_path} must contain a mapping, got {type(config).__name__}")
    return config


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load configuration from ``--config``, then the environment, then discovery.

    Returns an empty dict when no configuration file is found.
    """
    if explicit_path:
        return load_config_file(explicit_path)

    if env_var_path:
        return load_config_file(env_var_path)

    discovered_path = discover_config_file()
    if discovered_path:
        logger.debug(f"Using configuration from {discovered_path}")
        return load_config_file(discovered_path)

    return {}


def _coerce_style(style_config: Dict[str, Any]) -> Dict[str, Any]:
    style_names = {f.name for f in fields(HtmlStyleTable)}
    style_kwargs: Dict[str, Any] = {}
    for key, value in style_config.items():
        if key not in style_names:
            logger.warning(f"Ignoring unknown style key in configuration: {key}")
            continue
        if key == "named_styles" and isinstance(value, dict):
            value = {name: tuple(entry) for name, entry in value.items()}
        style_kwargs[key] = value
    return style_kwargs


def options_from_config(
    config: Dict[str, Any], base: Optional[GoogleDocsHtmlOptions] = None
) -> GoogleDocsHtmlOptions:
    """Build rendering options from a loaded configuration mapping.

    Raises
    ------
    argparse.ArgumentTypeError
        If a value is outside its valid range or of the wrong shape

    """
    base = base or GoogleDocsHtmlOptions()
    option_names = {f.name for f in fields(GoogleDocsHtmlOptions)} - {"style"}

    kwargs: Dict[str, Any] = {}
    for key, value in config.items():
        if key == "style":
            continue
        if key not in option_names:
            logger.warning(f"Ignoring unknown configuration key: {key}")
            continue
        kwargs[key] = tuple(value) if key in ("proxy_domains", "embedded_proxy_domains") else value

    style_config = config.get("style")
    try:
        if isinstance(style_config, dict):
            kwargs["style"] = base.style.create_updated(**_coerce_style(style_config))
        elif style_config is not None:
            raise argparse.ArgumentTypeError(f"'style' must be a table, got {type(style_config).__name__}")
        return base.create_updated(**kwargs)
    except (TypeError, ValueError) as e:
        raise argparse.ArgumentTypeError(f"Invalid configuration: {e}") from e
