"""Main configuration loading functions.

This module provides the entry points used to load a pfoana configuration:
- load_config(): Load from a YAML string
- load_config_file(): Load from a file path

Both support an `include` directive, which pulls in one or more YAML files
(relative to the including file) before the content of the file itself is
merged on top of them.
"""

import os
from typing import Any, Dict, List, Optional

import yaml

from .errors import ConfigCycleError, ConfigIncludeError

__all__ = ["load_config", "load_config_file", "deep_merge"]

INCLUDE_KEY = "include"


def deep_merge(base: Dict[str, Any], update: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge two dictionaries, `update` taking precedence.

    Parameters
    ----------
    base : Dict[str, Any]
        Base dictionary
    update : Dict[str, Any]
        Dictionary whose values override the base ones

    Returns
    -------
    Dict[str, Any]
        Merged dictionary (the inputs are left untouched)
    """
    result = dict(base)
    for key, value in update.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def _load_config_recursive(
    cfg_path: Optional[str] = None,
    config_string: Optional[str] = None,
    root_dir: Optional[str] = None,
    include_stack: Optional[List[str]] = None,
) -> Dict[str, Any]:
    """Recursively load config with cycle detection.

    Parameters
    ----------
    cfg_path : str, optional
        Path to configuration file (mutually exclusive with config_string)
    config_string : str, optional
        YAML configuration string (mutually exclusive with cfg_path)
    root_dir : str, optional
        Root directory for resolving relative include paths
    include_stack : List[str], optional
        Stack of currently-loading files (for cycle detection)

    Returns
    -------
    Dict[str, Any]
        Configuration content with all includes resolved
    """
    # Validate inputs
    if (cfg_path is None) == (config_string is None):
        raise ValueError("Must provide exactly one of cfg_path or config_string")

    # Determine the identifier for cycle detection and root directory
    if cfg_path is not None:
        cfg_path = os.path.abspath(cfg_path)
        identifier = cfg_path
        if root_dir is None:
            root_dir = os.path.dirname(cfg_path)
    else:
        identifier = "<string>"
        if root_dir is None:
            root_dir = os.getcwd()

    # Cycle detection
    include_stack = include_stack or []
    if identifier in include_stack:
        raise ConfigCycleError(include_stack + [identifier])
    include_stack = include_stack + [identifier]

    # Load YAML
    try:
        if cfg_path is not None:
            with open(cfg_path, "r", encoding="utf-8") as f:
                main_config = yaml.safe_load(f)
        else:
            main_config = yaml.safe_load(config_string)
    except FileNotFoundError as exc:
        raise ConfigIncludeError(f"Configuration file not found: {cfg_path}") from exc
    except yaml.YAMLError as exc:
        raise ConfigIncludeError(f"Error loading {identifier}: {exc}") from exc

    if main_config is None:
        return {}

    # Process includes
    includes = main_config.pop(INCLUDE_KEY, [])
    if isinstance(includes, str):
        includes = [includes]

    config = {}
    for include_file in includes:
        include_path = include_file
        if not os.path.isabs(include_path):
            include_path = os.path.join(root_dir, include_path)

        included = _load_config_recursive(
            cfg_path=include_path, include_stack=include_stack
        )
        config = deep_merge(config, included)

    # Merge main config content
    return deep_merge(config, main_config)


def load_config(config_str: str, root_dir: Optional[str] = None) -> Dict[str, Any]:
    """Load a configuration from a YAML string.

    Parameters
    ----------
    config_str : str
        YAML configuration string
    root_dir : str, optional
        Directory used to resolve relative include paths (defaults to the
        current working directory)

    Returns
    -------
    Dict[str, Any]
        Loaded and merged configuration
    """
    return _load_config_recursive(config_string=config_str, root_dir=root_dir)


def load_config_file(cfg_path: str) -> Dict[str, Any]:
    """Load a configuration from a file.

    Parameters
    ----------
    cfg_path : str
        Path to configuration file

    Returns
    -------
    Dict[str, Any]
        Loaded and merged configuration

    Raises
    ------
    ConfigCycleError
        If circular include detected
    ConfigIncludeError
        If the file or one of its includes cannot be loaded
    """
    return _load_config_recursive(cfg_path=cfg_path)
