"""TOML configuration file loading and merging."""

from __future__ import annotations

import os
import tomllib
from typing import TYPE_CHECKING, Any

from specgraph.exceptions import ConfigLoadError

if TYPE_CHECKING:
    from pathlib import Path


def read_toml_file(path: Path) -> dict[str, Any]:
    """Read and parse a TOML file.

    Args:
        path: Path to the TOML file.

    Returns:
        Parsed TOML content as dictionary.

    Raises:
        ConfigLoadError: If the file is missing or cannot be parsed.
    """
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except FileNotFoundError as e:
        msg = f"Configuration file not found: {path}"
        raise ConfigLoadError(msg, path=path) from e
    except tomllib.TOMLDecodeError as e:
        msg = f"Failed to parse TOML file: {e}"
        raise ConfigLoadError(
            msg,
            path=path,
            line=getattr(e, "lineno", None),
            column=getattr(e, "colno", None),
        ) from e


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two configuration dictionaries.

    Merges `override` into `base`, returning a new dictionary. Neither input
    is modified.

    Merge rules:
        - Dictionaries are recursively merged
        - Arrays are replaced entirely
        - Scalars are replaced with override value
        - Missing keys in override preserve base values
    """
    result: dict[str, Any] = {}

    for key in base.keys() | override.keys():
        if key not in override:
            result[key] = copy_value(base[key])
        elif key not in base:
            result[key] = copy_value(override[key])
        elif isinstance(base[key], dict) and isinstance(override[key], dict):
            result[key] = deep_merge(base[key], override[key])
        else:
            result[key] = copy_value(override[key])

    return result


def copy_value(value: Any) -> Any:
    """Create a deep copy of a configuration value."""
    if isinstance(value, dict):
        return {k: copy_value(v) for k, v in value.items()}
    if isinstance(value, list):
        return [copy_value(item) for item in value]
    return value


def parse_env_overrides(prefix: str = "SPECGRAPH_") -> dict[str, Any]:
    """Collect logging overrides from the environment.

    Only two variables are honoured: ``{prefix}DEBUG`` forces the debug
    level and ``{prefix}LOG_LEVEL`` sets the level when debug is unset.

    Args:
        prefix: Environment variable prefix.

    Returns:
        A partial configuration dictionary suitable for `deep_merge`.
    """
    if os.environ.get(f"{prefix}DEBUG"):
        return {"logging": {"level": "debug"}}

    level = os.environ.get(f"{prefix}LOG_LEVEL")
    if level:
        return {"logging": {"level": level.lower()}}
    return {}
