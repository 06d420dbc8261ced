"""Config file I/O (YAML/JSON load/save as dict)."""

import json
import os
from typing import Any

import yaml

from tensorperf.errors import ConfigError


def ensure_parent_dir(filepath: str) -> None:
    """Create parent directory of filepath if needed."""
    parent = os.path.dirname(filepath) or "."
    os.makedirs(parent, exist_ok=True)


def _require_mapping(filepath: str, data: Any) -> dict[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{filepath}: top level must be a mapping, got {type(data).__name__}")
    return data


def load_yaml_file(filepath: str) -> dict[str, Any]:
    """Load a YAML file into a dictionary.

    Args:
        filepath: Path to YAML file

    Returns:
        Loaded config as dict; empty dict if the file is empty

    Raises:
        ConfigError: If the file is not valid YAML or not a mapping
    """
    with open(filepath, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"{filepath}: invalid YAML: {e}") from e
    return _require_mapping(filepath, data)


def load_json_file(filepath: str) -> dict[str, Any]:
    """Load a JSON file into a dictionary."""
    with open(filepath, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"{filepath}: invalid JSON: {e}") from e
    return _require_mapping(filepath, data)


def save_yaml_file(filepath: str, data: Any) -> None:
    """Save data to a YAML file."""
    ensure_parent_dir(filepath)
    with open(filepath, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)


def save_json_file(filepath: str, data: Any, indent: int = 2) -> None:
    """Save data to a JSON file."""
    ensure_parent_dir(filepath)
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent)
