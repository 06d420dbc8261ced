"""Configuration load/save and run-group overrides."""

from .config import Config, ConfigManager
from .config_io import (
    ensure_parent_dir,
    load_json_file,
    load_yaml_file,
    save_json_file,
    save_yaml_file,
)
from .overrides import RunGroupOverride, apply_overrides, load_run_groups

__all__ = [
    "load_yaml_file",
    "load_json_file",
    "save_yaml_file",
    "save_json_file",
    "ensure_parent_dir",
    "Config",
    "ConfigManager",
    "RunGroupOverride",
    "apply_overrides",
    "load_run_groups",
]
