"""Configuration container and file loading for tensorperf."""

import os
from typing import Any

from tensorperf.configs.config_io import (
    load_json_file,
    load_yaml_file,
    save_json_file,
    save_yaml_file,
)
from tensorperf.errors import ConfigError


def _deep_merge(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """Return ``base`` with ``overrides`` merged in; neither input is mutated."""
    merged = dict(base)
    for key, value in overrides.items():
        if isinstance(merged.get(key), dict) and isinstance(value, dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class Config:
    """Dictionary-backed configuration with dotted key lookup."""

    def __init__(self, config_dict: dict[str, Any] | None = None):
        """Initialize configuration.

        Args:
            config_dict: Optional dictionary to use as base (shallow copy)
        """
        self.config = (config_dict or {}).copy()

    def update(self, config_dict: dict[str, Any]) -> None:
        """Merge overrides into the configuration; nested dicts merge recursively.

        Args:
            config_dict: Dictionary with configuration overrides
        """
        self.config = _deep_merge(self.config, config_dict)

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by dotted key (e.g. ``logging.level``).

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value
        """
        value = self.config
        for k in key.split("."):
            if isinstance(value, dict):
                value = value.get(k)
            else:
                return default
        return value if value is not None else default

    def to_dict(self) -> dict[str, Any]:
        return dict(self.config)


class ConfigManager:
    """Loads and saves configuration files."""

    @staticmethod
    def load_yaml(filepath: str) -> Config:
        return Config(load_yaml_file(filepath))

    @staticmethod
    def load_json(filepath: str) -> Config:
        return Config(load_json_file(filepath))

    @staticmethod
    def load(filepath: str) -> Config:
        """Load a YAML or JSON config, chosen by file extension.

        Raises:
            ConfigError: If the file is missing or the extension is unsupported
        """
        if not os.path.exists(filepath):
            raise ConfigError(f"Config file not found: {filepath}")
        if filepath.endswith((".yaml", ".yml")):
            return ConfigManager.load_yaml(filepath)
        if filepath.endswith(".json"):
            return ConfigManager.load_json(filepath)
        raise ConfigError(f"Unsupported config format: {filepath} (expected .yaml, .yml or .json)")

    @staticmethod
    def save_yaml(config: Config, filepath: str) -> None:
        save_yaml_file(filepath, config.to_dict())

    @staticmethod
    def save_json(config: Config, filepath: str) -> None:
        save_json_file(filepath, config.to_dict())

    @staticmethod
    def load_or_default(
        filepath: str | None = None,
        default_config: dict[str, Any] | None = None,
    ) -> Config:
        """Load configuration from file (merged over defaults) or return defaults.

        Args:
            filepath: Optional path to configuration file
            default_config: Optional default config dict

        Returns:
            Config object
        """
        base = Config(default_config or {})
        if filepath and os.path.exists(filepath):
            base.update(ConfigManager.load(filepath).config)
        return base
