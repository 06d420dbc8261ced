"""Per-group sweep overrides read from a config file.

Example YAML::

    run_groups:
      "Pool Ops: input [size, size]":
        max: 512
        step_size: 32
        selected_option: avg
"""

import logging
from dataclasses import dataclass, fields, replace
from typing import Any

from tensorperf.configs.config import Config, ConfigManager
from tensorperf.errors import ConfigError
from tensorperf.run_groups import RunGroup, get_run_groups
from tensorperf.validation import validate_run_groups

LOGGER = logging.getLogger(__name__)

RUN_GROUPS_KEY = "run_groups"


@dataclass
class RunGroupOverride:
    """Sweep fields a config file may change on one run group."""

    min: int | None = None
    max: int | None = None
    step_size: int | None = None
    selected_option: str | None = None

    @classmethod
    def from_dict(cls, group_name: str, data: Any) -> "RunGroupOverride":
        if not isinstance(data, dict):
            raise ConfigError(f"Override for '{group_name}' must be a mapping")
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Override for '{group_name}' has unknown keys {unknown}")
        for key in ("min", "max", "step_size"):
            value = data.get(key)
            if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
                raise ConfigError(f"Override for '{group_name}': {key} must be an integer")
        return cls(**data)

    def apply(self, group: RunGroup) -> RunGroup:
        """Return a copy of ``group`` with the set fields replaced."""
        changes = {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}
        return replace(group, **changes)


def apply_overrides(groups: list[RunGroup], config: Config) -> list[RunGroup]:
    """Patch ``groups`` in place from the ``run_groups`` section of ``config``.

    Overrides are applied to copies and validated first; ``groups`` is only
    modified once every patched group is valid. Unknown group names are
    logged and skipped.

    Raises:
        ConfigError: If an override is malformed or leaves a group invalid
    """
    section = config.get(RUN_GROUPS_KEY, {})
    if not isinstance(section, dict):
        raise ConfigError(f"'{RUN_GROUPS_KEY}' must be a mapping of group name to overrides")

    candidates = list(groups)
    index_by_name = {group.name: i for i, group in enumerate(groups)}
    for name, data in section.items():
        override = RunGroupOverride.from_dict(name, data)
        index = index_by_name.get(name)
        if index is None:
            LOGGER.warning("Ignoring override for unknown run group '%s'", name)
            continue
        candidates[index] = override.apply(candidates[index])

    validate_run_groups(candidates)
    for name in section:
        if name in index_by_name:
            LOGGER.info("Applied override to run group '%s'", name)
    groups[:] = candidates
    return groups


def load_run_groups(config_path: str | None = None) -> list[RunGroup]:
    """Build run groups, apply overrides from ``config_path`` and validate.

    Args:
        config_path: Optional YAML/JSON config file

    Returns:
        Validated list of RunGroup objects
    """
    groups = get_run_groups()
    config = ConfigManager.load(config_path) if config_path else Config()
    return apply_overrides(groups, config)
