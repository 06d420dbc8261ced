"""Structural validation for run groups.

Group construction never validates on its own; these checks run wherever
user input (config overrides, the CLI) can change a group.
"""

from tensorperf.benchmarks import BenchmarkTest
from tensorperf.errors import ConfigError
from tensorperf.run_groups import RunGroup


def validate_run_group(group: RunGroup) -> None:
    """Check a single run group for authoring defects.

    Args:
        group: Run group to check

    Raises:
        ConfigError: Describing the first defect found
    """
    label = group.name or "<unnamed>"
    if not group.name:
        raise ConfigError("Run group has an empty name")
    if group.step_size <= 0:
        raise ConfigError(f"{label}: step_size must be > 0, got {group.step_size}")
    if group.min > group.max:
        raise ConfigError(f"{label}: min ({group.min}) is greater than max ({group.max})")
    if group.min < 0:
        raise ConfigError(f"{label}: min must be >= 0, got {group.min}")

    if group.options is not None:
        if not group.options:
            raise ConfigError(f"{label}: options is declared but empty")
        if len(set(group.options)) != len(group.options):
            raise ConfigError(f"{label}: options contain duplicates")
        if group.selected_option not in group.options:
            raise ConfigError(
                f"{label}: selected_option '{group.selected_option}' is not one of {group.options}"
            )
        # Groups that parameterize per option must cover every option.
        if group.params:
            missing = [option for option in group.options if option not in group.params]
            if missing:
                raise ConfigError(f"{label}: params missing entries for options {missing}")
    elif group.selected_option is not None:
        raise ConfigError(f"{label}: selected_option is set but the group declares no options")

    if not group.runs:
        raise ConfigError(f"{label}: no benchmark runs")
    seen: set[str] = set()
    for run in group.runs:
        if run.name in seen:
            raise ConfigError(f"{label}: duplicate run name '{run.name}'")
        seen.add(run.name)
        if not isinstance(run.benchmark_test, BenchmarkTest):
            raise ConfigError(
                f"{label}: run '{run.name}' benchmark {type(run.benchmark_test).__name__} has no run() method"
            )


def validate_run_groups(groups: list[RunGroup]) -> None:
    """Validate every group and reject duplicate group names."""
    names: set[str] = set()
    for group in groups:
        validate_run_group(group)
        if group.name in names:
            raise ConfigError(f"Duplicate run group name '{group.name}'")
        names.add(group.name)


__all__ = ["validate_run_group", "validate_run_groups"]
