"""Pytest configuration and fixtures."""

import pytest

from tensorperf.run_groups import get_run_groups


@pytest.fixture
def run_groups():
    """Freshly built run groups."""
    return get_run_groups()


@pytest.fixture
def groups_by_name(run_groups):
    """Run groups keyed by their prefix before the first colon or bracket."""
    return {group.name.split(":")[0].split(" [")[0]: group for group in run_groups}


@pytest.fixture
def override_yaml(tmp_path):
    """Write a YAML overrides file and return its path."""
    path = tmp_path / "overrides.yaml"
    path.write_text(
        "run_groups:\n"
        '  "Pool Ops: input [size, size]":\n'
        "    max: 512\n"
        "    step_size: 32\n"
        "    selected_option: avg\n",
        encoding="utf-8",
    )
    return str(path)
