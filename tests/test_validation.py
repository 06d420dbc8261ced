"""Tests for run group validation."""

import pytest

from tensorperf.benchmarks import MatmulCPUBenchmark
from tensorperf.errors import ConfigError
from tensorperf.run_groups import BenchmarkRun, RunGroup
from tensorperf.validation import validate_run_group, validate_run_groups


def _group(**overrides):
    values = {
        "name": "test group",
        "min": 0,
        "max": 128,
        "step_size": 64,
        "runs": [BenchmarkRun("mulmat_cpu", MatmulCPUBenchmark())],
    }
    values.update(overrides)
    return RunGroup(**values)


class TestValidateRunGroup:
    """Single-group checks."""

    def test_built_groups_are_valid(self, run_groups):
        validate_run_groups(run_groups)

    def test_valid_minimal_group(self):
        validate_run_group(_group())

    def test_min_greater_than_max(self):
        with pytest.raises(ConfigError, match="greater than max"):
            validate_run_group(_group(min=256, max=128))

    @pytest.mark.parametrize("step_size", [0, -64])
    def test_non_positive_step(self, step_size):
        with pytest.raises(ConfigError, match="step_size"):
            validate_run_group(_group(step_size=step_size))

    def test_selected_option_not_in_options(self):
        with pytest.raises(ConfigError, match="selected_option"):
            validate_run_group(_group(options=["max", "avg"], selected_option="sum"))

    def test_selected_option_without_options(self):
        with pytest.raises(ConfigError, match="declares no options"):
            validate_run_group(_group(selected_option="max"))

    def test_params_missing_option(self):
        group = _group(options=["max", "avg"], selected_option="max", params={"max": {"depth": 8}})
        with pytest.raises(ConfigError, match="avg"):
            validate_run_group(group)

    def test_options_without_params_are_allowed(self):
        validate_run_group(_group(options=["log", "exp"], selected_option="log"))

    def test_duplicate_run_names(self):
        runs = [BenchmarkRun("dup", MatmulCPUBenchmark()), BenchmarkRun("dup", MatmulCPUBenchmark())]
        with pytest.raises(ConfigError, match="duplicate run name"):
            validate_run_group(_group(runs=runs))

    def test_benchmark_without_run_method(self):
        with pytest.raises(ConfigError, match="no run\\(\\) method"):
            validate_run_group(_group(runs=[BenchmarkRun("broken", object())]))

    def test_no_runs(self):
        with pytest.raises(ConfigError, match="no benchmark runs"):
            validate_run_group(_group(runs=[]))


class TestValidateRunGroups:
    """List-level checks."""

    def test_duplicate_group_names(self):
        with pytest.raises(ConfigError, match="Duplicate run group name"):
            validate_run_groups([_group(), _group()])
