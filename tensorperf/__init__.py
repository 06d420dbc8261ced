"""tensorperf: benchmark run groups for the tensor-op performance dashboard.

Provides:
- run_groups (RunGroup, BenchmarkRun, get_run_groups, sweep_sizes)
- benchmarks (CPU/GPU benchmark tests for matmul, conv, pool, unary, reduction, batchnorm)
- validation (validate_run_group, validate_run_groups)
- configs (Config, ConfigManager, apply_overrides, load_run_groups)
"""

from tensorperf.benchmarks import BenchmarkTest
from tensorperf.configs import Config, ConfigManager, apply_overrides, load_run_groups
from tensorperf.errors import BenchmarkError, ConfigError, HardwareNotFoundError, TensorPerfError
from tensorperf.run_groups import (
    BenchmarkRun,
    ChartPoint,
    MinSizeTransform,
    RunGroup,
    get_run_groups,
    run_group_to_dict,
    run_groups_to_dicts,
    sweep_sizes,
)
from tensorperf.validation import validate_run_group, validate_run_groups

__version__ = "0.1.0"

__all__ = [
    "BenchmarkTest",
    "BenchmarkRun",
    "ChartPoint",
    "MinSizeTransform",
    "RunGroup",
    "get_run_groups",
    "run_group_to_dict",
    "run_groups_to_dicts",
    "sweep_sizes",
    "validate_run_group",
    "validate_run_groups",
    "Config",
    "ConfigManager",
    "apply_overrides",
    "load_run_groups",
    "TensorPerfError",
    "ConfigError",
    "BenchmarkError",
    "HardwareNotFoundError",
]
