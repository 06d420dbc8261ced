"""Benchmark run groups driving the tensor-op performance dashboard.

A run group is a named sweep of one input-size dimension across one or more
competing benchmark implementations (typically CPU vs GPU). The dashboard
walks each group from ``min`` to ``max`` in ``step_size`` increments, maps the
step through ``step_to_size_transformation`` and calls every run's benchmark
test at that size, appending the timings to the run's ``chart_data``.
"""

import logging
from collections.abc import Callable
from dataclasses import asdict, dataclass, field
from typing import Any

from tensorperf.benchmarks import (
    BatchNormalization3DCPUBenchmark,
    BatchNormalization3DGPUBenchmark,
    BenchmarkTest,
    ConvGPUBenchmark,
    ConvParams,
    DepthwiseConvParams,
    MatmulCPUBenchmark,
    MatmulGPUBenchmark,
    PoolBenchmarkParams,
    PoolCPUBenchmark,
    PoolGPUBenchmark,
    ReductionOpsCPUBenchmark,
    ReductionOpsGPUBenchmark,
    RegularConvParams,
    UnaryOpsCPUBenchmark,
    UnaryOpsGPUBenchmark,
)

LOGGER = logging.getLogger(__name__)

UNARY_OP_NAMES = [
    "abs", "acos", "acosh", "asin", "asinh", "atan",
    "atanh", "ceil", "cos", "cosh", "elu", "erf",
    "exp", "expm1", "floor", "leakyRelu", "log", "log1p",
    "logSigmoid", "neg", "prelu", "reciprocal", "relu", "round",
    "rsqrt", "selu", "sigmoid", "sign", "sin", "sinh",
    "softplus", "sqrt", "square", "step", "tan", "tanh",
]  # fmt: skip

REDUCTION_OP_NAMES = ["max", "min", "argMax", "argMin", "sum", "logSumExp"]


@dataclass(frozen=True)
class MinSizeTransform:
    """Step-to-size transformation that clamps small steps up to ``floor``.

    Keeps the first sweep step (0) from producing a zero-sized input.
    """

    floor: int = 1

    def __call__(self, step: int) -> int:
        return max(self.floor, step)


@dataclass
class ChartPoint:
    """One plotted sample: input size (x) against duration in ms (y)."""

    x: int
    y: float


@dataclass
class BenchmarkRun:
    """A named benchmark test binding that accumulates chart data.

    The benchmark test is referenced, not owned; ``chart_data`` is filled in
    by whatever drives the sweep.
    """

    name: str
    benchmark_test: BenchmarkTest
    chart_data: list[ChartPoint] = field(default_factory=list)

    def clear_chart_data(self) -> None:
        """Discard all accumulated chart points."""
        self.chart_data.clear()


@dataclass
class RunGroup:
    """A named sweep over input sizes for one or more benchmark runs.

    Attributes:
        name: Human-readable group title shown on the dashboard
        min: First sweep step
        max: Last sweep step (inclusive)
        step_size: Increment between sweep steps
        step_to_size_transformation: Optional map from step to the size passed to the test
        options: Optional mutually exclusive variants (e.g. op names)
        selected_option: Default variant; one of ``options``
        runs: Benchmark runs compared in this group
        params: Parameter record per option name
    """

    name: str
    min: int
    max: int
    step_size: int
    runs: list[BenchmarkRun]
    params: dict[str, dict[str, Any]] = field(default_factory=dict)
    step_to_size_transformation: Callable[[int], int] | None = None
    options: list[str] | None = None
    selected_option: str | None = None

    def size_for_step(self, step: int) -> int:
        """Return the benchmark size for a raw sweep step."""
        if self.step_to_size_transformation is None:
            return step
        return self.step_to_size_transformation(step)

    def params_for(self, option: str | None = None) -> dict[str, Any]:
        """Return the parameter record for ``option`` (default: the selected one)."""
        key = option if option is not None else self.selected_option
        if key is None:
            return {}
        return self.params.get(key, {})

    def clear_chart_data(self) -> None:
        """Clear chart data on every run in the group."""
        for run in self.runs:
            run.clear_chart_data()


def get_run_groups() -> list[RunGroup]:
    """Build the dashboard's benchmark run groups.

    Returns a freshly constructed list on every call so that chart data
    accumulated on one set of runs never leaks into another.

    Returns:
        Ordered list of RunGroup objects
    """
    groups: list[RunGroup] = []

    groups.append(
        RunGroup(
            name="Batch Normalization 3D: input [size, size, 8]",
            min=0,
            max=512,
            step_size=64,
            step_to_size_transformation=MinSizeTransform(1),
            runs=[
                BenchmarkRun("batchnorm3d_gpu", BatchNormalization3DGPUBenchmark()),
                BenchmarkRun("batchnorm3d_cpu", BatchNormalization3DCPUBenchmark()),
            ],
            params={},
        )
    )

    groups.append(
        RunGroup(
            name="Matrix Multiplication: matmul([size, size], [size, size])",
            min=0,
            max=1024,
            step_size=64,
            step_to_size_transformation=MinSizeTransform(1),
            runs=[
                BenchmarkRun("mulmat_gpu", MatmulGPUBenchmark()),
                BenchmarkRun("mulmat_cpu", MatmulCPUBenchmark()),
            ],
            params={},
        )
    )

    conv_params: ConvParams = {"in_depth": 8, "filter_size": 7, "stride": 1, "pad": "same"}
    reg_params: RegularConvParams = {**conv_params, "out_depth": 3}
    depthwise_params: DepthwiseConvParams = {**conv_params, "channel_mul": 1}
    groups.append(
        RunGroup(
            name="Convolution ops [size, size, depth]",
            min=0,
            max=1024,
            step_size=64,
            step_to_size_transformation=MinSizeTransform(1),
            runs=[BenchmarkRun("conv_gpu", ConvGPUBenchmark())],
            options=["regular", "transposed", "depthwise"],
            selected_option="regular",
            params={
                "regular": reg_params,
                "transposed": reg_params,
                "depthwise": depthwise_params,
            },
        )
    )

    pool_params: PoolBenchmarkParams = {"depth": 8, "field_size": 4, "stride": 4}
    groups.append(
        RunGroup(
            name="Pool Ops: input [size, size]",
            min=0,
            max=1024,
            step_size=64,
            step_to_size_transformation=MinSizeTransform(4),
            options=["max", "avg"],
            selected_option="max",
            runs=[
                BenchmarkRun("pool_gpu", PoolGPUBenchmark()),
                BenchmarkRun("pool_cpu", PoolCPUBenchmark()),
            ],
            params={"max": pool_params, "avg": pool_params},
        )
    )

    groups.append(
        RunGroup(
            name="Unary Ops: input [size, size]",
            min=0,
            max=1024,
            step_size=64,
            step_to_size_transformation=MinSizeTransform(1),
            options=list(UNARY_OP_NAMES),
            selected_option="log",
            runs=[
                BenchmarkRun("unary ops CPU", UnaryOpsCPUBenchmark()),
                BenchmarkRun("unary ops GPU", UnaryOpsGPUBenchmark()),
            ],
            params={},
        )
    )

    groups.append(
        RunGroup(
            name="Reduction Ops: input [size * size]",
            min=0,
            max=1024,
            step_size=64,
            step_to_size_transformation=MinSizeTransform(1),
            options=list(REDUCTION_OP_NAMES),
            selected_option="max",
            runs=[
                BenchmarkRun("reduction ops CPU", ReductionOpsCPUBenchmark()),
                BenchmarkRun("reduction ops GPU", ReductionOpsGPUBenchmark()),
            ],
            params={},
        )
    )

    LOGGER.debug("Built %d run groups", len(groups))
    return groups


def sweep_sizes(group: RunGroup) -> list[int]:
    """List the benchmark sizes a sweep over ``group`` visits, in order.

    Steps run from ``min`` to ``max`` inclusive in ``step_size`` increments.
    """
    return [group.size_for_step(step) for step in range(group.min, group.max + 1, group.step_size)]


def run_group_to_dict(group: RunGroup) -> dict[str, Any]:
    """Export a run group as a JSON/YAML-safe dictionary."""
    transform = group.step_to_size_transformation
    return {
        "name": group.name,
        "min": group.min,
        "max": group.max,
        "step_size": group.step_size,
        "step_to_size_floor": transform.floor if isinstance(transform, MinSizeTransform) else None,
        "options": list(group.options) if group.options is not None else None,
        "selected_option": group.selected_option,
        "params": {option: dict(record) for option, record in group.params.items()},
        "runs": [
            {
                "name": run.name,
                "benchmark": type(run.benchmark_test).__name__,
                "chart_data": [asdict(point) for point in run.chart_data],
            }
            for run in group.runs
        ],
        "sizes": sweep_sizes(group),
    }


def run_groups_to_dicts(groups: list[RunGroup]) -> list[dict[str, Any]]:
    """Export a list of run groups."""
    return [run_group_to_dict(group) for group in groups]


__all__ = [
    "BenchmarkRun",
    "ChartPoint",
    "MinSizeTransform",
    "REDUCTION_OP_NAMES",
    "RunGroup",
    "UNARY_OP_NAMES",
    "get_run_groups",
    "run_group_to_dict",
    "run_groups_to_dicts",
    "sweep_sizes",
]
