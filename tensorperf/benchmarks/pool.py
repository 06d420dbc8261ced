"""Pooling benchmarks over an input of shape [size, size, depth]."""

from dataclasses import dataclass
from typing import Any, ClassVar, TypedDict

import torch
import torch.nn.functional as F

from tensorperf.errors import BenchmarkError

from .types import (
    BACKEND_CPU,
    BACKEND_GPU,
    DEFAULT_ITERATIONS,
    DEFAULT_WARMUP_RUNS,
    check_size,
    require_option,
    resolve_device,
    time_trial,
)

POOL_MAX = "max"
POOL_AVG = "avg"
POOL_TYPES = [POOL_MAX, POOL_AVG]


class PoolBenchmarkParams(TypedDict):
    depth: int
    field_size: int
    stride: int


def _pool_trial(
    backend: str,
    size: int,
    option: str | None,
    params: dict[str, Any] | None,
    warmup_runs: int,
    iterations: int,
) -> float:
    size = check_size(size)
    pool_type = require_option(option, POOL_TYPES, "pool type")
    try:
        depth = int(params["depth"])
        field_size = int(params["field_size"])
        stride = int(params["stride"])
    except (KeyError, TypeError) as e:
        raise BenchmarkError(f"Pool params missing or invalid: {e}") from e
    if stride < 1 or field_size < 1:
        raise BenchmarkError(f"Pool stride and field_size must be >= 1, got {stride} and {field_size}")
    if size < field_size:
        raise BenchmarkError(f"Pool input size {size} is smaller than field size {field_size}")

    device = resolve_device(backend)
    x = torch.rand(1, depth, size, size, device=device)
    pool = F.max_pool2d if pool_type == POOL_MAX else F.avg_pool2d
    return time_trial(lambda: pool(x, field_size, stride), device, warmup_runs, iterations)


@dataclass
class PoolCPUBenchmark:
    """Max or average pooling on the CPU backend."""

    warmup_runs: int = DEFAULT_WARMUP_RUNS
    iterations: int = DEFAULT_ITERATIONS
    backend: ClassVar[str] = BACKEND_CPU

    def run(self, size: int, option: str | None = None, params: dict[str, Any] | None = None) -> float:
        return _pool_trial(self.backend, size, option, params, self.warmup_runs, self.iterations)


@dataclass
class PoolGPUBenchmark:
    """Max or average pooling on the GPU backend."""

    warmup_runs: int = DEFAULT_WARMUP_RUNS
    iterations: int = DEFAULT_ITERATIONS
    backend: ClassVar[str] = BACKEND_GPU

    def run(self, size: int, option: str | None = None, params: dict[str, Any] | None = None) -> float:
        return _pool_trial(self.backend, size, option, params, self.warmup_runs, self.iterations)


__all__ = ["POOL_TYPES", "PoolBenchmarkParams", "PoolCPUBenchmark", "PoolGPUBenchmark"]
