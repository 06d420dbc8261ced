"""Reduction op benchmarks over a flat input of shape [size * size]."""

from dataclasses import dataclass
from typing import Any, Callable, ClassVar

import torch

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

REDUCTION_OPS: dict[str, Callable[[torch.Tensor], torch.Tensor]] = {
    "max": torch.max,
    "min": torch.min,
    "argMax": torch.argmax,
    "argMin": torch.argmin,
    "sum": torch.sum,
    "logSumExp": lambda x: torch.logsumexp(x, dim=0),
}


def _reduction_trial(backend: str, size: int, option: str | None, warmup_runs: int, iterations: int) -> float:
    size = check_size(size)
    op_name = require_option(option, REDUCTION_OPS, "reduction op")
    device = resolve_device(backend)
    x = torch.rand(size * size, device=device)
    op = REDUCTION_OPS[op_name]
    return time_trial(lambda: op(x), device, warmup_runs, iterations)


@dataclass
class ReductionOpsCPUBenchmark:
    """Reductions on the CPU backend; ``option`` names the reduction."""

    warmup_runs: int = DEFAULT_WARMUP_RUNS
    iterations: int = DEFAULT_ITERATIONS
    backend: ClassVar[str] = BACKEND_CPU

    def run(self, size: int, option: str | None = None, params: dict[str, Any] | None = None) -> float:
        return _reduction_trial(self.backend, size, option, self.warmup_runs, self.iterations)


@dataclass
class ReductionOpsGPUBenchmark:
    """Reductions on the GPU backend; ``option`` names the reduction."""

    warmup_runs: int = DEFAULT_WARMUP_RUNS
    iterations: int = DEFAULT_ITERATIONS
    backend: ClassVar[str] = BACKEND_GPU

    def run(self, size: int, option: str | None = None, params: dict[str, Any] | None = None) -> float:
        return _reduction_trial(self.backend, size, option, self.warmup_runs, self.iterations)


__all__ = ["REDUCTION_OPS", "ReductionOpsCPUBenchmark", "ReductionOpsGPUBenchmark"]
