"""Matrix multiplication benchmarks: matmul([size, size], [size, size])."""

from dataclasses import dataclass
from typing import Any, ClassVar

import torch

from .types import (
    BACKEND_CPU,
    BACKEND_GPU,
    DEFAULT_ITERATIONS,
    DEFAULT_WARMUP_RUNS,
    check_size,
    resolve_device,
    time_trial,
)


def _matmul_trial(backend: str, size: int, warmup_runs: int, iterations: int) -> float:
    size = check_size(size)
    device = resolve_device(backend)
    a = torch.rand(size, size, device=device)
    b = torch.rand(size, size, device=device)
    return time_trial(lambda: torch.matmul(a, b), device, warmup_runs, iterations)


@dataclass
class MatmulCPUBenchmark:
    """Square matmul on the CPU backend."""

    warmup_runs: int = DEFAULT_WARMUP_RUNS
    iterations: int = DEFAULT_ITERATIONS
    backend: ClassVar[str] = BACKEND_CPU

    def run(self, size: int, option: str | None = None, params: dict[str, Any] | None = None) -> float:
        return _matmul_trial(self.backend, size, self.warmup_runs, self.iterations)


@dataclass
class MatmulGPUBenchmark:
    """Square matmul on the GPU backend."""

    warmup_runs: int = DEFAULT_WARMUP_RUNS
    iterations: int = DEFAULT_ITERATIONS
    backend: ClassVar[str] = BACKEND_GPU

    def run(self, size: int, option: str | None = None, params: dict[str, Any] | None = None) -> float:
        return _matmul_trial(self.backend, size, self.warmup_runs, self.iterations)


__all__ = ["MatmulCPUBenchmark", "MatmulGPUBenchmark"]
