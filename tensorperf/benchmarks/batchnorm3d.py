"""3D batch normalization benchmarks over an input of shape [size, size, 8]."""

from dataclasses import dataclass
from typing import Any, ClassVar

import torch
import torch.nn.functional as F

from .types import (
    BACKEND_CPU,
    BACKEND_GPU,
    DEFAULT_ITERATIONS,
    DEFAULT_WARMUP_RUNS,
    check_size,
    resolve_device,
    time_trial,
)

BATCHNORM_DEPTH = 8
BATCHNORM_EPSILON = 1e-3


def _batchnorm3d_trial(backend: str, size: int, warmup_runs: int, iterations: int) -> float:
    size = check_size(size)
    device = resolve_device(backend)
    x = torch.rand(size, size, BATCHNORM_DEPTH, device=device)
    mean = torch.rand(BATCHNORM_DEPTH, device=device)
    variance = torch.rand(BATCHNORM_DEPTH, device=device)
    offset = torch.rand(BATCHNORM_DEPTH, device=device)
    scale = torch.rand(BATCHNORM_DEPTH, device=device)

    # Channels-last input: normalize each of the trailing depth channels.
    flat = x.reshape(-1, BATCHNORM_DEPTH)

    def op():
        return F.batch_norm(flat, mean, variance, weight=scale, bias=offset, eps=BATCHNORM_EPSILON)

    return time_trial(op, device, warmup_runs, iterations)


@dataclass
class BatchNormalization3DCPUBenchmark:
    """Batch normalization on the CPU backend."""

    warmup_runs: int = DEFAULT_WARMUP_RUNS
    iterations: int = DEFAULT_ITERATIONS
    backend: ClassVar[str] = BACKEND_CPU

    def run(self, size: int, option: str | None = None, params: dict[str, Any] | None = None) -> float:
        return _batchnorm3d_trial(self.backend, size, self.warmup_runs, self.iterations)


@dataclass
class BatchNormalization3DGPUBenchmark:
    """Batch normalization on the GPU backend."""

    warmup_runs: int = DEFAULT_WARMUP_RUNS
    iterations: int = DEFAULT_ITERATIONS
    backend: ClassVar[str] = BACKEND_GPU

    def run(self, size: int, option: str | None = None, params: dict[str, Any] | None = None) -> float:
        return _batchnorm3d_trial(self.backend, size, self.warmup_runs, self.iterations)


__all__ = ["BATCHNORM_DEPTH", "BatchNormalization3DCPUBenchmark", "BatchNormalization3DGPUBenchmark"]
