"""Elementwise unary op benchmarks over an input of shape [size, size].

Op names follow the dashboard's naming (camelCase, e.g. ``leakyRelu``).
"""

from dataclasses import dataclass
from typing import Any, Callable, ClassVar

import torch
import torch.nn.functional as F

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

PRELU_ALPHA = 0.2

UNARY_OPS: dict[str, Callable[[torch.Tensor], torch.Tensor]] = {
    "abs": torch.abs,
    "acos": torch.acos,
    "acosh": torch.acosh,
    "asin": torch.asin,
    "asinh": torch.asinh,
    "atan": torch.atan,
    "atanh": torch.atanh,
    "ceil": torch.ceil,
    "cos": torch.cos,
    "cosh": torch.cosh,
    "elu": F.elu,
    "erf": torch.erf,
    "exp": torch.exp,
    "expm1": torch.expm1,
    "floor": torch.floor,
    "leakyRelu": F.leaky_relu,
    "log": torch.log,
    "log1p": torch.log1p,
    "logSigmoid": F.logsigmoid,
    "neg": torch.neg,
    "prelu": lambda x: F.prelu(x, torch.full((1,), PRELU_ALPHA, device=x.device)),
    "reciprocal": torch.reciprocal,
    "relu": torch.relu,
    "round": torch.round,
    "rsqrt": torch.rsqrt,
    "selu": torch.selu,
    "sigmoid": torch.sigmoid,
    "sign": torch.sign,
    "sin": torch.sin,
    "sinh": torch.sinh,
    "softplus": F.softplus,
    "sqrt": torch.sqrt,
    "square": torch.square,
    "step": lambda x: (x > 0).to(x.dtype),
    "tan": torch.tan,
    "tanh": torch.tanh,
}


def _unary_trial(backend: str, size: int, option: str | None, warmup_runs: int, iterations: int) -> float:
    size = check_size(size)
    op_name = require_option(option, UNARY_OPS, "unary op")
    device = resolve_device(backend)
    # Centered on zero so sign-sensitive ops (relu, step, sign) see both branches.
    x = torch.rand(size, size, device=device) * 2 - 1
    op = UNARY_OPS[op_name]
    return time_trial(lambda: op(x), device, warmup_runs, iterations)


@dataclass
class UnaryOpsCPUBenchmark:
    """Unary ops on the CPU backend; ``option`` names the op."""

    warmup_runs: int = DEFAULT_WARMUP_RUNS
    iterations: int = DEFAULT_ITERATIONS
    backend: ClassVar[str] = BACKEND_CPU

    def run(self, size: int, option: str | None = None, params: dict[str, Any] | None = None) -> float:
        return _unary_trial(self.backend, size, option, self.warmup_runs, self.iterations)


@dataclass
class UnaryOpsGPUBenchmark:
    """Unary ops on the GPU backend; ``option`` names the op."""

    warmup_runs: int = DEFAULT_WARMUP_RUNS
    iterations: int = DEFAULT_ITERATIONS
    backend: ClassVar[str] = BACKEND_GPU

    def run(self, size: int, option: str | None = None, params: dict[str, Any] | None = None) -> float:
        return _unary_trial(self.backend, size, option, self.warmup_runs, self.iterations)


__all__ = ["UNARY_OPS", "UnaryOpsCPUBenchmark", "UnaryOpsGPUBenchmark"]
