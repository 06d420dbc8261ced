"""Convolution benchmarks over an input of shape [size, size, in_depth].

Three variants are selected through the ``option`` argument: ``regular``
(conv2d), ``transposed`` (conv2d transpose) and ``depthwise``. Their shape
parameters come from a ``params`` record built from ``ConvParams``.
"""

import math
from dataclasses import dataclass
from typing import Any, ClassVar, TypedDict

import torch
import torch.nn.functional as F

from tensorperf.errors import BenchmarkError

from .types import (
    BACKEND_GPU,
    DEFAULT_ITERATIONS,
    DEFAULT_WARMUP_RUNS,
    check_size,
    require_option,
    resolve_device,
    time_trial,
)

CONV_REGULAR = "regular"
CONV_TRANSPOSED = "transposed"
CONV_DEPTHWISE = "depthwise"
CONV_TYPES = [CONV_REGULAR, CONV_TRANSPOSED, CONV_DEPTHWISE]

PAD_SAME = "same"
PAD_VALID = "valid"


class ConvParams(TypedDict):
    """Shape parameters shared by every convolution variant."""

    in_depth: int
    filter_size: int
    stride: int
    pad: str | int  # "same", "valid" or an explicit amount


class RegularConvParams(ConvParams):
    out_depth: int


class DepthwiseConvParams(ConvParams):
    channel_mul: int


def same_padding(size: int, filter_size: int, stride: int) -> tuple[int, int]:
    """Return (before, after) padding so the output has ceil(size / stride) rows."""
    out_size = math.ceil(size / stride)
    total = max((out_size - 1) * stride + filter_size - size, 0)
    return total // 2, total - total // 2


def _param(params: dict[str, Any] | None, key: str) -> Any:
    if not params or key not in params:
        raise BenchmarkError(f"Convolution params missing '{key}'")
    return params[key]


def _padded_input(x: torch.Tensor, size: int, filter_size: int, stride: int, pad: str | int):
    """Apply ``pad`` to ``x`` up front and return (input, conv padding)."""
    if pad == PAD_SAME:
        before, after = same_padding(size, filter_size, stride)
        return F.pad(x, (before, after, before, after)), 0
    if pad == PAD_VALID:
        return x, 0
    if isinstance(pad, int) and pad >= 0:
        return x, pad
    raise BenchmarkError(f"Unsupported convolution pad '{pad}'")


def _transposed_padding(filter_size: int, stride: int, pad: str | int) -> tuple[int, int]:
    """Return (padding, output_padding) for conv_transpose2d."""
    if pad == PAD_SAME:
        padding = (filter_size - 1) // 2
        output_padding = max(0, min(stride - 1, stride + 2 * padding - filter_size))
        return padding, output_padding
    if pad == PAD_VALID:
        return 0, 0
    if isinstance(pad, int) and pad >= 0:
        return pad, 0
    raise BenchmarkError(f"Unsupported convolution pad '{pad}'")


def _conv_trial(
    backend: str,
    size: int,
    option: str | None,
    params: dict[str, Any] | None,
    warmup_runs: int,
    iterations: int,
) -> float:
    size = check_size(size)
    conv_type = require_option(option, CONV_TYPES, "convolution type")
    in_depth = int(_param(params, "in_depth"))
    filter_size = int(_param(params, "filter_size"))
    stride = int(_param(params, "stride"))
    pad = _param(params, "pad")
    if stride < 1 or filter_size < 1:
        raise BenchmarkError(f"Convolution stride and filter_size must be >= 1, got {stride} and {filter_size}")
    if conv_type == CONV_REGULAR:
        weight_shape = (int(_param(params, "out_depth")), in_depth, filter_size, filter_size)
    elif conv_type == CONV_TRANSPOSED:
        weight_shape = (in_depth, int(_param(params, "out_depth")), filter_size, filter_size)
    else:
        weight_shape = (in_depth * int(_param(params, "channel_mul")), 1, filter_size, filter_size)

    device = resolve_device(backend)
    # NCHW layout for the [size, size, in_depth] input.
    x = torch.rand(1, in_depth, size, size, device=device)
    weight = torch.rand(*weight_shape, device=device)

    if conv_type == CONV_TRANSPOSED:
        padding, output_padding = _transposed_padding(filter_size, stride, pad)

        def op():
            return F.conv_transpose2d(x, weight, stride=stride, padding=padding, output_padding=output_padding)

    else:
        groups = in_depth if conv_type == CONV_DEPTHWISE else 1
        x, padding = _padded_input(x, size, filter_size, stride, pad)

        def op():
            return F.conv2d(x, weight, stride=stride, padding=padding, groups=groups)

    return time_trial(op, device, warmup_runs, iterations)


@dataclass
class ConvGPUBenchmark:
    """Regular, transposed, or depthwise convolution on the GPU backend."""

    warmup_runs: int = DEFAULT_WARMUP_RUNS
    iterations: int = DEFAULT_ITERATIONS
    backend: ClassVar[str] = BACKEND_GPU

    def run(self, size: int, option: str | None = None, params: dict[str, Any] | None = None) -> float:
        return _conv_trial(self.backend, size, option, params, self.warmup_runs, self.iterations)


__all__ = [
    "CONV_TYPES",
    "ConvGPUBenchmark",
    "ConvParams",
    "DepthwiseConvParams",
    "RegularConvParams",
    "same_padding",
]
