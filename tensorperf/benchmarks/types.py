"""Benchmark test protocol and shared trial helpers.

Every benchmark test exposes ``run(size, option, params)`` and returns the
trial duration in milliseconds. Tests are interchangeable regardless of the
operation or backend they exercise; nothing here relies on a common base
class.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

import numpy as np
import torch

from tensorperf.errors import BenchmarkError, HardwareNotFoundError

LOGGER = logging.getLogger(__name__)

BACKEND_CPU = "cpu"
BACKEND_GPU = "gpu"
BACKENDS = [BACKEND_CPU, BACKEND_GPU]

DEFAULT_WARMUP_RUNS = 1
DEFAULT_ITERATIONS = 3


@runtime_checkable
class BenchmarkTest(Protocol):
    """Capability shared by every benchmark: time one sized trial."""

    def run(self, size: int, option: str | None = None, params: dict[str, Any] | None = None) -> float:
        """Run a trial at ``size`` and return its duration in milliseconds."""
        ...


def gpu_available() -> bool:
    """Return True when a CUDA or MPS device can be used."""
    if torch.cuda.is_available():
        return True
    mps = getattr(torch.backends, "mps", None)
    return bool(mps is not None and mps.is_available())


def resolve_device(backend: str) -> torch.device:
    """Map a backend name to a torch device.

    Args:
        backend: ``"cpu"`` or ``"gpu"``

    Returns:
        torch.device for the backend

    Raises:
        HardwareNotFoundError: If ``gpu`` is requested and neither CUDA nor MPS is present
    """
    if backend == BACKEND_CPU:
        return torch.device("cpu")
    if backend != BACKEND_GPU:
        raise BenchmarkError(f"Unknown backend '{backend}'; expected one of {BACKENDS}")
    if torch.cuda.is_available():
        return torch.device("cuda")
    mps = getattr(torch.backends, "mps", None)
    if mps is not None and mps.is_available():
        return torch.device("mps")
    raise HardwareNotFoundError("No GPU backend available (CUDA or MPS required)")


def synchronize(device: torch.device) -> None:
    """Block until queued work on ``device`` has finished."""
    if device.type == "cuda":
        torch.cuda.synchronize(device)
    elif device.type == "mps":
        torch.mps.synchronize()


def check_size(size: int) -> int:
    """Reject degenerate sweep sizes."""
    if int(size) < 1:
        raise BenchmarkError(f"Benchmark size must be >= 1, got {size}")
    return int(size)


def require_option(option: str | None, choices: Any, kind: str) -> str:
    """Return ``option`` if it is one of ``choices``."""
    if option is None or option not in choices:
        raise BenchmarkError(f"Unknown {kind} '{option}'; expected one of {sorted(choices)}")
    return option


def time_trial(
    fn: Callable[[], Any],
    device: torch.device,
    warmup_runs: int = DEFAULT_WARMUP_RUNS,
    iterations: int = DEFAULT_ITERATIONS,
) -> float:
    """Time ``fn`` on ``device`` and return the median duration in milliseconds.

    Args:
        fn: Zero-argument callable that launches the operation
        device: Device the operation runs on (used for synchronization)
        warmup_runs: Untimed calls before measuring
        iterations: Timed calls

    Returns:
        Median wall-clock duration in milliseconds
    """
    if iterations < 1:
        raise BenchmarkError(f"iterations must be >= 1, got {iterations}")
    try:
        with torch.no_grad():
            for _ in range(warmup_runs):
                fn()
            synchronize(device)

            times_ms = []
            for _ in range(iterations):
                start = time.perf_counter()
                fn()
                synchronize(device)
                times_ms.append((time.perf_counter() - start) * 1000.0)
    except (RuntimeError, NotImplementedError) as e:
        raise BenchmarkError(f"Trial on {device} failed: {e}") from e

    median_ms = float(np.median(times_ms))
    LOGGER.debug("Trial on %s: median %.3f ms over %d iterations", device, median_ms, iterations)
    return median_ms
