"""Custom exceptions for tensorperf.

Callers can tell invalid run-group configuration apart from benchmark
trials that failed (including a missing GPU backend).
"""


class TensorPerfError(Exception):
    """Base exception for all tensorperf errors."""

    pass


class ConfigError(TensorPerfError):
    """Raised when a run group, override, or config file is invalid."""

    pass


class BenchmarkError(TensorPerfError):
    """Raised when a benchmark trial cannot produce a duration."""

    pass


class HardwareNotFoundError(BenchmarkError):
    """Raised when the requested backend (e.g. a CUDA or MPS GPU) is not available."""

    pass
