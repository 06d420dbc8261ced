"""Benchmark tests referenced by the run groups.

Each test times one tensor operation on the CPU or GPU backend through
``run(size, option, params)``.
"""

from .batchnorm3d import BatchNormalization3DCPUBenchmark, BatchNormalization3DGPUBenchmark
from .conv import CONV_TYPES, ConvGPUBenchmark, ConvParams, DepthwiseConvParams, RegularConvParams
from .matmul import MatmulCPUBenchmark, MatmulGPUBenchmark
from .pool import POOL_TYPES, PoolBenchmarkParams, PoolCPUBenchmark, PoolGPUBenchmark
from .reduction_ops import REDUCTION_OPS, ReductionOpsCPUBenchmark, ReductionOpsGPUBenchmark
from .types import BACKEND_CPU, BACKEND_GPU, BACKENDS, BenchmarkTest, gpu_available, resolve_device
from .unary_ops import UNARY_OPS, UnaryOpsCPUBenchmark, UnaryOpsGPUBenchmark

__all__ = [
    "BACKENDS",
    "BACKEND_CPU",
    "BACKEND_GPU",
    "BenchmarkTest",
    "gpu_available",
    "resolve_device",
    "BatchNormalization3DCPUBenchmark",
    "BatchNormalization3DGPUBenchmark",
    "CONV_TYPES",
    "ConvGPUBenchmark",
    "ConvParams",
    "DepthwiseConvParams",
    "RegularConvParams",
    "MatmulCPUBenchmark",
    "MatmulGPUBenchmark",
    "POOL_TYPES",
    "PoolBenchmarkParams",
    "PoolCPUBenchmark",
    "PoolGPUBenchmark",
    "REDUCTION_OPS",
    "ReductionOpsCPUBenchmark",
    "ReductionOpsGPUBenchmark",
    "UNARY_OPS",
    "UnaryOpsCPUBenchmark",
    "UnaryOpsGPUBenchmark",
]
