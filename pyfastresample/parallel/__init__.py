"""
Parallel execution module for PyFastResample.

Provides the row-range executor shared by the resampler and the convolution
engine. Destination rows are partitioned into ceil(H / workers) sized ranges
that run concurrently on a fixed thread pool; results do not depend on the
number of workers.

Author: B.G.
"""

from .executor import (
    ParallelExecutor,
    executor_for,
    get_executor,
    partition_rows,
    shutdown_executors,
)

__all__ = [
    "ParallelExecutor",
    "executor_for",
    "get_executor",
    "partition_rows",
    "shutdown_executors",
]
