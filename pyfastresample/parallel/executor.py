"""
Row-parallel executor for PyFastResample.

Output rasters are split into contiguous row ranges, one per worker, and each
range is filled by a worker thread. Rows only read immutable state (source
pixels, weight tables, kernels) and write disjoint slices of the destination,
so no locking is needed while computing. NumPy releases the GIL inside the
per-row array operations, which lets the threads overlap.

Author: B.G.
"""

from __future__ import annotations

import atexit
import logging
import threading
from contextlib import contextmanager
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Callable, List, Tuple

from ..config import get_config, resolve_workers

logger = logging.getLogger(__name__)


def partition_rows(height: int, units: int) -> List[Tuple[int, int]]:
    """
    Split [0, height) into contiguous ranges of ceil(height / units) rows.

    The last range may be shorter; no range is empty, so fewer than ``units``
    ranges are returned for short rasters.
    """
    if height <= 0:
        return []
    units = max(1, int(units))
    chunk = (height + units - 1) // units
    return [(start, min(start + chunk, height)) for start in range(0, height, chunk)]


class _FirstFailure:
    """Keeps the first exception recorded by any worker."""

    def __init__(self):
        self._lock = threading.Lock()
        self._error = None
        self.aborted = threading.Event()

    def record(self, error: Exception) -> None:
        with self._lock:
            if self._error is None:
                self._error = error
        self.aborted.set()

    def raise_if_set(self) -> None:
        if self._error is not None:
            raise self._error


class ParallelExecutor:
    """
    Fixed-size pool of worker threads running row computations.

    Args:
        workers: Number of worker threads. Defaults to the configured count
                 (PYFASTRESAMPLE_WORKERS or the number of CPUs).

    Example:
        with ParallelExecutor(workers=4) as executor:
            executor.run_rows(out.shape[0], fill_row)
    """

    def __init__(self, workers: int | None = None):
        self.workers = resolve_workers(workers)
        self._pool = ThreadPoolExecutor(max_workers=self.workers, thread_name_prefix="pfr-rows")
        logger.debug("Started executor with %d workers", self.workers)

    def run_rows(self, height: int, row_fn: Callable[[int], None]) -> None:
        """
        Call ``row_fn(y)`` for every y in [0, height) and wait for completion.

        One task is submitted per row range. If a row raises, the other ranges
        stop at their next row and the first recorded exception is re-raised
        once every range has returned.
        """
        ranges = partition_rows(height, self.workers)
        failure = _FirstFailure()

        def _run_range(start: int, stop: int) -> None:
            for y in range(start, stop):
                if failure.aborted.is_set():
                    return
                try:
                    row_fn(y)
                except Exception as exc:
                    failure.record(exc)
                    return

        logger.debug("Running %d rows in %d ranges", height, len(ranges))
        futures: List[Future[None]] = [self._pool.submit(_run_range, lo, hi) for lo, hi in ranges]
        wait(futures)
        for fut in futures:
            # _run_range traps row errors; anything left here is an executor fault
            fut.result()
        failure.raise_if_set()

    def close(self) -> None:
        self._pool.shutdown(wait=True)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def __repr__(self):
        return f"ParallelExecutor(workers={self.workers})"


_executors = {}
_executors_lock = threading.Lock()


def get_executor(workers: int | None = None) -> ParallelExecutor:
    """
    Shared executor for a worker count, created on first use.

    Pools live until shutdown_executors() runs. Library operations only share
    the configured count; see executor_for.
    """
    count = resolve_workers(workers)
    with _executors_lock:
        executor = _executors.get(count)
        if executor is None:
            executor = ParallelExecutor(count)
            _executors[count] = executor
        return executor


@contextmanager
def executor_for(workers: int | None = None):
    """
    Executor for one call.

    The configured worker count reuses the shared pool. Any other explicit
    count gets its own pool, shut down when the block exits, so sweeping
    worker counts does not accumulate idle threads.
    """
    count = resolve_workers(workers)
    if count == get_config().workers:
        yield get_executor(count)
        return
    with ParallelExecutor(count) as executor:
        yield executor


def shutdown_executors() -> None:
    """Shut down every shared executor."""
    with _executors_lock:
        executors = list(_executors.values())
        _executors.clear()
    for executor in executors:
        executor.close()


atexit.register(shutdown_executors)


__all__ = [
    "ParallelExecutor",
    "partition_rows",
    "get_executor",
    "executor_for",
    "shutdown_executors",
]
