"""
Separable one-dimensional passes shared by resizing and convolution.

A pass is described by a dense tap table: ``indices`` and ``weights`` of shape
(n_out, taps), where output sample i along the pass axis is
sum_k weights[i, k] * source[indices[i, k]]. Passes run row by row on the
parallel executor; rows are independent so the result does not depend on the
number of workers.

Author: B.G.
"""

import numpy as np

from .. import constants as cte


def quantize(values: np.ndarray) -> np.ndarray:
    """Round half up and clamp accumulated channel values to uint8."""
    return np.clip(np.floor(values + 0.5), 0, cte.CHANNEL_MAX).astype(cte.PIXEL_DTYPE)


def _store(out: np.ndarray, y: int, acc: np.ndarray) -> None:
    if out.dtype == cte.PIXEL_DTYPE:
        out[y] = quantize(acc)
    else:
        out[y] = acc


def horizontal_pass(source: np.ndarray, indices: np.ndarray, weights: np.ndarray,
                    out: np.ndarray, executor) -> np.ndarray:
    """
    Filter every row of ``source`` along x.

    Args:
        source: Array of shape (H, W_in, 4)
        indices: Source column indices, shape (W_out, taps)
        weights: Tap weights, shape (W_out, taps)
        out: Preallocated output of shape (H, W_out, 4); uint8 outputs are
             rounded and clamped, float outputs receive raw sums
        executor: ParallelExecutor running the rows

    Returns:
        out
    """
    tap_weights = weights[:, :, None]

    def _row(y):
        gathered = source[y][indices]
        _store(out, y, (gathered * tap_weights).sum(axis=1))

    executor.run_rows(out.shape[0], _row)
    return out


def vertical_pass(source: np.ndarray, indices: np.ndarray, weights: np.ndarray,
                  out: np.ndarray, executor) -> np.ndarray:
    """
    Filter every column of ``source`` along y.

    Args:
        source: Array of shape (H_in, W, 4)
        indices: Source row indices, shape (H_out, taps)
        weights: Tap weights, shape (H_out, taps)
        out: Preallocated output of shape (H_out, W, 4)
        executor: ParallelExecutor running the rows

    Returns:
        out
    """

    def _row(y):
        gathered = source[indices[y]]
        _store(out, y, (gathered * weights[y][:, None, None]).sum(axis=0))

    executor.run_rows(out.shape[0], _row)
    return out


def clamped_taps(size: int, kernel: np.ndarray):
    """
    Dense tap table for a centred convolution kernel with edge clamping.

    Taps falling outside [0, size) read the nearest edge sample.

    Returns:
        tuple: (indices, weights), both of shape (size, len(kernel))
    """
    radius = kernel.size // 2
    offsets = np.arange(-radius, radius + 1, dtype=np.intp)
    indices = np.clip(np.arange(size, dtype=np.intp)[:, None] + offsets[None, :], 0, size - 1)
    weights = np.broadcast_to(kernel, (size, kernel.size))
    return indices, weights


__all__ = ["quantize", "horizontal_pass", "vertical_pass", "clamped_taps"]
