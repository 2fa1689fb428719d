"""
Per-axis weight tables for separable resampling.

For a source extent S and destination extent D, destination sample i sits at
the source-space position c = (i + 0.5) * S / D - 0.5. Its value is a weighted
sum of the source samples within the filter support around c. When
downsampling (S > D) the support is widened by S / D, so every source sample
contributes and the result does not alias. Weights are normalised so flat
regions keep their brightness.

Author: B.G.
"""

from __future__ import annotations

import logging
import math
from typing import NamedTuple

import numpy as np

from .. import constants as cte
from ..errors import DegenerateFilter, InvalidDimension, InvalidParameter
from .kernels import ResampleFilter, get_filter

logger = logging.getLogger(__name__)


class WeightRow(NamedTuple):
    """Contributions to one destination sample: ascending source indices and their weights."""

    indices: np.ndarray
    weights: np.ndarray

    def pairs(self):
        return [(int(j), float(w)) for j, w in zip(self.indices, self.weights)]


class WeightTable:
    """
    Immutable weight table for one axis.

    Row i lists the (source index, weight) contributions to destination index
    i. Source indices are clamped into [0, src_size - 1], unique and ascending;
    weights sum to 1.

    Attributes:
        src_size: Source extent S
        dst_size: Destination extent D
        filter: ResampleFilter used to build the table
        scale: Support widening factor that was applied
    """

    def __init__(self, src_size: int, dst_size: int, rf: ResampleFilter, scale: float, rows):
        self.src_size = src_size
        self.dst_size = dst_size
        self.filter = rf
        self.scale = scale
        self._rows = tuple(rows)
        self._padded = None

    def __len__(self):
        return len(self._rows)

    def __getitem__(self, i) -> WeightRow:
        return self._rows[i]

    def __iter__(self):
        return iter(self._rows)

    @property
    def max_taps(self) -> int:
        return max(row.indices.size for row in self._rows)

    def padded(self):
        """
        Dense form of the table for vectorised application.

        Returns:
            tuple: (indices, weights), both of shape (dst_size, max_taps).
                   Padding entries repeat a valid index with weight 0.
        """
        if self._padded is None:
            taps = self.max_taps
            indices = np.empty((self.dst_size, taps), dtype=np.intp)
            weights = np.zeros((self.dst_size, taps), dtype=cte.FLOAT_TYPE_NP)
            for i, row in enumerate(self._rows):
                n = row.indices.size
                indices[i, :n] = row.indices
                indices[i, n:] = row.indices[0]
                weights[i, :n] = row.weights
            indices.flags.writeable = False
            weights.flags.writeable = False
            self._padded = (indices, weights)
        return self._padded

    def __repr__(self):
        return (f"WeightTable({self.src_size} -> {self.dst_size}, filter={self.filter.name}, "
                f"scale={self.scale:g}, max_taps={self.max_taps})")


def _check_size(value, label):
    if isinstance(value, bool) or int(value) != value or value <= 0:
        raise InvalidDimension(f"{label} must be a positive integer, got {value}")
    return int(value)


def build_weight_table(src_size: int, dst_size: int, rf="lanczos", scale=None) -> WeightTable:
    """
    Build the weight table mapping ``src_size`` samples onto ``dst_size`` samples.

    Args:
        src_size: Source extent S (> 0)
        dst_size: Destination extent D (> 0)
        rf: Filter name, Filter member, ResampleFilter or (kernel, radius) pair
        scale: Support widening factor. Defaults to max(1, S / D); explicit
               values must be >= 1.

    Returns:
        WeightTable with one row per destination index

    Raises:
        InvalidDimension: If an extent is not a positive integer
        InvalidParameter: If scale is below 1 or not finite
        DegenerateFilter: If the weights of a row sum to zero
    """
    src_size = _check_size(src_size, "source size")
    dst_size = _check_size(dst_size, "destination size")
    rf = get_filter(rf)

    ratio = src_size / dst_size
    if scale is None:
        scale = max(1.0, ratio)
    else:
        scale = float(scale)
        if not math.isfinite(scale) or scale < 1.0:
            raise InvalidParameter(f"scale must be a finite value >= 1, got {scale}")

    support = rf.radius * scale
    centers = (np.arange(dst_size, dtype=cte.FLOAT_TYPE_NP) + 0.5) * ratio - 0.5
    first = np.floor(centers - support).astype(np.intp)
    last = np.ceil(centers + support).astype(np.intp)
    taps = int((last - first).max()) + 1

    candidates = first[:, None] + np.arange(taps, dtype=np.intp)[None, :]
    in_window = candidates <= last[:, None]
    raw = rf.evaluate((candidates - centers[:, None]) / scale)
    raw[~in_window] = 0.0

    rows = []
    for i in range(dst_size):
        keep = raw[i] != 0.0
        clamped = np.clip(candidates[i, keep], 0, src_size - 1)
        indices, inverse = np.unique(clamped, return_inverse=True)
        weights = np.bincount(inverse.reshape(-1), weights=raw[i, keep], minlength=indices.size)

        total = weights.sum()
        if not math.isfinite(total) or total == 0.0:
            raise DegenerateFilter(
                f"filter '{rf.name}' produced zero total weight for destination index {i} "
                f"({src_size} -> {dst_size})"
            )
        weights = weights / total
        indices.flags.writeable = False
        weights.flags.writeable = False
        rows.append(WeightRow(indices, weights))

    table = WeightTable(src_size, dst_size, rf, scale, rows)
    logger.debug("Built %r", table)
    return table


__all__ = ["WeightRow", "WeightTable", "build_weight_table"]
