"""
Resampling filter kernels for PyFastResample.

Every filter is a continuous weighting function k(x) with a support radius r:
the function is only ever evaluated on [-r, r] and is treated as zero outside.
Catalog kernels are vectorised NumPy functions; custom kernels may be plain
scalar callables.

Catalog:
- nearest_neighbor, box: radius 0.5
- linear: radius 1
- hermite, mitchell_netravali, catmull_rom, bspline: BC-cubics, radius 2
- gaussian: exp(-2 x^2), radius 2 (resampling kernel, unrelated to blur sigma)
- lanczos, hann, hamming, blackman, bartlett, welch, cosine: windowed sinc,
  configurable radius (default 3)

Author: B.G.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Callable

import numpy as np

from .. import constants as cte
from ..errors import InvalidParameter


class Filter(Enum):
    """Named filters of the catalog."""

    NEAREST_NEIGHBOR = "nearest_neighbor"
    BOX = "box"
    LINEAR = "linear"
    HERMITE = "hermite"
    MITCHELL_NETRAVALI = "mitchell_netravali"
    CATMULL_ROM = "catmull_rom"
    BSPLINE = "bspline"
    GAUSSIAN = "gaussian"
    LANCZOS = "lanczos"
    HANN = "hann"
    HAMMING = "hamming"
    BLACKMAN = "blackman"
    BARTLETT = "bartlett"
    WELCH = "welch"
    COSINE = "cosine"


@dataclass(frozen=True)
class ResampleFilter:
    """
    Immutable (kernel, radius) pair.

    Attributes:
        name: Display name of the filter
        kernel: Function of the offset x. Vectorised kernels take and return
                float64 arrays, scalar kernels take and return floats.
        radius: Support radius r > 0; the kernel is zero outside [-r, r]
        vectorized: Whether ``kernel`` accepts NumPy arrays
    """

    name: str
    kernel: Callable = field(repr=False, compare=False)
    radius: float
    vectorized: bool = True

    def evaluate(self, x) -> np.ndarray:
        """Kernel values at offsets ``x``; zero (without calling the kernel) outside the support."""
        x = np.asarray(x, dtype=cte.FLOAT_TYPE_NP)
        out = np.zeros_like(x)
        inside = np.abs(x) <= self.radius
        if not np.any(inside):
            return out
        xs = x[inside]
        if self.vectorized:
            out[inside] = self.kernel(xs)
        else:
            out[inside] = np.fromiter((self.kernel(float(v)) for v in xs),
                                      dtype=cte.FLOAT_TYPE_NP, count=xs.size)
        return out

    def __call__(self, x):
        return self.evaluate(x)


# ----------------------------------------------------------------------
# Kernel functions
# ----------------------------------------------------------------------

def _nearest(x):
    return np.where((x >= -0.5) & (x < 0.5), 1.0, 0.0)


def _box(x):
    return np.where(np.abs(x) <= 0.5, 1.0, 0.0)


def _linear(x):
    return np.maximum(0.0, 1.0 - np.abs(x))


def _bc_cubic(b: float, c: float):
    """Two-piece Mitchell-Netravali family cubic with coefficients (B, C)."""

    def kernel(x):
        x = np.abs(x)
        x2 = x * x
        x3 = x2 * x
        near = ((12 - 9 * b - 6 * c) * x3 + (-18 + 12 * b + 6 * c) * x2 + (6 - 2 * b)) / 6.0
        far = ((-b - 6 * c) * x3 + (6 * b + 30 * c) * x2
               + (-12 * b - 48 * c) * x + (8 * b + 24 * c)) / 6.0
        return np.where(x < 1.0, near, np.where(x < 2.0, far, 0.0))

    return kernel


def _gaussian(x):
    return np.exp(-2.0 * x * x)


# Window functions on [-a, a], multiplied with sinc(x)
def _lanczos_window(x, a):
    return np.sinc(x / a)


def _hann_window(x, a):
    return 0.5 + 0.5 * np.cos(np.pi * x / a)


def _hamming_window(x, a):
    return 0.54 + 0.46 * np.cos(np.pi * x / a)


def _blackman_window(x, a):
    return 0.42 + 0.5 * np.cos(np.pi * x / a) + 0.08 * np.cos(2.0 * np.pi * x / a)


def _bartlett_window(x, a):
    return 1.0 - np.abs(x) / a


def _welch_window(x, a):
    return 1.0 - (x * x) / (a * a)


def _cosine_window(x, a):
    return np.cos(np.pi * x / (2.0 * a))


_SINC_WINDOWS = MappingProxyType({
    Filter.LANCZOS: _lanczos_window,
    Filter.HANN: _hann_window,
    Filter.HAMMING: _hamming_window,
    Filter.BLACKMAN: _blackman_window,
    Filter.BARTLETT: _bartlett_window,
    Filter.WELCH: _welch_window,
    Filter.COSINE: _cosine_window,
})


def windowed_sinc(kind: Filter, radius: float = cte.DEFAULT_SINC_RADIUS) -> ResampleFilter:
    """
    Build a windowed-sinc filter with the given support radius.

    Args:
        kind: One of LANCZOS, HANN, HAMMING, BLACKMAN, BARTLETT, WELCH, COSINE
        radius: Support radius (> 0), default 3

    Raises:
        ValueError: If ``kind`` is not a windowed-sinc filter
        InvalidParameter: If radius is not a positive finite number
    """
    kind = Filter(kind)
    if kind not in _SINC_WINDOWS:
        raise ValueError(f"{kind.value} is not a windowed-sinc filter")
    radius = _check_radius(radius)
    window = _SINC_WINDOWS[kind]

    def kernel(x):
        return np.sinc(x) * window(x, radius)

    return ResampleFilter(kind.value, kernel, radius)


def _check_radius(radius) -> float:
    try:
        radius = float(radius)
    except (TypeError, ValueError):
        raise InvalidParameter(f"filter radius must be a number, got {radius!r}")
    if not math.isfinite(radius) or radius <= 0:
        raise InvalidParameter(f"filter radius must be positive and finite, got {radius}")
    return radius


def custom_filter(kernel: Callable, radius: float, name: str = "custom",
                  vectorized: bool = False) -> ResampleFilter:
    """
    Wrap a user supplied kernel function.

    Args:
        kernel: Function of the offset x. Called with floats unless ``vectorized``.
        radius: Support radius (> 0)
        name: Display name
        vectorized: Set to True if ``kernel`` accepts and returns NumPy arrays

    Raises:
        TypeError: If kernel is not callable
        InvalidParameter: If radius is not a positive finite number
    """
    if not callable(kernel):
        raise TypeError(f"kernel must be callable, got {type(kernel).__name__}")
    return ResampleFilter(name, kernel, _check_radius(radius), vectorized)


# ----------------------------------------------------------------------
# Catalog
# ----------------------------------------------------------------------

def _build_catalog():
    catalog = {
        Filter.NEAREST_NEIGHBOR: ResampleFilter(Filter.NEAREST_NEIGHBOR.value, _nearest, 0.5),
        Filter.BOX: ResampleFilter(Filter.BOX.value, _box, 0.5),
        Filter.LINEAR: ResampleFilter(Filter.LINEAR.value, _linear, 1.0),
        Filter.HERMITE: ResampleFilter(Filter.HERMITE.value, _bc_cubic(0.0, 0.0), 2.0),
        Filter.MITCHELL_NETRAVALI: ResampleFilter(
            Filter.MITCHELL_NETRAVALI.value, _bc_cubic(1.0 / 3.0, 1.0 / 3.0), 2.0
        ),
        Filter.CATMULL_ROM: ResampleFilter(Filter.CATMULL_ROM.value, _bc_cubic(0.0, 0.5), 2.0),
        Filter.BSPLINE: ResampleFilter(Filter.BSPLINE.value, _bc_cubic(1.0, 0.0), 2.0),
        Filter.GAUSSIAN: ResampleFilter(Filter.GAUSSIAN.value, _gaussian, 2.0),
    }
    for kind in _SINC_WINDOWS:
        catalog[kind] = windowed_sinc(kind)
    return MappingProxyType(catalog)


CATALOG = _build_catalog()

_ALIASES = MappingProxyType({
    "nearest": Filter.NEAREST_NEIGHBOR,
    "nn": Filter.NEAREST_NEIGHBOR,
    "bilinear": Filter.LINEAR,
    "triangle": Filter.LINEAR,
    "tent": Filter.LINEAR,
    "mitchell": Filter.MITCHELL_NETRAVALI,
    "bicubic": Filter.CATMULL_ROM,
    "cubic": Filter.CATMULL_ROM,
    "hanning": Filter.HANN,
})


def _normalize_name(name: str) -> str:
    return "".join(ch for ch in name.lower() if ch not in "-_ ")


_BY_NAME = MappingProxyType({
    **{_normalize_name(kind.value): kind for kind in Filter},
    **{_normalize_name(alias): kind for alias, kind in _ALIASES.items()},
})


def filter_names():
    """Catalog names, in catalog order."""
    return [kind.value for kind in Filter]


def get_filter(selector="lanczos", radius=None) -> ResampleFilter:
    """
    Resolve a filter selector to a ResampleFilter.

    Args:
        selector: Catalog name (case, '-', '_' and spaces ignored), Filter member,
                  ResampleFilter instance or a (kernel, radius) pair
        radius: Optional support radius override, only for windowed-sinc filters

    Returns:
        ResampleFilter

    Raises:
        ValueError: Unknown filter name, or radius given for a fixed-radius filter
        TypeError: Unsupported selector type
    """
    if isinstance(selector, ResampleFilter):
        if radius is not None:
            raise ValueError("radius override is not supported for filter instances")
        return selector

    if isinstance(selector, tuple):
        if len(selector) != 2:
            raise TypeError("custom filter must be a (kernel, radius) pair")
        if radius is not None:
            raise ValueError("radius is already part of a (kernel, radius) pair")
        kernel, kernel_radius = selector
        return custom_filter(kernel, kernel_radius)

    if isinstance(selector, str):
        kind = _BY_NAME.get(_normalize_name(selector))
        if kind is None:
            raise ValueError(f"Unknown filter '{selector}'. Available: {', '.join(filter_names())}")
    elif isinstance(selector, Filter):
        kind = selector
    else:
        raise TypeError(f"Unsupported filter selector of type {type(selector).__name__}")

    if radius is None:
        return CATALOG[kind]
    if kind not in _SINC_WINDOWS:
        raise ValueError(f"filter '{kind.value}' has a fixed radius of {CATALOG[kind].radius}")
    return windowed_sinc(kind, radius)


__all__ = [
    "Filter",
    "ResampleFilter",
    "CATALOG",
    "custom_filter",
    "filter_names",
    "get_filter",
    "windowed_sinc",
]
