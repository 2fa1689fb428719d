"""
Filter module for PyFastResample.

Provides the catalog of resampling kernels and the per-axis weight table
builder used by the separable resampler.

Kernels:
- NearestNeighbor, Box, Linear
- Cubic family: Hermite, MitchellNetravali, CatmullRom, BSpline
- Gaussian resampling kernel
- Windowed sinc: Lanczos, Hann, Hamming, Blackman, Bartlett, Welch, Cosine

Custom kernels are given as a (kernel, radius) pair or built with
custom_filter().

Usage:
    import pyfastresample as pfr

    lanczos = pfr.filters.get_filter("lanczos")
    lanczos5 = pfr.filters.get_filter("lanczos", radius=5)
    table = pfr.filters.build_weight_table(640, 200, lanczos)
    for index, weight in table[0].pairs():
        ...

Author: B.G.
"""

from .kernels import (
    CATALOG,
    Filter,
    ResampleFilter,
    custom_filter,
    filter_names,
    get_filter,
    windowed_sinc,
)
from .weights import WeightRow, WeightTable, build_weight_table

__all__ = [
    "CATALOG",
    "Filter",
    "ResampleFilter",
    "custom_filter",
    "filter_names",
    "get_filter",
    "windowed_sinc",
    "WeightRow",
    "WeightTable",
    "build_weight_table",
]
