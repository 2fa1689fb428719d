"""
Raster manipulation module for PyFastResample.

Provides the separable resampler (resize, fit, fill, thumbnail) and the
Gaussian convolution engine (blur, sharpen). Every function takes a
PixelBuffer and returns a new one; the source is never modified. Work is
spread over the shared row-parallel executor, and the output is identical for
any number of workers.

Author: B.G.
"""

from .resizing import resize, fit, fill, thumbnail
from .convolution import gaussian_kernel, blur, sharpen

__all__ = [
    "resize",
    "fit",
    "fill",
    "thumbnail",
    "gaussian_kernel",
    "blur",
    "sharpen",
]
