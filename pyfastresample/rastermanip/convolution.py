"""
Gaussian blur and unsharp-mask sharpening for PyFastResample.

Blur is a separable convolution with a sampled Gaussian of 2*ceil(3*sigma)+1
taps, horizontal pass first. Out-of-range taps reuse the nearest edge pixel.
Sharpen adds the difference between the image and its blur back onto the
image.

Author: B.G.
"""

import logging
import math
import numbers

import numpy as np

from .. import constants as cte
from ..errors import InvalidParameter
from ..image import PixelBuffer
from ..parallel import executor_for
from .separable import clamped_taps, horizontal_pass, vertical_pass

logger = logging.getLogger(__name__)


def _check_sigma(sigma) -> float:
    if isinstance(sigma, bool) or not isinstance(sigma, numbers.Real):
        raise InvalidParameter(f"sigma must be a real number, got {sigma!r}")
    sigma = float(sigma)
    if not math.isfinite(sigma) or sigma <= 0:
        raise InvalidParameter(f"sigma must be positive and finite, got {sigma}")
    return sigma


def gaussian_kernel(sigma: float) -> np.ndarray:
    """
    Normalised 1D Gaussian sampled at integer offsets.

    Args:
        sigma: Standard deviation in pixels (> 0)

    Returns:
        numpy.ndarray: 2*ceil(3*sigma)+1 weights summing to 1

    Raises:
        InvalidParameter: If sigma is not positive and finite
    """
    sigma = _check_sigma(sigma)
    radius = int(math.ceil(cte.GAUSSIAN_SIGMA_SPAN * sigma))
    x = np.arange(-radius, radius + 1, dtype=cte.FLOAT_TYPE_NP)
    kernel = np.exp(-(x * x) / (2.0 * sigma * sigma))
    return kernel / kernel.sum()


def blur(src: PixelBuffer, sigma: float, workers=None) -> PixelBuffer:
    """
    Gaussian blur with edge clamping.

    Args:
        src: Source buffer (left untouched)
        sigma: Standard deviation in pixels (> 0)
        workers: Worker threads for this call (defaults to configuration)

    Returns:
        New PixelBuffer with the same size as src

    Raises:
        InvalidParameter: If sigma is not positive and finite
    """
    kernel = gaussian_kernel(sigma)
    h_indices, h_weights = clamped_taps(src.width, kernel)
    v_indices, v_weights = clamped_taps(src.height, kernel)
    logger.debug("Blurring %dx%d with sigma=%g (%d taps)", src.width, src.height, sigma, kernel.size)

    intermediate = np.empty((src.height, src.width, cte.CHANNELS), dtype=cte.FLOAT_TYPE_NP)
    out = np.empty((src.height, src.width, cte.CHANNELS), dtype=cte.PIXEL_DTYPE)
    with executor_for(workers) as executor:
        horizontal_pass(src.array, h_indices, h_weights, intermediate, executor)
        vertical_pass(intermediate, v_indices, v_weights, out, executor)
    return PixelBuffer(src.width, src.height, out)


def sharpen(src: PixelBuffer, sigma: float, workers=None) -> PixelBuffer:
    """
    Unsharp mask with unit amount: original + (original - blur(original, sigma)).

    Raises:
        InvalidParameter: If sigma is not positive and finite
    """
    blurred = blur(src, sigma, workers=workers)
    original = src.array.astype(np.int16)
    detail = original - blurred.array.astype(np.int16)
    out = np.clip(original + detail, 0, cte.CHANNEL_MAX).astype(cte.PIXEL_DTYPE)
    return PixelBuffer(src.width, src.height, out)


__all__ = ["gaussian_kernel", "blur", "sharpen"]
