"""
Separable resampling for PyFastResample.

Resizes pixel buffers with any catalog or custom filter. Each axis gets its
own weight table; the horizontal pass writes a float intermediate of size
new_width x source_height, then the vertical pass produces the final buffer.
Fit and thumbnail/fill are expressed in terms of resize.

Author: B.G.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from .. import constants as cte
from ..config import get_config
from ..errors import InvalidDimension
from ..filters import build_weight_table, get_filter
from ..image import Anchor, PixelBuffer
from ..parallel import executor_for
from .separable import horizontal_pass, vertical_pass

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _check_int(value, label):
    if isinstance(value, bool) or int(value) != value:
        raise InvalidDimension(f"{label} must be an integer, got {value!r}")
    return int(value)


def _resolve_size(src: PixelBuffer, width, height):
    width = _check_int(width, "width")
    height = _check_int(height, "height")
    if width < 0 or height < 0:
        raise InvalidDimension(f"requested size must not be negative, got {width}x{height}")
    if width == 0 and height == 0:
        raise InvalidDimension("width and height cannot both be 0")

    # 0 means: keep the source aspect ratio
    if width == 0:
        width = round_half_up(height * src.width / src.height)
    elif height == 0:
        height = round_half_up(width * src.height / src.width)

    if width <= 0 or height <= 0:
        raise InvalidDimension(
            f"resolved size {width}x{height} for a {src.width}x{src.height} source is empty"
        )
    return width, height


def _check_bounds(width, height):
    width = _check_int(width, "width")
    height = _check_int(height, "height")
    if width <= 0 or height <= 0:
        raise InvalidDimension(f"width and height must be positive, got {width}x{height}")
    return width, height


def resize(src: PixelBuffer, width: int, height: int, filter=None, workers=None) -> PixelBuffer:
    """
    Resize a buffer to width x height.

    Args:
        src: Source buffer (left untouched)
        width: Target width; 0 infers it from height keeping the aspect ratio
        height: Target height; 0 infers it from width keeping the aspect ratio
        filter: Filter name, Filter member, ResampleFilter or (kernel, radius)
                pair. Defaults to the configured filter ("lanczos").
        workers: Worker threads for this call (defaults to configuration)

    Returns:
        New PixelBuffer of the requested size

    Raises:
        InvalidDimension: Both sizes 0, a negative size, or an empty inferred size
        DegenerateFilter: The filter weights cannot be normalised
    """
    width, height = _resolve_size(src, width, height)
    rf = get_filter(get_config().default_filter if filter is None else filter)

    # Both tables are built before any pixel is touched
    h_table = build_weight_table(src.width, width, rf)
    v_table = build_weight_table(src.height, height, rf)
    h_indices, h_weights = h_table.padded()
    v_indices, v_weights = v_table.padded()

    logger.debug(
        "Resizing %dx%d -> %dx%d with %s (%d x %d taps)",
        src.width, src.height, width, height, rf.name, h_indices.shape[1], v_indices.shape[1],
    )

    intermediate = np.empty((src.height, width, cte.CHANNELS), dtype=cte.FLOAT_TYPE_NP)
    out = np.empty((height, width, cte.CHANNELS), dtype=cte.PIXEL_DTYPE)
    with executor_for(workers) as executor:
        horizontal_pass(src.array, h_indices, h_weights, intermediate, executor)
        vertical_pass(intermediate, v_indices, v_weights, out, executor)
    return PixelBuffer(width, height, out)


def fit(src: PixelBuffer, max_width: int, max_height: int, filter=None, workers=None) -> PixelBuffer:
    """
    Scale a buffer down to fit within max_width x max_height.

    The aspect ratio is preserved and the buffer is never enlarged: a source
    that already fits is returned as an unchanged copy.

    Raises:
        InvalidDimension: If a bound is not positive
    """
    max_width, max_height = _check_bounds(max_width, max_height)
    if src.width <= max_width and src.height <= max_height:
        return src.clone()

    sx = max_width / src.width
    sy = max_height / src.height
    if sx <= sy:
        width = max_width
        height = max(1, round_half_up(src.height * sx))
    else:
        width = max(1, round_half_up(src.width * sy))
        height = max_height
    return resize(src, width, height, filter=filter, workers=workers)


def fill(src: PixelBuffer, width: int, height: int, anchor=Anchor.CENTER,
         filter=None, workers=None) -> PixelBuffer:
    """
    Scale a buffer to cover width x height, then crop it to exactly that size.

    The scale factor s = max(width / W, height / H) keeps the aspect ratio and
    may enlarge the source. The crop rectangle is placed by ``anchor``.

    Raises:
        InvalidDimension: If width or height is not positive
    """
    width, height = _check_bounds(width, height)
    anchor = Anchor(anchor)

    sx = width / src.width
    sy = height / src.height
    if sx >= sy:
        scaled_w = width
        scaled_h = max(height, round_half_up(src.height * sx))
    else:
        scaled_w = max(width, round_half_up(src.width * sy))
        scaled_h = height

    if (scaled_w, scaled_h) == src.size:
        scaled = src
    else:
        scaled = resize(src, scaled_w, scaled_h, filter=filter, workers=workers)
    return scaled.crop_anchor(width, height, anchor)


def thumbnail(src: PixelBuffer, width: int, height: int, filter=None, workers=None) -> PixelBuffer:
    """Scale and centre-crop a buffer to exactly width x height."""
    return fill(src, width, height, Anchor.CENTER, filter=filter, workers=workers)


__all__ = ["resize", "fit", "fill", "thumbnail", "round_half_up"]
