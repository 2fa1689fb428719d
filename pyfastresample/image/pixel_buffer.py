"""
Pixel buffer container for PyFastResample.

A PixelBuffer holds a W x H raster of non-premultiplied 8-bit RGBA pixels in a
flat, row-major store without stride padding. Every engine operation reads
one buffer and returns a freshly allocated one; buffers are never modified in
place by a transform.

Author: B.G.
"""

from __future__ import annotations

from enum import Enum

import numpy as np
from PIL import Image

from .. import constants as cte
from ..errors import InvalidDimension


class Anchor(Enum):
    """Placement of a crop rectangle inside a larger buffer."""

    CENTER = "center"
    TOP_LEFT = "top_left"
    TOP = "top"
    TOP_RIGHT = "top_right"
    LEFT = "left"
    RIGHT = "right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM = "bottom"
    BOTTOM_RIGHT = "bottom_right"


# (horizontal, vertical) placement: 0 = start, 1 = middle, 2 = end
_ANCHOR_PLACEMENT = {
    Anchor.TOP_LEFT: (0, 0),
    Anchor.TOP: (1, 0),
    Anchor.TOP_RIGHT: (2, 0),
    Anchor.LEFT: (0, 1),
    Anchor.CENTER: (1, 1),
    Anchor.RIGHT: (2, 1),
    Anchor.BOTTOM_LEFT: (0, 2),
    Anchor.BOTTOM: (1, 2),
    Anchor.BOTTOM_RIGHT: (2, 2),
}


def _anchor_offset(outer: int, inner: int, placement: int) -> int:
    if placement == 0:
        return 0
    if placement == 1:
        return (outer - inner) // 2
    return outer - inner


def _check_extent(width, height):
    if int(width) != width or int(height) != height:
        raise InvalidDimension(f"dimensions must be integers, got {width}x{height}")
    if width <= 0 or height <= 0:
        raise InvalidDimension(f"dimensions must be positive, got {width}x{height}")


class PixelBuffer:
    """
    RGBA raster with an exclusively owned pixel store.

    The store is a uint8 array of shape (height, width, 4); ``pixels`` exposes
    it flattened, of length ``width * height * 4``.

    Args:
        width: Number of columns (> 0)
        height: Number of rows (> 0)
        data: Optional uint8 array of shape (height, width, 4). The buffer takes
              ownership of the array without copying it.
        fill: RGBA fill colour used when ``data`` is None

    Raises:
        InvalidDimension: If width or height is not a positive integer
        ValueError: If data does not have the expected shape
    """

    __slots__ = ("_width", "_height", "_data")

    def __init__(self, width: int, height: int, data: np.ndarray | None = None,
                 fill=(0, 0, 0, 0)):
        _check_extent(width, height)
        self._width = int(width)
        self._height = int(height)

        if data is None:
            self._data = np.empty((self._height, self._width, cte.CHANNELS), dtype=cte.PIXEL_DTYPE)
            self._data[...] = _as_color(fill)
        else:
            expected = (self._height, self._width, cte.CHANNELS)
            if data.shape != expected:
                raise ValueError(f"pixel data has shape {data.shape}, expected {expected}")
            if data.dtype != cte.PIXEL_DTYPE:
                raise ValueError(f"pixel data must be uint8, got {data.dtype}")
            self._data = np.ascontiguousarray(data)

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def new(cls, width: int, height: int, fill=(0, 0, 0, 0)) -> PixelBuffer:
        """Allocate a buffer filled with a single RGBA colour."""
        return cls(width, height, fill=fill)

    @classmethod
    def from_array(cls, array) -> PixelBuffer:
        """
        Build a buffer from a NumPy array (the array is copied).

        Accepted shapes are (H, W, 4) RGBA, (H, W, 3) RGB and (H, W) grayscale.
        RGB and grayscale inputs get an opaque alpha channel. Values outside
        [0, 255] are clipped.
        """
        arr = np.asarray(array)
        if arr.ndim == 2:
            arr = np.repeat(arr[:, :, None], 3, axis=2)
        if arr.ndim != 3 or arr.shape[2] not in (3, cte.CHANNELS):
            raise ValueError(f"Input array must have shape (H, W), (H, W, 3) or (H, W, 4), got {arr.shape}")

        height, width = arr.shape[:2]
        _check_extent(width, height)

        data = np.empty((height, width, cte.CHANNELS), dtype=cte.PIXEL_DTYPE)
        if arr.dtype != cte.PIXEL_DTYPE:
            arr = np.clip(arr, 0, cte.CHANNEL_MAX).astype(cte.PIXEL_DTYPE)
        data[:, :, : arr.shape[2]] = arr
        if arr.shape[2] == 3:
            data[:, :, 3] = cte.CHANNEL_MAX
        return cls(width, height, data)

    @classmethod
    def from_bytes(cls, width: int, height: int, data) -> PixelBuffer:
        """Build a buffer from flat row-major RGBA bytes of length width*height*4."""
        _check_extent(width, height)
        flat = np.frombuffer(bytes(data), dtype=cte.PIXEL_DTYPE)
        expected = int(width) * int(height) * cte.CHANNELS
        if flat.size != expected:
            raise ValueError(f"pixel data has {flat.size} bytes, expected {expected}")
        return cls(width, height, flat.reshape(int(height), int(width), cte.CHANNELS).copy())

    @classmethod
    def from_pil(cls, image: Image.Image) -> PixelBuffer:
        """Convert a Pillow image of any mode to an RGBA buffer."""
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        return cls.from_array(np.asarray(image, dtype=cte.PIXEL_DTYPE))

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> tuple[int, int]:
        return self._width, self._height

    @property
    def pixels(self) -> np.ndarray:
        """Flat read-only view of the store (length width*height*4)."""
        view = self._data.reshape(-1)
        view.flags.writeable = False
        return view

    @property
    def array(self) -> np.ndarray:
        """Read-only (height, width, 4) view of the store."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        """RGBA value at column x, row y."""
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"pixel ({x}, {y}) outside {self._width}x{self._height} buffer")
        return tuple(int(v) for v in self._data[y, x])

    def to_array(self) -> np.ndarray:
        """Copy of the pixels as a (height, width, 4) uint8 array."""
        return self._data.copy()

    def to_bytes(self) -> bytes:
        return self._data.tobytes()

    def to_pil(self) -> Image.Image:
        """Copy of the pixels as an RGBA Pillow image."""
        return Image.fromarray(self._data.copy())

    def clone(self) -> PixelBuffer:
        return PixelBuffer(self._width, self._height, self._data.copy())

    # ------------------------------------------------------------------
    # Cropping
    # ------------------------------------------------------------------

    def crop(self, x0: int, y0: int, width: int, height: int) -> PixelBuffer:
        """
        Copy the rectangle starting at (x0, y0) of size width x height.

        Raises:
            InvalidDimension: If the rectangle is empty or not fully inside the buffer
        """
        _check_extent(width, height)
        if x0 < 0 or y0 < 0 or x0 + width > self._width or y0 + height > self._height:
            raise InvalidDimension(
                f"crop rectangle ({x0}, {y0}, {width}, {height}) exceeds "
                f"{self._width}x{self._height} buffer"
            )
        return PixelBuffer(width, height, self._data[y0:y0 + height, x0:x0 + width].copy())

    def crop_anchor(self, width: int, height: int, anchor: Anchor = Anchor.CENTER) -> PixelBuffer:
        """
        Crop a width x height rectangle placed according to ``anchor``.

        The rectangle is clipped to the buffer when it is larger than the source.
        """
        _check_extent(width, height)
        anchor = Anchor(anchor)
        width = min(width, self._width)
        height = min(height, self._height)
        px, py = _ANCHOR_PLACEMENT[anchor]
        x0 = _anchor_offset(self._width, width, px)
        y0 = _anchor_offset(self._height, height, py)
        return self.crop(x0, y0, width, height)

    # ------------------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return self.size == other.size and np.array_equal(self._data, other._data)

    __hash__ = None

    def __repr__(self):
        return f"PixelBuffer(width={self._width}, height={self._height})"


def _as_color(fill) -> np.ndarray:
    color = np.asarray(fill, dtype=np.int64).reshape(-1)
    if color.size == 3:
        color = np.append(color, cte.CHANNEL_MAX)
    if color.size != cte.CHANNELS:
        raise ValueError(f"fill colour must have 3 or 4 components, got {color.size}")
    if np.any(color < 0) or np.any(color > cte.CHANNEL_MAX):
        raise ValueError(f"fill colour components must be in [0, 255], got {fill}")
    return color.astype(cte.PIXEL_DTYPE)


def new(width: int, height: int, fill=(0, 0, 0, 0)) -> PixelBuffer:
    """Allocate a width x height buffer filled with ``fill``."""
    return PixelBuffer.new(width, height, fill=fill)


def from_array(array) -> PixelBuffer:
    return PixelBuffer.from_array(array)


def from_pil(image: Image.Image) -> PixelBuffer:
    return PixelBuffer.from_pil(image)


__all__ = ["Anchor", "PixelBuffer", "new", "from_array", "from_pil"]
