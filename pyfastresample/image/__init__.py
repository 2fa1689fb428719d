"""
Image container module for PyFastResample.

Provides the PixelBuffer type shared by every engine component: a W x H raster
of non-premultiplied 8-bit RGBA pixels, stored flat and row-major. Buffers can
be allocated, wrapped from NumPy arrays or raw bytes, bridged to Pillow images,
cloned and cropped. Transforms always return new buffers.

Usage:
    import pyfastresample as pfr

    canvas = pfr.image.new(64, 32, fill=(255, 0, 0, 255))
    photo = pfr.image.from_pil(PIL.Image.open("photo.jpg"))
    centre = photo.crop_anchor(100, 100, pfr.image.Anchor.CENTER)

Author: B.G.
"""

from .pixel_buffer import Anchor, PixelBuffer, new, from_array, from_pil

__all__ = ["Anchor", "PixelBuffer", "new", "from_array", "from_pil"]
