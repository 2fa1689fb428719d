"""
PyFastResample: parallel image resampling and convolution.

Resizes RGBA pixel buffers with a catalog of resampling filters (nearest
neighbour, box, linear, cubics, Gaussian, windowed sinc) and applies Gaussian
blur and unsharp-mask sharpening. All operations are separable two-pass
filters executed row-parallel on a shared thread pool.

Subpackages:
- image: PixelBuffer container, allocation, cropping, Pillow bridge
- filters: kernel catalog and weight table builder
- parallel: row-range executor
- rastermanip: resize, fit, fill, thumbnail, blur, sharpen
- cli: command line tools

Usage:
    import pyfastresample as pfr
    from PIL import Image

    src = pfr.PixelBuffer.from_pil(Image.open("photo.png"))
    small = pfr.resize(src, 800, 0, filter="lanczos")
    thumb = pfr.thumbnail(src, 128, 128, filter="catmull_rom")
    soft = pfr.blur(src, 2.0)
    small.to_pil().save("small.png")

Author: B.G.
"""

__version__ = "0.1.0"

from . import constants
from . import config
from . import errors
from . import image
from . import filters
from . import parallel
from . import rastermanip

from .errors import DegenerateFilter, InvalidDimension, InvalidParameter, ResampleError
from .image import Anchor, PixelBuffer
from .filters import Filter, ResampleFilter, custom_filter, get_filter
from .rastermanip import blur, fill, fit, resize, sharpen, thumbnail

__all__ = [
    "__version__",
    "constants",
    "config",
    "errors",
    "image",
    "filters",
    "parallel",
    "rastermanip",
    "ResampleError",
    "InvalidDimension",
    "InvalidParameter",
    "DegenerateFilter",
    "Anchor",
    "PixelBuffer",
    "Filter",
    "ResampleFilter",
    "custom_filter",
    "get_filter",
    "resize",
    "fit",
    "fill",
    "thumbnail",
    "blur",
    "sharpen",
]
