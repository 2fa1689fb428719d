"""
Command Line Interface for PyFastResample

This module provides command line utilities for PyFastResample, applying the
engine to image files from the terminal. Files are read and written with
Pillow; any format Pillow supports can be used on both ends.

Available Commands:
- resize_image: Resize an image to a width and/or height
- fit_image: Shrink an image to fit inside a bounding box
- thumbnail_image: Scale and centre-crop an image to an exact size
- blur_image: Gaussian blur
- sharpen_image: Unsharp-mask sharpening

Author: B.G.
"""

_CLI_SUBMODULES = {
    "resize_image": (".resize_commands", "resize_image"),
    "fit_image": (".resize_commands", "fit_image"),
    "thumbnail_image": (".resize_commands", "thumbnail_image"),
    "blur_image": (".filter_commands", "blur_image"),
    "sharpen_image": (".filter_commands", "sharpen_image"),
}

__all__ = list(_CLI_SUBMODULES.keys())


def __getattr__(name):
    info = _CLI_SUBMODULES.get(name)
    if info is None:
        raise AttributeError(name)
    pkg, attr = info
    import importlib
    mod = importlib.import_module(pkg, __package__)
    obj = getattr(mod, attr)
    globals()[name] = obj
    return obj
