"""
Error kinds raised by PyFastResample.

All errors derive from ValueError so code catching the usual ValueError keeps
working; the subclasses let callers tell the failure kinds apart.

Author: B.G.
"""


class ResampleError(ValueError):
    """Base class for every error raised by the engine."""


class InvalidDimension(ResampleError):
    """A requested width or height is zero, negative or cannot be resolved."""


class InvalidParameter(ResampleError):
    """A numeric parameter (sigma, radius, worker count) is out of range."""


class DegenerateFilter(ResampleError):
    """A filter produced weights that cannot be normalised (zero sum)."""


__all__ = ["ResampleError", "InvalidDimension", "InvalidParameter", "DegenerateFilter"]
