"""
Numeric constants shared across PyFastResample.

Author: B.G.
"""

import numpy as np

# RGBA, 8 bits per channel, not premultiplied
CHANNELS = 4
PIXEL_DTYPE = np.uint8
CHANNEL_MAX = 255

# Accumulators for weighted sums
FLOAT_TYPE_NP = np.float64

# Default support radius of the windowed-sinc family
DEFAULT_SINC_RADIUS = 3

# Gaussian blur kernels reach out to ceil(3 * sigma)
GAUSSIAN_SIGMA_SPAN = 3.0
