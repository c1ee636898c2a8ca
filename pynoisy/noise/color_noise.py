"""
Color noise generation for pynoisy.

Every channel of every pixel, alpha included, is an independent uniform
byte.

Author: B.G.
"""

import numpy as np
import taichi as ti

from .. import backend
from .. import constants as cte
from .hashing import rand_byte


@ti.kernel
def color_noise_kernel(pixels: ti.types.ndarray(dtype=ti.u8, ndim=3), seed: ti.i32):
    for y, x in ti.ndrange(pixels.shape[0], pixels.shape[1]):
        base = (y * pixels.shape[1] + x) * cte.CHANNELS
        for c in ti.static(range(cte.CHANNELS)):
            pixels[y, x, c] = rand_byte(seed, base + c)


def color_noise(width: int, height: int, context):
    """
    Generate RGBA color noise.

    Args:
        width: Image width in pixels
        height: Image height in pixels
        context: NoiseContext seeding the per-pixel draws

    Returns:
        numpy.ndarray: uint8 array of shape (height, width, 4)
    """
    pixels = np.zeros((height, width, cte.CHANNELS), dtype=np.uint8)
    if pixels.size == 0:
        return pixels

    backend.ensure_init()
    color_noise_kernel(pixels, context.next_seed())
    return pixels
