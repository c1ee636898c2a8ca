"""
White noise generation for pynoisy.

Two-color white noise: every pixel independently takes one of two colors,
with the bias `chance` giving the probability of the first one.

Author: B.G.
"""

import numpy as np
import taichi as ti

from .. import backend
from .. import constants as cte
from .hashing import rand01


@ti.kernel
def white_noise_kernel(pixels: ti.types.ndarray(dtype=ti.u8, ndim=3),
                       palette: ti.types.ndarray(dtype=ti.u8, ndim=2),
                       chance: cte.FLOAT_TYPE_TI, seed: ti.i32):
    """
    Fill an RGBA image with a weighted choice between two colors.

    A uniform draw u in [0, 1) is taken per pixel; u > chance selects
    palette row 1, anything else palette row 0.

    Args:
        pixels: Output image of shape (height, width, 4)
        palette: (2, 4) array holding color1 and color2
        chance: Bias in [0, 1]
        seed: Seed of the per-pixel random stream
    """
    for y, x in ti.ndrange(pixels.shape[0], pixels.shape[1]):
        idx = y * pixels.shape[1] + x
        pick = 0
        if rand01(seed, idx) > chance:
            pick = 1
        for c in ti.static(range(cte.CHANNELS)):
            pixels[y, x, c] = palette[pick, c]


def white_noise(width: int, height: int, color1, color2, chance: float, context):
    """
    Generate two-color white noise.

    Args:
        width: Image width in pixels
        height: Image height in pixels
        color1: Color written when the draw does not exceed `chance`
        color2: Color written when the draw exceeds `chance`
        chance: Bias in [0, 1]; 1.0 gives only color1, 0.0 only color2
        context: NoiseContext seeding the per-pixel draws

    Returns:
        numpy.ndarray: uint8 array of shape (height, width, 4)

    Example:
        black, white = parse_hex_color("#000000"), parse_hex_color("#FFFFFF")
        pixels = white_noise(64, 64, black, white, 0.3, NoiseContext(seed=1))
    """
    pixels = np.zeros((height, width, cte.CHANNELS), dtype=np.uint8)
    if pixels.size == 0:
        return pixels

    palette = np.stack([color1.as_array(), color2.as_array()])

    backend.ensure_init()
    white_noise_kernel(pixels, palette, float(chance), context.next_seed())
    return pixels
