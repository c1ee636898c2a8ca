"""
Noise generation module for pynoisy.

Provides the three fill strategies and the simplex machinery behind them.
All kernels run in parallel over image rows through Taichi and take their
randomness from an explicit NoiseContext.

Noise Types:
- Color Noise: independent uniform bytes for every channel of every pixel
- White Noise: weighted choice between two colors per pixel
- Simplex Noise: 12-octave simplex noise blending two colors

Usage:
    import pynoisy as pn

    ctx = pn.NoiseContext(seed=42)
    black = pn.parse_hex_color("#000000")
    white = pn.parse_hex_color("#FFFFFF")

    pixels = pn.noise.white_noise(256, 256, black, white, 0.5, ctx)
    clouds = pn.noise.simplex_gradient(256, 256, 10.0, black, white, ctx)

Author: B.G.
"""

from .context import NoiseContext, permutation_table
from .color_noise import color_noise, color_noise_kernel
from .white_noise import white_noise, white_noise_kernel
from .simplex_noise import (
    GRADIENTS_2D,
    octave_noise,
    simplex_gradient,
    simplex_gradient_kernel,
    simplex_noise,
)

__all__ = [
    "NoiseContext", "permutation_table",
    "color_noise", "color_noise_kernel",
    "white_noise", "white_noise_kernel",
    "GRADIENTS_2D", "simplex_noise", "octave_noise",
    "simplex_gradient", "simplex_gradient_kernel",
]
