"""
pynoisy: procedural noise images with Taichi.

Generates RGBA images from three kinds of noise:
- 'color':   independent random bytes per channel
- 'white':   weighted random choice between two colors
- 'simplex': 12-octave simplex noise blended between two colors

Usage:
    import pynoisy as pn

    pn.init("cpu")
    cfg = pn.build_config(256, 256, "simplex", "#000000", "#FFFFFF", scale=10.0)
    img = pn.generate(cfg, pn.NoiseContext(seed=42))
    img.save_png("clouds")   # writes clouds.png

Author: B.G.
"""

__version__ = "0.1.0"

from . import constants
from . import noise
from .backend import ensure_init, init
from .colors import Color, is_valid_hex, parse_hex_color
from .config import (
    ColorParams,
    GenerationConfig,
    SimplexParams,
    WhiteParams,
    build_config,
    translate_mode,
)
from .errors import ColorParseError, ConfigValidationError, NoisyError
from .generator import NoiseImage, Noisy, generate
from .noise import NoiseContext
from . import cli

__all__ = [
    "__version__",
    "constants", "noise", "cli",
    "init", "ensure_init",
    "Color", "is_valid_hex", "parse_hex_color",
    "WhiteParams", "ColorParams", "SimplexParams", "GenerationConfig",
    "build_config", "translate_mode",
    "NoisyError", "ConfigValidationError", "ColorParseError",
    "NoiseImage", "Noisy", "generate",
    "NoiseContext",
]
