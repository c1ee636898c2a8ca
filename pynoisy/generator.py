"""
Noise image generation for pynoisy.

`generate` validates a GenerationConfig, picks the fill strategy matching its
mode and returns a NoiseImage holding the flat RGBA buffer. Encoding the
buffer (PNG through Pillow) lives on NoiseImage and never runs as part of
generation.

Author: B.G.
"""

import numpy as np
from PIL import Image

from . import constants as cte
from .config import GenerationConfig, build_config
from .noise import NoiseContext, color_noise, simplex_gradient, white_noise


def _fill_white(config, context):
    p = config.params
    return white_noise(config.width, config.height, p.color1, p.color2, p.chance, context)


def _fill_color(config, context):
    return color_noise(config.width, config.height, context)


def _fill_simplex(config, context):
    p = config.params
    return simplex_gradient(
        config.width, config.height, p.scale, p.background, p.foreground, context
    )


_FILLERS = {
    cte.MODE_WHITE: _fill_white,
    cte.MODE_COLOR: _fill_color,
    cte.MODE_SIMPLEX: _fill_simplex,
}


class NoiseImage:
    """
    A generated RGBA image.

    The buffer is laid out row-major with interleaved channels: the byte of
    channel c (0=R, 1=G, 2=B, 3=A) for pixel (x, y) sits at
    (y * width + x) * 4 + c.

    Attributes:
        width: Image width in pixels
        height: Image height in pixels
        pixels: Flat uint8 array of length width * height * 4
    """

    def __init__(self, width: int, height: int, pixels: np.ndarray):
        pixels = np.ascontiguousarray(pixels, dtype=np.uint8).reshape(-1)
        if pixels.size != width * height * cte.CHANNELS:
            raise ValueError(
                f"buffer holds {pixels.size} bytes, expected {width * height * cte.CHANNELS}"
            )
        self.width = width
        self.height = height
        self.pixels = pixels

    @property
    def data(self) -> bytes:
        return self.pixels.tobytes()

    def __len__(self):
        return self.pixels.size

    def pixel(self, x: int, y: int):
        """Return the (r, g, b, a) tuple at column x, row y."""
        idx = (y * self.width + x) * cte.CHANNELS
        return tuple(int(v) for v in self.pixels[idx : idx + cte.CHANNELS])

    def as_array(self) -> np.ndarray:
        """View the buffer as a (height, width, 4) array."""
        return self.pixels.reshape(self.height, self.width, cte.CHANNELS)

    def to_pil(self) -> Image.Image:
        """Wrap the buffer in a Pillow RGBA image."""
        return Image.frombuffer(
            "RGBA", (self.width, self.height), self.data, "raw", "RGBA", 0, 1
        )

    def save_png(self, filename) -> str:
        """
        Encode the image as PNG at `filename` + '.png'.

        Returns:
            str: Path of the written file

        Raises:
            OSError: If the file cannot be created or written
            ValueError: If the image is empty (PNG needs at least one pixel)
        """
        if self.width == 0 or self.height == 0:
            raise ValueError("cannot encode an empty image as PNG")
        path = f"{filename}.png"
        self.to_pil().save(path, format="PNG")
        return path

    def __repr__(self):
        return f"NoiseImage(width={self.width}, height={self.height})"


def generate(config: GenerationConfig, context: NoiseContext = None) -> NoiseImage:
    """
    Generate the image described by `config`.

    Validation runs before anything is allocated; once it passes the fill
    cannot fail.

    Args:
        config: Image dimensions and mode parameters
        context: NoiseContext to draw randomness from (default: a fresh,
                 unseeded context)

    Returns:
        NoiseImage: The generated image

    Raises:
        ConfigValidationError: If the configuration is invalid

    Example:
        cfg = build_config(128, 128, "simplex", "#102040", "#F0E0A0", scale=8.0)
        img = generate(cfg, NoiseContext(seed=7))
        img.save_png("clouds")
    """
    config.validate()

    if context is None:
        context = NoiseContext()

    pixels = _FILLERS[config.mode](config, context)
    return NoiseImage(config.width, config.height, pixels)


class Noisy:
    """
    Configuration bundle tying a generated image to its output filename.

    Args:
        config: Validated generation config
        filename: Output path without extension (default: 'noise')
        context: Optional NoiseContext (default: fresh, unseeded)
    """

    def __init__(self, config: GenerationConfig, filename: str = cte.DEFAULT_OUTPUT,
                 context: NoiseContext = None):
        self.config = config
        self.filename = filename
        self.context = context if context is not None else NoiseContext()
        self._image = generate(config, self.context)

    @classmethod
    def new(cls, width, height, color1, color2, chance, mode,
            filename=cte.DEFAULT_OUTPUT, scale=cte.DEFAULT_SCALE, context=None):
        """Parse raw option values, validate and generate in one call."""
        config = build_config(width, height, mode, color1, color2, chance, scale)
        return cls(config, filename, context)

    @property
    def width(self):
        return self.config.width

    @property
    def height(self):
        return self.config.height

    @property
    def mode(self):
        return self.config.mode

    @property
    def image(self) -> NoiseImage:
        return self._image

    def save_as_png(self) -> str:
        """Write the image to `filename` + '.png' and return the path."""
        return self._image.save_png(self.filename)
