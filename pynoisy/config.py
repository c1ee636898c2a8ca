"""
Generation configuration for pynoisy.

A GenerationConfig holds the image dimensions and exactly one mode-specific
parameter set. Each parameter set carries its mode tag, so dispatch never has
to inspect the parameters themselves:

- WhiteParams:   two colors and the bias `chance` (mode 'white')
- ColorParams:   no parameters (mode 'color')
- SimplexParams: background/foreground colors and `scale` (mode 'simplex')

`build_config` is the entry point used by the CLI: it translates the mode
string, parses both colors and validates the result.

Author: B.G.
"""

import math
from dataclasses import dataclass
from typing import ClassVar, Union

from . import constants as cte
from .colors import Color, parse_hex_color
from .errors import ConfigValidationError

MODES = (cte.MODE_WHITE, cte.MODE_COLOR, cte.MODE_SIMPLEX)


@dataclass(frozen=True)
class WhiteParams:
    mode: ClassVar[str] = cte.MODE_WHITE

    color1: Color
    color2: Color
    chance: float

    def validate(self):
        # NaN fails both comparisons
        if not 0.0 <= self.chance <= 1.0:
            raise ConfigValidationError(
                f"chance must be in [0, 1], got {self.chance}"
            )


@dataclass(frozen=True)
class ColorParams:
    mode: ClassVar[str] = cte.MODE_COLOR

    def validate(self):
        pass


@dataclass(frozen=True)
class SimplexParams:
    mode: ClassVar[str] = cte.MODE_SIMPLEX

    background: Color
    foreground: Color
    scale: float

    def validate(self):
        if not (math.isfinite(self.scale) and self.scale > 0.0):
            raise ConfigValidationError(
                f"scale must be a positive number, got {self.scale}"
            )


NoiseParams = Union[WhiteParams, ColorParams, SimplexParams]


@dataclass(frozen=True)
class GenerationConfig:
    """
    Immutable description of one image to generate.

    Attributes:
        width: Image width in pixels (>= 0)
        height: Image height in pixels (>= 0)
        params: Mode-specific parameter set
    """

    width: int
    height: int
    params: NoiseParams

    @property
    def mode(self) -> str:
        return self.params.mode

    @property
    def n_bytes(self) -> int:
        return self.width * self.height * cte.CHANNELS

    def validate(self):
        """
        Check dimensions and mode parameters.

        Raises:
            ConfigValidationError: On the first constraint that fails
        """
        if getattr(self.params, "mode", None) not in MODES:
            raise ConfigValidationError("cannot determine operation mode")
        if self.height < 0:
            raise ConfigValidationError("height cannot be under 0")
        if self.width < 0:
            raise ConfigValidationError("width cannot be under 0")
        self.params.validate()


def translate_mode(mode: str) -> str:
    """
    Check a mode string against the known modes.

    Raises:
        ConfigValidationError: If the mode is not an exact match
    """
    if mode not in MODES:
        raise ConfigValidationError(
            f"operation is unknown: '{mode}' (expected one of {', '.join(MODES)})"
        )
    return mode


def build_config(
    width: int,
    height: int,
    mode: str,
    color1: str = cte.DEFAULT_COLOR1,
    color2: str = cte.DEFAULT_COLOR2,
    chance: float = cte.DEFAULT_CHANCE,
    scale: float = cte.DEFAULT_SCALE,
) -> GenerationConfig:
    """
    Build and validate a GenerationConfig from raw option values.

    Both colors are parsed whatever the mode, so a malformed color is always
    reported. Parameters the mode does not use are ignored.

    Args:
        width: Image width in pixels
        height: Image height in pixels
        mode: 'color', 'white' or 'simplex'
        color1: First color ('white') or background ('simplex')
        color2: Second color ('white') or foreground ('simplex')
        chance: Probability of color1 in 'white' mode
        scale: Spatial scale in 'simplex' mode (larger is smoother)

    Returns:
        GenerationConfig: Validated configuration

    Raises:
        ConfigValidationError: Unknown mode, negative dimension or bad parameter
        ColorParseError: Malformed color string
    """
    mode = translate_mode(mode)

    c1 = parse_hex_color(color1)
    c2 = parse_hex_color(color2)

    if mode == cte.MODE_WHITE:
        params = WhiteParams(color1=c1, color2=c2, chance=float(chance))
    elif mode == cte.MODE_COLOR:
        params = ColorParams()
    else:
        params = SimplexParams(background=c1, foreground=c2, scale=float(scale))

    config = GenerationConfig(width=int(width), height=int(height), params=params)
    config.validate()
    return config
