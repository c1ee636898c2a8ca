"""
Exception classes for pynoisy.

Both concrete errors derive from ValueError so callers that already guard
against bad arguments keep working.

Author: B.G.
"""


class NoisyError(Exception):
    """Base class for all pynoisy errors."""


class ConfigValidationError(NoisyError, ValueError):
    """Invalid dimensions, unknown mode or out-of-range mode parameter."""


class ColorParseError(NoisyError, ValueError):
    """Malformed hex color string."""
