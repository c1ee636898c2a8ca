"""
Simplex noise generation for pynoisy.

Implements 2D simplex noise on a skewed triangular lattice (Gustavson's
formulation) with a fixed 12-entry gradient table, a fractal octave
compositor on top of it, and the simplex gradient fill that blends two
colors by the composed noise value.

The evaluator is a pure function of (x, y, permutation table): the same
NoiseContext always yields the same image.

Author: B.G.
"""

import numpy as np
import taichi as ti

from .. import backend
from .. import constants as cte

F2 = cte.SIMPLEX_F2
G2 = cte.SIMPLEX_G2

# 2D gradient directions (first two components of Gustavson's grad3)
GRADIENTS_2D = np.array([
    [1, 1], [-1, 1], [1, -1], [-1, -1],
    [1, 0], [-1, 0], [1, 0], [-1, 0],
    [0, 1], [0, -1], [0, 1], [0, -1],
], dtype=cte.FLOAT_TYPE_NP)
GRADIENTS_2D.flags.writeable = False


@ti.func
def _corner(gradients: ti.template(), gi: ti.i32, dx: cte.FLOAT_TYPE_TI,
            dy: cte.FLOAT_TYPE_TI) -> cte.FLOAT_TYPE_TI:
    """Contribution of one simplex corner, zero outside its radius."""
    n = 0.0
    t = 0.5 - dx * dx - dy * dy
    if t >= 0.0:
        t *= t
        n = t * t * (gradients[gi, 0] * dx + gradients[gi, 1] * dy)
    return n


@ti.func
def simplex_at(x: cte.FLOAT_TYPE_TI, y: cte.FLOAT_TYPE_TI, perm: ti.template(),
               gradients: ti.template()) -> cte.FLOAT_TYPE_TI:
    """
    Evaluate 2D simplex noise at (x, y).

    Args:
        x, y: Coordinates in noise space
        perm: 512-element permutation table (read-only)
        gradients: 12x2 gradient table (read-only)

    Returns:
        Noise value in range approximately [-1, 1]
    """
    # Skew into lattice space to find the containing cell
    s = (x + y) * F2
    i = ti.cast(ti.floor(x + s), ti.i64)
    j = ti.cast(ti.floor(y + s), ti.i64)

    # Unskew the cell origin back to (x, y) space
    t = ti.cast(i + j, cte.FLOAT_TYPE_TI) * G2
    x0 = x - (ti.cast(i, cte.FLOAT_TYPE_TI) - t)
    y0 = y - (ti.cast(j, cte.FLOAT_TYPE_TI) - t)

    # Lower-right or upper-left triangle fixes the middle corner
    i1 = 0
    j1 = 1
    if x0 > y0:
        i1 = 1
        j1 = 0

    x1 = x0 - i1 + G2
    y1 = y0 - j1 + G2
    x2 = x0 - 1.0 + 2.0 * G2
    y2 = y0 - 1.0 + 2.0 * G2

    ii = ti.cast(i & 255, ti.i32)
    jj = ti.cast(j & 255, ti.i32)
    gi0 = perm[ii + perm[jj]] % cte.SIMPLEX_N_GRADIENTS
    gi1 = perm[ii + i1 + perm[jj + j1]] % cte.SIMPLEX_N_GRADIENTS
    gi2 = perm[ii + 1 + perm[jj + 1]] % cte.SIMPLEX_N_GRADIENTS

    n0 = _corner(gradients, gi0, x0, y0)
    n1 = _corner(gradients, gi1, x1, y1)
    n2 = _corner(gradients, gi2, x2, y2)
    return cte.SIMPLEX_OUTPUT_SCALE * (n0 + n1 + n2)


@ti.func
def octave_noise_at(px: cte.FLOAT_TYPE_TI, py: cte.FLOAT_TYPE_TI,
                    base_scale: cte.FLOAT_TYPE_TI, perm: ti.template(),
                    gradients: ti.template()) -> cte.FLOAT_TYPE_TI:
    """Sum SIMPLEX_OCTAVES layers of simplex noise, normalised to [0, 1]."""
    noise_sum = 0.0
    amplitude = 1.0
    frequency = 1.0
    max_amplitude = 0.0

    for _octave in range(cte.SIMPLEX_OCTAVES):
        noise_sum += simplex_at(px * base_scale * frequency,
                                py * base_scale * frequency,
                                perm, gradients) * amplitude
        max_amplitude += amplitude
        amplitude *= cte.SIMPLEX_PERSISTENCE
        frequency *= cte.SIMPLEX_LACUNARITY

    # [-1, 1] then [0, 1]
    noise_value = noise_sum / max_amplitude
    return (noise_value + 1.0) / 2.0


@ti.kernel
def simplex_sample_kernel(xs: ti.types.ndarray(dtype=cte.FLOAT_TYPE_TI, ndim=1),
                          ys: ti.types.ndarray(dtype=cte.FLOAT_TYPE_TI, ndim=1),
                          out: ti.types.ndarray(dtype=cte.FLOAT_TYPE_TI, ndim=1),
                          perm: ti.types.ndarray(dtype=ti.i32, ndim=1),
                          gradients: ti.types.ndarray(dtype=cte.FLOAT_TYPE_TI, ndim=2)):
    for k in range(out.shape[0]):
        out[k] = simplex_at(xs[k], ys[k], perm, gradients)


@ti.kernel
def octave_sample_kernel(xs: ti.types.ndarray(dtype=cte.FLOAT_TYPE_TI, ndim=1),
                         ys: ti.types.ndarray(dtype=cte.FLOAT_TYPE_TI, ndim=1),
                         out: ti.types.ndarray(dtype=cte.FLOAT_TYPE_TI, ndim=1),
                         base_scale: cte.FLOAT_TYPE_TI,
                         perm: ti.types.ndarray(dtype=ti.i32, ndim=1),
                         gradients: ti.types.ndarray(dtype=cte.FLOAT_TYPE_TI, ndim=2)):
    for k in range(out.shape[0]):
        out[k] = octave_noise_at(xs[k], ys[k], base_scale, perm, gradients)


@ti.kernel
def simplex_gradient_kernel(pixels: ti.types.ndarray(dtype=ti.u8, ndim=3),
                            palette: ti.types.ndarray(dtype=ti.u8, ndim=2),
                            base_scale: cte.FLOAT_TYPE_TI,
                            perm: ti.types.ndarray(dtype=ti.i32, ndim=1),
                            gradients: ti.types.ndarray(dtype=cte.FLOAT_TYPE_TI, ndim=2)):
    """
    Fill an RGBA image by blending two colors with octave simplex noise.

    Args:
        pixels: Output image of shape (height, width, 4)
        palette: (2, 4) array, row 0 background and row 1 foreground
        base_scale: scale / SIMPLEX_SCALE_DIVISOR
        perm: 512-element permutation table
        gradients: 12x2 gradient table
    """
    for y, x in ti.ndrange(pixels.shape[0], pixels.shape[1]):
        factor = octave_noise_at(ti.cast(x, cte.FLOAT_TYPE_TI),
                                 ti.cast(y, cte.FLOAT_TYPE_TI),
                                 base_scale, perm, gradients)

        for c in ti.static(range(cte.CHANNELS)):
            bg = ti.cast(palette[0, c], cte.FLOAT_TYPE_TI)
            fg = ti.cast(palette[1, c], cte.FLOAT_TYPE_TI)
            value = bg + (fg - bg) * factor
            # Truncating conversion, the fractional part is dropped
            pixels[y, x, c] = ti.cast(ti.min(ti.max(value, 0.0), 255.0), ti.u8)


def _as_samples(x, y):
    xs = np.ascontiguousarray(np.ravel(np.asarray(x, dtype=cte.FLOAT_TYPE_NP)))
    ys = np.ascontiguousarray(np.ravel(np.asarray(y, dtype=cte.FLOAT_TYPE_NP)))
    if xs.shape != ys.shape:
        raise ValueError(f"x and y must have the same size, got {xs.size} and {ys.size}")
    return xs, ys


def _reshape_like(out, x):
    shape = np.shape(x)
    if shape == ():
        return float(out[0])
    return out.reshape(shape)


def simplex_noise(x, y, context):
    """
    Evaluate single-octave simplex noise at the given coordinates.

    Args:
        x, y: Scalars or arrays of identical shape (noise space coordinates)
        context: NoiseContext providing the permutation table

    Returns:
        float or numpy.ndarray: Noise values, approximately in [-1, 1]

    Example:
        ctx = NoiseContext(seed=3)
        v = simplex_noise(0.25, 1.5, ctx)
    """
    xs, ys = _as_samples(x, y)
    out = np.zeros(xs.shape, dtype=cte.FLOAT_TYPE_NP)
    if out.size > 0:
        backend.ensure_init()
        simplex_sample_kernel(xs, ys, out, context.permutation.copy(),
                              GRADIENTS_2D.copy())
    return _reshape_like(out, x)


def octave_noise(x, y, scale, context):
    """
    Evaluate the octave composition used by the simplex fill.

    Args:
        x, y: Pixel coordinates (scalars or arrays of identical shape)
        scale: Spatial scale, divided by SIMPLEX_SCALE_DIVISOR to get the
               base frequency
        context: NoiseContext providing the permutation table

    Returns:
        float or numpy.ndarray: Values in [0, 1]
    """
    xs, ys = _as_samples(x, y)
    out = np.zeros(xs.shape, dtype=cte.FLOAT_TYPE_NP)
    if out.size > 0:
        backend.ensure_init()
        octave_sample_kernel(xs, ys, out, scale / cte.SIMPLEX_SCALE_DIVISOR,
                             context.permutation.copy(), GRADIENTS_2D.copy())
    return _reshape_like(out, x)


def simplex_gradient(width: int, height: int, scale: float, background, foreground,
                     context):
    """
    Generate a simplex gradient image between two colors.

    Each pixel (x, y) gets factor = octave_noise(x, y, scale) and every
    channel is background + (foreground - background) * factor, truncated
    to an integer.

    Args:
        width: Image width in pixels
        height: Image height in pixels
        scale: Spatial scale (larger values give smoother, larger features)
        background: Color at factor 0
        foreground: Color at factor 1
        context: NoiseContext providing the permutation table

    Returns:
        numpy.ndarray: uint8 array of shape (height, width, 4)
    """
    pixels = np.zeros((height, width, cte.CHANNELS), dtype=np.uint8)
    if pixels.size == 0:
        return pixels

    palette = np.stack([background.as_array(), foreground.as_array()])

    backend.ensure_init()
    simplex_gradient_kernel(pixels, palette, scale / cte.SIMPLEX_SCALE_DIVISOR,
                            context.permutation.copy(), GRADIENTS_2D.copy())
    return pixels
