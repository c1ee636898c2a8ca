"""
Constants for pynoisy.

Numeric types, simplex noise parameters and pixel layout shared by the
kernels and the Python-scope API. The simplex values (octave count,
persistence, scale divisor) define the look of the simplex mode and are not
meant to be tuned per call.

Author: B.G.
"""

import math

import numpy as np
import taichi as ti

# Floating point precision used by every kernel
FLOAT_TYPE_TI = ti.f64
FLOAT_TYPE_NP = np.float64

# --- Pixel layout ---
CHANNELS = 4
OPAQUE_ALPHA = 255

# --- Permutation table ---
PERM_SIZE = 256
PERM_TABLE_SIZE = 2 * PERM_SIZE

# --- Simplex lattice ---
SIMPLEX_F2 = 0.5 * (math.sqrt(3.0) - 1.0)
SIMPLEX_G2 = (3.0 - math.sqrt(3.0)) / 6.0
SIMPLEX_OUTPUT_SCALE = 70.0
SIMPLEX_N_GRADIENTS = 12

# --- Octave composition ---
SIMPLEX_OCTAVES = 12
SIMPLEX_PERSISTENCE = 0.5
SIMPLEX_LACUNARITY = 2.0
SIMPLEX_SCALE_DIVISOR = 1000.0

# --- Modes ---
MODE_WHITE = "white"
MODE_COLOR = "color"
MODE_SIMPLEX = "simplex"

# --- CLI defaults ---
DEFAULT_WIDTH = 512
DEFAULT_HEIGHT = 512
DEFAULT_COLOR1 = "#000000"
DEFAULT_COLOR2 = "#FFFFFF"
DEFAULT_CHANCE = 0.5
DEFAULT_SCALE = 10.0
DEFAULT_OUTPUT = "noise"
