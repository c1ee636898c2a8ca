"""
Counter-based random source for pynoisy kernels.

Every pixel draws its random values from a hash of (run seed, counter), so
rows processed in parallel never share generator state and a seeded run is
reproducible regardless of thread scheduling.

Author: B.G.
"""

import taichi as ti

from .. import constants as cte


@ti.func
def _mix(v: ti.u32) -> ti.u32:
    x = (v ^ ti.u32(61)) ^ (v >> 16)
    x = x + (x << 3)
    x = x ^ (x >> 4)
    x = x * ti.u32(0x27D4EB2D)
    x = x ^ (x >> 15)
    return x


@ti.func
def hash_u32(seed: ti.i32, idx: ti.i32) -> ti.u32:
    """Uniform 32-bit value for counter `idx` of stream `seed`."""
    return _mix(ti.u32(idx) + _mix(ti.u32(seed)))


@ti.func
def rand01(seed: ti.i32, idx: ti.i32) -> cte.FLOAT_TYPE_TI:
    """Uniform value in [0, 1) for counter `idx` of stream `seed`."""
    return ti.cast(hash_u32(seed, idx), cte.FLOAT_TYPE_TI) / 4294967296.0


@ti.func
def rand_byte(seed: ti.i32, idx: ti.i32) -> ti.u8:
    return ti.cast(hash_u32(seed, idx) & 255, ti.u8)
