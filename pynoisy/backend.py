"""
Taichi runtime initialisation for pynoisy.

All kernels are written against a float64 default precision, so the runtime
must be initialised through `init` rather than a bare `ti.init()`. Library
entry points call `ensure_init`, which falls back to the CPU backend when
the user did not choose one.

Author: B.G.
"""

import taichi as ti

from . import constants as cte

_ARCHS = {
    "cpu": ti.cpu,
    "cuda": ti.cuda,
}

_initialized = False


def init(arch: str = "cpu", debug: bool = False):
    """
    Initialise the Taichi runtime for pynoisy kernels.

    Calling this resets any Taichi runtime already running in the process,
    including one started by a bare `ti.init()` elsewhere. Applications that
    share Taichi with other code should call it once, before anything else
    allocates Taichi fields.

    Args:
        arch: Backend name, 'cpu' or 'cuda' (default: 'cpu').
              Taichi falls back to the CPU when CUDA is unavailable.
        debug: Enable Taichi bound checks (default: False)

    Raises:
        ValueError: If the backend name is unknown
    """
    global _initialized
    if arch not in _ARCHS:
        raise ValueError(f"arch must be one of {sorted(_ARCHS)}, got '{arch}'")

    ti.init(
        arch=_ARCHS[arch],
        default_fp=cte.FLOAT_TYPE_TI,
        default_ip=ti.i32,
        fast_math=False,
        debug=debug,
    )
    _initialized = True


def ensure_init():
    """
    Initialise the CPU backend unless `init` was already called.

    Only calls to `init` are tracked. A runtime started with a bare
    `ti.init()` is not detected and gets re-initialised with float64
    defaults on the first pynoisy kernel launch.
    """
    if not _initialized:
        init("cpu")
