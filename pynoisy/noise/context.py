"""
Noise context for pynoisy.

A NoiseContext owns everything random that a generation run needs: the
lattice permutation table used by simplex noise and the NumPy generator that
seeds the per-pixel random source of the other modes. It is built once and
passed explicitly to every fill function.

Author: B.G.
"""

import numpy as np

from .. import constants as cte


def permutation_table(rng: np.random.Generator) -> np.ndarray:
    """
    Generate a lattice permutation table.

    Args:
        rng: NumPy random generator providing the shuffle

    Returns:
        512-element int32 array (a permutation of 0..255, duplicated)
    """
    perm = rng.permutation(cte.PERM_SIZE).astype(np.int32)

    # Duplicate to 512 elements so corner lookups never wrap
    return np.concatenate([perm, perm])


def _extend_permutation(permutation) -> np.ndarray:
    perm = np.asarray(permutation)
    if perm.ndim != 1 or perm.shape[0] not in (cte.PERM_SIZE, cte.PERM_TABLE_SIZE):
        raise ValueError(
            f"permutation must have {cte.PERM_SIZE} or {cte.PERM_TABLE_SIZE} entries"
        )

    head = perm[: cte.PERM_SIZE]
    if not np.array_equal(np.sort(head), np.arange(cte.PERM_SIZE)):
        raise ValueError(f"permutation must contain each of 0..{cte.PERM_SIZE - 1} once")
    if perm.shape[0] == cte.PERM_TABLE_SIZE and not np.array_equal(
        perm[cte.PERM_SIZE :], head
    ):
        raise ValueError("second half of the permutation must repeat the first half")

    head = head.astype(np.int32)
    return np.concatenate([head, head])


class NoiseContext:
    """
    Random state shared by the fill strategies of one generation run.

    The permutation table is read-only once built. The context is not meant
    to be used from several Python threads at once; parallelism happens
    inside the kernels.

    Args:
        seed: Optional seed for reproducible tables and pixel draws
        permutation: Optional fixed permutation (256 or 512 entries) used
                     instead of a random one

    Example:
        ctx = NoiseContext(seed=42)
        img = pynoisy.generate(config, ctx)
    """

    def __init__(self, seed=None, permutation=None):
        self.seed = seed
        self.rng = np.random.default_rng(seed)

        if permutation is None:
            perm = permutation_table(self.rng)
        else:
            perm = _extend_permutation(permutation)
        perm.flags.writeable = False
        self._perm = perm

    @property
    def permutation(self) -> np.ndarray:
        return self._perm

    def next_seed(self) -> int:
        """Draw the seed of the per-pixel random source for one fill."""
        return int(self.rng.integers(0, 2**31 - 1))

    def __repr__(self):
        return f"NoiseContext(seed={self.seed!r})"
