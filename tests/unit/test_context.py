"""Unit tests for NoiseContext and the permutation table."""

import numpy as np
import pytest

from pynoisy import NoiseContext
from pynoisy.noise import permutation_table


@pytest.mark.unit
def test_permutation_table_shape_and_content():
    perm = permutation_table(np.random.default_rng(0))
    assert perm.shape == (512,)
    assert perm.dtype == np.int32
    assert sorted(perm[:256].tolist()) == list(range(256))
    np.testing.assert_array_equal(perm[256:], perm[:256])


@pytest.mark.unit
def test_seeded_contexts_share_table():
    a = NoiseContext(seed=99)
    b = NoiseContext(seed=99)
    np.testing.assert_array_equal(a.permutation, b.permutation)
    assert a.next_seed() == b.next_seed()


@pytest.mark.unit
def test_different_seeds_give_different_tables():
    a = NoiseContext(seed=1)
    b = NoiseContext(seed=2)
    assert not np.array_equal(a.permutation, b.permutation)


@pytest.mark.unit
def test_table_is_read_only(seeded_context):
    with pytest.raises(ValueError):
        seeded_context.permutation[0] = 1


@pytest.mark.unit
def test_injected_permutation_is_extended(fixed_permutation):
    ctx = NoiseContext(permutation=fixed_permutation)
    assert ctx.permutation.shape == (512,)
    np.testing.assert_array_equal(ctx.permutation[:256], fixed_permutation)
    np.testing.assert_array_equal(ctx.permutation[256:], fixed_permutation)


@pytest.mark.unit
def test_injected_full_table_accepted(fixed_permutation):
    full = np.concatenate([fixed_permutation, fixed_permutation])
    ctx = NoiseContext(permutation=full)
    np.testing.assert_array_equal(ctx.permutation, full)


@pytest.mark.unit
def test_injected_permutation_validation():
    with pytest.raises(ValueError):
        NoiseContext(permutation=np.arange(100))
    with pytest.raises(ValueError):
        NoiseContext(permutation=np.zeros(256, dtype=np.int32))

    bad_tail = np.concatenate([np.arange(256), np.arange(256)[::-1]])
    with pytest.raises(ValueError, match="second half"):
        NoiseContext(permutation=bad_tail)


@pytest.mark.unit
def test_next_seed_range(seeded_context):
    seeds = [seeded_context.next_seed() for _ in range(50)]
    assert all(0 <= s < 2**31 for s in seeds)
    assert len(set(seeds)) > 1
