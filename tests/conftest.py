"""
Pytest configuration and fixtures for the pynoisy test suite.

This file contains shared fixtures, test configuration, and utilities
used across the test suite.
"""
import math
import os
import sys

import numpy as np
import pytest


def pytest_configure(config):
    """Configure pytest with custom settings."""
    # Add the package root to Python path for testing
    package_root = os.path.dirname(os.path.dirname(__file__))
    if package_root not in sys.path:
        sys.path.insert(0, package_root)

    for marker in ("unit", "integration", "slow", "importtest"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers."""
    for item in items:
        # Simplex kernels take a few seconds to compile the first time
        if "simplex" in item.name.lower() or "octave" in item.name.lower():
            item.add_marker("slow")

        if "import" in item.name.lower() or "test_imports.py" in str(item.fspath):
            item.add_marker("importtest")


@pytest.fixture(scope="session", autouse=True)
def taichi_cpu():
    """Initialise the Taichi CPU backend once for the whole session."""
    import pynoisy as pn

    pn.init("cpu")
    return True


@pytest.fixture
def seeded_context():
    """NoiseContext with a fixed seed."""
    import pynoisy as pn

    return pn.NoiseContext(seed=1234)


@pytest.fixture(scope="session")
def fixed_permutation():
    """A fixed permutation of 0..255, independent of NumPy's generator."""
    # 97 is coprime with 256, so every value appears once
    return np.array([(i * 97 + 13) % 256 for i in range(256)], dtype=np.int32)


@pytest.fixture
def fixed_context(fixed_permutation):
    """NoiseContext whose permutation table is injected."""
    import pynoisy as pn

    return pn.NoiseContext(seed=0, permutation=fixed_permutation)


class SimplexReference:
    """Pure-Python simplex noise used as a test oracle."""

    F2 = 0.5 * (math.sqrt(3.0) - 1.0)
    G2 = (3.0 - math.sqrt(3.0)) / 6.0
    GRAD = [
        (1, 1), (-1, 1), (1, -1), (-1, -1),
        (1, 0), (-1, 0), (1, 0), (-1, 0),
        (0, 1), (0, -1), (0, 1), (0, -1),
    ]

    def __init__(self, perm):
        perm = [int(v) for v in perm[:256]]
        self.perm = perm + perm

    def _corner(self, gi, x, y):
        t = 0.5 - x * x - y * y
        if t < 0:
            return 0.0
        t *= t
        gx, gy = self.GRAD[gi]
        return t * t * (gx * x + gy * y)

    def noise(self, x, y):
        F2, G2, perm = self.F2, self.G2, self.perm
        s = (x + y) * F2
        i = math.floor(x + s)
        j = math.floor(y + s)
        t = (i + j) * G2
        x0 = x - (i - t)
        y0 = y - (j - t)
        i1, j1 = (1, 0) if x0 > y0 else (0, 1)
        x1 = x0 - i1 + G2
        y1 = y0 - j1 + G2
        x2 = x0 - 1.0 + 2.0 * G2
        y2 = y0 - 1.0 + 2.0 * G2
        ii = i & 255
        jj = j & 255
        gi0 = perm[ii + perm[jj]] % 12
        gi1 = perm[ii + i1 + perm[jj + j1]] % 12
        gi2 = perm[ii + 1 + perm[jj + 1]] % 12
        return 70.0 * (
            self._corner(gi0, x0, y0)
            + self._corner(gi1, x1, y1)
            + self._corner(gi2, x2, y2)
        )

    def octaves(self, px, py, scale):
        base_scale = scale / 1000.0
        total, amplitude, frequency, max_amplitude = 0.0, 1.0, 1.0, 0.0
        for _ in range(12):
            total += self.noise(px * base_scale * frequency,
                                py * base_scale * frequency) * amplitude
            max_amplitude += amplitude
            amplitude *= 0.5
            frequency *= 2.0
        return (total / max_amplitude + 1.0) / 2.0


@pytest.fixture(scope="session")
def simplex_reference(fixed_permutation):
    """Oracle evaluating simplex noise on the fixed permutation."""
    return SimplexReference(fixed_permutation)
