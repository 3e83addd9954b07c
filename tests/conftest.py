import os
import sys

import numpy as np
import pytest

# ensure workspace root is on sys.path so the package and config module can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


STEPS = [1, 1, 1, 3, 3, 2, 1, 2, 3, 300, 310, 321, 310, 299]


@pytest.fixture
def steps():
    return list(STEPS)


@pytest.fixture
def piecewise():
    """Four noisy plateaus of 40 points each."""
    gen = np.random.default_rng(1234)
    levels = [0.0, 5.0, -3.0, 8.0]
    return np.concatenate([lvl + gen.normal(0.0, 1.0, 40) for lvl in levels])


class CountingRng:
    """Wraps a numpy generator and counts shuffle calls."""

    def __init__(self, seed: int = 0):
        self.calls = 0
        self._inner = np.random.default_rng(seed)

    def shuffle(self, arr):
        self.calls += 1
        self._inner.shuffle(arr)


@pytest.fixture
def counting_rng():
    return CountingRng()
