import numpy as np

import pytest

@pytest.fixture
def two_communities():
    """7 nodes: {0, 1, 2} and {3, 4, 5, 6}, bridged by the 2-3 edge."""
    return np.array([
        [1, 1, 1, 0, 0, 0, 0],
        [1, 1, 1, 0, 0, 0, 0],
        [1, 1, 1, 1, 0, 0, 0],
        [0, 0, 1, 1, 1, 0, 1],
        [0, 0, 0, 1, 1, 1, 1],
        [0, 0, 0, 0, 1, 1, 1],
        [0, 0, 0, 1, 1, 1, 1],
    ], dtype = np.float64)

@pytest.fixture
def two_communities_result():
    return np.array([
        [0, 0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0, 0],
        [1, 1, 1, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0.5, 0.5, 0.5, 0.5],
        [0, 0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0.5, 0.5, 0.5, 0.5],
    ])

def block_diagonal(sizes, dtype = np.float64):
    """Disjoint all-ones blocks of the given sizes along the diagonal."""
    n = sum(sizes)
    out = np.zeros(shape = (n, n), dtype = dtype)
    start = 0
    for size in sizes:
        out[start:start + size, start:start + size] = 1
        start += size
    return out
