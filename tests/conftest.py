"""Pytest configuration and shared fixtures for edgewise tests.

This module provides:
- A deterministic numpy RNG fixture
- Global numpy/torch seeding for reproducibility
- The adjacency-list fixture graphs used across the graph tests
"""

import os

import numpy as np
import pytest
import torch

from edgewise.graphs import UNWEIGHTED, Graph, Weighted


def _seed() -> int:
    return int(os.environ.get("TEST_RNG_SEED", "0"))


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).

    Returns:
        A seeded numpy.random.Generator instance.
    """
    return np.random.default_rng(_seed())


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Auto-use fixture to set global random seeds for reproducibility."""
    np.random.seed(_seed())
    torch.manual_seed(_seed())


@pytest.fixture
def unweighted_graph() -> Graph:
    """Six-node graph with components {0, 1, 2, 5} and {3, 4}.

    Mostly mirrored, but 1 -> 5 has no 5 -> 1, so it is not symmetric.
    """
    u = UNWEIGHTED
    return Graph([
        [(1, u), (2, u), (5, u)],  # 0
        [(0, u), (5, u)],          # 1
        [(0, u)],                  # 2
        [(4, u)],                  # 3
        [(3, u)],                  # 4
        [(0, u)],                  # 5
    ])


@pytest.fixture
def weighted_graph() -> Graph:
    """Fifteen-node directed graph; nodes 10-14 form a separate island."""
    w = Weighted
    return Graph([
        [(1, w(4)), (2, w(1))],                # 0
        [(3, w(1)), (4, w(7))],                # 1
        [(1, w(2)), (3, w(5)), (5, w(8))],     # 2
        [(6, w(3))],                           # 3
        [(6, w(2)), (7, w(3))],                # 4
        [(4, w(2)), (8, w(6))],                # 5
        [(9, w(4))],                           # 6
        [(6, w(3)), (9, w(2))],                # 7
        [(7, w(1)), (9, w(8))],                # 8
        [(5, w(1))],                           # 9
        # island
        [(11, w(3))],                          # 10
        [(12, w(4))],                          # 11
        [(13, w(2))],                          # 12
        [(10, w(10))],                         # 13
        [(12, w(1))],                          # 14
    ])
