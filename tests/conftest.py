"""Pytest configuration and shared fixtures for mststep tests.

This module provides:
- A deterministic numpy RNG fixture
- Small adjacency matrices used across test modules
"""

import os

import numpy as np
import pytest


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture
def triangle_text() -> str:
    """Triangle with weights 0-1: 1, 1-2: 2, 0-2: 4."""
    return "0 1 4\n1 0 2\n4 2 0"


@pytest.fixture
def isolated_text() -> str:
    """Three nodes, only edge 0-1 with weight 5; node 2 is isolated."""
    return "0 5 0\n5 0 0\n0 0 0"


@pytest.fixture
def five_node_text() -> str:
    """Connected 5-node graph with distinct weights (MST weight 16)."""
    return "\n".join(
        [
            "0 2 0 6 0",
            "2 0 3 8 5",
            "0 3 0 0 7",
            "6 8 0 0 9",
            "0 5 7 9 0",
        ]
    )
