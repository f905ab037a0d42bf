"""Pytest configuration and shared fixtures for digraph tests.

This module provides:
- A deterministic numpy RNG fixture for the random graph tests
- Small reference graphs used across the algorithm suites
"""

import os

import numpy as np
import pytest

from digraph.diagnostics import set_debug_enabled
from digraph.graphs import DiGraph, digraph


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def debug_checks():
    """Run every test with result validation switched on."""
    set_debug_enabled(True)
    yield
    set_debug_enabled(False)


@pytest.fixture
def diamond():
    """root -> A, root -> B, A -> C, B -> C."""
    return digraph(["root", "A", "B", "C"], {"root": ["A", "B"], ("A", "B"): "C"})


@pytest.fixture
def empty_graph() -> DiGraph:
    return DiGraph()
