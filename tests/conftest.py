"""
Shared pytest fixtures for red-black tree tests.
"""

import random

import pytest

from llrb import RedBlackTree


@pytest.fixture
def tree():
    """Provide a fresh, empty tree."""
    return RedBlackTree()


@pytest.fixture
def sample_values():
    """Provide a small set of distinct values in a mixed order."""
    return [50, 20, 80, 10, 30, 70, 90, 25, 35, 5]


@pytest.fixture
def large_sample_values():
    """Provide a larger shuffled sample for stress testing."""
    rng = random.Random(1337)
    return rng.sample(range(-5000, 5000), 1000)
