"""
Shared pytest fixtures for ordered map tests.
"""

import pytest

from avlmap.models.ordered_value import OrderedValue
from avlmap.models.sortedcontainers import AVLTree


@pytest.fixture
def tree():
    """Provide an empty tree that validates itself after every mutation."""
    return AVLTree(check_invariants=True)


@pytest.fixture
def sample_entries():
    """Provide sample key-value entries for testing."""
    return [
        (2, "two"),
        (1, "one"),
        (3, "three"),
    ]


@pytest.fixture
def populated_tree(sample_entries):
    """Provide a tree loaded with sample_entries."""
    return AVLTree(sample_entries, check_invariants=True)


@pytest.fixture
def large_sample_entries():
    """Provide larger sample for stress testing."""
    return [(i, f"value{i}") for i in range(1000)]


@pytest.fixture
def mixed_keys():
    """Provide numeric and text keys in ascending order."""
    return [
        OrderedValue.number(-3),
        OrderedValue.number(1.5),
        OrderedValue.number(2),
        OrderedValue.text("B"),
        OrderedValue.text("a"),
        OrderedValue.text("b"),
    ]
