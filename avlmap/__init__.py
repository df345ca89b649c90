"""
AVL-tree based in-memory ordered map.

This package provides a height-balanced key-value map with:
- insert(key, value) - O(log N) upsert
- search(key) / has(key) - O(log N) lookup
- remove(key) - O(log N) delete returning the removed value
- bulk_insert(pairs) - Repeated single insertion
- dump() - Entries in ascending key order

Keys and values are numbers or text under one total order: numbers sort
numerically, text lexicographically, and every number before every text.
"""

from avlmap.models.exceptions import (
    AVLError,
    MalformedPairError,
    TreeInvariantError,
    UnsupportedValueError,
)
from avlmap.models.ordered_value import OrderedValue, Ordering, ValueKind, compare
from avlmap.models.sortedcontainers import AVLTree

__all__ = [
    "AVLTree",
    "OrderedValue",
    "Ordering",
    "ValueKind",
    "compare",
    "AVLError",
    "MalformedPairError",
    "TreeInvariantError",
    "UnsupportedValueError",
]
