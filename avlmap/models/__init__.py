"""
Data models for the ordered map.
"""

from avlmap.models.exceptions import (
    AVLError,
    MalformedPairError,
    TreeInvariantError,
    UnsupportedValueError,
)
from avlmap.models.ordered_value import OrderedValue, Ordering, ValueKind, compare

__all__ = [
    "OrderedValue",
    "Ordering",
    "ValueKind",
    "compare",
    "AVLError",
    "MalformedPairError",
    "TreeInvariantError",
    "UnsupportedValueError",
]
