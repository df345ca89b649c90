"""
Abstract base classes for the ordered map.
"""

from avlmap.interfaces.ordered_iterable import OrderedIterable
from avlmap.interfaces.sorted_container import SortedContainer

__all__ = ["OrderedIterable", "SortedContainer"]
