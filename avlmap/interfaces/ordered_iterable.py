"""
OrderedIterable protocol for data structures that iterate in key order.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Iterator

from avlmap.models.ordered_value import OrderedValue

Entry = tuple[OrderedValue, OrderedValue]


class OrderedIterable(ABC):
    """
    Protocol for data structures that yield their entries in ascending key order.

    Implementations must support:
    - Full iteration via __iter__
    - Async iteration via __aiter__
    - Materialized, ordered snapshots via dump()
    """

    @abstractmethod
    def __iter__(self) -> Iterator[Entry]:
        """Return an iterator over all key-value pairs in sorted order."""
        pass

    @abstractmethod
    def __aiter__(self) -> AsyncIterator[Entry]:
        """Return an async iterator over all key-value pairs in sorted order."""
        pass

    @abstractmethod
    def dump(self) -> list[Entry]:
        """
        Return every entry in strictly ascending key order.

        Returns:
            List of (key, value) tuples.
        """
        pass
