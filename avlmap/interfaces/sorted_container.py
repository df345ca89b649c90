"""
SortedContainer abstract base class for sorted key-value data structures.
"""

from abc import abstractmethod
from collections.abc import Iterable
from typing import Any

from avlmap.interfaces.ordered_iterable import OrderedIterable
from avlmap.models.ordered_value import OrderedValue


class SortedContainer(OrderedIterable):
    """
    Abstract base class for sorted key-value containers.

    Provides O(log N) operations for insert, search, and remove.
    Inherits ordered iteration from OrderedIterable.

    Keys and values may be given as OrderedValue or as host values
    (int, float, str), which are mapped through OrderedValue.of.

    Implementations:
    - AVLTree: Height-balanced binary search tree
    """

    @abstractmethod
    def insert(self, key: Any, value: Any) -> None:
        """
        Insert or update a key-value pair.

        Args:
            key: The key to insert/update.
            value: The value to associate with the key.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def bulk_insert(self, pairs: Iterable[Any]) -> None:
        """
        Insert each (key, value) pair in order.

        Later pairs overwrite earlier ones with an equal key. There is no
        batch atomicity: a failure leaves earlier pairs applied.

        Args:
            pairs: Iterable of (key, value) pairs.
        """
        pass

    @abstractmethod
    def search(self, key: Any) -> OrderedValue | None:
        """
        Retrieve the value for a given key.

        Args:
            key: The key to look up.

        Returns:
            The value if found, None otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def remove(self, key: Any) -> OrderedValue | None:
        """
        Remove a key-value pair.

        Args:
            key: The key to remove.

        Returns:
            The removed value, or None if the key was not present.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def has(self, key: Any) -> bool:
        """
        Check if a key exists.

        Args:
            key: The key to check.

        Returns:
            True if the key exists, False otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of key-value pairs.

        Returns:
            The count of entries in the container.

        Time complexity: O(1)
        """
        pass
