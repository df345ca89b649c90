"""
AVL Tree implementation for sorted key-value storage.

Keeps subtree heights within one of each other, giving O(log N) insert,
search and remove.
"""

import logging
from collections.abc import AsyncIterator, Iterable, Iterator
from typing import Any

from avlmap.interfaces.ordered_iterable import Entry
from avlmap.interfaces.sorted_container import SortedContainer
from avlmap.models.exceptions import MalformedPairError, TreeInvariantError
from avlmap.models.ordered_value import OrderedValue, Ordering, compare
from avlmap.models.sortedcontainers.avl_node import (
    Node,
    balance_factor,
    height_of,
    rebalance,
    recompute_height,
    remove_min,
)

logger = logging.getLogger(__name__)


class AVLTree(SortedContainer):
    """
    AVL Tree implementation of SortedContainer.

    Properties maintained:
    1. Every key in a left subtree is less than its parent's key
    2. Every key in a right subtree is greater than its parent's key
    3. Subtree heights of every node differ by at most one
    4. Every cached height equals 1 + the taller child's height

    Not safe for concurrent mutation; callers serialize access.
    """

    def __init__(
        self,
        entries: Iterable[Any] | None = None,
        check_invariants: bool = False,
    ) -> None:
        """
        Initialize the tree.

        Args:
            entries: Optional (key, value) pairs to load with bulk_insert.
            check_invariants: Run validate() after every mutation.
        """
        if not isinstance(check_invariants, bool):
            raise TypeError(
                f"check_invariants must be a bool, got {type(check_invariants).__name__}"
            )

        self._root: Node | None = None
        self._size: int = 0
        self._check_invariants = check_invariants

        if entries is not None:
            self.bulk_insert(entries)

    def insert(self, key: Any, value: Any) -> None:
        """Insert or update a key-value pair. O(log N)"""
        key = OrderedValue.of(key)
        value = OrderedValue.of(value)
        self._root = self._insert(self._root, key, value)
        self._after_mutation()

    def bulk_insert(self, pairs: Iterable[Any]) -> None:
        count = 0
        for index, pair in enumerate(pairs):
            # Only tuples and lists; strings, dicts and sets also unpack
            if not isinstance(pair, (tuple, list)) or len(pair) != 2:
                raise MalformedPairError(index, pair)
            key, value = pair
            self.insert(key, value)
            count += 1
        logger.debug("Bulk inserted %d pairs, size is now %d", count, self._size)

    def search(self, key: Any) -> OrderedValue | None:
        """Retrieve value by key. O(log N)"""
        node = self._find_node(OrderedValue.of(key))
        return node.value if node else None

    def remove(self, key: Any) -> OrderedValue | None:
        """Remove a key-value pair, returning its value. O(log N)"""
        self._root, removed = self._remove(self._root, OrderedValue.of(key))
        if removed is not None:
            self._size -= 1
            self._after_mutation()
        return removed

    def has(self, key: Any) -> bool:
        return self.search(key) is not None

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._root is None

    def height(self) -> int:
        return height_of(self._root)

    def root_key(self) -> OrderedValue | None:
        return self._root.key if self._root else None

    def min_key(self) -> OrderedValue | None:
        current = self._root
        if current is None:
            return None
        while current.left:
            current = current.left
        return current.key

    def max_key(self) -> OrderedValue | None:
        current = self._root
        if current is None:
            return None
        while current.right:
            current = current.right
        return current.key

    def clear(self) -> None:
        self._root = None
        self._size = 0
        self._after_mutation()

    def dump(self) -> list[Entry]:
        return list(self)

    def dump_str(self) -> str:
        """Render entries as '{ key: K, value: V }, ...' in key order."""
        return ", ".join(
            f"{{ key: {key}, value: {value} }}" for key, value in self
        )

    def validate(self) -> None:
        """
        Check every structural invariant of the tree.

        Raises:
            TreeInvariantError: On a stale height, an unbalanced node,
                out-of-order keys or a wrong entry count.
        """
        count = self._validate_subtree(self._root, None, None)
        if count != self._size:
            raise TreeInvariantError(
                f"Tracked size {self._size} does not match {count} reachable nodes"
            )
        logger.debug("Validated tree: size=%d height=%d", count, self.height())

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: Any) -> bool:
        return self.has(key)

    def __iter__(self) -> Iterator[Entry]:
        return _InOrderIterator(self._root)

    def __aiter__(self) -> AsyncIterator[Entry]:
        return _AsyncInOrderIterator(self._root)

    def __repr__(self) -> str:
        return f"AVLTree(size={self._size}, height={self.height()})"

    def _find_node(self, key: OrderedValue) -> Node | None:
        """Find node by key."""
        current = self._root
        while current is not None:
            order = compare(key, current.key)
            if order is Ordering.LESS:
                current = current.left
            elif order is Ordering.GREATER:
                current = current.right
            else:
                return current
        return None

    def _insert(self, node: Node | None, key: OrderedValue, value: OrderedValue) -> Node:
        if node is None:
            self._size += 1
            return Node(key=key, value=value)

        order = compare(key, node.key)
        if order is Ordering.LESS:
            node.left = self._insert(node.left, key, value)
        elif order is Ordering.GREATER:
            node.right = self._insert(node.right, key, value)
        else:
            # Key exists, update value
            node.value = value
            return node

        recompute_height(node)
        return rebalance(node)

    def _remove(
        self, node: Node | None, key: OrderedValue
    ) -> tuple[Node | None, OrderedValue | None]:
        if node is None:
            return None, None

        order = compare(key, node.key)
        if order is Ordering.LESS:
            node.left, removed = self._remove(node.left, key)
        elif order is Ordering.GREATER:
            node.right, removed = self._remove(node.right, key)
        else:
            removed = node.value
            if node.left is None:
                return node.right, removed
            if node.right is None:
                return node.left, removed

            # Two children: pull up the in-order successor's entry
            node.right, successor = remove_min(node.right)
            node.key = successor.key
            node.value = successor.value

        recompute_height(node)
        return rebalance(node), removed

    def _validate_subtree(
        self,
        node: Node | None,
        lower: OrderedValue | None,
        upper: OrderedValue | None,
    ) -> int:
        """Validate a subtree bounded by (lower, upper) and return its node count."""
        if node is None:
            return 0

        if lower is not None and compare(node.key, lower) is not Ordering.GREATER:
            raise TreeInvariantError(f"Key {node.key} is not greater than {lower}")
        if upper is not None and compare(node.key, upper) is not Ordering.LESS:
            raise TreeInvariantError(f"Key {node.key} is not less than {upper}")

        count = (
            1
            + self._validate_subtree(node.left, lower, node.key)
            + self._validate_subtree(node.right, node.key, upper)
        )

        expected = 1 + max(height_of(node.left), height_of(node.right))
        if node.height != expected:
            raise TreeInvariantError(
                f"Stale height at key {node.key}: cached {node.height}, actual {expected}"
            )
        if abs(balance_factor(node)) > 1:
            raise TreeInvariantError(
                f"Unbalanced node at key {node.key}: balance factor {balance_factor(node)}"
            )
        return count

    def _after_mutation(self) -> None:
        if self._check_invariants:
            self.validate()


class _InOrderIterator(Iterator[Entry]):
    """In-order iterator over an AVL subtree."""

    def __init__(self, root: Node | None) -> None:
        self._stack: list[Node] = []
        self._push_left_path(root)

    def __iter__(self) -> Iterator[Entry]:
        return self

    def __next__(self) -> Entry:
        if not self._stack:
            raise StopIteration

        node = self._stack.pop()
        result = (node.key, node.value)

        # Push right subtree's left path
        self._push_left_path(node.right)

        return result

    def _push_left_path(self, node: Node | None) -> None:
        while node:
            self._stack.append(node)
            node = node.left


class _AsyncInOrderIterator(AsyncIterator[Entry]):
    """Async in-order iterator over an AVL subtree (in-memory, no I/O)."""

    def __init__(self, root: Node | None) -> None:
        self._inner = _InOrderIterator(root)

    def __aiter__(self) -> "_AsyncInOrderIterator":
        return self

    async def __anext__(self) -> Entry:
        try:
            return next(self._inner)
        except StopIteration:
            raise StopAsyncIteration from None
