"""
Node and structural primitives for the AVL tree.

Every function here works on a single subtree and returns the subtree's new
root. None of them know about the owning tree.
"""

import logging
from dataclasses import dataclass

from avlmap.models.exceptions import TreeInvariantError
from avlmap.models.ordered_value import OrderedValue

logger = logging.getLogger(__name__)


@dataclass
class Node:
    """Node in the AVL tree. Children are owned exclusively by their parent."""

    key: OrderedValue
    value: OrderedValue
    height: int = 1
    left: "Node | None" = None
    right: "Node | None" = None


def height_of(node: Node | None) -> int:
    """Cached height of a subtree, 0 for an empty slot. O(1)"""
    return node.height if node is not None else 0


def recompute_height(node: Node) -> None:
    node.height = 1 + max(height_of(node.left), height_of(node.right))


def balance_factor(node: Node) -> int:
    return height_of(node.left) - height_of(node.right)


def rotate_right(y: Node) -> Node:
    """
    Right rotation around y.

    Args:
        y: Subtree root. Must have a left child.

    Returns:
        The new subtree root (y's former left child).

    Raises:
        TreeInvariantError: If y has no left child.
    """
    x = y.left
    if x is None:
        raise TreeInvariantError(f"rotate_right on key {y.key} without a left child")

    y.left = x.right
    recompute_height(y)
    x.right = y
    recompute_height(x)
    return x


def rotate_left(x: Node) -> Node:
    """
    Left rotation around x.

    Args:
        x: Subtree root. Must have a right child.

    Returns:
        The new subtree root (x's former right child).

    Raises:
        TreeInvariantError: If x has no right child.
    """
    y = x.right
    if y is None:
        raise TreeInvariantError(f"rotate_left on key {x.key} without a right child")

    x.right = y.left
    recompute_height(x)
    y.left = x
    recompute_height(y)
    return y


def rebalance(node: Node) -> Node:
    """
    Restore the AVL invariant at node, assuming both children satisfy it.

    Performs at most one double rotation. The node's height must already be
    current.

    Returns:
        The subtree root after balancing.
    """
    factor = balance_factor(node)

    if factor > 1:
        # Left-heavy: LL or LR
        if balance_factor(node.left) < 0:
            logger.debug("LR rotation at key %s", node.key)
            node.left = rotate_left(node.left)
        else:
            logger.debug("LL rotation at key %s", node.key)
        return rotate_right(node)

    if factor < -1:
        # Right-heavy: RR or RL
        if balance_factor(node.right) > 0:
            logger.debug("RL rotation at key %s", node.key)
            node.right = rotate_right(node.right)
        else:
            logger.debug("RR rotation at key %s", node.key)
        return rotate_left(node)

    return node


def remove_min(node: Node) -> tuple[Node | None, Node]:
    """
    Splice the minimum-keyed node out of a subtree.

    The minimum is replaced by its right child, and every ancestor on the
    path back up is recomputed and rebalanced.

    Args:
        node: Root of a non-empty subtree.

    Returns:
        (new subtree root without the minimum, the detached minimum node)
    """
    if node.left is None:
        minimum = node
        rest = node.right
        minimum.right = None
        return rest, minimum

    node.left, minimum = remove_min(node.left)
    recompute_height(node)
    return rebalance(node), minimum
