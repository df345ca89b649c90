"""
Sorted container implementations for the ordered map.
"""

from avlmap.models.sortedcontainers.avl_tree import AVLTree

__all__ = ["AVLTree"]
