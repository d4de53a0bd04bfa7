"""
Left-leaning Red-Black Tree over integer keys.

This package provides an insert-only balanced search tree with:
- insert(value) - O(log N) recursive insertion, duplicates rejected
- Bottom-up rebalancing via two rotations and one recolor
"""

from llrb.models.sortedcontainers import LeftLeaningRedBlackTree as RedBlackTree

__all__ = ["RedBlackTree"]
