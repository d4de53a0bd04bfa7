"""
Balanced tree implementations.
"""

from llrb.models.sortedcontainers.red_black_tree import Color, LeftLeaningRedBlackTree, Node

__all__ = ["Color", "LeftLeaningRedBlackTree", "Node"]
