"""
Data models for the tree: nodes, colors, diagnostics and exceptions.
"""

from llrb.models.exceptions import InvariantViolationError
from llrb.models.sortedcontainers import Color, LeftLeaningRedBlackTree, Node

__all__ = [
    "Color",
    "Node",
    "LeftLeaningRedBlackTree",
    "InvariantViolationError",
]
