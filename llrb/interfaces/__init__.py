"""
Abstract base classes for the tree implementations.
"""

from llrb.interfaces.insert_only_tree import InsertOnlyTree

__all__ = ["InsertOnlyTree"]
