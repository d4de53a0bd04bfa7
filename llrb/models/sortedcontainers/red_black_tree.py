"""
Left-leaning Red-Black Tree implementation for integer keys.

Insert-only: values are added with O(log N) recursive descent and
rebalanced bottom-up on the way back up.
"""

import logging
from dataclasses import dataclass
from enum import IntEnum

from llrb.interfaces.insert_only_tree import InsertOnlyTree

logger = logging.getLogger(__name__)


class Color(IntEnum):
    """Node color for Red-Black Tree."""

    RED = 0
    BLACK = 1


@dataclass
class Node:
    """Node in the Red-Black Tree. Owns its children exclusively."""

    value: int
    color: Color = Color.RED
    left: "Node | None" = None
    right: "Node | None" = None

    def __str__(self) -> str:
        return f"Node{{value={self.value}, color={self.color.name}}}"


def _is_red(node: Node | None) -> bool:
    return node is not None and node.color == Color.RED


class LeftLeaningRedBlackTree(InsertOnlyTree):
    """
    Left-leaning Red-Black Tree implementation of InsertOnlyTree.

    Properties maintained after every insert:
    1. Red links lean left (no red right child without a red left sibling)
    2. No red left child has a red left child
    3. No node keeps two red children
    4. Root is always black
    5. Values are unique and kept in binary-search-tree order

    Not safe for concurrent mutation; callers serialize insert().
    """

    def __init__(self) -> None:
        self._root: Node | None = None

    @property
    def root(self) -> Node | None:
        """Root node, for diagnostics."""
        return self._root

    def insert(self, value: int) -> bool:
        """Insert a value. O(log N)"""
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"value must be an int, got {type(value).__name__}")

        if self._root is None:
            self._root = Node(value=value, color=Color.BLACK)
            logger.debug(f"Created root {self._root}")
            return True

        result = self._insert_into(self._root, value)
        self._root = self._rebalance(self._root)
        self._root.color = Color.BLACK

        if not result:
            logger.debug(f"Rejected duplicate value {value}")
        return result

    def _insert_into(self, node: Node, value: int) -> bool:
        """Recursively insert below node, rebalancing the visited child."""
        if value == node.value:
            return False

        if value < node.value:
            if node.left is None:
                node.left = Node(value=value)
                return True

            result = self._insert_into(node.left, value)
            node.left = self._rebalance(node.left)
            return result

        # Anything neither less nor equal goes right
        if node.right is None:
            node.right = Node(value=value)
            return True

        result = self._insert_into(node.right, value)
        node.right = self._rebalance(node.right)
        return result

    def _rebalance(self, node: Node) -> Node:
        """
        Apply the three fixups until none fires in a full pass.

        Returns the node now occupying this position, which differs from
        the argument whenever a rotation fired.
        """
        result = node
        need_rebalance = True

        while need_rebalance:
            need_rebalance = False

            # Case 1: right-leaning red link
            if _is_red(result.right) and not _is_red(result.left):
                need_rebalance = True
                result = self._rotate_left(result)

            # Case 2: two red links in a row on the left
            if _is_red(result.left) and _is_red(result.left.left):
                need_rebalance = True
                result = self._rotate_right(result)

            # Case 3: both children red
            if _is_red(result.left) and _is_red(result.right):
                need_rebalance = True
                self._recolor(result)

        return result

    def _rotate_left(self, node: Node) -> Node:
        """Left rotation. Returns the former right child as the new local root."""
        right_child = node.right
        node.right = right_child.left
        right_child.left = node

        right_child.color = node.color
        node.color = Color.RED

        logger.debug(f"Rotated left around {node.value}")
        return right_child

    def _rotate_right(self, node: Node) -> Node:
        """Right rotation. Returns the former left child as the new local root."""
        left_child = node.left
        node.left = left_child.right
        left_child.right = node

        left_child.color = node.color
        node.color = Color.RED

        logger.debug(f"Rotated right around {node.value}")
        return left_child

    def _recolor(self, node: Node) -> None:
        """Push a red pair up: children become black, node becomes red."""
        node.left.color = Color.BLACK
        node.right.color = Color.BLACK
        node.color = Color.RED

        logger.debug(f"Recolored {node.value}")
