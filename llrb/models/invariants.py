"""
Invariant checks for left-leaning Red-Black Trees.

Used by the command-line entry point and the test suite to verify a tree
after insertions. Not part of the insert path.
"""

from llrb.models.exceptions import InvariantViolationError
from llrb.models.sortedcontainers.red_black_tree import Color, Node


def check(root: Node | None) -> int:
    """
    Verify every red-black invariant of the tree rooted at root.

    Args:
        root: Root node of the tree, or None for an empty tree.

    Returns:
        Black height of the tree (0 when empty).

    Raises:
        InvariantViolationError: On the first broken invariant found.
    """
    if root is None:
        return 0

    if root.color != Color.BLACK:
        raise InvariantViolationError(root.value, "root must be black")

    return _check_node(root, None, None)


def _is_red(node: Node | None) -> bool:
    return node is not None and node.color == Color.RED


def _check_node(node: Node | None, low: int | None, high: int | None) -> int:
    """Check the subtree below node, with values bounded by (low, high)."""
    if node is None:
        return 0

    if low is not None and node.value <= low:
        raise InvariantViolationError(node.value, f"not greater than ancestor {low}")
    if high is not None and node.value >= high:
        raise InvariantViolationError(node.value, f"not less than ancestor {high}")

    if _is_red(node.right) and not _is_red(node.left):
        raise InvariantViolationError(node.value, "red link leans right")
    if _is_red(node.left) and _is_red(node.left.left):
        raise InvariantViolationError(node.value, "two red links in a row on the left")
    if _is_red(node.left) and _is_red(node.right):
        raise InvariantViolationError(node.value, "both children are red")

    left_height = _check_node(node.left, low, node.value)
    right_height = _check_node(node.right, node.value, high)

    if left_height != right_height:
        raise InvariantViolationError(
            node.value,
            f"black heights differ: left {left_height}, right {right_height}",
        )

    if node.color == Color.BLACK:
        return left_height + 1
    return left_height
