"""
Tests for the red-black invariant checker.
"""

import pytest

from llrb.models.exceptions import InvariantViolationError
from llrb.models.invariants import check
from llrb.models.sortedcontainers import Color, Node


def black(value, left=None, right=None):
    return Node(value=value, color=Color.BLACK, left=left, right=right)


def red(value, left=None, right=None):
    return Node(value=value, color=Color.RED, left=left, right=right)


class TestCheck:
    """Tests for invariants.check."""

    def test_empty(self):
        """Test an empty tree has black height 0."""
        assert check(None) == 0

    def test_single_black_root(self):
        """Test a lone black root has black height 1."""
        assert check(black(1)) == 1

    def test_red_leaning_left_is_valid(self):
        """Test a red left child does not add to black height."""
        assert check(black(20, left=red(10))) == 1

    def test_red_root(self):
        """Test a red root is reported."""
        with pytest.raises(InvariantViolationError, match="root must be black"):
            check(red(1))

    def test_order_violation_left(self):
        """Test a left descendant larger than an ancestor is reported."""
        root = black(20, left=black(10, right=black(25)), right=black(30, left=black(27)))

        with pytest.raises(InvariantViolationError) as excinfo:
            check(root)

        assert excinfo.value.value == 25
        assert "ancestor 20" in excinfo.value.reason

    def test_duplicate_value(self):
        """Test an equal value in a subtree is reported."""
        with pytest.raises(InvariantViolationError, match="ancestor 10"):
            check(black(10, left=red(10)))

    def test_right_leaning_red(self):
        """Test a lone red right child is reported."""
        with pytest.raises(InvariantViolationError, match="leans right"):
            check(black(10, right=red(20)))

    def test_red_left_chain(self):
        """Test two red links in a row are reported."""
        root = black(30, left=red(20, left=red(10)))

        with pytest.raises(InvariantViolationError, match="two red links"):
            check(root)

    def test_both_children_red(self):
        """Test a node with two red children is reported."""
        with pytest.raises(InvariantViolationError, match="both children are red"):
            check(black(20, left=red(10), right=red(30)))

    def test_black_height_mismatch(self):
        """Test unequal black heights are reported with both heights."""
        root = black(20, left=black(10), right=None)

        with pytest.raises(InvariantViolationError) as excinfo:
            check(root)

        assert excinfo.value.value == 20
        assert excinfo.value.reason == "black heights differ: left 1, right 0"

    def test_error_message(self):
        """Test the exception message names the node and reason."""
        error = InvariantViolationError(5, "root must be black")
        assert str(error) == "Invariant violated at node 5: root must be black"
