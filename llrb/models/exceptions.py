"""
Custom exceptions for the tree diagnostics.
"""


class InvariantViolationError(Exception):
    """
    Raised when a red-black tree fails an invariant check.

    Only diagnostics raise this; insert() never does.
    """

    def __init__(self, value: int, reason: str):
        """
        Initialize violation error.

        Args:
            value: Value of the node where the violation was found.
            reason: Human-readable description of the broken invariant.
        """
        self.value = value
        self.reason = reason
        super().__init__(f"Invariant violated at node {value}: {reason}")
