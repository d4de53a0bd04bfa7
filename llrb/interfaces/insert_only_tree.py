"""
InsertOnlyTree abstract base class for balanced trees that only grow.
"""

from abc import ABC, abstractmethod


class InsertOnlyTree(ABC):
    """
    Abstract base class for insert-only balanced search trees.

    Implementations:
    - LeftLeaningRedBlackTree: 3-rule left-leaning red-black balancing
    """

    @abstractmethod
    def insert(self, value: int) -> bool:
        """
        Insert a value, rejecting duplicates.

        Args:
            value: The integer to insert.

        Returns:
            True if the value was newly inserted, False if it was already present.

        Time complexity: O(log N)
        """
        pass
