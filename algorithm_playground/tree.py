"""
Binary search tree node.

A node owns its two optional subtrees through the public `left` and `right`
slots. Children may be attached directly, in which case keeping smaller
values on the left is up to the caller, or through `insert`, which keeps the
ordering. No balancing is performed: lookups cost O(height).

All walks use loops or explicit stacks, so degenerate (list-shaped) trees do
not hit the recursion limit.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, Optional

from algorithm_playground.ordering import OrderedT


@dataclass(eq=False)
class TreeNode(Generic[OrderedT]):
    """
    Binary search tree node. A new node is a leaf.

    Example:
        >>> root = TreeNode(5)
        >>> root.left = TreeNode(3)
        >>> root.right = TreeNode(7)
        >>> root.contains(3), root.contains(4)
        (True, False)
    """

    value: OrderedT
    left: Optional["TreeNode[OrderedT]"] = None
    right: Optional["TreeNode[OrderedT]"] = None

    @classmethod
    def from_values(cls, values: Iterable[OrderedT]) -> "TreeNode[OrderedT]":
        """
        Builds a tree by inserting values in order; the first one is the root.

        Raises:
            ValueError: If values is empty.
        """
        iterator = iter(values)
        try:
            root = cls(next(iterator))
        except StopIteration:
            raise ValueError("Cannot build a tree from no values") from None
        for value in iterator:
            root.insert(value)
        return root

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def contains(self, target: OrderedT) -> bool:
        """
        Returns True if target is found on its search path from this node.

        Goes left when target is smaller than the current value, right when it
        is greater, and stops at the first missing child.
        """
        node: TreeNode[OrderedT] | None = self
        while node is not None:
            if target == node.value:
                return True
            node = node.left if target < node.value else node.right
        return False

    def insert(self, value: OrderedT) -> "TreeNode[OrderedT]":
        """
        Attaches value as a new leaf at the end of its search path.

        Values already present are not duplicated. Returns the node holding
        value.
        """
        node = self
        while True:
            if value == node.value:
                return node
            if value < node.value:
                if node.left is None:
                    node.left = type(self)(value)
                    return node.left
                node = node.left
            else:
                if node.right is None:
                    node.right = type(self)(value)
                    return node.right
                node = node.right

    def __iter__(self) -> Iterator[OrderedT]:
        """In-order traversal: ascending for trees that respect the ordering."""
        stack: list[TreeNode[OrderedT]] = []
        node: TreeNode[OrderedT] | None = self
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def height(self) -> int:
        """Number of nodes on the longest path from this node down to a leaf."""
        height = 0
        stack: list[tuple[TreeNode[OrderedT], int]] = [(self, 1)]
        while stack:
            node, depth = stack.pop()
            height = max(height, depth)
            for child in (node.left, node.right):
                if child is not None:
                    stack.append((child, depth + 1))
        return height
