"""Binary trees built from level-order arrays, with a few classic queries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

EMPTY = -1
"""Marker in a level-order array for a missing node."""


@dataclass(eq=False)
class TreeNode:
    """A node of a plain binary tree."""

    value: int
    left: TreeNode | None = field(default=None, repr=False)
    right: TreeNode | None = field(default=None, repr=False)


def tree_from_level_order(values: Iterable[int]) -> TreeNode | None:
    """Build a tree whose node ``i`` has children ``2i+1`` and ``2i+2``.

    An entry equal to ``EMPTY`` stands for no node; whatever lies below it
    in the array is left out of the tree.
    """
    items = list(values)

    def build(index: int) -> TreeNode | None:
        if index >= len(items) or items[index] == EMPTY:
            return None
        node = TreeNode(items[index])
        node.left = build(2 * index + 1)
        node.right = build(2 * index + 2)
        return node

    return build(0)


def count_leaves(root: TreeNode | None) -> int:
    """Number of nodes with no children."""
    if root is None:
        return 0
    if root.left is None and root.right is None:
        return 1
    return count_leaves(root.left) + count_leaves(root.right)


def lowest_common_ancestor(
    root: TreeNode | None, first: int, second: int
) -> TreeNode | None:
    """Deepest node having nodes valued ``first`` and ``second`` below or at it.

    A node holding either value is returned as soon as it is met, so if only
    one of the values is present its node is the answer; None if neither is.
    """
    if root is None:
        return None
    if root.value in (first, second):
        return root
    left = lowest_common_ancestor(root.left, first, second)
    right = lowest_common_ancestor(root.right, first, second)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def height(node: TreeNode | None) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if node is None:
        return 0
    return 1 + max(height(node.left), height(node.right))


def diameter(root: TreeNode | None) -> int:
    """Number of nodes on the longest path between any two nodes."""

    def measure(node: TreeNode | None) -> tuple[int, int]:
        if node is None:
            return 0, 0
        left_height, left_diameter = measure(node.left)
        right_height, right_diameter = measure(node.right)
        through = left_height + right_height + 1
        return (
            1 + max(left_height, right_height),
            max(through, left_diameter, right_diameter),
        )

    return measure(root)[1]