"""Binary search tree of integer keys."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass
class BSTNode:
    key: int
    left: BSTNode | None = None
    right: BSTNode | None = None


class BinarySearchTree:
    """Unbalanced binary search tree; equal keys go to the right."""

    def __init__(self) -> None:
        self.root: BSTNode | None = None

    def insert(self, key: int) -> None:
        """Insert ``key`` by walking down from the root."""
        node = BSTNode(key)
        if self.root is None:
            self.root = node
            return
        current = self.root
        while True:
            if current.key > key:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def insert_recursive(self, key: int) -> None:
        """Insert ``key`` with a recursive descent."""

        def descend(node: BSTNode | None) -> BSTNode:
            if node is None:
                return BSTNode(key)
            if node.key > key:
                node.left = descend(node.left)
            else:
                node.right = descend(node.right)
            return node

        self.root = descend(self.root)

    @staticmethod
    def _inorder(node: BSTNode | None) -> Iterator[int]:
        if node is not None:
            yield from BinarySearchTree._inorder(node.left)
            yield node.key
            yield from BinarySearchTree._inorder(node.right)

    @staticmethod
    def _preorder(node: BSTNode | None) -> Iterator[int]:
        if node is not None:
            yield node.key
            yield from BinarySearchTree._preorder(node.left)
            yield from BinarySearchTree._preorder(node.right)

    @staticmethod
    def _postorder(node: BSTNode | None) -> Iterator[int]:
        if node is not None:
            yield from BinarySearchTree._postorder(node.left)
            yield from BinarySearchTree._postorder(node.right)
            yield node.key

    def inorder(self) -> list[int]:
        return list(self._inorder(self.root))

    def preorder(self) -> list[int]:
        return list(self._preorder(self.root))

    def postorder(self) -> list[int]:
        return list(self._postorder(self.root))

    def __contains__(self, key: object) -> bool:
        node = self.root
        while node is not None:
            if node.key == key:
                return True
            node = node.left if node.key > key else node.right
        return False

    def __len__(self) -> int:
        return sum(1 for _ in self._inorder(self.root))

    def maximum(self) -> int:
        """Largest key; ValueError on an empty tree."""
        if self.root is None:
            raise ValueError("maximum of an empty tree")
        node = self.root
        while node.right is not None:
            node = node.right
        return node.key

    def minimum(self) -> int:
        """Smallest key; ValueError on an empty tree."""
        if self.root is None:
            raise ValueError("minimum of an empty tree")
        node = self.root
        while node.left is not None:
            node = node.left
        return node.key

    def delete(self, key: int) -> None:
        """Remove one node holding ``key``; KeyError if there is none."""
        parent: BSTNode | None = None
        current = self.root
        while current is not None and current.key != key:
            parent = current
            current = current.left if key < current.key else current.right
        if current is None:
            raise KeyError(key)

        if current.left is None or current.right is None:
            child = current.right if current.left is None else current.left
            if parent is None:
                self.root = child
            elif current is parent.left:
                parent.left = child
            else:
                parent.right = child
            return

        successor_parent: BSTNode | None = None
        successor = current.right
        while successor.left is not None:
            successor_parent = successor
            successor = successor.left
        current.key = successor.key
        if successor_parent is not None:
            successor_parent.left = successor.right
        else:
            current.right = successor.right