"""Right-threaded binary search tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass(eq=False)
class ThreadedNode:
    """Node whose ``right`` is a thread to the inorder successor when ``rthread``."""

    key: int
    left: ThreadedNode | None = field(default=None, repr=False)
    right: ThreadedNode | None = field(default=None, repr=False)
    rthread: bool = True


class ThreadedTree:
    """Binary search tree with right threads; equal keys go to the right."""

    def __init__(self) -> None:
        self.root: ThreadedNode | None = None

    def insert(self, key: int) -> ThreadedNode:
        """Insert ``key`` and return its new node."""
        node = ThreadedNode(key)
        if self.root is None:
            self.root = node
            return node

        current: ThreadedNode | None = self.root
        parent = self.root
        while current is not None:
            parent = current
            if key < current.key:
                current = current.left
            else:
                current = None if current.rthread else current.right

        if key < parent.key:
            parent.left = node
            node.right = parent
        else:
            node.right = parent.right
            parent.right = node
            parent.rthread = False
        return node

    def __iter__(self) -> Iterator[int]:
        current = self.root
        while True:
            last: ThreadedNode | None = None
            while current is not None:
                last = current
                current = current.left
            if last is None:
                return
            yield last.key
            current = last.right
            while last.rthread and current is not None:
                yield current.key
                last = current
                current = current.right

    def inorder(self) -> list[int]:
        """Keys in ascending order, walked through the threads."""
        return list(self)