"""Circular doubly linked list of integers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator


@dataclass(eq=False)
class _Node:
    value: int
    left: _Node = field(init=False, repr=False)
    right: _Node = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.left = self
        self.right = self


class CircularDoublyLinkedList:
    """Circular doubly linked list; the node left of the head is the last one."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[_Node]:
        head = self._head
        if head is None:
            return
        node = head
        for _ in range(self._size):
            yield node
            node = node.right

    def _link_after(self, node: _Node, value: int) -> _Node:
        new = _Node(value)
        new.left = node
        new.right = node.right
        node.right.left = new
        node.right = new
        self._size += 1
        return new

    def _unlink(self, node: _Node) -> int:
        if self._size == 1:
            self._head = None
        else:
            node.left.right = node.right
            node.right.left = node.left
            if node is self._head:
                self._head = node.right
        self._size -= 1
        return node.value

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def prepend(self, value: int) -> None:
        """Insert ``value`` as the new head."""
        if self._head is None:
            self._head = _Node(value)
            self._size = 1
            return
        self._head = self._link_after(self._head.left, value)

    def append(self, value: int) -> None:
        """Insert ``value`` after the last node."""
        if self._head is None:
            self.prepend(value)
            return
        self._link_after(self._head.left, value)

    def insert_after_index(self, index: int, value: int) -> None:
        """Insert ``value`` after the node ``index`` steps right of the head.

        The walk goes round the ring, so an index past the end wraps.
        IndexError on an empty list or a negative index.
        """
        if self._head is None:
            raise IndexError("insert into an empty list")
        if index < 0:
            raise IndexError(f"index {index} out of range")
        node = self._head
        for _ in range(index % self._size):
            node = node.right
        self._link_after(node, value)

    def delete_first(self) -> int:
        """Remove and return the head's value; IndexError when empty."""
        if self._head is None:
            raise IndexError("delete from an empty list")
        return self._unlink(self._head)

    def delete_last(self) -> int:
        """Remove and return the last value; IndexError when empty."""
        if self._head is None:
            raise IndexError("delete from an empty list")
        return self._unlink(self._head.left)

    def remove(self, key: int) -> None:
        """Remove the first node holding ``key``; KeyError if there is none."""
        for node in self._nodes():
            if node.value == key:
                self._unlink(node)
                return
        raise KeyError(key)

    def format(self) -> str:
        """The values as ``NULL<->a<->b<->NULL``, or a note that the list is empty."""
        if self._head is None:
            return "Empty Linked List"
        return "NULL<->" + "".join(f"{value}<->" for value in self) + "NULL"