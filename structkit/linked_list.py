"""Singly linked list of integers."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import islice
from typing import Iterable, Iterator


@dataclass(eq=False)
class _Node:
    value: int
    next: _Node | None = field(default=None, repr=False)


class LinkedList:
    """Singly linked list with positional and key-based editing."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: _Node | None = None
        self._size = 0
        self._extend(values)

    def _extend(self, values: Iterable[int]) -> None:
        items = list(values)
        tail = self._head
        if tail is not None:
            while tail.next is not None:
                tail = tail.next
        for value in items:
            node = _Node(value)
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node
            self._size += 1

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            following = node.next
            yield node
            node = following

    def _node_at(self, index: int) -> _Node:
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range")
        return next(islice(self._nodes(), index, None))

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def prepend(self, value: int) -> None:
        """Insert ``value`` at the front."""
        self._head = _Node(value, self._head)
        self._size += 1

    def append(self, value: int) -> None:
        """Insert ``value`` at the end."""
        self._extend([value])

    def insert_after_index(self, index: int, value: int) -> None:
        """Insert ``value`` after the node at 0-based ``index``; IndexError if out of range."""
        node = self._node_at(index)
        node.next = _Node(value, node.next)
        self._size += 1

    def replace_key(self, key: int, value: int) -> None:
        """Put a new node holding ``value`` in place of the first node holding ``key``."""
        previous: _Node | None = None
        for node in self._nodes():
            if node.value == key:
                replacement = _Node(value, node.next)
                if previous is None:
                    self._head = replacement
                else:
                    previous.next = replacement
                return
            previous = node
        raise KeyError(key)

    def delete_first(self) -> int:
        """Remove and return the first value; IndexError when empty."""
        if self._head is None:
            raise IndexError("delete from an empty list")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.value

    def delete_last(self) -> int:
        """Remove and return the last value; IndexError when empty."""
        return self.delete_at(self._size - 1)

    def remove(self, key: int) -> None:
        """Remove the first node holding ``key``; KeyError if there is none."""
        previous: _Node | None = None
        for node in self._nodes():
            if node.value == key:
                if previous is None:
                    self._head = node.next
                else:
                    previous.next = node.next
                self._size -= 1
                return
            previous = node
        raise KeyError(key)

    def delete_at(self, index: int) -> int:
        """Remove and return the value at 0-based ``index``; IndexError if out of range."""
        if self._head is None:
            raise IndexError("delete from an empty list")
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range")
        if index == 0:
            return self.delete_first()
        previous = self._node_at(index - 1)
        node = previous.next
        assert node is not None
        previous.next = node.next
        self._size -= 1
        return node.value

    def clear(self) -> None:
        """Remove every node."""
        self._head = None
        self._size = 0

    def position(self, value: int) -> int:
        """1-based position of the first node holding ``value``; ValueError if absent."""
        for number, item in enumerate(self, start=1):
            if item == value:
                return number
        raise ValueError(f"{value!r} is not in the list")

    def reverse(self) -> None:
        """Reverse the list in place by relinking its nodes."""
        previous: _Node | None = None
        for node in self._nodes():
            node.next = previous
            previous = node
        self._head = previous

    def sort(self, descending: bool = False) -> None:
        """Order the values ascending, or descending when asked."""
        ordered = sorted(self, reverse=descending)
        for node, value in zip(self._nodes(), ordered):
            node.value = value

    def delete_even_positions(self) -> None:
        """Remove the nodes at 1-based positions 2, 4, 6, ..."""
        node = self._head
        while node is not None and node.next is not None:
            node.next = node.next.next
            node = node.next
        self._size = (self._size + 1) // 2

    def concat(self, other: Iterable[int]) -> None:
        """Append copies of the values of ``other``; ``other`` is left as it was."""
        self._extend(other)

    def key_counts(self) -> dict[int, int]:
        """How often each value occurs, in order of first appearance."""
        counts: dict[int, int] = {}
        for value in self:
            counts[value] = counts.get(value, 0) + 1
        return counts

    def remove_duplicates(self) -> None:
        """Keep only the first occurrence of each value, order unchanged."""
        seen: set[int] = set()
        previous: _Node | None = None
        for node in self._nodes():
            if node.value in seen:
                assert previous is not None
                previous.next = node.next
                self._size -= 1
            else:
                seen.add(node.value)
                previous = node

    def remove_duplicates_sorted(self) -> None:
        """Sort ascending, then drop repeated neighbours."""
        self.sort()
        node = self._head
        while node is not None and node.next is not None:
            if node.value == node.next.value:
                node.next = node.next.next
                self._size -= 1
            else:
                node = node.next