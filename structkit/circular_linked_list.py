"""Circular singly linked list of integers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator


@dataclass(eq=False)
class _Node:
    value: int
    next: _Node = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.next = self


class CircularLinkedList:
    """Circular singly linked list; the last node links back to the head."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    @property
    def _head(self) -> _Node | None:
        return None if self._tail is None else self._tail.next

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        if node is None:
            return
        for _ in range(self._size):
            following = node.next
            yield node
            node = following

    def _pairs(self) -> Iterator[tuple[_Node, _Node]]:
        """Each node together with its predecessor in the ring."""
        previous = self._tail
        for node in self._nodes():
            assert previous is not None
            yield previous, node
            previous = node

    def _relink(self, nodes: list[_Node]) -> None:
        """Make ``nodes`` the whole ring, in the given order."""
        if not nodes:
            self._tail = None
            self._size = 0
            return
        for current, following in zip(nodes, nodes[1:] + nodes[:1]):
            current.next = following
        self._tail = nodes[-1]
        self._size = len(nodes)

    def _insert_after(self, node: _Node | None, value: int) -> _Node:
        new = _Node(value)
        if node is None:
            self._tail = new
        else:
            new.next = node.next
            node.next = new
        self._size += 1
        return new

    def _remove_after(self, previous: _Node) -> int:
        node = previous.next
        if self._size == 1:
            self._tail = None
        else:
            previous.next = node.next
            if node is self._tail:
                self._tail = previous
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
        self._insert_after(self._tail, value)

    def append(self, value: int) -> None:
        """Insert ``value`` after the last node."""
        self._tail = self._insert_after(self._tail, value)

    def insert_after_index(self, index: int, value: int) -> None:
        """Insert ``value`` after the node at 0-based ``index``.

        An index past the end inserts after the last node. IndexError on an
        empty list or a negative index.
        """
        if self._tail is None:
            raise IndexError("insert into an empty list")
        if index < 0:
            raise IndexError(f"index {index} out of range")
        nodes = list(self._nodes())
        node = nodes[min(index, len(nodes) - 1)]
        new = self._insert_after(node, value)
        if node is self._tail:
            self._tail = new

    def delete_first(self) -> int:
        """Remove and return the head's value; IndexError when empty."""
        if self._tail is None:
            raise IndexError("delete from an empty list")
        return self._remove_after(self._tail)

    def delete_last(self) -> int:
        """Remove and return the last value; IndexError when empty."""
        if self._tail is None:
            raise IndexError("delete from an empty list")
        previous = self._tail
        for previous, node in self._pairs():
            if node is self._tail:
                break
        return self._remove_after(previous)

    def remove(self, key: int) -> None:
        """Remove the first node holding ``key``; KeyError if there is none."""
        for previous, node in self._pairs():
            if node.value == key:
                self._remove_after(previous)
                return
        raise KeyError(key)

    def delete_at(self, index: int) -> int:
        """Remove and return the value ``index`` steps round the ring from the head.

        The walk wraps, so an index past the end counts on from the head
        again. IndexError on an empty list or a negative index.
        """
        if self._tail is None:
            raise IndexError("delete from an empty list")
        if index < 0:
            raise IndexError(f"index {index} out of range")
        target = index % self._size
        for position, (previous, _node) in enumerate(self._pairs()):
            if position == target:
                return self._remove_after(previous)
        raise IndexError(f"index {index} out of range")

    def clear(self) -> None:
        """Remove every node."""
        self._tail = None
        self._size = 0

    def position(self, value: int) -> int:
        """1-based position of the first node holding ``value``; ValueError if absent."""
        for number, item in enumerate(self, start=1):
            if item == value:
                return number
        raise ValueError(f"{value!r} is not in the list")

    def reverse(self) -> None:
        """Reverse the ring in place; the old last node becomes the head."""
        self._relink(list(self._nodes())[::-1])

    def sort(self, descending: bool = False) -> None:
        """Order the values ascending, or descending when asked."""
        ordered = sorted(self, reverse=descending)
        for node, value in zip(self._nodes(), ordered):
            node.value = value

    def delete_even_positions(self) -> None:
        """Remove the nodes at 1-based positions 2, 4, 6, ..."""
        self._relink(list(self._nodes())[::2])

    def concat(self, other: Iterable[int]) -> None:
        """Append copies of the values of ``other``; ``other`` is left as it was."""
        for value in list(other):
            self.append(value)

    def key_counts(self) -> dict[int, int]:
        """How often each value occurs, in order of first appearance."""
        counts: dict[int, int] = {}
        for value in self:
            counts[value] = counts.get(value, 0) + 1
        return counts

    def remove_duplicates(self) -> None:
        """Keep only the first occurrence of each value, order unchanged."""
        seen: set[int] = set()
        kept: list[_Node] = []
        for node in self._nodes():
            if node.value not in seen:
                seen.add(node.value)
                kept.append(node)
        self._relink(kept)

    def remove_duplicates_sorted(self) -> None:
        """Sort ascending, then drop repeated neighbours."""
        self.sort()
        kept: list[_Node] = []
        for node in self._nodes():
            if not kept or kept[-1].value != node.value:
                kept.append(node)
        self._relink(kept)