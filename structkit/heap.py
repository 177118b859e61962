"""Array max-heap: a bounded priority queue and heap sort."""

from __future__ import annotations

from typing import Iterable, Iterator


def _sift_up(items: list[int], index: int, value: int) -> None:
    child = index
    while child > 0:
        parent = (child - 1) // 2
        if not items[parent] < value:
            break
        items[child] = items[parent]
        child = parent
    items[child] = value


def _sift_down(items: list[int], size: int, value: int) -> None:
    """Place ``value`` at the root of ``items[:size]`` and push it down."""
    parent = 0
    child = 1
    while child < size:
        if child + 1 < size and items[child + 1] > items[child]:
            child += 1
        if not value < items[child]:
            break
        items[parent] = items[child]
        parent = child
        child = 2 * parent + 1
    items[parent] = value


class MaxPriorityQueue:
    """Max-heap priority queue holding at most ``CAPACITY`` values."""

    CAPACITY = 49

    def __init__(self) -> None:
        self._items: list[int] = []

    def enqueue(self, value: int) -> None:
        """Add ``value``; OverflowError when the queue is full."""
        if len(self._items) >= self.CAPACITY:
            raise OverflowError("priority queue is full")
        self._items.append(value)
        _sift_up(self._items, len(self._items) - 1, value)

    def dequeue(self) -> int:
        """Remove and return the largest value; IndexError when empty."""
        if not self._items:
            raise IndexError("dequeue from an empty priority queue")
        top = self._items[0]
        last = self._items.pop()
        if self._items:
            _sift_down(self._items, len(self._items), last)
        return top

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Values in heap-array order."""
        return iter(list(self._items))


def build_heap(values: Iterable[int]) -> list[int]:
    """Max-heap of ``values`` built by inserting them one at a time."""
    items = list(values)
    for index in range(1, len(items)):
        _sift_up(items, index, items[index])
    return items


def heap_sort(values: Iterable[int]) -> list[int]:
    """``values`` in ascending order, sorted through a max-heap."""
    items = build_heap(values)
    for end in range(len(items) - 1, 0, -1):
        value = items[end]
        items[end] = items[0]
        _sift_down(items, end, value)
    return items