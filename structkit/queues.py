"""Array-backed queues, priority queues, and a queue made of two stacks."""

from __future__ import annotations

from bisect import bisect_left
from operator import itemgetter
from typing import Iterator

_priority_of = itemgetter(0)


class ArrayQueue:
    """Linear FIFO queue over a fixed run of ``CAPACITY`` slots.

    A slot is used once: dequeuing does not free room, so the queue is
    full after ``CAPACITY`` enqueues in all, whatever was dequeued since.
    """

    CAPACITY = 15

    def __init__(self) -> None:
        self._slots: list[int] = []
        self._front = 0

    def enqueue(self, value: int) -> None:
        """Add ``value`` at the rear; OverflowError when every slot is used."""
        if self.is_full():
            raise OverflowError("queue is full")
        self._slots.append(value)

    def dequeue(self) -> int:
        """Remove and return the front value; IndexError when empty."""
        if not self:
            raise IndexError("dequeue from an empty queue")
        value = self._slots[self._front]
        self._front += 1
        return value

    def rear(self) -> int:
        """The value most recently enqueued; IndexError when empty."""
        if not self:
            raise IndexError("rear of an empty queue")
        return self._slots[-1]

    def is_full(self) -> bool:
        """Whether every slot has been used."""
        return len(self._slots) >= self.CAPACITY

    def __len__(self) -> int:
        return len(self._slots) - self._front

    def __iter__(self) -> Iterator[int]:
        """Values from front to rear."""
        return iter(self._slots[self._front:])


class ArrayPriorityQueue:
    """Priority queue over a fixed run of ``CAPACITY`` slots.

    Values leave in ascending order of priority; a value enqueued with a
    priority equal to waiting ones leaves before them. As in
    :class:`ArrayQueue`, dequeued slots are not reused.
    """

    CAPACITY = 15

    def __init__(self) -> None:
        self._entries: list[tuple[int, int]] = []
        self._front = 0

    def enqueue(self, value: int, priority: int) -> None:
        """Add ``value`` with ``priority``; OverflowError when every slot is used."""
        if self.is_full():
            raise OverflowError("priority queue is full")
        position = bisect_left(
            self._entries, priority, lo=self._front, key=_priority_of
        )
        self._entries.insert(position, (priority, value))

    def dequeue(self) -> int:
        """Remove and return the value of lowest priority; IndexError when empty."""
        if not self:
            raise IndexError("dequeue from an empty priority queue")
        value = self._entries[self._front][1]
        self._front += 1
        return value

    def front(self) -> int:
        """The value that would be dequeued next; IndexError when empty."""
        if not self:
            raise IndexError("front of an empty priority queue")
        return self._entries[self._front][1]

    def is_full(self) -> bool:
        """Whether every slot has been used."""
        return len(self._entries) >= self.CAPACITY

    def __len__(self) -> int:
        return len(self._entries) - self._front

    def __iter__(self) -> Iterator[int]:
        """Values in the order they would be dequeued."""
        return (value for _, value in self._entries[self._front:])


class LinkedPriorityQueue:
    """Unbounded priority queue; lowest priority first, newest first among ties."""

    def __init__(self) -> None:
        self._entries: list[tuple[int, int]] = []

    def enqueue(self, value: int, priority: int) -> None:
        """Add ``value`` with ``priority``."""
        position = bisect_left(self._entries, priority, key=_priority_of)
        self._entries.insert(position, (priority, value))

    def dequeue(self) -> int:
        """Remove and return the value of lowest priority; IndexError when empty."""
        if not self._entries:
            raise IndexError("dequeue from an empty priority queue")
        return self._entries.pop(0)[1]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[int]:
        """Values in the order they would be dequeued."""
        return (value for _, value in list(self._entries))


class TwoStackQueue:
    """FIFO queue built from an inbox stack and an outbox stack."""

    def __init__(self) -> None:
        self._inbox: list[int] = []
        self._outbox: list[int] = []

    def enqueue(self, value: int) -> None:
        """Push ``value`` onto the inbox."""
        self._inbox.append(value)

    def dequeue(self) -> int:
        """Remove and return the oldest value; IndexError when empty.

        When the outbox is empty the whole inbox is moved over first.
        """
        if not self._outbox:
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        if not self._outbox:
            raise IndexError("dequeue from an empty queue")
        return self._outbox.pop()

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)