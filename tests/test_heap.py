import pytest

from structkit.heap import MaxPriorityQueue, build_heap, heap_sort

VALUES = [15, 3, 42, 8, 23, 4, 16, 42, 1]


def is_max_heap(items):
    return all(items[(i - 1) // 2] >= items[i] for i in range(1, len(items)))


@pytest.fixture
def filled():
    queue = MaxPriorityQueue()
    for value in VALUES:
        queue.enqueue(value)
    return queue


def test_dequeue_returns_values_largest_first(filled):
    drained = [filled.dequeue() for _ in VALUES]
    assert drained == sorted(VALUES, reverse=True)
    assert len(filled) == 0


def test_every_enqueue_keeps_heap_order():
    queue = MaxPriorityQueue()
    for count, value in enumerate(VALUES, start=1):
        queue.enqueue(value)
        assert is_max_heap(list(queue))
        assert len(queue) == count


def test_dequeue_keeps_heap_order(filled):
    filled.dequeue()
    assert is_max_heap(list(filled))
    assert len(filled) == len(VALUES) - 1


def test_dequeue_empty_raises():
    with pytest.raises(IndexError):
        MaxPriorityQueue().dequeue()


def test_full_queue_raises():
    queue = MaxPriorityQueue()
    for value in range(MaxPriorityQueue.CAPACITY):
        queue.enqueue(value)
    with pytest.raises(OverflowError):
        queue.enqueue(100)
    assert len(queue) == MaxPriorityQueue.CAPACITY


def test_build_heap_small_example():
    assert build_heap([1, 2, 3]) == [3, 1, 2]


def test_build_heap_is_permutation_and_heap_and_leaves_input():
    values = list(VALUES)
    heap = build_heap(values)
    assert sorted(heap) == sorted(VALUES)
    assert is_max_heap(heap)
    assert values == VALUES


@pytest.mark.parametrize(
    "values", [[], [7], [2, 1], VALUES, [5, 5, 5, 1, 9], list(range(20, 0, -1))]
)
def test_heap_sort_sorts_ascending(values):
    assert heap_sort(values) == sorted(values)