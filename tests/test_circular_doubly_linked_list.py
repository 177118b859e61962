import pytest

from structkit.circular_doubly_linked_list import CircularDoublyLinkedList


def test_init_and_iteration():
    values = [4, 7, 1]
    c = CircularDoublyLinkedList(values)
    assert list(c) == values
    assert len(c) == len(values)


def test_empty_list():
    c = CircularDoublyLinkedList()
    assert list(c) == []
    assert len(c) == 0
    assert c.format() == "Empty Linked List"


def test_format():
    c = CircularDoublyLinkedList([1, 2])
    assert c.format() == "NULL<->1<->2<->NULL"


def test_prepend_and_append():
    c = CircularDoublyLinkedList()
    c.append(2)
    c.prepend(1)
    c.append(3)
    assert list(c) == [1, 2, 3]


def test_prepend_on_empty():
    c = CircularDoublyLinkedList()
    c.prepend(9)
    assert list(c) == [9]
    assert c.delete_last() == 9
    assert len(c) == 0


def test_insert_after_index():
    c = CircularDoublyLinkedList([1, 2, 4])
    c.insert_after_index(1, 3)
    assert list(c) == [1, 2, 3, 4]


def test_insert_after_index_wraps_round():
    c = CircularDoublyLinkedList([1, 2, 3])
    c.insert_after_index(3, 9)
    assert list(c) == [1, 9, 2, 3]


def test_insert_after_index_errors():
    with pytest.raises(IndexError):
        CircularDoublyLinkedList().insert_after_index(0, 1)
    with pytest.raises(IndexError):
        CircularDoublyLinkedList([1]).insert_after_index(-1, 2)


def test_delete_first_and_last():
    c = CircularDoublyLinkedList([1, 2, 3])
    assert c.delete_first() == 1
    assert list(c) == [2, 3]
    assert c.delete_last() == 3
    assert list(c) == [2]
    assert c.delete_first() == 2
    assert len(c) == 0
    with pytest.raises(IndexError):
        c.delete_first()
    with pytest.raises(IndexError):
        c.delete_last()


def test_remove_head_moves_head():
    c = CircularDoublyLinkedList([1, 2, 3])
    c.remove(1)
    assert list(c) == [2, 3]
    c.append(4)
    assert list(c) == [2, 3, 4]


def test_remove_middle_and_missing():
    c = CircularDoublyLinkedList([1, 2, 3, 2])
    c.remove(2)
    assert list(c) == [1, 3, 2]
    with pytest.raises(KeyError):
        c.remove(42)
    assert len(c) == 3


def test_append_then_delete_last_round_trip():
    values = [6, 5, 4]
    c = CircularDoublyLinkedList(values)
    c.append(10)
    assert c.delete_last() == 10
    assert list(c) == values