from collections import Counter

import pytest

from structkit.linked_list import LinkedList

VALUES = [5, 3, 8, 3, 1, 8, 8, 2]


def contents(ll):
    return list(ll), len(ll)


def expect(values):
    return list(values), len(values)


@pytest.fixture
def full():
    return LinkedList(VALUES)


@pytest.mark.parametrize("values", [VALUES, []])
def test_construction_keeps_order(values):
    assert contents(LinkedList(values)) == expect(values)


def test_prepend_and_append():
    ll = LinkedList([2])
    ll.prepend(1)
    ll.append(3)
    assert contents(ll) == expect([1, 2, 3])


def test_append_to_empty():
    ll = LinkedList()
    ll.append(4)
    assert contents(ll) == expect([4])


def test_insert_after_index():
    ll = LinkedList([1, 2, 3])
    ll.insert_after_index(0, 9)
    ll.insert_after_index(3, 7)
    assert contents(ll) == expect([1, 9, 2, 3, 7])


@pytest.mark.parametrize(
    "values, index", [([1, 2, 3], -1), ([1, 2, 3], 3), ([1, 2, 3], 10), ([], 0)]
)
def test_insert_after_index_out_of_range(values, index):
    ll = LinkedList(values)
    with pytest.raises(IndexError):
        ll.insert_after_index(index, 9)
    assert contents(ll) == expect(values)


def test_replace_key_middle_and_head():
    ll = LinkedList([1, 2, 3])
    ll.replace_key(2, 7)
    ll.replace_key(1, 6)
    assert contents(ll) == expect([6, 7, 3])


@pytest.mark.parametrize("values", [[1, 2], []])
def test_replace_key_missing(values):
    with pytest.raises(KeyError):
        LinkedList(values).replace_key(5, 0)


def test_delete_first_and_last():
    ll = LinkedList([1, 2, 3])
    assert [ll.delete_first(), ll.delete_last(), ll.delete_last()] == [1, 3, 2]
    assert contents(ll) == expect([])


@pytest.mark.parametrize("method", ["delete_first", "delete_last"])
def test_delete_from_empty(method):
    with pytest.raises(IndexError):
        getattr(LinkedList(), method)()


@pytest.mark.parametrize(
    "values, key, expected",
    [(VALUES, 8, [5, 3, 3, 1, 8, 8, 2]), ([4, 5], 4, [5])],
)
def test_remove_first_occurrence(values, key, expected):
    ll = LinkedList(values)
    ll.remove(key)
    assert contents(ll) == expect(expected)


def test_remove_missing():
    with pytest.raises(KeyError):
        LinkedList([1, 2]).remove(3)


@pytest.mark.parametrize("index", range(len(VALUES)))
def test_delete_at(full, index):
    assert full.delete_at(index) == VALUES[index]
    assert contents(full) == expect(VALUES[:index] + VALUES[index + 1:])


@pytest.mark.parametrize("index", [-1, len(VALUES)])
def test_delete_at_out_of_range(full, index):
    with pytest.raises(IndexError):
        full.delete_at(index)


def test_clear(full):
    full.clear()
    assert contents(full) == expect([])


def test_position_is_one_based(full):
    assert [full.position(v) for v in VALUES] == [VALUES.index(v) + 1 for v in VALUES]


@pytest.mark.parametrize("values", [VALUES, []])
def test_position_missing(values):
    with pytest.raises(ValueError):
        LinkedList(values).position(42)


def test_reverse(full):
    full.reverse()
    assert list(full) == VALUES[::-1]
    full.reverse()
    assert list(full) == VALUES


@pytest.mark.parametrize("descending", [False, True])
def test_sort(full, descending):
    full.sort(descending=descending)
    assert list(full) == sorted(VALUES, reverse=descending)


@pytest.mark.parametrize("size", range(6))
def test_delete_even_positions(size):
    values = list(range(10, 10 + size))
    ll = LinkedList(values)
    ll.delete_even_positions()
    assert contents(ll) == expect(values[::2])


@pytest.mark.parametrize("first, second", [([1, 2], [3, 4]), ([], [7, 8])])
def test_concat_leaves_other_unchanged(first, second):
    head = LinkedList(first)
    tail = LinkedList(second)
    head.concat(tail)
    assert contents(head) == expect(first + second)
    assert list(tail) == second


def test_key_counts_in_first_appearance_order(full):
    assert list(full.key_counts().items()) == list(Counter(VALUES).items())


@pytest.mark.parametrize(
    "method, expected",
    [
        ("remove_duplicates", list(dict.fromkeys(VALUES))),
        ("remove_duplicates_sorted", sorted(set(VALUES))),
    ],
)
def test_remove_duplicates(full, method, expected):
    getattr(full, method)()
    assert contents(full) == expect(expected)