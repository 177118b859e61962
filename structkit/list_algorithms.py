"""Small algorithms over sequences: splitting, polynomial sums, Josephus."""

from __future__ import annotations

from typing import Iterable, Sequence

Term = tuple[int, int]
"""A polynomial term as ``(coefficient, exponent)``."""


def split_at_midpoint(values: Iterable[int]) -> tuple[list[int], list[int]]:
    """Split into two halves; the first gets the middle element when the count is odd."""
    items = list(values)
    middle = (len(items) + 1) // 2
    return items[:middle], items[middle:]


def add_polynomials(first: Sequence[Term], second: Sequence[Term]) -> list[Term]:
    """Sum of two polynomials whose terms are ordered by descending exponent.

    Terms with equal exponents are added; zero sums are kept.
    """
    result: list[Term] = []
    i = j = 0
    while i < len(first) and j < len(second):
        (c1, e1), (c2, e2) = first[i], second[j]
        if e1 > e2:
            result.append((c1, e1))
            i += 1
        elif e1 < e2:
            result.append((c2, e2))
            j += 1
        else:
            result.append((c1 + c2, e1))
            i += 1
            j += 1
    result.extend(first[i:])
    result.extend(second[j:])
    return result


def josephus(count: int, step: int) -> int:
    """1-based position of the survivor when every ``step``-th of ``count`` people leaves."""
    if count < 1:
        raise ValueError("count must be at least 1")
    if step < 1:
        raise ValueError("step must be at least 1")
    people = list(range(1, count + 1))
    current = 0
    while len(people) > 1:
        current = (current + step - 1) % len(people)
        del people[current]
        current %= len(people)
    return people[0]