# boundary_search.py
# Binary searches for the first/last element of an equivalence class in a
# sorted sequence. "Equal" is whatever the comparator says it is, e.g.
# PrefixOrder(r) treats every word sharing the first r characters as equal,
# so the pair of searches brackets all the words under a prefix.
# Each search makes at most 1 + ceil(log2 n) comparator calls.

from __future__ import annotations

from typing import Sequence, TypeVar, Callable

T = TypeVar("T")

NOT_FOUND = -1


def first_index_of(seq: Sequence[T], key: T, comparator: Callable[[T, T], int]) -> int:
    """
    Return the smallest i with comparator(seq[i], key) == 0, or NOT_FOUND.

    Invariant: everything at or before `low` compares less than key, and
    the answer (if any) is at or before `high`.
    """
    n = len(seq)
    if n == 0:
        return NOT_FOUND

    low, high = -1, n - 1
    while high - low > 1:
        mid = (low + high) // 2
        if comparator(seq[mid], key) < 0:
            low = mid
        else:
            high = mid

    if comparator(seq[high], key) == 0:
        return high
    return NOT_FOUND


def last_index_of(seq: Sequence[T], key: T, comparator: Callable[[T, T], int]) -> int:
    """
    Return the largest i with comparator(seq[i], key) == 0, or NOT_FOUND.

    Mirror image of first_index_of: everything at or after `high` compares
    greater than key, and the answer (if any) is at or after `low`.
    """
    n = len(seq)
    if n == 0:
        return NOT_FOUND

    low, high = 0, n
    while high - low > 1:
        mid = (low + high) // 2
        if comparator(seq[mid], key) <= 0:
            low = mid
        else:
            high = mid

    if comparator(seq[low], key) == 0:
        return low
    return NOT_FOUND
