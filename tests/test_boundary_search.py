# tests/test_boundary_search.py
# first/last index of an equivalence class, plus the comparator-call bound

import math
import random

import pytest
from weighted_autocompleter.core.boundary_search import NOT_FOUND, first_index_of, last_index_of
from weighted_autocompleter.core.term import PrefixOrder, Term, lexicographic_order


def _terms(words):
    return sorted(Term(w, i) for i, w in enumerate(words))


@pytest.fixture
def terms():
    return _terms(["air", "bat", "bell", "bells", "boy", "cat", "catalog", "dog"])


def test_prefix_range(terms):
    target = Term("be", 0)
    order = PrefixOrder(2)
    assert first_index_of(terms, target, order) == 2
    assert last_index_of(terms, target, order) == 3


def test_single_letter_range(terms):
    target = Term("b", 0)
    order = PrefixOrder(1)
    first, last = first_index_of(terms, target, order), last_index_of(terms, target, order)
    assert [t.word for t in terms[first:last + 1]] == ["bat", "bell", "bells", "boy"]


def test_first_and_last_elements(terms):
    assert first_index_of(terms, Term("a", 0), PrefixOrder(1)) == 0
    assert last_index_of(terms, Term("d", 0), PrefixOrder(1)) == len(terms) - 1


@pytest.mark.parametrize("prefix", ["z", "aa", "bz", "c0", "catalogue"])
def test_not_found(terms, prefix):
    target = Term(prefix, 0)
    order = PrefixOrder(len(prefix))
    assert first_index_of(terms, target, order) == NOT_FOUND
    assert last_index_of(terms, target, order) == NOT_FOUND


def test_empty_sequence():
    target = Term("a", 0)
    assert first_index_of([], target, lexicographic_order) == NOT_FOUND
    assert last_index_of([], target, lexicographic_order) == NOT_FOUND


def test_single_element():
    seq = [Term("a", 1)]
    assert first_index_of(seq, Term("a", 0), lexicographic_order) == 0
    assert last_index_of(seq, Term("a", 0), lexicographic_order) == 0
    assert first_index_of(seq, Term("b", 0), lexicographic_order) == NOT_FOUND


def test_plain_ints_with_duplicates():
    seq = [1, 2, 2, 2, 3, 5, 5, 8]
    cmp = lambda a, b: (a > b) - (a < b)
    assert first_index_of(seq, 2, cmp) == 1
    assert last_index_of(seq, 2, cmp) == 3
    assert first_index_of(seq, 5, cmp) == 5
    assert last_index_of(seq, 5, cmp) == 6
    assert first_index_of(seq, 4, cmp) == NOT_FOUND


def test_range_is_exactly_the_equivalence_class():
    rng = random.Random(7)
    alphabet = "abc"
    words = sorted({"".join(rng.choice(alphabet) for _ in range(rng.randint(1, 5))) for _ in range(300)})
    terms = [Term(w, 0) for w in words]
    for r in range(0, 4):
        for key in ["", "a", "ab", "ba", "cc", "abc", "bca"]:
            target = Term(key, 0)
            order = PrefixOrder(r)
            first = first_index_of(terms, target, order)
            last = last_index_of(terms, target, order)
            expected = [i for i, t in enumerate(terms) if order(t, target) == 0]
            if not expected:
                assert first == last == NOT_FOUND
            else:
                assert first <= last
                assert list(range(first, last + 1)) == expected


@pytest.mark.parametrize("n", [1, 2, 3, 10, 100, 1000, 1024, 4099])
def test_comparator_calls_are_logarithmic(n):
    seq = list(range(n))
    calls = 0

    def counting(a, b):
        nonlocal calls
        calls += 1
        return (a > b) - (a < b)

    bound = 1 + math.ceil(math.log2(n)) if n > 1 else 1
    for key in (0, n // 2, n - 1, -5, n + 5):
        calls = 0
        first_index_of(seq, key, counting)
        assert calls <= bound
        calls = 0
        last_index_of(seq, key, counting)
        assert calls <= bound
