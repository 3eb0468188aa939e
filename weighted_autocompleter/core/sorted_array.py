# sorted_array.py
# Autocomplete over a lexicographically sorted array of terms.
# The words under a prefix form one contiguous run of the array; two boundary
# searches with PrefixOrder(len(prefix)) find that run, then only the run is
# ranked by weight.

from __future__ import annotations

import logging
from functools import cmp_to_key
from typing import Dict, Iterable, List

from .boundary_search import NOT_FOUND, first_index_of, last_index_of
from .protocols import check_k, check_prefix
from .term import PrefixOrder, Term, make_terms, reverse_weight_order

logger = logging.getLogger(__name__)

_BY_REVERSE_WEIGHT = cmp_to_key(reverse_weight_order)


class SortedArrayEngine:
    """
    Binary-search autocompleter.

    Construction: O(n log n). Queries: O(log n) to find the matching run,
    plus O(m log m) to rank its m terms.
    """

    def __init__(self, words: Iterable[str], weights: Iterable[float]) -> None:
        # re-inserting a word updates its weight, last one wins
        by_word: Dict[str, Term] = {}
        for term in make_terms(words, weights):
            by_word[term.word] = term
        self._terms: List[Term] = sorted(by_word.values())
        logger.debug("SortedArrayEngine built with %d terms", len(self._terms))

    def __len__(self) -> int:
        return len(self._terms)

    def _matching_range(self, prefix: str) -> List[Term]:
        """Slice of the sorted array whose words share `prefix`."""
        target = Term(prefix, 0)
        order = PrefixOrder(len(prefix))
        first = first_index_of(self._terms, target, order)
        if first == NOT_FOUND:
            return []
        last = last_index_of(self._terms, target, order)
        if last == NOT_FOUND:
            return []
        return self._terms[first:last + 1]

    # queries ---------------------------------------------------------------
    def top_k_matches(self, prefix: str, k: int) -> List[str]:
        check_prefix(prefix)
        check_k(k)
        if k == 0:
            return []
        matches = self._matching_range(prefix)
        if not matches:
            return []
        ranked = sorted(matches, key=_BY_REVERSE_WEIGHT)
        return [t.word for t in ranked[:k]]

    def top_match(self, prefix: str) -> str:
        check_prefix(prefix)
        best_word = ""
        best_weight = -1.0
        for term in self._matching_range(prefix):
            if term.weight > best_weight and term.word.startswith(prefix):
                best_word = term.word
                best_weight = term.weight
        return best_word
