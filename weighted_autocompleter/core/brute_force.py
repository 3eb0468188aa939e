# brute_force.py
# Reference autocompleter: scans every term on every query.
# Slow (O(n) per query) but obviously correct, which makes it the oracle the
# faster engines are checked against.

from __future__ import annotations

import heapq
from typing import Dict, Iterable, List

from .protocols import check_k, check_prefix
from .term import Term, make_terms


class BruteForceEngine:
    """Linear-scan implementation of the Autocompletor contract."""

    def __init__(self, words: Iterable[str], weights: Iterable[float]) -> None:
        by_word: Dict[str, Term] = {}
        for term in make_terms(words, weights):
            by_word[term.word] = term
        self._terms: List[Term] = list(by_word.values())

    def __len__(self) -> int:
        return len(self._terms)

    def _matches(self, prefix: str):
        return (t for t in self._terms if t.word.startswith(prefix))

    def top_k_matches(self, prefix: str, k: int) -> List[str]:
        check_prefix(prefix)
        check_k(k)
        best = heapq.nlargest(k, self._matches(prefix), key=lambda t: t.weight)
        return [t.word for t in best]

    def top_match(self, prefix: str) -> str:
        check_prefix(prefix)
        best = max(self._matches(prefix), key=lambda t: t.weight, default=None)
        return best.word if best is not None else ""
