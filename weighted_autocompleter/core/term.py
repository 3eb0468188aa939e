# term.py
# A vocabulary entry (word + weight) and the orderings the engines rely on.
# Comparators follow the cmp convention (negative / 0 / positive) so they can
# define equivalence classes for the boundary search, and can be turned into
# sort keys with functools.cmp_to_key.

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass

from .errors import InvalidInputError, InvalidWeightError


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


@dataclass(frozen=True)
class Term:
    """
    Immutable (word, weight) pair.

    word: compared by raw code point, no normalisation
    weight: non-negative real number
    """

    word: str
    weight: float

    def __post_init__(self) -> None:
        if self.word is None:
            raise InvalidInputError("word is None")
        if not isinstance(self.word, str):
            raise InvalidInputError(f"word must be a str, got {type(self.word).__name__}")
        # bool is Real too, but True as a weight is a caller bug
        if isinstance(self.weight, bool) or not isinstance(self.weight, numbers.Real):
            raise InvalidWeightError(f"weight is not a number: {self.weight!r}")
        weight = float(self.weight)
        if math.isnan(weight) or weight < 0:
            raise InvalidWeightError(f"weight is negative: {self.weight!r}")
        # frozen dataclass, so bypass __setattr__ to store the coerced value
        object.__setattr__(self, "weight", weight)

    def __lt__(self, other: "Term") -> bool:
        # default ordering is lexicographic on the word only
        if not isinstance(other, Term):
            return NotImplemented
        return self.word < other.word

    def __str__(self) -> str:
        return f"{self.weight:14.1f}\t{self.word}"


# orderings --------------------------------------------------------------
def lexicographic_order(v: Term, w: Term) -> int:
    """Full-word ordering, same as sorted(terms)."""
    return _cmp(v.word, w.word)


class PrefixOrder:
    """
    Compare two terms on their first `r` characters only.

    Words shorter than r take part with their full length, so two terms are
    equal under this order exactly when they agree on the first r characters.
    Slicing keeps the cost O(r) whatever the word lengths are.
    """

    __slots__ = ("r",)

    def __init__(self, r: int) -> None:
        if r is None or r < 0:
            raise InvalidInputError(f"prefix length must be >= 0, got {r!r}")
        self.r = r

    def __call__(self, v: Term, w: Term) -> int:
        return _cmp(v.word[: self.r], w.word[: self.r])

    def __repr__(self) -> str:
        return f"PrefixOrder({self.r})"


def weight_order(v: Term, w: Term) -> int:
    """Ascending weight; ties compare equal."""
    return _cmp(v.weight, w.weight)


def reverse_weight_order(v: Term, w: Term) -> int:
    """Descending weight; ties compare equal."""
    return _cmp(w.weight, v.weight)


# construction input ------------------------------------------------------
def make_terms(words, weights) -> list[Term]:
    """
    Pair words with weights 1:1 and validate each pair.

    Raises InvalidInputError for None or mismatched sequences and whatever
    Term raises for a bad pair.
    """
    if words is None or weights is None:
        raise InvalidInputError("words and weights must not be None")
    words = list(words)
    weights = list(weights)
    if len(words) != len(weights):
        raise InvalidInputError(
            f"got {len(words)} words but {len(weights)} weights"
        )
    return [Term(word, weight) for word, weight in zip(words, weights)]
