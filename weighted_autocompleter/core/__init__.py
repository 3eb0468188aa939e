"""
weighted_autocompleter.core

Prefix-completion engines over a fixed weighted vocabulary.
Contains:
 - Term and its orderings (lexicographic, prefix, weight)
 - boundary binary searches used by the sorted-array engine
 - SortedArrayEngine, TrieEngine and the BruteForceEngine reference
 - the Autocompletor protocol and a name -> engine registry
"""

from .errors import (
    AutocompleteError,
    InvalidInputError,
    InvalidWeightError,
    TermFileError,
)
from .term import (
    Term,
    PrefixOrder,
    lexicographic_order,
    weight_order,
    reverse_weight_order,
    make_terms,
)
from .boundary_search import NOT_FOUND, first_index_of, last_index_of
from .protocols import Autocompletor
from .sorted_array import SortedArrayEngine
from .trie import TrieEngine
from .brute_force import BruteForceEngine
from .registry import ENGINES, create_engine

__all__ = [
    "AutocompleteError",
    "InvalidInputError",
    "InvalidWeightError",
    "TermFileError",
    "Term",
    "PrefixOrder",
    "lexicographic_order",
    "weight_order",
    "reverse_weight_order",
    "make_terms",
    "NOT_FOUND",
    "first_index_of",
    "last_index_of",
    "Autocompletor",
    "SortedArrayEngine",
    "TrieEngine",
    "BruteForceEngine",
    "ENGINES",
    "create_engine",
]
