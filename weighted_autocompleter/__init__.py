"""
weighted_autocompleter

Top-k prefix completion over a weighted vocabulary, with interchangeable
sorted-array and trie engines, a term file loader and a small rich CLI.
"""

from .core import (
    Autocompletor,
    SortedArrayEngine,
    TrieEngine,
    BruteForceEngine,
    Term,
    create_engine,
)

__all__ = [
    "Autocompletor",
    "SortedArrayEngine",
    "TrieEngine",
    "BruteForceEngine",
    "Term",
    "create_engine",
]

__version__ = "0.1.0"
