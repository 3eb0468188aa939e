# registry.py
# Name -> engine class lookup, so callers (CLI, config, benchmarks) can pick
# an implementation by name at construction time.

from __future__ import annotations

from typing import Dict, Iterable, Type

from .brute_force import BruteForceEngine
from .errors import InvalidInputError
from .protocols import Autocompletor
from .sorted_array import SortedArrayEngine
from .trie import TrieEngine

ENGINES: Dict[str, Type] = {
    "binary": SortedArrayEngine,
    "trie": TrieEngine,
    "brute": BruteForceEngine,
}


def create_engine(name: str, words: Iterable[str], weights: Iterable[float]) -> Autocompletor:
    """Build the engine registered under `name` from parallel words/weights."""
    try:
        cls = ENGINES[name]
    except KeyError:
        raise InvalidInputError(
            f"unknown engine {name!r}, choose from: {', '.join(sorted(ENGINES))}"
        ) from None
    return cls(words, weights)
