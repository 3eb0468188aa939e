# trie.py
# Weighted trie (prefix tree) for top-k prefix completion.
# Every node caches the best word weight reachable in its subtree, which lets
# top_match walk straight to the winner and lets top_k_matches run a
# best-first search that stops as soon as nothing left can beat the results.

from __future__ import annotations

import heapq
import logging
from itertools import count
from typing import Dict, Iterable, List, Optional, Tuple

from .protocols import check_k, check_prefix
from .term import make_terms

logger = logging.getLogger(__name__)

NO_BOUND = float("-inf")  # subtree holds no word

Word = str
Weight = float


class TrieNode:
    """
    A single node in the trie.
    char: edge label from the parent ("" for the root)
    children: char -> TrieNode
    is_word: the path from the root to here spells a vocabulary word
    word/weight: only meaningful when is_word
    subtree_max: max weight of any word at or below this node
    """

    __slots__ = ("char", "children", "is_word", "word", "weight", "subtree_max")

    def __init__(self, char: str = "") -> None:
        self.char = char
        self.children: Dict[str, TrieNode] = {}
        self.is_word = False
        self.word: Optional[Word] = None
        self.weight: Weight = 0.0
        self.subtree_max: Weight = NO_BOUND

    def recompute_bound(self) -> None:
        """Restore subtree_max from own weight and every child's bound."""
        best = self.weight if self.is_word else NO_BOUND
        for child in self.children.values():
            if child.subtree_max > best:
                best = child.subtree_max
        self.subtree_max = best

    def __repr__(self) -> str:
        return f"TrieNode({self.char!r}, word={self.word!r}, max={self.subtree_max})"


class TrieEngine:
    """
    Trie autocompleter with branch-and-bound top-k search.

    Construction: O(total characters * alphabet) worst case for bound repair.
    top_match: O(len(prefix) + depth * fanout).
    top_k_matches: O(visited * log(frontier)); pruning keeps `visited` small
    when k is much smaller than the number of matches.
    """

    def __init__(self, words: Iterable[str], weights: Iterable[float]) -> None:
        self._root = TrieNode()
        self._size = 0
        self._nodes = 1
        for term in make_terms(words, weights):
            self._add(term.word, term.weight)
        logger.debug("TrieEngine built with %d words in %d nodes", self._size, self._nodes)

    # insertion -----------------------------------------------------
    def _add(self, word: Word, weight: Weight) -> None:
        """
        Insert `word` or update its weight if it is already present.
        The cached bounds on the whole root-to-word path are recomputed from
        scratch, since a lowered weight may have been what justified them.
        """
        node = self._root
        path = [node]
        for ch in word:
            nxt = node.children.get(ch)
            if nxt is None:
                nxt = TrieNode(ch)
                node.children[ch] = nxt
                self._nodes += 1
            node = nxt
            path.append(node)

        if not node.is_word:
            self._size += 1
        node.is_word = True
        node.word = word
        node.weight = weight

        for n in reversed(path):
            n.recompute_bound()

    def _find(self, prefix: str) -> Optional[TrieNode]:
        """Node spelling `prefix`, or None if no word starts with it."""
        node = self._root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    # queries ---------------------------------------------------------
    def top_match(self, prefix: str) -> str:
        check_prefix(prefix)
        node = self._find(prefix)
        if node is None or node.subtree_max == NO_BOUND:
            return ""

        # some node below realises the bound, follow the bound down to it
        while not (node.is_word and node.weight == node.subtree_max):
            for child in node.children.values():
                if child.subtree_max == node.subtree_max:
                    node = child
                    break
        return node.word

    def top_k_matches(self, prefix: str, k: int) -> List[str]:
        check_prefix(prefix)
        check_k(k)
        if k == 0:
            return []
        start = self._find(prefix)
        if start is None or start.subtree_max == NO_BOUND:
            return []

        # heapq is a min-heap: the frontier stores negated bounds so the most
        # promising node pops first; `kept` keeps the weakest result on top.
        # The counter breaks ties so nodes themselves are never compared.
        tie = count()
        frontier: List[Tuple[Weight, int, TrieNode]] = [(-start.subtree_max, next(tie), start)]
        kept: List[Tuple[Weight, int, Word]] = []

        while frontier:
            if len(kept) == k and kept[0][0] >= -frontier[0][0]:
                break
            _, _, node = heapq.heappop(frontier)
            if node.is_word:
                heapq.heappush(kept, (node.weight, next(tie), node.word))
                if len(kept) > k:
                    heapq.heappop(kept)
            for child in node.children.values():
                if child.subtree_max != NO_BOUND:
                    heapq.heappush(frontier, (-child.subtree_max, next(tie), child))

        kept.sort(key=lambda t: t[0], reverse=True)
        return [word for _, _, word in kept]

    # convenience/debugging -----------------------------------------------------
    def __len__(self) -> int:
        """Number of distinct words."""
        return self._size

    def __contains__(self, word: str) -> bool:
        if not isinstance(word, str):
            return False
        node = self._find(word)
        return node is not None and node.is_word

    def weight_of(self, word: str) -> Optional[Weight]:
        """Stored weight of `word`, or None if it is not in the vocabulary."""
        node = self._find(word) if isinstance(word, str) else None
        if node is None or not node.is_word:
            return None
        return node.weight

    @property
    def node_count(self) -> int:
        return self._nodes
