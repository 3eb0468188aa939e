# term_loader.py — reads weighted vocabularies from disk

# Term file format (one term per line):
#     <optional first line holding only the number of terms>
#     <weight>\t<word>
# Leading whitespace before the weight is allowed, blank lines are skipped
# and the word is kept verbatim (it may contain spaces).

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Tuple, Union

from weighted_autocompleter.core.errors import InvalidWeightError, TermFileError

logger = logging.getLogger(__name__)

Words = List[str]
Weights = List[float]


def parse_terms(lines: Iterable[str]) -> Tuple[Words, Weights]:
    """
    Parse term lines into parallel (words, weights) lists.
    Raises TermFileError on a malformed line, InvalidWeightError on a
    negative weight.
    """
    words: Words = []
    weights: Weights = []
    declared = None

    for lineno, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue

        stripped = line.strip()
        # a bare integer before any term is the count header
        if not words and declared is None and "\t" not in stripped and stripped.isdigit():
            declared = int(stripped)
            continue

        weight_str, sep, word = line.lstrip().partition("\t")
        if not sep or not word:
            raise TermFileError(lineno, line, "expected '<weight>\\t<word>'")
        try:
            weight = float(weight_str)
        except ValueError:
            raise TermFileError(lineno, line, "weight is not a number") from None
        if weight < 0:
            raise InvalidWeightError(f"line {lineno}: negative weight {weight} for {word!r}")

        words.append(word)
        weights.append(weight)

    if declared is not None and declared != len(words):
        logger.warning("term header declares %d terms but %d were read", declared, len(words))
    return words, weights


def load_terms(path: Union[str, Path]) -> Tuple[Words, Weights]:
    """Load a term file from `path` (UTF-8)."""
    p = Path(path)
    with p.open("r", encoding="utf-8") as fh:
        words, weights = parse_terms(fh)
    logger.info("loaded %d terms from %s", len(words), p)
    return words, weights
