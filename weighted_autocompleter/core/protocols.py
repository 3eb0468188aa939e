# weighted_autocompleter/core/protocols.py
"""
The query contract shared by every engine.

Engines are picked by the caller (see core.registry); nothing else depends on
a concrete implementation, so tests and the CLI only talk to Autocompletor.
"""

from __future__ import annotations

from typing import List, Protocol, runtime_checkable

from .errors import InvalidInputError


@runtime_checkable
class Autocompletor(Protocol):
    """Prefix completion over a fixed weighted vocabulary."""

    def top_match(self, prefix: str) -> str:
        """
        Return the highest-weight word starting with `prefix`, or "" if none.
        """
        ...

    def top_k_matches(self, prefix: str, k: int) -> List[str]:
        """
        Return up to k words starting with `prefix`, by descending weight.
        Order among equal weights is unspecified.
        """
        ...


# argument checks shared by the engines --------------------------------------
def check_prefix(prefix) -> str:
    if prefix is None:
        raise InvalidInputError("prefix is None")
    if not isinstance(prefix, str):
        raise InvalidInputError(f"prefix must be a str, got {type(prefix).__name__}")
    return prefix


def check_k(k) -> int:
    # bool is an int subclass, but True/False as a count is a caller bug
    if k is None or isinstance(k, bool) or not isinstance(k, int):
        raise InvalidInputError(f"k must be an int, got {k!r}")
    if k < 0:
        raise InvalidInputError(f"k must be >= 0, got {k}")
    return k
