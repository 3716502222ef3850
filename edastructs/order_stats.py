"""Order statistics on the keys of a TreeMap: the k-th smallest key."""

from __future__ import annotations

from itertools import islice
from typing import Any, Iterable

from edastructs.treemap import TreeMap


def kth_key(tree: TreeMap, position: int) -> Any | None:
    """Key at 1-based ``position`` in key order, or None if there is none."""
    if position < 1 or position > len(tree):
        return None
    return next(islice(iter(tree), position - 1, None))


def kth_keys(tree: TreeMap, positions: Iterable[int]) -> list[Any | None]:
    """Keys at each of the 1-based ``positions``; None where a position is out of range.

    The keys are ranked once, then every position is answered from that ranking.
    """
    ranked = list(tree)
    return [ranked[p - 1] if 1 <= p <= len(ranked) else None for p in positions]