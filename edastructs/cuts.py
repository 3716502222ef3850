"""Cheapest order of cuts on a board, by dynamic programming over intervals."""

from __future__ import annotations

import argparse
import sys
from typing import Iterator, Sequence

from edastructs.matrix import Matrix


def min_cut_cost(length: int, cuts: Sequence[int]) -> int:
    """Least cost of making the cuts, each costing twice the piece it splits.

    The points are 0, the given cuts in order, and ``length``.  The
    optimisation runs over the stretch from the first cut point to
    ``length``, cutting at the points that lie between them; the piece from
    0 to the first cut point does not take part.
    """
    points = [0, *cuts, length]
    n = len(points) - 1
    costs = Matrix(n + 1, n + 1, 0)
    for gap in range(2, n + 1):
        for i in range(1, n - gap + 1):
            j = i + gap
            best = min(costs[i][k] + costs[k][j] for k in range(i + 1, j))
            costs[i][j] = best + 2 * (points[j] - points[i])
    return costs[1][n]


def _next_int(tokens: Iterator[str]) -> int:
    try:
        return int(next(tokens))
    except StopIteration:
        raise ValueError("input ends in the middle of a case") from None


def solve(text: str) -> list[int]:
    """Answer every case ``L N c1 .. cN`` until a case with L or N zero."""
    tokens = iter(text.split())
    results: list[int] = []
    while True:
        try:
            length = int(next(tokens))
            count = int(next(tokens))
        except StopIteration:
            return results
        if length == 0 or count == 0:
            return results
        cuts = [_next_int(tokens) for _ in range(count)]
        results.append(min_cut_cost(length, cuts))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Cheapest way to cut a board.")
    parser.add_argument("input", nargs="?", help="input file (default: standard input)")
    args = parser.parse_args(argv)
    if args.input is None:
        text = sys.stdin.read()
    else:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    for result in solve(text):
        print(result)
    return 0