"""Height, balance and AVL checks on binary trees."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Sequence

from edastructs.bintree import BinTree, read_tree

AVL_UPPER = 1_000_000_000
AVL_LOWER = -1


def height(tree: BinTree) -> int:
    """Number of levels of the tree; 0 for the empty tree."""
    best = 0
    stack = [] if tree.is_empty() else [(tree, 1)]
    while stack:
        node, depth = stack.pop()
        best = max(best, depth)
        for child in (node.left(), node.right()):
            if not child.is_empty():
                stack.append((child, depth + 1))
    return best


def is_balanced(tree: BinTree) -> bool:
    """True when, at every node, the subtree heights differ by at most one."""
    heights: list[int] = []
    stack = [(tree, False)]
    while stack:
        node, expanded = stack.pop()
        if node.is_empty():
            heights.append(0)
        elif not expanded:
            stack.append((node, True))
            stack.append((node.right(), False))
            stack.append((node.left(), False))
        else:
            right = heights.pop()
            left = heights.pop()
            if abs(left - right) > 1:
                return False
            heights.append(max(left, right) + 1)
    return True


def avl_height(tree: BinTree, upper: int = AVL_UPPER, lower: int = AVL_LOWER) -> int:
    """Height of the tree if it is an AVL tree with keys strictly between
    ``lower`` and ``upper``, otherwise -1."""
    heights: list[int] = []
    stack = [(tree, upper, lower, False)]
    while stack:
        node, hi, lo, expanded = stack.pop()
        if node.is_empty():
            heights.append(0)
            continue
        key = node.root()
        if not expanded:
            if key >= hi or key <= lo:
                return -1
            stack.append((node, hi, lo, True))
            stack.append((node.right(), hi, key, False))
            stack.append((node.left(), key, lo, False))
            continue
        right = heights.pop()
        left = heights.pop()
        if abs(left - right) > 1:
            return -1
        heights.append(max(left, right) + 1)
    return heights.pop()


def is_avl(tree: BinTree, upper: int = AVL_UPPER, lower: int = AVL_LOWER) -> bool:
    return avl_height(tree, upper, lower) != -1


_ANSWERS = {True: "SI", False: "NO"}


def solve_balanced(text: str) -> list[str]:
    """Answer each case: a count followed by character trees, '.' for empty."""
    match = re.match(r"\s*([+-]?\d+)", text)
    if match is None:
        raise ValueError("missing number of cases")
    chars = (c for c in text[match.end():] if not c.isspace())
    return [
        _ANSWERS[is_balanced(read_tree(chars, "."))]
        for _ in range(int(match.group(1)))
    ]


def solve_avl(text: str) -> list[str]:
    """Answer each case: a count followed by integer trees, -1 for empty."""
    tokens = iter(text.split())
    try:
        count = int(next(tokens))
    except StopIteration:
        raise ValueError("missing number of cases") from None
    return [_ANSWERS[is_avl(read_tree(tokens, -1, int))] for _ in range(count)]


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check binary trees for balance.")
    parser.add_argument("problem", choices=("balanced", "avl"))
    parser.add_argument("input", nargs="?", help="input file (default: standard input)")
    args = parser.parse_args(argv)
    if args.input is None:
        text = sys.stdin.read()
    else:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    solver = solve_balanced if args.problem == "balanced" else solve_avl
    for line in solver(text):
        print(line)
    return 0