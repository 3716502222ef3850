"""Ordered key-value maps kept as AVL search trees."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Callable, Iterator


@dataclass(slots=True, eq=False)
class _Node:
    key: Any
    value: Any
    left: _Node | None = None
    right: _Node | None = None
    height: int = 1


def _height(node: _Node | None) -> int:
    return 0 if node is None else node.height


def _refresh(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _rotate_right(k2: _Node) -> _Node:
    k1 = k2.left
    assert k1 is not None
    k2.left = k1.right
    k1.right = k2
    _refresh(k2)
    _refresh(k1)
    return k1


def _rotate_left(k1: _Node) -> _Node:
    k2 = k1.right
    assert k2 is not None
    k1.right = k2.left
    k2.left = k1
    _refresh(k1)
    _refresh(k2)
    return k2


def _fix_left_heavy(node: _Node) -> _Node:
    """Rebalance a node whose left side may have grown too tall."""
    if _height(node.left) - _height(node.right) > 1:
        assert node.left is not None
        if _height(node.left.right) > _height(node.left.left):
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    _refresh(node)
    return node


def _fix_right_heavy(node: _Node) -> _Node:
    """Rebalance a node whose right side may have grown too tall."""
    if _height(node.right) - _height(node.left) > 1:
        assert node.right is not None
        if _height(node.right.left) > _height(node.right.right):
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    _refresh(node)
    return node


def _pop_min(node: _Node) -> tuple[_Node | None, _Node]:
    """Detach the smallest node of a subtree; return (new subtree, smallest)."""
    if node.left is None:
        return node.right, node
    rest, smallest = _pop_min(node.left)
    node.left = rest
    return _fix_right_heavy(node), smallest


def _inorder(node: _Node | None, ancestors: list[_Node]) -> Iterator[tuple[Any, Any]]:
    while node is not None or ancestors:
        while node is not None:
            ancestors.append(node)
            node = node.left
        node = ancestors.pop()
        yield node.key, node.value
        node = node.right


class TreeMap:
    """A map whose keys are kept in the order given by ``less``.

    ``less(a, b)`` is true when ``a`` goes before ``b``; keys for which
    neither goes before the other are the same key.
    """

    def __init__(self, less: Callable[[Any, Any], bool] = operator.lt) -> None:
        self._less = less
        self._root: _Node | None = None
        self._size = 0

    def insert(self, key: Any, value: Any) -> None:
        """Add the pair, or replace the value if the key is already there."""
        self._root = self._insert(self._root, key, value)

    def __setitem__(self, key: Any, value: Any) -> None:
        self.insert(key, value)

    def _insert(self, node: _Node | None, key: Any, value: Any) -> _Node:
        if node is None:
            self._size += 1
            return _Node(key, value)
        if self._less(key, node.key):
            node.left = self._insert(node.left, key, value)
            return _fix_left_heavy(node)
        if self._less(node.key, key):
            node.right = self._insert(node.right, key, value)
            return _fix_right_heavy(node)
        node.value = value
        return node

    def _find(self, key: Any) -> _Node | None:
        node = self._root
        while node is not None:
            if self._less(key, node.key):
                node = node.left
            elif self._less(node.key, key):
                node = node.right
            else:
                return node
        return None

    def __getitem__(self, key: Any) -> Any:
        node = self._find(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def ensure(self, key: Any, default: Any = None) -> Any:
        """Return the value for ``key``, first storing ``default`` if it is absent."""
        node = self._find(key)
        if node is not None:
            return node.value
        self.insert(key, default)
        return default

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._root is not None

    def erase(self, key: Any) -> None:
        """Remove ``key`` if present; do nothing otherwise."""
        self._root = self._erase(self._root, key)

    def _erase(self, node: _Node | None, key: Any) -> _Node | None:
        if node is None:
            return None
        if self._less(key, node.key):
            node.left = self._erase(node.left, key)
            return _fix_right_heavy(node)
        if self._less(node.key, key):
            node.right = self._erase(node.right, key)
            return _fix_left_heavy(node)
        self._size -= 1
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        rest, smallest = _pop_min(node.right)
        smallest.left = node.left
        smallest.right = rest
        return _fix_left_heavy(smallest)

    def __iter__(self) -> Iterator[Any]:
        """Yield the keys in order."""
        for key, _ in self.items():
            yield key

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield (key, value) pairs in key order."""
        return _inorder(self._root, [])

    def items_from(self, key: Any) -> Iterator[tuple[Any, Any]]:
        """Yield pairs in order starting at ``key``; nothing if it is absent."""
        ancestors: list[_Node] = []
        node = self._root
        while node is not None:
            if self._less(key, node.key):
                ancestors.append(node)
                node = node.left
            elif self._less(node.key, key):
                node = node.right
            else:
                yield node.key, node.value
                yield from _inorder(node.right, ancestors)
                return

    def height(self) -> int:
        return _height(self._root)

    def keys_in_range(self, low: Any, high: Any) -> list[Any]:
        """Keys k with low <= k <= high, in order, visiting only needed branches."""
        found: list[Any] = []
        less = self._less

        def visit(node: _Node | None) -> None:
            if node is None:
                return
            if less(node.key, low):
                visit(node.right)
                return
            visit(node.left)
            if not less(high, node.key):
                found.append(node.key)
            if less(node.key, high):
                visit(node.right)

        visit(self._root)
        return found

    def pretty(self) -> str:
        """Sideways drawing of the tree, right subtree on top."""
        if self._root is None:
            return "empty\n"
        lines: list[str] = []

        def draw(node: _Node | None, indent: int) -> None:
            if node is None:
                return
            draw(node.right, indent + 2)
            lines.append(f"{' ' * indent}({node.key},{node.value})\n")
            draw(node.left, indent + 2)

        draw(self._root, 0)
        return "".join(lines)

    def __repr__(self) -> str:
        return f"TreeMap({dict(self.items())!r})"