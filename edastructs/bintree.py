"""Immutable binary trees whose nodes may be shared between trees."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")

_MISSING: Any = object()


@dataclass(frozen=True, slots=True)
class _Node:
    left: _Node | None
    elem: Any
    right: _Node | None


def _link(tree: BinTree | None) -> _Node | None:
    return None if tree is None else tree._node


class BinTree(Generic[T]):
    """A binary tree: empty, or a root element with a left and a right subtree.

    ``BinTree()`` is the empty tree and ``BinTree(left, root, right)`` joins
    two trees under a new root.  Subtrees are shared, never copied.
    """

    __slots__ = ("_node",)

    def __init__(self, left: BinTree[T] | None = None, root: T = _MISSING,
                 right: BinTree[T] | None = None) -> None:
        if root is _MISSING:
            if left is not None or right is not None:
                raise TypeError("an empty tree takes no children")
            self._node: _Node | None = None
        else:
            self._node = _Node(_link(left), root, _link(right))

    @classmethod
    def leaf(cls, elem: T) -> BinTree[T]:
        """Return a tree holding only ``elem``."""
        return cls(None, elem, None)

    @classmethod
    def _wrap(cls, node: _Node | None) -> BinTree[T]:
        tree = cls.__new__(cls)
        tree._node = node
        return tree

    def is_empty(self) -> bool:
        return self._node is None

    def _require_node(self, what: str) -> _Node:
        if self._node is None:
            raise ValueError(f"the empty tree has no {what}")
        return self._node

    def root(self) -> T:
        return self._require_node("root").elem

    def left(self) -> BinTree[T]:
        return self._wrap(self._require_node("left child").left)

    def right(self) -> BinTree[T]:
        return self._wrap(self._require_node("right child").right)

    def preorder(self) -> list[T]:
        result: list[T] = []
        stack = [self._node] if self._node is not None else []
        while stack:
            node = stack.pop()
            result.append(node.elem)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def inorder(self) -> list[T]:
        return list(self)

    def postorder(self) -> list[T]:
        reversed_post: list[T] = []
        stack = [self._node] if self._node is not None else []
        while stack:
            node = stack.pop()
            reversed_post.append(node.elem)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        reversed_post.reverse()
        return reversed_post

    def levelorder(self) -> list[T]:
        result: list[T] = []
        pending = deque([self._node] if self._node is not None else [])
        while pending:
            node = pending.popleft()
            result.append(node.elem)
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)
        return result

    def __iter__(self) -> Iterator[T]:
        """Yield the elements in inorder."""
        ancestors: list[_Node] = []
        node = self._node
        while node is not None or ancestors:
            while node is not None:
                ancestors.append(node)
                node = node.left
            node = ancestors.pop()
            yield node.elem
            node = node.right

    def __repr__(self) -> str:
        if self._node is None:
            return "BinTree()"
        return f"BinTree({self.left()!r}, {self._node.elem!r}, {self.right()!r})"


def read_tree(tokens: Iterable[Any], empty: Any,
              convert: Callable[[Any], Any] = str) -> BinTree:
    """Build a tree from its preorder listing, ``empty`` marking empty subtrees.

    Each token is passed through ``convert`` before it is compared with
    ``empty``.  Tokens are consumed from ``tokens`` only as far as the tree
    reaches, so several trees can be read from one iterator.
    """
    source = iter(tokens)
    # Each pending frame is [element, left subtree or _MISSING].
    pending: list[list[Any]] = []
    while True:
        try:
            value = convert(next(source))
        except StopIteration:
            raise ValueError("incomplete tree description") from None
        if value != empty:
            pending.append([value, _MISSING])
            continue
        tree: BinTree = BinTree()
        while pending:
            frame = pending[-1]
            if frame[1] is _MISSING:
                frame[1] = tree
                break
            pending.pop()
            tree = BinTree(frame[1], frame[0], tree)
        else:
            return tree