"""Indexed priority queue over the elements 0 .. capacity-1."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Callable


@dataclass(frozen=True)
class Pair:
    """An element together with its priority."""

    elem: int
    priority: Any


class IndexPQ:
    """Priority queue of elements 0 .. capacity-1 whose priorities can change.

    ``before(a, b)`` is true when priority ``a`` goes before ``b``; the
    default gives a min-queue.
    """

    def __init__(self, capacity: int,
                 before: Callable[[Any, Any], bool] = operator.lt) -> None:
        self._before = before
        self._heap: list[Pair] = []
        self._pos: list[int | None] = [None] * capacity

    def _slot(self, elem: int) -> int | None:
        if not 0 <= elem < len(self._pos):
            raise IndexError(f"element {elem} is out of range")
        return self._pos[elem]

    def push(self, elem: int, priority: Any) -> None:
        if self._slot(elem) is not None:
            raise ValueError(f"element {elem} is already in the queue")
        self._heap.append(Pair(elem, priority))
        index = len(self._heap) - 1
        self._pos[elem] = index
        self._float(index)

    def update(self, elem: int, priority: Any) -> None:
        """Set the priority of ``elem``, adding it if it is not in the queue."""
        index = self._slot(elem)
        if index is None:
            self.push(elem, priority)
            return
        self._heap[index] = Pair(elem, priority)
        if index > 0 and self._before(priority, self._heap[(index - 1) // 2].priority):
            self._float(index)
        else:
            self._sink(index)

    def top(self) -> Pair:
        if not self._heap:
            raise IndexError("an empty queue has no top")
        return self._heap[0]

    def pop(self) -> Pair:
        """Remove and return the pair with the highest priority."""
        if not self._heap:
            raise IndexError("cannot pop from an empty queue")
        first = self._heap[0]
        self._pos[first.elem] = None
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._pos[last.elem] = 0
            self._sink(0)
        return first

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __contains__(self, elem: object) -> bool:
        return (isinstance(elem, int) and 0 <= elem < len(self._pos)
                and self._pos[elem] is not None)

    def _place(self, index: int, pair: Pair) -> None:
        self._heap[index] = pair
        self._pos[pair.elem] = index

    def _float(self, index: int) -> None:
        moving = self._heap[index]
        hole = index
        while hole > 0:
            parent = (hole - 1) // 2
            if not self._before(moving.priority, self._heap[parent].priority):
                break
            self._place(hole, self._heap[parent])
            hole = parent
        self._place(hole, moving)

    def _sink(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        moving = heap[index]
        hole = index
        child = 2 * hole + 1
        while child < size:
            if child + 1 < size and self._before(heap[child + 1].priority,
                                                 heap[child].priority):
                child += 1
            if not self._before(heap[child].priority, moving.priority):
                break
            self._place(hole, heap[child])
            hole = child
            child = 2 * hole + 1
        self._place(hole, moving)