"""Binary heap priority queue with a configurable ordering."""

from __future__ import annotations

import operator
from typing import Callable, Generic, Iterable, TypeVar

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """Priority queue whose top is the element that goes ``before`` all others.

    ``before(a, b)`` is true when ``a`` has higher priority than ``b``; the
    default gives a min-queue.
    """

    def __init__(self, items: Iterable[T] = (),
                 before: Callable[[T, T], bool] = operator.lt) -> None:
        self._before = before
        self._heap: list[T] = list(items)
        for index in reversed(range(len(self._heap) // 2)):
            self._sink(index)

    def push(self, item: T) -> None:
        self._heap.append(item)
        self._float(len(self._heap) - 1)

    def top(self) -> T:
        if not self._heap:
            raise IndexError("an empty priority queue has no top")
        return self._heap[0]

    def pop(self) -> T:
        """Remove and return the highest-priority element."""
        if not self._heap:
            raise IndexError("cannot pop from an empty priority queue")
        first = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sink(0)
        return first

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __str__(self) -> str:
        return " ".join(str(item) for item in self._heap)

    def _float(self, index: int) -> None:
        heap = self._heap
        elem = heap[index]
        hole = index
        while hole > 0:
            parent = (hole - 1) // 2
            if not self._before(elem, heap[parent]):
                break
            heap[hole] = heap[parent]
            hole = parent
        heap[hole] = elem

    def _sink(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        elem = heap[index]
        hole = index
        child = 2 * hole + 1
        while child < size:
            if child + 1 < size and self._before(heap[child + 1], heap[child]):
                child += 1
            if not self._before(heap[child], elem):
                break
            heap[hole] = heap[child]
            hole = child
            child = 2 * hole + 1
        heap[hole] = elem