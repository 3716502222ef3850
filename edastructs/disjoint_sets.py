"""Disjoint sets with union by size and path compression."""

from __future__ import annotations


class DisjointSets:
    """A partition of 0 .. n-1, each element starting in its own set."""

    def __init__(self, n: int) -> None:
        # A negative entry marks a root and holds minus the size of its set;
        # any other entry is the parent of that element.
        self._id = [-1] * n
        self._count = n

    @property
    def count(self) -> int:
        """Number of disjoint sets."""
        return self._count

    def find(self, p: int) -> int:
        """Representative of the set containing ``p``."""
        if not 0 <= p < len(self._id):
            raise IndexError(f"element {p} is out of range")
        root = p
        while self._id[root] >= 0:
            root = self._id[root]
        while self._id[p] >= 0 and self._id[p] != root:
            self._id[p], p = root, self._id[p]
        return root

    def union(self, p: int, q: int) -> None:
        i = self.find(p)
        j = self.find(q)
        if i == j:
            return
        if self._id[i] < self._id[j]:
            self._id[i] += self._id[j]
            self._id[j] = i
        else:
            self._id[j] += self._id[i]
            self._id[i] = j
        self._count -= 1

    def size(self, p: int) -> int:
        return -self._id[self.find(p)]

    def connected(self, p: int, q: int) -> bool:
        return self.find(p) == self.find(q)