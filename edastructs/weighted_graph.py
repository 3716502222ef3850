"""Undirected graphs whose edges carry a value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Edge:
    """An undirected edge v-w carrying ``weight``; edges compare by weight."""

    v: int
    w: int
    weight: Any

    def either(self) -> int:
        """One of the two endpoints."""
        return self.v

    def other(self, vertex: int) -> int:
        """The endpoint that is not ``vertex``."""
        return self.w if vertex == self.v else self.v

    def __lt__(self, other: Edge) -> bool:
        return self.weight < other.weight

    def __gt__(self, other: Edge) -> bool:
        return self.weight > other.weight

    def __str__(self) -> str:
        return f"({self.v}, {self.w}, {self.weight})"


class WeightedGraph:
    """An undirected weighted graph on vertices 0 .. vertices-1."""

    def __init__(self, vertices: int) -> None:
        self.vertices = vertices
        self.edges = 0
        self._adj: list[list[Edge]] = [[] for _ in range(vertices)]

    def _check(self, v: int) -> None:
        if not 0 <= v < self.vertices:
            raise ValueError(f"vertex {v} does not exist")

    def add_edge(self, edge: Edge) -> None:
        v = edge.either()
        w = edge.other(v)
        self._check(v)
        self._check(w)
        self.edges += 1
        self._adj[v].append(edge)
        self._adj[w].append(edge)

    def adj(self, v: int) -> list[Edge]:
        """Edges touching ``v`` in the order they were added."""
        self._check(v)
        return list(self._adj[v])

    def __str__(self) -> str:
        lines = [f"{self.vertices} vertices, {self.edges} edges\n"]
        for v, edges in enumerate(self._adj):
            lines.append(f"{v}: " + "".join(f"{e} " for e in edges) + "\n")
        return "".join(lines)