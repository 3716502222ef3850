"""Counting the shortest routes from home (vertex 0) to school (the last vertex)."""

from __future__ import annotations

import math

from edastructs.index_pq import IndexPQ
from edastructs.weighted_graph import Edge, WeightedGraph


class SchoolRoute:
    """A map of crossings joined by two-way roads with a positive cost each."""

    def __init__(self, vertices: int) -> None:
        self._graph = WeightedGraph(vertices)

    def add_road(self, origin: int, destination: int, cost: int) -> None:
        if cost <= 0:
            raise ValueError("road costs must be positive")
        self._graph.add_edge(Edge(origin, destination, cost))

    def count_shortest_paths(self) -> int:
        """Number of distinct cheapest routes from vertex 0 to the last vertex."""
        n = self._graph.vertices
        if n == 0:
            raise ValueError("the map has no crossings")
        dist = [math.inf] * n
        ways = [0] * n
        dist[0] = 0
        ways[0] = 1
        pq = IndexPQ(n)
        pq.push(0, 0)
        while pq:
            v = pq.pop().elem
            for edge in self._graph.adj(v):
                w = edge.other(v)
                candidate = dist[v] + edge.weight
                if candidate <= dist[w]:
                    if candidate < dist[w]:
                        ways[w] = ways[v]
                    else:
                        ways[w] += ways[v]
                    dist[w] = candidate
                    pq.update(w, candidate)
        return ways[n - 1]