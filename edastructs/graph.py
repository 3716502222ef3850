"""Undirected graphs and depth- and breadth-first searches over them."""

from __future__ import annotations

from collections import deque


class Graph:
    """An undirected graph on vertices 0 .. vertices-1, kept as adjacency lists."""

    def __init__(self, vertices: int) -> None:
        self.vertices = vertices
        self.edges = 0
        self._adj: list[list[int]] = [[] for _ in range(vertices)]

    def _check(self, v: int) -> None:
        if not 0 <= v < self.vertices:
            raise ValueError(f"vertex {v} does not exist")

    def add_edge(self, v: int, w: int) -> None:
        self._check(v)
        self._check(w)
        self.edges += 1
        self._adj[v].append(w)
        self._adj[w].append(v)

    def adj(self, v: int) -> list[int]:
        """Neighbours of ``v`` in the order their edges were added."""
        self._check(v)
        return list(self._adj[v])

    def __str__(self) -> str:
        lines = [f"{self.vertices} vertices, {self.edges} edges\n"]
        for v, neighbours in enumerate(self._adj):
            lines.append(f"{v}: " + "".join(f"{w} " for w in neighbours) + "\n")
        return "".join(lines)


def _depth_first(graph: Graph, source: int, marked: list[bool],
                 edge_to: list[int]) -> int:
    """Visit everything reachable from ``source``; return how many were visited."""
    marked[source] = True
    count = 1
    stack = [(source, iter(graph.adj(source)))]
    while stack:
        v, neighbours = stack[-1]
        for w in neighbours:
            if not marked[w]:
                marked[w] = True
                edge_to[w] = v
                count += 1
                stack.append((w, iter(graph.adj(w))))
                break
        else:
            stack.pop()
    return count


def _trace(edge_to: list[int], source: int, v: int) -> list[int]:
    path = [v]
    while v != source:
        v = edge_to[v]
        path.append(v)
    path.reverse()
    return path


class DepthFirstSearch:
    """The vertices connected to a source vertex."""

    def __init__(self, graph: Graph, source: int) -> None:
        self._marked = [False] * graph.vertices
        self.count = _depth_first(graph, source, self._marked, [0] * graph.vertices)

    def marked(self, v: int) -> bool:
        return self._marked[v]


class DepthFirstPaths:
    """Paths from a source vertex found by depth-first search."""

    def __init__(self, graph: Graph, source: int) -> None:
        self._source = source
        self._marked = [False] * graph.vertices
        self._edge_to = [0] * graph.vertices
        _depth_first(graph, source, self._marked, self._edge_to)

    def has_path_to(self, v: int) -> bool:
        return self._marked[v]

    def path_to(self, v: int) -> list[int]:
        """Vertices from the source to ``v``; empty if unreachable."""
        if not self.has_path_to(v):
            return []
        return _trace(self._edge_to, self._source, v)


class BreadthFirstPaths:
    """Shortest paths (in edges) from a source vertex."""

    def __init__(self, graph: Graph, source: int) -> None:
        self._source = source
        self._marked = [False] * graph.vertices
        self._edge_to = [0] * graph.vertices
        self._dist_to = [0] * graph.vertices
        self._marked[source] = True
        queue = deque([source])
        while queue:
            v = queue.popleft()
            for w in graph.adj(v):
                if not self._marked[w]:
                    self._edge_to[w] = v
                    self._dist_to[w] = self._dist_to[v] + 1
                    self._marked[w] = True
                    queue.append(w)

    def has_path_to(self, v: int) -> bool:
        return self._marked[v]

    def path_to(self, v: int) -> list[int]:
        """A shortest path from the source to ``v``; empty if unreachable."""
        if not self.has_path_to(v):
            return []
        return _trace(self._edge_to, self._source, v)

    def distance(self, v: int) -> int:
        """Edges on the shortest path to ``v`` (0 if unreachable)."""
        return self._dist_to[v]