"""Directed graphs and the searches, orderings and components built on them."""

from __future__ import annotations

from collections import deque
from typing import Iterable


class Digraph:
    """A directed graph on vertices 0 .. vertices-1, kept as adjacency lists."""

    def __init__(self, vertices: int) -> None:
        self.vertices = vertices
        self.edges = 0
        self._adj: list[list[int]] = [[] for _ in range(vertices)]

    def _check(self, v: int) -> None:
        if not 0 <= v < self.vertices:
            raise ValueError(f"vertex {v} does not exist")

    def add_edge(self, v: int, w: int) -> None:
        """Add the directed edge v->w."""
        self._check(v)
        self._check(w)
        self.edges += 1
        self._adj[v].append(w)

    def has_edge(self, u: int, v: int) -> bool:
        self._check(u)
        return v in self._adj[u]

    def adj(self, v: int) -> list[int]:
        """Successors of ``v`` in the order their edges were added."""
        self._check(v)
        return list(self._adj[v])

    def reverse(self) -> Digraph:
        """The graph with every edge turned around."""
        reversed_graph = Digraph(self.vertices)
        for v, successors in enumerate(self._adj):
            for w in successors:
                reversed_graph.add_edge(w, v)
        return reversed_graph

    def __str__(self) -> str:
        lines = [f"{self.vertices} vertices, {self.edges} edges\n"]
        for v, successors in enumerate(self._adj):
            lines.append(f"{v}: " + "".join(f"{w} " for w in successors) + "\n")
        return "".join(lines)


class DepthFirstDirectedPaths:
    """Paths from a source vertex found by depth-first search."""

    def __init__(self, graph: Digraph, source: int) -> None:
        self._source = source
        self._marked = [False] * graph.vertices
        self._edge_to = [0] * graph.vertices
        self._marked[source] = True
        stack = [(source, iter(graph.adj(source)))]
        while stack:
            v, successors = stack[-1]
            for w in successors:
                if not self._marked[w]:
                    self._marked[w] = True
                    self._edge_to[w] = v
                    stack.append((w, iter(graph.adj(w))))
                    break
            else:
                stack.pop()

    def has_path_to(self, v: int) -> bool:
        return self._marked[v]

    def path_to(self, v: int) -> list[int]:
        """Vertices from the source to ``v``; empty if unreachable."""
        if not self.has_path_to(v):
            return []
        path = [v]
        while v != self._source:
            v = self._edge_to[v]
            path.append(v)
        path.reverse()
        return path


class BreadthFirstDirectedPaths:
    """Shortest paths (in edges) from one source vertex or from several."""

    def __init__(self, graph: Digraph, sources: int | Iterable[int]) -> None:
        if isinstance(sources, int):
            sources = [sources]
        self._marked = [False] * graph.vertices
        self._edge_to = [0] * graph.vertices
        self._dist_to = [0] * graph.vertices
        queue: deque[int] = deque()
        for s in sources:
            self._dist_to[s] = 0
            self._marked[s] = True
            queue.append(s)
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
        """A shortest path from the nearest source to ``v``; empty if unreachable."""
        if not self.has_path_to(v):
            return []
        path = [v]
        while self._dist_to[v] != 0:
            v = self._edge_to[v]
            path.append(v)
        path.reverse()
        return path

    def distance(self, v: int) -> int:
        """Edges on the shortest path to ``v`` (0 if unreachable)."""
        return self._dist_to[v]


class DepthFirstOrder:
    """Preorder and postorder numbering of a depth-first walk of the whole graph."""

    def __init__(self, graph: Digraph) -> None:
        n = graph.vertices
        marked = [False] * n
        self._pre = [0] * n
        self._post = [0] * n
        self._preorder: list[int] = []
        self._postorder: list[int] = []
        for root in range(n):
            if marked[root]:
                continue
            marked[root] = True
            self._enter(root)
            stack = [(root, iter(graph.adj(root)))]
            while stack:
                v, successors = stack[-1]
                for w in successors:
                    if not marked[w]:
                        marked[w] = True
                        self._enter(w)
                        stack.append((w, iter(graph.adj(w))))
                        break
                else:
                    stack.pop()
                    self._post[v] = len(self._postorder)
                    self._postorder.append(v)

    def _enter(self, v: int) -> None:
        self._pre[v] = len(self._preorder)
        self._preorder.append(v)

    def prenum(self, v: int) -> int:
        return self._pre[v]

    def postnum(self, v: int) -> int:
        return self._post[v]

    @property
    def pre_order(self) -> list[int]:
        return list(self._preorder)

    @property
    def post_order(self) -> list[int]:
        return list(self._postorder)

    @property
    def reverse_post(self) -> list[int]:
        return self._postorder[::-1]


class DirectedCycle:
    """Finds a directed cycle, if the graph has one."""

    def __init__(self, graph: Digraph) -> None:
        n = graph.vertices
        marked = [False] * n
        on_stack = [False] * n
        edge_to = [0] * n
        self._cycle: list[int] = []
        for root in range(n):
            if self._cycle:
                break
            if marked[root]:
                continue
            marked[root] = on_stack[root] = True
            stack = [(root, iter(graph.adj(root)))]
            while stack and not self._cycle:
                v, successors = stack[-1]
                for w in successors:
                    if not marked[w]:
                        edge_to[w] = v
                        marked[w] = on_stack[w] = True
                        stack.append((w, iter(graph.adj(w))))
                        break
                    if on_stack[w]:
                        self._cycle = self._trace(edge_to, v, w)
                        break
                else:
                    on_stack[v] = False
                    stack.pop()

    @staticmethod
    def _trace(edge_to: list[int], v: int, w: int) -> list[int]:
        cycle = []
        x = v
        while x != w:
            cycle.append(x)
            x = edge_to[x]
        cycle.append(w)
        cycle.append(v)
        cycle.reverse()
        return cycle

    def has_cycle(self) -> bool:
        return bool(self._cycle)

    @property
    def cycle(self) -> list[int]:
        """The cycle found, first vertex repeated at the end; empty if none."""
        return list(self._cycle)


class Topological:
    """A topological order of the vertices, which exists when there is no cycle."""

    def __init__(self, graph: Digraph) -> None:
        self._has_order = not DirectedCycle(graph).has_cycle()
        self._order = DepthFirstOrder(graph).reverse_post if self._has_order else []

    def has_order(self) -> bool:
        return self._has_order

    @property
    def order(self) -> list[int]:
        return list(self._order)


class KosarajuSharirSCC:
    """Strongly connected components of a directed graph."""

    def __init__(self, graph: Digraph) -> None:
        marked = [False] * graph.vertices
        self._id = [0] * graph.vertices
        self._count = 0
        for start in DepthFirstOrder(graph.reverse()).reverse_post:
            if marked[start]:
                continue
            marked[start] = True
            stack = [start]
            while stack:
                v = stack.pop()
                self._id[v] = self._count
                for w in graph.adj(v):
                    if not marked[w]:
                        marked[w] = True
                        stack.append(w)
            self._count += 1

    @property
    def count(self) -> int:
        """Number of strongly connected components."""
        return self._count

    def strongly_connected(self, v: int, w: int) -> bool:
        return self._id[v] == self._id[w]

    def id(self, v: int) -> int:
        return self._id[v]