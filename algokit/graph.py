"""Adjacency-list graphs, traversals, articulation points, greedy colouring and bipartite checks."""

from __future__ import annotations

from collections import deque
from itertools import count
from typing import Any, Hashable, Iterable, Mapping


class Graph:
    """Undirected graph stored as adjacency lists; neighbours keep insertion order."""

    def __init__(self) -> None:
        self._adjacency: dict[Hashable, list[Hashable]] = {}

    def add_edge(self, u: Hashable, v: Hashable) -> None:
        """Connect ``u`` and ``v`` in both directions."""
        self._adjacency.setdefault(u, []).append(v)
        self._adjacency.setdefault(v, []).append(u)

    def neighbours(self, vertex: Hashable) -> list[Hashable]:
        """Neighbours of ``vertex`` in the order their edges were added."""
        return list(self._adjacency.get(vertex, ()))

    def bfs(self, source: Hashable) -> list[Hashable]:
        """Vertices reachable from ``source`` in breadth-first order."""
        visited = {source}
        order: list[Hashable] = []
        queue = deque([source])
        while queue:
            node = queue.popleft()
            order.append(node)
            for neighbour in self._adjacency.get(node, ()):
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return order

    def dfs(self, source: Hashable) -> list[Hashable]:
        """Vertices reachable from ``source`` in depth-first (preorder) order."""
        visited = {source}
        order = [source]
        pending = [iter(self._adjacency.get(source, ()))]
        while pending:
            for neighbour in pending[-1]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    order.append(neighbour)
                    pending.append(iter(self._adjacency.get(neighbour, ())))
                    break
            else:
                pending.pop()
        return order


class WeightedGraph:
    """Graph whose edges carry weights; edges may be one-way or two-way."""

    def __init__(self) -> None:
        self._adjacency: dict[Hashable, list[tuple[Hashable, Any]]] = {}

    def add_edge(
        self, u: Hashable, v: Hashable, weight: Any, bidirectional: bool = True
    ) -> None:
        """Add an edge from ``u`` to ``v``, and back again when ``bidirectional``."""
        self._adjacency.setdefault(u, []).append((v, weight))
        if bidirectional:
            self._adjacency.setdefault(v, []).append((u, weight))

    def adjacency(self) -> dict[Hashable, list[tuple[Hashable, Any]]]:
        """A copy of the adjacency lists: vertex to ``(neighbour, weight)`` pairs.

        Only vertices with at least one outgoing edge appear as keys.
        """
        return {vertex: list(edges) for vertex, edges in self._adjacency.items()}


def _check_vertex(vertex: int, vertex_count: int) -> None:
    if not 0 <= vertex < vertex_count:
        raise IndexError(f"vertex {vertex} outside 0..{vertex_count - 1}")


def _adjacency_lists(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    lists: list[list[int]] = [[] for _ in range(vertex_count)]
    for u, v in edges:
        _check_vertex(u, vertex_count)
        _check_vertex(v, vertex_count)
        lists[u].append(v)
        lists[v].append(u)
    return lists


def articulation_points(
    vertex_count: int, adjacency: Mapping[int, Iterable[int]]
) -> list[int]:
    """Vertices whose removal disconnects their component, by Tarjan's method, ascending."""
    discovery = [-1] * vertex_count
    low = [-1] * vertex_count
    parent = [-1] * vertex_count
    points: set[int] = set()
    clock = count()

    def visit(u: int) -> None:
        discovery[u] = low[u] = next(clock)
        children = 0
        for v in adjacency.get(u, ()):
            _check_vertex(v, vertex_count)
            if discovery[v] == -1:
                children += 1
                parent[v] = u
                visit(v)
                low[u] = min(low[u], low[v])
                if parent[u] == -1 and children > 1:
                    points.add(u)
                if parent[u] != -1 and low[v] >= discovery[u]:
                    points.add(u)
            elif v != parent[u]:
                low[u] = min(low[u], discovery[v])

    for vertex in range(vertex_count):
        if discovery[vertex] == -1:
            visit(vertex)
    return sorted(points)


def greedy_coloring(
    vertex_count: int, edges: Iterable[tuple[int, int]]
) -> tuple[int, list[int]]:
    """Colour vertices in index order with the smallest colour no neighbour has.

    Returns the number of colours used and the colour of each vertex.
    """
    adjacency = _adjacency_lists(vertex_count, edges)
    colors = [-1] * vertex_count
    if vertex_count:
        colors[0] = 0
    for vertex in range(1, vertex_count):
        taken = {colors[n] for n in adjacency[vertex] if colors[n] != -1}
        colors[vertex] = next(c for c in count() if c not in taken)
    used = max(colors) + 1 if colors else 0
    return used, colors


def is_bipartite(vertex_count: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Whether the graph can be coloured with two colours so no edge joins equal colours."""
    adjacency = _adjacency_lists(vertex_count, edges)
    color = [-1] * vertex_count
    for start in range(vertex_count):
        if color[start] != -1:
            continue
        color[start] = 1
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for neighbour in adjacency[node]:
                if color[neighbour] == -1:
                    color[neighbour] = 1 - color[node]
                    queue.append(neighbour)
                elif color[neighbour] == color[node]:
                    return False
    return True