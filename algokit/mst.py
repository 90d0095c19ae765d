"""Minimum spanning trees by Kruskal's and Prim's methods."""

from __future__ import annotations

import heapq
from typing import Iterable, NamedTuple, Sequence


class Edge(NamedTuple):
    """A weighted edge between two vertices."""

    src: int
    dest: int
    weight: float


def _edges(vertex_count: int, edges: Iterable[Sequence]) -> list[Edge]:
    result = []
    for src, dest, weight in edges:
        for vertex in (src, dest):
            if not 0 <= vertex < vertex_count:
                raise IndexError(f"vertex {vertex} outside 0..{vertex_count - 1}")
        result.append(Edge(src, dest, weight))
    return result


def _find(parent: list[int], i: int) -> int:
    root = i
    while parent[root] != root:
        root = parent[root]
    while parent[i] != root:
        parent[i], i = root, parent[i]
    return root


def kruskal(vertex_count: int, edges: Iterable[Sequence]) -> list[Edge]:
    """Edges of a minimum spanning tree, lightest first, each with ``src < dest``.

    ``edges`` holds ``(src, dest, weight)`` triples. Raises ValueError when
    the graph is not connected.
    """
    ordered = sorted(_edges(vertex_count, edges), key=lambda edge: edge.weight)
    parent = list(range(vertex_count))
    needed = max(vertex_count - 1, 0)
    tree: list[Edge] = []
    for edge in ordered:
        if len(tree) == needed:
            break
        a, b = _find(parent, edge.src), _find(parent, edge.dest)
        if a != b:
            tree.append(
                Edge(min(edge.src, edge.dest), max(edge.src, edge.dest), edge.weight)
            )
            parent[a] = b
    if len(tree) < needed:
        raise ValueError("graph is not connected")
    return tree


def kruskal_weight(vertex_count: int, edges: Iterable[Sequence]) -> float:
    """Total weight of a minimum spanning forest of ``(x, y, weight)`` edges."""
    ordered = sorted(
        (edge.weight, edge.src, edge.dest) for edge in _edges(vertex_count, edges)
    )
    parent = list(range(vertex_count))
    rank = [1] * vertex_count
    total = 0
    for weight, x, y in ordered:
        a, b = _find(parent, x), _find(parent, y)
        if a == b:
            continue
        if rank[a] < rank[b]:
            a, b = b, a
        parent[b] = a
        rank[a] += rank[b]
        total += weight
    return total


def prim_matrix(graph: Sequence[Sequence[float]]) -> list[Edge]:
    """Minimum spanning tree of an adjacency matrix, where 0 means no edge.

    Returns one edge ``(parent, vertex, weight)`` for every vertex but 0,
    in vertex order. Raises ValueError when the graph is not connected.
    """
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("adjacency matrix must be square")
    if size == 0:
        return []
    infinity = float("inf")
    distance = [infinity] * size
    parent = [-1] * size
    in_tree = [False] * size
    distance[0] = 0
    for _ in range(size):
        candidates = [v for v in range(size) if not in_tree[v]]
        nearest = min(candidates, key=lambda v: distance[v])
        if distance[nearest] == infinity:
            raise ValueError("graph is not connected")
        in_tree[nearest] = True
        for v, weight in enumerate(graph[nearest]):
            if weight and not in_tree[v] and weight < distance[v]:
                distance[v] = weight
                parent[v] = nearest
    return [Edge(parent[v], v, graph[v][parent[v]]) for v in range(1, size)]


def prim_weight(vertex_count: int, edges: Iterable[Sequence]) -> float:
    """Total weight of a minimum spanning tree grown from vertex 0 with a priority queue.

    Only the component containing vertex 0 is spanned.
    """
    adjacency: list[list[tuple[int, float]]] = [[] for _ in range(vertex_count)]
    for edge in _edges(vertex_count, edges):
        adjacency[edge.src].append((edge.dest, edge.weight))
        adjacency[edge.dest].append((edge.src, edge.weight))
    if vertex_count == 0:
        return 0
    visited = [False] * vertex_count
    queue: list[tuple[float, int]] = [(0, 0)]
    total = 0
    while queue:
        weight, vertex = heapq.heappop(queue)
        if visited[vertex]:
            continue
        visited[vertex] = True
        total += weight
        for neighbour, edge_weight in adjacency[vertex]:
            if not visited[neighbour]:
                heapq.heappush(queue, (edge_weight, neighbour))
    return total