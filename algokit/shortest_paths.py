"""Single-source and all-pairs shortest paths: Bellman-Ford, Dijkstra and Floyd-Warshall."""

from __future__ import annotations

import heapq
import math
from itertools import count
from typing import Any, Hashable, Iterable, Mapping, Sequence


class NegativeCycleError(ValueError):
    """Raised when a graph holds a cycle of negative total weight."""


def bellman_ford(
    vertex_count: int, edges: Iterable[Sequence], source: int = 0
) -> list[float]:
    """Distance from ``source`` to every vertex over directed ``(src, dst, weight)`` edges.

    Unreachable vertices get ``math.inf``. Raises NegativeCycleError when a
    negative cycle is reachable from ``source``.
    """
    if not 0 <= source < vertex_count:
        raise IndexError(f"source {source} outside 0..{vertex_count - 1}")
    edge_list = []
    for src, dst, weight in edges:
        for vertex in (src, dst):
            if not 0 <= vertex < vertex_count:
                raise IndexError(f"vertex {vertex} outside 0..{vertex_count - 1}")
        edge_list.append((src, dst, weight))

    distance: list[float] = [math.inf] * vertex_count
    distance[source] = 0
    updated = False
    for _ in range(vertex_count - 1):
        updated = False
        for u, v, weight in edge_list:
            if distance[u] != math.inf and distance[u] + weight < distance[v]:
                distance[v] = distance[u] + weight
                updated = True
        if not updated:
            break

    if updated and any(
        distance[u] != math.inf and distance[u] + weight < distance[v]
        for u, v, weight in edge_list
    ):
        raise NegativeCycleError("graph has a negative weight cycle")
    return distance


def dijkstra(
    adjacency: Mapping[Hashable, Iterable[tuple[Hashable, Any]]], source: Hashable
) -> dict[Hashable, float]:
    """Distance from ``source`` to every vertex, keyed in ascending vertex order.

    ``adjacency`` maps a vertex to its ``(neighbour, weight)`` pairs, as
    ``WeightedGraph.adjacency()`` returns. Unreachable vertices get
    ``math.inf``; negative weights raise ValueError.
    """
    vertices = {source, *adjacency}
    for edges in adjacency.values():
        vertices.update(neighbour for neighbour, _ in edges)
    distance: dict[Hashable, float] = {vertex: math.inf for vertex in vertices}
    distance[source] = 0
    tiebreak = count()
    queue: list[tuple[float, int, Hashable]] = [(0, next(tiebreak), source)]
    while queue:
        dist, _, node = heapq.heappop(queue)
        if dist > distance[node]:
            continue
        for neighbour, weight in adjacency.get(node, ()):
            if weight < 0:
                raise ValueError("weights must not be negative")
            candidate = dist + weight
            if candidate < distance[neighbour]:
                distance[neighbour] = candidate
                heapq.heappush(queue, (candidate, next(tiebreak), neighbour))
    return dict(sorted(distance.items()))


def floyd_warshall(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    """Shortest distances between every pair of vertices of a weight matrix.

    ``matrix[i][j]`` is the direct cost from ``i`` to ``j``; use ``math.inf``
    where there is no edge. The input is left unchanged.
    """
    dist = [list(row) for row in matrix]
    size = len(dist)
    if any(len(row) != size for row in dist):
        raise ValueError("distance matrix must be square")
    for k in range(size):
        row_k = dist[k]
        for row in dist:
            through = row[k]
            for j in range(size):
                if row[j] > through + row_k[j]:
                    row[j] = through + row_k[j]
    return dist