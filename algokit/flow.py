"""Maximum flow by Ford-Fulkerson with breadth-first augmenting paths."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Sequence


@dataclass
class FlowResult:
    """The maximum flow value and the augmenting paths used, source to sink."""

    max_flow: int
    augmenting_paths: list[list[int]] = field(default_factory=list)


def _augmenting_path(
    residual: list[list[int]], source: int, sink: int
) -> tuple[int, list[int]]:
    """Bottleneck and parent links of a shortest path with spare capacity, or 0."""
    size = len(residual)
    parent = [-1] * size
    parent[source] = -2
    queue = deque([(source, None)])
    while queue:
        node, capacity = queue.popleft()
        for dest, spare in enumerate(residual[node]):
            if dest != node and parent[dest] == -1 and spare > 0:
                parent[dest] = node
                bottleneck = spare if capacity is None else min(capacity, spare)
                if dest == sink:
                    return bottleneck, parent
                queue.append((dest, bottleneck))
    return 0, parent


def ford_fulkerson(
    capacity: Sequence[Sequence[int]], source: int, sink: int
) -> FlowResult:
    """Maximum flow from ``source`` to ``sink`` in a capacity matrix.

    ``capacity[u][v]`` is the capacity of the edge from ``u`` to ``v``.
    """
    residual = [list(row) for row in capacity]
    size = len(residual)
    if any(len(row) != size for row in residual):
        raise ValueError("capacity matrix must be square")
    if any(value < 0 for row in residual for value in row):
        raise ValueError("capacities must not be negative")
    for vertex in (source, sink):
        if not 0 <= vertex < size:
            raise IndexError(f"vertex {vertex} outside 0..{size - 1}")

    result = FlowResult(0)
    while True:
        bottleneck, parent = _augmenting_path(residual, source, sink)
        if not bottleneck:
            return result
        result.max_flow += bottleneck
        path = [sink]
        node = sink
        while node != source:
            previous = parent[node]
            residual[node][previous] += bottleneck
            residual[previous][node] -= bottleneck
            node = previous
            path.append(node)
        path.reverse()
        result.augmenting_paths.append(path)