"""Disjoint-set union with path compression and union by rank."""

from __future__ import annotations


class UnionFind:
    """A partition of the integers ``0 .. size - 1`` into disjoint sets.

    ``len()`` gives the number of sets currently kept.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))
        self._rank = [0] * size
        self._size = [1] * size
        self._sets = size

    def _check(self, i: int) -> None:
        if not 0 <= i < len(self._parent):
            raise IndexError(f"element {i} outside 0..{len(self._parent) - 1}")

    def find(self, i: int) -> int:
        """Representative of the set holding ``i``, compressing the path to it."""
        self._check(i)
        root = i
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[i] != root:
            self._parent[i], i = root, self._parent[i]
        return root

    def same_set(self, i: int, j: int) -> bool:
        """Whether ``i`` and ``j`` belong to the same set."""
        return self.find(i) == self.find(j)

    def set_size(self, i: int) -> int:
        """Number of elements in the set holding ``i``."""
        return self._size[self.find(i)]

    def union(self, i: int, j: int) -> None:
        """Merge the sets holding ``i`` and ``j``; nothing happens if they are one set."""
        x, y = self.find(i), self.find(j)
        if x == y:
            return
        if self._rank[x] > self._rank[y]:
            x, y = y, x
        self._parent[x] = y
        if self._rank[x] == self._rank[y]:
            self._rank[y] += 1
        self._size[y] += self._size[x]
        self._sets -= 1

    def __len__(self) -> int:
        return self._sets