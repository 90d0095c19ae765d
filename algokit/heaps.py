"""Array-backed max-heaps, heap sort, and the k largest elements."""

from __future__ import annotations

import heapq
from typing import Any, Iterable, Iterator


def sift_down(values: list[Any], size: int, index: int) -> None:
    """Restore the max-heap property below ``index`` in the first ``size`` items, in place."""
    while True:
        largest = index
        left, right = 2 * index + 1, 2 * index + 2
        if left < size and values[left] > values[largest]:
            largest = left
        if right < size and values[right] > values[largest]:
            largest = right
        if largest == index:
            return
        values[index], values[largest] = values[largest], values[index]
        index = largest


def _heapify(items: list[Any]) -> None:
    size = len(items)
    for index in range(size // 2 - 1, -1, -1):
        sift_down(items, size, index)


def build_max_heap(values: Iterable[Any]) -> list[Any]:
    """A new list holding ``values`` arranged as a max-heap."""
    items = list(values)
    _heapify(items)
    return items


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Sorted copy in ascending order by heap sort."""
    items = build_max_heap(values)
    for end in range(len(items) - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        sift_down(items, end, 0)
    return items


def _sift_up(values: list[Any], index: int) -> None:
    item = values[index]
    while index > 0:
        parent = (index - 1) // 2
        if item <= values[parent]:
            break
        values[index] = values[parent]
        index = parent
    values[index] = item


class MaxHeap:
    """A max-heap stored in a list, largest element at the root."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items = build_max_heap(values)

    def push(self, key: Any) -> None:
        """Add ``key`` to the heap."""
        self._items.append(key)
        _sift_up(self._items, len(self._items) - 1)

    def pop_root(self) -> Any:
        """Remove and return the largest element."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        root = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            sift_down(self._items, len(self._items), 0)
        return root

    def remove(self, value: Any) -> None:
        """Remove one occurrence of ``value``; ValueError if it is absent."""
        try:
            index = self._items.index(value)
        except ValueError:
            raise ValueError(f"{value!r} is not in the heap") from None
        last = self._items.pop()
        if index == len(self._items):
            return
        self._items[index] = last
        parent = (index - 1) // 2
        if index > 0 and last > self._items[parent]:
            _sift_up(self._items, index)
        else:
            sift_down(self._items, len(self._items), index)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Elements in their array (level) order."""
        return iter(list(self._items))


def k_largest(values: Iterable[Any], k: int) -> list[Any]:
    """The ``k`` largest elements, largest first."""
    smallest_kept: list[Any] = []
    for value in values:
        heapq.heappush(smallest_kept, value)
        while len(smallest_kept) > max(k, 0):
            heapq.heappop(smallest_kept)
    result = [heapq.heappop(smallest_kept) for _ in range(len(smallest_kept))]
    result.reverse()
    return result