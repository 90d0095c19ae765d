"""Comparison and counting sorts, the Dutch national flag partition, and inversion counting."""

from __future__ import annotations

from typing import Any, Iterable

COUNTING_SORT_RANGE = 256


def sort_012(values: Iterable[int]) -> list[int]:
    """Arrange 0s, 1s and 2s in one pass (Dutch national flag).

    Any value other than 0 or 1 is treated like a 2 and moved to the end.
    """
    items = list(values)
    low = mid = 0
    high = len(items) - 1
    while mid <= high:
        if items[mid] == 0:
            items[low], items[mid] = items[mid], items[low]
            low += 1
            mid += 1
        elif items[mid] == 1:
            mid += 1
        else:
            items[mid], items[high] = items[high], items[mid]
            high -= 1
    return items


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sorted copy, repeatedly swapping adjacent elements that are out of order."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        for i in range(end):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sorted copy, inserting each element into the sorted prefix before it."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Sorted copy, bringing the smallest remaining element to the front each pass."""
    items = list(values)
    for i in range(len(items)):
        for j in range(i + 1, len(items)):
            if items[j] < items[i]:
                items[i], items[j] = items[j], items[i]
    return items


def counting_sort(values: Iterable[int]) -> list[int]:
    """Sorted copy of integers in the range 0 to 255 by counting occurrences."""
    items = list(values)
    counts = [0] * COUNTING_SORT_RANGE
    for value in items:
        if not 0 <= value < COUNTING_SORT_RANGE:
            raise ValueError(
                f"value {value} outside 0..{COUNTING_SORT_RANGE - 1}"
            )
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def _merge(left: list[Any], right: list[Any]) -> tuple[list[Any], int]:
    """Merge two sorted lists, counting pairs where a right element precedes a left one."""
    merged: list[Any] = []
    inversions = 0
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            inversions += len(left) - i
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, inversions


def _merge_sort_counting(items: list[Any]) -> tuple[list[Any], int]:
    if len(items) <= 1:
        return items, 0
    mid = (len(items) + 1) // 2
    left, left_count = _merge_sort_counting(items[:mid])
    right, right_count = _merge_sort_counting(items[mid:])
    merged, cross = _merge(left, right)
    return merged, left_count + right_count + cross


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Stable sorted copy by recursive halving and merging."""
    return _merge_sort_counting(list(values))[0]


def count_inversions(values: Iterable[Any]) -> int:
    """Number of pairs i < j with values[i] > values[j]."""
    return _merge_sort_counting(list(values))[1]


def _partition_last_pivot(items: list[Any], start: int, end: int) -> int:
    pivot = items[end]
    boundary = start - 1
    for j in range(start, end):
        if items[j] <= pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[end] = items[end], items[boundary + 1]
    return boundary + 1


def _partition_first_pivot(items: list[Any], low: int, high: int) -> int:
    pivot = items[low]
    left, right = low, high
    while left < right:
        while items[left] <= pivot and left < high:
            left += 1
        while right > low and items[right] > pivot:
            right -= 1
        if left < right:
            items[left], items[right] = items[right], items[left]
    items[low], items[right] = items[right], items[low]
    return right


def _quick_sort(values: Iterable[Any], partition) -> list[Any]:
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        split = partition(items, low, high)
        pending.append((low, split - 1))
        pending.append((split + 1, high))
    return items


def quick_sort_lomuto(values: Iterable[Any]) -> list[Any]:
    """Sorted copy by quicksort, partitioning around the last element."""
    return _quick_sort(values, _partition_last_pivot)


def quick_sort_hoare(values: Iterable[Any]) -> list[Any]:
    """Sorted copy by quicksort, partitioning around the first element from both ends."""
    return _quick_sort(values, _partition_first_pivot)