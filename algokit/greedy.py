"""Greedy algorithms: activity selection, fractional knapsack, job sequencing, optimal merge."""

from __future__ import annotations

import heapq
from typing import Iterable


def max_activities(intervals: Iterable[tuple[int, int]]) -> int:
    """Most ``(start, end)`` activities one person can do, chosen by earliest end.

    An activity may begin exactly when the previous one ends.
    """
    ordered = sorted(intervals, key=lambda interval: interval[1])
    if not ordered:
        return 0
    count = 1
    finish = ordered[0][1]
    for start, end in ordered[1:]:
        if start >= finish:
            finish = end
            count += 1
    return count


def fractional_knapsack(items: Iterable[tuple[float, float]], capacity: float) -> float:
    """Best profit from ``(profit, weight)`` items when fractions of an item may be taken."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    goods = [(float(profit), float(weight)) for profit, weight in items]
    if any(weight <= 0 for _, weight in goods):
        raise ValueError("weights must be positive")
    goods.sort(key=lambda good: good[0] / good[1], reverse=True)
    total = 0.0
    room = float(capacity)
    for profit, weight in goods:
        if weight <= room:
            total += profit
            room -= weight
        elif room > 0:
            total += profit * room / weight
            room = 0.0
    return total


def job_sequencing(jobs: Iterable[tuple[int, int]]) -> tuple[list[int], int]:
    """Schedule ``(profit, deadline)`` unit-time jobs for the most profit.

    Jobs are taken by falling profit, each into the latest free slot before
    its deadline. Returns the 1-based job numbers in slot order and the
    total profit.
    """
    items = list(jobs)
    count = len(items)
    by_profit = sorted(range(count), key=lambda i: items[i][0], reverse=True)
    slots: list[int | None] = [None] * count
    total = 0
    for index in by_profit:
        profit, deadline = items[index]
        for slot in range(min(count, deadline) - 1, -1, -1):
            if slots[slot] is None:
                slots[slot] = index + 1
                total += profit
                break
    return [job for job in slots if job is not None], total


def optimal_merge_cost(sizes: Iterable[int]) -> int:
    """Least total work to merge files of the given sizes, always merging the two smallest."""
    heap = list(sizes)
    heapq.heapify(heap)
    total = 0
    while len(heap) > 1:
        merged = heapq.heappop(heap) + heapq.heappop(heap)
        total += merged
        heapq.heappush(heap, merged)
    return total