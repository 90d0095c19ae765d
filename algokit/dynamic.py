"""Dynamic-programming and related classics: knapsack, subset sums, LCS, rain water, TSP."""

from __future__ import annotations

from itertools import pairwise, permutations
from typing import Sequence


def knapsack_01(profits: Sequence[int], weights: Sequence[int], capacity: int) -> int:
    """Best total profit choosing each item at most once within ``capacity``.

    Returns 0 for a non-positive capacity, no items, or mismatched lists.
    """
    if capacity <= 0 or not profits or len(weights) != len(profits):
        return 0
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")
    best = [0] * (capacity + 1)
    for profit, weight in zip(profits, weights):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], profit + best[room - weight])
    return best[capacity]


def subset_sum(values: Sequence[int], target: int) -> bool:
    """Whether some subset of ``values`` adds up to ``target``."""
    if target < 0 or any(value < 0 for value in values):
        raise ValueError("values and target must not be negative")
    reachable = [True] + [False] * target
    for value in values:
        for total in range(target, value - 1, -1):
            if reachable[total - value]:
                reachable[total] = True
    return reachable[target]


def can_partition_equally(values: Sequence[int]) -> bool:
    """Whether ``values`` splits into two parts of equal sum."""
    total = sum(values)
    if total % 2:
        return False
    return subset_sum(values, total // 2)


def _lcs_table(first: Sequence, second: Sequence) -> list[list[int]]:
    table = [[0] * (len(second) + 1) for _ in range(len(first) + 1)]
    for i, a in enumerate(first, 1):
        for j, b in enumerate(second, 1):
            if a == b:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i - 1][j], table[i][j - 1])
    return table


def longest_common_subsequence(first: str, second: str) -> str:
    """One longest common subsequence of two strings."""
    table = _lcs_table(first, second)
    chars: list[str] = []
    i, j = len(first), len(second)
    while i and j:
        if first[i - 1] == second[j - 1]:
            chars.append(first[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(chars))


def min_insertions_for_palindrome(text: str) -> int:
    """Fewest characters to insert to make ``text`` a palindrome."""
    return len(text) - _lcs_table(text, text[::-1])[-1][-1]


def trapped_water(heights: Sequence[int]) -> int:
    """Units of rain water held between bars of the given heights."""
    result = 0
    left_max = right_max = 0
    lo, hi = 0, len(heights) - 1
    while lo <= hi:
        if heights[lo] < heights[hi]:
            if heights[lo] > left_max:
                left_max = heights[lo]
            else:
                result += left_max - heights[lo]
            lo += 1
        else:
            if heights[hi] > right_max:
                right_max = heights[hi]
            else:
                result += right_max - heights[hi]
            hi -= 1
    return result


def travelling_salesman(graph: Sequence[Sequence[int]], source: int) -> int:
    """Cost of the cheapest tour from ``source`` through every vertex and back."""
    size = len(graph)
    if not 0 <= source < size:
        raise IndexError(f"source {source} outside 0..{size - 1}")
    others = [vertex for vertex in range(size) if vertex != source]
    return min(
        sum(graph[a][b] for a, b in pairwise((source, *order, source)))
        for order in permutations(others)
    )