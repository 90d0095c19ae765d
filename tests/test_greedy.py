import pytest

from algokit.greedy import (
    fractional_knapsack,
    job_sequencing,
    max_activities,
    optimal_merge_cost,
)


def test_optimal_merge_source_example():
    assert optimal_merge_cost([2, 4, 7, 9, 12]) == 74


def test_optimal_merge_order_independent():
    assert optimal_merge_cost([12, 9, 7, 4, 2]) == optimal_merge_cost([2, 4, 7, 9, 12])


def test_optimal_merge_single_file_costs_nothing():
    assert optimal_merge_cost([5]) == optimal_merge_cost([])


def test_activities_disjoint_all_taken():
    intervals = [(5, 6), (1, 2), (3, 4)]
    assert max_activities(intervals) == len(intervals)


def test_activities_touching_allowed():
    intervals = [(1, 2), (2, 3), (3, 4)]
    assert max_activities(intervals) == len(intervals)


def test_activities_all_overlapping():
    assert max_activities([(1, 10), (2, 9), (3, 8)]) == 1


def test_activities_bounded_and_order_independent():
    intervals = [(1, 4), (3, 5), (0, 6), (5, 7), (3, 9), (5, 9), (6, 10), (8, 11)]
    result = max_activities(intervals)
    assert 1 <= result <= len(intervals)
    assert max_activities(list(reversed(intervals))) == result


def test_activities_empty():
    assert max_activities([]) == max_activities(iter(()))
    assert not max_activities([])


def test_fractional_knapsack_everything_fits():
    items = [(60, 10), (100, 20), (120, 30)]
    assert fractional_knapsack(items, 100) == pytest.approx(sum(p for p, _ in items))


def test_fractional_knapsack_takes_fraction():
    assert fractional_knapsack([(10, 4)], 2) == pytest.approx(5.0)


def test_fractional_knapsack_monotonic_and_bounded():
    items = [(60, 10), (100, 20), (120, 30)]
    values = [fractional_knapsack(items, c) for c in range(0, 70, 5)]
    assert values == sorted(values)
    assert values[-1] <= sum(p for p, _ in items)
    assert not values[0]


def test_fractional_knapsack_rejects_bad_input():
    with pytest.raises(ValueError):
        fractional_knapsack([(10, 0)], 5)
    with pytest.raises(ValueError):
        fractional_knapsack([(10, 2)], -1)


def test_job_sequencing_loose_deadlines():
    jobs = [(20, 5), (15, 5), (10, 5), (5, 5)]
    order, total = job_sequencing(jobs)
    assert sorted(order) == list(range(1, len(jobs) + 1))
    assert total == sum(p for p, _ in jobs)


def test_job_sequencing_single_slot_picks_best():
    jobs = [(20, 1), (50, 1), (30, 1)]
    order, total = job_sequencing(jobs)
    best = max(range(len(jobs)), key=lambda i: jobs[i][0])
    assert order == [best + 1]
    assert total == jobs[best][0]


def test_job_sequencing_profit_matches_order():
    jobs = [(100, 2), (19, 1), (27, 2), (25, 1), (15, 3)]
    order, total = job_sequencing(jobs)
    assert total == sum(jobs[j - 1][0] for j in order)
    assert len(set(order)) == len(order)
    for slot, job in enumerate(order):
        assert jobs[job - 1][1] >= 1


def test_job_sequencing_no_deadlines():
    assert job_sequencing([(10, 0), (5, 0)]) == ([], 0)