import pytest

from algokit.searching import (
    binary_search,
    frequency,
    linear_search,
    lower_bound,
    upper_bound,
)

SORTED = [10, 20, 40, 40, 40, 70, 100, 130, 560]
PLAIN = [10, 20, 40, 70, 100]


def test_bounds_of_forty():
    assert lower_bound(SORTED, 40) == 2
    assert upper_bound(SORTED, 40) == 5


@pytest.mark.parametrize("key", sorted(set(SORTED)))
def test_frequency_matches_count(key):
    assert frequency(SORTED, key) == SORTED.count(key)


@pytest.mark.parametrize("key", SORTED)
def test_binary_search_finds_members(key):
    assert binary_search(SORTED, key) is True


@pytest.mark.parametrize("key", [5, 41, 600])
def test_binary_search_rejects_missing(key):
    assert binary_search(SORTED, key) is False
    assert frequency(SORTED, key) == 0


@pytest.mark.parametrize("key", [5, 15, 40, 99, 1000])
def test_lower_bound_partitions(key):
    index = lower_bound(SORTED, key)
    assert all(v < key for v in SORTED[:index])
    assert all(v >= key for v in SORTED[index:])


@pytest.mark.parametrize("index,key", list(enumerate(PLAIN)))
def test_linear_search_returns_index(index, key):
    assert linear_search(PLAIN, key) == index


def test_linear_search_missing_is_none():
    assert linear_search(PLAIN, 55) is None