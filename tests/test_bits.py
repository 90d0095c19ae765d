import pytest

from algokit.bits import (
    clear_bit,
    clear_bit_range,
    clear_last_bits,
    count_set_bits,
    count_set_bits_fast,
    get_bit,
    set_bit,
    update_bit,
)


def test_documented_examples():
    assert clear_last_bits(15, 2) == 12
    assert clear_bit_range(31, 1, 3) == 17


def test_fifteen_has_four_set_bits():
    assert count_set_bits(15) == 4
    assert count_set_bits_fast(15) == 4


@pytest.mark.parametrize("n", range(0, 300, 7))
def test_counts_match_binary_representation(n):
    expected = bin(n).count("1")
    assert count_set_bits(n) == expected
    assert count_set_bits_fast(n) == expected


@pytest.mark.parametrize("n", [0, 1, 6, 37, 255, 1024])
@pytest.mark.parametrize("position", [0, 1, 3, 8])
def test_set_and_clear_round_trip(n, position):
    assert get_bit(set_bit(n, position), position) == 1
    assert get_bit(clear_bit(n, position), position) == 0
    assert clear_bit(set_bit(n, position), position) == clear_bit(n, position)


@pytest.mark.parametrize("n", [0, 9, 100, 511])
@pytest.mark.parametrize("position", [0, 2, 5])
def test_update_matches_set_and_clear(n, position):
    assert update_bit(n, position, 1) == set_bit(n, position)
    assert update_bit(n, position, 0) == clear_bit(n, position)


@pytest.mark.parametrize("n", [0, 13, 255, 1000])
@pytest.mark.parametrize("count", [0, 1, 4, 9])
def test_clear_last_bits_shifts_out_low_bits(n, count):
    assert clear_last_bits(n, count) == (n >> count) << count


def test_clear_range_clears_only_the_range():
    n = 0b111111111
    result = clear_bit_range(n, 2, 5)
    assert [get_bit(result, p) for p in range(2, 6)] == [0, 0, 0, 0]
    assert all(get_bit(result, p) == get_bit(n, p) for p in (0, 1, 6, 7, 8))


def test_errors():
    with pytest.raises(ValueError):
        get_bit(5, -1)
    with pytest.raises(ValueError):
        update_bit(5, 1, 2)
    with pytest.raises(ValueError):
        count_set_bits(-3)
    with pytest.raises(ValueError):
        count_set_bits_fast(-3)
    with pytest.raises(ValueError):
        clear_bit_range(31, 3, 1)