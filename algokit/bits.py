"""Single-bit operations and set-bit counting on integers."""

from __future__ import annotations


def _check_position(position: int) -> None:
    if position < 0:
        raise ValueError("bit position must not be negative")


def get_bit(n: int, position: int) -> int:
    """The bit of ``n`` at ``position`` as 0 or 1."""
    _check_position(position)
    return 1 if n & (1 << position) else 0


def set_bit(n: int, position: int) -> int:
    """``n`` with the bit at ``position`` set."""
    _check_position(position)
    return n | (1 << position)


def clear_bit(n: int, position: int) -> int:
    """``n`` with the bit at ``position`` cleared."""
    _check_position(position)
    return n & ~(1 << position)


def update_bit(n: int, position: int, value: int) -> int:
    """``n`` with the bit at ``position`` replaced by ``value`` (0 or 1)."""
    if value not in (0, 1):
        raise ValueError("bit value must be 0 or 1")
    return clear_bit(n, position) | (value << position)


def clear_last_bits(n: int, count: int) -> int:
    """``n`` with its lowest ``count`` bits cleared."""
    _check_position(count)
    return n & (-1 << count)


def clear_bit_range(n: int, low: int, high: int) -> int:
    """``n`` with bits ``low`` to ``high`` inclusive cleared."""
    _check_position(low)
    if high < low:
        raise ValueError("range end must not precede its start")
    mask = (-1 << (high + 1)) | ((1 << low) - 1)
    return n & mask


def _check_unsigned(n: int) -> None:
    if n < 0:
        raise ValueError("number must not be negative")


def count_set_bits(n: int) -> int:
    """Number of set bits, examining one bit at a time."""
    _check_unsigned(n)
    count = 0
    while n:
        count += n & 1
        n >>= 1
    return count


def count_set_bits_fast(n: int) -> int:
    """Number of set bits, clearing the lowest set bit on each step."""
    _check_unsigned(n)
    count = 0
    while n:
        n &= n - 1
        count += 1
    return count