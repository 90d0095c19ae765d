"""Euclid's greatest common divisor and sums of two primes."""

from __future__ import annotations


def gcd(m: int, n: int) -> int:
    """Greatest common divisor of ``m`` and ``n`` by Euclid's algorithm."""
    if n == 0:
        raise ValueError("second number must not be zero")
    while m % n:
        m, n = n, m % n
    return n


def _sieve(limit: int) -> list[bool]:
    is_prime = [True] * max(limit, 2)
    is_prime[0] = is_prime[1] = False
    factor = 2
    while factor * factor < limit:
        if is_prime[factor]:
            for multiple in range(factor * factor, limit, factor):
                is_prime[multiple] = False
        factor += 1
    return is_prime


def prime_sum(n: int) -> tuple[int, int] | None:
    """Two primes adding up to ``n`` with the smallest first one, or None."""
    if n < 2:
        return None
    is_prime = _sieve(n)
    return next(
        ((i, n - i) for i in range(2, n) if is_prime[i] and is_prime[n - i]),
        None,
    )