"""Closed-form and combinatorial counting problems modulo a prime."""

from __future__ import annotations

from math import isqrt

from modrecur.arith import MOD

MAX_DIGITS = 10**6


def count_good_numbers(n: int) -> int:
    """Digit strings of length ``n`` with even digits at even indices and primes at odd ones."""
    if n < 0:
        raise ValueError(f"length must be non-negative, got {n}")
    odd_positions = n // 2
    even_positions = n - odd_positions
    return pow(4, odd_positions, MOD) * pow(5, even_positions, MOD) % MOD


def parking_lot(n: int) -> int:
    """Ways to fill ``2n - 2`` places from four makes with exactly ``n`` in a row of one make."""
    if n < 3:
        raise ValueError(f"n must be at least 3, got {n}")
    res = 4 ** (n - 3)
    return 24 * res + 9 * (n - 3) * res


def _only_digits(value: int, a: int, b: int) -> bool:
    while value > 0:
        if value % 10 not in (a, b):
            return False
        value //= 10
    return True


def beautiful_numbers(a: int, b: int, n: int) -> int:
    """Length-``n`` numbers made of digits ``a`` and ``b`` whose digit sum uses only those digits."""
    if not 0 <= n <= MAX_DIGITS:
        raise ValueError(f"n must lie between 0 and {MAX_DIGITS}, got {n}")
    fact = [1] * (n + 1)
    for i in range(1, n + 1):
        fact[i] = fact[i - 1] * i % MOD
    inv_fact = [1] * (n + 1)
    inv_fact[n] = pow(fact[n], MOD - 2, MOD)
    for i in range(n - 1, -1, -1):
        inv_fact[i] = inv_fact[i + 1] * (i + 1) % MOD

    total = 0
    for i in range(n + 1):
        if _only_digits(i * a + (n - i) * b, a, b):
            total = (total + fact[n] * inv_fact[i] % MOD * inv_fact[n - i]) % MOD
    return total


def count_primes(n: int) -> int:
    """Number of primes strictly less than ``n``."""
    if n < 3:
        return 0
    sieve = bytearray([1]) * n
    sieve[0] = sieve[1] = 0
    for i in range(2, isqrt(n) + 1):
        if sieve[i]:
            sieve[i * i :: i] = bytes(len(range(i * i, n, i)))
    return sum(sieve)