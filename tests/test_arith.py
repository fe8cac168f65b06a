import math

import pytest

from modrecur.arith import MOD, gcd, lcm


@pytest.mark.parametrize("a,b", [(12, 18), (7, 13), (100, 75), (1, 1), (270, 192)])
def test_gcd_matches_math(a, b):
    assert gcd(a, b) == math.gcd(a, b)


@pytest.mark.parametrize("a,b", [(12, 18), (35, 49), (9, 28), (1024, 96)])
def test_gcd_divides_both(a, b):
    g = gcd(a, b)
    assert a % g == 0
    assert b % g == 0


@pytest.mark.parametrize("a", [1, 5, 42, 99991])
def test_gcd_with_zero_returns_other(a):
    assert gcd(a, 0) == a
    assert gcd(0, a) == a


@pytest.mark.parametrize("a,b", [(4, 6), (21, 6), (13, 17), (100, 10)])
def test_lcm_times_gcd_is_product(a, b):
    assert lcm(a, b) * gcd(a, b) == a * b


@pytest.mark.parametrize("a,b", [(4, 6), (21, 6), (8, 12)])
def test_lcm_is_common_multiple(a, b):
    m = lcm(a, b)
    assert m % a == 0
    assert m % b == 0


def test_lcm_of_zeros_raises():
    with pytest.raises(ZeroDivisionError):
        lcm(0, 0)


def test_mod_is_prime_against_small_numbers():
    assert MOD == 1000000007
    assert gcd(MOD, 2) == 1
    assert lcm(MOD, 2) == 2000000014