"""Basic integer helpers shared by the rest of the package."""

MOD = 1_000_000_007


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple; raises ZeroDivisionError when both are zero."""
    return a // gcd(a, b) * b