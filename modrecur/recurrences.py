"""Linear recurrences evaluated with modular matrix powers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from modrecur.arith import MOD
from modrecur.matrix import Matrix

ALPHABET_SIZE = 52


def just_two_functions(
    f_coeffs: Sequence[int],
    g_coeffs: Sequence[int],
    f_initial: Sequence[int],
    g_initial: Sequence[int],
    mod: int,
    queries: Iterable[int],
) -> list[tuple[int, int]]:
    """Evaluate two coupled recurrences for each requested index.

    ``f(n) = a1*f(n-1) + b1*f(n-2) + c1*g(n-3)`` and
    ``g(n) = a2*g(n-1) + b2*g(n-2) + c2*f(n-3)``, where ``f_coeffs`` is
    ``(a1, b1, c1)``, ``g_coeffs`` is ``(a2, b2, c2)`` and the initial values
    are ``(f0, f1, f2)`` and ``(g0, g1, g2)``.  Each answer is ``(f(k), g(k))``
    reduced modulo ``mod``.
    """
    a1, b1, c1 = f_coeffs
    a2, b2, c2 = g_coeffs
    f0, f1, f2 = f_initial
    g0, g1, g2 = g_initial

    # State vector: f(n), f(n-1), f(n-2), g(n), g(n-1), g(n-2).
    transition = Matrix(
        [
            [a1, b1, 0, 0, 0, c1],
            [1, 0, 0, 0, 0, 0],
            [0, 1, 0, 0, 0, 0],
            [0, 0, c2, a2, b2, 0],
            [0, 0, 0, 1, 0, 0],
            [0, 0, 0, 0, 1, 0],
        ],
        mod,
    )
    base = Matrix([[f2], [f1], [f0], [g2], [g1], [g0]], mod)

    answers = []
    for k in queries:
        if k < 0:
            raise ValueError(f"index must be non-negative, got {k}")
        if k == 0:
            answers.append((f0 % mod, g0 % mod))
        elif k == 1:
            answers.append((f1 % mod, g1 % mod))
        else:
            state = transition.power(k - 2) * base
            answers.append((state[0][0], state[3][0]))
    return answers


def number_sequence(a: int, b: int, n: int, m: int) -> int:
    """Term ``n`` of the additive sequence seeded with ``a`` and ``b``, modulo ``10**m``.

    Indices 0 and 1 give the seeds themselves; larger indices take the top
    entry of ``[[1, 1], [1, 0]]**n`` applied to ``(a, b)``.
    """
    if n < 0:
        raise ValueError(f"index must be non-negative, got {n}")
    if m < 0:
        raise ValueError(f"digit count must be non-negative, got {m}")
    if n == 0:
        return a
    if n == 1:
        return b
    mod = 10**m
    step = Matrix([[1, 1], [1, 0]], mod)
    base = Matrix([[a], [b]], mod)
    return (step.power(n) * base)[0][0]


def _nucleotide(symbol: str) -> int:
    if "a" <= symbol <= "z":
        return ord(symbol) - ord("a")
    if "A" <= symbol <= "Z":
        return ord(symbol) - ord("A") + 26
    raise ValueError(f"not a nucleotide letter: {symbol!r}")


def decoding_genome(n: int, m: int, forbidden: Iterable[str]) -> int:
    """Chains of length ``n`` over ``m`` nucleotides avoiding the forbidden adjacent pairs.

    Nucleotides are written ``a``..``z`` then ``A``..``Z``; each forbidden
    pair is a two-letter string.  The count is reduced modulo 1e9+7.
    """
    if n < 1:
        raise ValueError(f"chain length must be positive, got {n}")
    if not 1 <= m <= ALPHABET_SIZE:
        raise ValueError(f"nucleotide count must lie between 1 and {ALPHABET_SIZE}, got {m}")

    banned = set()
    for pair in forbidden:
        if len(pair) != 2:
            raise ValueError(f"forbidden pair must have two letters, got {pair!r}")
        first, second = (_nucleotide(symbol) for symbol in pair)
        if first >= m or second >= m:
            raise ValueError(f"pair {pair!r} uses a nucleotide beyond the first {m}")
        banned.add((first, second))

    transition = Matrix(
        [[int((i, j) not in banned) for j in range(m)] for i in range(m)], MOD
    )
    ones = Matrix([[1] for _ in range(m)], MOD)
    result = transition.power(n - 1) * ones
    return sum(row[0] for row in result.rows) % MOD


def tetrahedron(n: int) -> int:
    """Closed walks of length ``n`` from one vertex of a tetrahedron, modulo 1e9+7."""
    if n < 0:
        raise ValueError(f"walk length must be non-negative, got {n}")
    adjacency = Matrix([[int(i != j) for j in range(4)] for i in range(4)], MOD)
    return adjacency.power(n)[0][0]