# modrecur

Exact integer tools for counting problems: modular matrix exponentiation,
linear recurrences evaluated in logarithmic time, and a handful of modular
counting routines. Pure Python, no dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library

### Arithmetic (`modrecur.arith`)

```python
from modrecur.arith import MOD, gcd, lcm

gcd(12, 18)   # 6
lcm(4, 6)     # 12
MOD           # 1000000007
```

`lcm(0, 0)` raises `ZeroDivisionError`.

### Matrices modulo m (`modrecur.matrix`)

`Matrix(rows, mod=MOD)` is an immutable rectangular grid of integers.
Products are reduced modulo `mod`; the entries given to the constructor are
stored as they are.

```python
from modrecur.matrix import Matrix

fib = Matrix([[1, 1], [1, 0]], 1_000_000_007)
fib.power(10).rows        # ((89, 55), (55, 34))
Matrix.identity(3, 97)
Matrix.zeros(2, 3, 97)
```

A matrix exposes `rows`, `mod`, `n` (rows), `m` (columns) and `shape`,
supports indexing by row (`matrix[i][j]`), equality and hashing.

`ValueError` is raised for a modulus below 1, ragged rows, multiplying
matrices whose inner dimensions or moduli differ, raising a non-square
matrix to a power, or a negative exponent.

### Linear recurrences (`modrecur.recurrences`)

- `number_sequence(a, b, n, m)` – for `n` of 0 or 1 returns `a` or `b`
  unchanged; otherwise the top entry of `[[1, 1], [1, 0]] ** n` applied to
  the column `(a, b)`, modulo `10 ** m`.
- `tetrahedron(n)` – closed walks of length `n` from one vertex of a
  tetrahedron back to itself, modulo 1 000 000 007.
- `decoding_genome(n, m, forbidden)` – chains of length `n` over the first
  `m` nucleotides (written `a`..`z` then `A`..`Z`, so `m` is at most 52)
  that contain none of the forbidden adjacent pairs, each given as a
  two-letter string; modulo 1 000 000 007.
- `just_two_functions(f_coeffs, g_coeffs, f_initial, g_initial, mod, queries)`
  – evaluates
  `f(n) = a1*f(n-1) + b1*f(n-2) + c1*g(n-3)` and
  `g(n) = a2*g(n-1) + b2*g(n-2) + c2*f(n-3)`
  with `f_coeffs = (a1, b1, c1)`, `g_coeffs = (a2, b2, c2)`,
  `f_initial = (f0, f1, f2)` and `g_initial = (g0, g1, g2)`, returning a
  list of `(f(k), g(k))` pairs modulo `mod`, one per queried `k`.

Negative indices or lengths, and malformed genome input, raise `ValueError`.

### Counting (`modrecur.counting`)

- `count_good_numbers(n)` – digit strings of length `n` with an even digit at
  every even index and a prime digit at every odd index, modulo
  1 000 000 007.
- `parking_lot(n)` – ways to fill `2n - 2` places with cars of four makes so
  that exactly `n` successive cars share a make; exact, `n` must be at
  least 3.
- `beautiful_numbers(a, b, n)` – numbers of length `n` made of digits `a`
  and `b` whose digit sum is also made only of `a` and `b`, modulo
  1 000 000 007; `n` must lie between 0 and 1 000 000.
- `count_primes(n)` – the number of primes strictly below `n`.

## Command line

```
modrecur PROBLEM < input.txt
```

reads whitespace-separated input from standard input and prints the
answers. On bad input it prints `modrecur: <message>` to standard error and
exits with status 1. From Python, `modrecur.cli.run(problem, text)` returns
the same output as a string.

| Problem | Input | Output |
| --- | --- | --- |
| `just-two-functions` | case count; per case `a1 b1 c1`, `a2 b2 c2`, `f0 f1 f2`, `g0 g1 g2`, `mod`, query count, then the queries | `Case: i`, then `f g` per query |
| `number-sequence` | case count; per case `a b n m` | `Case i: value` |
| `decoding-genome` | `n m k`, then `k` forbidden pairs | the count |
| `tetrahedron` | `n` | the count |
| `parking-lot` | `n` | the count |
| `beautiful-numbers` | `a b n` | the count |

`count_good_numbers` and `count_primes` have no command; call them from
Python.