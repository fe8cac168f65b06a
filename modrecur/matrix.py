"""Immutable integer matrices with arithmetic modulo a fixed modulus."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from modrecur.arith import MOD


class Matrix:
    """A rectangular integer matrix whose products are reduced modulo ``mod``."""

    __slots__ = ("_rows", "_mod")

    def __init__(self, rows: Iterable[Iterable[int]], mod: int = MOD) -> None:
        if mod < 1:
            raise ValueError(f"modulus must be positive, got {mod}")
        table = tuple(tuple(row) for row in rows)
        if table and any(len(row) != len(table[0]) for row in table):
            raise ValueError("all rows must have the same length")
        self._rows = table
        self._mod = mod

    @classmethod
    def zeros(cls, n: int, m: int, mod: int = MOD) -> Matrix:
        """An ``n`` by ``m`` matrix of zeros."""
        return cls(([0] * m for _ in range(n)), mod)

    @classmethod
    def identity(cls, n: int, mod: int = MOD) -> Matrix:
        """The ``n`` by ``n`` identity matrix."""
        return cls(([int(i == j) for j in range(n)] for i in range(n)), mod)

    @property
    def rows(self) -> tuple[tuple[int, ...], ...]:
        return self._rows

    @property
    def mod(self) -> int:
        return self._mod

    @property
    def n(self) -> int:
        """Number of rows."""
        return len(self._rows)

    @property
    def m(self) -> int:
        """Number of columns."""
        return len(self._rows[0]) if self._rows else 0

    @property
    def shape(self) -> tuple[int, int]:
        return self.n, self.m

    def __getitem__(self, index: int) -> tuple[int, ...]:
        return self._rows[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._rows == other._rows and self._mod == other._mod

    def __hash__(self) -> int:
        return hash((self._rows, self._mod))

    def __repr__(self) -> str:
        return f"Matrix({[list(row) for row in self._rows]!r}, mod={self._mod})"

    def __mul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.m != other.n:
            raise ValueError(
                f"cannot multiply {self.n}x{self.m} by {other.n}x{other.m}"
            )
        if self._mod != other._mod:
            raise ValueError("matrices use different moduli")
        mod = self._mod
        columns: Sequence[tuple[int, ...]] = list(zip(*other._rows))
        if not columns:
            columns = [()] * other.m
        return Matrix(
            (
                [sum(x * y for x, y in zip(row, col)) % mod for col in columns]
                for row in self._rows
            ),
            mod,
        )

    def power(self, k: int) -> Matrix:
        """Raise a square matrix to a non-negative power by repeated squaring."""
        if self.n != self.m:
            raise ValueError(f"power needs a square matrix, got {self.n}x{self.m}")
        if k < 0:
            raise ValueError(f"exponent must be non-negative, got {k}")
        result = Matrix.identity(self.n, self._mod)
        base = self
        while k:
            if k & 1:
                result = result * base
            base = base * base
            k >>= 1
        return result