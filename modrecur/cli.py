"""Command line front end that reads a problem's input and prints its answers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator

from modrecur.counting import beautiful_numbers, parking_lot
from modrecur.recurrences import (
    decoding_genome,
    just_two_functions,
    number_sequence,
    tetrahedron,
)


class _Tokens:
    """Whitespace-separated tokens of an input text."""

    def __init__(self, text: str) -> None:
        self._items: Iterator[str] = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._items)
        except StopIteration:
            raise ValueError("input ended early") from None

    def integer(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def integers(self, count: int) -> list[int]:
        return [self.integer() for _ in range(count)]


def _just_two_functions(tokens: _Tokens) -> Iterator[str]:
    for case in range(1, tokens.integer() + 1):
        f_coeffs = tokens.integers(3)
        g_coeffs = tokens.integers(3)
        f_initial = tokens.integers(3)
        g_initial = tokens.integers(3)
        mod = tokens.integer()
        queries = tokens.integers(tokens.integer())
        yield f"Case: {case}"
        for f, g in just_two_functions(f_coeffs, g_coeffs, f_initial, g_initial, mod, queries):
            yield f"{f} {g}"


def _number_sequence(tokens: _Tokens) -> Iterator[str]:
    for case in range(1, tokens.integer() + 1):
        a, b, n, m = tokens.integers(4)
        yield f"Case {case}: {number_sequence(a, b, n, m)}"


def _decoding_genome(tokens: _Tokens) -> Iterator[str]:
    n, m, k = tokens.integers(3)
    forbidden = [tokens.word() for _ in range(k)]
    yield str(decoding_genome(n, m, forbidden))


def _tetrahedron(tokens: _Tokens) -> Iterator[str]:
    yield str(tetrahedron(tokens.integer()))


def _parking_lot(tokens: _Tokens) -> Iterator[str]:
    yield str(parking_lot(tokens.integer()))


def _beautiful_numbers(tokens: _Tokens) -> Iterator[str]:
    a, b, n = tokens.integers(3)
    yield str(beautiful_numbers(a, b, n))


PROBLEMS: dict[str, Callable[[_Tokens], Iterator[str]]] = {
    "just-two-functions": _just_two_functions,
    "number-sequence": _number_sequence,
    "decoding-genome": _decoding_genome,
    "tetrahedron": _tetrahedron,
    "parking-lot": _parking_lot,
    "beautiful-numbers": _beautiful_numbers,
}


def run(problem: str, text: str) -> str:
    """Solve ``problem`` for the input ``text`` and return the output lines."""
    try:
        solver = PROBLEMS[problem]
    except KeyError:
        raise ValueError(f"unknown problem: {problem!r}") from None
    return "".join(f"{line}\n" for line in solver(_Tokens(text)))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="modrecur", description="Solve a counting problem read from standard input."
    )
    parser.add_argument("problem", choices=sorted(PROBLEMS))
    args = parser.parse_args(argv)
    try:
        output = run(args.problem, sys.stdin.read())
    except ValueError as error:
        print(f"modrecur: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())