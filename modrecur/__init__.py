"""Modular arithmetic, matrix exponentiation, linear recurrences and counting."""

__version__ = "0.1.0"
__all__ = ["arith", "matrix", "counting", "recurrences", "cli"]