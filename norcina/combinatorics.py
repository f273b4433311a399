"""Small combinatoric helpers."""

from math import prod


def fac(n: int) -> int:
    """The factorial of ``n``: n * (n - 1) * ... * 1."""
    if n < 0:
        raise ValueError(f"factorial of a negative number: {n}")
    return prod(range(1, n + 1))


def choose(n: int, m: int) -> int:
    """``n`` choose ``m``, that is n! / (m! * (n - m)!)."""
    if n < 0 or m < 0 or m > n:
        raise ValueError(f"invalid arguments for choose: n={n}, m={m}")
    return fac(n) // fac(m) // fac(n - m)