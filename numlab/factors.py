"""Divisors, prime factorisations and small filters over integers."""

from __future__ import annotations

import argparse
import itertools
import math
from dataclasses import dataclass
from typing import Iterable, Sequence

from numlab.sieve import SIEVE_SIZE, divides, sieve_primes


@dataclass(frozen=True)
class PrimeFactor:
    """A prime raised to a power."""

    prime: int
    power: int

    def __str__(self) -> str:
        return f"{self.prime}^{self.power}"


@dataclass(frozen=True)
class Number:
    """A number together with its prime factorisation."""

    value: int
    factors: tuple[PrimeFactor, ...]

    def __str__(self) -> str:
        return f"{self.value}: " + ", ".join(str(f) for f in self.factors)


def divisors(n: int) -> list[int]:
    """Return every positive divisor of ``n`` in increasing order."""
    return [i for i in range(1, n + 1) if divides(i, n)]


def prime_factors(n: int, primes: Sequence[int] | None = None) -> list[int]:
    """Return the prime factors of ``n`` with repetition, smallest first.

    ``primes`` must list the primes in increasing order; by default they are
    sieved up to ``n``.
    """
    if n < 1:
        raise ValueError(f"n must be a positive integer, got {n}")
    if primes is None:
        primes = sieve_primes(n + 1)

    factors: list[int] = []
    remaining = n
    candidates = iter(primes)
    prime = next(candidates, None)
    while remaining != 1:
        if prime is None:
            raise ValueError(f"not enough primes supplied to factor {n}")
        if divides(prime, remaining):
            factors.append(prime)
            remaining //= prime
        else:
            prime = next(candidates, None)
    return factors


def factorization(n: int) -> Number:
    """Return ``n`` with its factors grouped into prime powers; 1 is 1^1."""
    if n == 1:
        return Number(1, (PrimeFactor(1, 1),))
    grouped = itertools.groupby(prime_factors(n))
    return Number(
        n, tuple(PrimeFactor(prime, len(list(run))) for prime, run in grouped)
    )


def odd_only(values: Iterable[int]) -> list[int]:
    """Return the values that are neither zero nor even, in order."""
    return [v for v in values if v != 0 and v % 2 != 0]


def squares_of_evens(values: Iterable[int]) -> list[int]:
    """Return the squares of the even values, in order."""
    return [v * v for v in values if v % 2 == 0]


def main(argv: list[str] | None = None) -> int:
    """Print leading primes, factor lists and factorisation tables."""
    parser = argparse.ArgumentParser(description="Explore prime factors.")
    parser.add_argument("--limit", type=int, default=10)
    parser.add_argument("--sieve-size", type=int, default=SIEVE_SIZE)
    args = parser.parse_args(argv)

    primes = sieve_primes(args.sieve_size)
    for prime in primes[: max(0, (len(primes) + 1) // 4096 - 1)]:
        print(prime)

    for i in range(1, args.limit + 1):
        listed = ", ".join(str(p) for p in prime_factors(i, primes))
        print(f"{i}: [{listed}]")

    for i in range(1, args.limit + 1):
        print(factorization(i))

    print(" ".join(str(v) for v in squares_of_evens(range(6))))

    print("odd things: \n")
    for value in odd_only(range(11)):
        print(value)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())


__all__ = [
    "Number",
    "PrimeFactor",
    "divisors",
    "factorization",
    "main",
    "math",
    "odd_only",
    "prime_factors",
    "squares_of_evens",
]