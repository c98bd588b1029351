"""Primes by trial division, a growable prime cache and Goldbach pairs."""

from __future__ import annotations

import argparse
import logging
import math
from pathlib import Path

_log = logging.getLogger(__name__)

DEFAULT_PRIMES_FILE = "primes.txt"
DEFAULT_COUNT = 664_579


class NaturalGenerator:
    """An endless iterator over consecutive integers, starting at 1 by default."""

    def __init__(self, start: int = 1) -> None:
        self._n = start

    def __iter__(self) -> NaturalGenerator:
        return self

    def __next__(self) -> int:
        value = self._n
        self._n += 1
        return value


def is_even(n: int) -> bool:
    """Return whether ``n`` is even."""
    return n % 2 == 0


def is_odd(n: int) -> bool:
    """Return whether ``n`` is odd."""
    return n % 2 == 1


def get_divisors(n: int) -> list[int]:
    """Return 1 followed by every divisor of ``n`` from 2 up to ``n``."""
    return [1] + [c for c in range(2, n + 1) if n % c == 0]


def is_prime(n: int) -> bool:
    """Return whether ``n`` has exactly two divisors."""
    if n == 2:
        return True
    if is_even(n):
        return False
    return len(get_divisors(n)) == 2


def _is_odd_prime(candidate: int) -> bool:
    limit = math.isqrt(candidate)
    return all(candidate % d for d in range(3, limit + 1, 2))


class PrimeCache:
    """Consecutive primes starting from 2, extended on demand."""

    def __init__(self, primes: list[int] | None = None) -> None:
        self.primes: list[int] = list(primes) if primes else []

    def cached_prime(self, n: int) -> int | None:
        """Return the ``n``-th prime (1-based) if it is cached, else None."""
        if n < 1:
            raise ValueError(f"n must be at least 1, got {n}")
        if n <= len(self.primes):
            return self.primes[n - 1]
        return None

    def nth_prime(self, n: int) -> int:
        """Return the ``n``-th prime (1-based), extending the cache as needed."""
        cached = self.cached_prime(n)
        if cached is not None:
            return cached

        _log.info("no cache hit for %d...generating primes...", n)
        if not self.primes:
            self.primes.append(2)
        last = self.primes[-1]
        candidate = 3 if last == 2 else last + 2
        while len(self.primes) < n:
            if _is_odd_prime(candidate):
                self.primes.append(candidate)
                if len(self.primes) % 100 == 0:
                    _log.info("found prime number %d...%d", len(self.primes), candidate)
            candidate += 2
        return self.primes[n - 1]

    def find_goldbach(self, n: int) -> tuple[int, int] | None:
        """Return the first pair of cached primes summing to even ``n``.

        Pairs are tried with the first member in cache order. Returns None
        when no such pair exists among the cached primes.
        """
        if not is_even(n):
            raise ValueError(f"{n} is not even")
        known = set(self.primes)
        for prime_a in self.primes:
            if n - prime_a in known:
                return prime_a, n - prime_a
        return None

    def load(self, path: str | Path) -> None:
        """Append the primes listed one per line in ``path``."""
        with open(path, encoding="utf-8") as handle:
            self.primes.extend(int(line) for line in handle if line.strip())

    def dump(self, path: str | Path) -> None:
        """Write the cached primes to ``path``, one per line, replacing it."""
        with open(path, "w", encoding="utf-8") as handle:
            handle.writelines(f"{p}\n" for p in self.primes)


def main(argv: list[str] | None = None) -> int:
    """Find the n-th prime using a file-backed cache and save the cache."""
    parser = argparse.ArgumentParser(description="Find the n-th prime.")
    parser.add_argument("--count", type=int, default=DEFAULT_COUNT)
    parser.add_argument("--primes-file", default=DEFAULT_PRIMES_FILE)
    args = parser.parse_args(argv)

    cache = PrimeCache()
    path = Path(args.primes_file)
    if path.exists():
        cache.load(path)

    prime = cache.nth_prime(args.count)
    print(f"nth prime: {prime}")
    cache.dump(path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())