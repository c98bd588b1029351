"""Sieve of Eratosthenes over the naturals below a fixed size."""

from __future__ import annotations

import argparse

SIEVE_SIZE = 10_000_001


def divides(a: int, b: int) -> bool:
    """Return whether ``a`` divides ``b``."""
    return b % a == 0


def sieve_primes(size: int = SIEVE_SIZE) -> list[int]:
    """Return every prime below ``size``, in increasing order."""
    if size <= 2:
        return []
    flags = bytearray([1]) * size
    flags[0] = flags[1] = 0
    for i in range(2, size):
        if i * i >= size:
            break
        if flags[i]:
            flags[i * i :: i] = bytes(len(range(i * i, size, i)))
    return [n for n, is_prime in enumerate(flags) if is_prime]


def main(argv: list[str] | None = None) -> int:
    """Print every prime below the sieve size, then how many there were."""
    parser = argparse.ArgumentParser(description="List primes with a sieve.")
    parser.add_argument("size", nargs="?", type=int, default=SIEVE_SIZE)
    args = parser.parse_args(argv)

    primes = sieve_primes(args.size)
    for prime in primes:
        print(prime)
    print(f"number of primes: {len(primes)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())