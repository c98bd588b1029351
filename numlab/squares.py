"""Sums of two squares and Pythagorean triples."""

from __future__ import annotations

import argparse
import math
from typing import Iterable, NamedTuple


class Pair(NamedTuple):
    """Two naturals, the larger first."""

    x: int
    y: int


class Triple(NamedTuple):
    """Three naturals (x, y, z)."""

    x: int
    y: int
    z: int


def square(n: int) -> int:
    """Return ``n`` squared."""
    return n * n


def as_pair_of_squares(n: int) -> list[Pair]:
    """Return every (i, j) with i >= j >= 1 and i*i + j*j == n, by increasing i.

    Neither square may reach ``n`` itself, so zero is never a term.
    """
    pairs: list[Pair] = []
    i = 1
    while square(i) < n:
        rest = n - square(i)
        j = math.isqrt(rest)
        if 1 <= j <= i and square(j) == rest:
            pairs.append(Pair(i, j))
        i += 1
    return pairs


def is_pythagorean_triple(triple: Triple) -> bool:
    """Return whether x*x + y*y == z*z."""
    return square(triple.x) + square(triple.y) == square(triple.z)


def pythagorean_triples(n: int) -> list[Triple]:
    """Return every Pythagorean triple with all members in 1..n.

    Triples are ordered by x, then y; (3, 4, 5) and (4, 3, 5) both appear.
    """
    triples: list[Triple] = []
    for x in range(1, n + 1):
        for y in range(1, n + 1):
            total = square(x) + square(y)
            z = math.isqrt(total)
            if z <= n and square(z) == total:
                triples.append(Triple(x, y, z))
    return triples


def smallest_sums_of_two_squares(
    lower: int, upper: int
) -> dict[int, tuple[int, list[Pair]]]:
    """Scan ``lower..upper`` for the first natural written in k ways, k = 1, 2, ...

    The count k advances only once a natural with exactly k representations
    is found. The result maps each k reached to that natural and its pairs.
    """
    found: dict[int, tuple[int, list[Pair]]] = {}
    wanted = 1
    for n in range(lower, upper + 1):
        pairs = as_pair_of_squares(n)
        if pairs and len(pairs) == wanted:
            found[wanted] = (n, pairs)
            wanted += 1
    return found


def format_pairs(pairs: Iterable[Pair]) -> str:
    """Return one ``x, y, `` line per pair."""
    return "\n".join(f"{p.x}, {p.y}, " for p in pairs)


def format_triples(triples: Iterable[Triple]) -> str:
    """Return one ``x, y, z`` line per triple."""
    return "\n".join(f"{t.x}, {t.y}, {t.z}" for t in triples)


def _describe(ways: int, n: int) -> str:
    return (
        "the smallest natural representable as the sum of two squares in "
        f"{ways} different ways is {n}"
    )


def main(argv: list[str] | None = None) -> int:
    """Report the smallest naturals expressible as two squares in k ways."""
    parser = argparse.ArgumentParser(description="Explore sums of two squares.")
    parser.add_argument("--lower", type=int, default=1)
    parser.add_argument("--upper", type=int, default=1000)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    wanted = 1
    have_pairs = 0
    for n in range(args.lower, args.upper + 1):
        pairs = as_pair_of_squares(n)
        if pairs:
            have_pairs += 1
            if len(pairs) == wanted:
                print(_describe(wanted, n))
                wanted += 1
            if args.verbose:
                listed = " ".join(f"({p.x}, {p.y})" for p in pairs)
                print(f"{n}: {listed}")
        elif args.verbose:
            print(f"{n}:0")

    if args.verbose:
        print()
        print(
            f"there were {have_pairs} integers from {args.lower} -> {args.upper}"
            " that can be represented as the sum of two squares in at least"
            " one way."
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())