"""Squaring evaluator and a table of powers of two around the Hanoi numbers."""

from __future__ import annotations

import argparse
from typing import Sequence

from numlab.creppl import FnSpec, Param, Repl
from numlab.hanoi import two_to_the_n_minus_one, two_to_the_n_minus_one_plus_one

DEFAULT_LIMIT = 23


def square_evaluator(params: Sequence[Param]) -> str:
    """Return the square of the first parameter's value, as text."""
    value = params[0].value
    return str(value * value)


def power_table(limit: int) -> list[tuple[int, int, int]]:
    """Return (i, 2**i - 1, 2**(i-1) + 1) for every i from 1 below ``limit``."""
    return [
        (i, two_to_the_n_minus_one(i), two_to_the_n_minus_one_plus_one(i))
        for i in range(1, limit)
    ]


def main(argv: list[str] | None = None) -> int:
    """Print the power table, or run the squaring loop with ``--repl``."""
    parser = argparse.ArgumentParser(description="Explore natural numbers.")
    parser.add_argument("--limit", type=int, default=DEFAULT_LIMIT)
    parser.add_argument("--repl", action="store_true")
    args = parser.parse_args(argv)

    if args.repl:
        Repl([FnSpec(square_evaluator, "square", "sq")]).run()
        return 0

    for i, minus_one, plus_one in power_table(args.limit):
        print(f"{i}: {minus_one}")
        print(f"{i}: {plus_one}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())