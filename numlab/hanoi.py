"""Tower of Hanoi move counts, by recurrence and by closed form."""


def _require_non_negative(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def hanoi_recursive(n: int) -> int:
    """Return the minimum number of moves for ``n`` discs, T(n) = 2T(n-1) + 1."""
    _require_non_negative(n, "n")
    if n == 0:
        return 0
    return 2 * hanoi_recursive(n - 1) + 1


def hanoi_iterative(n: int) -> int:
    """Return the same move count as :func:`hanoi_recursive`, built up from T(1)."""
    _require_non_negative(n, "n")
    if n == 0:
        return 0
    moves = 1
    for _ in range(1, n):
        moves = 2 * moves + 1
    return moves


def two_to_the_n_minus_one(power: int) -> int:
    """Return 2**power - 1, the closed form of the Hanoi recurrence."""
    _require_non_negative(power, "power")
    return 2**power - 1


def two_to_the_n_minus_one_plus_one(power: int) -> int:
    """Return 2**(power - 1) + 1."""
    if power < 1:
        raise ValueError(f"power must be at least 1, got {power}")
    return 2 ** (power - 1) + 1