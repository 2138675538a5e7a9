"""Recursive classics: Fibonacci, factorial, bit strings, Hanoi, order checks, queens."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import pairwise, product

INCREASING = "Array is sorted in increasing order"
NOT_INCREASING = "Array is not sorted in increasing order"
DECREASING = "Array is sorted in decreasing order"
NOT_DECREASING = "Array is not sorted in decreasing order"


def _require_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, with fibonacci(0) == 0 and fibonacci(1) == 1."""
    _require_non_negative(n)
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def factorial(n: int) -> int:
    """Return n! for a non-negative n."""
    _require_non_negative(n)
    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result


def binary_strings(n: int) -> Iterator[str]:
    """Yield every bit string of length n, ``0`` branches before ``1`` branches."""
    _require_non_negative(n)
    for bits in product("01", repeat=n):
        yield "".join(bits)


def hanoi_moves(
    n: int, source: str = "A", target: str = "C", auxiliary: str = "B"
) -> Iterator[tuple[int, str, str]]:
    """Yield the moves ``(disk, from_peg, to_peg)`` that carry n disks from source to target."""
    _require_non_negative(n)

    def solve(disks: int, src: str, dst: str, via: str) -> Iterator[tuple[int, str, str]]:
        if disks == 0:
            return
        yield from solve(disks - 1, src, via, dst)
        yield disks, src, dst
        yield from solve(disks - 1, via, dst, src)

    return solve(n, source, target, auxiliary)


def is_increasing(values: Sequence[int]) -> bool:
    """Return True if no element is smaller than the one before it."""
    return all(left <= right for left, right in pairwise(values))


def is_decreasing(values: Sequence[int]) -> bool:
    """Return True if no element is larger than the one before it."""
    return all(left >= right for left, right in pairwise(values))


def describe_order(values: Sequence[int]) -> str:
    """Describe the sort order, judging the expected direction from the end points."""
    if not values:
        raise ValueError("cannot describe the order of an empty sequence")
    if values[-1] >= values[0]:
        return INCREASING if is_increasing(values) else NOT_INCREASING
    return DECREASING if is_decreasing(values) else NOT_DECREASING


def count_queens(n: int = 8) -> int:
    """Count the ways to place n non-attacking queens on an n x n board."""
    _require_non_negative(n)
    columns: set[int] = set()
    left_diagonals: set[int] = set()
    right_diagonals: set[int] = set()

    def place(row: int) -> int:
        if row == n:
            return 1
        found = 0
        for col in range(n):
            if col in columns or row - col in left_diagonals or row + col in right_diagonals:
                continue
            columns.add(col)
            left_diagonals.add(row - col)
            right_diagonals.add(row + col)
            found += place(row + 1)
            columns.remove(col)
            left_diagonals.remove(row - col)
            right_diagonals.remove(row + col)
        return found

    return place(0)