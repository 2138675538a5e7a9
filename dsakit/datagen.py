"""Generate integer test data for sorting experiments and save it to a file."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterable
from enum import IntEnum
from pathlib import Path

DEFAULT_SIZE = 500000
DEFAULT_OUTPUT = "input.txt"
NEARLY_SORTED_SWAPS = 10
PROMPT = "Chon loai du lieu (0: Ngau nhien, 1: Tang dan, 2: Giam dan, 3: Gan dung): "


class DataKind(IntEnum):
    """The arrangements of generated data."""

    RANDOM = 0
    SORTED = 1
    REVERSE = 2
    NEARLY_SORTED = 3


def _rng(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def random_data(n: int, rng: random.Random | None = None) -> list[int]:
    """Return n values drawn uniformly from range(n)."""
    source = _rng(rng)
    return [source.randrange(n) for _ in range(n)]


def sorted_data(n: int) -> list[int]:
    """Return 0, 1, ..., n - 1."""
    return list(range(n))


def reverse_data(n: int) -> list[int]:
    """Return n - 1, ..., 1, 0."""
    return list(range(n - 1, -1, -1))


def nearly_sorted_data(n: int, rng: random.Random | None = None) -> list[int]:
    """Return ascending data disturbed by a few random swaps."""
    data = sorted_data(n)
    if n == 0:
        return data
    source = _rng(rng)
    for _ in range(NEARLY_SORTED_SWAPS):
        i, j = source.randrange(n), source.randrange(n)
        data[i], data[j] = data[j], data[i]
    return data


def generate(kind: DataKind | int, n: int, rng: random.Random | None = None) -> list[int]:
    """Return n values arranged as the given kind; an unknown kind raises ValueError."""
    match DataKind(kind):
        case DataKind.RANDOM:
            return random_data(n, rng)
        case DataKind.SORTED:
            return sorted_data(n)
        case DataKind.REVERSE:
            return reverse_data(n)
        case DataKind.NEARLY_SORTED:
            return nearly_sorted_data(n, rng)


def write_data(path: str | Path, values: Iterable[int]) -> None:
    """Write the values to path, each followed by a single space."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.write("".join(f"{value} " for value in values))


def main(argv: list[str] | None = None) -> int:
    """Generate data of the chosen kind and write it out; return the exit status."""
    parser = argparse.ArgumentParser(description="Generate integer data for sorting.")
    parser.add_argument("kind", nargs="?", help="0 random, 1 ascending, 2 descending, 3 nearly sorted")
    parser.add_argument("--size", type=int, default=DEFAULT_SIZE)
    parser.add_argument("--output", default=DEFAULT_OUTPUT)
    args = parser.parse_args(argv)

    raw_kind = args.kind if args.kind is not None else input(PROMPT)
    try:
        kind = DataKind(int(raw_kind))
    except ValueError:
        print("Loai du lieu khong hop le!")
        return 1

    values = generate(kind, args.size)
    try:
        write_data(args.output, values)
    except OSError:
        print(f"Khong the mo file {args.output}!", file=sys.stderr)
        return 1
    print(f"Da luu du lieu vao {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())