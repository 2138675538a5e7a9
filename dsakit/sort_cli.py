"""Command line: sort the integers of one file into another with a named algorithm."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable
from pathlib import Path

from dsakit.sorting import ALGORITHMS, sort_by_name

_INTEGER = re.compile(r"[+-]?\d+")
_OPTIONS = {"-a": "algorithm", "-i": "input", "-o": "output"}


def read_numbers(path: str | Path) -> list[int]:
    """Read whitespace-separated integers, stopping at the first token that is not one."""
    with open(path, encoding="utf-8") as handle:
        text = handle.read()
    numbers: list[int] = []
    for token in text.split():
        match = _INTEGER.match(token)
        if match is None:
            break
        numbers.append(int(match.group()))
        if match.end() < len(token):
            break
    return numbers


def write_numbers(path: str | Path, values: Iterable[int]) -> None:
    """Write the values to path, each followed by a single space."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.write("".join(f"{value} " for value in values))


def _error(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> int:
    """Run ``-a <algorithm> -i <input> -o <output>``; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 6:
        return _error("Cach su dung: sort -a <ten thuat toan> -i <file input> -o <file output>")

    options = {"algorithm": "", "input": "", "output": ""}
    tokens = iter(args)
    for arg in tokens:
        value = next(tokens, None) if arg in _OPTIONS else None
        if value is None:
            return _error(f"Tham so khong hop le: {arg}")
        options[_OPTIONS[arg]] = value

    try:
        data = read_numbers(options["input"])
    except OSError:
        return _error(f"Khong the mo file: {options['input']}!!!\n")
    if not data:
        return _error("File input rong!")

    if options["algorithm"] not in ALGORITHMS:
        return _error("Thuat toan khong hop le!")
    try:
        data = sort_by_name(options["algorithm"], data)
    except ValueError as exc:
        return _error(str(exc))

    try:
        write_numbers(options["output"], data)
    except OSError:
        return _error(f"Khong the mo file: {options['output']}!!!\n")
    print(f"\nDa sap xep xong, luu vao file {options['output']}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())