"""Look up company records by name through a chained hash table."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

TABLE_SIZE = 2000
_BASE = 31
_SUFFIX_BYTES = 20
NOT_FOUND = "Not found"
USAGE = "Usage: ./main <MST.txt> <input.txt> <output.txt>"


@dataclass(frozen=True)
class Company:
    """A company record: name, tax code and address."""

    name: str
    profit_tax: str
    address: str

    def __str__(self) -> str:
        return f"{self.name}|{self.profit_tax}|{self.address}"


def _truncated_rem(value: int, modulus: int) -> int:
    # Remainder that keeps the sign of the dividend.
    remainder = abs(value) % modulus
    return -remainder if value < 0 else remainder


def hash_name(name: str) -> int:
    """Return the bucket index of a name: a polynomial hash of its last 20 bytes."""
    value = 0
    power = 1
    for byte in name.encode("utf-8")[-_SUFFIX_BYTES:]:
        char = byte - 256 if byte >= 128 else byte
        value = _truncated_rem(value + _truncated_rem(char * power, TABLE_SIZE), TABLE_SIZE)
        power = power * _BASE % TABLE_SIZE
    return (value + TABLE_SIZE) % TABLE_SIZE


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def _parse_company(line: str) -> Company:
    fields = line.split("|", 2)
    fields += [""] * (3 - len(fields))
    return Company(*fields)


def read_companies(path: str | Path) -> list[Company]:
    """Read ``name|tax|address`` records, skipping the header line."""
    text = Path(path).read_text(encoding="utf-8")
    return [_parse_company(line) for line in _lines(text)[1:]]


class CompanyTable:
    """A hash table of companies keyed by name, with separate chaining."""

    def __init__(self) -> None:
        self._buckets: list[list[Company]] = [[] for _ in range(TABLE_SIZE)]

    @classmethod
    def from_companies(cls, companies: Iterable[Company]) -> CompanyTable:
        """Build a table holding every company given."""
        table = cls()
        for company in companies:
            table.insert(company)
        return table

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __iter__(self) -> Iterator[Company]:
        for bucket in self._buckets:
            yield from reversed(bucket)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.search(name) is not None

    def insert(self, company: Company) -> None:
        """Add a company; a later record with the same name shadows earlier ones."""
        self._buckets[hash_name(company.name)].append(company)

    def search(self, name: str) -> Company | None:
        """Return the most recently inserted company with this name, or None."""
        for company in reversed(self._buckets[hash_name(name)]):
            if company.name == name:
                return company
        return None


def main(argv: list[str] | None = None) -> int:
    """Answer each name in the input file with its record, writing the output file."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 3:
        print(USAGE)
        return 1
    registry, queries, output = args
    try:
        table = CompanyTable.from_companies(read_companies(registry))
        names = _lines(Path(queries).read_text(encoding="utf-8"))
    except OSError as exc:
        print(f"cannot open {exc.filename}", file=sys.stderr)
        return 1

    answers = []
    for name in names:
        company = table.search(name)
        answers.append(str(company) if company is not None else NOT_FOUND)
    try:
        Path(output).write_text("".join(f"{line}\n" for line in answers), encoding="utf-8")
    except OSError:
        print(f"cannot open {output}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())