"""
CSV Parsing

Minimal header-first, comma-delimited parser for the benchmark datasets.

The format is deliberately simple: no quoting and no escaping. A field that
contains a comma is split like any other separator.
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, List, Mapping

CsvRow = Mapping[str, str]


@dataclass(frozen=True)
class CsvTable:
    """Parsed CSV: trimmed header names plus one read-only row per data line."""

    headers: List[str] = field(default_factory=list)
    rows: List[CsvRow] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[CsvRow]:
        return iter(self.rows)

    def column(self, name: str) -> List[str]:
        """Values of one column, skipping rows that lack it."""
        return [row[name] for row in self.rows if name in row]

    def to_records(self) -> List[dict]:
        """Plain ``dict`` copies of the rows, e.g. for JSON encoding."""
        return [dict(row) for row in self.rows]


def iter_rows(text: str) -> Iterator[CsvRow]:
    """
    Lazily yield rows from CSV text.

    The first non-empty line is the header. Each following non-empty line is
    split on commas and paired with the header by position. Lines shorter
    than the header produce rows without the trailing keys; surplus fields
    are ignored.
    """
    lines = [line for line in text.strip().splitlines() if line.strip()]
    if not lines:
        return

    headers = [h.strip() for h in lines[0].split(",")]
    for line in lines[1:]:
        values = line.split(",")
        yield MappingProxyType({
            header: values[i].strip()
            for i, header in enumerate(headers)
            if i < len(values)
        })


def parse_csv(text: str) -> CsvTable:
    """Eagerly parse CSV text into a ``CsvTable``. Empty text gives an empty table."""
    stripped = text.strip()
    if not stripped:
        return CsvTable()

    header_line = next(line for line in stripped.splitlines() if line.strip())
    headers = [h.strip() for h in header_line.split(",")]
    return CsvTable(headers=headers, rows=list(iter_rows(text)))
