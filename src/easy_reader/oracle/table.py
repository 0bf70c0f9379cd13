"""TSV-backed pronunciation oracle for fixtures and curated overrides."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Mapping

from easy_reader.validation import PRONUNCIATION_RE, raise_aggregated


def parse_table_lines(lines: Iterable[str]) -> dict[str, tuple[str, ...]]:
    """Parse pronunciation table rows into a character mapping.

    The parser accepts either a header row with columns ``char`` and
    ``pronunciations`` or plain two-column rows in that order. Pronunciations
    within a cell are separated by spaces or commas; the first one listed is
    the primary reading. Blank lines and ``#`` comments are ignored.

    Args:
        lines: Raw TSV lines.

    Returns:
        Mapping of character to distinct pronunciations in listed order.

    Raises:
        ValueError: If any data row is malformed.
    """

    rows = [line.rstrip("\n") for line in lines]
    rows = [line for line in rows if line.strip() and not line.lstrip().startswith("#")]
    if not rows:
        return {}

    header_cells = [cell.strip() for cell in rows[0].split("\t")]
    if {"char", "pronunciations"}.issubset(set(header_cells)):
        idx_char = header_cells.index("char")
        idx_pron = header_cells.index("pronunciations")
        data_rows = rows[1:]
    else:
        idx_char = 0
        idx_pron = 1
        data_rows = rows

    mapping: dict[str, tuple[str, ...]] = {}
    errors: list[str] = []
    for line_no, line in enumerate(data_rows, start=1):
        cells = [cell.strip() for cell in line.split("\t")]
        if len(cells) <= max(idx_char, idx_pron):
            errors.append(f"Row {line_no}: expected at least two columns in '{line}'")
            continue
        char = cells[idx_char]
        if len(char) != 1:
            errors.append(f"Row {line_no}: expected a single character, got '{char}'")
            continue
        readings = [item for item in cells[idx_pron].replace(",", " ").split() if item]
        bad = [item for item in readings if not PRONUNCIATION_RE.fullmatch(item)]
        if bad:
            errors.append(f"Row {line_no}: invalid pronunciation(s) {', '.join(bad)} for '{char}'")
            continue
        mapping[char] = tuple(dict.fromkeys(readings))

    raise_aggregated("Pronunciation table", errors)
    return mapping


@dataclass(frozen=True)
class TableOracle:
    """Oracle answering from an explicit character -> pronunciations table."""

    table: Mapping[str, tuple[str, ...]]

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Iterable[str]]) -> "TableOracle":
        """Build an oracle from a plain mapping, normalizing values to tuples."""

        return cls({char: tuple(dict.fromkeys(prons)) for char, prons in mapping.items()})

    @classmethod
    def from_path(cls, path: Path) -> "TableOracle":
        """Load an oracle from a UTF-8 TSV file.

        Raises:
            FileNotFoundError: If ``path`` does not exist.
        """

        if not path.exists():
            raise FileNotFoundError(f"Pronunciation table not found: {path}")
        with path.open("r", encoding="utf-8") as handle:
            return cls(parse_table_lines(handle))

    def primary_pronunciation(self, char: str) -> str | None:
        readings = self.table.get(char, ())
        return readings[0] if readings else None

    def all_pronunciations(self, char: str) -> tuple[str, ...]:
        return tuple(self.table.get(char, ()))
