"""Parsing utilities for frequency-ranked character corpora."""

from __future__ import annotations

import json
from typing import Any, Iterable


def normalize_entries(entries: Iterable[Any]) -> list[str]:
    """Filter raw corpus entries down to distinct, non-empty characters.

    ``None``, non-string, blank and multi-character entries are dropped.
    Repeated characters keep their first position, which is also their
    highest frequency rank.

    Args:
        entries: Raw entries in frequency order, most frequent first.

    Returns:
        Cleaned corpus in the original order.
    """

    seen: set[str] = set()
    corpus: list[str] = []
    for entry in entries:
        if not isinstance(entry, str):
            continue
        char = entry.strip()
        if len(char) != 1 or char in seen:
            continue
        seen.add(char)
        corpus.append(char)
    return corpus


def parse_json_payload(payload: str) -> list[str]:
    """Parse a JSON array corpus such as ``["的", "一", null, ...]``.

    Raises:
        ValueError: If the payload is not a JSON array.
    """

    data = json.loads(payload)
    if not isinstance(data, list):
        raise ValueError(f"Corpus JSON must be an array, got {type(data).__name__}")
    return normalize_entries(data)


def parse_corpus_lines(lines: Iterable[str]) -> list[str]:
    """Parse a line-oriented corpus with one character per line.

    Comment lines starting with ``#`` are ignored. For TSV rows only the first
    column is used, so frequency tables with extra count columns load as-is.

    Args:
        lines: Raw text lines in frequency order.

    Returns:
        Cleaned corpus in the original order.
    """

    entries: list[str] = []
    for line in lines:
        if not line.strip() or line.lstrip().startswith("#"):
            continue
        entries.append(line.split("\t", 1)[0])
    return normalize_entries(entries)
