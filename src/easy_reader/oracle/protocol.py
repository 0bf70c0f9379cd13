"""Boundary contract for the external pronunciation oracle."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class PronunciationOracle(Protocol):
    """Maps one character to its numbered-tone pronunciation(s).

    Implementations must be deterministic per character. A character the
    oracle does not know yields ``None`` from :meth:`primary_pronunciation` and
    an empty tuple from :meth:`all_pronunciations`.
    """

    def primary_pronunciation(self, char: str) -> str | None:
        ...

    def all_pronunciations(self, char: str) -> tuple[str, ...]:
        ...
