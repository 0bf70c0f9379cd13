"""Pronunciation index grouping corpus characters by toned pronunciation."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Sequence

from easy_reader.oracle.protocol import PronunciationOracle
from easy_reader.oracle.tones import base_pronunciation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PronunciationIndex:
    """Immutable pronunciation -> characters index over the full corpus.

    Each entry lists the corpus characters whose primary pronunciation is the
    entry key, in corpus (frequency) order. A secondary view maps every base
    pronunciation to its toned keys in index insertion order, so cross-tone
    lookups visit entries in the same order as a scan over all entries would.

    Attributes:
        corpus: Full frequency-ordered corpus the index was built from.
        entries: Toned pronunciation -> characters, insertion ordered.
        by_base: Base pronunciation -> toned keys, insertion ordered.
    """

    corpus: tuple[str, ...]
    entries: dict[str, tuple[str, ...]]
    by_base: dict[str, tuple[str, ...]]
    _ranks: dict[str, int] = field(repr=False, compare=False)

    @classmethod
    def build(cls, corpus: Sequence[str], oracle: PronunciationOracle) -> "PronunciationIndex":
        """Build the index once from a frequency-ordered corpus.

        Characters for which the oracle yields no pronunciation are skipped.
        Order inside each entry follows the corpus and is never re-sorted,
        because it doubles as the frequency tie-break during resolution.

        Args:
            corpus: Distinct characters, most frequent first.
            oracle: Pronunciation source.

        Returns:
            Populated immutable index.
        """

        grouped: dict[str, list[str]] = {}
        skipped = 0
        for char in corpus:
            pronunciation = oracle.primary_pronunciation(char)
            if not pronunciation:
                skipped += 1
                continue
            grouped.setdefault(pronunciation, []).append(char)

        by_base: dict[str, list[str]] = {}
        for pronunciation in grouped:
            by_base.setdefault(base_pronunciation(pronunciation), []).append(pronunciation)

        corpus_tuple = tuple(corpus)
        logger.info(
            "Built pronunciation index: %d characters, %d pronunciations, %d skipped",
            len(corpus_tuple) - skipped,
            len(grouped),
            skipped,
        )
        return cls(
            corpus=corpus_tuple,
            entries={key: tuple(chars) for key, chars in grouped.items()},
            by_base={key: tuple(prons) for key, prons in by_base.items()},
            _ranks={char: rank for rank, char in enumerate(corpus_tuple)},
        )

    def lookup(self, pronunciation: str | None) -> tuple[str, ...]:
        """Return characters sharing ``pronunciation``; empty tuple when absent."""

        if not pronunciation:
            return ()
        return self.entries.get(pronunciation, ())

    def pronunciations_for_base(self, base: str | None) -> tuple[str, ...]:
        """Return toned keys folding to ``base`` in index insertion order."""

        if not base:
            return ()
        return self.by_base.get(base, ())

    def rank(self, char: str) -> int | None:
        """Return the corpus frequency rank of ``char``, or ``None``."""

        return self._ranks.get(char)

    def __contains__(self, pronunciation: object) -> bool:
        return pronunciation in self.entries

    def __len__(self) -> int:
        return len(self.entries)
