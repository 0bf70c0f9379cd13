"""Heteronym detection under a tone-folding policy."""

from __future__ import annotations

from dataclasses import dataclass

from easy_reader.oracle.protocol import PronunciationOracle
from easy_reader.oracle.tones import distinct_bases


@dataclass(frozen=True)
class AmbiguityClassifier:
    """Decides whether a character has genuinely multiple pronunciations."""

    oracle: PronunciationOracle

    def pronunciations(self, char: str) -> tuple[str, ...]:
        """Return the oracle's distinct pronunciations for ``char``."""

        return tuple(dict.fromkeys(self.oracle.all_pronunciations(char)))

    def is_ambiguous(self, char: str, tone_folding: bool) -> bool:
        """Classify ``char`` as ambiguous or not.

        Without tone folding any two distinct pronunciations count. With tone
        folding, readings that differ only by tone (``hao3``/``hao4``) merge, so
        only distinct base syllables (``le``/``liao``) count.

        Args:
            char: Character to classify.
            tone_folding: Whether cross-tone mode is active.

        Returns:
            ``True`` when more than one pronunciation remains after folding.
            Unknown characters are never ambiguous.
        """

        pronunciations = self.pronunciations(char)
        if len(pronunciations) <= 1:
            return False
        if not tone_folding:
            return True
        return len(distinct_bases(pronunciations)) > 1
