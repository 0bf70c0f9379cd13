"""Known-vocabulary view derived from the frequency-ranked corpus."""

from __future__ import annotations

import logging
from typing import Sequence

from easy_reader.validation import clamp_threshold

logger = logging.getLogger(__name__)


class Vocabulary:
    """Mutable rank-threshold view over an immutable corpus.

    The allowed set is the first ``threshold`` corpus characters. It is only
    rebuilt by :meth:`set_threshold`; readers get an immutable ``frozenset``
    snapshot, so a transform in flight is never affected by a later change.
    """

    def __init__(self, corpus: Sequence[str], threshold: int = 0) -> None:
        self._corpus = tuple(corpus)
        self._ranks = {char: rank for rank, char in enumerate(self._corpus)}
        self._threshold = 0
        self._allowed: frozenset[str] = frozenset()
        self.set_threshold(threshold)

    @property
    def corpus(self) -> tuple[str, ...]:
        return self._corpus

    @property
    def threshold(self) -> int:
        return self._threshold

    @property
    def allowed(self) -> frozenset[str]:
        """Current allowed-set snapshot."""

        return self._allowed

    @property
    def size(self) -> int:
        return len(self._corpus)

    def set_threshold(self, threshold: int) -> None:
        """Clamp ``threshold`` and rebuild the allowed set from the corpus prefix.

        Args:
            threshold: Requested number of known characters; values outside
                ``[0, len(corpus)]`` are clamped.

        Raises:
            TypeError: If ``threshold`` is not an integer.
        """

        clamped = clamp_threshold(threshold, len(self._corpus))
        if clamped != threshold:
            logger.debug("Clamped vocabulary threshold %d to %d", threshold, clamped)
        self._threshold = clamped
        self._allowed = frozenset(self._corpus[:clamped])

    def is_allowed(self, char: str) -> bool:
        return char in self._allowed

    def rank(self, char: str) -> int | None:
        """Return the corpus frequency rank of ``char``, or ``None``."""

        return self._ranks.get(char)

    def __contains__(self, char: object) -> bool:
        return char in self._allowed

    def __len__(self) -> int:
        return len(self._allowed)

    def __repr__(self) -> str:
        return f"Vocabulary(threshold={self._threshold}, size={len(self._corpus)})"
