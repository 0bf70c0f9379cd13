"""Repository for loading a frequency-ranked character corpus from disk."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
import logging
from pathlib import Path

from easy_reader.corpus.parser import parse_corpus_lines, parse_json_payload
from easy_reader.validation import validate_corpus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CorpusRepository:
    """Read-only, path-scoped corpus source.

    ``.json`` files are read as a JSON array of characters; any other suffix
    is read as one character per line. The parsed corpus is cached on first
    access and never reloaded.
    """

    path: Path

    @cached_property
    def characters(self) -> tuple[str, ...]:
        """Load, filter and cache the corpus.

        Returns:
            Immutable tuple of distinct characters, most frequent first.

        Raises:
            FileNotFoundError: If the configured corpus file does not exist.
            ValueError: If no usable characters remain after filtering.
        """

        if not self.path.exists():
            raise FileNotFoundError(f"Corpus file not found: {self.path}")

        if self.path.suffix.lower() == ".json":
            corpus = parse_json_payload(self.path.read_text(encoding="utf-8"))
        else:
            with self.path.open("r", encoding="utf-8") as handle:
                corpus = parse_corpus_lines(handle)

        validate_corpus(corpus)
        logger.debug("Loaded %d corpus characters from %s", len(corpus), self.path)
        return tuple(corpus)

    def __len__(self) -> int:
        return len(self.characters)
