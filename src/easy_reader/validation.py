"""Validation helpers for corpus input and transform result summaries."""

from __future__ import annotations

from collections import Counter
import re
from typing import Sequence

from easy_reader.models import Classification, TransformResult

PRONUNCIATION_RE = re.compile(r"^[a-zA-Zü]+[1-5]?$")
LOGOGRAPH_RE = re.compile(r"[一-鿿]")


def raise_aggregated(label: str, errors: Sequence[str]) -> None:
    """Raise one ``ValueError`` summarizing collected validation errors.

    Args:
        label: Human-readable name of the validated input.
        errors: Collected error lines; nothing is raised when empty.

    Raises:
        ValueError: If ``errors`` is non-empty.
    """

    if not errors:
        return
    preview = "\n".join(f"- {item}" for item in errors[:25])
    rest = len(errors) - min(25, len(errors))
    more = f"\n- ... and {rest} more" if rest > 0 else ""
    raise ValueError(f"{label} validation failed with {len(errors)} errors:\n{preview}{more}")


def validate_corpus(corpus: Sequence[str]) -> None:
    """Validate a filtered corpus before an index is built from it.

    Args:
        corpus: Frequency-ordered characters after filtering.

    Raises:
        ValueError: If the corpus is empty, contains multi-character entries
            or repeats a character.
    """

    if not corpus:
        raise ValueError("Corpus validation failed: no usable characters")

    errors: list[str] = []
    seen: set[str] = set()
    for rank, char in enumerate(corpus):
        if len(char) != 1:
            errors.append(f"Rank {rank}: expected a single character, got '{char}'")
        if char in seen:
            errors.append(f"Rank {rank}: duplicate character '{char}'")
        seen.add(char)

    raise_aggregated("Corpus", errors)


def clamp_threshold(threshold: int, corpus_size: int) -> int:
    """Clamp a vocabulary threshold into ``[0, corpus_size]``.

    Raises:
        TypeError: If ``threshold`` is not an integer.
    """

    if isinstance(threshold, bool) or not isinstance(threshold, int):
        raise TypeError(f"threshold must be an int, got {type(threshold).__name__}")
    return max(0, min(threshold, corpus_size))


def collect_classification_counts(result: TransformResult) -> dict[Classification, int]:
    """Count distinct replaced characters per classification.

    Args:
        result: Annotated transform result.

    Returns:
        Mapping with every classification present, zero when unused.
    """

    counter: Counter[Classification] = Counter()
    for replacement in result.replacements.values():
        counter[replacement.classification] += 1
    return {item: counter.get(item, 0) for item in Classification}


def collect_occurrence_count(text: str) -> int:
    """Count logographic characters in ``text``."""

    return len(LOGOGRAPH_RE.findall(text))
