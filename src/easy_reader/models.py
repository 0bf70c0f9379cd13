"""Data models shared by the index, resolver and transform pipeline.

Every model is an immutable dataclass so a transform result can be handed to a
presentation layer (or compared in tests) without defensive copies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

COMMON_RANK_CUTOFF = 300


class Classification(str, Enum):
    """How a replacement for an out-of-vocabulary character was found."""

    EXACT_TONE = "ExactTone"
    CROSS_TONE = "CrossTone"
    OUT_OF_VOCABULARY_FALLBACK = "OutOfVocabularyFallback"
    UNRESOLVED = "Unresolved"


@dataclass(frozen=True)
class TransformOptions:
    """Per-call policy flags for a transform.

    Attributes:
        cross_tone: Allow substitutes sharing only the base pronunciation and
            fold tone variants together when classifying ambiguity.
        highlight_ambiguous: Flag in-vocabulary heteronyms instead of passing
            them through untouched.
    """

    cross_tone: bool = False
    highlight_ambiguous: bool = False


@dataclass(frozen=True)
class Replacement:
    """Resolved stand-in for one out-of-vocabulary character."""

    source: str
    value: str
    classification: Classification

    @property
    def outside_vocabulary(self) -> bool:
        """Return whether the result did not come from the known vocabulary."""

        return self.classification in {
            Classification.OUT_OF_VOCABULARY_FALLBACK,
            Classification.UNRESOLVED,
        }

    @property
    def different_tone(self) -> bool:
        """Return whether the replacement only shares the base pronunciation."""

        return self.classification is Classification.CROSS_TONE


@dataclass(frozen=True)
class PronunciationAlternatives:
    """Substitute candidates for one pronunciation of an ambiguous character."""

    pronunciation: str
    same_tone: tuple[str, ...] = ()
    cross_tone: tuple[str, ...] = ()


@dataclass(frozen=True)
class AmbiguityRecord:
    """Structured disambiguation data for one heteronym.

    ``rank`` is the character's corpus frequency rank, or ``None`` when the
    character is not part of the corpus.
    """

    char: str
    alternatives: tuple[PronunciationAlternatives, ...]
    rank: int | None = None

    @property
    def pronunciations(self) -> tuple[str, ...]:
        return tuple(item.pronunciation for item in self.alternatives)

    @property
    def common(self) -> bool:
        """Return whether the character sits in the most frequent band."""

        return self.rank is not None and self.rank < COMMON_RANK_CUTOFF


@dataclass(frozen=True)
class TextSegment:
    """Verbatim span of the input."""

    text: str


@dataclass(frozen=True)
class LineBreak:
    """Explicit line-break marker standing in for ``\\n``."""


@dataclass(frozen=True)
class ReplacementSegment:
    """One out-of-vocabulary character and its replacement."""

    replacement: Replacement

    @property
    def source(self) -> str:
        return self.replacement.source

    @property
    def value(self) -> str:
        return self.replacement.value

    @property
    def classification(self) -> Classification:
        return self.replacement.classification


@dataclass(frozen=True)
class AmbiguousSegment:
    """One in-vocabulary heteronym flagged for manual disambiguation."""

    record: AmbiguityRecord

    @property
    def char(self) -> str:
        return self.record.char


Segment = TextSegment | LineBreak | ReplacementSegment | AmbiguousSegment


@dataclass(frozen=True)
class TransformResult:
    """Output bundle of one annotated transform.

    Attributes:
        segments: Ordered output segments covering the whole input.
        replacements: Out-of-vocabulary characters mapped to their resolution,
            in order of first occurrence.
        ambiguous: Flagged heteronyms mapped to their alternatives, in order of
            first occurrence.
    """

    segments: tuple[Segment, ...]
    replacements: dict[str, Replacement] = field(default_factory=dict)
    ambiguous: dict[str, AmbiguityRecord] = field(default_factory=dict)

    @property
    def plain_text(self) -> str:
        """Render segments as plain text with heteronyms left as-is."""

        parts: list[str] = []
        for segment in self.segments:
            if isinstance(segment, TextSegment):
                parts.append(segment.text)
            elif isinstance(segment, LineBreak):
                parts.append("\n")
            elif isinstance(segment, ReplacementSegment):
                parts.append(segment.value)
            else:
                parts.append(segment.char)
        return "".join(parts)
