"""Top-level orchestration for rewriting text against a known vocabulary."""

from __future__ import annotations

from dataclasses import replace
import logging
import re
import threading
from typing import AbstractSet, Any, Iterable, Sequence

from easy_reader.corpus.parser import normalize_entries
from easy_reader.engine.alternatives import enumerate_alternatives, serialize_alternatives
from easy_reader.engine.ambiguity import AmbiguityClassifier
from easy_reader.engine.index import PronunciationIndex
from easy_reader.engine.resolver import build_replacements
from easy_reader.engine.vocabulary import Vocabulary
from easy_reader.models import (
    AmbiguityRecord,
    AmbiguousSegment,
    LineBreak,
    ReplacementSegment,
    Segment,
    TextSegment,
    TransformOptions,
    TransformResult,
)
from easy_reader.oracle.protocol import PronunciationOracle
from easy_reader.validation import validate_corpus

logger = logging.getLogger(__name__)

CJK_RE = re.compile(r"[一-鿿]")


def _logographs(text: str) -> list[str]:
    """Return logographic characters of ``text`` in order of appearance."""

    return CJK_RE.findall(text)


def _build_ambiguity_records(
    chars: Iterable[str],
    replaced: AbstractSet[str],
    index: PronunciationIndex,
    classifier: AmbiguityClassifier,
    tone_folding: bool,
) -> dict[str, AmbiguityRecord]:
    """Classify each distinct non-replaced character once.

    Args:
        chars: Logographic characters in order of appearance.
        replaced: Characters already handled by the resolver.
        index: Pronunciation index.
        classifier: Ambiguity classifier.
        tone_folding: Active tone policy.

    Returns:
        Ambiguity records for heteronyms, in first-seen order.
    """

    records: dict[str, AmbiguityRecord] = {}
    for char in dict.fromkeys(chars):
        if char in replaced or not classifier.is_ambiguous(char, tone_folding):
            continue
        records[char] = AmbiguityRecord(
            char=char,
            alternatives=enumerate_alternatives(char, index, classifier, tone_folding),
            rank=index.rank(char),
        )
    return records


def transform(
    text: str,
    allowed: AbstractSet[str],
    index: PronunciationIndex,
    classifier: AmbiguityClassifier,
    options: TransformOptions = TransformOptions(),
) -> TransformResult:
    """Rewrite ``text`` into annotated segments.

    Every distinct logographic character is resolved (or classified) once
    before the text is re-walked, so all occurrences of a character receive
    the same treatment within one call.

    Args:
        text: Input text.
        allowed: Allowed-set snapshot produced by :class:`Vocabulary`.
        index: Pronunciation index built from the vocabulary's corpus.
        classifier: Ambiguity classifier over the index's oracle.
        options: Tone and highlight policy for this call.

    Returns:
        ``TransformResult`` with segments and per-character resolution data.
    """

    chars = _logographs(text)
    replacements = build_replacements(chars, allowed, index, classifier, options.cross_tone)
    ambiguous: dict[str, AmbiguityRecord] = {}
    if options.highlight_ambiguous:
        ambiguous = _build_ambiguity_records(
            chars, replacements.keys(), index, classifier, options.cross_tone
        )

    segments: list[Segment] = []
    buffer: list[str] = []

    def flush_buffer() -> None:
        if buffer:
            segments.append(TextSegment("".join(buffer)))
            buffer.clear()

    for ch in text:
        if ch == "\n":
            flush_buffer()
            segments.append(LineBreak())
        elif ch in replacements:
            flush_buffer()
            segments.append(ReplacementSegment(replacements[ch]))
        elif ch in ambiguous:
            flush_buffer()
            segments.append(AmbiguousSegment(ambiguous[ch]))
        else:
            buffer.append(ch)
    flush_buffer()

    logger.debug(
        "Transformed %d characters: %d replaced, %d ambiguous",
        len(chars),
        len(replacements),
        len(ambiguous),
    )
    return TransformResult(segments=tuple(segments), replacements=replacements, ambiguous=ambiguous)


def transform_plain(
    text: str,
    allowed: AbstractSet[str],
    index: PronunciationIndex,
    classifier: AmbiguityClassifier,
    cross_tone: bool = False,
) -> str:
    """Rewrite ``text`` and return only the resulting string.

    Heteronyms are left as-is and no classification metadata is produced.
    """

    replacements = build_replacements(_logographs(text), allowed, index, classifier, cross_tone)
    return "".join(replacements[ch].value if ch in replacements else ch for ch in text)


def segments_to_records(result: TransformResult) -> list[dict[str, Any]]:
    """Convert segments into JSON-serializable dictionaries.

    Args:
        result: Annotated transform result.

    Returns:
        One dictionary per segment with a ``type`` discriminator.
    """

    records: list[dict[str, Any]] = []
    for segment in result.segments:
        if isinstance(segment, TextSegment):
            records.append({"type": "text", "text": segment.text})
        elif isinstance(segment, LineBreak):
            records.append({"type": "line_break"})
        elif isinstance(segment, ReplacementSegment):
            records.append(
                {
                    "type": "replacement",
                    "source": segment.source,
                    "value": segment.value,
                    "classification": segment.classification.value,
                }
            )
        else:
            records.append(
                {
                    "type": "ambiguous",
                    "char": segment.char,
                    "common": segment.record.common,
                    "alternatives": serialize_alternatives(segment.record.alternatives),
                }
            )
    return records


class ReaderSession:
    """Session owning the immutable index plus mutable vocabulary and policy.

    Setters are the only mutation points. Each transform takes a snapshot of
    the allowed set and options under a lock and runs on that snapshot, so
    concurrent callers never observe a half-applied change.
    """

    def __init__(
        self,
        index: PronunciationIndex,
        classifier: AmbiguityClassifier,
        threshold: int = 0,
        options: TransformOptions | None = None,
    ) -> None:
        self._index = index
        self._classifier = classifier
        self._vocabulary = Vocabulary(index.corpus, threshold)
        self._options = options or TransformOptions()
        self._lock = threading.Lock()

    @classmethod
    def from_corpus(
        cls,
        corpus: Sequence[Any],
        oracle: PronunciationOracle | None = None,
        threshold: int = 0,
        options: TransformOptions | None = None,
    ) -> "ReaderSession":
        """Filter ``corpus``, build the index once and open a session.

        Args:
            corpus: Raw frequency-ordered entries; invalid entries are dropped.
            oracle: Pronunciation oracle; defaults to :class:`PypinyinOracle`.
            threshold: Initial vocabulary threshold.
            options: Initial tone and highlight policy.

        Returns:
            Ready-to-use session.

        Raises:
            ValueError: If no usable characters remain after filtering.
        """

        if oracle is None:
            from easy_reader.oracle.pypinyin_oracle import PypinyinOracle

            oracle = PypinyinOracle()

        characters = normalize_entries(corpus)
        validate_corpus(characters)
        index = PronunciationIndex.build(characters, oracle)
        return cls(index, AmbiguityClassifier(oracle), threshold=threshold, options=options)

    @property
    def index(self) -> PronunciationIndex:
        return self._index

    @property
    def classifier(self) -> AmbiguityClassifier:
        return self._classifier

    @property
    def vocabulary(self) -> Vocabulary:
        return self._vocabulary

    @property
    def options(self) -> TransformOptions:
        return self._options

    def set_threshold(self, threshold: int) -> None:
        with self._lock:
            self._vocabulary.set_threshold(threshold)
            logger.debug("Vocabulary threshold set to %d", self._vocabulary.threshold)

    def set_cross_tone(self, enabled: bool) -> None:
        with self._lock:
            self._options = replace(self._options, cross_tone=enabled)

    def set_highlight_ambiguous(self, enabled: bool) -> None:
        with self._lock:
            self._options = replace(self._options, highlight_ambiguous=enabled)

    def _snapshot(self) -> tuple[frozenset[str], TransformOptions]:
        with self._lock:
            return self._vocabulary.allowed, self._options

    def transform(self, text: str) -> TransformResult:
        """Annotated transform against the current vocabulary and policy."""

        allowed, options = self._snapshot()
        return transform(text, allowed, self._index, self._classifier, options)

    def transform_plain(self, text: str) -> str:
        """Plain-text transform against the current vocabulary and tone policy."""

        allowed, options = self._snapshot()
        return transform_plain(text, allowed, self._index, self._classifier, options.cross_tone)
