"""Four-tier substitution resolver for out-of-vocabulary characters."""

from __future__ import annotations

from typing import AbstractSet, Iterable

from easy_reader.engine.ambiguity import AmbiguityClassifier
from easy_reader.engine.index import PronunciationIndex
from easy_reader.models import Classification, Replacement
from easy_reader.oracle.tones import base_pronunciation


def _first_candidate(
    candidates: tuple[str, ...],
    char: str,
    classifier: AmbiguityClassifier,
    tone_folding: bool,
    allowed: AbstractSet[str] | None,
) -> str | None:
    """Return the first usable substitute in frequency order.

    Args:
        candidates: Index entry characters, most frequent first.
        char: Character being replaced; never returned.
        classifier: Ambiguity classifier; ambiguous candidates are skipped.
        tone_folding: Active tone policy for the ambiguity check.
        allowed: Allowed set to restrict to, or ``None`` to ignore membership.

    Returns:
        Selected candidate, or ``None`` when the entry has none.
    """

    for candidate in candidates:
        if candidate == char:
            continue
        if allowed is not None and candidate not in allowed:
            continue
        if classifier.is_ambiguous(candidate, tone_folding):
            continue
        return candidate
    return None


def resolve(
    char: str,
    allowed: AbstractSet[str],
    index: PronunciationIndex,
    classifier: AmbiguityClassifier,
    cross_tone: bool,
) -> Replacement:
    """Pick a phonetic stand-in for one out-of-vocabulary character.

    Resolution order:
    1) most frequent allowed, unambiguous character sharing the exact toned
       pronunciation (``ExactTone``),
    2) with ``cross_tone`` only: the same search over the other tones of the
       base pronunciation, in index order (``CrossTone``),
    3) most frequent unambiguous character sharing the exact toned
       pronunciation, ignoring the allowed set (``OutOfVocabularyFallback``),
    4) the character itself (``Unresolved``).

    Tier 3 deliberately stays on the character's own tone even in cross-tone
    mode.

    Args:
        char: Character to replace.
        allowed: Allowed-set snapshot from the vocabulary.
        index: Pronunciation index over the full corpus.
        classifier: Ambiguity classifier sharing the index's oracle.
        cross_tone: Whether cross-tone substitution is enabled.

    Returns:
        Replacement carrying the selected value and its classification.
    """

    pronunciation = classifier.oracle.primary_pronunciation(char)
    if not pronunciation:
        return Replacement(char, char, Classification.UNRESOLVED)

    same_pronunciation = index.lookup(pronunciation)

    exact = _first_candidate(same_pronunciation, char, classifier, cross_tone, allowed)
    if exact is not None:
        return Replacement(char, exact, Classification.EXACT_TONE)

    if cross_tone:
        for other in index.pronunciations_for_base(base_pronunciation(pronunciation)):
            if other == pronunciation:
                continue
            found = _first_candidate(index.lookup(other), char, classifier, cross_tone, allowed)
            if found is not None:
                return Replacement(char, found, Classification.CROSS_TONE)

    fallback = _first_candidate(same_pronunciation, char, classifier, cross_tone, None)
    if fallback is not None:
        return Replacement(char, fallback, Classification.OUT_OF_VOCABULARY_FALLBACK)

    return Replacement(char, char, Classification.UNRESOLVED)


def build_replacements(
    chars: Iterable[str],
    allowed: AbstractSet[str],
    index: PronunciationIndex,
    classifier: AmbiguityClassifier,
    cross_tone: bool,
) -> dict[str, Replacement]:
    """Resolve every distinct out-of-vocabulary character exactly once.

    Args:
        chars: Characters in order of appearance; repeats are collapsed.
        allowed: Allowed-set snapshot.
        index: Pronunciation index.
        classifier: Ambiguity classifier.
        cross_tone: Whether cross-tone substitution is enabled.

    Returns:
        Mapping of source character to replacement in first-seen order.
        In-vocabulary characters are not included.
    """

    replacements: dict[str, Replacement] = {}
    for char in dict.fromkeys(chars):
        if char in allowed:
            continue
        replacements[char] = resolve(char, allowed, index, classifier, cross_tone)
    return replacements
