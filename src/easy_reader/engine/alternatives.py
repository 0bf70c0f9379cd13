"""Ranked substitute candidates for ambiguous characters.

The enumerator produces structured data only. Serialized records use the wire
format ``pron:same1,same2:cross1,cross2`` joined by ``|``, for example
``he2:合:喝|he4:贺:``.
"""

from __future__ import annotations

from typing import Iterable

from easy_reader.engine.ambiguity import AmbiguityClassifier
from easy_reader.engine.index import PronunciationIndex
from easy_reader.models import PronunciationAlternatives
from easy_reader.oracle.tones import base_pronunciation

RECORD_SEPARATOR = "|"
FIELD_SEPARATOR = ":"
CANDIDATE_SEPARATOR = ","


def same_tone_candidates(
    pronunciation: str,
    exclude_char: str,
    index: PronunciationIndex,
    classifier: AmbiguityClassifier,
    tone_folding: bool,
    limit: int = 1,
) -> tuple[str, ...]:
    """Return the most frequent unambiguous characters sharing ``pronunciation``.

    Args:
        pronunciation: Exact toned pronunciation to search.
        exclude_char: Character being disambiguated.
        index: Pronunciation index.
        classifier: Ambiguity classifier used to skip other heteronyms.
        tone_folding: Active tone policy.
        limit: Maximum number of candidates.

    Returns:
        Up to ``limit`` candidates in frequency order.
    """

    found: list[str] = []
    for candidate in index.lookup(pronunciation):
        if len(found) >= limit:
            break
        if candidate == exclude_char or classifier.is_ambiguous(candidate, tone_folding):
            continue
        found.append(candidate)
    return tuple(found)


def cross_tone_candidates(
    base: str,
    exclude_char: str,
    exclude_pronunciation: str,
    index: PronunciationIndex,
    classifier: AmbiguityClassifier,
    tone_folding: bool,
    exclude: Iterable[str] = (),
    limit: int = 1,
) -> tuple[str, ...]:
    """Return unambiguous characters sharing ``base`` under a different tone.

    Entries are visited in index insertion order, skipping the entry for
    ``exclude_pronunciation``; each entry contributes at most its first usable
    character.

    Args:
        base: Tone-folded pronunciation to match.
        exclude_char: Character being disambiguated.
        exclude_pronunciation: Toned entry already covered by the same-tone pick.
        index: Pronunciation index.
        classifier: Ambiguity classifier used to skip other heteronyms.
        tone_folding: Active tone policy.
        exclude: Characters already offered, typically the same-tone pick.
        limit: Maximum number of candidates.

    Returns:
        Up to ``limit`` candidates.
    """

    skip = {exclude_char, *exclude}
    found: list[str] = []
    for pronunciation in index.pronunciations_for_base(base):
        if len(found) >= limit:
            break
        if pronunciation == exclude_pronunciation:
            continue
        for candidate in index.lookup(pronunciation):
            if candidate in skip or candidate in found:
                continue
            if classifier.is_ambiguous(candidate, tone_folding):
                continue
            found.append(candidate)
            break
    return tuple(found)


def enumerate_alternatives(
    char: str,
    index: PronunciationIndex,
    classifier: AmbiguityClassifier,
    tone_folding: bool,
) -> tuple[PronunciationAlternatives, ...]:
    """Build one alternatives record per pronunciation of ``char``.

    Args:
        char: Ambiguous character.
        index: Pronunciation index.
        classifier: Ambiguity classifier, also the source of pronunciations.
        tone_folding: Active tone policy.

    Returns:
        Records in the oracle's pronunciation order.
    """

    records: list[PronunciationAlternatives] = []
    for pronunciation in classifier.pronunciations(char):
        same = same_tone_candidates(pronunciation, char, index, classifier, tone_folding)
        cross = cross_tone_candidates(
            base_pronunciation(pronunciation),
            char,
            pronunciation,
            index,
            classifier,
            tone_folding,
            exclude=same,
        )
        records.append(
            PronunciationAlternatives(pronunciation=pronunciation, same_tone=same, cross_tone=cross)
        )
    return tuple(records)


def serialize_alternatives(records: Iterable[PronunciationAlternatives]) -> str:
    """Render alternatives records in the ``pron:same:cross|...`` wire format."""

    return RECORD_SEPARATOR.join(
        FIELD_SEPARATOR.join(
            [
                record.pronunciation,
                CANDIDATE_SEPARATOR.join(record.same_tone),
                CANDIDATE_SEPARATOR.join(record.cross_tone),
            ]
        )
        for record in records
    )


def parse_alternatives(payload: str) -> tuple[PronunciationAlternatives, ...]:
    """Decode a wire-format payload back into alternatives records.

    Missing trailing fields decode as empty candidate lists and empty
    candidate strings are dropped.

    Args:
        payload: Serialized records.

    Returns:
        Decoded records; empty for an empty payload.
    """

    if not payload:
        return ()

    records: list[PronunciationAlternatives] = []
    for item in payload.split(RECORD_SEPARATOR):
        pronunciation, _, rest = item.partition(FIELD_SEPARATOR)
        same, _, cross = rest.partition(FIELD_SEPARATOR)
        records.append(
            PronunciationAlternatives(
                pronunciation=pronunciation,
                same_tone=tuple(c for c in same.split(CANDIDATE_SEPARATOR) if c),
                cross_tone=tuple(c for c in cross.split(CANDIDATE_SEPARATOR) if c),
            )
        )
    return tuple(records)
