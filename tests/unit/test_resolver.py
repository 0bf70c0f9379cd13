"""Unit tests for the four-tier substitution resolver."""

from __future__ import annotations

from easy_reader.engine.ambiguity import AmbiguityClassifier
from easy_reader.engine.index import PronunciationIndex
from easy_reader.engine.resolver import build_replacements, resolve
from easy_reader.engine.vocabulary import Vocabulary
from easy_reader.models import Classification, Replacement
from easy_reader.oracle.table import TableOracle

GREEK_CORPUS = ("α", "β", "γ", "δ")
GREEK_ORACLE = TableOracle.from_mapping(
    {"α": ["he2"], "β": ["he2"], "γ": ["he4"], "δ": ["he2"]}
)


def _greek() -> tuple[PronunciationIndex, AmbiguityClassifier]:
    return PronunciationIndex.build(GREEK_CORPUS, GREEK_ORACLE), AmbiguityClassifier(GREEK_ORACLE)


def test_exact_tone_prefers_most_frequent_allowed_candidate() -> None:
    index, classifier = _greek()
    allowed = Vocabulary(GREEK_CORPUS, threshold=1).allowed

    assert resolve("β", allowed, index, classifier, cross_tone=False) == Replacement(
        "β", "α", Classification.EXACT_TONE
    )
    assert resolve("γ", allowed, index, classifier, cross_tone=False) == Replacement(
        "γ", "γ", Classification.UNRESOLVED
    )


def test_fallback_ignores_vocabulary_but_keeps_own_tone() -> None:
    index, classifier = _greek()

    replacement = resolve("β", frozenset(), index, classifier, cross_tone=False)

    assert replacement == Replacement("β", "α", Classification.OUT_OF_VOCABULARY_FALLBACK)
    assert replacement.outside_vocabulary
    assert not replacement.different_tone


def test_fallback_never_crosses_tones_even_in_cross_tone_mode() -> None:
    """``γ`` (he4) only shares its base with he2 characters, none allowed."""

    index, classifier = _greek()

    replacement = resolve("γ", frozenset(), index, classifier, cross_tone=True)

    assert replacement.classification is Classification.UNRESOLVED
    assert replacement.value == "γ"


def test_ambiguous_candidates_are_skipped(
    index: PronunciationIndex, classifier: AmbiguityClassifier
) -> None:
    """``和`` is allowed but ambiguous, so ``河`` falls back to ``合``."""

    allowed = frozenset({"的", "了", "和"})

    replacement = resolve("河", allowed, index, classifier, cross_tone=False)

    assert replacement == Replacement("河", "合", Classification.OUT_OF_VOCABULARY_FALLBACK)


def test_exact_tone_beats_cross_tone(
    index: PronunciationIndex, classifier: AmbiguityClassifier
) -> None:
    allowed = frozenset({"合", "贺"})

    replacement = resolve("鹤", allowed, index, classifier, cross_tone=True)

    assert replacement == Replacement("鹤", "贺", Classification.EXACT_TONE)


def test_cross_tone_used_only_when_enabled(
    index: PronunciationIndex, classifier: AmbiguityClassifier
) -> None:
    allowed = frozenset({"的", "了", "和", "合", "喝"})

    crossed = resolve("鹤", allowed, index, classifier, cross_tone=True)
    strict = resolve("鹤", allowed, index, classifier, cross_tone=False)

    assert crossed == Replacement("鹤", "合", Classification.CROSS_TONE)
    assert crossed.different_tone
    assert strict == Replacement("鹤", "贺", Classification.OUT_OF_VOCABULARY_FALLBACK)


def test_cross_tone_follows_index_order_across_entries(
    index: PronunciationIndex, classifier: AmbiguityClassifier
) -> None:
    """he2 precedes he1 in the index, so ``禾`` wins over the more frequent ``喝``."""

    allowed = frozenset({"喝", "禾"})

    replacement = resolve("贺", allowed, index, classifier, cross_tone=True)

    assert replacement == Replacement("贺", "禾", Classification.CROSS_TONE)


def test_tone_folding_unlocks_tone_variant_candidates(
    index: PronunciationIndex, classifier: AmbiguityClassifier
) -> None:
    """``喝`` (he1/he4) only counts as unambiguous once tones are folded."""

    allowed = frozenset({"喝"})

    assert resolve("鹤", allowed, index, classifier, cross_tone=True) == Replacement(
        "鹤", "喝", Classification.CROSS_TONE
    )


def test_unknown_character_is_unresolved(
    index: PronunciationIndex, classifier: AmbiguityClassifier
) -> None:
    for cross_tone in (False, True):
        assert resolve("龘", frozenset(), index, classifier, cross_tone) == Replacement(
            "龘", "龘", Classification.UNRESOLVED
        )


def test_characters_outside_corpus_still_resolve(
    index: PronunciationIndex, classifier: AmbiguityClassifier
) -> None:
    """``盒`` is known to the oracle but absent from the corpus."""

    replacement = resolve("盒", frozenset({"合"}), index, classifier, cross_tone=False)

    assert replacement == Replacement("盒", "合", Classification.EXACT_TONE)


def test_resolver_never_returns_ambiguous_substitutes(
    corpus: tuple[str, ...], index: PronunciationIndex, classifier: AmbiguityClassifier
) -> None:
    vocabulary = Vocabulary(corpus)
    for threshold in range(len(corpus) + 1):
        vocabulary.set_threshold(threshold)
        for cross_tone in (False, True):
            for char in corpus:
                replacement = resolve(char, vocabulary.allowed, index, classifier, cross_tone)
                if replacement.classification is Classification.UNRESOLVED:
                    assert replacement.value == char
                    continue
                assert replacement.value != char
                assert not classifier.is_ambiguous(replacement.value, cross_tone)


def test_build_replacements_resolves_each_distinct_character_once(
    index: PronunciationIndex, classifier: AmbiguityClassifier
) -> None:
    allowed = frozenset({"的", "了", "和", "合"})

    replacements = build_replacements(
        ["河", "的", "河", "荷", "龘"], allowed, index, classifier, cross_tone=False
    )

    assert list(replacements) == ["河", "荷", "龘"]
    assert replacements["河"].value == "合"
    assert replacements["荷"].value == "合"
    assert replacements["龘"].classification is Classification.UNRESOLVED
