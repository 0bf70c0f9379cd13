"""Unit tests for the vocabulary threshold view."""

from __future__ import annotations

import pytest

from easy_reader.engine.vocabulary import Vocabulary

CORPUS = ("的", "了", "和", "合", "喝")


def test_threshold_selects_corpus_prefix() -> None:
    vocabulary = Vocabulary(CORPUS, threshold=2)

    assert vocabulary.allowed == frozenset({"的", "了"})
    assert vocabulary.is_allowed("了")
    assert "和" not in vocabulary
    assert len(vocabulary) == 2


def test_set_threshold_clamps_out_of_range_values() -> None:
    vocabulary = Vocabulary(CORPUS)

    vocabulary.set_threshold(-4)
    assert vocabulary.threshold == 0
    assert vocabulary.allowed == frozenset()

    vocabulary.set_threshold(99)
    assert vocabulary.threshold == len(CORPUS)
    assert vocabulary.allowed == frozenset(CORPUS)


def test_set_threshold_replaces_snapshot_without_mutating_old_one() -> None:
    vocabulary = Vocabulary(CORPUS, threshold=3)
    before = vocabulary.allowed

    vocabulary.set_threshold(1)

    assert before == frozenset({"的", "了", "和"})
    assert vocabulary.allowed == frozenset({"的"})


def test_set_threshold_rejects_non_integers() -> None:
    vocabulary = Vocabulary(CORPUS)

    with pytest.raises(TypeError):
        vocabulary.set_threshold("3")  # type: ignore[arg-type]


def test_rank_lookup() -> None:
    vocabulary = Vocabulary(CORPUS)

    assert vocabulary.rank("和") == 2
    assert vocabulary.rank("龘") is None
    assert vocabulary.size == 5
