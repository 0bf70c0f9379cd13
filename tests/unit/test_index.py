"""Unit tests for the pronunciation index."""

from __future__ import annotations

from easy_reader.engine.index import PronunciationIndex
from easy_reader.oracle.table import TableOracle


def test_build_groups_by_primary_pronunciation_in_corpus_order(index: PronunciationIndex) -> None:
    assert index.lookup("he2") == ("和", "合", "河", "荷", "禾")
    assert index.lookup("he4") == ("贺", "鹤")
    assert index.lookup("he1") == ("喝",)
    assert index.lookup("hao3") == ("好", "郝")
    assert index.lookup("missing9") == ()
    assert index.lookup(None) == ()


def test_build_skips_characters_without_pronunciation(index: PronunciationIndex) -> None:
    """``龘`` is in the corpus but unknown to the oracle."""

    assert all("龘" not in chars for chars in index.entries.values())
    assert index.rank("龘") == 13


def test_entry_order_is_insertion_order(index: PronunciationIndex) -> None:
    assert list(index.entries) == ["de5", "le5", "he2", "he1", "he4", "hao3", "hao4"]
    assert len(index) == 7
    assert "he2" in index


def test_base_view_lists_toned_keys_in_index_order(index: PronunciationIndex) -> None:
    assert index.pronunciations_for_base("he") == ("he2", "he1", "he4")
    assert index.pronunciations_for_base("hao") == ("hao3", "hao4")
    assert index.pronunciations_for_base("xyz") == ()


def test_every_indexed_character_sits_under_its_primary_pronunciation(
    index: PronunciationIndex, oracle: TableOracle
) -> None:
    seen: list[str] = []
    for pronunciation, chars in index.entries.items():
        for char in chars:
            assert oracle.primary_pronunciation(char) == pronunciation
            seen.append(char)
    assert len(seen) == len(set(seen))


def test_build_is_idempotent(corpus: tuple[str, ...], oracle: TableOracle) -> None:
    assert PronunciationIndex.build(corpus, oracle) == PronunciationIndex.build(corpus, oracle)
