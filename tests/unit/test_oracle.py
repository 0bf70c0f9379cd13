"""Unit tests for pronunciation oracles and tone helpers."""

from __future__ import annotations

import pytest

from easy_reader.oracle.protocol import PronunciationOracle
from easy_reader.oracle.pypinyin_oracle import PypinyinOracle
from easy_reader.oracle.table import TableOracle, parse_table_lines
from easy_reader.oracle.tones import base_pronunciation, distinct_bases


def test_base_pronunciation_strips_only_trailing_tone() -> None:
    assert base_pronunciation("zhong1") == "zhong"
    assert base_pronunciation("le5") == "le"
    assert base_pronunciation("ng") == "ng"
    assert base_pronunciation("") == ""


def test_distinct_bases_keeps_first_seen_order() -> None:
    assert distinct_bases(("hao3", "hao4", "he2")) == ("hao", "he")


def test_parse_table_lines_without_header_accepts_commas() -> None:
    mapping = parse_table_lines(iter(["了\tle5,liao3\n", "# note\n", "合\the2\n"]))

    assert mapping == {"了": ("le5", "liao3"), "合": ("he2",)}


def test_parse_table_lines_reports_all_malformed_rows() -> None:
    lines = ["char\tpronunciations", "了", "和合\the2", "合\the2!"]

    with pytest.raises(ValueError, match="3 errors"):
        parse_table_lines(iter(lines))


def test_table_oracle_primary_is_first_listed(oracle: TableOracle) -> None:
    assert isinstance(oracle, PronunciationOracle)
    assert oracle.primary_pronunciation("和") == "he2"
    assert oracle.all_pronunciations("了") == ("le5", "liao3")
    assert oracle.primary_pronunciation("龘") is None
    assert oracle.all_pronunciations("龘") == ()


def test_table_oracle_from_mapping_deduplicates() -> None:
    oracle = TableOracle.from_mapping({"好": ["hao3", "hao4", "hao3"]})

    assert oracle.all_pronunciations("好") == ("hao3", "hao4")


def test_pypinyin_oracle_reports_numbered_tones() -> None:
    oracle = PypinyinOracle()

    assert isinstance(oracle, PronunciationOracle)
    assert oracle.primary_pronunciation("和") == "he2"
    assert oracle.primary_pronunciation("了") == "le5"
    assert {"le5", "liao3"} <= set(oracle.all_pronunciations("了"))
    assert {"hao3", "hao4"} <= set(oracle.all_pronunciations("好"))


def test_pypinyin_oracle_unknown_input_is_absent() -> None:
    oracle = PypinyinOracle()

    assert oracle.primary_pronunciation("a") is None
    assert oracle.all_pronunciations("!") == ()
    assert oracle.primary_pronunciation("") is None
