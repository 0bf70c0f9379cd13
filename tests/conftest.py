"""Shared fixtures built on the mini corpus and curated pronunciation table."""

from __future__ import annotations

from pathlib import Path

import pytest

from easy_reader.corpus.repository import CorpusRepository
from easy_reader.engine.ambiguity import AmbiguityClassifier
from easy_reader.engine.index import PronunciationIndex
from easy_reader.oracle.table import TableOracle

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES


@pytest.fixture
def corpus() -> tuple[str, ...]:
    return CorpusRepository(FIXTURES / "mini_corpus.json").characters


@pytest.fixture
def oracle() -> TableOracle:
    return TableOracle.from_path(FIXTURES / "mini_pronunciations.tsv")


@pytest.fixture
def index(corpus: tuple[str, ...], oracle: TableOracle) -> PronunciationIndex:
    return PronunciationIndex.build(corpus, oracle)


@pytest.fixture
def classifier(oracle: TableOracle) -> AmbiguityClassifier:
    return AmbiguityClassifier(oracle)
