# tests/unit/test_similarity.py
"""
Tests for ike.similarity.

Tests cover:
1. CombinationStrategy - parsing and reduction
2. EmbeddingPhraseSearcher - normalisation, unknown phrases, centroid search
3. EmbeddingSearcherCombinator - strategies, ordering, dimension check
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
import pytest

from ike.core.config import ConfigError
from ike.query import QWord
from ike.similarity import (
    CombinationStrategy,
    EmbeddingPhraseSearcher,
    EmbeddingSearcherCombinator,
    SimilarPhrase,
    normalize_phrase,
)

# ---------------------------------------------------------------------------
# Test Fixtures
# ---------------------------------------------------------------------------


def phrase(text: str, similarity: float) -> SimilarPhrase:
    return SimilarPhrase(tuple(QWord(w) for w in text.split()), similarity)


@dataclass
class MockSearcher:
    """Searcher returning canned results."""

    results: list = field(default_factory=list)
    embedding_size: int = 2
    name: str = "mock"
    calls: list = field(default_factory=list)

    def similar_to_phrase(self, text):
        self.calls.append(text)
        return list(self.results)

    def similar_to_phrases(self, texts):
        self.calls.append(list(texts))
        return list(self.results)


# ---------------------------------------------------------------------------
# Tests for CombinationStrategy
# ---------------------------------------------------------------------------


class TestCombinationStrategy:
    """Tests for strategy parsing and reduction."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("sum", CombinationStrategy.SUM),
            ("MIN", CombinationStrategy.MIN),
            (" max ", CombinationStrategy.MAX),
            ("average", CombinationStrategy.MEAN),
            ("mean", CombinationStrategy.MEAN),
            ("median", CombinationStrategy.MEAN),
        ],
    )
    def test_parse(self, name, expected):
        assert CombinationStrategy.parse(name) is expected

    def test_combine(self):
        scores = [0.8, 0.4]
        assert CombinationStrategy.SUM.combine(scores) == pytest.approx(1.2)
        assert CombinationStrategy.MIN.combine(scores) == pytest.approx(0.4)
        assert CombinationStrategy.MAX.combine(scores) == pytest.approx(0.8)
        assert CombinationStrategy.MEAN.combine(scores) == pytest.approx(0.6)


# ---------------------------------------------------------------------------
# Tests for EmbeddingPhraseSearcher
# ---------------------------------------------------------------------------


class TestEmbeddingPhraseSearcher:
    """Tests for single-backend search."""

    def test_normalize_phrase(self):
        assert normalize_phrase("Dark Red") == "dark_red"

    def test_similar_to_phrase_ranked(self, color_model):
        searcher = EmbeddingPhraseSearcher(color_model)

        results = searcher.similar_to_phrase("red")

        assert results[0] == phrase("red", pytest.approx(1.0))
        similarities = [r.similarity for r in results]
        assert similarities == sorted(similarities, reverse=True)
        assert results[-1].phrase == "car"

    def test_multi_word_phrase_lookup(self, color_model):
        results = EmbeddingPhraseSearcher(color_model).similar_to_phrase("Dark Red")

        assert results[0].qwords == (QWord("dark"), QWord("red"))

    def test_unknown_phrase_gives_empty_result(self, color_model):
        assert EmbeddingPhraseSearcher(color_model).similar_to_phrase("teal") == []

    def test_max_similar_phrases_caps_results(self, color_model):
        searcher = EmbeddingPhraseSearcher(color_model, max_similar_phrases=2)
        assert len(searcher.similar_to_phrase("red")) == 2

    def test_vector_for_phrase(self, color_model):
        searcher = EmbeddingPhraseSearcher(color_model)
        assert np.allclose(searcher.vector_for_phrase("Blue"), [0.0, 1.0])
        assert searcher.vector_for_phrase("teal") is None

    def test_centroid_skips_unknown_phrases(self, color_model):
        searcher = EmbeddingPhraseSearcher(color_model)

        results = searcher.similar_to_phrases(["red", "blue", "teal"])

        # centroid of red and blue points the same way as purple
        assert results[0].phrase == "purple"
        assert results[0].similarity == pytest.approx(1.0)

    def test_centroid_with_no_known_phrases_is_empty(self, color_model):
        assert EmbeddingPhraseSearcher(color_model).similar_to_phrases(["teal", "mauve"]) == []
        assert EmbeddingPhraseSearcher(color_model).similar_to_phrases([]) == []


# ---------------------------------------------------------------------------
# Tests for EmbeddingSearcherCombinator
# ---------------------------------------------------------------------------


class TestEmbeddingSearcherCombinator:
    """Tests for combining several backends."""

    @pytest.mark.parametrize(
        "strategy, expected",
        [
            (CombinationStrategy.SUM, 1.2),
            (CombinationStrategy.MIN, 0.4),
            (CombinationStrategy.MAX, 0.8),
            (CombinationStrategy.MEAN, 0.6),
        ],
    )
    def test_strategies(self, strategy, expected):
        searchers = [MockSearcher([phrase("x", 0.8)]), MockSearcher([phrase("x", 0.4)])]
        combinator = EmbeddingSearcherCombinator(searchers, strategy)

        results = combinator.similar_to_phrase("y")

        assert len(results) == 1
        assert results[0].phrase == "x"
        assert results[0].similarity == pytest.approx(expected)

    def test_default_strategy_is_average(self):
        combinator = EmbeddingSearcherCombinator([MockSearcher(), MockSearcher()])
        assert combinator.strategy is CombinationStrategy.MEAN

    def test_mean_over_searchers_that_found_the_phrase(self):
        searchers = [
            MockSearcher([phrase("x", 0.8), phrase("y", 0.9)]),
            MockSearcher([phrase("x", 0.4)]),
        ]
        results = EmbeddingSearcherCombinator(searchers).similar_to_phrase("z")

        assert [(r.phrase, round(r.similarity, 6)) for r in results] == [("y", 0.9), ("x", 0.6)]

    def test_sorted_descending(self):
        searchers = [
            MockSearcher([phrase("a", 0.1), phrase("b", 0.5)]),
            MockSearcher([phrase("c", 0.3), phrase("a", 0.9)]),
        ]
        results = EmbeddingSearcherCombinator(searchers, CombinationStrategy.SUM).similar_to_phrase("q")

        assert [r.phrase for r in results] == ["a", "b", "c"]
        assert results[0].similarity == pytest.approx(1.0)

    def test_ties_keep_first_seen_order(self):
        searchers = [MockSearcher([phrase("b", 0.5), phrase("a", 0.5)])]
        results = EmbeddingSearcherCombinator(searchers).similar_to_phrase("q")
        assert [r.phrase for r in results] == ["b", "a"]

    def test_every_searcher_is_queried(self):
        searchers = [MockSearcher(), MockSearcher(), MockSearcher()]
        EmbeddingSearcherCombinator(searchers).similar_to_phrases(["red", "blue"])
        assert all(s.calls == [["red", "blue"]] for s in searchers)

    def test_dimension_mismatch_is_config_error(self):
        with pytest.raises(ConfigError, match="Embedding sizes"):
            EmbeddingSearcherCombinator(
                [MockSearcher(embedding_size=2, name="a"), MockSearcher(embedding_size=3, name="b")]
            )

    def test_requires_a_searcher(self):
        with pytest.raises(ConfigError):
            EmbeddingSearcherCombinator([])

    def test_with_real_vectors(self, color_model):
        searchers = [EmbeddingPhraseSearcher(color_model), EmbeddingPhraseSearcher(color_model)]
        combinator = EmbeddingSearcherCombinator(searchers, CombinationStrategy.SUM)

        results = combinator.similar_to_phrases(["red", "blue"])

        assert results[0].phrase == "purple"
        assert results[0].similarity == pytest.approx(2.0)
        assert combinator.embedding_size == 2
