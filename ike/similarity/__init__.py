# ike/similarity/__init__.py
"""
Embedding-based similar-phrase search.

Usage:
    from ike.similarity import build_combinator

    combinator = build_combinator(config.similarity)
    combinator.similar_to_phrases(["red", "blue"])
"""

from .combinator import EmbeddingSearcherCombinator
from .factory import build_combinator, load_vector_model
from .searcher import MAX_SIMILAR_PHRASES, EmbeddingPhraseSearcher, normalize_phrase
from .types import (
    CombinationStrategy,
    SimilarPhrase,
    UnknownWordError,
    VectorModel,
)
from .vectors import WordVectorModel

__all__ = [
    "CombinationStrategy",
    "SimilarPhrase",
    "UnknownWordError",
    "VectorModel",
    "WordVectorModel",
    "EmbeddingPhraseSearcher",
    "EmbeddingSearcherCombinator",
    "MAX_SIMILAR_PHRASES",
    "normalize_phrase",
    "build_combinator",
    "load_vector_model",
]
