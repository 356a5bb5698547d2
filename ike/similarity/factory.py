# ike/similarity/factory.py
"""Build phrase searchers from configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ike.core.config import ConfigError, ConfigNotFoundError
from ike.logging.logger import get_logger
from ike.logging.tags import EMBEDDING

from .combinator import EmbeddingSearcherCombinator
from .searcher import EmbeddingPhraseSearcher
from .vectors import WordVectorModel

if TYPE_CHECKING:
    from ike.config.schema import EmbeddingSourceConfig, SimilarityConfig

logger = get_logger(__name__)


def load_vector_model(source: "EmbeddingSourceConfig") -> WordVectorModel:
    """
    Load the vectors of one configured embedding source.

    Raises:
        ConfigNotFoundError: If the vector file doesn't exist
        ConfigError: If the file can't be read or its size disagrees with
            the configured embedding_size
    """
    if not source.path.exists():
        raise ConfigNotFoundError(f"Vector file for '{source.name}' not found", path=source.path)

    logger.info(f"{EMBEDDING} Loading phrase vectors for '{source.name}' ...")
    try:
        if source.format == "binary":
            model = WordVectorModel.from_binary_file(source.path)
        else:
            model = WordVectorModel.from_text_file(source.path)
    except (ValueError, IndexError, UnicodeDecodeError) as e:
        raise ConfigError(f"Could not read vectors for '{source.name}': {e}", path=source.path) from e

    if source.embedding_size is not None and source.embedding_size != model.dimension:
        raise ConfigError(
            f"Embedding '{source.name}' declares size {source.embedding_size} "
            f"but the file holds vectors of size {model.dimension}",
            path=source.path,
        )

    logger.info(f"{EMBEDDING} Loading phrase vectors for '{source.name}' complete ({len(model)} entries)")
    return model


def build_combinator(config: "SimilarityConfig") -> EmbeddingSearcherCombinator:
    """One searcher per configured embedding source, combined per config."""
    if not config.embeddings:
        raise ConfigError("No embedding sources configured under similarity.embeddings")

    searchers = [
        EmbeddingPhraseSearcher(
            load_vector_model(source),
            max_similar_phrases=config.max_similar_phrases,
            name=source.name,
        )
        for source in config.embeddings
    ]
    return EmbeddingSearcherCombinator(searchers, config.combination_strategy)
