# ike/config/schema.py
"""
Configuration schema for the refinement engine.

Schema hierarchy:
- IkeConfig: the root config
- SimilarityConfig: embedding sources and the score combination strategy
- EmbeddingSourceConfig: one pre-trained vector file
- OperatorConfig: operator generation and scoring settings
- LoggingConfig: logging settings
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ike.similarity.types import CombinationStrategy

# =============================================================================
# Similarity
# =============================================================================


class EmbeddingSourceConfig(BaseModel):
    """
    One embedding backend.

    Example YAML:
        embeddings:
          - name: w2v
            path: vectors/phrases.txt
            format: text
            embedding_size: 300
    """

    name: str = Field(..., description="Label used in log lines")
    path: Path = Field(..., description="word2vec vector file")
    format: Literal["text", "binary"] = Field("text", description="word2vec file format")
    embedding_size: Optional[int] = Field(
        None, ge=1, description="Expected vector size; checked against the file when set"
    )

    model_config = ConfigDict(extra="forbid")


class SimilarityConfig(BaseModel):
    """Similar-phrase search settings."""

    combination_strategy: CombinationStrategy = Field(
        CombinationStrategy.MEAN,
        description="How per-backend similarities are combined: sum, min, max or average",
    )
    max_similar_phrases: int = Field(100, ge=1, description="Neighbours requested per backend")
    embeddings: list[EmbeddingSourceConfig] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

    @field_validator("combination_strategy", mode="before")
    @classmethod
    def _parse_strategy(cls, value: Any) -> CombinationStrategy:
        if isinstance(value, CombinationStrategy):
            return value
        return CombinationStrategy.parse(str(value))


# =============================================================================
# Operators
# =============================================================================


class OperatorConfig(BaseModel):
    """Operator generation and scoring settings."""

    word: bool = Field(True, description="Suggest word literals")
    pos: bool = Field(True, description="Suggest part-of-speech literals")
    negative_weight: float = Field(
        1.0, ge=0.0, description="Penalty per negative match an operator covers"
    )
    top_k: Optional[int] = Field(None, ge=1, description="Keep only the best k operators")

    model_config = ConfigDict(extra="forbid")


# =============================================================================
# Logging
# =============================================================================


class LoggingConfig(BaseModel):
    """Logging settings."""

    level: str = Field("INFO", description="Root log level")

    model_config = ConfigDict(extra="forbid")

    @field_validator("level")
    @classmethod
    def _upper(cls, value: str) -> str:
        value = value.upper()
        if value not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value!r}")
        return value


# =============================================================================
# Root
# =============================================================================


class IkeConfig(BaseModel):
    """
    Root configuration.

    Examples:
        >>> config = IkeConfig()
        >>> config.similarity.max_similar_phrases
        100
    """

    similarity: SimilarityConfig = Field(default_factory=SimilarityConfig)
    operators: OperatorConfig = Field(default_factory=OperatorConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")
