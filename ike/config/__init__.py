# ike/config/__init__.py
"""Configuration schema and layered loading."""

from .loader import DEFAULT_CONFIG_PATH, deep_merge, load_config, load_config_dict
from .schema import (
    EmbeddingSourceConfig,
    IkeConfig,
    LoggingConfig,
    OperatorConfig,
    SimilarityConfig,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "deep_merge",
    "load_config",
    "load_config_dict",
    "IkeConfig",
    "SimilarityConfig",
    "EmbeddingSourceConfig",
    "OperatorConfig",
    "LoggingConfig",
]
