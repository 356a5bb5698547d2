# ike/core/__init__.py
"""Paradigm-level contracts: exceptions and config loading helpers."""

from .config import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
    load_yaml,
    validate_config,
)
from .exceptions import IkeError, QueryError, TableError

__all__ = [
    "IkeError",
    "QueryError",
    "TableError",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    "load_yaml",
    "validate_config",
]
