# ike/config/loader.py
"""
Layered configuration loading.

Merge strategy:
    1. Package defaults (ike/config/default.yaml) - always loaded
    2. User config file - overrides defaults key by key

Usage:
    from ike.config.loader import load_config

    config = load_config("ike.yaml")
    config.similarity.combination_strategy
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Union

from ike.core.config import load_yaml, validate_config
from ike.logging.logger import get_logger
from ike.logging.tags import CONFIG

from .schema import IkeConfig

logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "default.yaml"


def deep_merge(base: dict, override: dict) -> dict:
    """
    Deep merge two dictionaries.

    Values from `override` take precedence. Nested dicts are merged
    recursively; lists are replaced entirely.

    Examples:
        >>> deep_merge({"a": 1, "b": {"c": 2, "d": 3}}, {"b": {"c": 10}})
        {'a': 1, 'b': {'c': 10, 'd': 3}}
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def load_config_dict(path: Optional[Union[str, Path]] = None) -> dict[str, Any]:
    """Return package defaults merged with the user file at `path`, unvalidated."""
    defaults = load_yaml(DEFAULT_CONFIG_PATH)

    if path is None:
        logger.debug(f"{CONFIG} Using package defaults only")
        return defaults

    merged = deep_merge(defaults, load_yaml(path))
    logger.debug(f"{CONFIG} Merged {path} over package defaults")
    return merged


def load_config(path: Optional[Union[str, Path]] = None) -> IkeConfig:
    """
    Load and validate the complete configuration.

    Raises:
        ConfigNotFoundError: If `path` doesn't exist
        ConfigParseError: If YAML is invalid
        ConfigValidationError: If the merged config doesn't match IkeConfig
    """
    data = load_config_dict(path)
    return validate_config(data, IkeConfig, path=path or DEFAULT_CONFIG_PATH)
