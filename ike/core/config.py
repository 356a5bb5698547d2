# ike/core/config.py
"""
Centralized configuration loading helpers.

The config schema lives in ike.config.schema; this module only knows how to
read YAML and validate a mapping against a schema with clear errors.

Usage:
    from ike.core.config import load_yaml, validate_config, ConfigError

    data = load_yaml("ike.yaml")
    config = validate_config(data, IkeConfig, path="ike.yaml")
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar, Union

import yaml
from pydantic import BaseModel, ValidationError

from ike.logging.logger import get_logger
from ike.logging.tags import CONFIG

logger = get_logger(__name__)

T = TypeVar("T", bound=BaseModel)


# =============================================================================
# Errors
# =============================================================================


class ConfigError(Exception):
    """
    Unusable configuration: a config file, or a resource a config section names.

    Attributes:
        message: What went wrong
        path: The offending file, when there is one
    """

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        return self.message if self.path is None else f"{self.message} (file: {self.path})"


class ConfigNotFoundError(ConfigError):
    """A config file or configured vector file is missing."""


class ConfigParseError(ConfigError):
    """Not YAML, or YAML whose root is not a mapping."""


class ConfigValidationError(ConfigError):
    """YAML that IkeConfig rejects."""


# =============================================================================
# Loading
# =============================================================================


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a YAML file and return it as a dictionary.

    Raises:
        ConfigNotFoundError: If file doesn't exist
        ConfigParseError: If YAML is invalid or the root is not a mapping
    """
    p = Path(path)

    if not p.exists():
        raise ConfigNotFoundError("Config file not found", path=p)

    if p.is_dir():
        raise ConfigError("Config path is a directory, not a file", path=p)

    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Invalid YAML syntax: {e}", path=p) from e

    if not isinstance(data, dict):
        raise ConfigParseError("Config root must be a mapping (dict)", path=p)

    logger.debug(f"{CONFIG} Loaded config from {p}")
    return data


def validate_config(
    data: Dict[str, Any],
    schema: Type[T],
    path: Optional[Union[str, Path]] = None,
) -> T:
    """
    Validate config data against a pydantic schema.

    Raises:
        ConfigValidationError: If the data doesn't match the schema
    """
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(
            f"Config validation failed: {e}",
            path=Path(path) if path is not None else None,
        ) from e
