# ike/logging/__init__.py
"""Logging helpers shared by every ike module."""

from .logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
