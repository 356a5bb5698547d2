# ike/search/__init__.py
"""Search backend boundary types."""

from .types import Hit, SearchBackend, Span, Token

__all__ = ["Token", "Hit", "Span", "SearchBackend"]
