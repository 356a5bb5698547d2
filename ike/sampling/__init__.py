# ike/sampling/__init__.py
"""Sampling hits from the search backend, optionally scoped to a table."""

from .base import Sampler
from .labelling import label_hits
from .matches import MatchesSampler

__all__ = ["Sampler", "MatchesSampler", "label_hits"]
