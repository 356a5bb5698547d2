# tests/unit/conftest.py
"""
Shared fixtures for unit tests.

Provides a tiny in-memory vector model and a small colors table so tests
don't need real embeddings or corpora.
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from ike.similarity.vectors import WordVectorModel
from ike.table.models import Table

from .vector_files import COLOR_VECTORS, write_text_vectors


def pytest_collection_modifyitems(items):
    """Add tier markers based on the test file.

    Tier 1: pure logic, no I/O
    Tier 2: temporary files, thread pools, CLI runner
    """
    TIER1_PATTERNS = [
        "test_query_language",
        "test_matches_sampler",
        "test_labelling",
        "test_op_generator",
        "test_op_scorer",
        "test_apply_op",
        "test_table_models",
    ]

    for item in items:
        path = str(item.fspath)
        if any(pattern in path for pattern in TIER1_PATTERNS):
            item.add_marker(pytest.mark.tier1)
        else:
            item.add_marker(pytest.mark.tier2)


# =============================================================================
# Vectors
# =============================================================================


@pytest.fixture
def color_model() -> WordVectorModel:
    """Two-dimensional vectors for a handful of color words."""
    return WordVectorModel(list(COLOR_VECTORS), np.array(list(COLOR_VECTORS.values())))


@pytest.fixture
def color_vectors_file(tmp_path: Path) -> Path:
    return write_text_vectors(tmp_path / "colors.txt", COLOR_VECTORS)


# =============================================================================
# Tables
# =============================================================================


@pytest.fixture
def colors_table() -> Table:
    """One-column table with single- and multi-word entries."""
    return Table.from_dict(
        {
            "name": "colors",
            "cols": ["color"],
            "positive": ["red", "dark red", "blue"],
            "negative": ["car", "red car"],
        }
    )
