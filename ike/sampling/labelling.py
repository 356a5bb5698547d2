# ike/sampling/labelling.py
"""
Turn sampled hits into labelled slot matches.

A hit is positive when the words it captured equal a positive row of the
table (case-insensitive); every other hit is a negative example.
"""

from __future__ import annotations

from typing import Iterable, List

from ike.core.exceptions import TableError
from ike.logging.logger import get_logger
from ike.logging.tags import SAMPLER
from ike.queryop.types import QueryMatch
from ike.search.types import Hit
from ike.table.models import Table

logger = get_logger(__name__)


def _key(words: Iterable[str]) -> tuple[str, ...]:
    return tuple(w.lower() for w in words)


def label_hits(hits: Iterable[Hit], table: Table, group: str = "1") -> List[QueryMatch]:
    """
    Label each hit by whether its `group` capture is a positive table entry.

    Hits without the capture group are skipped.

    Raises:
        TableError: If the table does not have exactly one column
    """
    if len(table.cols) != 1:
        raise TableError(
            f"Table '{table.name}' has {len(table.cols)} columns, "
            f"labelling hits needs exactly one"
        )
    positives = {_key(row.values[0].words) for row in table.positive}

    matches: List[QueryMatch] = []
    skipped = 0
    for hit in hits:
        tokens = hit.capture_tokens(group)
        if tokens is None:
            skipped += 1
            continue
        is_positive = _key(t.word for t in tokens) in positives
        matches.append(QueryMatch(tokens, is_positive))

    if skipped:
        logger.debug(f"{SAMPLER} Skipped {skipped} hits without capture group '{group}'")
    logger.debug(
        f"{SAMPLER} Labelled {len(matches)} hits "
        f"({sum(m.is_positive for m in matches)} positive)"
    )
    return matches
