# ike/queryop/types.py
"""
Type definitions for query operators.

Slots are addressed by QueryToken, a 1-based index into the query's token
positions (see ike.query.language.token_paths). Operators are plain values;
applying one yields a new query (ike.queryop.apply).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Union

from ike.query.ast import QExpr, QLeaf
from ike.search.types import Token


@dataclass(frozen=True)
class QueryToken:
    """A slot of the query, 1-based."""

    slot: int


@dataclass(frozen=True)
class QuerySlotData:
    """
    A slot under analysis.

    Attributes:
        qexpr: The slot's current constraint, if any. For repeated slots this
            is the repeated sub-pattern.
        token: Which slot of the query this is
        is_capture: Slot sits inside a capture group
        is_context: Slot is a context token outside the capture groups
        is_repeated: Slot is a repetition that may span several tokens
    """

    qexpr: Optional[QExpr]
    token: QueryToken
    is_capture: bool
    is_context: bool
    is_repeated: bool


@dataclass(frozen=True)
class QueryMatch:
    """Tokens one hit consumed at the slot, and whether the hit is a positive example."""

    tokens: Tuple[Token, ...]
    is_positive: bool

    def __post_init__(self):
        object.__setattr__(self, "tokens", tuple(self.tokens))


@dataclass(frozen=True)
class QueryMatches:
    """All observed matches for one slot."""

    query_token: QuerySlotData
    matches: Tuple[QueryMatch, ...]

    def __post_init__(self):
        object.__setattr__(self, "matches", tuple(self.matches))

    @property
    def slot(self) -> int:
        return self.query_token.token.slot


# =============================================================================
# Operators
# =============================================================================


@dataclass(frozen=True)
class SetToken:
    """Replace the constraint at `slot` with `qexpr`."""

    slot: int
    qexpr: QLeaf


@dataclass(frozen=True)
class AddToken:
    """Widen the constraint at `slot` so it also accepts `qexpr`."""

    slot: int
    qexpr: QLeaf


@dataclass(frozen=True)
class RemoveToken:
    """Drop the context token at `slot`."""

    slot: int


@dataclass(frozen=True)
class SetRepeatedToken:
    """Fix occurrence `index` (1-based) of the repeated slot `slot` to `qexpr`."""

    slot: int
    index: int
    qexpr: QLeaf


QueryOp = Union[SetToken, AddToken, RemoveToken, SetRepeatedToken]

# match index -> number of further edits the match needs once the op is applied
MatchCoverage = Dict[int, int]
