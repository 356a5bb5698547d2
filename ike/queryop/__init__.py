# ike/queryop/__init__.py
"""
Query operators: atomic edits proposed from observed matches.

Usage:
    from ike.queryop import OpGenerator, OpScorer, QLeafGenerator, apply_op

    ops = OpGenerator(QLeafGenerator(pos=True, word=True)).generate(matches)
    best = OpScorer(negative_weight=2.0).score_matches(ops, matches)[0]
    refined = apply_op(query, best.op)
"""

from .apply import apply_op
from .generator import (
    OpGenerator,
    get_add_token_op_match,
    get_remove_token_op_match,
    get_repeated_op_match,
    get_set_token_op_match,
)
from .leaves import QLeafGenerator, leaf_matches
from .scorer import OpScorer, ScoredOp
from .types import (
    AddToken,
    MatchCoverage,
    QueryMatch,
    QueryMatches,
    QueryOp,
    QuerySlotData,
    QueryToken,
    RemoveToken,
    SetRepeatedToken,
    SetToken,
)

__all__ = [
    "QueryToken",
    "QuerySlotData",
    "QueryMatch",
    "QueryMatches",
    "QueryOp",
    "MatchCoverage",
    "SetToken",
    "AddToken",
    "RemoveToken",
    "SetRepeatedToken",
    "QLeafGenerator",
    "leaf_matches",
    "OpGenerator",
    "get_repeated_op_match",
    "get_set_token_op_match",
    "get_add_token_op_match",
    "get_remove_token_op_match",
    "OpScorer",
    "ScoredOp",
    "apply_op",
]
