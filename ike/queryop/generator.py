# ike/queryop/generator.py
"""
Candidate query operators from observed slot matches.

Every generator returns a mapping from operator to coverage, where coverage
maps a match index to the number of further edits that match needs once the
operator is applied. Operators derived from a match's own tokens need no
further edits, so their coverage entries are 0.

Usage:
    generator = OpGenerator(QLeafGenerator(pos=True, word=True))
    ops = generator.generate(matches)
    # {SetToken(slot=2, qexpr=QWord("red")): {0: 0, 3: 0}, ...}
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple

from ike.logging.logger import get_logger
from ike.logging.tags import QUERYOP
from ike.query.ast import LEAF_TYPES, QDisj, QExpr

from .leaves import QLeafGenerator, leaf_matches
from .types import (
    AddToken,
    MatchCoverage,
    QueryMatch,
    QueryMatches,
    QueryOp,
    RemoveToken,
    SetRepeatedToken,
    SetToken,
)

logger = get_logger(__name__)


def _record(ops: Dict, op: QueryOp, match_index: int, edits: int = 0) -> None:
    coverage = ops.setdefault(op, {})
    coverage[match_index] = min(edits, coverage.get(match_index, edits))


def _single_token(query_match: QueryMatch, slot: int):
    if len(query_match.tokens) != 1:
        raise ValueError(
            f"Slot {slot} is not repeated but a match consumed {len(query_match.tokens)} tokens"
        )
    return query_match.tokens[0]


def _leaf_alternatives(qexpr: Optional[QExpr]) -> Optional[Tuple[QExpr, ...]]:
    """Alternatives of a leaf or a disjunction of leaves; None for anything else."""
    if isinstance(qexpr, LEAF_TYPES):
        return (qexpr,)
    if isinstance(qexpr, QDisj) and all(isinstance(q, LEAF_TYPES) for q in qexpr.qexprs):
        return qexpr.qexprs
    return None


# =============================================================================
# Generators
# =============================================================================


def get_repeated_op_match(
    matches: QueryMatches,
    leaf_generator: QLeafGenerator,
) -> Dict[SetRepeatedToken, MatchCoverage]:
    """
    Operators fixing one occurrence of a repeated slot to a literal.

    For each match and each token it consumed at the slot (occurrence k,
    1-based), every leaf the generator allows for that token becomes
    SetRepeatedToken(slot, k, leaf). The same leaf at different occurrences
    gives different operators.
    """
    ops: Dict[SetRepeatedToken, MatchCoverage] = {}
    if not leaf_generator.enabled:
        return ops

    slot = matches.slot
    current = matches.query_token.qexpr
    for match_index, query_match in enumerate(matches.matches):
        for occurrence, token in enumerate(query_match.tokens, start=1):
            for leaf in leaf_generator.generate(token):
                if leaf != current:
                    _record(ops, SetRepeatedToken(slot, occurrence, leaf), match_index)
    return ops


def get_set_token_op_match(
    matches: QueryMatches,
    leaf_generator: QLeafGenerator,
) -> Dict[SetToken, MatchCoverage]:
    """Operators replacing a single-token slot with a literal seen in a match."""
    ops: Dict[SetToken, MatchCoverage] = {}
    if not leaf_generator.enabled:
        return ops

    slot = matches.slot
    current = matches.query_token.qexpr
    for match_index, query_match in enumerate(matches.matches):
        token = _single_token(query_match, slot)
        for leaf in leaf_generator.generate(token):
            if leaf != current:
                _record(ops, SetToken(slot, leaf), match_index)
    return ops


def get_add_token_op_match(
    matches: QueryMatches,
    leaf_generator: QLeafGenerator,
) -> Dict[AddToken, MatchCoverage]:
    """
    Operators widening a literal slot to accept tokens it currently rejects.

    Only applies when the slot is a leaf or a disjunction of leaves.
    """
    ops: Dict[AddToken, MatchCoverage] = {}
    alternatives = _leaf_alternatives(matches.query_token.qexpr)
    if alternatives is None or not leaf_generator.enabled:
        return ops

    slot = matches.slot
    for match_index, query_match in enumerate(matches.matches):
        token = _single_token(query_match, slot)
        if any(leaf_matches(alt, token) for alt in alternatives):
            continue
        for leaf in leaf_generator.generate(token):
            if leaf not in alternatives:
                _record(ops, AddToken(slot, leaf), match_index)
    return ops


def get_remove_token_op_match(matches: QueryMatches) -> Dict[RemoveToken, MatchCoverage]:
    """Dropping a context token keeps every observed match."""
    slot_data = matches.query_token
    if not slot_data.is_context or slot_data.is_capture:
        return {}
    return {RemoveToken(matches.slot): {i: 0 for i in range(len(matches.matches))}}


# =============================================================================
# Dispatch
# =============================================================================


def _merge_into(target: Dict[QueryOp, MatchCoverage], ops: Dict) -> None:
    for op, coverage in ops.items():
        for match_index, edits in coverage.items():
            _record(target, op, match_index, edits)


@dataclass(frozen=True)
class OpGenerator:
    """Generates all operator kinds legal for each analysed slot."""

    leaf_generator: QLeafGenerator

    def generate(self, matches: QueryMatches) -> Dict[QueryOp, MatchCoverage]:
        slot_data = matches.query_token
        ops: Dict[QueryOp, MatchCoverage] = {}

        if slot_data.is_repeated:
            _merge_into(ops, get_repeated_op_match(matches, self.leaf_generator))
        else:
            _merge_into(ops, get_set_token_op_match(matches, self.leaf_generator))
            _merge_into(ops, get_add_token_op_match(matches, self.leaf_generator))
        _merge_into(ops, get_remove_token_op_match(matches))

        logger.debug(
            f"{QUERYOP} Slot {matches.slot}: {len(ops)} operators "
            f"from {len(matches.matches)} matches"
        )
        return ops

    def generate_all(self, slots: Iterable[QueryMatches]) -> Dict[QueryOp, MatchCoverage]:
        """Operators for several slots whose match indices refer to the same hits."""
        ops: Dict[QueryOp, MatchCoverage] = {}
        for matches in slots:
            _merge_into(ops, self.generate(matches))
        return ops
