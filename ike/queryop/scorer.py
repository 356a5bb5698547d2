# ike/queryop/scorer.py
"""
Ranks candidate operators by how well they separate positive from negative
matches.

An operator covers a match when applying it leaves the match with no further
edits to make. Its score is the number of positive matches covered minus
negative_weight times the number of negative matches covered.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Mapping, Optional, Sequence

from ike.logging.logger import get_logger
from ike.logging.tags import QUERYOP

from .types import MatchCoverage, QueryMatches, QueryOp

if TYPE_CHECKING:
    from ike.config.schema import OperatorConfig

logger = get_logger(__name__)


@dataclass(frozen=True)
class ScoredOp:
    """An operator with its score and the matches it covers."""

    op: QueryOp
    score: float
    positives: int
    negatives: int


@dataclass(frozen=True)
class OpScorer:
    negative_weight: float = 1.0
    top_k: Optional[int] = None

    @classmethod
    def from_config(cls, config: "OperatorConfig") -> "OpScorer":
        return cls(negative_weight=config.negative_weight, top_k=config.top_k)

    def score(
        self,
        ops: Mapping[QueryOp, MatchCoverage],
        labels: Sequence[bool],
    ) -> List[ScoredOp]:
        """
        Score and rank operators.

        Args:
            ops: Operator -> coverage, as produced by OpGenerator
            labels: is_positive for each match index

        Returns:
            Operators by descending score, then by positives covered.
            Remaining ties are ordered by the operator's repr.
        """
        scored = []
        for op, coverage in ops.items():
            covered = [i for i, edits in coverage.items() if edits == 0]
            positives = sum(1 for i in covered if labels[i])
            negatives = len(covered) - positives
            scored.append(
                ScoredOp(
                    op=op,
                    score=positives - self.negative_weight * negatives,
                    positives=positives,
                    negatives=negatives,
                )
            )

        ranked = sorted(scored, key=lambda s: (-s.score, -s.positives, repr(s.op)))
        if self.top_k is not None:
            ranked = ranked[: self.top_k]

        if ranked:
            best = ranked[0]
            logger.debug(
                f"{QUERYOP} Ranked {len(scored)} operators, best {best.op} "
                f"(+{best.positives}/-{best.negatives})"
            )
        return ranked

    def score_matches(
        self,
        ops: Mapping[QueryOp, MatchCoverage],
        matches: QueryMatches,
    ) -> List[ScoredOp]:
        """score() with labels taken from `matches`."""
        return self.score(ops, [m.is_positive for m in matches.matches])
