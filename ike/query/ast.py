# ike/query/ast.py
"""
Query expression tree.

A query is an immutable tree over a closed set of node types. Every
traversal in ike.query.language matches on all of them; a new node type
must be added here and to each traversal.

    QLeaf        QWord | QPos | QWildcard    one token each
    QSeq         children matched in order
    QDisj        any one child matches
    QAnd         both children match the same span
    QCapture     QUnnamed | QNamed           extractable span
    QRepetition  child repeated min..max times (max -1 = unbounded)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

VARIABLE_LENGTH = -1
UNBOUNDED = -1


# =============================================================================
# Leaves
# =============================================================================


@dataclass(frozen=True)
class QWord:
    """Literal surface word."""

    value: str


@dataclass(frozen=True)
class QPos:
    """Literal part-of-speech tag."""

    value: str


@dataclass(frozen=True)
class QWildcard:
    """Any single token."""


# =============================================================================
# Composites
# =============================================================================


@dataclass(frozen=True)
class QSeq:
    qexprs: Tuple["QExpr", ...]

    def __post_init__(self):
        object.__setattr__(self, "qexprs", tuple(self.qexprs))


@dataclass(frozen=True)
class QDisj:
    qexprs: Tuple["QExpr", ...]

    def __post_init__(self):
        object.__setattr__(self, "qexprs", tuple(self.qexprs))


@dataclass(frozen=True)
class QAnd:
    qexpr1: "QExpr"
    qexpr2: "QExpr"


@dataclass(frozen=True)
class QRepetition:
    qexpr: "QExpr"
    min: int
    max: int

    def __post_init__(self):
        if self.min < 0 or (self.max != UNBOUNDED and self.max < self.min):
            raise ValueError(f"Invalid repetition bounds [{self.min},{self.max}]")


# =============================================================================
# Capture groups
# =============================================================================


@dataclass(frozen=True)
class QUnnamed:
    qexpr: "QExpr"


@dataclass(frozen=True)
class QNamed:
    qexpr: "QExpr"
    name: str


QLeaf = Union[QWord, QPos, QWildcard]
QCapture = Union[QUnnamed, QNamed]
QExpr = Union[QWord, QPos, QWildcard, QSeq, QDisj, QAnd, QRepetition, QUnnamed, QNamed]

LEAF_TYPES = (QWord, QPos, QWildcard)
CAPTURE_TYPES = (QUnnamed, QNamed)
