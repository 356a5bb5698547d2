# ike/query/__init__.py
"""Query expression tree and structural utilities."""

from .ast import (
    CAPTURE_TYPES,
    LEAF_TYPES,
    UNBOUNDED,
    VARIABLE_LENGTH,
    QAnd,
    QCapture,
    QDisj,
    QExpr,
    QLeaf,
    QNamed,
    QPos,
    QRepetition,
    QSeq,
    QUnnamed,
    QWildcard,
    QWord,
)
from .language import (
    capture_groups,
    iter_capture_groups,
    node_at,
    query_length,
    query_string,
    substitute,
    token_paths,
)

__all__ = [
    "QExpr",
    "QLeaf",
    "QCapture",
    "QWord",
    "QPos",
    "QWildcard",
    "QSeq",
    "QDisj",
    "QAnd",
    "QRepetition",
    "QUnnamed",
    "QNamed",
    "LEAF_TYPES",
    "CAPTURE_TYPES",
    "VARIABLE_LENGTH",
    "UNBOUNDED",
    "capture_groups",
    "iter_capture_groups",
    "query_length",
    "token_paths",
    "node_at",
    "substitute",
    "query_string",
]
