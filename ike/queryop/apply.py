# ike/queryop/apply.py
"""Materialise a query operator as a new query."""

from __future__ import annotations

from typing import List

from ike.core.exceptions import QueryError
from ike.logging.logger import get_logger
from ike.logging.tags import QUERYOP
from ike.query.ast import UNBOUNDED, QDisj, QExpr, QRepetition, QSeq
from ike.query.language import Path, node_at, query_string, substitute, token_paths

from .types import AddToken, QueryOp, RemoveToken, SetRepeatedToken, SetToken

logger = get_logger(__name__)


def _slot_path(qexpr: QExpr, slot: int) -> Path:
    paths = token_paths(qexpr)
    if not 1 <= slot <= len(paths):
        raise QueryError(f"Query has {len(paths)} slots, no slot {slot}: {query_string(qexpr)}")
    return paths[slot - 1]


def _add_token(qexpr: QExpr, op: AddToken) -> QExpr:
    path = _slot_path(qexpr, op.slot)
    current = node_at(qexpr, path)
    alternatives = current.qexprs if isinstance(current, QDisj) else (current,)
    if op.qexpr in alternatives:
        return qexpr
    return substitute(qexpr, path, QDisj(alternatives + (op.qexpr,)))


def _remove_token(qexpr: QExpr, op: RemoveToken) -> QExpr:
    path = _slot_path(qexpr, op.slot)
    parent_path = path[:-1]
    parent = node_at(qexpr, parent_path) if path else None
    if not isinstance(parent, QSeq):
        raise QueryError(f"Slot {op.slot} is not part of a sequence and cannot be removed")
    remaining = [child for i, child in enumerate(parent.qexprs) if i != path[-1]]
    return substitute(qexpr, parent_path, QSeq(remaining))


def _set_repeated_token(qexpr: QExpr, op: SetRepeatedToken) -> QExpr:
    """
    Unroll the repetition so occurrence `index` is the literal.

    x[min,max] with index k becomes x (k-1 times), the literal, then
    x[max(min-k, 0), max-k] when more occurrences are still allowed.
    """
    path = _slot_path(qexpr, op.slot)
    repetition = node_at(qexpr, path)
    if not isinstance(repetition, QRepetition):
        raise QueryError(f"Slot {op.slot} is not a repetition: {query_string(repetition)}")

    k = op.index
    if k < 1 or (repetition.max != UNBOUNDED and k > repetition.max):
        raise QueryError(
            f"Occurrence {k} is outside repetition bounds "
            f"[{repetition.min},{repetition.max}] of slot {op.slot}"
        )

    parts: List[QExpr] = [repetition.qexpr] * (k - 1) + [op.qexpr]
    rest_max = UNBOUNDED if repetition.max == UNBOUNDED else repetition.max - k
    if rest_max == UNBOUNDED or rest_max > 0:
        parts.append(QRepetition(repetition.qexpr, max(repetition.min - k, 0), rest_max))
    return substitute(qexpr, path, QSeq(parts))


def apply_op(qexpr: QExpr, op: QueryOp) -> QExpr:
    """
    Return the query `op` turns `qexpr` into.

    Raises:
        QueryError: If the operator's slot doesn't exist or doesn't fit the operator
    """
    if isinstance(op, SetToken):
        result = substitute(qexpr, _slot_path(qexpr, op.slot), op.qexpr)
    elif isinstance(op, AddToken):
        result = _add_token(qexpr, op)
    elif isinstance(op, RemoveToken):
        result = _remove_token(qexpr, op)
    elif isinstance(op, SetRepeatedToken):
        result = _set_repeated_token(qexpr, op)
    else:
        raise TypeError(f"Not a query operator: {op!r}")

    logger.debug(f"{QUERYOP} {op} : {query_string(qexpr)} -> {query_string(result)}")
    return result
