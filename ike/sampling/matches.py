# ike/sampling/matches.py
"""
Sampler for hits the query already matches.

The labelled variant rewrites the query so its capture groups only match
entries of a one-column table before the query is sent to the backend.
"""

from __future__ import annotations

from typing import Iterable, List

from ike.core.exceptions import QueryError, TableError
from ike.logging.logger import get_logger
from ike.logging.tags import SAMPLER
from ike.query.ast import (
    VARIABLE_LENGTH,
    QAnd,
    QDisj,
    QExpr,
    QNamed,
    QPos,
    QRepetition,
    QSeq,
    QUnnamed,
    QWildcard,
    QWord,
)
from ike.query.language import capture_groups, query_length, query_string
from ike.search.types import Hit, SearchBackend
from ike.table.models import Table

from .base import Sampler

logger = get_logger(__name__)


def _only_wildcards(qexpr: QExpr, size: int) -> bool:
    """True when `qexpr` is a sequence of exactly `size` wildcards."""
    return (
        isinstance(qexpr, QSeq)
        and len(qexpr.qexprs) == size
        and all(isinstance(child, QWildcard) for child in qexpr.qexprs)
    )


def _replace_captures(qexpr: QExpr, limited: QExpr) -> QExpr:
    """Replace the body of every capture group in `qexpr` with `limited`."""
    if isinstance(qexpr, (QWord, QPos, QWildcard)):
        return qexpr
    elif isinstance(qexpr, QSeq):
        return QSeq(_replace_captures(child, limited) for child in qexpr.qexprs)
    elif isinstance(qexpr, QDisj):
        return QDisj(_replace_captures(child, limited) for child in qexpr.qexprs)
    elif isinstance(qexpr, QAnd):
        return QAnd(_replace_captures(qexpr.qexpr1, limited), _replace_captures(qexpr.qexpr2, limited))
    elif isinstance(qexpr, QRepetition):
        return QRepetition(_replace_captures(qexpr.qexpr, limited), qexpr.min, qexpr.max)
    elif isinstance(qexpr, QNamed):
        return QNamed(limited, qexpr.name)
    elif isinstance(qexpr, QUnnamed):
        return QUnnamed(limited)
    else:
        raise TypeError(f"Not a query expression: {qexpr!r}")


class MatchesSampler(Sampler):
    """Samples hits that the given query already matches."""

    def limit_query_to_table(self, qexpr: QExpr, table: Table) -> QExpr:
        """
        Return a query whose capture groups only match entries of `table`.

        The limit is computed from the first capture group and then used as
        the body of every capture group in the query.

        Raises:
            TableError: If the table does not have exactly one column
            QueryError: If the query has no capture group
        """
        if len(table.cols) != 1:
            raise TableError(
                f"Table '{table.name}' has {len(table.cols)} columns, "
                f"limiting a query needs exactly one"
            )
        groups = capture_groups(qexpr)
        if not groups:
            raise QueryError(f"Query has no capture group to limit: {query_string(qexpr)}")

        capture_group = groups[0]
        capture_size = query_length(capture_group)
        logger.debug(f"{SAMPLER} Query has capture size of {capture_size}")

        all_words = [row.values[0].qwords for row in table.rows]

        limited: QExpr
        if capture_size == VARIABLE_LENGTH:
            logger.debug(
                f"{SAMPLER} Variable length capture group, using full "
                f"table disjunction of size {len(all_words)}"
            )
            limited = QAnd(QDisj(QSeq(words) for words in all_words), capture_group.qexpr)
        else:
            filtered: List[QExpr] = [QSeq(words) for words in all_words if len(words) == capture_size]
            logger.debug(
                f"{SAMPLER} Fixed length capture group, table disjunction "
                f"filtered to {len(filtered)}"
            )
            if _only_wildcards(capture_group.qexpr, capture_size):
                limited = QDisj(filtered)
            else:
                limited = QAnd(QDisj(filtered), capture_group.qexpr)

        return _replace_captures(qexpr, limited)

    def get_sample(self, qexpr: QExpr, searcher: SearchBackend) -> Iterable[Hit]:
        logger.debug(f"{SAMPLER} Sampling {query_string(qexpr)}")
        return searcher.find(searcher.compile(qexpr))

    def get_labelled_sample(
        self,
        qexpr: QExpr,
        searcher: SearchBackend,
        table: Table,
    ) -> Iterable[Hit]:
        limited = self.limit_query_to_table(qexpr, table)
        logger.debug(f"{SAMPLER} Sampling table '{table.name}' with {query_string(limited)}")
        return searcher.find(searcher.compile(limited))
