# ike/sampling/base.py
"""Sampler contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from ike.query.ast import QExpr
from ike.search.types import Hit, SearchBackend
from ike.table.models import Table


class Sampler(ABC):
    """
    Produces the corpus hits a refinement round evaluates.

    Implementations delegate execution to the search backend and only own
    the rewriting of the query before it is executed.
    """

    @abstractmethod
    def get_sample(self, qexpr: QExpr, searcher: SearchBackend) -> Iterable[Hit]:
        """Hits for `qexpr` as is."""

    @abstractmethod
    def get_labelled_sample(
        self,
        qexpr: QExpr,
        searcher: SearchBackend,
        table: Table,
    ) -> Iterable[Hit]:
        """Hits for `qexpr` restricted to the rows of `table`."""
