# ike/similarity/types.py
"""Type definitions for similar-phrase search."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict, List, Protocol, Sequence, Tuple, Union

from ike.logging.logger import get_logger
from ike.logging.tags import SIMILARITY
from ike.query.ast import QWord

if TYPE_CHECKING:
    from numpy.typing import NDArray

logger = get_logger(__name__)


class UnknownWordError(KeyError):
    """Phrase is not in the embedding vocabulary."""


@dataclass(frozen=True)
class SimilarPhrase:
    """A phrase and its similarity to the lookup phrase (higher is closer)."""

    qwords: Tuple[QWord, ...]
    similarity: float

    def __post_init__(self):
        object.__setattr__(self, "qwords", tuple(self.qwords))

    @property
    def phrase(self) -> str:
        return " ".join(w.value for w in self.qwords)


class CombinationStrategy(Enum):
    """How similarities reported by several backends for one phrase are combined."""

    SUM = "sum"
    MIN = "min"
    MAX = "max"
    MEAN = "average"

    @classmethod
    def parse(cls, name: str) -> "CombinationStrategy":
        """Resolve a configured name; anything unrecognised means average."""
        key = name.strip().lower()
        if key == "mean":
            return cls.MEAN
        for strategy in cls:
            if strategy.value == key:
                return strategy
        logger.warning(f"{SIMILARITY} Unknown combination strategy {name!r}, using average")
        return cls.MEAN

    def combine(self, scores: Sequence[float]) -> float:
        return _REDUCERS[self](scores)


_REDUCERS: Dict[CombinationStrategy, Callable[[Sequence[float]], float]] = {
    CombinationStrategy.SUM: lambda scores: float(sum(scores)),
    CombinationStrategy.MIN: lambda scores: float(min(scores)),
    CombinationStrategy.MAX: lambda scores: float(max(scores)),
    CombinationStrategy.MEAN: lambda scores: float(sum(scores)) / len(scores),
}


class VectorModel(Protocol):
    """
    Pre-trained phrase vectors.

    Both lookups raise UnknownWordError for phrases outside the vocabulary.
    nearest() returns (phrase, similarity) pairs, most similar first.
    """

    @property
    def dimension(self) -> int: ...

    def raw_vector(self, phrase: str) -> "NDArray": ...

    def nearest(self, query: Union[str, "NDArray"], k: int) -> List[Tuple[str, float]]: ...
