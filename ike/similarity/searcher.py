# ike/similarity/searcher.py
"""
Similar-phrase search over one embedding backend.

Unknown phrases are an expected condition, not an error: the lookups below
turn them into an absent result once, and the rest of the code branches on
None instead of catching exceptions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple, Union

import numpy as np

from ike.logging.logger import get_logger
from ike.logging.tags import SIMILARITY
from ike.query.ast import QWord

from .types import SimilarPhrase, UnknownWordError, VectorModel

if TYPE_CHECKING:
    from numpy.typing import NDArray

logger = get_logger(__name__)

MAX_SIMILAR_PHRASES = 100
PHRASE_JOINER = "_"


def normalize_phrase(phrase: str) -> str:
    """Case-fold and join words the way the vector vocabulary stores phrases."""
    return phrase.replace(" ", PHRASE_JOINER).lower()


class EmbeddingPhraseSearcher:
    """Finds phrases near a phrase, a vector, or the centroid of several phrases."""

    def __init__(
        self,
        model: VectorModel,
        max_similar_phrases: int = MAX_SIMILAR_PHRASES,
        name: str = "embedding",
    ):
        self.model = model
        self.max_similar_phrases = max_similar_phrases
        self.name = name

    @property
    def embedding_size(self) -> int:
        return self.model.dimension

    # -------------------------------------------------------------------------
    # Backend lookups
    # -------------------------------------------------------------------------

    def vector_for_phrase(self, phrase: str) -> Optional["NDArray"]:
        """Vector for `phrase`, or None when it is not in the vocabulary."""
        try:
            return np.asarray(self.model.raw_vector(normalize_phrase(phrase)), dtype=np.float64)
        except UnknownWordError:
            return None

    def _nearest(self, query: Union[str, "NDArray"]) -> Optional[List[Tuple[str, float]]]:
        try:
            return self.model.nearest(query, self.max_similar_phrases)
        except UnknownWordError:
            return None

    @staticmethod
    def _to_similar_phrases(neighbours: List[Tuple[str, float]]) -> List[SimilarPhrase]:
        return [
            SimilarPhrase(tuple(QWord(w) for w in phrase.split(PHRASE_JOINER)), similarity)
            for phrase, similarity in neighbours
        ]

    # -------------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------------

    def similar_to_phrase(self, phrase: str) -> List[SimilarPhrase]:
        """Up to max_similar_phrases phrases closest to `phrase`."""
        neighbours = self._nearest(normalize_phrase(phrase))
        if neighbours is None:
            logger.debug(f"{SIMILARITY} [{self.name}] Unknown phrase {phrase!r}")
            return []
        return self._to_similar_phrases(neighbours)

    def similar_to_vector(self, vector: "NDArray") -> List[SimilarPhrase]:
        """Up to max_similar_phrases phrases closest to `vector`."""
        neighbours = self._nearest(vector)
        return [] if neighbours is None else self._to_similar_phrases(neighbours)

    def similar_to_phrases(self, phrases: Sequence[str]) -> List[SimilarPhrase]:
        """Phrases closest to the centroid of the known phrases in `phrases`."""
        vectors = []
        for phrase in phrases:
            vector = self.vector_for_phrase(phrase)
            if vector is not None:
                vectors.append(vector)

        logger.debug(
            f"{SIMILARITY} [{self.name}] Resolved {len(vectors)} of {len(phrases)} phrases"
        )
        if not vectors:
            return []

        centroid = np.mean(np.stack(vectors), axis=0)
        return self.similar_to_vector(centroid)
