# ike/similarity/combinator.py
"""
Combines similar-phrase results from several embedding backends.

Each backend is queried independently (in parallel); once all results are in,
observations are grouped by phrase and each group is reduced with the
configured CombinationStrategy.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from ike.core.config import ConfigError
from ike.logging.logger import get_logger
from ike.logging.tags import SIMILARITY
from ike.query.ast import QWord

from .searcher import EmbeddingPhraseSearcher
from .types import CombinationStrategy, SimilarPhrase

logger = get_logger(__name__)


class EmbeddingSearcherCombinator:
    """
    Similar-phrase search across several embedding backends.

    Usage:
        combinator = EmbeddingSearcherCombinator(
            [EmbeddingPhraseSearcher(w2v), EmbeddingPhraseSearcher(pmi)],
            CombinationStrategy.MAX,
        )
        combinator.similar_to_phrase("dark red")
        combinator.similar_to_phrases(["red", "blue", "green"])
    """

    def __init__(
        self,
        searchers: Sequence[EmbeddingPhraseSearcher],
        strategy: CombinationStrategy = CombinationStrategy.MEAN,
        max_workers: Optional[int] = None,
    ):
        if not searchers:
            raise ConfigError("At least one embedding searcher is required")

        sizes = [s.embedding_size for s in searchers]
        if len(set(sizes)) > 1:
            raise ConfigError(
                "Embedding sizes of combined searchers must be the same, got "
                + ", ".join(f"{s.name}={size}" for s, size in zip(searchers, sizes))
            )

        self.searchers = list(searchers)
        self.strategy = strategy
        self.max_workers = max_workers or len(self.searchers)

    @property
    def embedding_size(self) -> int:
        return self.searchers[0].embedding_size

    def similar_to_phrase(self, phrase: str) -> List[SimilarPhrase]:
        """Phrases similar to `phrase`, combined across backends."""
        return self.combine(self._collect(lambda s: s.similar_to_phrase(phrase)))

    def similar_to_phrases(self, phrases: Sequence[str]) -> List[SimilarPhrase]:
        """Phrases similar to the centroid of `phrases`, combined across backends."""
        return self.combine(self._collect(lambda s: s.similar_to_phrases(phrases)))

    def _collect(
        self, lookup: Callable[[EmbeddingPhraseSearcher], List[SimilarPhrase]]
    ) -> List[SimilarPhrase]:
        if len(self.searchers) == 1:
            results = [lookup(self.searchers[0])]
        else:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                results = list(executor.map(lookup, self.searchers))

        pooled = [phrase for result in results for phrase in result]
        logger.debug(
            f"{SIMILARITY} Pooled {len(pooled)} phrases from {len(self.searchers)} searchers"
        )
        return pooled

    def combine(self, similar_phrases: Iterable[SimilarPhrase]) -> List[SimilarPhrase]:
        """
        Group observations by phrase and reduce each group to one similarity.

        Output is sorted by descending similarity; equal scores keep the
        order in which their phrases were first seen.
        """
        groups: Dict[Tuple[QWord, ...], List[float]] = {}
        for similar in similar_phrases:
            groups.setdefault(similar.qwords, []).append(similar.similarity)

        combined = [
            SimilarPhrase(qwords, self.strategy.combine(scores)) for qwords, scores in groups.items()
        ]
        return sorted(combined, key=lambda p: -p.similarity)
