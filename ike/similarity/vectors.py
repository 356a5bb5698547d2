# ike/similarity/vectors.py
"""
In-memory word2vec vectors.

Reads vectors produced elsewhere (word2vec text or binary format) and answers
cosine nearest-neighbour lookups. Multi-word phrases are expected to be stored
with their words joined by "_", the convention of phrase-trained word2vec.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, List, Sequence, Tuple, Union

import numpy as np

from ike.logging.logger import get_logger
from ike.logging.tags import EMBEDDING

from .types import UnknownWordError

if TYPE_CHECKING:
    from numpy.typing import NDArray

logger = get_logger(__name__)


class WordVectorModel:
    """
    Vocabulary plus one vector per entry.

    Usage:
        model = WordVectorModel.from_text_file("vectors.txt")
        model.nearest("red", k=10)
        # [("red", 1.0), ("blue", 0.81), ...]
    """

    def __init__(self, vocab: Sequence[str], vectors: "NDArray"):
        matrix = np.asarray(vectors, dtype=np.float64)
        if matrix.ndim != 2 or matrix.shape[0] != len(vocab):
            raise ValueError(
                f"Expected a ({len(vocab)}, dim) matrix, got shape {matrix.shape}"
            )

        self._vocab: List[str] = list(vocab)
        self._index = {word: i for i, word in enumerate(self._vocab)}
        self._vectors = matrix

        norms = np.linalg.norm(matrix, axis=1, keepdims=True)
        norms[norms == 0] = 1.0
        self._unit = matrix / norms

    @property
    def dimension(self) -> int:
        return int(self._vectors.shape[1])

    def __len__(self) -> int:
        return len(self._vocab)

    def __contains__(self, phrase: str) -> bool:
        return phrase in self._index

    def raw_vector(self, phrase: str) -> "NDArray":
        try:
            return self._vectors[self._index[phrase]].copy()
        except KeyError:
            raise UnknownWordError(phrase) from None

    def nearest(self, query: Union[str, "NDArray"], k: int) -> List[Tuple[str, float]]:
        """Up to `k` entries by descending cosine similarity to `query`."""
        vector = self.raw_vector(query) if isinstance(query, str) else np.asarray(query, dtype=np.float64)
        if vector.shape != (self.dimension,):
            raise ValueError(f"Expected a vector of size {self.dimension}, got {vector.shape}")

        k = min(k, len(self._vocab))
        norm = np.linalg.norm(vector)
        if k <= 0 or norm == 0:
            return []

        scores = self._unit @ (vector / norm)
        top = np.argpartition(-scores, k - 1)[:k]
        top = top[np.argsort(-scores[top], kind="stable")]
        return [(self._vocab[i], float(scores[i])) for i in top]

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    @classmethod
    def from_text_file(cls, path: Union[str, Path]) -> "WordVectorModel":
        """Read the word2vec text format; the "<count> <dim>" header line is optional."""
        vocab: List[str] = []
        rows: List[List[float]] = []

        with Path(path).open("r", encoding="utf-8") as f:
            for line_no, line in enumerate(f):
                parts = line.rstrip("\n").split(" ")
                if line_no == 0 and len(parts) == 2 and all(p.isdigit() for p in parts):
                    continue
                if not parts or parts == [""]:
                    continue
                vocab.append(parts[0])
                rows.append([float(x) for x in parts[1:] if x])

        logger.debug(f"{EMBEDDING} Read {len(vocab)} text vectors from {path}")
        return cls(vocab, np.array(rows, dtype=np.float64))

    @classmethod
    def from_binary_file(cls, path: Union[str, Path]) -> "WordVectorModel":
        """Read the word2vec binary format (little-endian float32 vectors)."""
        with Path(path).open("rb") as f:
            header = f.readline().decode("utf-8").split()
            count, dim = int(header[0]), int(header[1])
            vocab: List[str] = []
            matrix = np.empty((count, dim), dtype=np.float32)

            for i in range(count):
                word = bytearray()
                while True:
                    ch = f.read(1)
                    if ch == b" ":
                        break
                    if ch == b"":
                        raise ValueError(f"Unexpected end of file after {i} vectors: {path}")
                    if ch != b"\n":
                        word.extend(ch)
                vocab.append(word.decode("utf-8", errors="replace"))
                matrix[i] = np.frombuffer(f.read(4 * dim), dtype="<f4")

        logger.debug(f"{EMBEDDING} Read {count} binary vectors from {path}")
        return cls(vocab, matrix)
