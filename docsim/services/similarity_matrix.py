"""All-pairs similarity matrix over a document corpus."""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Iterator, List, Sequence, Tuple

import numpy as np

from docsim.core.errors import EmptyInputError, require_positive
from docsim.core.logging import LogEvent, get_logger
from docsim.services.substring import raw_similarity_ratio
from docsim.services.types import DocumentPair

logger = get_logger(__name__)


class SimilarityMatrix:
    """
    Read-only symmetric n x n table of similarity ratios with a zero diagonal.

    ``values`` holds the ratios clamped to ``[0, 1]``. When the unclamped
    ratios are supplied as ``raw`` they are kept alongside for ordering
    pairs that saturate at 1.0; otherwise ``raw`` mirrors ``values``.
    """

    __slots__ = ("_values", "_raw")

    def __init__(self, values, raw=None):
        values = self._frozen(values)
        raw = values if raw is None else self._frozen(raw)
        if raw.shape != values.shape:
            raise ValueError(f"raw scores shape {raw.shape} does not match {values.shape}")
        self._values = values
        self._raw = raw

    @staticmethod
    def _frozen(values) -> np.ndarray:
        array = np.array(values, dtype=float)
        if array.ndim != 2 or array.shape[0] != array.shape[1]:
            raise ValueError(f"similarity matrix must be square, got shape {array.shape}")
        array.setflags(write=False)
        return array

    @property
    def size(self) -> int:
        return self._values.shape[0]

    @property
    def values(self) -> np.ndarray:
        return self._values

    @property
    def raw_values(self) -> np.ndarray:
        return self._raw

    def __len__(self) -> int:
        return self.size

    def __getitem__(self, key: Tuple[int, int]) -> float:
        i, j = key
        return float(self._values[i, j])

    def score(self, pair: DocumentPair) -> float:
        return float(self._values[pair.left, pair.right])

    def raw_score(self, pair: DocumentPair) -> float:
        return float(self._raw[pair.left, pair.right])

    def to_list(self) -> List[List[float]]:
        return self._values.tolist()


def _pairs(n: int) -> Iterator[Tuple[int, int]]:
    for i in range(n):
        for j in range(i + 1, n):
            yield i, j


def build_similarity_matrix(
    documents: Sequence[str],
    min_length: int,
    max_workers: int = 1,
) -> SimilarityMatrix:
    """
    Score every unordered document pair once and mirror it.

    With ``max_workers > 1`` pairs are scored on a thread pool; each task
    returns its own ``(i, j, value)`` and only this function writes cells,
    so the result equals the sequential run. Reported ratios are clamped
    to 1.0; the unclamped ratios are kept for ranking.

    Raises:
        EmptyInputError: no documents were given.
        InvalidParameterError: ``min_length`` or ``max_workers`` is not positive.
    """
    require_positive("min_length", min_length)
    require_positive("max_workers", max_workers)
    if not documents:
        raise EmptyInputError("At least one document is required", operation="build_similarity_matrix")

    n = len(documents)
    raw = np.zeros((n, n), dtype=float)

    def score(pair: Tuple[int, int]) -> Tuple[int, int, float]:
        i, j = pair
        return i, j, raw_similarity_ratio(documents[i], documents[j], min_length)

    if max_workers == 1 or n < 3:
        for i, j, value in map(score, _pairs(n)):
            raw[i, j] = value
            raw[j, i] = value
    else:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            for i, j, value in executor.map(score, _pairs(n)):
                raw[i, j] = value
                raw[j, i] = value

    logger.info(
        LogEvent.MATRIX_BUILT,
        documents=n,
        pairs=n * (n - 1) // 2,
        min_length=min_length,
        workers=max_workers,
    )
    return SimilarityMatrix(np.minimum(raw, 1.0), raw)
