"""Ordering of document pairs by similarity."""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from docsim.services.similarity_matrix import SimilarityMatrix
from docsim.services.types import DocumentPair


def all_pairs(n: int) -> List[DocumentPair]:
    """Every unordered pair of ``n`` documents in lexicographic order."""
    return [DocumentPair(i, j) for i in range(n) for j in range(i + 1, n)]


def rank_pairs(
    matrix: SimilarityMatrix,
    pairs: Optional[Sequence[DocumentPair]] = None,
) -> List[DocumentPair]:
    """
    Sort pairs by matrix value, highest first.

    Pairs whose clamped ratio ties (typically at 1.0) are ordered by the
    unclamped ratio. ``sorted`` is stable, so pairs equal on both keep their
    input order, which is lexicographic when ``pairs`` comes from ``all_pairs``.
    """
    if pairs is None:
        pairs = all_pairs(matrix.size)

    def key(pair: DocumentPair) -> Tuple[float, float]:
        return matrix.score(pair), matrix.raw_score(pair)

    return sorted(pairs, key=key, reverse=True)
