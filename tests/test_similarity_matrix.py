"""Tests for the all-pairs similarity matrix and pair ranking."""

import itertools

import numpy as np
import pytest

from docsim.core.errors import EmptyInputError, InvalidParameterError
from docsim.services.ranking import all_pairs, rank_pairs
from docsim.services.similarity_matrix import SimilarityMatrix, build_similarity_matrix
from docsim.services.types import DocumentPair


class TestBuildSimilarityMatrix:
    def test_small_corpus_values(self, small_corpus):
        matrix = build_similarity_matrix(small_corpus, 2)

        expected = [
            [0.0, 1.0, 1.0],
            [1.0, 0.0, 0.4],
            [1.0, 0.4, 0.0],
        ]
        assert np.allclose(matrix.values, expected)
        assert matrix[1, 2] == pytest.approx(0.4)

    def test_symmetric_with_zero_diagonal(self, five_documents):
        matrix = build_similarity_matrix(five_documents, 3)

        assert matrix.size == 5
        assert np.array_equal(matrix.values, matrix.values.T)
        assert np.all(np.diag(matrix.values) == 0.0)
        assert np.all((matrix.values >= 0.0) & (matrix.values <= 1.0))

    def test_identical_documents_do_not_score_diagonal(self):
        matrix = build_similarity_matrix(["same text", "same text"], 2)

        assert matrix[0, 0] == 0.0
        assert matrix[0, 1] == 1.0

    def test_single_document(self):
        matrix = build_similarity_matrix(["only one"], 5)

        assert matrix.to_list() == [[0.0]]

    def test_parallel_matches_sequential(self, five_documents):
        sequential = build_similarity_matrix(five_documents, 3)
        parallel = build_similarity_matrix(five_documents, 3, max_workers=4)

        assert np.array_equal(sequential.values, parallel.values)

    def test_read_only(self, small_corpus):
        matrix = build_similarity_matrix(small_corpus, 2)

        with pytest.raises(ValueError):
            matrix.values[0, 1] = 0.5

    def test_no_documents(self):
        with pytest.raises(EmptyInputError) as exc_info:
            build_similarity_matrix([], 5)

        assert exc_info.value.details["operation"] == "build_similarity_matrix"

    @pytest.mark.parametrize("kwargs", [{"min_length": 0}, {"min_length": 5, "max_workers": 0}])
    def test_invalid_parameters(self, small_corpus, kwargs):
        with pytest.raises(InvalidParameterError):
            build_similarity_matrix(small_corpus, **kwargs)

    def test_rejects_non_square_input(self):
        with pytest.raises(ValueError):
            SimilarityMatrix(np.zeros((2, 3)))

    def test_accepts_nested_lists(self):
        matrix = SimilarityMatrix([[0.0, 0.5], [0.5, 0.0]])

        assert matrix[0, 1] == 0.5
        assert matrix.raw_score(DocumentPair(0, 1)) == 0.5

    def test_rejects_non_square_list(self):
        with pytest.raises(ValueError):
            SimilarityMatrix([[0.0, 1.0, 2.0]])

    def test_rejects_mismatched_raw_scores(self):
        with pytest.raises(ValueError):
            SimilarityMatrix(np.zeros((2, 2)), np.zeros((3, 3)))

    def test_scores_clamped_raw_kept(self):
        matrix = build_similarity_matrix(["abcdefghij", "abcdefghij"], 5)

        assert matrix[0, 1] == 1.0
        assert matrix.raw_score(DocumentPair(0, 1)) == pytest.approx(4.5)


class TestAllPairs:
    def test_five_documents_give_ten_pairs(self):
        pairs = all_pairs(5)

        assert len(pairs) == 10
        assert len(set(pairs)) == 10
        assert all(pair.left < pair.right for pair in pairs)
        assert pairs == sorted(pairs)

    @pytest.mark.parametrize("n", [0, 1])
    def test_no_pairs_for_tiny_corpus(self, n):
        assert all_pairs(n) == []

    def test_pair_requires_ordered_indices(self):
        with pytest.raises(ValueError):
            DocumentPair(2, 1)
        with pytest.raises(ValueError):
            DocumentPair(1, 1)


class TestRankPairs:
    def test_sorted_descending_with_stable_ties(self, small_corpus):
        matrix = build_similarity_matrix(small_corpus, 2)

        ranked = rank_pairs(matrix)

        # (0, 1) and (0, 2) tie at 1.0 and keep lexicographic order
        assert [pair.as_tuple() for pair in ranked] == [(0, 1), (0, 2), (1, 2)]

    def test_permutation_and_non_increasing(self, five_documents):
        matrix = build_similarity_matrix(five_documents, 3)
        pairs = all_pairs(len(five_documents))

        ranked = rank_pairs(matrix, pairs)

        assert sorted(ranked) == pairs
        scores = [matrix.score(pair) for pair in ranked]
        assert all(a >= b for a, b in itertools.pairwise(scores))

    def test_all_equal_scores_keep_input_order(self):
        matrix = SimilarityMatrix(np.zeros((4, 4)))
        pairs = list(reversed(all_pairs(4)))

        assert rank_pairs(matrix, pairs) == pairs

    def test_most_similar_pair_first(self, five_documents):
        matrix = build_similarity_matrix(five_documents, 3)

        ranked = rank_pairs(matrix)

        assert ranked[0].as_tuple() in {(0, 1), (2, 4)}
        assert matrix.score(ranked[0]) == matrix.values.max()

    def test_saturated_ties_broken_by_raw_ratio(self):
        base = "".join(chr(0x4E00 + i) for i in range(200))
        partial = base[:40] + "".join(chr(0xAC00 + i) for i in range(160))
        duplicate = base
        matrix = build_similarity_matrix([base, partial, duplicate], 5)

        ranked = rank_pairs(matrix)

        assert [matrix.score(pair) for pair in ranked] == [1.0, 1.0, 1.0]
        assert [pair.as_tuple() for pair in ranked] == [(0, 2), (0, 1), (1, 2)]
