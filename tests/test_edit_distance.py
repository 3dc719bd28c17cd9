import itertools

import pytest

from docsim.services.edit_distance import edit_distance


@pytest.mark.parametrize(
    "text_a,text_b,expected",
    [
        ("kitten", "sitting", 3),
        ("flaw", "lawn", 2),
        ("intention", "execution", 5),
        ("abcde", "abcxy", 2),
        ("", "", 0),
        ("", "abc", 3),
        ("abc", "", 3),
        ("a", "b", 1),
    ],
)
def test_known_distances(text_a, text_b, expected):
    assert edit_distance(text_a, text_b) == expected


def test_identity_is_zero(five_documents):
    for text in five_documents:
        assert edit_distance(text, text) == 0


def test_symmetric_and_bounded(five_documents):
    for a, b in itertools.combinations(five_documents, 2):
        distance = edit_distance(a, b)

        assert distance == edit_distance(b, a)
        assert 0 <= distance <= max(len(a), len(b))


def test_triangle_inequality():
    texts = ["kitten", "sitting", "mitten", "", "knitting", "sit"]
    for a, b, c in itertools.product(texts, repeat=3):
        assert edit_distance(a, c) <= edit_distance(a, b) + edit_distance(b, c)
