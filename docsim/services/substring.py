"""Common substring discovery and the substring-based similarity ratio."""
from __future__ import annotations

from typing import Set

from docsim.core.errors import require_positive


def find_common_substrings(text_a: str, text_b: str, min_length: int) -> Set[str]:
    """
    Return every distinct substring of at least ``min_length`` characters
    that occurs contiguously in both texts.

    Classic longest-common-suffix table: ``dp[i][j]`` is the length of the
    common run ending at ``text_a[i-1]`` and ``text_b[j-1]``. Each time a run
    reaches the threshold, the run so far is recorded, so a run of length
    ``min_length + 2`` contributes three substrings sharing a start offset.
    Only the previous row is needed, so memory stays O(|B|).

    Raises:
        InvalidParameterError: ``min_length`` is not a positive integer.
    """
    require_positive("min_length", min_length)

    substrings: Set[str] = set()
    if not text_a or not text_b:
        return substrings

    n = len(text_b)
    previous = [0] * (n + 1)
    for i in range(1, len(text_a) + 1):
        current = [0] * (n + 1)
        char_a = text_a[i - 1]
        for j in range(1, n + 1):
            if char_a == text_b[j - 1]:
                run = previous[j - 1] + 1
                current[j] = run
                if run >= min_length:
                    substrings.add(text_a[i - run:i])
        previous = current

    return substrings


def raw_similarity_ratio(text_a: str, text_b: str, min_length: int) -> float:
    """Summed length of the common substrings over the longer text length, unclamped."""
    longest = max(len(text_a), len(text_b))
    if longest == 0:
        # two empty texts share nothing measurable
        require_positive("min_length", min_length)
        return 0.0

    common = find_common_substrings(text_a, text_b, min_length)
    return sum(len(s) for s in common) / longest


def similarity_ratio(text_a: str, text_b: str, min_length: int) -> float:
    """
    Substring-overlap similarity in ``[0, 1]``.

    Each distinct common substring counts once regardless of how often it
    occurs, so this is a lower bound on overlap rather than exact coverage.
    Extension prefixes of long runs are all counted, which can push the raw
    value above 1.0; the result is clamped to keep the ratio in range.
    """
    return min(1.0, raw_similarity_ratio(text_a, text_b, min_length))
